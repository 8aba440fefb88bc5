from typing import Optional

from pydantic import ConfigDict, Field, field_validator
from typing_extensions import Literal

from .base import BaseValue


class QuantityValue(BaseValue):
    kind: Literal["quantity"] = Field(default="quantity", frozen=True)
    value: str
    datatype_uri: str = "http://wikiba.se/ontology#Quantity"
    unit: str = "1"
    upper_bound: Optional[str] = None
    lower_bound: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("value", "upper_bound", "lower_bound")
    @classmethod
    def validate_numeric(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            try:
                float(v)
            except ValueError:
                raise ValueError(f"Value must be a valid number, got: {v}")
        return v
