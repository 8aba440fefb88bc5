from typing import Any

from pydantic import BaseModel, ConfigDict


class BaseValue(BaseModel):
    kind: str
    value: Any
    datatype_uri: str

    model_config = ConfigDict(frozen=True)
