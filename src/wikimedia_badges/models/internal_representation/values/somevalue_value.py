from pydantic import ConfigDict, Field
from typing_extensions import Literal

from .base import BaseValue


class SomeValue(BaseValue):
    kind: Literal["somevalue"] = Field(default="somevalue", frozen=True)
    value: None = None
    datatype_uri: str = "http://wikiba.se/ontology#SomeValue"

    model_config = ConfigDict(frozen=True)
