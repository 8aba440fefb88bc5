from pydantic import ConfigDict, Field
from typing_extensions import Literal

from .base import BaseValue


class MonolingualValue(BaseValue):
    kind: Literal["monolingual"] = Field(default="monolingual", frozen=True)
    value: str
    datatype_uri: str = "http://wikiba.se/ontology#MonolingualText"
    language: str

    model_config = ConfigDict(frozen=True)
