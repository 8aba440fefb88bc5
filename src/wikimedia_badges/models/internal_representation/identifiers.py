import re

from pydantic import BaseModel, ConfigDict, field_validator

PROPERTY_ID_PATTERN = re.compile(r"P[1-9]\d{0,9}")


class PropertyId(BaseModel):
    serialization: str

    model_config = ConfigDict(frozen=True, strict=True)

    @field_validator("serialization")
    @classmethod
    def validate_serialization(cls, v: str) -> str:
        if not PROPERTY_ID_PATTERN.fullmatch(v):
            raise ValueError(f"Invalid property id: {v}")
        return v

    def __str__(self) -> str:
        return self.serialization
