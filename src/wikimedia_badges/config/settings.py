import logging
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wikimedia_badges.models.internal_representation.identifiers import (
    PROPERTY_ID_PATTERN,
)

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    commons_category_property: Optional[str] = "P373"
    entity_data_url: str = "https://www.wikidata.org/wiki/Special:EntityData"
    user_agent: str = "WikimediaBadges/0.1 (https://github.com/wmde/WikimediaBadges)"
    request_timeout: int = 10
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="WIKIMEDIA_BADGES_", env_file=".env")

    @field_validator("commons_category_property", mode="before")
    @classmethod
    def validate_property(cls, v):
        if v is None or v == "":
            return None
        if not isinstance(v, str) or not PROPERTY_ID_PATTERN.fullmatch(v):
            raise ValueError(f"Not a property id: {v!r}")
        return v

    @field_validator("entity_data_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


# noinspection PyArgumentList
settings = Settings()

logger.debug("=== Settings Debug ===")
logger.debug(f"Commons category property: {settings.commons_category_property}")
logger.debug(f"Entity data URL: {settings.entity_data_url}")
logger.debug(f"Request timeout: {settings.request_timeout}")
logger.debug("=== End Settings Debug ===")
