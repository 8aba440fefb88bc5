import logging
from typing import Any, Optional

from pydantic import ValidationError

from wikimedia_badges.errors import (
    ConfigurationError,
    EntityLookupError,
    InvalidValueKindError,
)
from wikimedia_badges.lookup.base import EntityLookup
from wikimedia_badges.models.internal_representation.identifiers import PropertyId
from wikimedia_badges.models.internal_representation.value_kinds import (
    STRING_VALUE_KINDS,
)
from wikimedia_badges.models.sidebar import OtherProjectLink, Sidebar
from wikimedia_badges.sidebar.commons import CommonsURIGenerator

logger = logging.getLogger(__name__)

COMMONS_GROUP = "commons"
COMMONS_SITE_ID = "commonswiki"


class SidebarAmender:
    """Points the Commons entry of the other projects sidebar at a category.

    The category name is read from one string-valued property of the
    entity linked to the page (P373, "Commons category", on Wikidata).
    Only sidebar["commons"]["commonswiki"] is ever written. Lookup
    failures and unusable values are logged and leave the sidebar alone.
    """

    def __init__(
        self,
        entity_lookup: EntityLookup,
        property_id: Any,
        uri_generator: Optional[CommonsURIGenerator] = None,
    ):
        self.entity_lookup = entity_lookup
        self.property_id = self._parse_property_id(property_id)
        self.uri_generator = uri_generator or CommonsURIGenerator()

    @classmethod
    def from_settings(
        cls, settings, entity_lookup: Optional[EntityLookup] = None
    ) -> "SidebarAmender":
        if entity_lookup is None:
            from wikimedia_badges.lookup.entity_data import EntityDataLookup

            entity_lookup = EntityDataLookup.from_settings(settings)
        return cls(entity_lookup, settings.commons_category_property)

    @staticmethod
    def _parse_property_id(property_id: Any) -> Optional[PropertyId]:
        if property_id is None or property_id == "":
            return None
        if not isinstance(property_id, str):
            raise ConfigurationError(
                f"Property id must be a string or None, got {type(property_id).__name__}"
            )
        try:
            return PropertyId(serialization=property_id)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid property id {property_id!r}") from e

    @property
    def enabled(self) -> bool:
        return self.property_id is not None

    def amend(self, entity_id: str, sidebar: Sidebar) -> None:
        if not entity_id:
            raise ValueError("entity_id is required")
        if self.property_id is None:
            return

        category_name = self._get_commons_category_name(entity_id)
        if category_name is None:
            return

        self._set_commons_link(category_name, sidebar)

    def _get_commons_category_name(self, entity_id: str) -> Optional[str]:
        try:
            entity = self.entity_lookup.get_entity(entity_id)
        except EntityLookupError as e:
            logger.warning(f"Failed to load entity {entity_id}: {e}")
            return None

        if entity is None:
            logger.debug(f"Entity {entity_id} not found")
            return None

        statements = entity.best_statements(str(self.property_id))
        if not statements:
            return None

        try:
            category_name = self._string_value(statements[0].value)
        except InvalidValueKindError as e:
            logger.warning(f"Invalid value on {entity_id}: {e}")
            return None

        if not category_name.strip():
            logger.debug(f"Empty commons category on {entity_id}")
            return None
        return category_name

    def _string_value(self, value) -> str:
        if value.kind not in STRING_VALUE_KINDS:
            raise InvalidValueKindError(str(self.property_id), value.kind)
        return value.value

    def _set_commons_link(self, category_name: str, sidebar: Sidebar) -> None:
        link = OtherProjectLink(
            msg="wikibase-otherprojects-commons",
            css_class="wb-otherproject-link wb-otherproject-commons",
            href=self.uri_generator.category_uri(category_name),
            hreflang="en",
        )
        sidebar.setdefault(COMMONS_GROUP, {})[COMMONS_SITE_ID] = link.to_dict()
