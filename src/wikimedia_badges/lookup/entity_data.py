import logging
from typing import Any, Optional

import requests

from wikimedia_badges.errors import EntityLookupError
from wikimedia_badges.lookup.base import EntityLookup
from wikimedia_badges.models.internal_representation.entity import Entity
from wikimedia_badges.parsers import parse_entity

logger = logging.getLogger(__name__)


class EntityDataLookup(EntityLookup):
    """Loads entities from a Special:EntityData JSON endpoint."""

    def __init__(
        self,
        base_url: str = "https://www.wikidata.org/wiki/Special:EntityData",
        user_agent: str = "WikimediaBadges/0.1",
        timeout: int = 10,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings) -> "EntityDataLookup":
        return cls(
            base_url=settings.entity_data_url,
            user_agent=settings.user_agent,
            timeout=settings.request_timeout,
        )

    def data_uri(self, entity_id: str) -> str:
        return f"{self.base_url}/{entity_id}.json"

    def get_entity(self, entity_id: str) -> Optional[Entity]:
        url = self.data_uri(entity_id)
        logger.debug(f"Fetching {url}")

        try:
            response = self.session.get(
                url, timeout=self.timeout, headers={"User-Agent": self.user_agent}
            )
        except requests.RequestException as e:
            raise EntityLookupError(entity_id, f"Request for {entity_id} failed: {e}") from e

        if response.status_code == 404:
            return None

        try:
            response.raise_for_status()
            data = response.json()
        except requests.HTTPError as e:
            raise EntityLookupError(entity_id, f"Request for {entity_id} failed: {e}") from e
        except ValueError as e:
            raise EntityLookupError(entity_id, f"Malformed JSON for {entity_id}: {e}") from e

        entity_json = self._unwrap(entity_id, data)
        try:
            return parse_entity(entity_json)
        except (ValueError, TypeError, AttributeError, KeyError) as e:
            raise EntityLookupError(entity_id, f"Could not parse {entity_id}: {e}") from e

    @staticmethod
    def _unwrap(entity_id: str, data: Any) -> dict[str, Any]:
        entities = data.get("entities") if isinstance(data, dict) else None
        if not isinstance(entities, dict) or not entities:
            raise EntityLookupError(entity_id, f"No entities in response for {entity_id}")

        if entity_id in entities:
            return entities[entity_id]

        # A redirected id is answered with the target entity under its own key.
        target_id, entity_json = next(iter(entities.items()))
        logger.debug(f"{entity_id} redirects to {target_id}")
        return entity_json
