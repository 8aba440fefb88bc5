from typing import Optional

from wikimedia_badges.errors import EntityLookupError
from wikimedia_badges.lookup.base import EntityLookup
from wikimedia_badges.models.internal_representation.entity import Entity


class InMemoryEntityLookup(EntityLookup):
    """Entity lookup backed by a dict, for tests and fixtures."""

    def __init__(self, *entities: Entity):
        self._entities: dict[str, Entity] = {}
        self._exceptions: dict[str, EntityLookupError] = {}
        for entity in entities:
            self.add_entity(entity)

    def add_entity(self, entity: Entity) -> None:
        self._entities[entity.id] = entity

    def add_exception(self, exception: EntityLookupError) -> None:
        """Make lookups of exception.entity_id raise the given exception."""
        self._exceptions[exception.entity_id] = exception

    def get_entity(self, entity_id: str) -> Optional[Entity]:
        if entity_id in self._exceptions:
            raise self._exceptions[entity_id]
        return self._entities.get(entity_id)
