from abc import ABC, abstractmethod
from typing import Optional

from wikimedia_badges.models.internal_representation.entity import Entity


class EntityLookup(ABC):
    @abstractmethod
    def get_entity(self, entity_id: str) -> Optional[Entity]:
        """Return the entity, or None if it does not exist.

        Raises EntityLookupError when the entity could not be loaded.
        """

    def has_entity(self, entity_id: str) -> bool:
        return self.get_entity(entity_id) is not None
