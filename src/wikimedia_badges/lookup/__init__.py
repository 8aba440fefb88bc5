from .base import EntityLookup
from .in_memory import InMemoryEntityLookup
from .entity_data import EntityDataLookup

__all__ = ["EntityLookup", "InMemoryEntityLookup", "EntityDataLookup"]
