from .ranks import Rank
from .entity_types import EntityKind
from .identifiers import PropertyId
from .values import Value
from .statements import Statement
from .entity import Entity

__all__ = [
    "Rank",
    "EntityKind",
    "PropertyId",
    "Value",
    "Statement",
    "Entity",
]
