from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from .entity_types import EntityKind
from .statements import Statement, best_statements


class Entity(BaseModel):
    id: str
    type: EntityKind = EntityKind.ITEM
    labels: dict[str, str] = Field(default_factory=dict)
    statements: list[Statement] = Field(default_factory=list)
    sitelinks: Optional[dict[str, dict[str, Any]]] = None

    model_config = ConfigDict(frozen=True)

    def statements_for(self, property_id: str) -> list[Statement]:
        return [s for s in self.statements if s.property == property_id]

    def best_statements(self, property_id: str) -> list[Statement]:
        return best_statements(self.statements_for(property_id))
