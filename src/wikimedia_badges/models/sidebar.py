from typing import Any, MutableMapping

from pydantic import BaseModel, ConfigDict, Field

# group key -> site id -> link record
Sidebar = MutableMapping[Any, Any]


class OtherProjectLink(BaseModel):
    msg: str
    css_class: str = Field(alias="class")
    href: str
    hreflang: str

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_dict(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)
