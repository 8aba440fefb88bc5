from enum import Enum


class ValueKind(str, Enum):
    ENTITY = "entity"
    STRING = "string"
    QUANTITY = "quantity"
    MONOLINGUAL = "monolingual"
    EXTERNAL_ID = "external_id"
    COMMONS_MEDIA = "commons_media"
    URL = "url"
    NOVALUE = "novalue"
    SOMEVALUE = "somevalue"


# Kinds whose data value is a bare string in the Wikibase data model.
STRING_VALUE_KINDS = frozenset(
    kind.value
    for kind in (
        ValueKind.STRING,
        ValueKind.EXTERNAL_ID,
        ValueKind.COMMONS_MEDIA,
        ValueKind.URL,
    )
)
