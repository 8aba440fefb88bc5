from enum import Enum


class JsonField(str, Enum):
    ID = "id"
    TYPE = "type"
    LABELS = "labels"
    CLAIMS = "claims"
    STATEMENTS = "statements"
    SITELINKS = "sitelinks"
    MAINSNAK = "mainsnak"
    PROPERTY = "property"
    RANK = "rank"
    SNAKTYPE = "snaktype"
    DATAVALUE = "datavalue"
    DATATYPE = "datatype"
    VALUE = "value"
