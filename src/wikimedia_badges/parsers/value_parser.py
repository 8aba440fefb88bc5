from typing import Any

from wikimedia_badges.models.internal_representation.values import (
    CommonsMediaValue,
    EntityValue,
    ExternalIDValue,
    MonolingualValue,
    NoValue,
    QuantityValue,
    SomeValue,
    StringValue,
    URLValue,
)
from wikimedia_badges.parsers.json_fields import JsonField


def parse_string_value(datavalue: dict[str, Any]) -> StringValue:
    return StringValue(value=datavalue.get("value", ""))


def parse_external_id_value(datavalue: dict[str, Any]) -> ExternalIDValue:
    return ExternalIDValue(value=datavalue.get("value", ""))


def parse_commons_media_value(datavalue: dict[str, Any]) -> CommonsMediaValue:
    return CommonsMediaValue(value=datavalue.get("value", ""))


def parse_url_value(datavalue: dict[str, Any]) -> URLValue:
    return URLValue(value=datavalue.get("value", ""))


def parse_entity_value(datavalue: dict[str, Any]) -> EntityValue:
    value = datavalue.get("value", {})
    entity_id = value.get("id")
    if not entity_id:
        numeric_id = value.get("numeric-id")
        if numeric_id is None:
            raise ValueError(f"Entity value without id: {value}")
        entity_id = f"Q{numeric_id}"
    return EntityValue(value=entity_id)


def parse_quantity_value(datavalue: dict[str, Any]) -> QuantityValue:
    value = datavalue.get("value", {})
    return QuantityValue(
        value=value.get("amount", "0"),
        unit=value.get("unit", "1"),
        upper_bound=value.get("upperBound"),
        lower_bound=value.get("lowerBound"),
    )


def parse_monolingual_value(datavalue: dict[str, Any]) -> MonolingualValue:
    value = datavalue.get("value", {})
    return MonolingualValue(value=value.get("text", ""), language=value.get("language", ""))


# Keyed by property datatype first, then by data value type.
PARSERS = {
    "string": parse_string_value,
    "external-id": parse_external_id_value,
    "commonsMedia": parse_commons_media_value,
    "url": parse_url_value,
    "wikibase-item": parse_entity_value,
    "wikibase-entityid": parse_entity_value,
    "quantity": parse_quantity_value,
    "monolingualtext": parse_monolingual_value,
}


def parse_value(snak_json: dict[str, Any]):
    snaktype = snak_json.get(JsonField.SNAKTYPE.value)

    if snaktype == "novalue":
        return NoValue()

    if snaktype == "somevalue":
        return SomeValue()

    if snaktype != JsonField.VALUE.value:
        raise ValueError(f"Only value snaks are supported, got snaktype: {snaktype}")

    datavalue = snak_json.get(JsonField.DATAVALUE.value, {})
    datatype = snak_json.get(JsonField.DATATYPE.value)
    datavalue_type = datavalue.get("type", datatype)

    parser = PARSERS.get(str(datatype)) or PARSERS.get(str(datavalue_type))
    if not parser:
        raise ValueError(f"Unsupported value type: {datavalue_type}, datatype: {datatype}")
    return parser(datavalue)
