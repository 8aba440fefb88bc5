import logging

from typing import Any

from wikimedia_badges.models.internal_representation.entity import Entity
from wikimedia_badges.models.internal_representation.entity_types import EntityKind
from wikimedia_badges.models.internal_representation.statements import Statement
from wikimedia_badges.parsers.json_fields import JsonField
from wikimedia_badges.parsers.statement_parser import parse_statement


logger = logging.getLogger(__name__)


def parse_entity(entity_json: dict[str, Any]) -> Entity:
    entity_id = entity_json.get(JsonField.ID.value, "")
    entity_type = EntityKind(entity_json.get(JsonField.TYPE.value, EntityKind.ITEM.value))

    labels_json = entity_json.get(JsonField.LABELS.value, {})
    # Items and properties use "claims", mediainfo entities use "statements".
    claims_json = entity_json.get(JsonField.CLAIMS.value) or entity_json.get(
        JsonField.STATEMENTS.value, {}
    )
    sitelinks_json = entity_json.get(JsonField.SITELINKS.value, {})

    return Entity(
        id=entity_id,
        type=entity_type,
        labels=_parse_labels(labels_json),
        statements=_parse_statements(claims_json),
        sitelinks=sitelinks_json if sitelinks_json else None,
    )


def _parse_labels(labels_json: dict[str, dict[str, str]]) -> dict[str, str]:
    return {lang: label_data.get("value", "") for lang, label_data in labels_json.items()}


def _parse_statements(claims_json: dict[str, list[dict[str, Any]]]) -> list[Statement]:
    statements = []
    for property_id, claim_list in claims_json.items():
        for claim_json in claim_list:
            try:
                statements.append(parse_statement(claim_json))
            except (ValueError, TypeError, AttributeError) as e:
                logger.warning(f"Failed to parse statement for property {property_id}: {e}")
                continue

    return statements
