from typing import Any

from wikimedia_badges.models.internal_representation.ranks import Rank
from wikimedia_badges.models.internal_representation.statements import Statement
from wikimedia_badges.parsers.json_fields import JsonField
from wikimedia_badges.parsers.value_parser import parse_value


def parse_statement(statement_json: dict[str, Any]) -> Statement:
    mainsnak = statement_json.get(JsonField.MAINSNAK.value, {})
    rank = statement_json.get(JsonField.RANK.value, "normal")
    statement_id = statement_json.get(JsonField.ID.value, "")

    return Statement(
        property=mainsnak.get(JsonField.PROPERTY.value, ""),
        value=parse_value(mainsnak),
        rank=Rank(rank),
        statement_id=statement_id,
    )
