from wikimedia_badges.parsers.entity_parser import parse_entity
from wikimedia_badges.parsers.statement_parser import parse_statement
from wikimedia_badges.parsers.value_parser import parse_value

__all__ = [
    "parse_entity",
    "parse_statement",
    "parse_value",
]
