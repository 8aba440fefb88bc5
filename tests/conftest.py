import logging
import os

import pytest

from wikimedia_badges.errors import EntityLookupError
from wikimedia_badges.lookup import InMemoryEntityLookup
from wikimedia_badges.models.internal_representation import Entity, Rank, Statement
from wikimedia_badges.models.internal_representation.values import (
    QuantityValue,
    SomeValue,
    StringValue,
)


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """Configure logging for all test sessions"""
    log_level_str = os.getenv("TEST_LOG_LEVEL", "INFO")
    log_level = logging.DEBUG if log_level_str == "DEBUG" else logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
        force=True,
    )


@pytest.fixture
def wikiquote_link() -> dict[str, str]:
    return {
        "msg": "wikibase-otherprojects-wikiquote",
        "class": "wb-otherproject-link wb-otherproject-wikiquote",
        "href": "https://en.wikiquote.org/wiki/Ams",
        "hreflang": "en",
    }


@pytest.fixture
def old_commons_link() -> dict[str, str]:
    return {
        "msg": "wikibase-otherprojects-commons",
        "class": "wb-otherproject-link wb-otherproject-commons",
        "href": "https://commons.wikimedia.org/wiki/Amsterdam",
        "hreflang": "en",
    }


@pytest.fixture
def new_commons_link(old_commons_link) -> dict[str, str]:
    return {
        **old_commons_link,
        "href": "https://commons.wikimedia.org/wiki/Category:Amsterdam",
    }


@pytest.fixture
def entity_lookup() -> InMemoryEntityLookup:
    """Q123 has a P373 value followed by a somevalue, Q2013 has no statements,
    Q503 fails to load and Q404 does not exist."""
    q123 = Entity(
        id="Q123",
        statements=[
            Statement(property="P373", value=StringValue(value="Amsterdam")),
            Statement(property="P373", value=SomeValue()),
        ],
    )
    lookup = InMemoryEntityLookup(q123, Entity(id="Q2013"))
    lookup.add_exception(EntityLookupError("Q503"))
    return lookup


@pytest.fixture
def quantity_entity() -> Entity:
    return Entity(
        id="Q123",
        statements=[Statement(property="P12", value=QuantityValue(value="1"))],
    )


@pytest.fixture
def ranked_entity() -> Entity:
    return Entity(
        id="Q727",
        statements=[
            Statement(
                property="P373",
                value=StringValue(value="Deprecated Amsterdam"),
                rank=Rank.DEPRECATED,
            ),
            Statement(property="P373", value=StringValue(value="Amsterdam")),
            Statement(
                property="P373",
                value=StringValue(value="Amsterdam (city)"),
                rank=Rank.PREFERRED,
            ),
            Statement(
                property="P373",
                value=StringValue(value="Amsterdam (second)"),
                rank=Rank.PREFERRED,
            ),
        ],
    )
