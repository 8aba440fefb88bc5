import logging

from wikimedia_badges.parsers import parse_entity


def test_parse_entity_basic():
    """Test parsing basic entity"""
    entity_json = {
        "id": "Q42",
        "type": "item",
        "labels": {"en": {"language": "en", "value": "Douglas Adams"}},
        "claims": {},
    }

    entity = parse_entity(entity_json)
    assert entity.id == "Q42"
    assert entity.type == "item"
    assert entity.labels == {"en": "Douglas Adams"}
    assert len(entity.statements) == 0
    assert entity.sitelinks is None


def test_parse_entity_keeps_statement_order():
    """Test that statements keep their declaration order"""
    entity_json = {
        "id": "Q727",
        "type": "item",
        "claims": {
            "P373": [
                {"mainsnak": {"snaktype": "somevalue", "property": "P373"}, "rank": "normal"},
                {
                    "mainsnak": {
                        "snaktype": "value",
                        "property": "P373",
                        "datatype": "string",
                        "datavalue": {"value": "Amsterdam", "type": "string"},
                    },
                    "rank": "normal",
                },
            ]
        },
        "sitelinks": {"enwiki": {"site": "enwiki", "title": "Amsterdam"}},
    }

    entity = parse_entity(entity_json)
    kinds = [s.value.kind for s in entity.best_statements("P373")]
    assert kinds == ["somevalue", "string"]
    assert entity.sitelinks["enwiki"]["title"] == "Amsterdam"


def test_parse_mediainfo_statements():
    """Test that mediainfo entities use the statements key"""
    entity_json = {
        "id": "M1",
        "type": "mediainfo",
        "statements": {
            "P180": [
                {
                    "mainsnak": {
                        "snaktype": "value",
                        "property": "P180",
                        "datatype": "wikibase-item",
                        "datavalue": {
                            "value": {"entity-type": "item", "id": "Q727"},
                            "type": "wikibase-entityid",
                        },
                    }
                }
            ]
        },
    }

    entity = parse_entity(entity_json)
    assert entity.type == "mediainfo"
    assert entity.statements[0].value.value == "Q727"


def test_parse_entity_skips_unsupported_statements(caplog):
    """Test that unsupported statements are skipped with a warning"""
    entity_json = {
        "id": "Q1",
        "claims": {
            "P625": [
                {
                    "mainsnak": {
                        "snaktype": "value",
                        "property": "P625",
                        "datatype": "globe-coordinate",
                        "datavalue": {"value": {}, "type": "globecoordinate"},
                    }
                }
            ]
        },
    }

    with caplog.at_level(logging.WARNING):
        entity = parse_entity(entity_json)

    assert entity.statements == []
    assert any("P625" in record.getMessage() for record in caplog.records)


def test_parse_entity_skips_entity_value_without_id(caplog):
    """Test that an id-less item value is skipped rather than invented"""
    entity_json = {
        "id": "Q1",
        "claims": {
            "P31": [
                {
                    "mainsnak": {
                        "snaktype": "value",
                        "property": "P31",
                        "datatype": "wikibase-item",
                        "datavalue": {"value": {"entity-type": "item"}, "type": "wikibase-entityid"},
                    }
                }
            ]
        },
    }

    with caplog.at_level(logging.WARNING):
        entity = parse_entity(entity_json)

    assert entity.statements == []
    assert any("P31" in record.getMessage() for record in caplog.records)
