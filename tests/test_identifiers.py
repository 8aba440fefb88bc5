import pytest
from pydantic import ValidationError

from wikimedia_badges.models.internal_representation import PropertyId


@pytest.mark.parametrize("serialization", ["P1", "P373", "P1234567890"])
def test_valid_property_ids(serialization):
    """Test well-formed property ids"""
    assert str(PropertyId(serialization=serialization)) == serialization


@pytest.mark.parametrize("serialization", ["", "P", "P0", "P012", "Q42", "p31", "P31 ", "P373\n", "P12345678901"])
def test_invalid_property_ids(serialization):
    """Test malformed property ids are rejected"""
    with pytest.raises(ValidationError):
        PropertyId(serialization=serialization)


def test_property_id_is_strict():
    """Test that non-string input is not coerced"""
    with pytest.raises(ValidationError):
        PropertyId(serialization=373)
