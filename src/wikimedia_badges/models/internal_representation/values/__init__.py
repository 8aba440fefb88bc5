from typing import Annotated, Union

from pydantic import Field

from .base import BaseValue
from .entity_value import EntityValue
from .string_value import StringValue
from .quantity_value import QuantityValue
from .monolingual_value import MonolingualValue
from .external_id_value import ExternalIDValue
from .commons_media_value import CommonsMediaValue
from .url_value import URLValue
from .novalue_value import NoValue
from .somevalue_value import SomeValue

Value = Annotated[
    Union[
        EntityValue,
        StringValue,
        QuantityValue,
        MonolingualValue,
        ExternalIDValue,
        CommonsMediaValue,
        URLValue,
        NoValue,
        SomeValue,
    ],
    Field(discriminator="kind"),
]

__all__ = [
    "BaseValue",
    "Value",
    "EntityValue",
    "StringValue",
    "QuantityValue",
    "MonolingualValue",
    "ExternalIDValue",
    "CommonsMediaValue",
    "URLValue",
    "NoValue",
    "SomeValue",
]
