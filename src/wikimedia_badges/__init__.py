from .errors import (
    ConfigurationError,
    EntityLookupError,
    InvalidValueKindError,
    WikimediaBadgesError,
)
from .sidebar import SidebarAmender

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "EntityLookupError",
    "InvalidValueKindError",
    "SidebarAmender",
    "WikimediaBadgesError",
]
