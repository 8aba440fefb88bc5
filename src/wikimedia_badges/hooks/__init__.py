from .registrar import HookRegistrar
from .handlers import (
    OTHER_PROJECTS_SIDEBAR,
    add_to_sidebar,
    register_hooks,
    setup_extension,
)

__all__ = [
    "HookRegistrar",
    "OTHER_PROJECTS_SIDEBAR",
    "add_to_sidebar",
    "register_hooks",
    "setup_extension",
]
