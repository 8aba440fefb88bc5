import logging
from functools import lru_cache
from typing import Optional

from wikimedia_badges.config.logging_setup import configure_logging
from wikimedia_badges.hooks.registrar import HookRegistrar
from wikimedia_badges.lookup.base import EntityLookup
from wikimedia_badges.lookup.entity_data import EntityDataLookup
from wikimedia_badges.models.sidebar import Sidebar
from wikimedia_badges.sidebar.amender import SidebarAmender

logger = logging.getLogger(__name__)

OTHER_PROJECTS_SIDEBAR = "WikibaseClientOtherProjectsSidebar"


@lru_cache(maxsize=None)
def shared_entity_lookup(base_url: str, user_agent: str, timeout: int) -> EntityDataLookup:
    """One lookup, and so one HTTP session, per endpoint for all renders."""
    return EntityDataLookup(base_url=base_url, user_agent=user_agent, timeout=timeout)


def register_hooks(registrar: HookRegistrar, amender: SidebarAmender) -> None:
    if not amender.enabled:
        logger.info("Commons category property disabled, sidebar hook not registered")
        return
    registrar.register(OTHER_PROJECTS_SIDEBAR, amender.amend)


def add_to_sidebar(
    entity_id: str,
    sidebar: Sidebar,
    settings=None,
    entity_lookup: Optional[EntityLookup] = None,
) -> None:
    """Build an amender from the global settings and apply it once."""
    if settings is None:
        from wikimedia_badges.config.settings import settings

    if entity_lookup is None:
        entity_lookup = shared_entity_lookup(
            settings.entity_data_url, settings.user_agent, settings.request_timeout
        )
    SidebarAmender.from_settings(settings, entity_lookup).amend(entity_id, sidebar)


def setup_extension(
    registrar: HookRegistrar,
    settings=None,
    entity_lookup: Optional[EntityLookup] = None,
) -> SidebarAmender:
    """Configure logging and register the sidebar hook from settings.

    Raises ConfigurationError right away if the property setting is malformed.
    """
    if settings is None:
        from wikimedia_badges.config.settings import settings

    configure_logging(settings.log_level)
    amender = SidebarAmender.from_settings(settings, entity_lookup)
    register_hooks(registrar, amender)
    logger.info(f"Sidebar hook set up with property {amender.property_id}")
    return amender
