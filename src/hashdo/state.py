"""Application state handed to the serving layer."""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from hashdo.config import Settings
from hashdo.logs import configure_logging
from hashdo.models.registry import RegistryStats
from hashdo.registry import CardRegistry

log = structlog.get_logger()


@dataclass
class AppState:
    settings: Settings
    registry: CardRegistry
    stats: RegistryStats


def create_app_state(settings: Settings | None = None) -> AppState:
    """Load settings, configure logging and build the card registry.

    Raises ``HashdoError`` if the pack content cannot be indexed and
    ``pydantic.ValidationError`` if the configuration is invalid. Either one
    means the process must not go on to serve requests.
    """
    if settings is None:
        settings = Settings()
    configure_logging(settings.logging)

    registry = CardRegistry.from_settings(settings.packs)
    stats = registry.init(settings.packs.base_url, settings.packs.cards_directory)
    log.info("app_state_ready", base_url=settings.packs.base_url)
    return AppState(settings=settings, registry=registry, stats=stats)
