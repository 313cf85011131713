"""FastAPI dependency injection for the configurator session."""

from __future__ import annotations

import threading
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from wardrobe.application import WardrobeConfigurator
from wardrobe.application.factory import ServiceFactory, get_factory


class ConfiguratorSession:
    """A configurator shared by all requests.

    The configurator is not reentrant, so every request works on it while
    holding ``lock``.
    """

    def __init__(self, factory: ServiceFactory) -> None:
        self.factory = factory
        self.lock = threading.Lock()
        self.configurator: WardrobeConfigurator = factory.create_configurator()


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory instance."""
    return get_factory()


@lru_cache(maxsize=1)
def get_session() -> ConfiguratorSession:
    """Get the process-wide configurator session."""
    return ConfiguratorSession(get_service_factory())


def reset_session() -> None:
    """Drop the cached session and factory (for testing cleanup)."""
    get_session.cache_clear()
    get_service_factory.cache_clear()


# Type aliases for cleaner endpoint signatures
ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]
SessionDep = Annotated[ConfiguratorSession, Depends(get_session)]
