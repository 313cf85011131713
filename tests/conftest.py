"""Pytest configuration and shared fixtures for wardrobe tests."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from wardrobe.application import WardrobeConfigurator
    from wardrobe.infrastructure import InMemoryRenderSurface

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures for configurator sessions
# =============================================================================


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding the JSON configuration fixtures."""
    return FIXTURES_PATH


@pytest.fixture
def surface() -> "InMemoryRenderSurface":
    """In-memory render surface with the default finish table."""
    from wardrobe.infrastructure import InMemoryRenderSurface

    return InMemoryRenderSurface()


@pytest.fixture
def configurator(surface: "InMemoryRenderSurface") -> "WardrobeConfigurator":
    """Configurator in its initial state (one 60x60x60 wood module).

    Uses the shared ``surface`` fixture so tests can inspect what was
    rendered.
    """
    from wardrobe.application import WardrobeConfigurator

    return WardrobeConfigurator(surface=surface)


@pytest.fixture(autouse=True)
def _reset_default_factory():
    """Keep the process-wide service factory from leaking between tests."""
    from wardrobe.application.factory import reset_factory

    yield
    reset_factory()
