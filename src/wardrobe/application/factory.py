"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

from wardrobe.application.config.schema import ConfiguratorSettings

if TYPE_CHECKING:
    from wardrobe.application.configurator import WardrobeConfigurator
    from wardrobe.contracts.protocols import RenderSurfaceProtocol
    from wardrobe.domain import ConfigurationStore, MaterialFinish
    from wardrobe.infrastructure.formatters import (
        LayoutDiagramFormatter,
        ModuleTableFormatter,
        SummaryFormatter,
    )


@dataclass
class ServiceFactory:
    """Factory for creating configurator sessions and their collaborators.

    Every configurator gets its own store and render surface; only the
    settings and the stateless formatters are shared.

    Example:
        ```python
        factory = ServiceFactory(surface_kind="stl")
        configurator = factory.create_configurator()
        configurator.set_global_width(150)
        ```
    """

    settings: ConfiguratorSettings = field(default_factory=ConfiguratorSettings)
    surface_kind: Literal["memory", "stl"] = "memory"

    _finishes: "dict[str, MaterialFinish] | None" = field(
        default=None, init=False, repr=False
    )
    _summary_formatter: "SummaryFormatter | None" = field(
        default=None, init=False, repr=False
    )
    _module_table_formatter: "ModuleTableFormatter | None" = field(
        default=None, init=False, repr=False
    )
    _diagram_formatter: "LayoutDiagramFormatter | None" = field(
        default=None, init=False, repr=False
    )

    def get_finishes(self) -> "dict[str, MaterialFinish]":
        """Get or build the material finish table."""
        if self._finishes is None:
            from wardrobe.application.config.adapter import settings_to_finishes

            self._finishes = settings_to_finishes(self.settings)
        return self._finishes

    def create_store(self) -> "ConfigurationStore":
        """Create an empty configuration store following the settings."""
        from wardrobe.application.config.adapter import settings_to_store

        return settings_to_store(self.settings)

    def create_render_surface(self) -> "RenderSurfaceProtocol":
        """Create a render surface of the configured kind."""
        if self.surface_kind == "stl":
            from wardrobe.infrastructure.render_surfaces import StlRenderSurface

            return StlRenderSurface(finishes=self.get_finishes())

        from wardrobe.infrastructure.render_surfaces import InMemoryRenderSurface

        return InMemoryRenderSurface(finishes=self.get_finishes())

    def create_configurator(self) -> "WardrobeConfigurator":
        """Create a configurator with a fresh store and render surface."""
        from wardrobe.application.configurator import WardrobeConfigurator

        return WardrobeConfigurator(
            surface=self.create_render_surface(),
            store=self.create_store(),
            slider_step=self.settings.slider_step,
        )

    def get_summary_formatter(self) -> "SummaryFormatter":
        if self._summary_formatter is None:
            from wardrobe.infrastructure.formatters import SummaryFormatter

            self._summary_formatter = SummaryFormatter()
        return self._summary_formatter

    def get_module_table_formatter(self) -> "ModuleTableFormatter":
        if self._module_table_formatter is None:
            from wardrobe.infrastructure.formatters import ModuleTableFormatter

            self._module_table_formatter = ModuleTableFormatter()
        return self._module_table_formatter

    def get_layout_diagram_formatter(self) -> "LayoutDiagramFormatter":
        if self._diagram_formatter is None:
            from wardrobe.infrastructure.formatters import LayoutDiagramFormatter

            self._diagram_formatter = LayoutDiagramFormatter()
        return self._diagram_formatter


# Default factory instance
_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
