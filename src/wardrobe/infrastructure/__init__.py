"""Infrastructure layer - render surfaces and formatters."""

from .formatters import (
    JsonFormatter,
    LayoutDiagramFormatter,
    ModuleTableFormatter,
    SummaryFormatter,
)
from .render_surfaces import (
    InMemoryRenderSurface,
    RenderedModule,
    StlMeshBuilder,
    StlModuleResource,
    StlRenderSurface,
)

__all__ = [
    # Formatters
    "JsonFormatter",
    "LayoutDiagramFormatter",
    "ModuleTableFormatter",
    "SummaryFormatter",
    # Render surfaces
    "InMemoryRenderSurface",
    "RenderedModule",
    "StlMeshBuilder",
    "StlModuleResource",
    "StlRenderSurface",
]
