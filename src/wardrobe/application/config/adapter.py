"""Conversion from configuration models to domain objects.

Settings become a ``ConfigurationStore`` and a material finish table; a
``WardrobeConfiguration`` is replayed onto a configurator through the normal
mutation API so that it is validated like any other user change.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wardrobe.domain import (
    ConfigurationStore,
    DimensionBounds,
    GlobalDimensions,
    MaterialFinish,
    OverrideField,
)

from .schema import ConfiguratorSettings, WardrobeConfiguration

if TYPE_CHECKING:
    from wardrobe.application.configurator import WardrobeConfigurator

logger = logging.getLogger(__name__)


def settings_to_store(settings: ConfiguratorSettings) -> ConfigurationStore:
    """Build an empty configuration store that follows the given settings."""
    defaults = settings.default_dimensions
    return ConfigurationStore(
        base_width=settings.base_module_width,
        default_dimensions=GlobalDimensions(
            width=defaults.width, height=defaults.height, depth=defaults.depth
        ),
        height_bounds=DimensionBounds(
            minimum=settings.height_bounds.min, maximum=settings.height_bounds.max
        ),
        depth_bounds=DimensionBounds(
            minimum=settings.depth_bounds.min, maximum=settings.depth_bounds.max
        ),
        materials=settings.materials.keys(),
        default_material=settings.default_material,
    )


def settings_to_finishes(settings: ConfiguratorSettings) -> dict[str, MaterialFinish]:
    """Build the material finish table handed to render surfaces."""
    return {
        name: MaterialFinish(
            name=name,
            color=finish.color,
            metalness=finish.metalness,
            roughness=finish.roughness,
        )
        for name, finish in settings.materials.items()
    }


def apply_configuration(
    configurator: WardrobeConfigurator, config: WardrobeConfiguration
) -> None:
    """Replay a configuration through the mutation API.

    Width is applied first so that module overrides address existing
    modules. Overrides are applied in index order.

    Raises:
        ConfiguratorError: The first mutation the configurator rejects.
    """
    dims = config.dimensions
    configurator.set_global_width(dims.width)
    configurator.set_global_height(dims.height)
    configurator.set_global_depth(dims.depth)
    if config.material is not None:
        configurator.set_material(config.material)

    for entry in sorted(config.modules, key=lambda m: m.index):
        if entry.height is not None:
            configurator.set_module_override(entry.index, OverrideField.HEIGHT, entry.height)
        if entry.depth is not None:
            configurator.set_module_override(entry.index, OverrideField.DEPTH, entry.depth)

    logger.debug(
        f"Applied configuration: {configurator.summary.module_count} modules, "
        f"{len(config.modules)} module overrides"
    )
