"""Layout calculator service for wardrobe modules.

This module derives the ordered list of modules from the global dimensions,
the sparse per-module overrides and the current material.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from ..value_objects import (
    BASE_MODULE_WIDTH,
    GlobalDimensions,
    Layout,
    Module,
    Position3D,
    module_count_for,
)

if TYPE_CHECKING:
    from ..entities import ConfigurationStore, ModuleOverride

__all__ = [
    "LayoutCalculator",
    "compute_layout",
]

logger = logging.getLogger(__name__)


def compute_layout(
    dimensions: GlobalDimensions,
    overrides: Mapping[int, ModuleOverride],
    material: str,
    base_width: float = BASE_MODULE_WIDTH,
) -> Layout:
    """Compute the module layout for one configuration snapshot.

    The module count is ``ceil(width / base_width)``. Each module's height and
    depth come from its override where that field is set, otherwise from the
    global dimensions. Every module gets the base width, the global material
    and ``x = index * base_width``. Overrides for indices past the count are
    ignored but left in place by the caller.

    Args:
        dimensions: Global wardrobe dimensions.
        overrides: Sparse mapping of module index to override record.
        material: Current global material name.
        base_width: Fixed width of every module.

    Returns:
        A Layout whose modules are value-equal for equal inputs.
    """
    count = module_count_for(dimensions.width, base_width)
    modules: list[Module] = []
    for index in range(count):
        override = overrides.get(index)
        if override is not None:
            height, depth = override.resolve(dimensions)
        else:
            height, depth = dimensions.height, dimensions.depth
        modules.append(
            Module(
                index=index,
                position=Position3D(x=index * base_width, y=0.0, z=0.0),
                width=base_width,
                height=height,
                depth=depth,
                material=material,
            )
        )

    logger.debug(
        f"Computed layout: width={dimensions.width:g} -> {count} modules "
        f"({len(overrides)} override records)"
    )
    return Layout(modules=tuple(modules), base_width=base_width)


class LayoutCalculator:
    """Calculates wardrobe layouts from a configuration store."""

    def calculate(self, store: ConfigurationStore) -> Layout:
        """Compute the layout for the store's current state."""
        return compute_layout(
            dimensions=store.dimensions,
            overrides=store.overrides,
            material=store.material,
            base_width=store.base_width,
        )
