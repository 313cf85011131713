"""Value objects for the wardrobe domain.

All lengths are in centimeters. Coordinates follow the viewer convention used
by the render surfaces: X runs along the wardrobe width, Y is vertical and Z
points out of the front face.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

BASE_MODULE_WIDTH = 60.0


class OverrideField(str, Enum):
    """Module fields that may be overridden per module."""

    HEIGHT = "height"
    DEPTH = "depth"


@dataclass(frozen=True)
class Position3D:
    """Position of a module's carcass center."""

    x: float
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class DimensionBounds:
    """Inclusive range of allowed values for a dimension."""

    minimum: float
    maximum: float

    def __post_init__(self) -> None:
        if self.minimum <= 0:
            raise ValueError("Bound minimum must be positive")
        if self.maximum < self.minimum:
            raise ValueError("Bound maximum must not be below the minimum")

    def contains(self, value: float) -> bool:
        """Check whether value lies inside the range (finite values only)."""
        return math.isfinite(value) and self.minimum <= value <= self.maximum


@dataclass(frozen=True)
class GlobalDimensions:
    """Global wardrobe dimensions."""

    width: float
    height: float
    depth: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.depth <= 0:
            raise ValueError("All dimensions must be positive")

    def module_count(self, base_width: float = BASE_MODULE_WIDTH) -> int:
        """Number of modules needed to cover the width."""
        return module_count_for(self.width, base_width)


def module_count_for(width: float, base_width: float = BASE_MODULE_WIDTH) -> int:
    """Return ``ceil(width / base_width)``."""
    return math.ceil(width / base_width)


@dataclass(frozen=True)
class MaterialFinish:
    """Surface finish the render surface applies for a material name."""

    name: str
    color: int
    metalness: float = 0.0
    roughness: float = 0.5

    @property
    def hex_color(self) -> str:
        return f"#{self.color:06x}"


@dataclass(frozen=True)
class Module:
    """One furniture segment, derived from the configuration.

    A module has no identity beyond its index. Two modules with equal fields
    describe the same visual result.
    """

    index: int
    position: Position3D
    width: float
    height: float
    depth: float
    material: str

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError("Module index must be non-negative")
        if self.width <= 0 or self.height <= 0 or self.depth <= 0:
            raise ValueError("Module dimensions must be positive")

    @property
    def number(self) -> int:
        """Human-facing 1-based module number."""
        return self.index + 1

    def visual_key(self) -> tuple[float, float, str]:
        """Fields whose change requires the module to be rebuilt."""
        return (self.height, self.depth, self.material)


@dataclass(frozen=True)
class Layout:
    """Ordered modules for one configuration snapshot."""

    modules: tuple[Module, ...] = ()
    base_width: float = BASE_MODULE_WIDTH

    def __len__(self) -> int:
        return len(self.modules)

    def __iter__(self) -> Iterator[Module]:
        return iter(self.modules)

    def __getitem__(self, index: int) -> Module:
        return self.modules[index]

    def get(self, index: int) -> Module | None:
        """Return the module at index, or None when the layout is shorter."""
        if 0 <= index < len(self.modules):
            return self.modules[index]
        return None

    @classmethod
    def empty(cls, base_width: float = BASE_MODULE_WIDTH) -> "Layout":
        return cls(modules=(), base_width=base_width)


@dataclass(frozen=True)
class Summary:
    """Aggregate dimensions shown next to the wardrobe."""

    total_width: float
    max_height: float
    max_depth: float
    module_count: int

    @property
    def counter_label(self) -> str:
        """Module counter text, e.g. ``1 Module`` or ``3 Modules``."""
        suffix = "s" if self.module_count > 1 else ""
        return f"{self.module_count} Module{suffix}"
