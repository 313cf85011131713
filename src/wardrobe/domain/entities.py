"""Domain entities for the wardrobe configurator."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, replace

from .errors import (
    IndexOutOfRange,
    InvalidDimension,
    UnknownMaterial,
    UnsupportedOverrideField,
)
from .value_objects import (
    BASE_MODULE_WIDTH,
    DimensionBounds,
    GlobalDimensions,
    OverrideField,
    module_count_for,
)


DEFAULT_DIMENSIONS = GlobalDimensions(width=60.0, height=60.0, depth=60.0)
DEFAULT_HEIGHT_BOUNDS = DimensionBounds(minimum=60.0, maximum=240.0)
DEFAULT_DEPTH_BOUNDS = DimensionBounds(minimum=60.0, maximum=120.0)
DEFAULT_MATERIALS: frozenset[str] = frozenset({"wood", "white", "black", "gray"})
DEFAULT_MATERIAL = "wood"


@dataclass(frozen=True)
class ModuleOverride:
    """Per-module height/depth values that take precedence over the globals.

    A field set to ``None`` was never overridden and falls back to the live
    global value, even when the global later changes.

    Attributes:
        height: Overridden height in cm, or None when unset.
        depth: Overridden depth in cm, or None when unset.
    """

    height: float | None = None
    depth: float | None = None

    def is_set(self, field: OverrideField) -> bool:
        return getattr(self, field.value) is not None

    def resolve(self, dimensions: GlobalDimensions) -> tuple[float, float]:
        """Return the effective (height, depth) against the given globals."""
        height = self.height if self.height is not None else dimensions.height
        depth = self.depth if self.depth is not None else dimensions.depth
        return height, depth

    def with_field(self, field: OverrideField, value: float) -> "ModuleOverride":
        return replace(self, **{field.value: value})


def _as_dimension(field: str, value: object) -> float:
    """Coerce value to a finite float or raise InvalidDimension."""
    if isinstance(value, bool):
        raise InvalidDimension(field, value)  # type: ignore[arg-type]
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise InvalidDimension(field, value)  # type: ignore[arg-type]
    if not math.isfinite(number):
        raise InvalidDimension(field, number)
    return number


class ConfigurationStore:
    """Holds global dimensions, the current material and module overrides.

    The store is pure data with validated mutation. Every setter validates
    its input completely before writing, so a rejected call leaves the store
    exactly as it was.

    Overrides are kept in a sparse mapping keyed by module index. Overrides
    for indices beyond the current module count are retained, so growing the
    width again restores them.
    """

    def __init__(
        self,
        base_width: float = BASE_MODULE_WIDTH,
        default_dimensions: GlobalDimensions = DEFAULT_DIMENSIONS,
        height_bounds: DimensionBounds = DEFAULT_HEIGHT_BOUNDS,
        depth_bounds: DimensionBounds = DEFAULT_DEPTH_BOUNDS,
        materials: Iterable[str] = DEFAULT_MATERIALS,
        default_material: str = DEFAULT_MATERIAL,
    ) -> None:
        if base_width <= 0:
            raise ValueError("Base module width must be positive")
        self._base_width = float(base_width)
        self._height_bounds = height_bounds
        self._depth_bounds = depth_bounds
        self._materials = frozenset(materials)
        if default_material not in self._materials:
            raise UnknownMaterial(default_material, self._materials)
        if not height_bounds.contains(default_dimensions.height):
            raise InvalidDimension(
                "height", default_dimensions.height,
                height_bounds.minimum, height_bounds.maximum,
            )
        if not depth_bounds.contains(default_dimensions.depth):
            raise InvalidDimension(
                "depth", default_dimensions.depth,
                depth_bounds.minimum, depth_bounds.maximum,
            )
        self._default_dimensions = default_dimensions
        self._default_material = default_material

        self._dimensions = default_dimensions
        self._material = default_material
        self._overrides: dict[int, ModuleOverride] = {}

    @property
    def base_width(self) -> float:
        return self._base_width

    @property
    def dimensions(self) -> GlobalDimensions:
        return self._dimensions

    @property
    def material(self) -> str:
        return self._material

    @property
    def materials(self) -> frozenset[str]:
        return self._materials

    @property
    def height_bounds(self) -> DimensionBounds:
        return self._height_bounds

    @property
    def depth_bounds(self) -> DimensionBounds:
        return self._depth_bounds

    @property
    def module_count(self) -> int:
        """Number of modules the current width produces."""
        return module_count_for(self._dimensions.width, self._base_width)

    @property
    def overrides(self) -> dict[int, ModuleOverride]:
        """Copy of the sparse override mapping, including orphaned entries."""
        return dict(self._overrides)

    def override_for(self, index: int) -> ModuleOverride | None:
        return self._overrides.get(index)

    def bounds_for(self, field: OverrideField) -> DimensionBounds:
        if field is OverrideField.HEIGHT:
            return self._height_bounds
        return self._depth_bounds

    def set_global_width(self, width: float) -> None:
        """Set the total width. Overrides beyond the new count are retained.

        Raises:
            InvalidDimension: If width is not a positive finite number.
        """
        value = _as_dimension("width", width)
        if value <= 0:
            raise InvalidDimension("width", value)
        self._dimensions = replace(self._dimensions, width=value)

    def set_global_height(self, height: float) -> None:
        """Set the global height used by modules without a height override.

        Raises:
            InvalidDimension: If height is outside the height bounds.
        """
        value = self._validated(OverrideField.HEIGHT, height)
        self._dimensions = replace(self._dimensions, height=value)

    def set_global_depth(self, depth: float) -> None:
        """Set the global depth used by modules without a depth override.

        Raises:
            InvalidDimension: If depth is outside the depth bounds.
        """
        value = self._validated(OverrideField.DEPTH, depth)
        self._dimensions = replace(self._dimensions, depth=value)

    def set_material(self, name: str) -> None:
        """Set the single material shared by all modules.

        Raises:
            UnknownMaterial: If name is not a recognized material.
        """
        if not isinstance(name, str) or name not in self._materials:
            raise UnknownMaterial(str(name), self._materials)
        self._material = name

    def set_module_override(
        self, index: int, field: OverrideField | str, value: float
    ) -> ModuleOverride:
        """Override height or depth for one module.

        The override record is created on first use; fields that were never
        set keep following the global dimensions.

        Returns:
            The updated override record.

        Raises:
            UnsupportedOverrideField: If field is not height or depth.
            IndexOutOfRange: If index does not address a current module.
            InvalidDimension: If value is outside the field's bounds.
        """
        override_field = self._parse_field(field)
        count = self.module_count
        if isinstance(index, bool) or not isinstance(index, int):
            raise IndexOutOfRange(index, count)  # type: ignore[arg-type]
        if index < 0 or index >= count:
            raise IndexOutOfRange(index, count)
        number = self._validated(override_field, value)

        current = self._overrides.get(index, ModuleOverride())
        updated = current.with_field(override_field, number)
        self._overrides[index] = updated
        return updated

    def reset(self) -> None:
        """Restore default dimensions and material and clear all overrides."""
        self._dimensions = self._default_dimensions
        self._material = self._default_material
        self._overrides.clear()

    def _validated(self, field: OverrideField, value: object) -> float:
        number = _as_dimension(field.value, value)
        bounds = self.bounds_for(field)
        if not bounds.contains(number):
            raise InvalidDimension(field.value, number, bounds.minimum, bounds.maximum)
        return number

    @staticmethod
    def _parse_field(field: OverrideField | str) -> OverrideField:
        if isinstance(field, OverrideField):
            return field
        try:
            return OverrideField(field)
        except ValueError:
            raise UnsupportedOverrideField(str(field)) from None
