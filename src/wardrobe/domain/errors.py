"""Error kinds raised by the configurator domain.

Validation errors (``InvalidDimension``, ``UnknownMaterial``,
``IndexOutOfRange``, ``UnsupportedOverrideField``) are raised before any state
is written, so callers can report them and carry on. ``InvariantViolation``
signals corrupted handle bookkeeping and is never recoverable.
"""

from __future__ import annotations

from collections.abc import Iterable


class ConfiguratorError(Exception):
    """Base class for all configurator errors."""

    error_type: str = "configurator"


class InvalidDimension(ConfiguratorError, ValueError):
    """Raised when a dimension is outside the range allowed for its field."""

    error_type = "invalid_dimension"

    def __init__(
        self,
        field: str,
        value: float,
        minimum: float | None = None,
        maximum: float | None = None,
    ) -> None:
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        if minimum is not None and maximum is not None:
            message = f"{field} must be between {minimum:g} and {maximum:g} cm, got {value!r}"
        elif maximum is not None:
            message = f"{field} must be at most {maximum:g} cm, got {value!r}"
        else:
            message = f"{field} must be a positive number of cm, got {value!r}"
        super().__init__(message)


class UnknownMaterial(ConfiguratorError, ValueError):
    """Raised when a material name is not in the recognized set."""

    error_type = "unknown_material"

    def __init__(self, name: str, available: Iterable[str]) -> None:
        self.name = name
        self.available = sorted(available)
        super().__init__(
            f"Unknown material: {name!r}. Available: {', '.join(self.available)}"
        )


class IndexOutOfRange(ConfiguratorError, IndexError):
    """Raised when a module override addresses a module that does not exist."""

    error_type = "index_out_of_range"

    def __init__(self, index: int, module_count: int) -> None:
        self.index = index
        self.module_count = module_count
        super().__init__(
            f"Module index {index} is out of range (layout has {module_count} modules)"
        )


class UnsupportedOverrideField(ConfiguratorError, ValueError):
    """Raised when a per-module override targets a field that cannot be overridden.

    Only height and depth are per-module. Width is fixed to the base module
    width and material is global.
    """

    error_type = "unsupported_field"

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(
            f"Field {field!r} cannot be overridden per module (expected 'height' or 'depth')"
        )


class InvariantViolation(ConfiguratorError, RuntimeError):
    """Raised when internal bookkeeping is inconsistent. Always fatal."""

    error_type = "invariant_violation"
