"""Domain layer - core configurator logic."""

from .entities import ConfigurationStore, ModuleOverride
from .errors import (
    ConfiguratorError,
    IndexOutOfRange,
    InvalidDimension,
    InvariantViolation,
    UnknownMaterial,
    UnsupportedOverrideField,
)
from .services import (
    CreateModule,
    DisposeModule,
    LayoutCalculator,
    ModuleGeometryBuilder,
    ReconcileResult,
    Reconciler,
    SummaryProjector,
    VisualHandle,
    compute_layout,
    compute_summary,
)
from .value_objects import (
    BASE_MODULE_WIDTH,
    DimensionBounds,
    GlobalDimensions,
    Layout,
    MaterialFinish,
    Module,
    OverrideField,
    Position3D,
    Summary,
)

__all__ = [
    "BASE_MODULE_WIDTH",
    "ConfigurationStore",
    "ConfiguratorError",
    "CreateModule",
    "DimensionBounds",
    "DisposeModule",
    "GlobalDimensions",
    "IndexOutOfRange",
    "InvalidDimension",
    "InvariantViolation",
    "Layout",
    "LayoutCalculator",
    "MaterialFinish",
    "Module",
    "ModuleGeometryBuilder",
    "ModuleOverride",
    "OverrideField",
    "Position3D",
    "ReconcileResult",
    "Reconciler",
    "Summary",
    "SummaryProjector",
    "UnknownMaterial",
    "UnsupportedOverrideField",
    "VisualHandle",
    "compute_layout",
    "compute_summary",
]
