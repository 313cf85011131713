"""Domain services for wardrobe layout, reconciliation and summaries.

This package provides:
- Layout calculation from the configuration store
- Reconciliation of rendered modules against a new layout
- Summary projection for display
- Module geometry for render surfaces
"""

from .layout_calculator import LayoutCalculator, compute_layout
from .module_geometry import Box3D, ModuleGeometryBuilder, ModulePart
from .reconciler import (
    CreateModule,
    DisposeModule,
    Instruction,
    ReconcileResult,
    Reconciler,
    VisualHandle,
)
from .summary import SummaryProjector, compute_summary

__all__ = [
    "Box3D",
    "CreateModule",
    "DisposeModule",
    "Instruction",
    "LayoutCalculator",
    "ModuleGeometryBuilder",
    "ModulePart",
    "ReconcileResult",
    "Reconciler",
    "SummaryProjector",
    "VisualHandle",
    "compute_layout",
    "compute_summary",
]
