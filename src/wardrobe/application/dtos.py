"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass

from wardrobe.domain import Layout, ReconcileResult, Summary
from wardrobe.domain.services import Instruction


@dataclass(frozen=True)
class MutationResult:
    """Outcome of one configuration change.

    Attributes:
        operation: Name of the mutation, e.g. ``set_global_width``.
        reconcile: Instructions sent to the render surface and kept indices.
        layout: Layout after the change.
        summary: Summary of that layout.
    """

    operation: str
    reconcile: ReconcileResult
    layout: Layout
    summary: Summary

    @property
    def instructions(self) -> tuple[Instruction, ...]:
        return self.reconcile.instructions


@dataclass(frozen=True)
class SliderRange:
    """Range offered to a per-module control."""

    minimum: float
    maximum: float
    step: float


@dataclass(frozen=True)
class ModuleControlView:
    """Display data for one module's controls.

    Attributes:
        index: 0-based module index.
        number: 1-based module number shown to the user.
        width: Module width, fixed to the base width.
        height: Effective height.
        depth: Effective depth.
        height_overridden: Whether the height comes from an override.
        depth_overridden: Whether the depth comes from an override.
        height_range: Slider range for height.
        depth_range: Slider range for depth.
    """

    index: int
    number: int
    width: float
    height: float
    depth: float
    height_overridden: bool
    depth_overridden: bool
    height_range: SliderRange
    depth_range: SliderRange

    @property
    def label(self) -> str:
        return f"Module {self.number}"

    @property
    def width_fixed(self) -> bool:
        return True
