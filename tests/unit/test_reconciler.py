"""Unit tests for the reconciler.

These tests verify:
- Instruction planning for growing, shrinking and changed layouts
- Disposes of removed indices come before creates
- Reconciling a layout against itself is a no-op
- Exactly one live handle per rendered index
- Bookkeeping mismatches raise InvariantViolation before touching the surface
"""

from typing import Any

import pytest

from wardrobe.domain import (
    CreateModule,
    DisposeModule,
    GlobalDimensions,
    InvariantViolation,
    Layout,
    Module,
    ModuleOverride,
    Reconciler,
    compute_layout,
)
from wardrobe.infrastructure import InMemoryRenderSurface


def _layout(
    width: float = 60,
    height: float = 60,
    depth: float = 60,
    material: str = "wood",
    overrides: dict[int, ModuleOverride] | None = None,
) -> Layout:
    dims = GlobalDimensions(width=width, height=height, depth=depth)
    return compute_layout(dims, overrides or {}, material)


def _names(instructions) -> list[str]:
    return [str(i) for i in instructions]


class RecordingSurface:
    """Minimal render surface that records calls."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    def create(self, module: Module) -> object:
        self.calls.append(("create", module.index))
        return object()

    def dispose(self, resource: Any) -> None:
        self.calls.append(("dispose", resource))


class TestPlan:
    """Tests for Reconciler.plan."""

    def test_initial_render_creates_all(self) -> None:
        plan = Reconciler().plan(Layout.empty(), _layout(width=150))
        assert _names(plan) == ["Create(0)", "Create(1)", "Create(2)"]

    def test_unchanged_layout_is_noop(self) -> None:
        reconciler = Reconciler()
        surface = InMemoryRenderSurface()
        layout = _layout(width=150)
        reconciler.reconcile(Layout.empty(), layout, surface)

        assert reconciler.plan(layout, _layout(width=150)) == []

    def test_growing_creates_new_indices_only(self) -> None:
        reconciler = Reconciler()
        previous = _layout(width=60)
        reconciler.reconcile(Layout.empty(), previous, InMemoryRenderSurface())

        plan = reconciler.plan(previous, _layout(width=180))
        assert _names(plan) == ["Create(1)", "Create(2)"]

    def test_shrinking_disposes_trailing_indices(self) -> None:
        reconciler = Reconciler()
        previous = _layout(width=240)
        reconciler.reconcile(Layout.empty(), previous, InMemoryRenderSurface())

        plan = reconciler.plan(previous, _layout(width=60))
        assert _names(plan) == ["Dispose(1)", "Dispose(2)", "Dispose(3)"]

    def test_changed_module_is_disposed_then_created(self) -> None:
        reconciler = Reconciler()
        previous = _layout(width=150)
        reconciler.reconcile(Layout.empty(), previous, InMemoryRenderSurface())

        new = _layout(width=150, overrides={1: ModuleOverride(height=180)})
        assert _names(reconciler.plan(previous, new)) == ["Dispose(1)", "Create(1)"]

    def test_material_change_rebuilds_every_module(self) -> None:
        reconciler = Reconciler()
        previous = _layout(width=120)
        reconciler.reconcile(Layout.empty(), previous, InMemoryRenderSurface())

        plan = reconciler.plan(previous, _layout(width=120, material="white"))
        assert _names(plan) == ["Dispose(0)", "Create(0)", "Dispose(1)", "Create(1)"]

    def test_removals_precede_changes(self) -> None:
        """Shrinking while changing height disposes removed indices first."""
        reconciler = Reconciler()
        previous = _layout(width=180)
        reconciler.reconcile(Layout.empty(), previous, InMemoryRenderSurface())

        plan = reconciler.plan(previous, _layout(width=120, height=100))
        assert _names(plan) == [
            "Dispose(2)",
            "Dispose(0)",
            "Create(0)",
            "Dispose(1)",
            "Create(1)",
        ]

    def test_create_carries_the_new_module(self) -> None:
        new = _layout(width=60, depth=90)
        (instruction,) = Reconciler().plan(Layout.empty(), new)
        assert isinstance(instruction, CreateModule)
        assert instruction.module == new[0]


class TestReconcile:
    """Tests for Reconciler.reconcile against a render surface."""

    def test_one_handle_per_module(self) -> None:
        reconciler = Reconciler()
        surface = InMemoryRenderSurface()
        layout = _layout(width=150)

        reconciler.reconcile(Layout.empty(), layout, surface)

        assert reconciler.live_count == 3
        assert sorted(reconciler.handles) == [0, 1, 2]
        assert surface.live_indices == [0, 1, 2]

    def test_unchanged_modules_keep_their_resource(self) -> None:
        reconciler = Reconciler()
        surface = InMemoryRenderSurface()
        previous = _layout(width=150)
        reconciler.reconcile(Layout.empty(), previous, surface)
        before = {i: h.resource for i, h in reconciler.handles.items()}

        new = _layout(width=150, overrides={1: ModuleOverride(height=180)})
        result = reconciler.reconcile(previous, new, surface)

        after = reconciler.handles
        assert after[0].resource is before[0]
        assert after[2].resource is before[2]
        assert after[1].resource is not before[1]
        assert result.kept == (0, 2)
        assert result.created == (1,)
        assert result.disposed == (1,)

    def test_reconcile_twice_is_idempotent(self) -> None:
        reconciler = Reconciler()
        surface = InMemoryRenderSurface()
        layout = _layout(width=150)
        reconciler.reconcile(Layout.empty(), layout, surface)
        created = surface.created_count

        result = reconciler.reconcile(layout, layout, surface)

        assert result.is_noop
        assert surface.created_count == created
        assert surface.disposed_count == 0

    def test_handles_track_live_resources(self) -> None:
        """Every create is matched by exactly one dispose over time."""
        reconciler = Reconciler()
        surface = InMemoryRenderSurface()
        previous = Layout.empty()
        for width, height in [(150, 60), (60, 60), (240, 100), (120, 100), (120, 200)]:
            new = _layout(width=width, height=height)
            reconciler.reconcile(previous, new, surface)
            previous = new
            assert reconciler.live_count == len(new)
            assert surface.created_count - surface.disposed_count == len(new)

    def test_release_all_disposes_highest_first(self) -> None:
        reconciler = Reconciler()
        surface = RecordingSurface()
        reconciler.reconcile(Layout.empty(), _layout(width=180), surface)
        surface.calls.clear()

        instructions = reconciler.release_all(surface)

        assert _names(instructions) == ["Dispose(2)", "Dispose(1)", "Dispose(0)"]
        assert reconciler.live_count == 0
        assert len(surface.calls) == 3


class TestInvariantViolation:
    """Tests for bookkeeping mismatches."""

    def test_previous_layout_without_handles(self) -> None:
        """Claiming modules are on screen when no handles exist is fatal."""
        surface = RecordingSurface()
        with pytest.raises(InvariantViolation):
            Reconciler().reconcile(_layout(width=120), _layout(width=60), surface)
        assert surface.calls == []

    def test_handle_for_different_module(self) -> None:
        reconciler = Reconciler()
        reconciler.reconcile(Layout.empty(), _layout(width=60), RecordingSurface())

        with pytest.raises(InvariantViolation):
            reconciler.plan(_layout(width=60, height=100), _layout(width=60))

    def test_dispose_without_handle(self) -> None:
        with pytest.raises(InvariantViolation):
            Reconciler().apply([DisposeModule(0)], RecordingSurface())

    def test_create_over_live_handle(self) -> None:
        reconciler = Reconciler()
        layout = _layout(width=60)
        surface = RecordingSurface()
        reconciler.reconcile(Layout.empty(), layout, surface)

        with pytest.raises(InvariantViolation):
            reconciler.apply([CreateModule(layout[0])], surface)
        assert reconciler.live_count == 1
