"""Configuration mutation API.

``WardrobeConfigurator`` is the single entry point for configuration changes.
Every mutation runs to completion before returning: the store is validated
and written, the layout is recomputed, the render surface is reconciled and
the summary is projected. Calls are not reentrant; callers exposing the
configurator to concurrent clients must serialize them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from wardrobe.domain import (
    ConfigurationStore,
    ConfiguratorError,
    InvariantViolation,
    Layout,
    LayoutCalculator,
    OverrideField,
    Reconciler,
    Summary,
    SummaryProjector,
)

from .dtos import ModuleControlView, MutationResult, SliderRange

if TYPE_CHECKING:
    from wardrobe.contracts.protocols import RenderSurfaceProtocol

logger = logging.getLogger(__name__)


class WardrobeConfigurator:
    """Keeps the rendered wardrobe consistent with its configuration.

    On construction the initial layout is rendered. After an
    ``InvariantViolation``, or a render surface failing mid-reconcile, the
    configurator refuses every further mutation. The same holds after
    ``close``.
    """

    def __init__(
        self,
        surface: RenderSurfaceProtocol,
        store: ConfigurationStore | None = None,
        layout_calculator: LayoutCalculator | None = None,
        reconciler: Reconciler | None = None,
        slider_step: float = 10.0,
    ) -> None:
        self.surface = surface
        self.store = store or ConfigurationStore()
        self.layout_calculator = layout_calculator or LayoutCalculator()
        self.reconciler = reconciler or Reconciler()
        self.summary_projector = SummaryProjector()
        self.slider_step = slider_step

        self._halt_reason: str | None = None
        self._closed = False
        self._layout = Layout.empty(self.store.base_width)
        self._last_result = self._commit("initialize", lambda: None)

    @property
    def layout(self) -> Layout:
        return self._layout

    @property
    def summary(self) -> Summary:
        return self.summary_projector.current

    @property
    def last_result(self) -> MutationResult:
        return self._last_result

    @property
    def is_halted(self) -> bool:
        return self._halt_reason is not None

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def live_handle_count(self) -> int:
        return self.reconciler.live_count

    def set_global_width(self, width: float) -> MutationResult:
        """Set the total width; the module count follows ``ceil(width / 60)``."""
        return self._commit("set_global_width", lambda: self.store.set_global_width(width))

    def set_global_height(self, height: float) -> MutationResult:
        """Set the height of every module without a height override."""
        return self._commit("set_global_height", lambda: self.store.set_global_height(height))

    def set_global_depth(self, depth: float) -> MutationResult:
        """Set the depth of every module without a depth override."""
        return self._commit("set_global_depth", lambda: self.store.set_global_depth(depth))

    def set_material(self, name: str) -> MutationResult:
        """Switch the material of all modules."""
        return self._commit("set_material", lambda: self.store.set_material(name))

    def set_module_override(
        self, index: int, field: OverrideField | str, value: float
    ) -> MutationResult:
        """Override height or depth of a single module."""
        return self._commit(
            "set_module_override",
            lambda: self.store.set_module_override(index, field, value),
        )

    def reset(self) -> MutationResult:
        """Restore default dimensions and material and drop all overrides."""
        return self._commit("reset", self.store.reset)

    def module_controls(self) -> list[ModuleControlView]:
        """Per-module display data for building module controls."""
        height_bounds = self.store.height_bounds
        depth_bounds = self.store.depth_bounds
        height_range = SliderRange(height_bounds.minimum, height_bounds.maximum, self.slider_step)
        depth_range = SliderRange(depth_bounds.minimum, depth_bounds.maximum, self.slider_step)

        views: list[ModuleControlView] = []
        for module in self._layout:
            override = self.store.override_for(module.index)
            views.append(
                ModuleControlView(
                    index=module.index,
                    number=module.number,
                    width=module.width,
                    height=module.height,
                    depth=module.depth,
                    height_overridden=override is not None
                    and override.is_set(OverrideField.HEIGHT),
                    depth_overridden=override is not None
                    and override.is_set(OverrideField.DEPTH),
                    height_range=height_range,
                    depth_range=depth_range,
                )
            )
        return views

    def close(self) -> None:
        """Dispose every rendered module. The configurator is unusable afterwards."""
        if self._closed:
            return
        if self._halt_reason is None:
            self.reconciler.release_all(self.surface)
            self._layout = Layout.empty(self.store.base_width)
            self.summary_projector.project(self._layout)
        self._closed = True

    def _commit(self, operation: str, mutate: Callable[[], object]) -> MutationResult:
        if self._closed:
            raise InvariantViolation(f"Cannot {operation}: configurator is closed")
        if self._halt_reason is not None:
            raise InvariantViolation(
                f"Cannot {operation}: configurator was halted after {self._halt_reason}"
            )

        try:
            mutate()
        except ConfiguratorError as e:
            logger.warning(f"Rejected {operation}: {e}")
            raise

        new_layout = self.layout_calculator.calculate(self.store)
        try:
            reconciled = self.reconciler.reconcile(self._layout, new_layout, self.surface)
        except InvariantViolation as e:
            self._halt_reason = "an invariant violation"
            logger.error(f"Invariant violation during {operation}, halting: {e}")
            raise
        except Exception as e:
            self._halt_reason = "a render surface failure"
            logger.error(f"Render surface failed during {operation}, halting: {e}")
            raise InvariantViolation(
                f"Render surface failed during {operation}; "
                "rendered modules no longer match the configuration"
            ) from e

        self._layout = new_layout
        summary = self.summary_projector.project(new_layout)
        logger.debug(
            f"{operation}: {summary.module_count} modules, "
            f"{summary.total_width:g} x {summary.max_height:g} x {summary.max_depth:g} cm"
        )
        self._last_result = MutationResult(
            operation=operation,
            reconcile=reconciled,
            layout=new_layout,
            summary=summary,
        )
        return self._last_result
