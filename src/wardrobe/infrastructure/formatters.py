"""Output formatters for wardrobe configurations."""

from __future__ import annotations

import json
import math
from typing import TYPE_CHECKING, Any

from wardrobe.domain import Layout, Summary

if TYPE_CHECKING:
    from wardrobe.application.configurator import WardrobeConfigurator
    from wardrobe.application.dtos import ModuleControlView


def _cm(value: float) -> str:
    return f"{value:g} cm"


class SummaryFormatter:
    """Formats the summary panel (totals and module counter)."""

    def format(self, summary: Summary, material: str | None = None) -> str:
        lines = [
            "SPECIFICATIONS",
            "=" * 40,
            f"Total width:  {_cm(summary.total_width)}",
            f"Total height: {_cm(summary.max_height)}",
            f"Total depth:  {_cm(summary.max_depth)}",
            f"Modules:      {summary.module_count}",
        ]
        if material is not None:
            lines.append(f"Material:     {material}")
        lines.append("")
        lines.append(summary.counter_label)
        return "\n".join(lines)


class ModuleTableFormatter:
    """Formats per-module controls as a table.

    Overridden values are marked with ``*``.
    """

    def format(self, controls: list[ModuleControlView]) -> str:
        if not controls:
            return "No modules."

        header = f"{'Module':<10} {'X':>8} {'Width':>8} {'Height':>9} {'Depth':>9}"
        lines = ["MODULES", "=" * len(header), header, "-" * len(header)]
        for view in controls:
            height = f"{view.height:g}{'*' if view.height_overridden else ''}"
            depth = f"{view.depth:g}{'*' if view.depth_overridden else ''}"
            x = view.index * view.width
            lines.append(
                f"{view.label:<10} {x:>8g} {view.width:>8g} {height:>9} {depth:>9}"
            )
        lines.append("-" * len(header))
        lines.append("* per-module override")
        return "\n".join(lines)


class LayoutDiagramFormatter:
    """Formats an ASCII front elevation of the layout.

    Modules are drawn bottom-aligned, side by side, each ``cell_width``
    characters wide with one text row per ``cm_per_row`` of height.
    """

    def __init__(self, cell_width: int = 10, cm_per_row: float = 20.0) -> None:
        if cell_width < 4:
            raise ValueError("cell_width must be at least 4")
        if cm_per_row <= 0:
            raise ValueError("cm_per_row must be positive")
        self.cell_width = cell_width
        self.cm_per_row = cm_per_row

    def format(self, layout: Layout, summary: Summary | None = None) -> str:
        if len(layout) == 0:
            return "No modules to display."

        heights = [self._rows(module.height) for module in layout]
        rows = max(heights)
        columns = len(layout) * self.cell_width + 1
        grid = [[" " for _ in range(columns)] for _ in range(rows)]

        for module, module_rows in zip(layout, heights):
            left = module.index * self.cell_width
            right = left + self.cell_width
            top = rows - module_rows
            self._draw_box(grid, left, top, right, rows - 1)
            label = str(module.number)
            middle = top + (module_rows - 1) // 2
            start = left + (self.cell_width - len(label)) // 2 + 1
            for offset, char in enumerate(label):
                if start + offset < right:
                    grid[middle][start + offset] = char

        lines = ["WARDROBE FRONT VIEW", "=" * columns]
        lines.extend("".join(row).rstrip() for row in grid)
        if summary is not None:
            lines.append("")
            lines.append(
                f"Dimensions: {_cm(summary.total_width)} W x "
                f"{_cm(summary.max_height)} H x {_cm(summary.max_depth)} D"
            )
            lines.append(summary.counter_label)
        return "\n".join(lines)

    def _rows(self, height: float) -> int:
        return max(3, math.ceil(height / self.cm_per_row))

    def _draw_box(
        self, grid: list[list[str]], x0: int, y0: int, x1: int, y1: int
    ) -> None:
        for x in range(x0, x1 + 1):
            for y in (y0, y1):
                if grid[y][x] != "+":
                    grid[y][x] = "-"
        for y in range(y0, y1 + 1):
            for x in (x0, x1):
                if grid[y][x] != "+":
                    grid[y][x] = "|"
        for x, y in ((x0, y0), (x1, y0), (x0, y1), (x1, y1)):
            grid[y][x] = "+"


class JsonFormatter:
    """Formats the current configuration state as JSON for display."""

    def to_dict(self, configurator: WardrobeConfigurator) -> dict[str, Any]:
        store = configurator.store
        summary = configurator.summary
        dims = store.dimensions
        return {
            "dimensions": {
                "width": dims.width,
                "height": dims.height,
                "depth": dims.depth,
            },
            "material": store.material,
            "summary": {
                "total_width": summary.total_width,
                "max_height": summary.max_height,
                "max_depth": summary.max_depth,
                "module_count": summary.module_count,
            },
            "modules": [
                {
                    "index": view.index,
                    "number": view.number,
                    "x": view.index * view.width,
                    "width": view.width,
                    "height": view.height,
                    "depth": view.depth,
                    "height_overridden": view.height_overridden,
                    "depth_overridden": view.depth_overridden,
                }
                for view in configurator.module_controls()
            ],
        }

    def format(self, configurator: WardrobeConfigurator) -> str:
        return json.dumps(self.to_dict(configurator), indent=2)
