"""Summary projection of a wardrobe layout."""

from __future__ import annotations

from ..value_objects import Layout, Summary

__all__ = [
    "SummaryProjector",
    "compute_summary",
]


def compute_summary(layout: Layout) -> Summary:
    """Project aggregate dimensions from a layout.

    Modules stand side by side, so widths add up while height and depth are
    the maxima across modules. An empty layout projects to zeros.
    """
    if len(layout) == 0:
        return Summary(total_width=0.0, max_height=0.0, max_depth=0.0, module_count=0)
    return Summary(
        total_width=sum(module.width for module in layout),
        max_height=max(module.height for module in layout),
        max_depth=max(module.depth for module in layout),
        module_count=len(layout),
    )


class SummaryProjector:
    """Holds the most recent summary for display."""

    def __init__(self) -> None:
        self._current = compute_summary(Layout.empty())

    @property
    def current(self) -> Summary:
        return self._current

    def project(self, layout: Layout) -> Summary:
        """Recompute the summary from scratch for the given layout."""
        self._current = compute_summary(layout)
        return self._current
