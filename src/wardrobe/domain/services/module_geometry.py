"""Geometry of one rendered wardrobe module.

A module is drawn as its carcass plus fixed decorative parts on the front
face: a recessed door frame, two flanking door panels and a centered handle.
All parts are sized from the module's own width, height and depth and placed
relative to the module position, which is the carcass center.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from ..value_objects import MaterialFinish, Module, Position3D

__all__ = [
    "DOOR_FRAME_FINISH",
    "DOOR_PANEL_FINISH",
    "HANDLE_FINISH",
    "Box3D",
    "ModuleGeometryBuilder",
    "ModulePart",
]

FRAME_INSET = 2.0
FRAME_THICKNESS = 2.0
PANEL_THICKNESS = 1.0
HANDLE_LENGTH = 8.0
HANDLE_RADIUS = 0.5

DOOR_FRAME_FINISH = MaterialFinish(name="door_frame", color=0x654321, roughness=0.9)
DOOR_PANEL_FINISH = MaterialFinish(name="door_panel", color=0x8B4513, roughness=0.8)
HANDLE_FINISH = MaterialFinish(name="handle", color=0xFFD700, metalness=0.9, roughness=0.1)


@dataclass(frozen=True)
class Box3D:
    """Axis-aligned box given by its center and extents."""

    center: Position3D
    size_x: float  # Width (left to right)
    size_y: float  # Height (bottom to top)
    size_z: float  # Depth (back to front)

    def __post_init__(self) -> None:
        if self.size_x <= 0 or self.size_y <= 0 or self.size_z <= 0:
            raise ValueError("Box dimensions must be positive")

    def get_vertices(self) -> list[tuple[float, float, float]]:
        """Return 8 corner vertices of the box."""
        hx, hy, hz = self.size_x / 2, self.size_y / 2, self.size_z / 2
        x0, x1 = self.center.x - hx, self.center.x + hx
        y0, y1 = self.center.y - hy, self.center.y + hy
        z0, z1 = self.center.z - hz, self.center.z + hz
        return [
            (x0, y0, z0),  # 0: back-bottom-left
            (x1, y0, z0),  # 1: back-bottom-right
            (x1, y1, z0),  # 2: back-top-right
            (x0, y1, z0),  # 3: back-top-left
            (x0, y0, z1),  # 4: front-bottom-left
            (x1, y0, z1),  # 5: front-bottom-right
            (x1, y1, z1),  # 6: front-top-right
            (x0, y1, z1),  # 7: front-top-left
        ]

    def get_triangles(self) -> list[tuple[int, int, int]]:
        """Return 12 triangles with counter-clockwise (outward) winding."""
        return [
            # Back face (z=min)
            (0, 2, 1),
            (0, 3, 2),
            # Front face (z=max)
            (4, 5, 6),
            (4, 6, 7),
            # Bottom face (y=min)
            (0, 1, 5),
            (0, 5, 4),
            # Top face (y=max)
            (3, 7, 6),
            (3, 6, 2),
            # Left face (x=min)
            (0, 4, 7),
            (0, 7, 3),
            # Right face (x=max)
            (1, 2, 6),
            (1, 6, 5),
        ]


@dataclass(frozen=True)
class ModulePart:
    """One drawable part of a module.

    Attributes:
        name: Part role, e.g. ``carcass`` or ``left_panel``.
        box: Bounding box of the part.
        finish: Surface finish for the part.
        shape: ``box`` for panels, ``cylinder`` for the handle. Cylinders lie
            along the X axis and fill their bounding box.
    """

    name: str
    box: Box3D
    finish: MaterialFinish
    shape: Literal["box", "cylinder"] = "box"


class ModuleGeometryBuilder:
    """Builds the drawable parts for a module."""

    def build(self, module: Module, finish: MaterialFinish) -> list[ModulePart]:
        """Return carcass, door frame, two panels and the handle for module.

        Args:
            module: Module to draw.
            finish: Finish of the module's material, used for the carcass.

        Raises:
            ValueError: If the module is too small for its decorative parts.
        """
        x, y, z = module.position.x, module.position.y, module.position.z
        width, height, depth = module.width, module.height, module.depth
        if width <= 4 * FRAME_INSET or height <= 4 * FRAME_INSET:
            raise ValueError(
                f"Module {module.index} ({width:g} x {height:g} cm) is too small "
                f"for its door panels; both sides must exceed {4 * FRAME_INSET:g} cm"
            )
        front = z + depth / 2

        panel_width = (width - 4 * FRAME_INSET) / 2
        panel_offset = panel_width / 2 + FRAME_INSET

        return [
            ModulePart(
                name="carcass",
                box=Box3D(Position3D(x, y, z), width, height, depth),
                finish=finish,
            ),
            ModulePart(
                name="door_frame",
                box=Box3D(
                    Position3D(x, y, front + FRAME_THICKNESS / 2),
                    width - 2 * FRAME_INSET,
                    height - 2 * FRAME_INSET,
                    FRAME_THICKNESS,
                ),
                finish=DOOR_FRAME_FINISH,
            ),
            ModulePart(
                name="left_panel",
                box=Box3D(
                    Position3D(x - panel_offset, y, front + 1.5),
                    panel_width,
                    height - 4 * FRAME_INSET,
                    PANEL_THICKNESS,
                ),
                finish=DOOR_PANEL_FINISH,
            ),
            ModulePart(
                name="right_panel",
                box=Box3D(
                    Position3D(x + panel_offset, y, front + 1.5),
                    panel_width,
                    height - 4 * FRAME_INSET,
                    PANEL_THICKNESS,
                ),
                finish=DOOR_PANEL_FINISH,
            ),
            ModulePart(
                name="handle",
                box=Box3D(
                    Position3D(x, y, front + 2.5),
                    HANDLE_LENGTH,
                    2 * HANDLE_RADIUS,
                    2 * HANDLE_RADIUS,
                ),
                finish=HANDLE_FINISH,
                shape="cylinder",
            ),
        ]
