"""Render surfaces that materialize wardrobe modules.

``InMemoryRenderSurface`` keeps a plain record of each module's parts and is
used for headless sessions and for checking resource bookkeeping.
``StlRenderSurface`` builds a numpy-stl mesh per module and can merge the
live meshes into a single scene mesh.
"""

from __future__ import annotations

import itertools
import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from stl import mesh

from wardrobe.domain import MaterialFinish, Module, ModuleGeometryBuilder
from wardrobe.domain.services import ModulePart

logger = logging.getLogger(__name__)

CYLINDER_SEGMENTS = 8


def _default_finishes() -> dict[str, MaterialFinish]:
    from wardrobe.application.config import ConfiguratorSettings, settings_to_finishes

    return settings_to_finishes(ConfiguratorSettings())


@dataclass(eq=False)
class RenderedModule:
    """Resource handle returned by ``InMemoryRenderSurface.create``.

    Attributes:
        resource_id: Identifier unique within the surface.
        index: Module index given at create time.
        module: Module the resource was built from.
        finish: Finish of the module's material.
        parts: Drawable parts (carcass, frame, panels, handle).
        disposed: Set once the surface has released the resource.
    """

    resource_id: int
    index: int
    module: Module
    finish: MaterialFinish
    parts: list[ModulePart] = field(default_factory=list)
    disposed: bool = False


@dataclass(eq=False)
class StlModuleResource:
    """Resource handle returned by ``StlRenderSurface.create``."""

    resource_id: int
    index: int
    module: Module
    finish: MaterialFinish
    mesh: Any
    disposed: bool = False


class _TrackingSurface:
    """Shared bookkeeping: live resources, counters and an event log."""

    def __init__(
        self,
        finishes: Mapping[str, MaterialFinish] | None = None,
        geometry_builder: ModuleGeometryBuilder | None = None,
    ) -> None:
        self.finishes = dict(finishes) if finishes is not None else _default_finishes()
        self.geometry_builder = geometry_builder or ModuleGeometryBuilder()
        self._ids = itertools.count(1)
        self._live: dict[int, Any] = {}
        self.created_count = 0
        self.disposed_count = 0
        self.events: list[tuple[str, int]] = []

    @property
    def live_resources(self) -> list[Any]:
        """Live resources ordered by module index."""
        return sorted(self._live.values(), key=lambda r: r.index)

    @property
    def live_indices(self) -> list[int]:
        return [r.index for r in self.live_resources]

    def finish_for(self, material: str) -> MaterialFinish:
        try:
            return self.finishes[material]
        except KeyError:
            raise ValueError(f"No finish defined for material {material!r}") from None

    def _parts(self, module: Module) -> tuple[MaterialFinish, list[ModulePart]]:
        finish = self.finish_for(module.material)
        return finish, self.geometry_builder.build(module, finish)

    def _register(self, resource: Any) -> Any:
        self._live[resource.resource_id] = resource
        self.created_count += 1
        self.events.append(("create", resource.index))
        m = resource.module
        logger.debug(
            f"Created module {m.index} at x={m.position.x:g}: "
            f"{m.width:g}x{m.height:g}x{m.depth:g} {m.material}"
        )
        return resource

    def dispose(self, resource: Any) -> None:
        """Release a resource returned by ``create``.

        Raises:
            ValueError: If the resource is not live on this surface.
        """
        resource_id = getattr(resource, "resource_id", None)
        if resource_id is None or self._live.get(resource_id) is not resource:
            raise ValueError(f"Resource {resource!r} is not live on this surface")
        del self._live[resource_id]
        resource.disposed = True
        self.disposed_count += 1
        self.events.append(("dispose", resource.index))
        logger.debug(f"Disposed module {resource.index}")


class InMemoryRenderSurface(_TrackingSurface):
    """Render surface that records module parts without drawing them."""

    def create(self, module: Module) -> RenderedModule:
        finish, parts = self._parts(module)
        resource = RenderedModule(
            resource_id=next(self._ids),
            index=module.index,
            module=module,
            finish=finish,
            parts=parts,
        )
        return self._register(resource)


class StlMeshBuilder:
    """Builds numpy-stl meshes from module parts.

    Coordinates are already Y-up (X=width, Y=height, Z=depth), which is what
    STL viewers expect, so vertices are used as-is.
    """

    def build_part_mesh(self, part: ModulePart) -> mesh.Mesh:
        """Create a mesh for one part: a box, or an 8-sided prism for cylinders."""
        if part.shape == "cylinder":
            return self._build_prism(part)
        vertices = np.array(part.box.get_vertices())
        triangles = part.box.get_triangles()
        part_mesh = mesh.Mesh(np.zeros(len(triangles), dtype=mesh.Mesh.dtype))
        for i, (v0, v1, v2) in enumerate(triangles):
            part_mesh.vectors[i] = [vertices[v0], vertices[v1], vertices[v2]]
        return part_mesh

    def build_module_mesh(self, parts: list[ModulePart]) -> mesh.Mesh:
        """Merge the meshes of all parts of a module."""
        meshes = [self.build_part_mesh(part) for part in parts]
        return mesh.Mesh(np.concatenate([m.data for m in meshes]))

    def _build_prism(self, part: ModulePart) -> mesh.Mesh:
        # Axis along X; the box's Y/Z extents give the diameter.
        box = part.box
        cx, cy, cz = box.center.x, box.center.y, box.center.z
        x0, x1 = cx - box.size_x / 2, cx + box.size_x / 2
        radius = min(box.size_y, box.size_z) / 2

        ring = []
        for k in range(CYLINDER_SEGMENTS):
            angle = 2 * math.pi * k / CYLINDER_SEGMENTS
            ring.append((cy + radius * math.cos(angle), cz + radius * math.sin(angle)))

        left = [(x0, y, z) for y, z in ring]
        right = [(x1, y, z) for y, z in ring]
        left_center = (x0, cy, cz)
        right_center = (x1, cy, cz)

        faces = []
        for k in range(CYLINDER_SEGMENTS):
            n = (k + 1) % CYLINDER_SEGMENTS
            faces.append((left[k], right[n], right[k]))
            faces.append((left[k], left[n], right[n]))
            faces.append((left_center, left[n], left[k]))
            faces.append((right_center, right[k], right[n]))

        prism = mesh.Mesh(np.zeros(len(faces), dtype=mesh.Mesh.dtype))
        for i, face in enumerate(faces):
            prism.vectors[i] = np.array(face)
        return prism


class StlRenderSurface(_TrackingSurface):
    """Render surface that builds an STL mesh per module."""

    def __init__(
        self,
        finishes: Mapping[str, MaterialFinish] | None = None,
        geometry_builder: ModuleGeometryBuilder | None = None,
        mesh_builder: StlMeshBuilder | None = None,
    ) -> None:
        super().__init__(finishes=finishes, geometry_builder=geometry_builder)
        self.mesh_builder = mesh_builder or StlMeshBuilder()

    def create(self, module: Module) -> StlModuleResource:
        finish, parts = self._parts(module)
        resource = StlModuleResource(
            resource_id=next(self._ids),
            index=module.index,
            module=module,
            finish=finish,
            mesh=self.mesh_builder.build_module_mesh(parts),
        )
        return self._register(resource)

    def dispose(self, resource: Any) -> None:
        super().dispose(resource)
        resource.mesh = None

    def scene_mesh(self) -> mesh.Mesh | None:
        """Merge all live module meshes, or None when nothing is rendered."""
        live = self.live_resources
        if not live:
            return None
        return mesh.Mesh(np.concatenate([r.mesh.data for r in live]))
