"""Protocols for the collaborators the configurator drives.

The configurator never draws anything itself. It emits create and dispose
calls to a render surface, which owns the scene, camera and canvas.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from wardrobe.domain.value_objects import Module


@runtime_checkable
class RenderSurfaceProtocol(Protocol):
    """Protocol for the rendering collaborator.

    Implementations turn a module into a drawable unit (the carcass plus its
    door frame, two panels and handle) and release it on request. A surface
    must only dispose resources it was told to dispose, and must identify
    modules only by the index passed to ``create``.

    Example:
        ```python
        class SceneSurface:
            def create(self, module: Module) -> Any:
                group = build_group(module)
                scene.add(group)
                return group

            def dispose(self, resource: Any) -> None:
                scene.remove(resource)
                resource.release()
        ```
    """

    def create(self, module: Module) -> Any:
        """Build the drawable unit for a module.

        Args:
            module: The module to draw (index, position, size, material).

        Returns:
            An opaque resource handle for later disposal.
        """
        ...

    def dispose(self, resource: Any) -> None:
        """Release every resource tied to a handle returned by ``create``.

        Args:
            resource: The handle returned by ``create``.
        """
        ...
