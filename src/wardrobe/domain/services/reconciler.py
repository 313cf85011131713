"""Reconciliation of rendered modules against a new layout.

The reconciler owns the table of visual handles, one per rendered module
index. Given the previous and the new layout it decides, per index, whether
the existing visual can be kept, must be rebuilt, or must be created or
disposed, and drives the render surface accordingly.

Changed modules are rebuilt whole (dispose then create) rather than edited in
place. Module geometry is cheap to regenerate, and whole rebuilds keep the
render surface free of partial-update logic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Union

from ..errors import InvariantViolation
from ..value_objects import Layout, Module

if TYPE_CHECKING:
    from wardrobe.contracts.protocols import RenderSurfaceProtocol

__all__ = [
    "CreateModule",
    "DisposeModule",
    "Instruction",
    "ReconcileResult",
    "Reconciler",
    "VisualHandle",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateModule:
    """Ask the render surface to build a module."""

    module: Module

    @property
    def index(self) -> int:
        return self.module.index

    def __str__(self) -> str:
        return f"Create({self.index})"


@dataclass(frozen=True)
class DisposeModule:
    """Ask the render surface to release the resources of a module index."""

    index: int

    def __str__(self) -> str:
        return f"Dispose({self.index})"


Instruction = Union[CreateModule, DisposeModule]


@dataclass(frozen=True)
class VisualHandle:
    """Ties a module index to the resource the render surface allocated.

    Attributes:
        index: Module index the resource was created for.
        module: Module the resource was built from.
        resource: Opaque object returned by the render surface.
    """

    index: int
    module: Module
    resource: Any = field(compare=False)


@dataclass(frozen=True)
class ReconcileResult:
    """Outcome of one reconciliation pass.

    Attributes:
        instructions: Ordered instructions that were applied.
        kept: Indices whose existing visual was reused untouched.
    """

    instructions: tuple[Instruction, ...] = ()
    kept: tuple[int, ...] = ()

    @property
    def created(self) -> tuple[int, ...]:
        return tuple(i.index for i in self.instructions if isinstance(i, CreateModule))

    @property
    def disposed(self) -> tuple[int, ...]:
        return tuple(i.index for i in self.instructions if isinstance(i, DisposeModule))

    @property
    def is_noop(self) -> bool:
        return not self.instructions


class Reconciler:
    """Keeps exactly one visual handle per rendered module index."""

    def __init__(self) -> None:
        self._handles: dict[int, VisualHandle] = {}

    @property
    def handles(self) -> dict[int, VisualHandle]:
        """Copy of the handle table keyed by module index."""
        return dict(self._handles)

    @property
    def live_count(self) -> int:
        return len(self._handles)

    def plan(self, previous: Layout, new: Layout) -> list[Instruction]:
        """Compute the ordered instructions that move previous to new.

        Indices only in the previous layout are disposed first. Then, in index
        order, missing modules are created and modules whose height, depth or
        material changed are disposed and re-created. Unchanged modules emit
        nothing.

        Raises:
            InvariantViolation: If the handle table does not match the
                previous layout.
        """
        self._check_handles(previous)

        instructions: list[Instruction] = []
        for index in range(len(new), len(previous)):
            instructions.append(DisposeModule(index))

        for module in new:
            old = previous.get(module.index)
            if old is None:
                instructions.append(CreateModule(module))
            elif old.visual_key() != module.visual_key():
                instructions.append(DisposeModule(module.index))
                instructions.append(CreateModule(module))
        return instructions

    def apply(
        self, instructions: list[Instruction], surface: RenderSurfaceProtocol
    ) -> None:
        """Execute instructions against the render surface in order.

        Raises:
            InvariantViolation: On a dispose for an index without a handle, or
                a create for an index that still holds one.
        """
        for instruction in instructions:
            if isinstance(instruction, DisposeModule):
                handle = self._handles.pop(instruction.index, None)
                if handle is None:
                    raise InvariantViolation(
                        f"Dispose requested for module {instruction.index}, "
                        "which has no live visual handle"
                    )
                surface.dispose(handle.resource)
            else:
                index = instruction.index
                if index in self._handles:
                    raise InvariantViolation(
                        f"Create requested for module {index}, "
                        "which still holds a live visual handle"
                    )
                resource = surface.create(instruction.module)
                self._handles[index] = VisualHandle(
                    index=index, module=instruction.module, resource=resource
                )

    def reconcile(
        self, previous: Layout, new: Layout, surface: RenderSurfaceProtocol
    ) -> ReconcileResult:
        """Plan and apply the transition from previous to new."""
        instructions = self.plan(previous, new)
        self.apply(instructions, surface)

        touched = {instruction.index for instruction in instructions}
        kept = tuple(m.index for m in new if m.index not in touched)
        logger.debug(
            f"Reconciled {len(previous)} -> {len(new)} modules: "
            f"{', '.join(str(i) for i in instructions) or 'no changes'}"
        )
        return ReconcileResult(instructions=tuple(instructions), kept=kept)

    def release_all(self, surface: RenderSurfaceProtocol) -> list[Instruction]:
        """Dispose every live handle, highest index first."""
        instructions: list[Instruction] = [
            DisposeModule(index) for index in sorted(self._handles, reverse=True)
        ]
        self.apply(instructions, surface)
        return instructions

    def _check_handles(self, previous: Layout) -> None:
        expected = {module.index for module in previous}
        actual = set(self._handles)
        if expected != actual:
            raise InvariantViolation(
                f"Visual handles {sorted(actual)} do not match the rendered "
                f"modules {sorted(expected)}"
            )
        for module in previous:
            if self._handles[module.index].module != module:
                raise InvariantViolation(
                    f"Visual handle for module {module.index} was built from a "
                    "different module than the one on screen"
                )
