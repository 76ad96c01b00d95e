"""Contract shared by pipe puzzle inference rules."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Protocol

from ..actions import GridAction
from ..grid_class import NetGrid
from ..tile_class import EdgePort


class NetSolverDelegate(Protocol):
    """Read-only queries a step may make against the driver."""

    def unavailable_ports_for_tile(self, column: int, row: int) -> set[EdgePort]:
        ...


@dataclass(frozen=True)
class StepResult:
    """What one step application asks the driver to do.

    Attributes:
        actions: Grid mutations, performed in order.
        enqueued: Steps appended to the back of the work queue.
        is_invalid: True if the step proved the grid has no solution.
    """

    actions: tuple[GridAction, ...] = ()
    enqueued: tuple["NetSolverStep", ...] = ()
    is_invalid: bool = False


NO_CHANGE = StepResult()


@dataclass(frozen=True)
class NetSolverStep:
    """One inference rule bound to the tile at (column, row)."""

    name: ClassVar[str] = ""

    column: int
    row: int

    def apply(self, grid: NetGrid, delegate: NetSolverDelegate) -> StepResult:
        raise NotImplementedError
