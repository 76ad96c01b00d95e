"""Queue-driven application of pipe puzzle steps."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Sequence
import logging

from ..results import ResultState
from .actions import GridAction, LockOrientation
from .controller import NetGridController
from .grid_class import NetGrid
from .metadata import GridMetadata
from .steps import NetSolverStep
from .tile_class import EdgePort

logger = logging.getLogger(__name__)


@dataclass
class SolverInvocationResult:
    state: ResultState
    grid: NetGrid
    steps_applied: int


class SolverInvocation:
    """Applies queued steps to a grid, one at a time, until none remain.

    Steps are taken first-in first-out. The actions a step returns are
    performed, in order, before the next step is taken, so every step sees
    all earlier mutations. A step reporting the grid invalid stops the run at
    once: its actions are dropped and the remaining queue is ignored. An
    action that contradicts an earlier lock stops the run the same way, and
    the rest of that step's actions and enqueued steps are dropped.

    The invocation is also the steps' read-only delegate; see
    ``unavailable_ports_for_tile``.
    """

    def __init__(self, grid: NetGrid, steps: Iterable[NetSolverStep] = (), *, verbose: bool = False) -> None:
        self.grid = grid
        self.steps: deque[NetSolverStep] = deque(steps)
        self.is_valid = True
        self.steps_applied = 0
        self._metadata = GridMetadata(grid)

        base_logger = logger.getChild(self.__class__.__name__)
        base_logger.setLevel(logging.INFO if verbose else logging.WARNING)
        self._log = logging.LoggerAdapter(base_logger, {"invocation_id": id(self), "step_count": 0})

    @property
    def metadata(self) -> GridMetadata:
        """Metadata for the current grid, rebuilt whenever the grid has changed."""
        if not self._metadata.is_current_for(self.grid):
            self._metadata = GridMetadata(self.grid)
        return self._metadata

    def enqueue(self, step: NetSolverStep) -> None:
        self.steps.append(step)

    def mark_invalid(self) -> None:
        self.is_valid = False

    def apply(self) -> SolverInvocationResult:
        """Apply all currently enqueued solver steps."""
        self._log.info("Starting invocation: %s queued steps, %s unlocked tiles", len(self.steps), self.grid.unlocked_count())
        while self.steps and self.is_valid:
            step = self.steps.popleft()
            self.steps_applied += 1
            self._log.extra["step_count"] = self.steps_applied

            result = step.apply(self.grid, self)
            if result.is_invalid:
                self._log.info("%s at (%s, %s) found a contradiction", type(step).__name__, step.column, step.row)
                self.mark_invalid()
                break
            self.grid = self.perform_grid_actions(result.actions, self.grid)
            if not self.is_valid:
                break
            for queued in result.enqueued:
                self.enqueue(queued)

        if self.is_valid:
            state = ResultState.SOLVED if NetGridController(self.grid).is_solved else ResultState.UNSOLVED
        else:
            state = ResultState.INVALID
        self._log.info("Finished after %s steps: %s", self.steps_applied, state.value)
        return SolverInvocationResult(state=state, grid=self.grid, steps_applied=self.steps_applied)

    def perform_grid_actions(self, actions: Sequence[GridAction], grid: NetGrid) -> NetGrid:
        """Apply ``actions`` in order, stopping at the first one that makes the grid invalid."""
        for action in actions:
            grid = self.perform_grid_action(action, grid)
            if not self.is_valid:
                break
        return grid

    def perform_grid_action(self, action: GridAction, grid: NetGrid) -> NetGrid:
        """Return ``grid`` with ``action`` applied.

        Locking a tile that is already locked to another orientation marks the
        invocation invalid and leaves the grid unchanged.
        """
        if isinstance(action, LockOrientation):
            tile = grid.tile_at(action.column, action.row)
            if tile.is_locked:
                if tile.orientation != action.orientation:
                    self._log.info(
                        "Tile (%s, %s) locked to %s, cannot relock to %s",
                        action.column,
                        action.row,
                        tile.orientation.name,
                        action.orientation.name,
                    )
                    self.mark_invalid()
                return grid
            return grid.with_tile(action.column, action.row, tile.locked(action.orientation))
        raise TypeError(f"Unsupported grid action: {action!r}")

    def unavailable_ports_for_tile(self, column: int, row: int) -> set[EdgePort]:
        """Ports of a tile that cannot be part of the solution.

        Starts from the tile's barriers, then adds each side whose neighbour is
        locked facing away from the tile, or whose neighbour can never open
        the port that would face back.
        """
        unavailable = self.grid.barriers_for_tile(column, row)
        metadata = self.metadata

        for edge_port in EdgePort:
            coords = self.grid.neighbor_coordinates(column, row, edge_port)
            if coords is None:
                continue
            back_edge_port = edge_port.opposite
            neighbor = self.grid.tile_at(*coords)
            if neighbor.is_locked and back_edge_port not in neighbor.ports:
                unavailable.add(edge_port)
            elif back_edge_port in metadata.guaranteed_unavailable_ports(*coords):
                unavailable.add(edge_port)
        return unavailable
