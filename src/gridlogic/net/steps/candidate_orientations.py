"""Eliminates orientations that clash with barriers and locked neighbours."""
from __future__ import annotations

from dataclasses import dataclass
import logging

from ..actions import LockOrientation
from ..grid_class import NetGrid
from ..tile_class import Orientation, TileKind
from .solver_step import NO_CHANGE, NetSolverDelegate, NetSolverStep, StepResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CandidateOrientationsSolverStep(NetSolverStep):
    """Locks a tile once every remaining orientation opens the same ports.

    An orientation survives when none of its ports is unavailable and it
    opens every port that a locked neighbour points back into. No survivor
    means the grid has no solution.
    """

    name = "candidate_orientations"

    def apply(self, grid: NetGrid, delegate: NetSolverDelegate) -> StepResult:
        tile = grid.tile_at(self.column, self.row)
        if tile.is_locked:
            return NO_CHANGE

        unavailable = delegate.unavailable_ports_for_tile(self.column, self.row)
        required = {
            neighbor.edge
            for neighbor in grid.surrounding_tiles(self.column, self.row)
            if neighbor.tile.is_locked and neighbor.edge.opposite in neighbor.tile.ports
        }
        candidates = [
            orientation
            for orientation in Orientation
            if not tile.ports_for(orientation) & unavailable and required <= tile.ports_for(orientation)
        ]
        if not candidates:
            logger.debug("Tile (%s, %s): no orientation fits", self.column, self.row)
            return StepResult(is_invalid=True)

        if len({tile.ports_for(orientation) for orientation in candidates}) > 1:
            return NO_CHANGE

        logger.debug("Tile (%s, %s): locking %s", self.column, self.row, candidates[0].name)
        return StepResult(
            actions=(LockOrientation(self.column, self.row, candidates[0]),),
            enqueued=neighbor_checks(grid, self.column, self.row),
        )


def neighbor_checks(grid: NetGrid, column: int, row: int) -> tuple[NetSolverStep, ...]:
    """Steps re-examining the unlocked neighbours of a tile that is being locked."""
    # Imported here: endpoint_neighbors imports this module.
    from .endpoint_neighbors import EndPointNeighborsSolverStep

    steps: list[NetSolverStep] = []
    for neighbor in grid.surrounding_tiles(column, row):
        if neighbor.tile.is_locked or (neighbor.column, neighbor.row) == (column, row):
            continue
        if neighbor.tile.kind == TileKind.END_POINT:
            steps.append(EndPointNeighborsSolverStep(neighbor.column, neighbor.row))
        steps.append(CandidateOrientationsSolverStep(neighbor.column, neighbor.row))
    return tuple(steps)
