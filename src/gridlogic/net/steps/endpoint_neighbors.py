"""Orients endpoints that can only reach one non-endpoint neighbour."""
from __future__ import annotations

from dataclasses import dataclass
import logging

from ...utils import only
from ..actions import LockOrientation
from ..grid_class import NetGrid
from ..tile_class import ALL_PORTS, TileKind
from .candidate_orientations import neighbor_checks
from .solver_step import NO_CHANGE, NetSolverDelegate, NetSolverStep, StepResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EndPointNeighborsSolverStep(NetSolverStep):
    """Checks the ports of an endpoint against neighbouring endpoints and barriers.

    Two endpoints joined together form a closed network of their own, so an
    endpoint never points at another endpoint. If all but one available port
    lead to endpoints, the tile is locked facing the remaining one.
    """

    name = "endpoint_neighbors"

    def apply(self, grid: NetGrid, delegate: NetSolverDelegate) -> StepResult:
        tile = grid.tile_at(self.column, self.row)
        if tile.is_locked or tile.kind != TileKind.END_POINT:
            return NO_CHANGE

        available = ALL_PORTS - delegate.unavailable_ports_for_tile(self.column, self.row)
        surrounding = grid.surrounding_tiles(self.column, self.row)
        target = only(
            surrounding,
            lambda neighbor: neighbor.edge in available and neighbor.tile.kind != TileKind.END_POINT,
        )
        if target is None:
            return NO_CHANGE

        orientation = target.edge.as_orientation
        logger.debug("Endpoint (%s, %s): locking %s", self.column, self.row, orientation.name)
        return StepResult(
            actions=(LockOrientation(self.column, self.row, orientation),),
            enqueued=neighbor_checks(grid, self.column, self.row),
        )
