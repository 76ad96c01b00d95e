"""Disables edges that could only lead into a dead end."""
from __future__ import annotations

import logging

from ..controller import LoopyGridController
from ..grid_class import EdgeState, LoopyGrid
from .solver_step import SolverStep

logger = logging.getLogger(__name__)


class DeadEndRemovalSolverStep(SolverStep):
    """Disables the last undecided edge of a vertex with no other enabled edge.

    A loop cannot stop at a vertex, so an edge whose endpoint has no other
    way out is never part of it. Repeated until a sweep changes nothing.
    """

    name = "dead_end_removal"

    def apply(self, grid: LoopyGrid) -> LoopyGrid:
        controller = LoopyGridController(grid)
        while True:
            before = controller.changed
            grid = controller.grid
            for vertex in range(grid.vertex_count):
                enabled = [edge for edge in grid.edges_sharing_vertex(vertex) if grid.edge_state(edge).is_enabled]
                if len(enabled) == 1 and grid.edge_state(enabled[0]) == EdgeState.NORMAL:
                    logger.debug("Vertex %s: edge %s is a dead end", vertex, enabled[0])
                    controller.set_edge_state(enabled[0], EdgeState.DISABLED)
            if controller.changed == before:
                return controller.snapshot()
