"""Closes vertices that already carry two loop edges."""
from __future__ import annotations

import logging

from ...utils import only_two
from ..controller import LoopyGridController
from ..grid_class import EdgeState, LoopyGrid
from .solver_step import SolverStep

logger = logging.getLogger(__name__)


class SaturatedVertexSolverStep(SolverStep):
    """Disables every undecided edge at a vertex with two marked edges."""

    name = "saturated_vertex"

    def apply(self, grid: LoopyGrid) -> LoopyGrid:
        controller = LoopyGridController(grid)
        grid = controller.grid
        for vertex in range(grid.vertex_count):
            edges = grid.edges_sharing_vertex(vertex)
            if only_two(edges, lambda edge: grid.edge_state(edge) == EdgeState.MARKED) is None:
                continue
            normal = grid.edges_with_state(edges, EdgeState.NORMAL)
            if normal:
                logger.debug("Vertex %s: two marked edges, disabling %s", vertex, normal)
                controller.set_edges_state(normal, EdgeState.DISABLED)
        return controller.snapshot()
