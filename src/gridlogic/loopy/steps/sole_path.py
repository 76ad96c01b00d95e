"""Extends marked edges through vertices that offer a single way out."""
from __future__ import annotations

import logging

from ..controller import LoopyGridController
from ..grid_class import EdgeState, LoopyGrid
from .solver_step import SolverStep

logger = logging.getLogger(__name__)


class SolePathEdgeExtenderSolverStep(SolverStep):
    """Marks the only undecided edge at a vertex holding one marked edge.

    A loop vertex has exactly two loop edges. In the following example the
    marked edge ends in a corner with disabled edges around it::

        ........
        !__.__._ -
           '

    so the line must continue through the only remaining path::

        .__.__._
        !__.__._ -
           '

    The rule is repeated over all vertices until a full sweep changes nothing.
    """

    name = "sole_path_edge_extender"

    def apply(self, grid: LoopyGrid) -> LoopyGrid:
        controller = LoopyGridController(grid)
        while True:
            before = controller.changed
            self._sweep(controller)
            if controller.changed == before:
                return controller.snapshot()

    @staticmethod
    def _sweep(controller: LoopyGridController) -> None:
        grid = controller.grid
        for vertex in range(grid.vertex_count):
            edges = grid.edges_sharing_vertex(vertex)
            marked = grid.edges_with_state(edges, EdgeState.MARKED)
            normal = grid.edges_with_state(edges, EdgeState.NORMAL)
            if len(marked) == 1 and len(normal) == 1:
                logger.debug("Vertex %s: extending edge %s through edge %s", vertex, marked[0], normal[0])
                controller.set_edge_state(normal[0], EdgeState.MARKED)
