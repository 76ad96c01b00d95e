"""Settles faces whose hint is already met or can only just be met."""
from __future__ import annotations

import logging

from ..controller import LoopyGridController
from ..grid_class import EdgeState, LoopyGrid
from .solver_step import SolverStep

logger = logging.getLogger(__name__)


class ExactEdgeCountSolverStep(SolverStep):
    """Completes hinted faces from their edge counts, repeating until nothing changes.

    - marked == hint: the remaining undecided edges are disabled.
    - marked + undecided == hint: the undecided edges are all marked.

    A zero hint is the first case with nothing marked.
    """

    name = "exact_edge_count"

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
        for face_id in grid.face_ids:
            hint = grid.hint_for_face(face_id)
            if hint is None:
                continue
            edges = grid.edges_for_face(face_id)
            marked = grid.edges_with_state(edges, EdgeState.MARKED)
            normal = grid.edges_with_state(edges, EdgeState.NORMAL)
            if not normal:
                continue
            if len(marked) == hint:
                logger.debug("Face %s: hint %s met, disabling %s edges", face_id, hint, len(normal))
                controller.set_edges_state(normal, EdgeState.DISABLED)
            elif len(marked) + len(normal) == hint:
                logger.debug("Face %s: hint %s needs all %s open edges", face_id, hint, len(normal))
                controller.set_edges_state(normal, EdgeState.MARKED)
