"""Deductions for a loop line entering a hinted face at one of its corners."""
from __future__ import annotations

import logging

from ..controller import LoopyGridController
from ..grid_class import EdgeState, Face, LoopyGrid
from .solver_step import SolverStep

logger = logging.getLogger(__name__)


class CornerEntrySolverStep(SolverStep):
    """Handles a marked edge that reaches a corner of a hinted face from outside.

    For a face F and a vertex V of F where exactly one marked edge E meets V
    and E is not an edge of F:

    - If F is semi-complete, the line must turn into F at V (otherwise both F
      edges at V stay unmarked). F's edges away from V are marked and the
      other outside edges at V are disabled::

          . _ . _ . _ .          . _ . _ . _ .
          ! _ ! _ ║ _ !   ->     ! _ ! _ ║ x !
          ! _ ! 3 ! _ !          ! _ ║ 3 ! _ !
                                     ‾‾‾

    - If F has a hint of 1 and every other enabled edge at V belongs to F,
      the line spends F's hint at V. F's edges away from V are disabled, and
      an F edge at V is disabled too when following the line along it is
      forced into a dead end or back into itself.
    """

    name = "corner_entry"

    def apply(self, grid: LoopyGrid) -> LoopyGrid:
        controller = LoopyGridController(grid)
        while True:
            before = controller.changed
            for face_id in grid.face_ids:
                face = grid.faces[face_id]
                if face.hint is None:
                    continue
                for vertex in face.indices:
                    self._apply_at_corner(controller, face_id, face, vertex)
            if controller.changed == before:
                return controller.snapshot()

    def _apply_at_corner(
        self,
        controller: LoopyGridController,
        face_id: int,
        face: Face,
        vertex: int,
    ) -> None:
        grid = controller.grid
        vertex_edges = grid.edges_sharing_vertex(vertex)
        marked = grid.edges_with_state(vertex_edges, EdgeState.MARKED)
        if len(marked) != 1 or face.contains_edge(marked[0]):
            return
        entry = marked[0]

        at_corner = [edge for edge in face.local_to_global_edges if grid.edge_touches_vertex(edge, vertex)]
        away = [edge for edge in face.local_to_global_edges if not grid.edge_touches_vertex(edge, vertex)]

        if face.is_semi_complete:
            if not any(grid.edge_state(edge).is_enabled for edge in at_corner):
                return
            outside = [edge for edge in vertex_edges if edge != entry and not face.contains_edge(edge)]
            logger.debug("Face %s: semi-complete entry at vertex %s through edge %s", face_id, vertex, entry)
            controller.set_edges_state(away, EdgeState.MARKED)
            controller.set_edges_state(outside, EdgeState.DISABLED)
            return

        if face.hint != 1:
            return
        exits = [edge for edge in vertex_edges if edge != entry and grid.edge_state(edge).is_enabled]
        if not exits or not all(face.contains_edge(edge) for edge in exits):
            return
        logger.debug("Face %s: hint 1 spent at vertex %s by edge %s", face_id, vertex, entry)
        controller.set_edges_state(away, EdgeState.DISABLED)
        for edge in at_corner:
            if grid.edge_state(edge) != EdgeState.NORMAL:
                continue
            if self._forced_path_fails(grid, face, vertex, entry, edge):
                logger.debug("Face %s: edge %s leads the line into a dead end", face_id, edge)
                controller.set_edge_state(edge, EdgeState.DISABLED)

    @staticmethod
    def _forced_path_fails(grid: LoopyGrid, face: Face, vertex: int, entry: int, candidate: int) -> bool:
        """Follow the line from ``vertex`` along ``candidate`` while its path is forced.

        The other edges of ``face`` are treated as unusable, since ``candidate``
        would spend the face's only loop edge. Returns True when the line is
        left without a continuation or runs into a vertex it already visited;
        returns False at the first real choice or when it closes through
        ``entry``.
        """
        blocked = {edge for edge in face.local_to_global_edges if edge != candidate}
        visited = {vertex}
        arriving = candidate
        current = grid.other_vertex(candidate, vertex)
        for _ in range(grid.edge_count):
            if current in visited:
                return True
            visited.add(current)
            continuations = [
                edge
                for edge in grid.edges_sharing_vertex(current)
                if edge != arriving and edge not in blocked and grid.edge_state(edge).is_enabled
            ]
            marked = grid.edges_with_state(continuations, EdgeState.MARKED)
            if len(marked) > 1:
                return True
            if marked:
                following = marked[0]
            elif len(continuations) == 1:
                following = continuations[0]
            elif not continuations:
                return True
            else:
                return False
            if following == entry:
                return False
            current = grid.other_vertex(following, current)
            arriving = following
        return False
