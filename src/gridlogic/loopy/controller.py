"""Write access to loop puzzle snapshots."""
from __future__ import annotations

import logging
from typing import Iterable

from .grid_class import EdgeState, LoopyGrid

logger = logging.getLogger(__name__)


class LoopyGridController:
    """Accumulates edge-state changes on a private copy of a snapshot.

    Only ``NORMAL`` edges may change. Asking a decided edge for the opposite
    state leaves it untouched and records the edge as conflicted on the
    snapshot, where the drivers pick it up as a contradiction.
    """

    def __init__(self, grid: LoopyGrid) -> None:
        self._grid = grid._copy(writeable=True)
        self.changed = 0

    @property
    def grid(self) -> LoopyGrid:
        """Working grid; reflects every change made so far."""
        return self._grid

    def set_edge_state(self, edge: int, state: EdgeState) -> bool:
        """Move ``edge`` to ``state``. Returns True if the edge changed."""
        current = self._grid.edge_state(edge)
        if current == state:
            return False
        if current != EdgeState.NORMAL or state == EdgeState.NORMAL:
            if edge not in self._grid.conflicted_edges:
                logger.debug("Conflict on edge %s: %s requested over %s", edge, state.name, current.name)
                self._grid._add_conflict(edge)
            return False
        self._grid._write_state(edge, state)
        self.changed += 1
        return True

    def set_edges_state(self, edges: Iterable[int], state: EdgeState) -> int:
        """Move every edge in ``edges`` to ``state``. Returns the number changed."""
        return sum(1 for edge in list(edges) if self.set_edge_state(edge, state))

    def snapshot(self) -> LoopyGrid:
        """Return an immutable snapshot of the working grid."""
        return self._grid._copy()
