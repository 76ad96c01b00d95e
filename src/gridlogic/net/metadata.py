"""Derived per-tile facts over one pipe puzzle snapshot."""
from __future__ import annotations

from .grid_class import NetGrid
from .tile_class import ALL_PORTS, EdgePort, Orientation


class GridMetadata:
    """Lazily computed facts about a single ``NetGrid`` snapshot.

    The cache is bound to the snapshot it was built for. Callers holding a
    newer snapshot must check ``is_current_for`` and rebuild; the invocation
    driver does so on every query.
    """

    def __init__(self, grid: NetGrid) -> None:
        self.grid = grid
        self._unavailable: dict[tuple[int, int], frozenset[EdgePort]] = {}

    def is_current_for(self, grid: NetGrid) -> bool:
        return grid is self.grid

    def guaranteed_unavailable_ports(self, column: int, row: int) -> frozenset[EdgePort]:
        """Ports a tile leaves closed in every orientation it can still take.

        A locked tile keeps its orientation, so everything but its open ports
        is unavailable. An unlocked tile may take any orientation that keeps
        its ports off its barriers; ports open in none of them are
        unavailable.
        """
        key = (column, row)
        cached = self._unavailable.get(key)
        if cached is not None:
            return cached

        tile = self.grid.tile_at(column, row)
        if tile.is_locked:
            result = ALL_PORTS - tile.ports
        else:
            barriers = self.grid.barriers_for_tile(column, row)
            reachable: set[EdgePort] = set()
            for orientation in Orientation:
                ports = tile.ports_for(orientation)
                if not ports & barriers:
                    reachable.update(ports)
            result = ALL_PORTS - reachable
        self._unavailable[key] = result
        return result
