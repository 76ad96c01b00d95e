"""Tiles, ports and orientations for pipe puzzles."""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class EdgePort(Enum):
    """Side of a tile through which a pipe may leave it."""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"

    @property
    def opposite(self) -> EdgePort:
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 2) % 4]

    @property
    def as_orientation(self) -> Orientation:
        """Orientation that points a single-port tile out through this side."""
        return Orientation(_CLOCKWISE.index(self))

    @property
    def offset(self) -> tuple[int, int]:
        """(column, row) step towards the neighbour on this side."""
        return _OFFSETS[self]

    def rotated(self, quarter_turns: int) -> EdgePort:
        """Return the port reached by turning clockwise ``quarter_turns`` times."""
        return _CLOCKWISE[(_CLOCKWISE.index(self) + quarter_turns) % 4]


_CLOCKWISE = (EdgePort.TOP, EdgePort.RIGHT, EdgePort.BOTTOM, EdgePort.LEFT)
_OFFSETS = {
    EdgePort.TOP: (0, -1),
    EdgePort.RIGHT: (1, 0),
    EdgePort.BOTTOM: (0, 1),
    EdgePort.LEFT: (-1, 0),
}
ALL_PORTS: frozenset[EdgePort] = frozenset(EdgePort)


class Orientation(Enum):
    """Rotation of a tile, as clockwise quarter turns from north."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


class TileKind(Enum):
    """Pipe shape of a tile; values are the one-letter puzzle file codes."""

    I_LINE = "I"
    L_LINE = "L"
    T_LINE = "T"
    END_POINT = "E"
    EMPTY = "."


# Open ports of each kind when facing north.
_NORTH_PORTS: dict[TileKind, frozenset[EdgePort]] = {
    TileKind.I_LINE: frozenset({EdgePort.TOP, EdgePort.BOTTOM}),
    TileKind.L_LINE: frozenset({EdgePort.TOP, EdgePort.RIGHT}),
    TileKind.T_LINE: frozenset({EdgePort.LEFT, EdgePort.TOP, EdgePort.RIGHT}),
    TileKind.END_POINT: frozenset({EdgePort.TOP}),
    TileKind.EMPTY: frozenset(),
}


def ports_for(kind: TileKind, orientation: Orientation) -> frozenset[EdgePort]:
    """Return the open ports of ``kind`` rotated to ``orientation``."""
    return frozenset(port.rotated(orientation.value) for port in _NORTH_PORTS[kind])


@dataclass(frozen=True)
class Tile:
    """One grid cell: a pipe kind, its rotation and whether it is settled."""

    kind: TileKind
    orientation: Orientation = Orientation.NORTH
    is_locked: bool = False

    @property
    def ports(self) -> frozenset[EdgePort]:
        return ports_for(self.kind, self.orientation)

    def ports_for(self, orientation: Orientation) -> frozenset[EdgePort]:
        return ports_for(self.kind, orientation)

    def locked(self, orientation: Orientation) -> Tile:
        """Return this tile rotated to ``orientation`` and locked."""
        return replace(self, orientation=orientation, is_locked=True)
