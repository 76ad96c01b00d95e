"""Rectangular tile grid for pipe puzzles."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterator, NamedTuple, Sequence

from .tile_class import ALL_PORTS, EdgePort, Tile


class SurroundingTile(NamedTuple):
    """Neighbour of a tile, reached through ``edge``."""

    edge: EdgePort
    column: int
    row: int
    tile: Tile


@dataclass(frozen=True)
class NetGrid:
    """Immutable snapshot of a pipe puzzle.

    Attributes:
        tiles: Rows of tiles, top to bottom.
        wrapping: If True, moving off one side re-enters on the opposite side;
            otherwise moves clamp at the border and the border counts as a
            barrier.
        barriers: Walls as ``(column, row, port)`` entries. A wall blocks both
            tiles it separates, so listing either side is enough.

    Raises:
        ValueError: If the grid is empty, ragged, or a barrier lies outside it.
    """

    tiles: tuple[tuple[Tile, ...], ...]
    wrapping: bool = False
    barriers: frozenset[tuple[int, int, EdgePort]] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not self.tiles or not self.tiles[0]:
            raise ValueError("NetGrid needs at least one tile")
        width = len(self.tiles[0])
        for row, tiles in enumerate(self.tiles):
            if len(tiles) != width:
                raise ValueError(f"row {row} has {len(tiles)} tiles, expected {width}")
        for column, row, port in self.barriers:
            if not (0 <= column < width and 0 <= row < len(self.tiles)):
                raise ValueError(f"barrier ({column}, {row}, {port.value}) outside {width}x{len(self.tiles)} grid")

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[Tile]],
        *,
        wrapping: bool = False,
        barriers: Sequence[tuple[int, int, EdgePort]] = (),
    ) -> NetGrid:
        return cls(tuple(tuple(row) for row in rows), wrapping, frozenset(barriers))

    @property
    def rows(self) -> int:
        return len(self.tiles)

    @property
    def columns(self) -> int:
        return len(self.tiles[0])

    def tile_at(self, column: int, row: int) -> Tile:
        return self.tiles[row][column]

    def coordinates(self) -> Iterator[tuple[int, int]]:
        """Yield every ``(column, row)``, row-major."""
        for row in range(self.rows):
            for column in range(self.columns):
                yield column, row

    def column_row_by_moving(self, column: int, row: int, direction: EdgePort) -> tuple[int, int]:
        """Step once towards ``direction``, wrapping or clamping at the border."""
        dc, dr = direction.offset
        column, row = column + dc, row + dr
        if self.wrapping:
            return column % self.columns, row % self.rows
        return min(max(column, 0), self.columns - 1), min(max(row, 0), self.rows - 1)

    def neighbor_coordinates(self, column: int, row: int, direction: EdgePort) -> tuple[int, int] | None:
        """Coordinates of the neighbour towards ``direction``, or None past a bounded border."""
        if not self.wrapping:
            dc, dr = direction.offset
            if not (0 <= column + dc < self.columns and 0 <= row + dr < self.rows):
                return None
        return self.column_row_by_moving(column, row, direction)

    def surrounding_tiles(self, column: int, row: int) -> list[SurroundingTile]:
        """Return the existing neighbours of a tile, in clockwise port order."""
        surrounding = []
        for edge in (EdgePort.TOP, EdgePort.RIGHT, EdgePort.BOTTOM, EdgePort.LEFT):
            coords = self.neighbor_coordinates(column, row, edge)
            if coords is not None:
                surrounding.append(SurroundingTile(edge, coords[0], coords[1], self.tile_at(*coords)))
        return surrounding

    def barriers_for_tile(self, column: int, row: int) -> set[EdgePort]:
        """Return the sides of a tile closed by a wall or, on bounded grids, the border."""
        blocked: set[EdgePort] = set()
        for port in ALL_PORTS:
            if (column, row, port) in self.barriers:
                blocked.add(port)
                continue
            coords = self.neighbor_coordinates(column, row, port)
            if coords is None:
                blocked.add(port)
            elif (coords[0], coords[1], port.opposite) in self.barriers:
                blocked.add(port)
        return blocked

    def with_tile(self, column: int, row: int, tile: Tile) -> NetGrid:
        """Return a new snapshot with one tile replaced."""
        rows = list(self.tiles)
        cells = list(rows[row])
        cells[column] = tile
        rows[row] = tuple(cells)
        return replace(self, tiles=tuple(rows))

    def unlocked_count(self) -> int:
        return sum(1 for column, row in self.coordinates() if not self.tile_at(column, row).is_locked)
