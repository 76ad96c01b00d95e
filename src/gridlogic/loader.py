"""Load puzzle instances from YAML files.

Loop puzzle, square layout::

    family: loopy
    width: 2
    height: 2
    hints:            # one row per face row, null for no hint
      - [null, null]
      - [null, 1]
    edges:            # optional pre-decided edges, by edge id
      marked: [5]
      disabled: []

Loop puzzle, arbitrary polygons::

    family: loopy
    vertices: [[0, 0], [1, 0], [1, 1], [0, 1]]
    faces:
      - {vertices: [0, 1, 2, 3], hint: 4}

Pipe puzzle::

    family: net
    wrapping: false
    tiles:            # one string per row; tokens are kind, orientation, '!' if locked
      - "Ee In Ew"
    barriers:
      - [0, 0, right]
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any
import warnings

import yaml

from .loopy import EdgeState, LoopyGrid, LoopyGridBuilder, LoopySquareGridGen
from .utils import ensure_list
from .net import EdgePort, NetGrid, Orientation, Tile, TileKind

FAMILIES = ("loopy", "net")
LOOPY_KEYS = {"family", "name", "width", "height", "hints", "vertices", "faces", "edges"}
NET_KEYS = {"family", "name", "wrapping", "tiles", "barriers"}

_ORIENTATION_CODES = {
    "n": Orientation.NORTH,
    "e": Orientation.EAST,
    "s": Orientation.SOUTH,
    "w": Orientation.WEST,
}


@dataclass
class Puzzle:
    """A loaded puzzle: its family, optional display name and initial grid."""

    family: str
    grid: LoopyGrid | NetGrid
    name: str | None = None
    source: Path | None = None


def load_puzzle_yaml(path: Path | str) -> Puzzle:
    """Load a loop or pipe puzzle from ``path``.

    Raises:
        FileNotFoundError: If ``path`` is not a file.
        ValueError: If the content is malformed.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"puzzle file not found at {path}")

    data = yaml.safe_load(path.read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"puzzle file at {path} must contain a mapping at the top level")

    family = data.get("family")
    if family not in FAMILIES:
        raise ValueError(f"'family' must be one of {', '.join(FAMILIES)} in {path}, got {family!r}")

    known = LOOPY_KEYS if family == "loopy" else NET_KEYS
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        warnings.warn(f"Ignoring unknown key(s) in {path}: {', '.join(unknown)}", UserWarning)

    if family == "loopy":
        grid: LoopyGrid | NetGrid = _parse_loopy(data, path)
    else:
        grid = _parse_net(data, path)
    return Puzzle(family=family, grid=grid, name=data.get("name"), source=path)


def _parse_loopy(data: dict[str, Any], path: Path) -> LoopyGrid:
    if "faces" in data:
        grid = _parse_polygons(data, path)
    else:
        grid = _parse_square(data, path)

    edges_raw = data.get("edges") or {}
    if not isinstance(edges_raw, dict):
        raise ValueError(f"'edges' must be a mapping in {path}")
    marked = set(_int_list(edges_raw.get("marked"), "edges.marked", path))
    disabled = set(_int_list(edges_raw.get("disabled"), "edges.disabled", path))
    both = marked & disabled
    if both:
        raise ValueError(f"edge(s) {sorted(both)} both marked and disabled in {path}")
    for edge in marked | disabled:
        if not 0 <= edge < grid.edge_count:
            raise ValueError(f"edge {edge} outside grid with {grid.edge_count} edges in {path}")
    states = {edge: EdgeState.MARKED for edge in marked}
    states.update({edge: EdgeState.DISABLED for edge in disabled})
    return grid.with_edge_states(states) if states else grid


def _parse_square(data: dict[str, Any], path: Path) -> LoopyGrid:
    missing = [key for key in ("width", "height") if key not in data]
    if missing:
        raise ValueError(f"Missing required field(s) in {path}: {', '.join(missing)}")
    width = _to_int(data["width"], "width", path)
    height = _to_int(data["height"], "height", path)
    gen = LoopySquareGridGen(width, height)

    hints = data.get("hints") or []
    if not isinstance(hints, list) or len(hints) > height:
        raise ValueError(f"'hints' must be a list of at most {height} rows in {path}")
    for y, row in enumerate(hints):
        if not isinstance(row, list) or len(row) > width:
            raise ValueError(f"hints row {y} must be a list of at most {width} entries in {path}")
        for x, hint in enumerate(row):
            if hint is not None:
                gen.set_hint(x, y, _to_int(hint, f"hints[{y}][{x}]", path))
    return gen.generate()


def _parse_polygons(data: dict[str, Any], path: Path) -> LoopyGrid:
    builder = LoopyGridBuilder()
    vertices = data.get("vertices")
    if not isinstance(vertices, list) or not vertices:
        raise ValueError(f"'vertices' must be a non-empty list of [x, y] pairs in {path}")
    for idx, point in enumerate(vertices):
        if not isinstance(point, list) or len(point) != 2:
            raise ValueError(f"vertex {idx} must be an [x, y] pair in {path}")
        builder.add_vertex(_to_float(point[0], f"vertices[{idx}]", path), _to_float(point[1], f"vertices[{idx}]", path))

    faces = data.get("faces")
    if not isinstance(faces, list):
        raise ValueError(f"'faces' must be a list in {path}")
    for idx, face in enumerate(faces):
        if not isinstance(face, dict):
            raise ValueError(f"face {idx} must be a mapping in {path}")
        indices = _int_list(face.get("vertices"), f"faces[{idx}].vertices", path)
        for vertex in indices:
            if not 0 <= vertex < len(vertices):
                raise ValueError(f"face {idx} references unknown vertex {vertex} in {path}")
        hint = face.get("hint")
        builder.create_face(indices, hint=None if hint is None else _to_int(hint, f"faces[{idx}].hint", path))
    return builder.build()


def _parse_net(data: dict[str, Any], path: Path) -> NetGrid:
    rows_raw = data.get("tiles")
    if not isinstance(rows_raw, list) or not rows_raw:
        raise ValueError(f"'tiles' must be a non-empty list of rows in {path}")
    rows = []
    for row_idx, row in enumerate(rows_raw):
        tokens = row.split() if isinstance(row, str) else row
        if not isinstance(tokens, list):
            raise ValueError(f"tiles row {row_idx} must be a string or list in {path}")
        rows.append([parse_tile_token(str(token)) for token in tokens])

    try:
        entries = ensure_list(data.get("barriers"), name="barriers", item_desc="[column, row, port] entries")
    except TypeError as exc:
        raise ValueError(f"{exc} in {path}") from None
    barriers = []
    for idx, entry in enumerate(entries):
        if not isinstance(entry, list) or len(entry) != 3:
            raise ValueError(f"barrier {idx} must be [column, row, port] in {path}")
        try:
            port = EdgePort(str(entry[2]).lower())
        except ValueError:
            raise ValueError(f"barrier {idx} has unknown port {entry[2]!r} in {path}") from None
        column = _to_int(entry[0], f"barriers[{idx}] column", path)
        row = _to_int(entry[1], f"barriers[{idx}] row", path)
        barriers.append((column, row, port))

    return NetGrid.from_rows(rows, wrapping=bool(data.get("wrapping", False)), barriers=barriers)


def parse_tile_token(token: str) -> Tile:
    """Parse a tile token such as ``"Ln"``, ``"Ee!"`` or ``"."``.

    The first character is the kind code (``I L T E .``), the optional second
    the orientation (``n e s w``, default north), and a trailing ``!`` locks
    the tile.

    Raises:
        ValueError: If the token is not recognised.
    """
    text = token.strip()
    locked = text.endswith("!")
    if locked:
        text = text[:-1]
    if not 1 <= len(text) <= 2:
        raise ValueError(f"Unknown tile token {token!r}")
    try:
        kind = TileKind(text[0].upper())
    except ValueError:
        raise ValueError(f"Unknown tile kind in token {token!r}") from None
    orientation = Orientation.NORTH
    if len(text) == 2:
        orientation = _ORIENTATION_CODES.get(text[1].lower())
        if orientation is None:
            raise ValueError(f"Unknown orientation in token {token!r}")
    return Tile(kind, orientation, locked)


def _int_list(value: object, label: str, path: Path) -> list[int]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"'{label}' must be a list of integers in {path}")
    return [_to_int(item, label, path) for item in value]


def _to_int(value: object, label: str, path: Path) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"'{label}' must be an integer in {path}, got {value!r}") from None


def _to_float(value: object, label: str, path: Path) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"'{label}' must be a number in {path}, got {value!r}") from None
