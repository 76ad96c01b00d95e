"""Construction helpers that turn polygon lists into ``LoopyGrid`` snapshots."""
from __future__ import annotations

from typing import Sequence

from .grid_class import Edge, Face, LoopyGrid, Vertex


class LoopyGridBuilder:
    """Incrementally collects vertices and faces, sharing edges between faces.

    Edges are numbered in creation order: each new face walks its vertices in
    order and creates an edge for every consecutive pair that no earlier face
    has created.
    """

    def __init__(self) -> None:
        self.vertices: list[Vertex] = []
        self.edges: list[Edge] = []
        self.faces: list[Face] = []
        self._edge_lookup: dict[tuple[int, int], int] = {}

    def add_vertex(self, x: float, y: float) -> int:
        self.vertices.append(Vertex(x, y))
        return len(self.vertices) - 1

    def edge_between(self, start: int, end: int) -> int:
        """Return the id of the edge joining two vertices, creating it if needed."""
        key = (min(start, end), max(start, end))
        edge_id = self._edge_lookup.get(key)
        if edge_id is None:
            edge_id = len(self.edges)
            self.edges.append(Edge(start, end))
            self._edge_lookup[key] = edge_id
        return edge_id

    def create_face(self, indices: Sequence[int], hint: int | None = None) -> int:
        """Add a face over ``indices`` (in boundary order) and return its id."""
        indices = tuple(indices)
        count = len(indices)
        edges = tuple(self.edge_between(indices[i], indices[(i + 1) % count]) for i in range(count))
        self.faces.append(Face(indices=indices, local_to_global_edges=edges, hint=hint))
        return len(self.faces) - 1

    def build(self) -> LoopyGrid:
        return LoopyGrid(self.vertices, self.edges, self.faces)


class LoopySquareGridGen:
    """Builds a ``width`` x ``height`` square-face grid.

    Vertices are numbered row-major (``y * (width + 1) + x``), faces row-major
    (``y * width + x``). Each face lists its vertices top-left, top-right,
    bottom-right, bottom-left, so its local edges are top, right, bottom, left.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"grid size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._hints: dict[tuple[int, int], int | None] = {}

    def set_hint(self, x: int, y: int, hint: int | None) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError(f"face ({x}, {y}) outside {self.width}x{self.height} grid")
        self._hints[(x, y)] = hint

    def generate(self) -> LoopyGrid:
        builder = LoopyGridBuilder()
        for y in range(self.height + 1):
            for x in range(self.width + 1):
                builder.add_vertex(x, y)

        stride = self.width + 1
        for y in range(self.height):
            for x in range(self.width):
                top_left = y * stride + x
                bottom_left = top_left + stride
                builder.create_face(
                    (top_left, top_left + 1, bottom_left + 1, bottom_left),
                    hint=self._hints.get((x, y)),
                )
        return builder.build()
