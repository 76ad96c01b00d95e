"""Vertex/edge/face topology for loop puzzles.

A ``LoopyGrid`` is an immutable snapshot: the topology (vertices, edge
endpoints, faces and adjacency maps) is built once and shared between
snapshots, while the edge states live in a small read-only numpy vector that
is copied on write. Equality only has to compare that vector (plus the
recorded conflicts) when two snapshots share a topology.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Mapping, Sequence

import numpy as np


class EdgeState(IntEnum):
    """Solving state of an edge. ``MARKED`` and ``DISABLED`` are terminal."""

    NORMAL = 0
    MARKED = 1
    DISABLED = 2

    @property
    def is_enabled(self) -> bool:
        """Return True unless the edge is proven absent from the loop."""
        return self is not EdgeState.DISABLED


@dataclass(frozen=True)
class Vertex:
    """Grid vertex with a 2-D position."""

    x: float
    y: float


@dataclass(frozen=True)
class Edge:
    """Edge joining two vertices, with its state in the owning snapshot."""

    start: int
    end: int
    state: EdgeState = EdgeState.NORMAL

    def contains_vertex(self, vertex: int) -> bool:
        return vertex in (self.start, self.end)

    def shares_vertex(self, other: Edge) -> bool:
        return self.contains_vertex(other.start) or self.contains_vertex(other.end)

    def other_vertex(self, vertex: int) -> int:
        """Return the endpoint opposite ``vertex``.

        Raises:
            ValueError: If ``vertex`` is not an endpoint of this edge.
        """
        if vertex == self.start:
            return self.end
        if vertex == self.end:
            return self.start
        raise ValueError(f"vertex {vertex} is not an endpoint of edge {self.start}-{self.end}")


@dataclass(frozen=True)
class Face:
    """Closed polygon of grid edges with an optional hint.

    Attributes:
        indices: Vertex indices forming the boundary, in order.
        local_to_global_edges: Global edge id of each local edge; local edge
            ``i`` joins ``indices[i]`` and ``indices[i + 1]`` (wrapping).
        hint: Number of boundary edges that belong to the loop, if known.
    """

    indices: tuple[int, ...]
    local_to_global_edges: tuple[int, ...]
    hint: int | None = None

    @property
    def edges_count(self) -> int:
        return len(self.local_to_global_edges)

    @property
    def is_semi_complete(self) -> bool:
        """True when all but one edge of the face must be marked."""
        return self.hint is not None and self.hint == self.edges_count - 1

    def contains_edge(self, edge: int) -> bool:
        return edge in self.local_to_global_edges

    def to_local_edges(self, edges: Iterable[int]) -> list[int]:
        """Map global edge ids to local indices, skipping edges not on this face."""
        local = {global_id: idx for idx, global_id in enumerate(self.local_to_global_edges)}
        return [local[edge] for edge in edges if edge in local]


@dataclass(frozen=True)
class _Topology:
    """Static structure shared by every snapshot of one puzzle."""

    vertices: tuple[Vertex, ...]
    edge_vertices: tuple[tuple[int, int], ...]
    faces: tuple[Face, ...]
    # Adjacency, derived in LoopyGrid.__init__.
    vertex_edges: tuple[tuple[int, ...], ...] = field(compare=False)
    edge_faces: tuple[tuple[int, ...], ...] = field(compare=False)


class LoopyGrid:
    """Immutable snapshot of a loop puzzle: topology plus edge states.

    Args:
        vertices: Grid vertices; a vertex id is its index.
        edges: Grid edges; an edge id is its index. Edge states seed the
            snapshot.
        faces: Grid faces; a face id is its index.

    Raises:
        ValueError: If an edge or face references an unknown vertex or edge,
            a face edge does not join consecutive face vertices, or a hint
            is out of range.
    """

    def __init__(
        self,
        vertices: Sequence[Vertex],
        edges: Sequence[Edge],
        faces: Sequence[Face],
    ) -> None:
        vertices = tuple(vertices)
        edges = tuple(edges)
        faces = tuple(faces)
        vertex_edges: list[list[int]] = [[] for _ in vertices]
        for edge_id, edge in enumerate(edges):
            for vertex in (edge.start, edge.end):
                if not 0 <= vertex < len(vertices):
                    raise ValueError(f"edge {edge_id} references unknown vertex {vertex}")
            if edge.start == edge.end:
                raise ValueError(f"edge {edge_id} joins vertex {edge.start} to itself")
            vertex_edges[edge.start].append(edge_id)
            vertex_edges[edge.end].append(edge_id)

        edge_faces: list[list[int]] = [[] for _ in edges]
        for face_id, face in enumerate(faces):
            _validate_face(face_id, face, edges)
            for edge_id in face.local_to_global_edges:
                edge_faces[edge_id].append(face_id)

        self._topology = _Topology(
            vertices=vertices,
            edge_vertices=tuple((edge.start, edge.end) for edge in edges),
            faces=faces,
            vertex_edges=tuple(tuple(ids) for ids in vertex_edges),
            edge_faces=tuple(tuple(ids) for ids in edge_faces),
        )
        states = np.array([int(edge.state) for edge in edges], dtype=np.int8)
        states.flags.writeable = False
        self._states = states
        self._conflicts: frozenset[int] = frozenset()

    @classmethod
    def _from_parts(
        cls,
        topology: _Topology,
        states: np.ndarray,
        conflicts: frozenset[int],
    ) -> LoopyGrid:
        grid = cls.__new__(cls)
        grid._topology = topology
        grid._states = states
        grid._conflicts = conflicts
        return grid

    def _copy(self, *, writeable: bool = False) -> LoopyGrid:
        states = self._states.copy()
        states.flags.writeable = writeable
        return LoopyGrid._from_parts(self._topology, states, self._conflicts)

    def _write_state(self, edge: int, state: EdgeState) -> None:
        self._states[edge] = int(state)

    def _add_conflict(self, edge: int) -> None:
        self._conflicts = self._conflicts | {edge}

    # ------------------------------------------------------------------ #
    # Structure
    # ------------------------------------------------------------------ #
    @property
    def vertices(self) -> tuple[Vertex, ...]:
        return self._topology.vertices

    @property
    def faces(self) -> tuple[Face, ...]:
        return self._topology.faces

    @property
    def edges(self) -> list[Edge]:
        """Edges with their states in this snapshot."""
        return [
            Edge(start, end, EdgeState(int(state)))
            for (start, end), state in zip(self._topology.edge_vertices, self._states)
        ]

    @property
    def vertex_count(self) -> int:
        return len(self._topology.vertices)

    @property
    def edge_count(self) -> int:
        return len(self._topology.edge_vertices)

    @property
    def face_ids(self) -> range:
        return range(len(self._topology.faces))

    def edge_vertices(self, edge: int) -> tuple[int, int]:
        return self._topology.edge_vertices[edge]

    def edge_touches_vertex(self, edge: int, vertex: int) -> bool:
        return vertex in self._topology.edge_vertices[edge]

    def other_vertex(self, edge: int, vertex: int) -> int:
        """Return the endpoint of ``edge`` opposite ``vertex``."""
        start, end = self._topology.edge_vertices[edge]
        return Edge(start, end).other_vertex(vertex)

    def edges_sharing_vertex(self, vertex: int) -> tuple[int, ...]:
        """Return ids of edges incident to ``vertex``."""
        return self._topology.vertex_edges[vertex]

    def faces_sharing_edge(self, edge: int) -> tuple[int, ...]:
        """Return ids of the (one or two) faces bounded by ``edge``."""
        return self._topology.edge_faces[edge]

    def edges_for_face(self, face: int) -> tuple[int, ...]:
        """Return global edge ids of ``face`` in local order."""
        return self._topology.faces[face].local_to_global_edges

    def vertices_for_face(self, face: int) -> tuple[int, ...]:
        return self._topology.faces[face].indices

    def hint_for_face(self, face: int) -> int | None:
        return self._topology.faces[face].hint

    # ------------------------------------------------------------------ #
    # State
    # ------------------------------------------------------------------ #
    @property
    def edge_states(self) -> np.ndarray:
        """Read-only vector of edge states (``EdgeState`` values)."""
        return self._states

    @property
    def conflicted_edges(self) -> frozenset[int]:
        """Edges a step tried to move out of a terminal state."""
        return self._conflicts

    def edge_state(self, edge: int) -> EdgeState:
        return EdgeState(int(self._states[edge]))

    def count_edges(self, state: EdgeState) -> int:
        return int(np.count_nonzero(self._states == int(state)))

    def edges_with_state(self, edges: Iterable[int], state: EdgeState) -> list[int]:
        return [edge for edge in edges if self._states[edge] == int(state)]

    def with_edge_state(self, edge: int, state: EdgeState) -> LoopyGrid:
        """Return a new snapshot with ``edge`` set to ``state``.

        Intended for seeding fixtures; solving steps go through
        ``LoopyGridController`` which enforces terminal states.
        """
        return self.with_edge_states({edge: state})

    def with_edge_states(self, states: Mapping[int, EdgeState]) -> LoopyGrid:
        grid = self._copy(writeable=True)
        for edge, state in states.items():
            grid._write_state(edge, EdgeState(state))
        grid._states.flags.writeable = False
        return grid

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LoopyGrid):
            return NotImplemented
        if self._topology is not other._topology and self._topology != other._topology:
            return False
        return self._conflicts == other._conflicts and np.array_equal(self._states, other._states)

    def __hash__(self) -> int:
        return hash((self._topology, self._states.tobytes(), self._conflicts))

    def __repr__(self) -> str:
        return (
            f"LoopyGrid(vertices={self.vertex_count}, edges={self.edge_count}, "
            f"faces={len(self.faces)}, marked={self.count_edges(EdgeState.MARKED)}, "
            f"disabled={self.count_edges(EdgeState.DISABLED)})"
        )


def _validate_face(face_id: int, face: Face, edges: Sequence[Edge]) -> None:
    """Check a face's edge mapping and hint against the edge list."""
    count = len(face.indices)
    if count < 3:
        raise ValueError(f"face {face_id} needs at least 3 vertices, got {count}")
    if len(face.local_to_global_edges) != count:
        raise ValueError(f"face {face_id} has {count} vertices but {len(face.local_to_global_edges)} edges")
    for local, edge_id in enumerate(face.local_to_global_edges):
        if not 0 <= edge_id < len(edges):
            raise ValueError(f"face {face_id} references unknown edge {edge_id}")
        expected = {face.indices[local], face.indices[(local + 1) % count]}
        edge = edges[edge_id]
        if {edge.start, edge.end} != expected:
            raise ValueError(f"face {face_id} local edge {local} does not join vertices {sorted(expected)}")
    if face.hint is not None and not 0 <= face.hint <= count:
        raise ValueError(f"face {face_id} hint {face.hint} outside [0, {count}]")
