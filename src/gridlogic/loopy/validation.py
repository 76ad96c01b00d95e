"""Contradiction and completion queries for loop puzzle snapshots."""
from __future__ import annotations

import networkx as nx

from ..utils import count_where
from .grid_class import EdgeState, LoopyGrid


def marked_edge_graph(grid: LoopyGrid) -> nx.Graph:
    """Build the graph of marked edges (vertices as nodes)."""
    graph = nx.Graph()
    for edge_id in range(grid.edge_count):
        if grid.edge_state(edge_id) == EdgeState.MARKED:
            start, end = grid.edge_vertices(edge_id)
            graph.add_edge(start, end, edge=edge_id)
    return graph


def find_contradictions(grid: LoopyGrid) -> list[str]:
    """Return a description of every constraint the snapshot already violates.

    Checks:
    - Edges a step tried to move out of a terminal state.
    - Vertices with more than two marked edges.
    - Vertices where a marked edge cannot continue (no other enabled edge).
    - Faces with more marked edges than their hint, or too few edges left
      to reach it.
    - A closed loop of marked edges while other marked edges exist outside it.

    Args:
        grid: Snapshot to check.

    Returns:
        List of human-readable violations (empty when none are found).
    """
    problems: list[str] = [f"edge {edge}: conflicting deductions" for edge in sorted(grid.conflicted_edges)]

    for vertex in range(grid.vertex_count):
        edges = grid.edges_sharing_vertex(vertex)
        marked = len(grid.edges_with_state(edges, EdgeState.MARKED))
        normal = len(grid.edges_with_state(edges, EdgeState.NORMAL))
        if marked > 2:
            problems.append(f"vertex {vertex}: {marked} marked edges")
        elif marked == 1 and normal == 0:
            problems.append(f"vertex {vertex}: marked edge has no continuation")

    for face_id in grid.face_ids:
        hint = grid.hint_for_face(face_id)
        if hint is None:
            continue
        edges = grid.edges_for_face(face_id)
        marked = len(grid.edges_with_state(edges, EdgeState.MARKED))
        normal = len(grid.edges_with_state(edges, EdgeState.NORMAL))
        if marked > hint:
            problems.append(f"face {face_id}: {marked} marked edges exceed hint {hint}")
        elif marked + normal < hint:
            problems.append(f"face {face_id}: at most {marked + normal} edges left for hint {hint}")

    graph = marked_edge_graph(grid)
    components = list(nx.connected_components(graph))
    if len(components) > 1:
        for component in components:
            sub = graph.subgraph(component)
            if all(degree == 2 for _, degree in sub.degree()):
                problems.append(f"closed loop through {len(component)} vertices leaves other marked edges outside")
                break
    return problems


def is_solved(grid: LoopyGrid) -> bool:
    """Return True when the marked edges form one closed loop meeting every hint."""
    if grid.conflicted_edges:
        return False
    graph = marked_edge_graph(grid)
    if graph.number_of_nodes() == 0:
        return False
    if any(degree != 2 for _, degree in graph.degree()):
        return False
    if not nx.is_connected(graph):
        return False
    for face_id in grid.face_ids:
        hint = grid.hint_for_face(face_id)
        if hint is None:
            continue
        marked = count_where(grid.edges_for_face(face_id), lambda edge: grid.edge_state(edge) == EdgeState.MARKED)
        if marked != hint:
            return False
    return True
