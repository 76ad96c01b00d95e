"""Completion queries for pipe puzzle snapshots."""
from __future__ import annotations

import networkx as nx

from .grid_class import NetGrid
from .tile_class import EdgePort, TileKind


class NetGridController:
    """Read-side helpers over a ``NetGrid`` as currently oriented."""

    def __init__(self, grid: NetGrid) -> None:
        self.grid = grid

    def open_ends(self) -> list[tuple[int, int, EdgePort]]:
        """Ports that do not meet a matching port on the other side, as (column, row, port)."""
        ends = []
        for column, row in self.grid.coordinates():
            for port in self.grid.tile_at(column, row).ports:
                coords = self.grid.neighbor_coordinates(column, row, port)
                if coords is None or port.opposite not in self.grid.tile_at(*coords).ports:
                    ends.append((column, row, port))
        return ends

    def connection_graph(self) -> nx.MultiGraph:
        """Graph of non-empty tiles joined by each pair of facing open ports."""
        graph = nx.MultiGraph()
        for column, row in self.grid.coordinates():
            tile = self.grid.tile_at(column, row)
            if tile.kind == TileKind.EMPTY:
                continue
            graph.add_node((column, row))
            # Only add each connection from one side.
            for port in tile.ports & {EdgePort.RIGHT, EdgePort.BOTTOM}:
                coords = self.grid.neighbor_coordinates(column, row, port)
                if coords is not None and port.opposite in self.grid.tile_at(*coords).ports:
                    graph.add_edge((column, row), coords, port=port.value)
        return graph

    @property
    def is_solved(self) -> bool:
        """True when every pipe connects, all tiles form one network and it has no loops."""
        if self.open_ends():
            return False
        graph = self.connection_graph()
        if graph.number_of_nodes() == 0:
            return False
        return nx.is_tree(graph)
