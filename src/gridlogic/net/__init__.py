"""Pipe-orientation puzzle: tile grid, metadata cache, steps and queue driver."""
from .actions import GridAction, LockOrientation
from .controller import NetGridController
from .grid_class import NetGrid, SurroundingTile
from .invocation import SolverInvocation, SolverInvocationResult
from .metadata import GridMetadata
from .solver_class import NetSolver
from .steps import NET_STEPS, NetSolverDelegate, NetSolverStep, StepResult
from .tile_class import ALL_PORTS, EdgePort, Orientation, Tile, TileKind, ports_for

__all__ = [
    "ALL_PORTS",
    "EdgePort",
    "GridAction",
    "GridMetadata",
    "LockOrientation",
    "NET_STEPS",
    "NetGrid",
    "NetGridController",
    "NetSolver",
    "NetSolverDelegate",
    "NetSolverStep",
    "Orientation",
    "SolverInvocation",
    "SolverInvocationResult",
    "StepResult",
    "SurroundingTile",
    "Tile",
    "TileKind",
    "ports_for",
]
