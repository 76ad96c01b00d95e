from .engine import solve
from .loader import Puzzle, load_puzzle_yaml
from .results import ResultState
from .loopy import EdgeState, LoopyGrid, LoopySolver, LoopySquareGridGen
from .net import NetGrid, NetSolver, Orientation, Tile, TileKind

__all__ = [
    "EdgeState",
    "LoopyGrid",
    "LoopySolver",
    "LoopySquareGridGen",
    "NetGrid",
    "NetSolver",
    "Orientation",
    "Puzzle",
    "ResultState",
    "Tile",
    "TileKind",
    "load_puzzle_yaml",
    "solve",
]
