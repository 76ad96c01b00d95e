"""Loop-drawing puzzle: topology model, inference rules and fixed-point driver."""
from .controller import LoopyGridController
from .generator import LoopyGridBuilder, LoopySquareGridGen
from .grid_class import Edge, EdgeState, Face, LoopyGrid, Vertex
from .solver_class import LoopySolver, LoopySolverResult
from .steps import LOOPY_STEPS, SolverStep, make_steps
from .validation import find_contradictions, is_solved

__all__ = [
    "Edge",
    "EdgeState",
    "Face",
    "LOOPY_STEPS",
    "LoopyGrid",
    "LoopyGridBuilder",
    "LoopyGridController",
    "LoopySolver",
    "LoopySolverResult",
    "LoopySquareGridGen",
    "SolverStep",
    "Vertex",
    "find_contradictions",
    "is_solved",
    "make_steps",
]
