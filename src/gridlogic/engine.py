"""Single solving entry point for both puzzle families."""
from __future__ import annotations

from .loopy import LoopyGrid, LoopySolver, LoopySolverResult
from .net import NetGrid, NetSolver, SolverInvocationResult


def solve(grid: LoopyGrid | NetGrid, *, verbose: bool = False) -> LoopySolverResult | SolverInvocationResult:
    """Run the default solver for ``grid`` and return its result.

    The input snapshot is never modified; the result carries the final one
    and a ``ResultState`` (solved, unsolved or invalid).

    Raises:
        TypeError: If ``grid`` is neither a ``LoopyGrid`` nor a ``NetGrid``.
    """
    if isinstance(grid, LoopyGrid):
        return LoopySolver(grid, verbose=verbose).solve()
    if isinstance(grid, NetGrid):
        return NetSolver(grid, verbose=verbose).solve()
    raise TypeError(f"solve() expects a LoopyGrid or NetGrid, got {type(grid).__name__}")
