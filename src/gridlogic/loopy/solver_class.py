"""Fixed-point driver for loop puzzles."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence
import logging

from ..registry import default_loopy_max_passes, default_loopy_steps
from ..results import ResultState
from .grid_class import EdgeState, LoopyGrid
from .steps import SolverStep, make_steps
from .validation import find_contradictions, is_solved

logger = logging.getLogger(__name__)


@dataclass
class LoopySolverResult:
    """Final snapshot of a run with its outcome."""

    state: ResultState
    grid: LoopyGrid
    passes: int
    contradictions: list[str] = field(default_factory=list)


@dataclass
class LoopySolver:
    """Re-applies a step list to a snapshot until a pass changes nothing.

    Every pass that changes the snapshot decides at least one more edge or
    records one more conflicted edge. A pass that only records a conflict
    leaves the count of normal edges unchanged, so the run is bounded by
    ``2 * edge_count + 1`` passes rather than ``edge_count + 1``; without
    conflicts the tighter bound holds. ``max_passes`` only lowers the bound.
    """

    grid: LoopyGrid
    steps: Sequence[SolverStep] | None = None
    max_passes: int | None = None
    verbose: bool = False
    _log: logging.LoggerAdapter = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Resolve default steps and build the per-instance logger."""
        base_logger = logger.getChild(self.__class__.__name__)
        base_logger.setLevel(logging.INFO if self.verbose else logging.WARNING)
        self._log = logging.LoggerAdapter(base_logger, {"solver_id": id(self), "pass_id": None})

        if self.steps is None:
            self.steps = make_steps(default_loopy_steps())
        else:
            self.steps = list(self.steps)
        if self.max_passes is None:
            self.max_passes = default_loopy_max_passes()
        self._log.debug("LoopySolver: steps=%s, max_passes=%s", [s.name for s in self.steps], self.max_passes)

    def apply_steps(self, grid: LoopyGrid) -> LoopyGrid:
        """Run one pass: every step once, in order, each on the previous output."""
        for step in self.steps:
            grid = step.apply(grid)
        return grid

    def solve(self) -> LoopySolverResult:
        """Iterate passes to a fixed point and classify the final snapshot.

        Returns:
            ``LoopySolverResult`` with ``SOLVED`` when the marked edges form
            one loop meeting every hint, ``INVALID`` when a contradiction is
            found, ``UNSOLVED`` otherwise.
        """
        grid = self.grid
        limit = 2 * grid.edge_count + 1
        if self.max_passes is not None:
            limit = min(limit, self.max_passes)
        self._log.info(
            "Starting solve: %s edges, %s faces, %s steps",
            grid.edge_count,
            len(grid.faces),
            len(self.steps),
        )

        passes = 0
        converged = False
        while passes < limit:
            passes += 1
            self._log.extra["pass_id"] = passes
            new_grid = self.apply_steps(grid)
            if new_grid == grid:
                converged = True
                break
            self._log.info(
                "Pass %s: %s normal edges left",
                passes,
                new_grid.count_edges(EdgeState.NORMAL),
            )
            grid = new_grid

        if not converged:
            self._log.warning("Stopped after %s passes without reaching a fixed point", passes)

        contradictions = find_contradictions(grid)
        if contradictions:
            state = ResultState.INVALID
            for problem in contradictions:
                self._log.info("Contradiction: %s", problem)
        elif is_solved(grid):
            state = ResultState.SOLVED
        else:
            state = ResultState.UNSOLVED
        self._log.info("Finished after %s passes: %s", passes, state.value)
        return LoopySolverResult(state=state, grid=grid, passes=passes, contradictions=contradictions)
