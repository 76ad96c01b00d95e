"""Entry point that seeds and runs a pipe puzzle invocation."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence
import logging

from ..registry import default_net_seed_steps
from .grid_class import NetGrid
from .invocation import SolverInvocation, SolverInvocationResult
from .steps import NetSolverStep, step_classes

logger = logging.getLogger(__name__)


@dataclass
class NetSolver:
    """Seeds one step per tile and configured step name, then runs the queue.

    Seeding is row-major and, within a tile, follows ``seed_steps`` order.
    """

    grid: NetGrid
    seed_steps: Sequence[str] | None = None
    verbose: bool = False
    _log: logging.LoggerAdapter = field(init=False, repr=False)

    def __post_init__(self) -> None:
        base_logger = logger.getChild(self.__class__.__name__)
        base_logger.setLevel(logging.INFO if self.verbose else logging.WARNING)
        self._log = logging.LoggerAdapter(base_logger, {"solver_id": id(self)})
        if self.seed_steps is None:
            self.seed_steps = default_net_seed_steps()
        self._step_classes = step_classes(self.seed_steps)

    def initial_steps(self) -> list[NetSolverStep]:
        return [
            step_cls(column, row)
            for column, row in self.grid.coordinates()
            for step_cls in self._step_classes
        ]

    def solve(self) -> SolverInvocationResult:
        steps = self.initial_steps()
        self._log.info("Seeding %s steps over %sx%s tiles", len(steps), self.grid.columns, self.grid.rows)
        return SolverInvocation(self.grid, steps, verbose=self.verbose).apply()
