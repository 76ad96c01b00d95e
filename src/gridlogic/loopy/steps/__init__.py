"""Loop puzzle inference rules and their lookup by name."""
from __future__ import annotations

from typing import Iterable

from .corner_entry import CornerEntrySolverStep
from .dead_end import DeadEndRemovalSolverStep
from .exact_edge_count import ExactEdgeCountSolverStep
from .saturated_vertex import SaturatedVertexSolverStep
from .sole_path import SolePathEdgeExtenderSolverStep
from .solver_step import SolverStep

LOOPY_STEPS: dict[str, type[SolverStep]] = {
    step.name: step
    for step in (
        ExactEdgeCountSolverStep,
        CornerEntrySolverStep,
        SaturatedVertexSolverStep,
        DeadEndRemovalSolverStep,
        SolePathEdgeExtenderSolverStep,
    )
}


def make_steps(names: Iterable[str]) -> list[SolverStep]:
    """Instantiate steps by registered name, in the given order.

    Raises:
        ValueError: If a name is not registered in ``LOOPY_STEPS``.
    """
    steps: list[SolverStep] = []
    for name in names:
        step_cls = LOOPY_STEPS.get(name)
        if step_cls is None:
            known = ", ".join(sorted(LOOPY_STEPS))
            raise ValueError(f"Unknown loopy step '{name}' (known: {known})")
        steps.append(step_cls())
    return steps


__all__ = [
    "LOOPY_STEPS",
    "CornerEntrySolverStep",
    "DeadEndRemovalSolverStep",
    "ExactEdgeCountSolverStep",
    "SaturatedVertexSolverStep",
    "SolePathEdgeExtenderSolverStep",
    "SolverStep",
    "make_steps",
]
