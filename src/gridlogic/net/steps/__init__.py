"""Pipe puzzle inference rules and their lookup by name."""
from __future__ import annotations

from typing import Iterable

from .candidate_orientations import CandidateOrientationsSolverStep, neighbor_checks
from .endpoint_neighbors import EndPointNeighborsSolverStep
from .solver_step import NO_CHANGE, NetSolverDelegate, NetSolverStep, StepResult

NET_STEPS: dict[str, type[NetSolverStep]] = {
    step.name: step
    for step in (
        EndPointNeighborsSolverStep,
        CandidateOrientationsSolverStep,
    )
}


def step_classes(names: Iterable[str]) -> list[type[NetSolverStep]]:
    """Resolve step names to classes, in the given order.

    Raises:
        ValueError: If a name is not registered in ``NET_STEPS``.
    """
    classes: list[type[NetSolverStep]] = []
    for name in names:
        step_cls = NET_STEPS.get(name)
        if step_cls is None:
            known = ", ".join(sorted(NET_STEPS))
            raise ValueError(f"Unknown net step '{name}' (known: {known})")
        classes.append(step_cls)
    return classes


__all__ = [
    "NET_STEPS",
    "NO_CHANGE",
    "CandidateOrientationsSolverStep",
    "EndPointNeighborsSolverStep",
    "NetSolverDelegate",
    "NetSolverStep",
    "StepResult",
    "neighbor_checks",
    "step_classes",
]
