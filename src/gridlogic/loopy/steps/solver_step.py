"""Base class for loop puzzle inference rules."""
from __future__ import annotations

from typing import ClassVar

from ..grid_class import LoopyGrid


class SolverStep:
    """One local inference rule.

    ``apply`` never mutates its input: it returns a new snapshot carrying any
    deduced edge states, or an equal snapshot when nothing new was found.
    Applying a step to its own output must not change it further.
    """

    name: ClassVar[str] = ""

    def apply(self, grid: LoopyGrid) -> LoopyGrid:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
