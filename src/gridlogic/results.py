"""Outcome of a solving run, shared by both puzzle families."""
from __future__ import annotations

from enum import Enum


class ResultState(Enum):
    """Terminal outcome of a solver driver."""

    SOLVED = "solved"
    UNSOLVED = "unsolved"  # No further deductions available.
    INVALID = "invalid"  # A contradiction was detected.
