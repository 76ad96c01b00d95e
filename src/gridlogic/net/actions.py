"""Grid mutations a pipe puzzle step may request."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .tile_class import Orientation


@dataclass(frozen=True)
class LockOrientation:
    """Rotate the tile at (column, row) to ``orientation`` and lock it."""

    column: int
    row: int
    orientation: Orientation


# Closed set of actions; extend the union when a new mutation kind is added.
GridAction = Union[LockOrientation]
