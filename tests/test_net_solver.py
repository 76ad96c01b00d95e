from dataclasses import dataclass

import pytest

from gridlogic import ResultState, solve
from gridlogic.loader import parse_tile_token
from gridlogic.net import (
    EdgePort,
    LockOrientation,
    NetGrid,
    NetSolver,
    NetSolverStep,
    Orientation,
    SolverInvocation,
    StepResult,
)
from gridlogic.net.steps import (
    CandidateOrientationsSolverStep,
    EndPointNeighborsSolverStep,
    step_classes,
)


def _grid(*rows: str, wrapping: bool = False) -> NetGrid:
    return NetGrid.from_rows(
        [[parse_tile_token(token) for token in row.split()] for row in rows],
        wrapping=wrapping,
    )


@dataclass(frozen=True)
class _RequireLocked(NetSolverStep):
    """Flags the grid invalid unless its tile is already locked."""

    def apply(self, grid, delegate) -> StepResult:
        return StepResult(is_invalid=not grid.tile_at(self.column, self.row).is_locked)


@dataclass(frozen=True)
class _FlagInvalid(NetSolverStep):
    def apply(self, grid, delegate) -> StepResult:
        return StepResult(
            actions=(LockOrientation(self.column, self.row, Orientation.EAST),),
            is_invalid=True,
        )


@dataclass(frozen=True)
class _LockEast(NetSolverStep):
    def apply(self, grid, delegate) -> StepResult:
        return StepResult(actions=(LockOrientation(self.column, self.row, Orientation.EAST),))


@dataclass(frozen=True)
class _RelockThenLock(NetSolverStep):
    """Relocks its own locked tile to EAST, then locks the next tile and queues more work."""

    def apply(self, grid, delegate) -> StepResult:
        return StepResult(
            actions=(
                LockOrientation(self.column, self.row, Orientation.EAST),
                LockOrientation(self.column + 1, self.row, Orientation.EAST),
            ),
            enqueued=(_LockEast(self.column + 1, self.row),),
        )


def test_endpoint_locks_towards_only_non_endpoint_neighbor() -> None:
    grid = _grid("En En", "Ln Ln")
    invocation = SolverInvocation(grid)

    result = EndPointNeighborsSolverStep(0, 0).apply(grid, invocation)

    assert result.actions == (LockOrientation(0, 0, Orientation.SOUTH),)
    assert not result.is_invalid
    assert result.enqueued == (
        EndPointNeighborsSolverStep(1, 0),
        CandidateOrientationsSolverStep(1, 0),
        CandidateOrientationsSolverStep(0, 1),
    )


def test_endpoint_with_two_choices_is_left_alone() -> None:
    grid = _grid("En Ln", "Ln Ln")

    result = EndPointNeighborsSolverStep(0, 0).apply(grid, SolverInvocation(grid))

    assert result.actions == ()


def test_actions_are_applied_before_next_step() -> None:
    grid = _grid("En En", "Ln Ln")

    result = SolverInvocation(grid, [EndPointNeighborsSolverStep(0, 0), _RequireLocked(0, 0)]).apply()

    assert result.state == ResultState.SOLVED
    assert result.grid.tile_at(0, 0).orientation == Orientation.SOUTH
    assert result.grid.tile_at(1, 1).orientation == Orientation.WEST
    assert result.grid.unlocked_count() == 0


def test_invalid_step_stops_the_run() -> None:
    grid = _grid("In In")

    result = SolverInvocation(grid, [_FlagInvalid(0, 0), _LockEast(1, 0)]).apply()

    assert result.state == ResultState.INVALID
    assert result.steps_applied == 1
    assert result.grid.unlocked_count() == 2


def test_relocking_to_another_orientation_is_invalid() -> None:
    grid = _grid("In! In")
    invocation = SolverInvocation(grid)

    unchanged = invocation.perform_grid_action(LockOrientation(0, 0, Orientation.NORTH), grid)
    assert unchanged is grid
    assert invocation.is_valid

    after = invocation.perform_grid_action(LockOrientation(0, 0, Orientation.EAST), grid)
    assert after is grid
    assert not invocation.is_valid


def test_contradicting_action_stops_further_mutations() -> None:
    grid = _grid("In! In In")
    step = _RelockThenLock(0, 0)

    result = SolverInvocation(grid, [step, _LockEast(2, 0)]).apply()

    assert result.state == ResultState.INVALID
    assert result.steps_applied == 1
    assert result.grid.tile_at(0, 0) == grid.tile_at(0, 0)
    assert not result.grid.tile_at(1, 0).is_locked
    assert not result.grid.tile_at(2, 0).is_locked


def test_perform_grid_actions_stops_at_contradiction() -> None:
    grid = _grid("In! In")
    invocation = SolverInvocation(grid)

    after = invocation.perform_grid_actions(
        [LockOrientation(0, 0, Orientation.EAST), LockOrientation(1, 0, Orientation.EAST)],
        grid,
    )

    assert after is grid
    assert not invocation.is_valid


def test_metadata_follows_grid_changes() -> None:
    grid = _grid("In In In", "Ln In In", "In In In")
    invocation = SolverInvocation(grid)
    stale = invocation.metadata

    assert EdgePort.LEFT not in invocation.unavailable_ports_for_tile(1, 1)

    invocation.grid = invocation.perform_grid_actions([LockOrientation(0, 1, Orientation.SOUTH)], invocation.grid)

    assert EdgePort.LEFT in invocation.unavailable_ports_for_tile(1, 1)
    assert invocation.metadata is not stale
    assert invocation.metadata.is_current_for(invocation.grid)


def test_unavailable_ports_use_neighbor_metadata() -> None:
    grid = _grid("In In In", "In In In", "In In In")
    invocation = SolverInvocation(grid)

    # Border straights can only lie along the border, so they never face the centre.
    assert grid.barriers_for_tile(1, 1) == set()
    assert invocation.unavailable_ports_for_tile(1, 1) == {EdgePort.TOP, EdgePort.RIGHT, EdgePort.BOTTOM, EdgePort.LEFT}


def test_solver_orients_a_straight_line() -> None:
    result = NetSolver(_grid("En In En")).solve()

    assert result.state == ResultState.SOLVED
    assert [result.grid.tile_at(column, 0).orientation for column in range(3)] == [
        Orientation.EAST,
        Orientation.EAST,
        Orientation.WEST,
    ]


def test_solver_detects_impossible_grid() -> None:
    result = NetSolver(_grid("In In")).solve()

    assert result.state == ResultState.INVALID


def test_solver_without_deductions_is_unsolved() -> None:
    grid = _grid("Tn Tn Tn", "Tn Tn Tn", "Tn Tn Tn", wrapping=True)

    result = NetSolver(grid).solve()

    assert result.state == ResultState.UNSOLVED
    assert result.grid == grid


def test_seeding_is_row_major_in_configured_order() -> None:
    solver = NetSolver(_grid("En In"), seed_steps=["candidate_orientations", "endpoint_neighbors"])

    steps = solver.initial_steps()

    assert steps == [
        CandidateOrientationsSolverStep(0, 0),
        EndPointNeighborsSolverStep(0, 0),
        CandidateOrientationsSolverStep(1, 0),
        EndPointNeighborsSolverStep(1, 0),
    ]


def test_unknown_step_name_raises() -> None:
    with pytest.raises(ValueError, match="missing"):
        step_classes(["endpoint_neighbors", "missing"])


def test_engine_solves_net_grids() -> None:
    result = solve(_grid("En In En"))

    assert result.state == ResultState.SOLVED
