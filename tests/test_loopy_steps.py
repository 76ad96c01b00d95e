import logging

import pytest

from gridlogic.loopy import EdgeState, LoopyGrid, LoopySquareGridGen, make_steps
from gridlogic.loopy.steps import (
    LOOPY_STEPS,
    DeadEndRemovalSolverStep,
    ExactEdgeCountSolverStep,
    SaturatedVertexSolverStep,
    SolePathEdgeExtenderSolverStep,
)


def _square(width: int, height: int, hints: dict[tuple[int, int], int] | None = None) -> LoopyGrid:
    gen = LoopySquareGridGen(width, height)
    for (x, y), hint in (hints or {}).items():
        gen.set_hint(x, y, hint)
    return gen.generate()


def _states(grid: LoopyGrid, edges) -> list[EdgeState]:
    return [grid.edge_state(edge) for edge in edges]


def test_sole_path_extends_marked_edge_through_only_exit() -> None:
    grid = _square(2, 2).with_edge_states({0: EdgeState.MARKED, 4: EdgeState.DISABLED})

    result = SolePathEdgeExtenderSolverStep().apply(grid)

    assert result.edge_state(1) == EdgeState.MARKED
    assert result.edge_state(3) == EdgeState.MARKED
    # Vertices 3 and 4 still offer a choice.
    assert result.edge_state(2) == EdgeState.NORMAL
    assert result.edge_state(9) == EdgeState.NORMAL
    assert grid.edge_state(1) == EdgeState.NORMAL


def test_sole_path_leaves_open_vertices_alone() -> None:
    grid = _square(2, 2).with_edge_state(1, EdgeState.MARKED)

    result = SolePathEdgeExtenderSolverStep().apply(grid)

    assert result == grid


def test_exact_edge_count_disables_rest_when_hint_met() -> None:
    grid = _square(2, 2, {(0, 0): 2}).with_edge_states({0: EdgeState.MARKED, 3: EdgeState.MARKED})

    result = ExactEdgeCountSolverStep().apply(grid)

    assert _states(result, grid.edges_for_face(0)) == [
        EdgeState.MARKED,
        EdgeState.DISABLED,
        EdgeState.DISABLED,
        EdgeState.MARKED,
    ]


def test_exact_edge_count_marks_everything_left_when_needed() -> None:
    grid = _square(1, 1, {(0, 0): 3}).with_edge_state(2, EdgeState.DISABLED)

    result = ExactEdgeCountSolverStep().apply(grid)

    assert _states(result, range(4)) == [
        EdgeState.MARKED,
        EdgeState.MARKED,
        EdgeState.DISABLED,
        EdgeState.MARKED,
    ]


def test_exact_edge_count_zero_hint() -> None:
    result = ExactEdgeCountSolverStep().apply(_square(1, 1, {(0, 0): 0}))

    assert result.count_edges(EdgeState.DISABLED) == 4


def test_saturated_vertex_disables_remaining_edges() -> None:
    grid = _square(2, 2).with_edge_states({1: EdgeState.MARKED, 2: EdgeState.MARKED})

    result = SaturatedVertexSolverStep().apply(grid)

    assert result.edge_state(6) == EdgeState.DISABLED
    assert result.edge_state(7) == EdgeState.DISABLED
    assert result.edge_state(0) == EdgeState.NORMAL


def test_saturated_vertex_logs_its_deduction(caplog: pytest.LogCaptureFixture) -> None:
    grid = _square(2, 2).with_edge_states({1: EdgeState.MARKED, 2: EdgeState.MARKED, 6: EdgeState.DISABLED})

    with caplog.at_level(logging.DEBUG, logger="gridlogic.loopy.steps.saturated_vertex"):
        result = SaturatedVertexSolverStep().apply(grid)

    assert result.edge_state(7) == EdgeState.DISABLED
    assert result.edge_state(6) == EdgeState.DISABLED
    assert "Vertex 4: two marked edges" in caplog.text
    assert result.conflicted_edges == frozenset()


def test_dead_end_removal_cascades() -> None:
    grid = _square(1, 1).with_edge_state(0, EdgeState.DISABLED)

    result = DeadEndRemovalSolverStep().apply(grid)

    assert result.count_edges(EdgeState.DISABLED) == 4


def test_dead_end_removal_keeps_marked_edges() -> None:
    grid = _square(1, 1).with_edge_states({0: EdgeState.DISABLED, 1: EdgeState.MARKED})

    result = DeadEndRemovalSolverStep().apply(grid)

    assert result.edge_state(1) == EdgeState.MARKED
    assert result.conflicted_edges == frozenset()


@pytest.mark.parametrize("name", sorted(LOOPY_STEPS))
def test_steps_are_idempotent(name: str) -> None:
    grid = _square(3, 2, {(1, 1): 3, (0, 0): 1, (2, 0): 2}).with_edge_states(
        {5: EdgeState.MARKED, 0: EdgeState.DISABLED}
    )
    step = LOOPY_STEPS[name]()

    once = step.apply(grid)

    assert step.apply(once) == once
    assert grid.count_edges(EdgeState.NORMAL) == grid.edge_count - 2


def test_make_steps_resolves_names_in_order() -> None:
    steps = make_steps(["saturated_vertex", "exact_edge_count"])

    assert [step.name for step in steps] == ["saturated_vertex", "exact_edge_count"]
    with pytest.raises(ValueError):
        make_steps(["no_such_step"])
