from gridlogic.loopy import EdgeState, LoopyGrid, LoopySquareGridGen
from gridlogic.loopy.steps import CornerEntrySolverStep

N = EdgeState.NORMAL
M = EdgeState.MARKED
D = EdgeState.DISABLED


def _grid(width: int, height: int, hint_at: tuple[int, int], hint: int) -> LoopyGrid:
    gen = LoopySquareGridGen(width, height)
    gen.set_hint(hint_at[0], hint_at[1], hint)
    return gen.generate()


def _face_states(grid: LoopyGrid, face: int) -> list[EdgeState]:
    return [grid.edge_state(edge) for edge in grid.edges_for_face(face)]


def test_hint_one_entered_at_corner() -> None:
    grid = _grid(2, 2, (1, 1), 1).with_edge_state(5, M)

    result = CornerEntrySolverStep().apply(grid)

    assert _face_states(result, 3) == [N, D, D, D]
    assert result.edge_state(5) == M


def test_hint_one_with_blocked_corner_edge() -> None:
    grid = _grid(2, 3, (1, 1), 1).with_edge_states({5: M, 6: D})

    result = CornerEntrySolverStep().apply(grid)

    assert _face_states(result, 3) == [D, N, D, D]


def test_hint_one_with_dead_end_below() -> None:
    grid = _grid(2, 3, (1, 1), 1).with_edge_states({5: M, 8: D, 11: D, 13: D})

    result = CornerEntrySolverStep().apply(grid)

    assert _face_states(result, 3) == [N, D, D, D]


def test_semi_complete_face_entered_at_corner() -> None:
    grid = _grid(3, 2, (1, 1), 3).with_edge_state(5, M)

    result = CornerEntrySolverStep().apply(grid)

    assert _face_states(result, 1) == [N, M, N, N]
    assert _face_states(result, 4) == [N, N, M, M]
    assert _face_states(result, 5) == [D, N, N, N]


def test_marked_edge_on_face_is_ignored() -> None:
    grid = _grid(2, 2, (1, 1), 1).with_edge_state(6, M)

    result = CornerEntrySolverStep().apply(grid)

    assert result == grid


def test_unhinted_faces_are_ignored() -> None:
    grid = LoopySquareGridGen(2, 2).generate().with_edge_state(5, M)

    assert CornerEntrySolverStep().apply(grid) == grid
