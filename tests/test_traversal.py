import pytest

from labyrinth.solver.contracts import Coordinate
from labyrinth.solver.traversal import (
    BreadthFirstSearch,
    DepthFirstSearch,
    _FrontierSearch,
    reconstruct_path,
)


def _open(rows: int, cols: int) -> list[list[bool]]:
    return [[True] * cols for _ in range(rows)]


def _cells(*pairs: tuple[int, int]) -> tuple[Coordinate, ...]:
    return tuple(Coordinate(row, col) for row, col in pairs)


def test_bfs_open_grid_shortest_path_and_enqueue_order() -> None:
    result = BreadthFirstSearch().solve(_open(3, 3), Coordinate(0, 0), Coordinate(2, 2))

    assert result.path == _cells((0, 0), (0, 1), (0, 2), (1, 2), (2, 2))
    assert result.visited == _cells(
        (0, 0), (0, 1), (1, 0), (0, 2), (1, 1), (2, 0), (1, 2), (2, 1), (2, 2)
    )


def test_dfs_open_grid_push_order() -> None:
    result = DepthFirstSearch().solve(_open(3, 3), Coordinate(0, 0), Coordinate(2, 2))

    assert result.path == _cells((0, 0), (1, 0), (2, 0), (2, 1), (2, 2))
    assert result.visited == _cells(
        (0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1), (2, 2)
    )


def test_single_cell_grid() -> None:
    for solver in (BreadthFirstSearch(), DepthFirstSearch()):
        result = solver.solve([[True]], Coordinate(0, 0), Coordinate(0, 0))
        assert result.path == _cells((0, 0))
        assert result.visited == _cells((0, 0))


def test_walled_in_start_visits_only_start() -> None:
    grid = [
        [True, False, True],
        [False, False, True],
        [True, True, True],
    ]
    for solver in (BreadthFirstSearch(), DepthFirstSearch()):
        result = solver.solve(grid, Coordinate(0, 0), Coordinate(2, 2))
        assert result.path == ()
        assert result.visited == _cells((0, 0))


def test_invalid_endpoints_return_empty_result() -> None:
    grid = [[True, True], [True, False]]
    cases = [
        (Coordinate(0, 0), Coordinate(1, 1)),
        (Coordinate(1, 1), Coordinate(0, 0)),
        (Coordinate(-1, 0), Coordinate(0, 1)),
        (Coordinate(0, 0), Coordinate(0, 2)),
    ]
    for solver in (BreadthFirstSearch(), DepthFirstSearch()):
        for start, end in cases:
            result = solver.solve(grid, start, end)
            assert result.path == ()
            assert result.visited == ()


def test_empty_or_missing_grid() -> None:
    for solver in (BreadthFirstSearch(), DepthFirstSearch()):
        assert solver.solve([], Coordinate(0, 0), Coordinate(0, 0)).visited == ()
        assert solver.solve(None, Coordinate(0, 0), Coordinate(0, 0)).path == ()


def test_unreachable_end_keeps_partial_visits() -> None:
    grid = [
        [True, True, False, True],
        [True, True, False, True],
    ]
    result = BreadthFirstSearch().solve(grid, Coordinate(0, 0), Coordinate(1, 3))

    assert result.path == ()
    assert set(result.visited) == set(_cells((0, 0), (0, 1), (1, 0), (1, 1)))


def test_reconstruct_path_walks_parents() -> None:
    a, b, c = _cells((0, 0), (0, 1), (1, 1))
    parents = {a: None, b: a, c: b}
    assert reconstruct_path(parents, c) == (a, b, c)
    assert reconstruct_path(parents, a) == (a,)


def test_frontier_base_needs_a_frontier_policy() -> None:
    with pytest.raises(TypeError):
        _FrontierSearch()
