import random

import pytest

from labyrinth.solver import (
    Coordinate,
    GridIssue,
    PathfindingEngine,
    Strategy,
    UnknownStrategyError,
    solve,
)

ROWS, COLS = 7, 8
START = Coordinate(0, 0)
END = Coordinate(ROWS - 1, COLS - 1)


def _random_grids(count: int = 60) -> list[list[list[bool]]]:
    rng = random.Random(1234)
    grids = []
    for _ in range(count):
        grid = [[rng.random() > 0.3 for _ in range(COLS)] for _ in range(ROWS)]
        grid[START.row][START.col] = True
        grid[END.row][END.col] = True
        grids.append(grid)
    return grids


def _is_contiguous(path: tuple[Coordinate, ...]) -> bool:
    return all(
        abs(a.row - b.row) + abs(a.col - b.col) == 1 for a, b in zip(path, path[1:])
    )


def test_results_respect_grid_invariants() -> None:
    engine = PathfindingEngine()
    for grid in _random_grids():
        for strategy in Strategy:
            result = engine.solve(grid, START, END, strategy)
            assert len(result.visited) == len(set(result.visited))
            assert all(grid[cell.row][cell.col] for cell in result.visited)
            assert len(result.path) == len(set(result.path))
            assert all(grid[cell.row][cell.col] for cell in result.path)
            if result.found:
                assert result.path[0] == START
                assert result.path[-1] == END
                assert _is_contiguous(result.path)
                assert set(result.path) <= set(result.visited)


def test_bfs_is_never_longer_than_other_strategies() -> None:
    engine = PathfindingEngine()
    for grid in _random_grids():
        bfs = engine.solve(grid, START, END, Strategy.BFS)
        for strategy in Strategy:
            other = engine.solve(grid, START, END, strategy)
            if other.found:
                assert bfs.found
                assert bfs.path_length <= other.path_length


def test_complete_strategies_agree_on_reachability() -> None:
    engine = PathfindingEngine()
    for grid in _random_grids():
        bfs = engine.solve(grid, START, END, Strategy.BFS)
        for strategy in (Strategy.DFS, Strategy.EXHAUSTIVE, Strategy.BACKTRACKING):
            assert engine.solve(grid, START, END, strategy).found == bfs.found


def test_exhaustive_and_backtracking_share_search_order() -> None:
    engine = PathfindingEngine()
    for grid in _random_grids():
        exhaustive = engine.solve(grid, START, END, Strategy.EXHAUSTIVE)
        backtracking = engine.solve(grid, START, END, Strategy.BACKTRACKING)
        assert exhaustive == backtracking


def test_bounded_moves_only_up_or_right() -> None:
    engine = PathfindingEngine()
    grid = [[True] * 5 for _ in range(5)]
    result = engine.solve(grid, Coordinate(4, 0), Coordinate(0, 4), Strategy.BOUNDED)
    assert result.found
    for a, b in zip(result.path, result.path[1:]):
        assert (b.row - a.row, b.col - a.col) in {(-1, 0), (0, 1)}


def test_solve_is_deterministic() -> None:
    engine = PathfindingEngine()
    grid = _random_grids(1)[0]
    for strategy in Strategy:
        assert engine.solve(grid, START, END, strategy) == engine.solve(
            grid, START, END, strategy
        )


def test_end_on_wall_gives_empty_path_everywhere() -> None:
    grid = [[True] * 3 for _ in range(3)]
    grid[2][2] = False
    for strategy in Strategy:
        assert solve(grid, START, Coordinate(2, 2), strategy).path == ()


def test_strategy_accepts_tag_strings() -> None:
    grid = [[True] * 3 for _ in range(3)]
    by_enum = solve(grid, START, Coordinate(2, 2), Strategy.DFS)
    by_name = solve(grid, START, Coordinate(2, 2), " DFS ")
    assert by_enum == by_name

    with pytest.raises(UnknownStrategyError):
        solve(grid, START, Coordinate(2, 2), "astar")


def test_missing_solver_is_reported() -> None:
    engine = PathfindingEngine(solvers={})
    with pytest.raises(ValueError):
        engine.solve([[True]], START, START, Strategy.BFS)


def test_validate_names_the_problem() -> None:
    grid = [[True, False], [True, True]]
    validate = PathfindingEngine.validate
    assert validate(None, START, START) == GridIssue.EMPTY_GRID
    assert validate([], START, START) == GridIssue.EMPTY_GRID
    assert validate(grid, Coordinate(2, 0), START) == GridIssue.START_OUT_OF_BOUNDS
    assert validate(grid, START, Coordinate(0, 5)) == GridIssue.END_OUT_OF_BOUNDS
    assert validate(grid, Coordinate(0, 1), START) == GridIssue.START_BLOCKED
    assert validate(grid, START, Coordinate(0, 1)) == GridIssue.END_BLOCKED
    assert validate(grid, START, Coordinate(1, 1)) == GridIssue.NONE


def test_timed_solve_and_benchmark_records() -> None:
    engine = PathfindingEngine()
    grid = [[True] * 3 for _ in range(3)]
    result, record = engine.timed_solve(grid, START, Coordinate(2, 2), "bfs")

    assert record.strategy == Strategy.BFS
    assert record.label == "BFS"
    assert (record.rows, record.cols) == (3, 3)
    assert record.path_length == result.path_length == 5
    assert record.visited_count == len(result.visited)
    assert record.found
    assert record.elapsed_ns >= 0

    records = engine.benchmark(grid, START, Coordinate(2, 2))
    assert [r.strategy for r in records] == list(Strategy)
    bounded = records[0]
    assert not bounded.found
    assert bounded.path_length == 0


def test_benchmark_on_empty_grid() -> None:
    records = PathfindingEngine().benchmark([], START, START, [Strategy.BFS])
    assert len(records) == 1
    assert (records[0].rows, records[0].cols) == (0, 0)
    assert not records[0].found
