import pytest
from pydantic import ValidationError

from labyrinth.solver.contracts import (
    Coordinate,
    RunRecord,
    SearchResult,
    Strategy,
    UnknownStrategyError,
    coerce_strategy,
)
from labyrinth.solver.grid import grid_size, in_bounds, is_passable, neighbors


def test_coordinate_identity_is_structural() -> None:
    a = Coordinate(1, 2)
    b = Coordinate(1, 2)

    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b, Coordinate(2, 1)}) == 2
    assert sorted([Coordinate(1, 0), Coordinate(0, 5), Coordinate(0, 1)]) == [
        Coordinate(0, 1),
        Coordinate(0, 5),
        Coordinate(1, 0),
    ]
    assert a.shifted(-1, 1) == Coordinate(0, 3)
    assert str(a) == "(1, 2)"

    with pytest.raises(AttributeError):
        a.row = 5  # type: ignore[misc]


def test_search_result_flags() -> None:
    empty = SearchResult()
    assert not empty.found
    assert empty.path_length == 0

    result = SearchResult(path=(Coordinate(0, 0),), visited=(Coordinate(0, 0),))
    assert result.found
    assert result.path_length == 1


def test_coerce_strategy() -> None:
    assert coerce_strategy(Strategy.BFS) is Strategy.BFS
    assert coerce_strategy("Backtracking") is Strategy.BACKTRACKING
    assert Strategy.BOUNDED.label == "Recursive (up/right)"

    with pytest.raises(UnknownStrategyError) as excinfo:
        coerce_strategy("greedy")
    assert "bfs" in str(excinfo.value)
    assert isinstance(excinfo.value, ValueError)


def test_run_record_validation() -> None:
    record = RunRecord(
        strategy="dfs",
        label="DFS",
        rows=3,
        cols=3,
        path_length=5,
        visited_count=7,
        elapsed_ns=1200,
        found=True,
    )
    assert record.strategy == Strategy.DFS
    assert record.model_dump(mode="json")["strategy"] == "dfs"

    with pytest.raises(ValidationError):
        RunRecord(
            strategy="dfs",
            label="DFS",
            rows=3,
            cols=3,
            path_length=0,
            visited_count=7,
            elapsed_ns=1200,
            found=True,
        )
    with pytest.raises(ValidationError):
        RunRecord(
            strategy="dfs",
            label="DFS",
            rows=3,
            cols=3,
            path_length=1,
            visited_count=1,
            elapsed_ns=1,
            found=True,
            extra="nope",
        )


def test_grid_helpers() -> None:
    grid = [[True, False], [True, True]]

    assert in_bounds(grid, Coordinate(1, 1))
    assert not in_bounds(grid, Coordinate(2, 0))
    assert not in_bounds(grid, Coordinate(0, -1))
    assert not is_passable(grid, Coordinate(0, 1))
    assert is_passable(grid, Coordinate(1, 0))
    assert list(neighbors(grid, Coordinate(1, 0))) == [
        Coordinate(0, 0),
        Coordinate(1, 1),
    ]
    assert grid_size(grid) == (2, 2)
    assert grid_size([]) == (0, 0)
