"""Strategy dispatch, input validation and timed runs."""

from __future__ import annotations

import logging
import time
from typing import Iterable, Mapping

from labyrinth.solver.base import MazeSolver
from labyrinth.solver.contracts import (
    Coordinate,
    GridIssue,
    PassabilityGrid,
    RunRecord,
    SearchResult,
    Strategy,
    coerce_strategy,
)
from labyrinth.solver.grid import grid_size, in_bounds, is_empty_grid
from labyrinth.solver.recursive import (
    BacktrackingSearch,
    BoundedSearch,
    ExhaustiveSearch,
)
from labyrinth.solver.traversal import BreadthFirstSearch, DepthFirstSearch

logger = logging.getLogger(__name__)


def default_solvers() -> dict[Strategy, MazeSolver]:
    return {
        Strategy.BOUNDED: BoundedSearch(),
        Strategy.EXHAUSTIVE: ExhaustiveSearch(),
        Strategy.BACKTRACKING: BacktrackingSearch(),
        Strategy.BFS: BreadthFirstSearch(),
        Strategy.DFS: DepthFirstSearch(),
    }


class PathfindingEngine:
    """Single entry point for the presentation layer.

    Holds one solver per strategy. Solvers are stateless, so an engine can be
    shared freely and called from several threads at once.
    """

    def __init__(self, solvers: Mapping[Strategy, MazeSolver] | None = None) -> None:
        self._solvers = dict(default_solvers() if solvers is None else solvers)

    @property
    def strategies(self) -> list[Strategy]:
        return list(self._solvers)

    def solve(
        self,
        grid: PassabilityGrid | None,
        start: Coordinate,
        end: Coordinate,
        strategy: Strategy | str,
    ) -> SearchResult:
        chosen = coerce_strategy(strategy)
        solver = self._solvers.get(chosen)
        if solver is None:
            raise ValueError(f"No solver registered for {chosen.value}.")
        result = solver.solve(grid, start, end)
        logger.debug(
            "%s %s -> %s: visited=%d path=%d",
            chosen.value,
            start,
            end,
            len(result.visited),
            len(result.path),
        )
        return result

    def timed_solve(
        self,
        grid: PassabilityGrid | None,
        start: Coordinate,
        end: Coordinate,
        strategy: Strategy | str,
    ) -> tuple[SearchResult, RunRecord]:
        chosen = coerce_strategy(strategy)
        began = time.perf_counter_ns()
        result = self.solve(grid, start, end, chosen)
        elapsed = time.perf_counter_ns() - began
        rows, cols = grid_size(grid)
        record = RunRecord(
            strategy=chosen,
            label=chosen.label,
            rows=rows,
            cols=cols,
            path_length=result.path_length,
            visited_count=len(result.visited),
            elapsed_ns=elapsed,
            found=result.found,
        )
        return result, record

    def benchmark(
        self,
        grid: PassabilityGrid | None,
        start: Coordinate,
        end: Coordinate,
        strategies: Iterable[Strategy | str] | None = None,
    ) -> list[RunRecord]:
        chosen = list(strategies) if strategies is not None else self.strategies
        return [self.timed_solve(grid, start, end, strategy)[1] for strategy in chosen]

    @staticmethod
    def validate(
        grid: PassabilityGrid | None, start: Coordinate, end: Coordinate
    ) -> GridIssue:
        """Explain why a query cannot succeed, without searching.

        `solve` folds invalid input and "no path" into the same empty result;
        this tells them apart.
        """
        if is_empty_grid(grid):
            return GridIssue.EMPTY_GRID
        if not in_bounds(grid, start):
            return GridIssue.START_OUT_OF_BOUNDS
        if not in_bounds(grid, end):
            return GridIssue.END_OUT_OF_BOUNDS
        if not grid[start.row][start.col]:
            return GridIssue.START_BLOCKED
        if not grid[end.row][end.col]:
            return GridIssue.END_BLOCKED
        return GridIssue.NONE


_DEFAULT_ENGINE = PathfindingEngine()


def solve(
    grid: PassabilityGrid | None,
    start: Coordinate,
    end: Coordinate,
    strategy: Strategy | str,
) -> SearchResult:
    return _DEFAULT_ENGINE.solve(grid, start, end, strategy)
