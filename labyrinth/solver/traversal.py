"""Frontier-based traversals (BFS and DFS) with parent-map path reconstruction."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import MutableSequence

from labyrinth.solver.base import MazeSolver
from labyrinth.solver.contracts import (
    EMPTY_RESULT,
    Coordinate,
    PassabilityGrid,
    SearchResult,
)
from labyrinth.solver.grid import FOUR_WAY, is_empty_grid, is_passable, neighbors


def endpoints_valid(
    grid: PassabilityGrid | None, start: Coordinate, end: Coordinate
) -> bool:
    if is_empty_grid(grid):
        return False
    return is_passable(grid, start) and is_passable(grid, end)


def reconstruct_path(
    parents: dict[Coordinate, Coordinate | None], current: Coordinate
) -> tuple[Coordinate, ...]:
    path: list[Coordinate] = []
    node: Coordinate | None = current
    while node is not None:
        path.append(node)
        node = parents[node]
    path.reverse()
    return tuple(path)


class _FrontierSearch(MazeSolver, ABC):
    """Shared loop; subclasses decide which end of the frontier to take from.

    A cell is recorded in `parents` the moment it joins the frontier, so the
    keys of `parents` are also the visited cells in discovery order.
    """

    def solve(
        self,
        grid: PassabilityGrid | None,
        start: Coordinate,
        end: Coordinate,
    ) -> SearchResult:
        if not endpoints_valid(grid, start, end):
            return EMPTY_RESULT

        parents: dict[Coordinate, Coordinate | None] = {start: None}
        frontier = self._new_frontier(start)
        while frontier:
            current = self._take(frontier)
            if current == end:
                return SearchResult(
                    path=reconstruct_path(parents, current),
                    visited=tuple(parents),
                )
            for nxt in neighbors(grid, current, FOUR_WAY):
                if nxt in parents:
                    continue
                parents[nxt] = current
                frontier.append(nxt)

        return SearchResult(visited=tuple(parents))

    @abstractmethod
    def _new_frontier(self, start: Coordinate) -> MutableSequence[Coordinate]: ...

    @abstractmethod
    def _take(self, frontier: MutableSequence[Coordinate]) -> Coordinate: ...


class BreadthFirstSearch(_FrontierSearch):
    """FIFO frontier; the path found is a shortest one by cell count."""

    def _new_frontier(self, start: Coordinate) -> deque[Coordinate]:
        return deque([start])

    def _take(self, frontier: deque[Coordinate]) -> Coordinate:
        return frontier.popleft()


class DepthFirstSearch(_FrontierSearch):
    """LIFO stack; the last neighbour pushed is expanded first."""

    def _new_frontier(self, start: Coordinate) -> list[Coordinate]:
        return [start]

    def _take(self, frontier: list[Coordinate]) -> Coordinate:
        return frontier.pop()
