"""Depth-first recursive search strategies.

The three strategies here follow a recursive descent: try each direction in
order, descend into the first cell that can be entered, return on reaching the
end. The recursion is unrolled onto an explicit frame stack (one direction
iterator per frame); the visiting order matches the recursive version
exactly.

Cells are marked visited on entry and never unmarked.
"""

from __future__ import annotations

from typing import Iterator

from labyrinth.solver.base import MazeSolver
from labyrinth.solver.contracts import (
    EMPTY_RESULT,
    Coordinate,
    PassabilityGrid,
    SearchResult,
)
from labyrinth.solver.grid import FOUR_WAY, UP_RIGHT, is_empty_grid, is_passable

Directions = tuple[tuple[int, int], ...]


def _enter(
    grid: PassabilityGrid, cell: Coordinate, visited: dict[Coordinate, None]
) -> bool:
    if not is_passable(grid, cell) or cell in visited:
        return False
    visited[cell] = None
    return True


def _next_cell(
    grid: PassabilityGrid,
    cell: Coordinate,
    moves: Iterator[tuple[int, int]],
    visited: dict[Coordinate, None],
) -> Coordinate | None:
    for d_row, d_col in moves:
        candidate = cell.shifted(d_row, d_col)
        if _enter(grid, candidate, visited):
            return candidate
    return None


class UnwindingSearch(MazeSolver):
    """Recursive search that assembles the path while unwinding.

    On reaching the end the end cell is appended first, then every frame on the
    way back appends its own cell; the list is reversed before returning. A
    failed branch keeps its cells marked, so they stay closed to later
    branches.
    """

    def __init__(self, directions: Directions = FOUR_WAY) -> None:
        self._directions = directions

    @property
    def directions(self) -> Directions:
        return self._directions

    def solve(
        self,
        grid: PassabilityGrid | None,
        start: Coordinate,
        end: Coordinate,
    ) -> SearchResult:
        if is_empty_grid(grid):
            return EMPTY_RESULT
        visited: dict[Coordinate, None] = {}
        path = self._descend(grid, start, end, visited)
        return SearchResult(path=tuple(path), visited=tuple(visited))

    def _descend(
        self,
        grid: PassabilityGrid,
        start: Coordinate,
        end: Coordinate,
        visited: dict[Coordinate, None],
    ) -> list[Coordinate]:
        if not _enter(grid, start, visited):
            return []
        if start == end:
            return [start]

        frames: list[tuple[Coordinate, Iterator[tuple[int, int]]]] = [
            (start, iter(self._directions))
        ]
        while frames:
            cell, moves = frames[-1]
            nxt = _next_cell(grid, cell, moves, visited)
            if nxt is None:
                frames.pop()
                continue
            if nxt == end:
                return self._unwind(frames, end)
            frames.append((nxt, iter(self._directions)))
        return []

    @staticmethod
    def _unwind(
        frames: list[tuple[Coordinate, Iterator[tuple[int, int]]]], end: Coordinate
    ) -> list[Coordinate]:
        path = [end]
        for cell, _ in reversed(frames):
            path.append(cell)
        path.reverse()
        return path


class BoundedSearch(UnwindingSearch):
    """Only ever steps up or right; misses any end that needs another move."""

    def __init__(self) -> None:
        super().__init__(UP_RIGHT)


class ExhaustiveSearch(UnwindingSearch):
    def __init__(self) -> None:
        super().__init__(FOUR_WAY)


class BacktrackingSearch(MazeSolver):
    """Recursive search that keeps an explicit trail.

    Each entered cell is pushed onto the trail; when all of a cell's directions
    are exhausted it is popped again. On success the trail is the path.
    `visited` still lists every cell ever entered. A start that is already the
    end yields an empty trail.
    """

    def solve(
        self,
        grid: PassabilityGrid | None,
        start: Coordinate,
        end: Coordinate,
    ) -> SearchResult:
        if is_empty_grid(grid):
            return EMPTY_RESULT
        visited: dict[Coordinate, None] = {}
        trail = self._descend(grid, start, end, visited)
        return SearchResult(path=tuple(trail), visited=tuple(visited))

    @staticmethod
    def _descend(
        grid: PassabilityGrid,
        start: Coordinate,
        end: Coordinate,
        visited: dict[Coordinate, None],
    ) -> list[Coordinate]:
        trail: list[Coordinate] = []
        if not _enter(grid, start, visited):
            return trail
        if start == end:
            # the end joins the trail only when reached by a move
            return trail
        trail.append(start)

        pending: list[Iterator[tuple[int, int]]] = [iter(FOUR_WAY)]
        while pending:
            nxt = _next_cell(grid, trail[-1], pending[-1], visited)
            if nxt is None:
                # dead end
                pending.pop()
                trail.pop()
                continue
            trail.append(nxt)
            if nxt == end:
                return trail
            pending.append(iter(FOUR_WAY))
        return trail
