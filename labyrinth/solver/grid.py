"""Bounds, passability and movement helpers over a boolean grid."""

from __future__ import annotations

from typing import Iterator

from labyrinth.solver.contracts import Coordinate, PassabilityGrid

# (d_row, d_col) offsets, in the order neighbours are tried.
FOUR_WAY: tuple[tuple[int, int], ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))
UP_RIGHT: tuple[tuple[int, int], ...] = ((-1, 0), (0, 1))


def is_empty_grid(grid: PassabilityGrid | None) -> bool:
    return grid is None or len(grid) == 0


def in_bounds(grid: PassabilityGrid, cell: Coordinate) -> bool:
    return 0 <= cell.row < len(grid) and 0 <= cell.col < len(grid[0])


def is_passable(grid: PassabilityGrid, cell: Coordinate) -> bool:
    return in_bounds(grid, cell) and bool(grid[cell.row][cell.col])


def neighbors(
    grid: PassabilityGrid,
    cell: Coordinate,
    directions: tuple[tuple[int, int], ...] = FOUR_WAY,
) -> Iterator[Coordinate]:
    for d_row, d_col in directions:
        candidate = cell.shifted(d_row, d_col)
        if is_passable(grid, candidate):
            yield candidate


def grid_size(grid: PassabilityGrid) -> tuple[int, int]:
    if is_empty_grid(grid):
        return 0, 0
    return len(grid), len(grid[0])
