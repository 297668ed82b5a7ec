"""Editable maze state: cell kinds, edit modes and the solver grid view."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from labyrinth.solver.contracts import Coordinate


class CellState(str, Enum):
    EMPTY = "empty"
    WALL = "wall"
    START = "start"
    END = "end"
    PATH = "path"
    VISITED = "visited"


class EditMode(str, Enum):
    SET_START = "set_start"
    SET_END = "set_end"
    TOGGLE_WALL = "toggle_wall"

    def next(self) -> "EditMode":
        modes = list(EditMode)
        return modes[(modes.index(self) + 1) % len(modes)]


_OVERLAY = {CellState.PATH, CellState.VISITED}
_ENDPOINTS = {CellState.START, CellState.END}


@dataclass
class MazeState:
    rows: int
    cols: int
    cells: list[list[CellState]] = field(default_factory=list)
    start: Coordinate | None = None
    end: Coordinate | None = None

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError("Maze dimensions must be positive.")
        if not self.cells:
            self.cells = [
                [CellState.EMPTY for _ in range(self.cols)] for _ in range(self.rows)
            ]
        elif len(self.cells) != self.rows or any(
            len(line) != self.cols for line in self.cells
        ):
            raise ValueError("Cell rows must match the maze dimensions.")

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell(self, row: int, col: int) -> CellState:
        return self.cells[row][col]

    @property
    def can_solve(self) -> bool:
        return self.start is not None and self.end is not None

    def apply(self, row: int, col: int, mode: EditMode) -> bool:
        """Apply one edit; returns False when nothing changed."""
        if not self.contains(row, col):
            return False
        if mode == EditMode.SET_START:
            if self.start is not None:
                self.cells[self.start.row][self.start.col] = CellState.EMPTY
            if self.end == Coordinate(row, col):
                self.end = None
            self.start = Coordinate(row, col)
            self.cells[row][col] = CellState.START
            return True
        if mode == EditMode.SET_END:
            if self.end is not None:
                self.cells[self.end.row][self.end.col] = CellState.EMPTY
            if self.start == Coordinate(row, col):
                self.start = None
            self.end = Coordinate(row, col)
            self.cells[row][col] = CellState.END
            return True

        current = self.cells[row][col]
        if current == CellState.WALL:
            self.cells[row][col] = CellState.EMPTY
            return True
        if current == CellState.EMPTY:
            self.cells[row][col] = CellState.WALL
            return True
        return False

    def passability(self) -> list[list[bool]]:
        return [[state != CellState.WALL for state in line] for line in self.cells]

    def clear_overlay(self) -> None:
        for line in self.cells:
            for col, state in enumerate(line):
                if state in _OVERLAY:
                    line[col] = CellState.EMPTY

    def reset(self) -> None:
        self.cells = [
            [CellState.EMPTY for _ in range(self.cols)] for _ in range(self.rows)
        ]
        self.start = None
        self.end = None

    def mark(self, cell: Coordinate, state: CellState) -> bool:
        if not self.contains(cell.row, cell.col):
            return False
        if self.cells[cell.row][cell.col] in _ENDPOINTS:
            return False
        self.cells[cell.row][cell.col] = state
        return True

    def mark_visited(self, cell: Coordinate) -> bool:
        return self.mark(cell, CellState.VISITED)

    def mark_path(self, cell: Coordinate) -> bool:
        return self.mark(cell, CellState.PATH)

    def count(self, state: CellState) -> int:
        return sum(line.count(state) for line in self.cells)


def maze_from_rows(rows: Iterable[str]) -> MazeState:
    """Build a maze from text rows: `#` wall, `S` start, `E` end, anything else open."""
    lines = [line for line in rows if line]
    if not lines:
        raise ValueError("Maze needs at least one row.")
    width = max(len(line) for line in lines)
    maze = MazeState(rows=len(lines), cols=width)
    for row, line in enumerate(lines):
        for col, char in enumerate(line.ljust(width, ".")):
            if char == "#":
                maze.cells[row][col] = CellState.WALL
            elif char == "S":
                maze.apply(row, col, EditMode.SET_START)
            elif char == "E":
                maze.apply(row, col, EditMode.SET_END)
    return maze


DEMO_ROWS = (
    "S..#.......#...",
    ".#.#.#####.#.#.",
    ".#...#.......#.",
    ".#####.#####.#.",
    ".....#.#.....#.",
    "####.#.#.#####.",
    "...#...#.#.....",
    ".#.#####.#.###.",
    ".#.......#...#E",
)


def build_demo_maze() -> MazeState:
    return maze_from_rows(DEMO_ROWS)
