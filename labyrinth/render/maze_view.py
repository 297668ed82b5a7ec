"""Rich rendering of a maze grid."""

from __future__ import annotations

from rich.text import Text

from labyrinth.editor.maze_state import CellState, MazeState
from labyrinth.solver.contracts import Coordinate


CELL_GLYPHS = {
    CellState.EMPTY: "  ",
    CellState.WALL: "██",
    CellState.START: "S ",
    CellState.END: "E ",
    CellState.PATH: "··",
    CellState.VISITED: "░░",
}

CELL_STYLES = {
    CellState.EMPTY: "on grey93",
    CellState.WALL: "grey15",
    CellState.START: "bold white on green4",
    CellState.END: "bold white on red3",
    CellState.PATH: "bold white on blue",
    CellState.VISITED: "grey70 on grey93",
}

CURSOR_STYLE = "reverse"

# Plain-text glyphs for the debug log of a solved maze.
ASCII_GLYPHS = {
    CellState.EMPTY: ".",
    CellState.WALL: "#",
    CellState.START: "S",
    CellState.END: "E",
    CellState.PATH: "*",
    CellState.VISITED: "o",
}


def render_maze_lines(
    maze: MazeState, *, cursor: Coordinate | None = None
) -> list[Text]:
    lines: list[Text] = []
    for row in range(maze.rows):
        line = Text()
        for col in range(maze.cols):
            state = maze.cell(row, col)
            style = CELL_STYLES[state]
            if cursor is not None and cursor == Coordinate(row, col):
                style = f"{style} {CURSOR_STYLE}"
            line.append(CELL_GLYPHS[state], style=style)
        lines.append(line)
    return lines


def maze_to_ascii(maze: MazeState) -> list[str]:
    return [
        "".join(ASCII_GLYPHS[maze.cell(row, col)] for col in range(maze.cols))
        for row in range(maze.rows)
    ]


def render_legend() -> Text:
    legend = Text()
    for state in (
        CellState.START,
        CellState.END,
        CellState.WALL,
        CellState.VISITED,
        CellState.PATH,
    ):
        legend.append(CELL_GLYPHS[state], style=CELL_STYLES[state])
        legend.append(f" {state.value}  ")
    return legend
