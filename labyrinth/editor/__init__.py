"""Maze editing state and result playback."""

from labyrinth.editor.maze_state import (
    CellState,
    EditMode,
    MazeState,
    build_demo_maze,
    maze_from_rows,
)
from labyrinth.editor.playback import PlaybackPhase, SolvePlayback

__all__ = [
    "CellState",
    "EditMode",
    "MazeState",
    "PlaybackPhase",
    "SolvePlayback",
    "build_demo_maze",
    "maze_from_rows",
]
