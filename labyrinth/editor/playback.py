"""Step-wise playback of a search result onto a maze."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum

from labyrinth.editor.maze_state import MazeState
from labyrinth.solver.contracts import Coordinate, SearchResult, Strategy


class PlaybackPhase(str, Enum):
    VISITING = "visiting"
    TRACING = "tracing"
    NO_PATH = "no_path"
    DONE = "done"


@dataclass
class SolvePlayback:
    """Paint visited cells first, then the path, one cell per step.

    The playback keeps its own queues, so the SearchResult it was built from
    is left untouched.
    """

    strategy: Strategy
    result: SearchResult
    _visited: deque[Coordinate] = field(init=False, repr=False)
    _path: deque[Coordinate] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._visited = deque(self.result.visited)
        self._path = deque(self.result.path)

    @property
    def remaining(self) -> int:
        return len(self._visited) + len(self._path)

    @property
    def phase(self) -> PlaybackPhase:
        if self._visited:
            return PlaybackPhase.VISITING
        if self._path:
            return PlaybackPhase.TRACING
        if not self.result.found:
            return PlaybackPhase.NO_PATH
        return PlaybackPhase.DONE

    @property
    def finished(self) -> bool:
        return self.phase in {PlaybackPhase.NO_PATH, PlaybackPhase.DONE}

    def step(self, maze: MazeState) -> PlaybackPhase:
        if self._visited:
            maze.mark_visited(self._visited.popleft())
        elif self._path:
            maze.mark_path(self._path.popleft())
        return self.phase

    def run_to_end(self, maze: MazeState) -> PlaybackPhase:
        while not self.finished:
            self.step(maze)
        return self.phase
