"""Interactive maze editor: draw walls, place endpoints, animate solvers."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from rich.align import Align
from rich.console import Console, Group, RenderableType
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from labyrinth.editor.maze_state import EditMode, MazeState
from labyrinth.editor.playback import PlaybackPhase, SolvePlayback
from labyrinth.editor.results_book import ResultsBook
from labyrinth.render.maze_view import render_legend, render_maze_lines
from labyrinth.render.results_view import render_results
from labyrinth.render.terminal_input import KeyReader, raw_terminal
from labyrinth.solver.contracts import Coordinate, Strategy
from labyrinth.solver.engine import PathfindingEngine

logger = logging.getLogger(__name__)

SIDE_WIDTH = 40
FRAME_DELAY = 0.02

STRATEGY_KEYS = {
    "1": Strategy.BOUNDED,
    "2": Strategy.EXHAUSTIVE,
    "3": Strategy.BACKTRACKING,
    "4": Strategy.BFS,
    "5": Strategy.DFS,
}

MODE_KEYS = {
    "s": EditMode.SET_START,
    "e": EditMode.SET_END,
    "w": EditMode.TOGGLE_WALL,
}

MODE_LABELS = {
    EditMode.SET_START: "Set start",
    EditMode.SET_END: "Set end",
    EditMode.TOGGLE_WALL: "Toggle wall",
}

_MOVES = {"UP": (-1, 0), "DOWN": (1, 0), "LEFT": (0, -1), "RIGHT": (0, 1)}


@dataclass
class EditorSession:
    maze: MazeState
    engine: PathfindingEngine = field(default_factory=PathfindingEngine)
    results: ResultsBook = field(default_factory=ResultsBook)
    strategy: Strategy = Strategy.BFS
    mode: EditMode = EditMode.TOGGLE_WALL
    cursor: Coordinate = Coordinate(0, 0)
    step_delay: float = 0.1
    animation: SolvePlayback | None = None
    stepping: SolvePlayback | None = None
    show_results: bool = False
    should_exit: bool = False
    last_message: str = ""
    _last_step_at: float = 0.0

    def handle_key(self, key: str) -> None:
        if key in {"q", "Q"}:
            self.should_exit = True
        elif key in _MOVES:
            self._move_cursor(*_MOVES[key])
        elif key == "SPACE":
            self._edit_at_cursor()
        elif key == "m":
            self.mode = self.mode.next()
            self.last_message = f"Mode: {MODE_LABELS[self.mode]}."
        elif key in MODE_KEYS:
            self.mode = MODE_KEYS[key]
            self.last_message = f"Mode: {MODE_LABELS[self.mode]}."
        elif key in STRATEGY_KEYS:
            self.strategy = STRATEGY_KEYS[key]
            self.last_message = f"Algorithm: {self.strategy.label}."
        elif key == "ENTER":
            self.solve()
        elif key == "n":
            self.step()
        elif key == "c":
            self.clear()
        elif key == "x":
            self.clear()
            self.maze.reset()
            self.last_message = "Maze reset."
        elif key == "b":
            self.benchmark()
        elif key == "t":
            self.show_results = not self.show_results
        elif key == "d":
            self.results.clear()
            self.last_message = "Results cleared."

    def solve(self) -> None:
        """Run the selected strategy and start animating its result."""
        if not self._ready():
            return
        self.clear()
        result, record = self.engine.timed_solve(
            self.maze.passability(), self.maze.start, self.maze.end, self.strategy
        )
        self.results.add(record)
        self.animation = SolvePlayback(self.strategy, result)
        self._last_step_at = 0.0
        self.last_message = f"Solving with {self.strategy.label}..."

    def step(self) -> None:
        """Advance the step-by-step view by one cell.

        Switching algorithm mid-way restarts the walk with the new one.
        """
        if self.stepping is None or self.stepping.strategy != self.strategy:
            if not self._ready():
                return
            self.clear()
            result = self.engine.solve(
                self.maze.passability(), self.maze.start, self.maze.end, self.strategy
            )
            self.stepping = SolvePlayback(self.strategy, result)
        if self.stepping.finished:
            self.last_message = (
                "Path complete." if self.stepping.result.found else "No path found."
            )
            self.stepping = None
            return
        phase = self.stepping.step(self.maze)
        self.last_message = f"Step: {phase.value} ({self.stepping.remaining} left)"

    def tick(self, now: float) -> None:
        if self.animation is None:
            return
        delay = self.step_delay
        if self.animation.phase == PlaybackPhase.TRACING:
            delay = self.step_delay / 2
        if now - self._last_step_at < delay:
            return
        self._last_step_at = now
        phase = self.animation.step(self.maze)
        if phase == PlaybackPhase.NO_PATH:
            self.last_message = "No path found."
            self.animation = None
        elif phase == PlaybackPhase.DONE:
            self.last_message = (
                f"{self.strategy.label}: {self.animation.result.path_length} cells."
            )
            self.animation = None

    def benchmark(self) -> None:
        if not self._ready():
            return
        records = self.engine.benchmark(
            self.maze.passability(), self.maze.start, self.maze.end
        )
        self.results.extend(records)
        self.show_results = True
        self.last_message = f"Benchmarked {len(records)} algorithms."

    def clear(self) -> None:
        self.animation = None
        self.stepping = None
        self.maze.clear_overlay()

    def _ready(self) -> bool:
        if not self.maze.can_solve:
            self.last_message = "Set a start and an end cell first."
            return False
        return True

    def _move_cursor(self, d_row: int, d_col: int) -> None:
        row = min(max(self.cursor.row + d_row, 0), self.maze.rows - 1)
        col = min(max(self.cursor.col + d_col, 0), self.maze.cols - 1)
        self.cursor = Coordinate(row, col)

    def _edit_at_cursor(self) -> None:
        # Edits invalidate whatever is painted on the grid.
        self.clear()
        self.maze.apply(self.cursor.row, self.cursor.col, self.mode)


def run_maze_editor(session: EditorSession) -> None:
    console = Console()
    reader = KeyReader()

    with raw_terminal():
        with Live(console=console, auto_refresh=False, screen=True) as live:
            try:
                while not session.should_exit:
                    event = reader.read()
                    if event is not None:
                        session.handle_key(event.key)
                    session.tick(time.monotonic())
                    live.update(render_editor(session), refresh=True)
                    time.sleep(FRAME_DELAY)
            except KeyboardInterrupt:
                session.should_exit = True
    logger.info("Editor closed with %d recorded runs", len(session.results))


def render_editor(session: EditorSession) -> RenderableType:
    maze_lines = render_maze_lines(session.maze, cursor=session.cursor)
    maze_panel = Panel(
        Align.center(Group(*maze_lines, Text(), render_legend()), vertical="middle"),
        title=f"Maze {session.maze.rows}x{session.maze.cols}",
    )

    side: RenderableType = _render_side_panel(session)
    if session.show_results:
        side = Group(side, render_results(session.results.records))

    layout = Layout()
    layout.split_row(
        Layout(maze_panel, ratio=1),
        Layout(Panel(side, title="Editor"), size=SIDE_WIDTH),
    )
    wrapper = Layout()
    wrapper.split_column(
        Layout(layout, ratio=1),
        Layout(_render_status_bar(), size=3),
    )
    return wrapper


def _render_side_panel(session: EditorSession) -> RenderableType:
    table = Table(show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Cursor", f"{session.cursor.row}, {session.cursor.col}")
    table.add_row("Mode", MODE_LABELS[session.mode])
    table.add_row("Algorithm", session.strategy.label)
    table.add_row("Start", str(session.maze.start) if session.maze.start else "-")
    table.add_row("End", str(session.maze.end) if session.maze.end else "-")
    table.add_row("Runs", str(len(session.results)))
    if session.last_message:
        table.add_row("Note", session.last_message)
    return table


def _render_status_bar() -> Panel:
    text = Text(
        "arrows=move | space=edit | s/e/w/m=mode | 1-5=algorithm | "
        "enter=solve | n=step | c=clear | x=reset | b=benchmark | "
        "t=results | d=drop results | q=quit",
        style="bold",
    )
    return Panel(text, padding=(0, 1))
