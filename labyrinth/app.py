"""Application entry points and configuration resolution."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console, Group
from rich.logging import RichHandler
from rich.text import Text

from labyrinth.db.results_log import create_results_file, write_header
from labyrinth.editor.maze_state import MazeState, build_demo_maze
from labyrinth.editor.playback import SolvePlayback
from labyrinth.editor.results_book import ResultsBook
from labyrinth.render.editor_app import EditorSession, run_maze_editor
from labyrinth.render.maze_view import maze_to_ascii, render_legend, render_maze_lines
from labyrinth.render.results_view import render_results
from labyrinth.solver.contracts import RunRecord, Strategy, coerce_strategy
from labyrinth.solver.engine import PathfindingEngine

DEFAULT_ROWS = 15
DEFAULT_COLS = 25
DEFAULT_STRATEGY = Strategy.BFS
DEFAULT_STEP_DELAY = 0.1
DEFAULT_LOG_LEVEL = "WARNING"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppConfig:
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    strategy: Strategy = DEFAULT_STRATEGY
    step_delay: float = DEFAULT_STEP_DELAY
    results_dir: Path | None = None
    log_level: str = DEFAULT_LOG_LEVEL


def resolve_config(
    *,
    rows: int | None = None,
    cols: int | None = None,
    strategy: str | None = None,
    step_delay: float | None = None,
    results_dir: Path | None = None,
    log_level: str | None = None,
) -> AppConfig:
    """Merge CLI values over environment variables over defaults."""
    resolved_rows = rows if rows is not None else _env_int("LABYRINTH_ROWS", DEFAULT_ROWS)
    resolved_cols = cols if cols is not None else _env_int("LABYRINTH_COLS", DEFAULT_COLS)
    if resolved_rows <= 0 or resolved_cols <= 0:
        raise ValueError("Maze dimensions must be positive.")
    resolved_delay = (
        step_delay
        if step_delay is not None
        else _env_float("LABYRINTH_STEP_DELAY", DEFAULT_STEP_DELAY)
    )
    if resolved_delay < 0:
        raise ValueError("Step delay cannot be negative.")
    env_results = os.getenv("LABYRINTH_RESULTS_DIR")
    return AppConfig(
        rows=resolved_rows,
        cols=resolved_cols,
        strategy=coerce_strategy(
            strategy or os.getenv("LABYRINTH_STRATEGY") or DEFAULT_STRATEGY
        ),
        step_delay=resolved_delay,
        results_dir=results_dir or (Path(env_results) if env_results else None),
        log_level=(
            log_level or os.getenv("LABYRINTH_LOG_LEVEL") or DEFAULT_LOG_LEVEL
        ).upper(),
    )


def configure_logging(level: str, *, console: Console | None = None) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def run_editor(config: AppConfig) -> ResultsBook:
    session = EditorSession(
        maze=MazeState(rows=config.rows, cols=config.cols),
        results=_open_results_book(config, source="editor"),
        strategy=config.strategy,
        step_delay=config.step_delay,
    )
    run_maze_editor(session)
    return session.results


def run_comparison(
    config: AppConfig,
    *,
    maze: MazeState | None = None,
    console: Console | None = None,
) -> list[RunRecord]:
    """Time every strategy on one maze and print the results table."""
    maze = maze or build_demo_maze()
    if not maze.can_solve:
        raise ValueError("Maze needs a start and an end cell.")
    console = console or Console()
    book = _open_results_book(config, source="compare", maze=maze)
    engine = PathfindingEngine()
    book.extend(engine.benchmark(maze.passability(), maze.start, maze.end))
    console.print(render_results(book.records))
    return book.records


def run_single_solve(
    config: AppConfig,
    *,
    maze: MazeState | None = None,
    console: Console | None = None,
) -> RunRecord:
    """Solve with the configured strategy and print the painted maze."""
    maze = maze or build_demo_maze()
    if not maze.can_solve:
        raise ValueError("Maze needs a start and an end cell.")
    console = console or Console()
    book = _open_results_book(config, source="solve", maze=maze)
    engine = PathfindingEngine()
    result, record = engine.timed_solve(
        maze.passability(), maze.start, maze.end, config.strategy
    )
    book.add(record)
    SolvePlayback(config.strategy, result).run_to_end(maze)
    logger.debug("Solved maze:\n%s", "\n".join(maze_to_ascii(maze)))
    summary = Text(
        f"{config.strategy.label}: "
        + (f"{record.path_length} path cells" if record.found else "no path")
        + f", {record.visited_count} visited, {record.elapsed_ns:,} ns"
    )
    console.print(Group(*render_maze_lines(maze), Text(), render_legend(), summary))
    return record


def _open_results_book(
    config: AppConfig, *, source: str, maze: MazeState | None = None
) -> ResultsBook:
    if config.results_dir is None:
        return ResultsBook()
    session_dir, log_path = create_results_file(config.results_dir)
    rows, cols = (maze.rows, maze.cols) if maze else (config.rows, config.cols)
    write_header(
        log_path,
        metadata={"session_id": session_dir.name, "source": source, "rows": rows, "cols": cols},
    )
    logger.info("Recording results to %s", log_path)
    return ResultsBook(log_path=log_path)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from exc


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}.") from exc
