"""Module entry point for `python -m labyrinth`."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console

from labyrinth.app import (
    configure_logging,
    resolve_config,
    run_comparison,
    run_editor,
    run_single_solve,
)
from labyrinth.solver.contracts import Strategy, UnknownStrategyError

STRATEGY_CHOICES = [strategy.value for strategy in Strategy]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Draw a maze and watch it get solved.")
    parser.add_argument(
        "--rows",
        type=int,
        default=None,
        help="Number of grid rows for a new maze (editor mode).",
    )
    parser.add_argument(
        "--cols",
        type=int,
        default=None,
        help="Number of grid columns for a new maze (editor mode).",
    )
    parser.add_argument(
        "--strategy",
        default=None,
        help=f"Initial algorithm: {', '.join(STRATEGY_CHOICES)}.",
    )
    parser.add_argument(
        "--step-delay",
        type=float,
        default=None,
        help="Seconds between animation steps.",
    )
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Time every algorithm on the demo maze and print a results table.",
    )
    parser.add_argument(
        "--solve",
        action="store_true",
        help="Solve the demo maze with --strategy and print it.",
    )
    parser.add_argument(
        "--results-dir",
        type=Path,
        default=None,
        help="Directory to append timed runs to (JSONL).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    )
    args = parser.parse_args(argv)

    try:
        config = resolve_config(
            rows=args.rows,
            cols=args.cols,
            strategy=args.strategy,
            step_delay=args.step_delay,
            results_dir=args.results_dir,
            log_level=args.log_level,
        )
    except (UnknownStrategyError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc

    console = Console()
    configure_logging(config.log_level, console=console)

    if args.compare:
        run_comparison(config, console=console)
        return

    if args.solve:
        run_single_solve(config, console=console)
        return

    run_editor(config)


if __name__ == "__main__":
    main()
