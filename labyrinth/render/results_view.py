"""Rich tables and charts for timed solver runs."""

from __future__ import annotations

from typing import Sequence

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from labyrinth.solver.contracts import RunRecord

BAR_WIDTH = 30
BAR_STYLE = "cyan"


def render_results(records: Sequence[RunRecord], *, chart: bool = True) -> RenderableType:
    table = _render_table(records)
    if not chart:
        return table
    return Group(table, _render_chart(records))


def _render_table(records: Sequence[RunRecord]) -> Table:
    table = Table(title="Saved Results", show_header=True, header_style="bold")
    table.add_column("Algorithm")
    table.add_column("Path cells", justify="right")
    table.add_column("Visited", justify="right")
    table.add_column("Time (ns)", justify="right")

    for record in records:
        path_cells = str(record.path_length) if record.found else "no path"
        table.add_row(
            record.label,
            path_cells,
            str(record.visited_count),
            f"{record.elapsed_ns:,}",
        )
    if not records:
        table.add_row("-", "-", "-", "None")
    return table


def _render_chart(records: Sequence[RunRecord]) -> Panel:
    if not records:
        return Panel(Text("No runs recorded."), title="Execution time")
    slowest = max(record.elapsed_ns for record in records) or 1
    label_width = max(len(record.label) for record in records)
    lines: list[Text] = []
    for record in records:
        filled = round(BAR_WIDTH * record.elapsed_ns / slowest)
        line = Text(f"{record.label:<{label_width}} ")
        line.append("█" * filled, style=BAR_STYLE)
        line.append(f" {record.elapsed_ns:,} ns")
        lines.append(line)
    return Panel(Group(*lines), title="Execution time")
