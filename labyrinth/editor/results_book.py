"""In-memory list of timed runs, optionally mirrored to a JSONL log."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from labyrinth.db.results_log import append_run_record
from labyrinth.solver.contracts import RunRecord


@dataclass
class ResultsBook:
    log_path: Path | None = None
    _records: list[RunRecord] = field(default_factory=list)

    @property
    def records(self) -> list[RunRecord]:
        return list(self._records)

    def add(self, record: RunRecord) -> None:
        self._records.append(record)
        if self.log_path is not None:
            append_run_record(self.log_path, record)

    def extend(self, records: list[RunRecord]) -> None:
        for record in records:
            self.add(record)

    def clear(self) -> None:
        # The on-disk log is append-only; only the table is cleared.
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)
