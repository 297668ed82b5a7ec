"""Solver results logging helpers (JSONL)."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterator

from pydantic import ValidationError

from labyrinth.solver.contracts import RunRecord

SCHEMA_VERSION = 1
RESULTS_LOG_NAME = "results.jsonl"

logger = logging.getLogger(__name__)


def create_results_file(
    base_dir: Path, *, timestamp: str | None = None
) -> tuple[Path, Path]:
    session_id = timestamp or _format_timestamp(datetime.now(timezone.utc))
    session_dir = base_dir / session_id
    session_dir.mkdir(parents=True, exist_ok=True)
    return session_dir, session_dir / RESULTS_LOG_NAME


def write_header(path: Path, metadata: dict[str, Any]) -> None:
    record: dict[str, Any] = {
        "type": "header",
        "schema_version": SCHEMA_VERSION,
        "metadata": metadata,
    }
    _append_record(path, record)


def append_run_record(path: Path, run: RunRecord) -> None:
    record: dict[str, Any] = {
        "type": "run",
        "schema_version": SCHEMA_VERSION,
        "payload": run.model_dump(mode="json"),
    }
    _append_record(path, record)


def read_run_records(path: Path) -> Iterator[RunRecord]:
    with path.open("r", encoding="utf-8") as handle:
        for line_no, line in enumerate(handle, start=1):
            record = _parse_record(line)
            if not isinstance(record, dict) or record.get("type") != "run":
                continue
            payload = record.get("payload")
            if payload is None:
                continue
            try:
                yield RunRecord.model_validate(payload)
            except ValidationError as exc:
                logger.warning("Skipping invalid run record at %s:%d: %s", path, line_no, exc)


def _append_record(path: Path, record: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as handle:
        handle.write(json.dumps(record))
        handle.write("\n")


def _parse_record(line: str) -> dict | None:
    try:
        return json.loads(line)
    except json.JSONDecodeError:
        return None


def _format_timestamp(value: datetime) -> str:
    return value.strftime("%Y-%m-%dT%H-%M-%SZ")
