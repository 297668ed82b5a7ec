"""Value types shared by the search strategies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field, model_validator

PassabilityGrid = Sequence[Sequence[bool]]


@dataclass(frozen=True, order=True)
class Coordinate:
    row: int
    col: int

    def shifted(self, d_row: int, d_col: int) -> "Coordinate":
        return Coordinate(self.row + d_row, self.col + d_col)

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


@dataclass(frozen=True)
class SearchResult:
    """Path from start to end (inclusive) plus every cell examined, in order."""

    path: tuple[Coordinate, ...] = ()
    visited: tuple[Coordinate, ...] = ()

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def path_length(self) -> int:
        return len(self.path)


EMPTY_RESULT = SearchResult()


class Strategy(str, Enum):
    BOUNDED = "bounded"
    EXHAUSTIVE = "exhaustive"
    BACKTRACKING = "backtracking"
    BFS = "bfs"
    DFS = "dfs"

    @property
    def label(self) -> str:
        return _STRATEGY_LABELS[self]


_STRATEGY_LABELS = {
    Strategy.BOUNDED: "Recursive (up/right)",
    Strategy.EXHAUSTIVE: "Recursive (complete)",
    Strategy.BACKTRACKING: "Recursive (backtracking)",
    Strategy.BFS: "BFS",
    Strategy.DFS: "DFS",
}


class GridIssue(str, Enum):
    NONE = "none"
    EMPTY_GRID = "empty_grid"
    START_OUT_OF_BOUNDS = "start_out_of_bounds"
    END_OUT_OF_BOUNDS = "end_out_of_bounds"
    START_BLOCKED = "start_blocked"
    END_BLOCKED = "end_blocked"


class UnknownStrategyError(ValueError):
    def __init__(self, value: object) -> None:
        choices = ", ".join(strategy.value for strategy in Strategy)
        super().__init__(f"Unknown strategy {value!r}; expected one of: {choices}.")
        self.value = value


def coerce_strategy(value: Strategy | str) -> Strategy:
    if isinstance(value, Strategy):
        return value
    try:
        return Strategy(str(value).strip().lower())
    except ValueError as exc:
        raise UnknownStrategyError(value) from exc


class RunRecord(BaseModel):
    """One timed solve, as shown in the results table and written to the log."""

    model_config = ConfigDict(extra="forbid")

    strategy: Strategy
    label: str
    rows: int = Field(ge=0)
    cols: int = Field(ge=0)
    path_length: int = Field(ge=0)
    visited_count: int = Field(ge=0)
    elapsed_ns: int = Field(ge=0)
    found: bool

    @model_validator(mode="after")
    def validate_found(self) -> "RunRecord":
        if self.found != (self.path_length > 0):
            raise ValueError("found must match a non-empty path")
        return self
