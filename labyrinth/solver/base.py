"""Solver interface shared by every search strategy."""

from __future__ import annotations

from typing import Protocol

from labyrinth.solver.contracts import Coordinate, PassabilityGrid, SearchResult


class MazeSolver(Protocol):
    def solve(
        self,
        grid: PassabilityGrid | None,
        start: Coordinate,
        end: Coordinate,
    ) -> SearchResult:
        """Return the path from start to end and the cells examined on the way.

        Implementations keep no state between calls: every working collection
        is created inside `solve`, so one instance may serve many callers.
        """
