"""Grid pathfinding core."""

from labyrinth.solver.contracts import (
    Coordinate,
    GridIssue,
    RunRecord,
    SearchResult,
    Strategy,
    UnknownStrategyError,
    coerce_strategy,
)
from labyrinth.solver.engine import PathfindingEngine, default_solvers, solve
from labyrinth.solver.recursive import (
    BacktrackingSearch,
    BoundedSearch,
    ExhaustiveSearch,
)
from labyrinth.solver.traversal import BreadthFirstSearch, DepthFirstSearch

__all__ = [
    "BacktrackingSearch",
    "BoundedSearch",
    "BreadthFirstSearch",
    "Coordinate",
    "DepthFirstSearch",
    "ExhaustiveSearch",
    "GridIssue",
    "PathfindingEngine",
    "RunRecord",
    "SearchResult",
    "Strategy",
    "UnknownStrategyError",
    "coerce_strategy",
    "default_solvers",
    "solve",
]
