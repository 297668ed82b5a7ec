"""Maze editor and grid pathfinding playground."""

__version__ = "0.1.0"
