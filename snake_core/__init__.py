"""Simulation core of the grid snake game."""

__all__ = [
    "board",
    "clock",
    "collision",
    "config",
    "constants",
    "direction",
    "food",
    "game",
    "grid",
    "snake",
    "utils",
]
