"""Collision helpers for the game loop."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .food import Food
from .grid import Grid
from .snake import Snake


class CollisionResult(Enum):
    """Outcome of testing the snake head against its surroundings."""

    NONE = "none"
    BOUNDARY = "boundary"
    SELF = "self"
    FOOD = "food"

    @property
    def fatal(self) -> bool:
        """Return ``True`` for outcomes that end the game."""

        return self in (CollisionResult.BOUNDARY, CollisionResult.SELF)


def hits_body(snake: Snake) -> bool:
    """Return ``True`` if the head shares a cell with any other segment."""

    head = snake.head
    return any(segment == head for segment in snake.body[1:])


def evaluate(snake: Snake, grid: Grid, food: Optional[Food]) -> CollisionResult:
    """Classify the head of ``snake``.

    Checks run in order boundary, body, food; the first fatal match wins and
    the food check is skipped.
    """

    head = snake.head
    if grid.is_out_of_bounds(head):
        return CollisionResult.BOUNDARY
    if hits_body(snake):
        return CollisionResult.SELF
    if food is not None and food.cell == head:
        return CollisionResult.FOOD
    return CollisionResult.NONE
