"""Food entity and its placement rules."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import random
from typing import Callable, Optional

from . import constants
from .grid import Grid
from .snake import Snake
from .utils import Cell, random_color

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Food:
    """A food cell the snake can eat to grow."""

    cell: Cell
    color: tuple[int, int, int] = constants.FALLBACK_FOOD_COLOR

    @property
    def x(self) -> int:
        return self.cell.x

    @property
    def y(self) -> int:
        return self.cell.y

    def to_dict(self) -> dict:
        """Serialise the food to a JSON friendly dictionary."""

        return {"x": self.cell.x, "y": self.cell.y, "color": list(self.color)}


class FoodManager:
    """Owns the single current food cell.

    ``on_clear`` is invoked with the previous food whenever it goes stale so a
    drawing collaborator can erase it; the manager itself never draws.
    """

    def __init__(
        self,
        grid: Grid,
        rng: Optional[random.Random] = None,
        on_clear: Optional[Callable[[Food], None]] = None,
        attempts: int = constants.FOOD_PLACEMENT_ATTEMPTS,
    ) -> None:
        self.grid = grid
        self.rng = rng or random.Random()
        self.on_clear = on_clear
        self.attempts = attempts
        self.food: Optional[Food] = None

    def _pick_cell(self, excluding: Snake) -> Optional[Cell]:
        for _ in range(self.attempts):
            candidate = self.grid.random_cell(self.rng)
            if not excluding.occupies(candidate):
                return candidate
        free = [cell for cell in self.grid.cells() if not excluding.occupies(cell)]
        if not free:
            return None
        return self.rng.choice(free)

    def place(self, excluding: Snake) -> Optional[Food]:
        """Put a new food on a random cell that ``excluding`` does not cover.

        Returns ``None`` when the snake fills the whole board.
        """

        self.clear()
        cell = self._pick_cell(excluding)
        if cell is None:
            logger.info("No free cell left for food")
            self.food = None
            return None
        self.food = Food(cell=cell, color=random_color(self.rng))
        logger.debug("Food placed at (%s, %s)", cell.x, cell.y)
        return self.food

    def consume(self, excluding: Snake) -> Optional[Food]:
        """Replace the eaten food right away and return its successor."""

        return self.place(excluding)

    def clear(self) -> None:
        """Signal that the current food cell is stale."""

        if self.food is not None and self.on_clear is not None:
            self.on_clear(self.food)

    def reset(self) -> None:
        self.food = None
