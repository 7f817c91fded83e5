"""Drawing of the game state onto an attached surface."""

from __future__ import annotations

from typing import Optional, Protocol, Tuple

from .config import GameConfig
from .food import Food
from .snake import Snake
from .utils import Cell

Color = Tuple[int, int, int]


class Surface(Protocol):
    """Drawing primitives expected from the rendering collaborator.

    Coordinates are the same grid coordinates the game state uses.
    """

    def clear_rect(self, x: int, y: int, width: int, height: int) -> None:
        ...

    def fill_rect(self, x: int, y: int, width: int, height: int, color: Color) -> None:
        ...


class Board:
    """Paints snake and food; every call is a no-op while unbound.

    Cells are drawn ``block_size`` wide, slightly smaller than the step, which
    leaves visible grid lines between segments.
    """

    def __init__(self, config: GameConfig, surface: Optional[Surface] = None) -> None:
        self.config = config
        self.surface = surface

    def attach(self, surface: Optional[Surface]) -> None:
        self.surface = surface

    @property
    def attached(self) -> bool:
        return self.surface is not None

    def clear(self) -> None:
        if self.surface is None:
            return
        self.surface.clear_rect(0, 0, self.config.width, self.config.height)

    def clear_cell(self, cell: Cell) -> None:
        if self.surface is None:
            return
        size = self.config.block_size
        self.surface.clear_rect(cell.x, cell.y, size, size)

    def clear_food(self, food: Food) -> None:
        self.clear_cell(food.cell)

    def fill_cell(self, cell: Cell, color: Color) -> None:
        if self.surface is None:
            return
        size = self.config.block_size
        self.surface.fill_rect(cell.x, cell.y, size, size, color)

    def draw(self, snake: Snake, food: Optional[Food]) -> None:
        """Redraw the whole board: background, food, then the snake."""

        if self.surface is None:
            return
        self.clear()
        if food is not None:
            self.fill_cell(food.cell, food.color)
        for cell in snake:
            self.fill_cell(cell, self.config.snake_color)
