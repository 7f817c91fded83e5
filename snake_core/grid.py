"""Discrete coordinate space the snake moves in."""

from __future__ import annotations

from dataclasses import dataclass
import random
from typing import Iterator

from . import constants
from .utils import Cell


@dataclass(frozen=True)
class Grid:
    """Playable surface extents and the edge length of one cell."""

    width: int = constants.CANVAS_WIDTH
    height: int = constants.CANVAS_HEIGHT
    step: int = constants.STEP

    @property
    def columns(self) -> int:
        return self.width // self.step

    @property
    def rows(self) -> int:
        return self.height // self.step

    def is_out_of_bounds(self, cell: Cell) -> bool:
        """Return ``True`` if ``cell`` lies outside the playable surface."""

        return (
            cell.x < 0
            or cell.x > self.width - self.step
            or cell.y < 0
            or cell.y > self.height - self.step
        )

    def random_cell(self, rng: random.Random) -> Cell:
        """Return a uniformly random cell quantized to ``step``."""

        x = int(rng.random() * self.width / self.step) * self.step
        y = int(rng.random() * self.height / self.step) * self.step
        return Cell(x, y)

    def cells(self) -> Iterator[Cell]:
        """Yield every in-bounds cell, row by row."""

        for row in range(self.rows):
            for column in range(self.columns):
                yield Cell(column * self.step, row * self.step)
