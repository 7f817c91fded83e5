"""Grid primitives used by the simulation core."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import random
from typing import Iterable, List, Sequence, Tuple


class Direction(Enum):
    """Heading of the snake, valued by its unit ``(dx, dy)`` offset.

    The y axis grows downwards, matching the drawing surface.
    """

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def opposite(self) -> "Direction":
        """Return the direction pointing the exact other way."""

        dx, dy = self.value
        return Direction((-dx, -dy))

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        """Return the direction called ``name`` (``"left"``, ``"UP"``...)."""

        try:
            return cls[name.strip().upper()]
        except KeyError as exc:
            raise ValueError(f"Unknown direction {name!r}") from exc


@dataclass(frozen=True)
class Cell:
    """A grid-aligned position on the board.

    Coordinates are expressed in surface units and are multiples of the
    movement step. Two cells are equal iff both coordinates match.
    """

    x: int
    y: int

    def __add__(self, other: "Cell") -> "Cell":
        return Cell(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Cell") -> "Cell":
        return Cell(self.x - other.x, self.y - other.y)

    def offset(self, direction: Direction, step: int) -> "Cell":
        """Return the neighbouring cell one ``step`` away in ``direction``."""

        dx, dy = direction.value
        return Cell(self.x + dx * step, self.y + dy * step)

    def to_tuple(self) -> Tuple[int, int]:
        """Return the cell as an ``(x, y)`` tuple."""

        return self.x, self.y

    def to_dict(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y}


def cells_from_pairs(pairs: Iterable[Sequence[int]]) -> List[Cell]:
    """Build cells from ``(x, y)`` pairs."""

    return [Cell(int(x), int(y)) for x, y in pairs]


def random_color(rng: random.Random) -> tuple[int, int, int]:
    """Return a random RGB triple."""

    return tuple(rng.randint(0, 255) for _ in range(3))  # type: ignore[return-value]
