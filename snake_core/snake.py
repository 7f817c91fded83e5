"""Snake body implementation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List

from .utils import Cell, Direction


@dataclass
class Snake:
    """Ordered sequence of cells, head first and tail last.

    Both movement operations return a new ``Snake`` and leave the receiver
    untouched, so a tick can compute a candidate body before committing it.
    """

    body: List[Cell] = field(default_factory=list)

    @classmethod
    def from_cells(cls, cells: Iterable[Cell]) -> "Snake":
        return cls(body=list(cells))

    @property
    def head(self) -> Cell:
        """Return the head cell (first element)."""

        return self.body[0]

    @property
    def tail(self) -> Cell:
        return self.body[-1]

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.body)

    def __contains__(self, cell: object) -> bool:
        return cell in self.body

    def occupies(self, cell: Cell) -> bool:
        """Return ``True`` if any segment sits on ``cell``."""

        return cell in self.body

    def advance(self, direction: Direction, step: int) -> "Snake":
        """Move one ``step`` in ``direction``, dropping the last segment.

        No collision checks are performed; length is preserved.
        """

        new_head = self.head.offset(direction, step)
        return Snake(body=[new_head] + self.body[:-1])

    def grow(self) -> "Snake":
        """Return a copy with one extra tail segment.

        The new segment continues the line the tail was receding along: it is
        placed at ``tail - (before_tail - tail)``.
        """

        if len(self.body) < 2:
            raise ValueError("A snake needs at least two segments to grow")
        tail = self.body[-1]
        before_tail = self.body[-2]
        return Snake(body=self.body + [tail - (before_tail - tail)])

    def to_list(self) -> list[dict[str, int]]:
        return [cell.to_dict() for cell in self.body]
