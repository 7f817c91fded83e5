"""Runtime configuration for a game."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import Optional, Tuple

from . import constants
from .grid import Grid
from .utils import Cell, Direction, cells_from_pairs


@dataclass
class GameConfig:
    """Board geometry, pacing and initial layout of a game.

    Defaults come from :mod:`snake_core.constants`. Invalid combinations raise
    ``ValueError`` on construction.
    """

    width: int = constants.CANVAS_WIDTH
    height: int = constants.CANVAS_HEIGHT
    step: int = constants.STEP
    block_size: int = constants.BLOCK_SIZE
    base_speed_ms: float = constants.BASE_SPEED_MS
    speed_decay: float = constants.SPEED_DECAY
    min_speed_ms: float = constants.MIN_SPEED_MS
    initial_snake: Tuple[Tuple[int, int], ...] = constants.INITIAL_SNAKE
    initial_direction: Direction = field(
        default_factory=lambda: Direction.from_name(constants.INITIAL_DIRECTION)
    )
    snake_color: Tuple[int, int, int] = constants.SNAKE_COLOR
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.step <= 0:
            raise ValueError("step must be positive")
        if self.width <= 0 or self.height <= 0:
            raise ValueError("board dimensions must be positive")
        if self.width % self.step or self.height % self.step:
            raise ValueError("board dimensions must be multiples of step")
        if not 0 < self.block_size <= self.step:
            raise ValueError("block_size must be in (0, step]")
        if not 0 < self.speed_decay < 1:
            raise ValueError("speed_decay must be between 0 and 1")
        if not 0 < self.min_speed_ms <= self.base_speed_ms:
            raise ValueError("min_speed_ms must be positive and not above base_speed_ms")
        if isinstance(self.initial_direction, str):
            self.initial_direction = Direction.from_name(self.initial_direction)
        cells = self.initial_cells()
        if len(cells) < 2:
            raise ValueError("the initial snake needs at least two segments")
        grid = self.grid()
        if any(grid.is_out_of_bounds(cell) for cell in cells):
            raise ValueError("the initial snake must lie inside the board")

    def grid(self) -> Grid:
        return Grid(width=self.width, height=self.height, step=self.step)

    def initial_cells(self) -> list[Cell]:
        return cells_from_pairs(self.initial_snake)

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "GameConfig":
        """Build a config from options added by :func:`add_arguments`."""

        return cls(
            width=args.board_width,
            height=args.board_height,
            step=args.step,
            block_size=max(1, min(constants.BLOCK_SIZE, args.step - 1)),
            base_speed_ms=args.speed,
            speed_decay=args.decay,
            min_speed_ms=min(args.min_speed, args.speed),
            seed=args.seed,
        )


def add_arguments(parser: argparse.ArgumentParser) -> None:
    """Register the shared game options on ``parser``."""

    group = parser.add_argument_group("game")
    group.add_argument("--board-width", type=int, default=constants.CANVAS_WIDTH, help="Board width")
    group.add_argument("--board-height", type=int, default=constants.CANVAS_HEIGHT, help="Board height")
    group.add_argument("--step", type=int, default=constants.STEP, help="Cell edge length")
    group.add_argument("--speed", type=float, default=constants.BASE_SPEED_MS, help="Initial tick interval in ms")
    group.add_argument("--decay", type=float, default=constants.SPEED_DECAY, help="Interval multiplier per food")
    group.add_argument("--min-speed", type=float, default=constants.MIN_SPEED_MS, help="Shortest tick interval in ms")
    group.add_argument("--seed", type=int, default=None, help="Seed for food placement")
    group.add_argument("--log-level", default="INFO", help="Logging level")
