"""Client side state rebuilt from server messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from snake_core import constants
from snake_core.config import GameConfig
from snake_core.food import Food
from snake_core.snake import Snake
from snake_core.utils import Cell


def config_from_welcome(welcome: dict) -> GameConfig:
    """Rebuild the board geometry announced by the server."""

    config = GameConfig(
        width=int(welcome.get("width", constants.CANVAS_WIDTH)),
        height=int(welcome.get("height", constants.CANVAS_HEIGHT)),
        step=int(welcome.get("step", constants.STEP)),
        block_size=int(welcome.get("blockSize", constants.BLOCK_SIZE)),
    )
    if "snakeColor" in welcome:
        config.snake_color = tuple(welcome["snakeColor"])  # type: ignore[assignment]
    return config


@dataclass
class BoardState:
    """Renderable game state synchronised from the server."""

    snake: Snake = field(default_factory=Snake)
    food: Optional[Food] = None
    score: int = 0
    running: bool = False

    @classmethod
    def from_snapshot(cls, snapshot: dict) -> "BoardState":
        cells = [Cell(int(segment["x"]), int(segment["y"])) for segment in snapshot.get("snake", [])]
        food_payload = snapshot.get("food")
        food = None
        if food_payload:
            food = Food(
                cell=Cell(int(food_payload["x"]), int(food_payload["y"])),
                color=tuple(food_payload.get("color", constants.FALLBACK_FOOD_COLOR)),  # type: ignore[arg-type]
            )
        return cls(
            snake=Snake.from_cells(cells),
            food=food,
            score=int(snapshot.get("score", 0)),
            running=bool(snapshot.get("running", False)),
        )
