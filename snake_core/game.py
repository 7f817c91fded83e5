"""Authoritative game state and the tick loop that advances it."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum
import logging
import random
from typing import Callable, List, Optional

from . import collision
from .board import Board, Surface
from .clock import TickTimer
from .collision import CollisionResult
from .config import GameConfig
from .direction import DirectionController
from .food import Food, FoodManager
from .snake import Snake
from .utils import Direction

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    STOPPED = "stopped"
    RUNNING = "running"


@dataclass
class GameEvent:
    """Notification handed to listeners after a state change.

    ``kind`` is one of ``start``, ``tick``, ``food``, ``game_over`` and
    ``stop``. For ``game_over`` the score is the final one and ``collision``
    tells what ended the game.
    """

    kind: str
    score: int
    collision: Optional[CollisionResult] = None


Listener = Callable[[GameEvent], None]


@dataclass
class GameState:
    """Everything that is reset together when a game starts or stops."""

    snake: Snake
    status: GameStatus = GameStatus.STOPPED
    score: int = 0
    speed_ms: float = 0.0

    @classmethod
    def initial(cls, config: GameConfig) -> "GameState":
        return cls(
            snake=Snake.from_cells(config.initial_cells()),
            speed_ms=config.base_speed_ms,
        )


class Game:
    """Owns one game and drives it from a cancellable asyncio timer.

    All handlers run on the event loop thread, so a tick and a key press never
    interleave. ``loop`` defaults to the running loop at :meth:`start`.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        surface: Optional[Surface] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.grid = self.config.grid()
        self.board = Board(self.config, surface)
        self.rng = rng or random.Random(self.config.seed)
        self.food_manager = FoodManager(self.grid, self.rng, on_clear=self.board.clear_food)
        self.controller = DirectionController(self.config.initial_direction)
        self.timer = TickTimer(self.tick, loop)
        self.state = GameState.initial(self.config)
        self._listeners: List[Listener] = []

    @property
    def running(self) -> bool:
        return self.state.status is GameStatus.RUNNING

    @property
    def status(self) -> GameStatus:
        return self.state.status

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def speed(self) -> float:
        """Current tick interval in milliseconds."""

        return self.state.speed_ms

    @property
    def snake(self) -> Snake:
        return self.state.snake

    @property
    def food(self) -> Optional[Food]:
        return self.food_manager.food

    @property
    def direction(self) -> Direction:
        return self.controller.direction

    def snapshot(self) -> dict:
        """Return a JSON friendly view of the current state."""

        food = self.food
        return {
            "running": self.running,
            "score": self.score,
            "speed": self.speed,
            "direction": self.direction.name.lower(),
            "snake": self.snake.to_list(),
            "food": food.to_dict() if food else None,
        }

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, kind: str, collision_result: Optional[CollisionResult] = None) -> None:
        event = GameEvent(kind=kind, score=self.score, collision=collision_result)
        for listener in list(self._listeners):
            listener(event)

    def attach_surface(self, surface: Optional[Surface]) -> None:
        """Bind or unbind the drawing target."""

        self.board.attach(surface)
        if self.running:
            self.board.draw(self.snake, self.food)

    def on_key_event(self, key: str) -> bool:
        """Feed one key press; returns whether it changed the direction."""

        return self.controller.handle_key(key, self.running)

    def _reset(self) -> None:
        self.state = GameState.initial(self.config)
        self.controller.reset(self.config.initial_direction)
        self.food_manager.reset()

    def start(self) -> None:
        """Start a fresh game; does nothing while one is running."""

        if self.running:
            return
        self._reset()
        self.food_manager.place(self.state.snake)
        self.timer.schedule(self.state.speed_ms)
        self.state.status = GameStatus.RUNNING
        self.board.draw(self.snake, self.food)
        logger.info("Game started")
        self._emit("start")

    def stop(self) -> None:
        """Cancel the pending tick, wipe the board and reset everything."""

        was_running = self.running
        self.timer.cancel()
        self.board.clear()
        self._reset()
        if was_running:
            logger.info("Game stopped")
            self._emit("stop")

    def tick(self) -> None:
        """Advance the game by one cell."""

        if not self.running:
            return
        state = self.state
        candidate = state.snake.advance(self.controller.direction, self.grid.step)
        result = collision.evaluate(candidate, self.grid, self.food)

        if result.fatal:
            logger.info("Game over (%s collision), score %d", result.value, state.score)
            self._emit("game_over", result)
            self.stop()
            return

        kind = "tick"
        if result is CollisionResult.FOOD:
            candidate = candidate.grow()
            self.food_manager.consume(candidate)
            state.score += 1
            state.speed_ms = max(state.speed_ms * self.config.speed_decay, self.config.min_speed_ms)
            logger.debug("Food eaten, score %d, interval %.1f ms", state.score, state.speed_ms)
            kind = "food"
        state.snake = candidate

        self.board.draw(state.snake, self.food)
        self.controller.release()
        self.timer.schedule(state.speed_ms)
        self._emit(kind, result)
