"""Shared fixtures: a manual event loop and a surface that records calls."""

from __future__ import annotations

import random
from typing import Callable, List, Optional

import pytest

from snake_core.config import GameConfig
from snake_core.food import Food
from snake_core.game import Game, GameEvent
from snake_core.utils import Cell


class FakeHandle:
    def __init__(self, delay: float, callback: Callable[[], None]) -> None:
        self.delay = delay
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeLoop:
    """Stands in for the asyncio loop; timers only fire when told to."""

    def __init__(self) -> None:
        self.handles: List[FakeHandle] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> FakeHandle:
        handle = FakeHandle(delay, callback)
        self.handles.append(handle)
        return handle

    @property
    def pending(self) -> List[FakeHandle]:
        return [handle for handle in self.handles if not handle.cancelled]

    def fire(self) -> FakeHandle:
        """Run the most recently scheduled live timer."""

        handle = self.pending[-1]
        handle.cancelled = True
        handle.callback()
        return handle


class RecordingSurface:
    def __init__(self) -> None:
        self.calls: List[tuple] = []

    def clear_rect(self, x: int, y: int, width: int, height: int) -> None:
        self.calls.append(("clear", x, y, width, height))

    def fill_rect(self, x: int, y: int, width: int, height: int, color) -> None:
        self.calls.append(("fill", x, y, width, height, tuple(color)))

    def fills(self) -> List[tuple]:
        return [call for call in self.calls if call[0] == "fill"]


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def loop() -> FakeLoop:
    return FakeLoop()


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def events() -> List[GameEvent]:
    return []


@pytest.fixture
def game(loop, rng, events) -> Game:
    game = Game(GameConfig(), loop=loop, rng=rng)
    game.add_listener(events.append)
    return game


@pytest.fixture
def put_food() -> Callable[[Game, Optional[Cell]], None]:
    """Replace the current food without going through random placement."""

    def _put(game: Game, cell: Optional[Cell]) -> None:
        game.food_manager.food = Food(cell=cell) if cell is not None else None

    return _put
