"""Translate key presses into direction changes."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from .utils import Direction

logger = logging.getLogger(__name__)

KEY_BINDINGS: Dict[str, Direction] = {
    "ArrowLeft": Direction.LEFT,
    "a": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
    "d": Direction.RIGHT,
    "ArrowUp": Direction.UP,
    "w": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "s": Direction.DOWN,
}


def direction_for_key(key: str) -> Optional[Direction]:
    """Return the direction bound to ``key`` or ``None`` for other keys."""

    if len(key) == 1:
        key = key.lower()
    return KEY_BINDINGS.get(key)


class DirectionController:
    """Holds the heading and accepts at most one change per tick window.

    The ``changed`` latch is set by an accepted change and released by the
    clock once the tick that uses it has moved the snake.
    """

    def __init__(self, direction: Direction = Direction.RIGHT) -> None:
        self.direction = direction
        self.changed = False

    def accept(self, direction: Direction, running: bool) -> bool:
        """Latch ``direction`` if the game runs and the window is still open.

        Exact reversals are always refused.
        """

        if not running or self.changed:
            return False
        if direction is self.direction.opposite:
            return False
        self.direction = direction
        self.changed = True
        return True

    def handle_key(self, key: str, running: bool) -> bool:
        """Feed one key press; unknown keys are ignored."""

        direction = direction_for_key(key)
        if direction is None:
            return False
        accepted = self.accept(direction, running)
        if accepted:
            logger.debug("Direction changed to %s", direction.name)
        return accepted

    def release(self) -> None:
        """Open the next tick window."""

        self.changed = False

    def reset(self, direction: Direction = Direction.RIGHT) -> None:
        self.direction = direction
        self.changed = False
