"""Translate pygame keyboard events into game input."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

import pygame

DIRECTION_KEYS: Dict[int, str] = {
    pygame.K_LEFT: "ArrowLeft",
    pygame.K_RIGHT: "ArrowRight",
    pygame.K_UP: "ArrowUp",
    pygame.K_DOWN: "ArrowDown",
    pygame.K_a: "a",
    pygame.K_d: "d",
    pygame.K_w: "w",
    pygame.K_s: "s",
}


class Command(Enum):
    START = "start"
    STOP = "stop"
    QUIT = "quit"


COMMAND_KEYS: Dict[int, Command] = {
    pygame.K_SPACE: Command.START,
    pygame.K_RETURN: Command.START,
    pygame.K_ESCAPE: Command.STOP,
}


def key_name(event: pygame.event.Event) -> Optional[str]:
    """Return the key string the game understands for ``event``."""

    if event.type != pygame.KEYDOWN:
        return None
    return DIRECTION_KEYS.get(event.key)


def command_for(event: pygame.event.Event) -> Optional[Command]:
    if event.type == pygame.QUIT:
        return Command.QUIT
    if event.type == pygame.KEYDOWN:
        return COMMAND_KEYS.get(event.key)
    return None
