"""JSON protocol helpers for the websocket transport."""

from __future__ import annotations

import json

from snake_core.config import GameConfig
from snake_core.game import Game, GameEvent

CLIENT_MESSAGE_TYPES = {"start", "stop", "key"}


def parse_client_message(message: str | bytes) -> dict:
    """Parse a raw client ``message`` into a Python dictionary.

    Raises ``ValueError`` for anything that is not a known command object.
    """

    try:
        payload = json.loads(message)
    except json.JSONDecodeError as exc:
        raise ValueError("Invalid client message") from exc
    if not isinstance(payload, dict):
        raise ValueError("Client message must be a JSON object")
    if payload.get("type") not in CLIENT_MESSAGE_TYPES:
        raise ValueError(f"Unknown message type {payload.get('type')!r}")
    if payload["type"] == "key" and not isinstance(payload.get("key"), str):
        raise ValueError("Key messages need a string 'key'")
    return payload


def encode_welcome(config: GameConfig) -> str:
    """Encode the board geometry sent upon connection."""

    return json.dumps(
        {
            "type": "welcome",
            "width": config.width,
            "height": config.height,
            "step": config.step,
            "blockSize": config.block_size,
            "snakeColor": list(config.snake_color),
        }
    )


def encode_snapshot(game: Game) -> str:
    """Encode the current game state for broadcasting to clients."""

    snapshot = {"type": "snapshot"}
    snapshot.update(game.snapshot())
    return json.dumps(snapshot)


def encode_game_over(event: GameEvent) -> str:
    return json.dumps(
        {
            "type": "game_over",
            "score": event.score,
            "reason": event.collision.value if event.collision else None,
        }
    )
