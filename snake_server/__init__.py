"""Websocket host for a snake game."""

__all__ = [
    "main",
    "protocol",
]
