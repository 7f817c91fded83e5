"""Tests for the websocket game server, without opening sockets."""

import asyncio
import json

import websockets

from snake_core.collision import CollisionResult
from snake_core.config import GameConfig
from snake_core.game import GameEvent
from snake_core.utils import Direction
from snake_server.main import GameServer, parse_args


class FakeConnection:
    remote_address = ("127.0.0.1", 50000)

    def __init__(self, closed: bool = False) -> None:
        self.closed = closed
        self.sent = []

    async def send(self, payload: str) -> None:
        if self.closed:
            raise websockets.ConnectionClosed(None, None)
        self.sent.append(payload)


def drain(queue: asyncio.Queue) -> list:
    messages = []
    while not queue.empty():
        messages.append(json.loads(queue.get_nowait()))
    return messages


class TestGameServer:
    """Tests for command handling and broadcasting."""

    def test_commands_drive_the_game(self):
        async def scenario():
            server = GameServer("127.0.0.1", 0, GameConfig(seed=1))
            server.handle_message({"type": "start"})
            assert server.game.running
            server.handle_message({"type": "key", "key": "ArrowDown"})
            assert server.game.direction is Direction.DOWN
            server.handle_message({"type": "stop"})
            assert not server.game.running
            return drain(server._outbox)

        messages = asyncio.run(scenario())
        assert [message["type"] for message in messages] == ["snapshot", "snapshot"]
        assert messages[0]["running"] is True
        assert messages[1]["running"] is False

    def test_game_over_is_announced_first(self):
        async def scenario():
            server = GameServer("127.0.0.1", 0, GameConfig())
            server._on_game_event(GameEvent(kind="game_over", score=2, collision=CollisionResult.BOUNDARY))
            return drain(server._outbox)

        messages = asyncio.run(scenario())
        assert messages[0] == {"type": "game_over", "score": 2, "reason": "boundary"}
        assert messages[1]["type"] == "snapshot"

    def test_broadcast_drops_closed_clients(self):
        async def scenario():
            server = GameServer("127.0.0.1", 0, GameConfig())
            alive = FakeConnection()
            dead = FakeConnection(closed=True)
            server.clients = {alive, dead}
            await server._broadcast('{"type": "snapshot"}')
            return server, alive, dead

        server, alive, dead = asyncio.run(scenario())
        assert alive.sent == ['{"type": "snapshot"}']
        assert server.clients == {alive}

    def test_parse_args(self):
        args = parse_args(["--port", "9000", "--speed", "250"])
        assert args.port == 9000
        assert GameConfig.from_args(args).base_speed_ms == 250
