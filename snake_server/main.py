"""Entry point for the asyncio based game server."""

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import Set

import websockets
from websockets.asyncio.server import ServerConnection, serve

from snake_core.config import GameConfig, add_arguments
from snake_core.game import Game, GameEvent

from . import protocol


class GameServer:
    """Hosts one headless game and mirrors it to every connected client.

    Any client may start or stop the game and steer the snake. State changes
    are queued by the game listener and sent by a single broadcaster task so
    clients see them in order.
    """

    def __init__(self, host: str, port: int, config: GameConfig) -> None:
        self.host = host
        self.port = port
        self.config = config
        self.game = Game(config)
        self.clients: Set[ServerConnection] = set()
        self._outbox: asyncio.Queue[str] = asyncio.Queue()
        self.game.add_listener(self._on_game_event)

    async def start(self) -> None:
        """Start the websocket server and the broadcast loop."""

        async with serve(self._handle_client, self.host, self.port):
            logging.info("Server listening on %s:%s", self.host, self.port)
            await self._run_broadcast_loop()

    def _on_game_event(self, event: GameEvent) -> None:
        if event.kind == "game_over":
            self._outbox.put_nowait(protocol.encode_game_over(event))
        self._outbox.put_nowait(protocol.encode_snapshot(self.game))

    async def _run_broadcast_loop(self) -> None:
        while True:
            payload = await self._outbox.get()
            await self._broadcast(payload)

    async def _broadcast(self, payload: str) -> None:
        disconnected = []
        for ws in list(self.clients):
            try:
                await ws.send(payload)
            except websockets.ConnectionClosed:
                logging.info("Dropping closed client %s", ws.remote_address)
                disconnected.append(ws)
        for ws in disconnected:
            self.clients.discard(ws)

    def handle_message(self, payload: dict) -> None:
        """Apply one parsed client command to the game."""

        kind = payload["type"]
        if kind == "start":
            self.game.start()
        elif kind == "stop":
            self.game.stop()
        elif kind == "key":
            self.game.on_key_event(payload["key"])

    async def _handle_client(self, websocket: ServerConnection) -> None:
        self.clients.add(websocket)
        await websocket.send(protocol.encode_welcome(self.config))
        await websocket.send(protocol.encode_snapshot(self.game))
        logging.info("Client %s connected", websocket.remote_address)
        try:
            async for message in websocket:
                try:
                    payload = protocol.parse_client_message(message)
                except ValueError as exc:
                    logging.debug("Ignoring message from %s: %s", websocket.remote_address, exc)
                    continue
                self.handle_message(payload)
        except websockets.ConnectionClosed:
            pass
        finally:
            logging.info("Client %s disconnected", websocket.remote_address)
            self.clients.discard(websocket)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the snake game server")
    parser.add_argument("--host", default="0.0.0.0", help="Host interface to bind to")
    parser.add_argument("--port", type=int, default=8765, help="Port to listen on")
    add_arguments(parser)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="[%(levelname)s] %(message)s")
    config = GameConfig.from_args(args)
    server = GameServer(args.host, args.port, config)
    asyncio.run(server.start())


if __name__ == "__main__":
    main()
