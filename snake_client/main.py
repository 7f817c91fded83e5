"""Entry point for the pygame based client."""

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import Optional

import pygame

from snake_core.board import Board
from snake_core.config import GameConfig, add_arguments
from snake_core.game import Game, GameEvent

from .entities import BoardState, config_from_welcome
from .input import Command, command_for, key_name
from .network import NetworkClient
from .render import Renderer

FRAME_RATE = 60


class GameOverBanner:
    """Remembers the end-of-game message until the next start."""

    def __init__(self) -> None:
        self.text: Optional[str] = None

    def on_game_event(self, event: GameEvent) -> None:
        if event.kind == "game_over":
            self.text = f"game over, score {event.score}"
        elif event.kind == "start":
            self.text = None


async def run_local(args: argparse.Namespace) -> None:
    """Play with the game running inside this process."""

    config = GameConfig.from_args(args)
    pygame.init()
    renderer = Renderer(config)
    game = Game(config)
    game.attach_surface(renderer.board_surface)
    banner = GameOverBanner()
    game.add_listener(banner.on_game_event)

    running = True
    while running:
        for event in pygame.event.get():
            command = command_for(event)
            if command is Command.QUIT:
                running = False
            elif command is Command.START:
                game.start()
            elif command is Command.STOP:
                game.stop()
            else:
                key = key_name(event)
                if key is not None:
                    game.on_key_event(key)

        renderer.draw_header(game.score, game.running, banner.text)
        renderer.present()
        await asyncio.sleep(1 / FRAME_RATE)

    game.stop()
    game.attach_surface(None)
    pygame.quit()


async def run_remote(args: argparse.Namespace) -> None:
    """Play a game hosted by ``snake-server``."""

    network = NetworkClient(args.connect)
    welcome = await network.connect()
    config = config_from_welcome(welcome)

    pygame.init()
    renderer = Renderer(config)
    board = Board(config, renderer.board_surface)
    state = BoardState()
    banner: Optional[str] = None

    running = True
    while running:
        for event in pygame.event.get():
            command = command_for(event)
            if command is Command.QUIT:
                running = False
            elif command is not None:
                await network.send_command(command.value)
            else:
                key = key_name(event)
                if key is not None:
                    await network.send_key(key)

        message = network.poll()
        while message is not None:
            kind = message.get("type")
            if kind == "snapshot":
                state = BoardState.from_snapshot(message)
                if state.running:
                    banner = None
                    board.draw(state.snake, state.food)
                else:
                    board.clear()
            elif kind == "game_over":
                banner = f"game over, score {message.get('score', 0)}"
            elif kind == "disconnect":
                logging.info("Server closed the connection")
                running = False
            message = network.poll()

        renderer.draw_header(state.score, state.running, banner)
        renderer.present()
        await asyncio.sleep(1 / FRAME_RATE)

    await network.close()
    pygame.quit()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play snake")
    parser.add_argument(
        "--connect",
        metavar="URI",
        default=None,
        help="Join a snake-server at URI (e.g. ws://127.0.0.1:8765) instead of playing locally",
    )
    add_arguments(parser)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="[%(levelname)s] %(message)s")
    if args.connect:
        asyncio.run(run_remote(args))
    else:
        asyncio.run(run_local(args))


if __name__ == "__main__":
    main()
