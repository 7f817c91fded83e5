"""Pygame based renderer for the game client."""

from __future__ import annotations

from typing import Optional, Tuple

import pygame

from snake_core.config import GameConfig

HEADER_HEIGHT = 60
BACKGROUND_COLOR = (226, 232, 240)
HEADER_COLOR = (255, 255, 255)
TEXT_COLOR = (15, 23, 42)
GAME_OVER_COLOR = (200, 30, 30)


class PygameSurface:
    """Drawing target for :class:`snake_core.board.Board` backed by pygame."""

    def __init__(self, surface: pygame.Surface, background: Tuple[int, int, int] = BACKGROUND_COLOR) -> None:
        self.surface = surface
        self.background = background

    def clear_rect(self, x: int, y: int, width: int, height: int) -> None:
        self.surface.fill(self.background, pygame.Rect(x, y, width, height))

    def fill_rect(self, x: int, y: int, width: int, height: int, color: Tuple[int, int, int]) -> None:
        self.surface.fill(color, pygame.Rect(x, y, width, height))


class Renderer:
    """Owns the window: a header strip above the board canvas."""

    def __init__(self, config: GameConfig) -> None:
        self.screen = pygame.display.set_mode((config.width, config.height + HEADER_HEIGHT))
        pygame.display.set_caption("SNAKE")
        self.title_font = pygame.font.SysFont("arial", 32)
        self.font = pygame.font.SysFont("arial", 18)
        canvas = self.screen.subsurface(pygame.Rect(0, HEADER_HEIGHT, config.width, config.height))
        self.board_surface = PygameSurface(canvas)
        self.board_surface.clear_rect(0, 0, config.width, config.height)

    def draw_header(self, score: int, running: bool, banner: Optional[str] = None) -> None:
        width = self.screen.get_width()
        self.screen.fill(HEADER_COLOR, pygame.Rect(0, 0, width, HEADER_HEIGHT))
        title = self.title_font.render("SNAKE", True, TEXT_COLOR)
        self.screen.blit(title, (16, (HEADER_HEIGHT - title.get_height()) / 2))

        label = self.font.render(f"score {score}", True, TEXT_COLOR)
        self.screen.blit(label, ((width - label.get_width()) / 2, (HEADER_HEIGHT - label.get_height()) / 2))

        hint = "esc: stop" if running else "space: start"
        hint_surface = self.font.render(hint, True, TEXT_COLOR)
        self.screen.blit(hint_surface, (width - hint_surface.get_width() - 16, 8))
        if banner:
            banner_surface = self.font.render(banner, True, GAME_OVER_COLOR)
            self.screen.blit(banner_surface, (width - banner_surface.get_width() - 16, 32))

    def present(self) -> None:
        pygame.display.flip()
