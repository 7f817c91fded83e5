"""Gameplay constants shared across the core modules."""

CANVAS_WIDTH: int = 1000
CANVAS_HEIGHT: int = 1000
STEP: int = 40
BLOCK_SIZE: int = 39
BASE_SPEED_MS: float = 500.0
SPEED_DECAY: float = 0.9
MIN_SPEED_MS: float = 50.0
FOOD_PLACEMENT_ATTEMPTS: int = 64
SNAKE_COLOR: tuple[int, int, int] = (0, 128, 0)
FALLBACK_FOOD_COLOR: tuple[int, int, int] = (255, 0, 0)
INITIAL_SNAKE: tuple[tuple[int, int], ...] = ((0, 0), (0, 40))
INITIAL_DIRECTION: str = "right"
