from __future__ import annotations

from dataclasses import dataclass

from .linalg import Vec2i

# Board
GRID_WIDTH, GRID_HEIGHT = 40, 40

# Game rules
TICK_MS = 100
INITIAL_SAFETY_SPACES = 10
GROWTH_STEPS_PER_APPLE = 5
APPLE_POINTS = 100
APPLES_PER_LEVEL = 10
MAX_PLACEMENT_ATTEMPTS = 10_000

# pygame view
CELL_SIZE = 12
SCORE_HEIGHT = 20
SMALL_FONT_SIZE = 20
BIG_FONT_SIZE = 50

BLACK = (0, 0, 0)
GREEN = (0, 255, 0)
DARK_GREEN = (0, 178, 0)
BLUE = (0, 0, 255)
RED = (255, 0, 0)
YELLOW = (255, 255, 80)
DARK_YELLOW = (124, 124, 39)
CYAN = (80, 255, 255)

BACKGROUND_COLOR = BLACK
WALL_COLOR = BLUE
APPLE_COLOR = RED
SNAKE_HEAD_COLOR = GREEN
SNAKE_TAIL_COLOR = DARK_GREEN
GRID_COLOR = (24, 24, 24)
SCORE_COLOR = YELLOW
SCORE_VALUE_COLOR = DARK_YELLOW
GAME_OVER_COLOR = RED
TAUNT_COLOR = CYAN

GAME_OVER_MESSAGE = "Game Over!"
TAUNTS = (
    "haha u suck",
    "lol get rekt",
    "lol ur ded",
    "and the apples lived peacefully.",
    "well, that's that.",
    "don't you have work to do?",
    "the apples are safe...for now.",
    "wow...you really suck at this!",
    "sucks to suck.",
)


@dataclass(frozen=True)
class GameConfig:
    """Runtime settings consumed by the game core and the views."""
    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT
    tick_ms: int = TICK_MS
    initial_safety_spaces: int = INITIAL_SAFETY_SPACES
    growth_per_apple: int = GROWTH_STEPS_PER_APPLE
    apple_points: int = APPLE_POINTS
    apples_per_level: int = APPLES_PER_LEVEL
    max_placement_attempts: int = MAX_PLACEMENT_ATTEMPTS
    show_grid: bool = True

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"board size must be at least 1x1, got {self.width}x{self.height}")
        if self.tick_ms < 1:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        for name in ("initial_safety_spaces", "growth_per_apple", "apple_points"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} cannot be negative")
        if self.apples_per_level < 1:
            raise ValueError("apples_per_level must be positive")
        if self.max_placement_attempts < 1:
            raise ValueError("max_placement_attempts must be positive")

    @property
    def size(self) -> Vec2i:
        return Vec2i(self.width, self.height)


DEFAULT_CONFIG = GameConfig()
