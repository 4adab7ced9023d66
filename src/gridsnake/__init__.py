"""Snake on a grid: an immutable game-state engine with a pygame front end."""
from __future__ import annotations

from .board import Board, bounding_walls
from .cells import EMPTY, Apple, Cell, Empty, Wall
from .config import DEFAULT_CONFIG, GameConfig
from .errors import InvalidPlacementError, OutOfBoundsError, SnakeError, UnsupportedTransitionError
from .inputs import InputEvent
from .linalg import Vec2i
from .score import Score
from .snake import Snake
from .state import GameState

__all__ = [
    "Apple",
    "Board",
    "Cell",
    "DEFAULT_CONFIG",
    "EMPTY",
    "Empty",
    "GameConfig",
    "GameState",
    "InputEvent",
    "InvalidPlacementError",
    "OutOfBoundsError",
    "Score",
    "Snake",
    "SnakeError",
    "UnsupportedTransitionError",
    "Vec2i",
    "Wall",
    "bounding_walls",
]
