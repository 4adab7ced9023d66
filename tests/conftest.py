from __future__ import annotations

import random

import pytest

from gridsnake.board import Board, bounding_walls
from gridsnake.cells import Apple
from gridsnake.config import GameConfig
from gridsnake.linalg import RIGHT, Vec2i
from gridsnake.snake import Snake
from gridsnake.state import GameState


class RecordingSink:
    def __init__(self):
        self.calls: list[tuple] = []

    def set_color(self, color):
        self.calls.append(("color", color))

    def draw_cell_at(self, pos):
        self.calls.append(("cell", pos))

    def draw_score(self, score):
        self.calls.append(("score", score.points))

    def draw_game_over(self, message):
        self.calls.append(("game_over", message))

    def draw_grid(self):
        self.calls.append(("grid",))


def walled_state(seed: int = 0, settings: GameConfig | None = None) -> GameState:
    """10x10 walled board, snake heading right from (4,5) to (5,5), apple at (7,5)."""
    size = Vec2i(10, 10)
    board = Board(size, bounding_walls(size), random.Random(seed))
    board.put(Apple(Vec2i(7, 5), 100, 5))
    snake = Snake.baby(RIGHT, Vec2i(5, 5), Vec2i(4, 5))
    if settings is None:
        # Default-sized settings so that play-again builds a full board.
        settings = GameConfig()
    return GameState.start_with(board, snake, settings)


def apples_on(board: Board) -> list[Apple]:
    return [cell for cell in board.cells.values() if isinstance(cell, Apple)]


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def state():
    return walled_state()
