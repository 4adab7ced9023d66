from __future__ import annotations

import logging
import random
from collections.abc import Iterable
from typing import TYPE_CHECKING

from . import config
from .cells import EMPTY, Cell, Empty, Wall, draw_cell
from .errors import InvalidPlacementError, OutOfBoundsError
from .linalg import DIRECTIONS, Vec2i
from .snake import Snake

if TYPE_CHECKING:
    from .render import RenderSink

logger = logging.getLogger(__name__)


def bounding_walls(size: Vec2i) -> set[Vec2i]:
    """Positions on the rectangular perimeter of a board of the given size."""
    walls: set[Vec2i] = set()
    for x in range(size.x):
        walls.add(Vec2i(x, 0))
        walls.add(Vec2i(x, size.y - 1))
    for y in range(1, size.y - 1):
        walls.add(Vec2i(0, y))
        walls.add(Vec2i(size.x - 1, y))
    return walls


class Board:
    """Fixed-size grid of cells. Positions missing from `cells` are empty."""

    def __init__(
        self,
        size: Vec2i,
        walls: Iterable[Vec2i] = (),
        rng: random.Random | None = None,
    ):
        if size.x < 1 or size.y < 1:
            raise ValueError(f"board size must be at least 1x1, got {size.x}x{size.y}")
        self.size = size
        self.rng = rng if rng is not None else random.Random()
        self.cells: dict[Vec2i, Cell] = {}
        for pos in walls:
            self.put(Wall(pos))

    @property
    def width(self) -> int:
        return self.size.x

    @property
    def height(self) -> int:
        return self.size.y

    def copy(self) -> Board:
        board = Board(self.size, rng=self.rng)
        board.cells = dict(self.cells)
        return board

    def is_in_bounds(self, pos: Vec2i) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def _check_bounds(self, pos: Vec2i) -> None:
        if not 0 <= pos.x < self.width:
            raise OutOfBoundsError(f"x is {pos.x} - allowed range is 0 to {self.width - 1}")
        if not 0 <= pos.y < self.height:
            raise OutOfBoundsError(f"y is {pos.y} - allowed range is 0 to {self.height - 1}")

    def get_cell(self, pos: Vec2i) -> Cell:
        self._check_bounds(pos)
        return self.cells.get(pos, EMPTY)

    def put(self, cell: Cell) -> None:
        if isinstance(cell, Empty):
            self.remove(cell.position)
            return
        self._check_bounds(cell.position)
        self.cells[cell.position] = cell

    def remove(self, pos: Vec2i) -> None:
        self._check_bounds(pos)
        self.cells.pop(pos, None)

    def is_wall(self, pos: Vec2i) -> bool:
        return self.is_in_bounds(pos) and isinstance(self.cells.get(pos), Wall)

    def is_empty_cell(self, pos: Vec2i) -> bool:
        return self.is_in_bounds(pos) and pos not in self.cells

    def empty_cells(self) -> list[Vec2i]:
        return [
            Vec2i(x, y)
            for y in range(self.height)
            for x in range(self.width)
            if Vec2i(x, y) not in self.cells
        ]

    def random_position(self) -> Vec2i:
        return Vec2i(self.rng.randrange(self.width), self.rng.randrange(self.height))

    def is_game_over_for(self, snake: Snake) -> bool:
        return (
            not self.is_in_bounds(snake.head)
            or snake.is_crashed_into_self()
            or self.is_wall(snake.head)
        )

    def baby_snake(
        self,
        safety_spaces: int = config.INITIAL_SAFETY_SPACES,
        max_attempts: int = config.MAX_PLACEMENT_ATTEMPTS,
    ) -> Snake:
        """Place a two-segment snake that survives `safety_spaces` straight moves.

        Random empty cells are tried as the tail. For each one, the four
        possible heading directions are simulated forward; the first tail with
        at least one safe direction wins and a safe direction is picked at
        random.
        """
        for _ in range(max_attempts):
            tail = self.random_position()
            if not self.is_empty_cell(tail):
                continue
            candidates = [Snake.baby(d, tail + d, tail) for d in DIRECTIONS]
            safe = [
                snake
                for snake in candidates
                if not any(self.is_game_over_for(s) for s in snake.moves(safety_spaces))
            ]
            if safe:
                return self.rng.choice(safe)

        logger.error(
            "no safe snake placement on %dx%d board after %d attempts",
            self.width,
            self.height,
            max_attempts,
        )
        raise InvalidPlacementError(
            f"no safe snake placement found after {max_attempts} attempts"
        )

    def draw(self, sink: RenderSink) -> None:
        for cell in self.cells.values():
            draw_cell(cell, sink)

    def __repr__(self):
        return f"Board({self.width}x{self.height}, {len(self.cells)} cells)"
