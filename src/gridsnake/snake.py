from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from . import config
from .linalg import Vec2i

if TYPE_CHECKING:
    from .render import RenderSink


@dataclass(frozen=True)
class Snake:
    """Immutable snake.

    `tail` is ordered by distance from the head and holds no duplicates. Every
    operation returns a new snake (or this one, when nothing changes).
    """
    direction: Vec2i
    head: Vec2i
    tail: tuple[Vec2i, ...] = ()
    growth_steps_remaining: int = 0
    _tail_set: frozenset[Vec2i] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # The tail is an ordered set: repeated segments collapse to their first occurrence.
        tail = tuple(dict.fromkeys(self.tail))
        object.__setattr__(self, "tail", tail)
        object.__setattr__(self, "_tail_set", frozenset(tail))

    @classmethod
    def baby(cls, direction: Vec2i, head: Vec2i, tail: Vec2i) -> Snake:
        return cls(direction, head, (tail,))

    def move(self) -> Snake:
        # While growing, the far end of the tail stays put.
        keep = len(self.tail) if self.growth_steps_remaining > 0 else len(self.tail) - 1
        return Snake(
            self.direction,
            self.head + self.direction,
            (self.head, *self.tail[:keep]),
            max(self.growth_steps_remaining - 1, 0),
        )

    def moves(self, n: int) -> SnakeMoves:
        return SnakeMoves(self, n)

    def is_valid_direction(self, direction: Vec2i) -> bool:
        return self.direction.is_perpendicular_to(direction)

    def with_direction(self, direction: Vec2i) -> Snake:
        if not self.is_valid_direction(direction):
            return self
        return replace(self, direction=direction)

    def grow_by(self, steps: int) -> Snake:
        if steps <= 0:
            return self
        return replace(self, growth_steps_remaining=self.growth_steps_remaining + steps)

    def contains(self, pos: Vec2i) -> bool:
        return pos == self.head or pos in self._tail_set

    def is_crashed_into_self(self) -> bool:
        return self.head in self._tail_set

    def __len__(self) -> int:
        return 1 + len(self.tail)

    def draw(self, sink: RenderSink) -> None:
        sink.set_color(config.SNAKE_TAIL_COLOR)
        for pos in self.tail:
            sink.draw_cell_at(pos)
        sink.set_color(config.SNAKE_HEAD_COLOR)
        sink.draw_cell_at(self.head)


class SnakeMoves:
    """The snake followed by its next `n` straight-line moves.

    Iterating again starts over from the original snake.
    """

    def __init__(self, snake: Snake, n: int):
        self.snake = snake
        self.n = max(n, 0)

    def __iter__(self) -> Iterator[Snake]:
        snake = self.snake
        yield snake
        for _ in range(self.n):
            snake = snake.move()
            yield snake

    def __len__(self) -> int:
        return self.n + 1
