from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from . import config
from .events import AddScore, CountApple, GrowSnake, RemoveCell, SpawnApple
from .linalg import Vec2i

if TYPE_CHECKING:
    from .render import RenderSink
    from .state import GameState

logger = logging.getLogger(__name__)

NOWHERE = Vec2i(-1, -1)


@dataclass(frozen=True)
class Empty:
    position: Vec2i = NOWHERE


@dataclass(frozen=True)
class Wall:
    position: Vec2i


@dataclass(frozen=True)
class Apple:
    position: Vec2i
    points: int = 0
    growth: int = 0


Cell = Union[Empty, Wall, Apple]

EMPTY = Empty()


def is_safe(cell: Cell) -> bool:
    match cell:
        case Wall():
            return False
        case Empty() | Apple():
            return True
    raise TypeError(f"not a cell: {cell!r}")


def on_touch(cell: Cell, state: GameState) -> GameState:
    """Run the touch handler of the cell under the snake's head."""
    match cell:
        case Empty() | Wall():
            # Wall collisions are detected by the state itself.
            return state
        case Apple(position=pos, points=points, growth=growth):
            logger.debug("apple at %r eaten: +%d points, +%d growth", pos, points, growth)
            state.queue_game_event(RemoveCell(pos))
            state.queue_game_event(SpawnApple(points, growth))
            state.queue_game_event(AddScore(points))
            state.queue_game_event(GrowSnake(growth))
            state.queue_game_event(CountApple())
            return state
    raise TypeError(f"not a cell: {cell!r}")


def draw_cell(cell: Cell, sink: RenderSink) -> None:
    match cell:
        case Empty():
            pass
        case Wall(position=pos):
            sink.set_color(config.WALL_COLOR)
            sink.draw_cell_at(pos)
        case Apple(position=pos):
            sink.set_color(config.APPLE_COLOR)
            sink.draw_cell_at(pos)
        case _:
            raise TypeError(f"not a cell: {cell!r}")
