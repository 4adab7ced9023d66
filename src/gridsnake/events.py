"""Deferred game events.

Cell touches do not change the board directly. They queue these records on the
state, and the tick applies the whole queue, in order, before the snake moves.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .linalg import Vec2i


@dataclass(frozen=True)
class RemoveCell:
    pos: Vec2i


@dataclass(frozen=True)
class SpawnApple:
    points: int
    growth: int
    # None picks a random empty cell when the event is applied.
    pos: Vec2i | None = None


@dataclass(frozen=True)
class AddScore:
    points: int


@dataclass(frozen=True)
class GrowSnake:
    steps: int


@dataclass(frozen=True)
class CountApple:
    pass


GameEvent = Union[RemoveCell, SpawnApple, AddScore, GrowSnake, CountApple]
