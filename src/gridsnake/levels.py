from __future__ import annotations

from .board import bounding_walls
from .linalg import DIRECTIONS, Vec2i


def plus_shape(center: Vec2i, arm_length: int) -> set[Vec2i]:
    """A plus sign of walls; `arm_length` counts the center cell."""
    walls = {center}
    for n in range(1, arm_length):
        for d in DIRECTIONS:
            walls.add(center + d * n)
    return walls


def default_walls(size: Vec2i) -> set[Vec2i]:
    """Bounding walls plus five plus-shaped obstacles, clipped to the board."""
    center = Vec2i(size.x // 2, size.y // 2)
    walls = bounding_walls(size)
    walls |= plus_shape(center, 10)
    for offset in (Vec2i(-10, -10), Vec2i(10, -10), Vec2i(-10, 10), Vec2i(10, 10)):
        walls |= plus_shape(center + offset, 5)
    return {p for p in walls if 0 <= p.x < size.x and 0 <= p.y < size.y}
