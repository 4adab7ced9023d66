from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2i:
    x: int = 0
    y: int = 0

    def __add__(self, other: Vec2i) -> Vec2i:
        return Vec2i(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2i) -> Vec2i:
        return Vec2i(self.x - other.x, self.y - other.y)

    def __mul__(self, n: int) -> Vec2i:
        return Vec2i(self.x * n, self.y * n)

    def __rmul__(self, n: int) -> Vec2i:
        return self.__mul__(n)

    def __neg__(self) -> Vec2i:
        return Vec2i(-self.x, -self.y)

    def plus(self, x: int, y: int) -> Vec2i:
        return Vec2i(self.x + x, self.y + y)

    def dot(self, other: Vec2i) -> int:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vec2i) -> int:
        return self.x * other.y - self.y * other.x

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def is_perpendicular_to(self, other: Vec2i) -> bool:
        return self.dot(other) == 0

    def is_parallel_to(self, other: Vec2i) -> bool:
        # Zero determinant of the two row vectors.
        return self.cross(other) == 0

    def __repr__(self):
        return f"<{self.x},{self.y}>"

    def to_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


ZERO = Vec2i(0, 0)
RIGHT = Vec2i(1, 0)
DOWN = Vec2i(0, 1)
LEFT = -RIGHT
UP = -DOWN

# Screen coordinates: y grows downward.
DIRECTIONS: tuple[Vec2i, ...] = (RIGHT, DOWN, LEFT, UP)
