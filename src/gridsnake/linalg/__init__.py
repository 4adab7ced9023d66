from .vec2i import DIRECTIONS, DOWN, LEFT, RIGHT, UP, ZERO, Vec2i

__all__ = ["Vec2i", "DIRECTIONS", "DOWN", "LEFT", "RIGHT", "UP", "ZERO"]
