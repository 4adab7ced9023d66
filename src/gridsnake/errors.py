from __future__ import annotations


class SnakeError(Exception):
    """Base class for errors raised by the game core."""


class OutOfBoundsError(SnakeError, IndexError):
    """A position outside the board was passed to a board accessor."""


class InvalidPlacementError(SnakeError, RuntimeError):
    """No safe or empty position could be found within the retry bound."""


class UnsupportedTransitionError(SnakeError, NotImplementedError):
    """A state transition was requested that the core does not implement."""
