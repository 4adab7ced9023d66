"""Named input events.

Front ends translate their raw input (keys, commands) into these events and
queue them on the current state. Each event wraps a guarded state transformer.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from .errors import UnsupportedTransitionError
from .linalg import DOWN, LEFT, RIGHT, UP, Vec2i

if TYPE_CHECKING:
    from .state import GameState

Handler = Callable[["GameState"], "GameState"]


class InputEvent:
    def __init__(self, name: str, handler: Handler):
        self.name = name
        self.handler = handler

    @classmethod
    def with_handler(cls, name: str, handler: Handler) -> InputEvent:
        return cls(name, handler)

    @classmethod
    def with_conditional_handler(
        cls, name: str, condition: Callable[[GameState], bool], handler: Handler
    ) -> InputEvent:
        return cls(name, lambda gs: handler(gs) if condition(gs) else gs)

    @classmethod
    def during_gameplay(cls, name: str, handler: Handler) -> InputEvent:
        return cls.with_conditional_handler(name, lambda gs: not gs.is_terminal_state(), handler)

    @classmethod
    def during_unpaused_gameplay(cls, name: str, handler: Handler) -> InputEvent:
        return cls.during_gameplay(name, lambda gs: gs if gs.paused else handler(gs))

    def apply(self, state: GameState) -> GameState:
        return self.handler(state)

    def __repr__(self):
        return f"InputEvent({self.name!r})"


def does_nothing(event: InputEvent | None) -> bool:
    return event is None or event is NO_ACTION


def not_implemented(state: GameState) -> GameState:
    raise UnsupportedTransitionError("handler not implemented yet.")


def _turn(direction: Vec2i) -> Handler:
    return lambda gs: gs.with_snake(gs.snake.with_direction(direction))


def _play_again(state: GameState) -> GameState:
    from .state import GameState

    return GameState.initial(state.settings, state.rng)


NO_ACTION = InputEvent.with_handler("noAction", lambda gs: gs)

MOVE_UP = InputEvent.during_unpaused_gameplay("moveUp", _turn(UP))
MOVE_DOWN = InputEvent.during_unpaused_gameplay("moveDown", _turn(DOWN))
MOVE_LEFT = InputEvent.during_unpaused_gameplay("moveLeft", _turn(LEFT))
MOVE_RIGHT = InputEvent.during_unpaused_gameplay("moveRight", _turn(RIGHT))
# GameState.toggle_paused leaves a finished (quit) state alone.
TOGGLE_PAUSED = InputEvent.with_handler("togglePaused", lambda gs: gs.toggle_paused())
PLAY_AGAIN = InputEvent.with_conditional_handler(
    "playAgain", lambda gs: gs.is_game_over(), _play_again
)
QUIT_GAME = InputEvent.with_handler("quitGame", lambda gs: gs.finish())

EVENTS_BY_NAME: dict[str, InputEvent] = {
    event.name: event
    for event in (MOVE_UP, MOVE_DOWN, MOVE_LEFT, MOVE_RIGHT, TOGGLE_PAUSED, PLAY_AGAIN, QUIT_GAME)
}
