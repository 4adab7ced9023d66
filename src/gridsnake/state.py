from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from . import config
from .board import Board
from .cells import Apple, on_touch
from .config import DEFAULT_CONFIG, GameConfig
from .errors import InvalidPlacementError
from .events import AddScore, CountApple, GameEvent, GrowSnake, RemoveCell, SpawnApple
from .inputs import InputEvent, does_nothing
from .levels import default_walls
from .linalg import Vec2i
from .queues import EventQueue
from .score import Score
from .snake import Snake

if TYPE_CHECKING:
    from .render import RenderSink

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class GameState:
    """Snapshot of the game at one tick.

    States are never changed in place; every transition returns a new state
    (or the same one when nothing changed). The board is shared between
    states until a deferred event rewrites it, and the two queues are handed
    from each state to the next.
    """
    board: Board
    snake: Snake
    score: Score = field(default_factory=Score)
    level: int = 1
    apples_remaining: int = config.APPLES_PER_LEVEL
    done: bool = False
    paused: bool = False
    taunt: str = config.TAUNTS[0]
    input_queue: EventQueue[InputEvent] = field(default_factory=EventQueue)
    event_queue: EventQueue[GameEvent] = field(default_factory=EventQueue)
    settings: GameConfig = DEFAULT_CONFIG
    rng: random.Random = field(default_factory=random.Random)

    def __post_init__(self) -> None:
        # Pausing drops any input that was still in flight.
        if self.paused:
            self.input_queue.clear()

    @classmethod
    def start_with(
        cls,
        board: Board,
        snake: Snake | None = None,
        settings: GameConfig = DEFAULT_CONFIG,
    ) -> GameState:
        if snake is None:
            snake = board.baby_snake(settings.initial_safety_spaces, settings.max_placement_attempts)
        return cls(
            board=board,
            snake=snake,
            apples_remaining=settings.apples_per_level,
            taunt=board.rng.choice(config.TAUNTS),
            settings=settings,
            rng=board.rng,
        )

    @classmethod
    def initial(
        cls,
        settings: GameConfig | None = None,
        rng: random.Random | None = None,
    ) -> GameState:
        settings = settings if settings is not None else DEFAULT_CONFIG
        board = Board(settings.size, default_walls(settings.size), rng)
        state = cls.start_with(board, settings=settings)
        state.board.put(
            Apple(state.random_empty_cell(), settings.apple_points, settings.growth_per_apple)
        )
        logger.debug("new game on %r, snake at %r", board, state.snake.head)
        return state

    def random_empty_cell(self) -> Vec2i:
        """A position with no board cell and no snake segment on it."""
        for _ in range(self.settings.max_placement_attempts):
            pos = self.board.random_position()
            if self.board.is_empty_cell(pos) and not self.snake.contains(pos):
                return pos
        # Nearly full board: fall back to an exhaustive scan.
        free = [pos for pos in self.board.empty_cells() if not self.snake.contains(pos)]
        if not free:
            raise InvalidPlacementError("no empty cell left on the board")
        return self.rng.choice(free)

    def is_game_over(self) -> bool:
        return self.board.is_game_over_for(self.snake)

    def is_terminal_state(self) -> bool:
        return self.done or self.is_game_over()

    def is_level_passed(self) -> bool:
        return not self.is_terminal_state() and self.apples_remaining < 1

    def toggle_paused(self) -> GameState:
        if self.done:
            return self
        logger.debug("paused" if not self.paused else "unpaused")
        return replace(self, paused=not self.paused)

    def finish(self) -> GameState:
        if self.done:
            return self
        logger.debug("quit requested")
        return replace(self, done=True)

    def next_level(self) -> GameState:
        logger.info("level %d cleared with score %s", self.level, self.score)
        return replace(
            self,
            level=self.level + 1,
            apples_remaining=self.settings.apples_per_level,
        )

    def _is_same_state(self, board: Board, snake: Snake, score: Score) -> bool:
        return self.board is board and self.snake is snake and self.score is score

    def _with(self, board: Board, snake: Snake, score: Score) -> GameState:
        if self.is_terminal_state() or self.paused or self._is_same_state(board, snake, score):
            return self
        return replace(self, board=board, snake=snake, score=score)

    def with_snake(self, snake: Snake) -> GameState:
        return self._with(self.board, snake, self.score)

    def with_score(self, score: Score) -> GameState:
        return self._with(self.board, self.snake, score)

    def touch_current_cell(self) -> GameState:
        if self.is_terminal_state():
            return self
        return on_touch(self.board.get_cell(self.snake.head), self)

    def flush_game_events(self, state: GameState) -> GameState:
        for event in self.event_queue.drain():
            state = apply_event(state, event)
        return state

    def process_one_input(self, state: GameState) -> GameState:
        event = self.input_queue.pop()
        return state if event is None else event.apply(state)

    def next_state(self) -> GameState:
        """Advance the game by one tick."""
        result = self.touch_current_cell()
        result = self.flush_game_events(result)

        if result.is_level_passed():
            return result.next_level()

        result = self.process_one_input(result)
        result = result.with_snake(result.snake.move())
        if result.is_game_over() and not self.is_game_over():
            logger.info("game over at %r with score %s", result.snake.head, result.score)
        return result

    def queue_input_event(self, event: InputEvent | None) -> None:
        if does_nothing(event):
            return
        self.input_queue.put(event)

    def queue_game_event(self, event: GameEvent) -> None:
        self.event_queue.put(event)

    def draw(self, sink: RenderSink) -> None:
        if self.is_game_over():
            sink.draw_game_over(self.taunt)
        else:
            self.board.draw(sink)
            self.snake.draw(sink)
            if self.settings.show_grid:
                sink.draw_grid()
        self.score.draw(sink)


def apply_event(state: GameState, event: GameEvent) -> GameState:
    """Apply one deferred event. Events queued before a game over are dropped."""
    if state.is_terminal_state():
        return state

    match event:
        case RemoveCell(pos=pos):
            board = state.board.copy()
            board.remove(pos)
            return replace(state, board=board)
        case SpawnApple(points=points, growth=growth, pos=pos):
            if pos is None:
                try:
                    pos = state.random_empty_cell()
                except InvalidPlacementError:
                    logger.warning("no room left for a new apple")
                    return state
            board = state.board.copy()
            board.put(Apple(pos, points, growth))
            return replace(state, board=board)
        case AddScore(points=points):
            return replace(state, score=state.score.plus(points))
        case GrowSnake(steps=steps):
            return replace(state, snake=state.snake.grow_by(steps))
        case CountApple():
            return replace(state, apples_remaining=state.apples_remaining - 1)
    raise TypeError(f"unknown game event: {event!r}")
