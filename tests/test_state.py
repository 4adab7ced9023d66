import random

from conftest import apples_on, walled_state

from gridsnake import inputs
from gridsnake.board import Board
from gridsnake.cells import Apple
from gridsnake.config import GameConfig
from gridsnake.events import AddScore, CountApple, GrowSnake, RemoveCell, SpawnApple
from gridsnake.linalg import DOWN, RIGHT, UP, Vec2i
from gridsnake.score import Score
from gridsnake.snake import Snake
from gridsnake.state import GameState, apply_event


def run(state, ticks):
    for _ in range(ticks):
        state = state.next_state()
    return state


def test_ticks_move_the_snake(state):
    after = state.next_state()
    assert after.snake.head == Vec2i(6, 5)
    assert after.snake.tail == (Vec2i(5, 5),)
    assert state.snake.head == Vec2i(5, 5)


def test_eating_an_apple():
    state = walled_state(seed=4)
    before = run(state, 2)
    assert before.snake.head == Vec2i(7, 5)
    assert before.score.points == 0

    after = before.next_state()
    assert after.score.points == 100
    assert after.snake.growth_steps_remaining == 4
    assert after.snake.head == Vec2i(8, 5)
    assert after.apples_remaining == before.apples_remaining - 1
    assert not after.is_game_over()

    apples = apples_on(after.board)
    assert len(apples) == 1
    assert apples[0].position != Vec2i(7, 5)
    assert (apples[0].points, apples[0].growth) == (100, 5)
    assert after.board.is_empty_cell(Vec2i(7, 5))


def test_apple_event_leaves_earlier_snapshots_alone():
    before = run(walled_state(seed=2), 2)
    before.next_state()
    assert isinstance(before.board.get_cell(Vec2i(7, 5)), Apple)


def test_board_is_shared_when_unchanged(state):
    assert state.next_state().board is state.board


def test_apple_touch_only_queues(state):
    moved = run(state, 2)
    apple = moved.board.get_cell(Vec2i(7, 5))
    touched = moved.touch_current_cell()
    assert touched is moved
    assert moved.board.get_cell(Vec2i(7, 5)) is apple
    assert moved.event_queue.snapshot() == [
        RemoveCell(Vec2i(7, 5)),
        SpawnApple(100, 5),
        AddScore(100),
        GrowSnake(5),
        CountApple(),
    ]


def test_game_over_at_the_wall():
    state = walled_state(seed=1)
    states = [state]
    for _ in range(6):
        states.append(states[-1].next_state())
    heads = [s.snake.head.x for s in states]
    over = [s.is_game_over() for s in states]
    # Snake reaches the wall at x == 9 on the fourth tick.
    assert heads[:5] == [5, 6, 7, 8, 9]
    assert over == [False, False, False, False, True, True, True]
    assert states[5] is states[4]


def test_game_over_ignores_input_until_play_again():
    over = run(walled_state(seed=1), 4)
    assert over.is_game_over()

    over.queue_input_event(inputs.MOVE_UP)
    over.queue_input_event(inputs.TOGGLE_PAUSED)
    still = over.next_state().next_state()
    assert still.is_game_over()
    assert still.snake == over.snake

    still.queue_input_event(inputs.PLAY_AGAIN)
    fresh = still.next_state()
    assert not fresh.is_game_over()
    assert fresh.score == Score()
    assert fresh.level == 1
    assert fresh.board.size == still.settings.size


def test_play_again_only_after_game_over(state):
    assert inputs.PLAY_AGAIN.apply(state) is state


def test_pause_clears_input(state):
    state.queue_input_event(inputs.MOVE_UP)
    state.queue_input_event(inputs.MOVE_DOWN)
    state.queue_input_event(inputs.MOVE_UP)
    assert len(state.input_queue) == 3
    paused = state.toggle_paused()
    assert paused.paused
    assert len(paused.input_queue) == 0
    assert len(state.input_queue) == 0


def test_paused_snake_does_not_move(state):
    state.queue_input_event(inputs.TOGGLE_PAUSED)
    paused = state.next_state()
    assert paused.paused
    assert paused.snake.head == Vec2i(5, 5)
    assert run(paused, 3).snake.head == Vec2i(5, 5)

    paused.queue_input_event(inputs.MOVE_UP)
    assert paused.next_state().snake.direction == RIGHT

    paused.queue_input_event(inputs.TOGGLE_PAUSED)
    resumed = paused.next_state()
    assert not resumed.paused
    assert resumed.snake.head == Vec2i(6, 5)


def test_one_input_per_tick(state):
    state.queue_input_event(inputs.MOVE_UP)
    state.queue_input_event(inputs.MOVE_RIGHT)
    first = state.next_state()
    assert first.snake.direction == UP
    assert first.snake.head == Vec2i(5, 4)
    assert len(first.input_queue) == 1
    second = first.next_state()
    assert second.snake.direction == RIGHT
    assert second.snake.head == Vec2i(6, 4)


def test_reversal_is_ignored(state):
    state.queue_input_event(inputs.MOVE_LEFT)
    after = state.next_state()
    assert after.snake.direction == RIGHT
    assert after.snake.head == Vec2i(6, 5)


def test_no_op_input_is_not_queued(state):
    state.queue_input_event(None)
    state.queue_input_event(inputs.NO_ACTION)
    assert len(state.input_queue) == 0


def test_quit(state):
    state.queue_input_event(inputs.QUIT_GAME)
    done = state.next_state()
    assert done.done
    assert done.is_terminal_state()
    assert done.snake.head == Vec2i(5, 5)
    assert done.finish() is done
    assert done.toggle_paused() is done
    assert done.next_state() is done


def test_toggle_pause_during_game_over():
    over = run(walled_state(seed=1), 4)
    toggled = inputs.TOGGLE_PAUSED.apply(over)
    assert toggled.paused
    assert toggled.is_game_over()


def test_deferred_events_skip_terminal_states():
    over = run(walled_state(seed=1), 4)
    assert apply_event(over, AddScore(50)) is over
    assert apply_event(over, RemoveCell(Vec2i(1, 1))) is over


def test_apply_events(state):
    grown = apply_event(state, GrowSnake(3))
    assert grown.snake.growth_steps_remaining == 3
    scored = apply_event(state, AddScore(7))
    assert scored.score.points == 7
    placed = apply_event(state, SpawnApple(10, 1, Vec2i(2, 2)))
    assert placed.board.get_cell(Vec2i(2, 2)) == Apple(Vec2i(2, 2), 10, 1)
    assert state.board.is_empty_cell(Vec2i(2, 2))
    counted = apply_event(state, CountApple())
    assert counted.apples_remaining == state.apples_remaining - 1


def test_level_advance():
    settings = GameConfig(width=10, height=10, apples_per_level=1)
    before = run(walled_state(seed=3, settings=settings), 2)
    after = before.next_state()
    assert after.level == 2
    assert after.apples_remaining == 1
    assert after.score.points == 100
    # No movement on the tick that clears the level.
    assert after.snake.head == Vec2i(7, 5)
    assert after.next_state().snake.head == Vec2i(8, 5)


def test_same_state_is_reused(state):
    assert state.with_snake(state.snake) is state
    assert state.with_score(state.score) is state
    assert state.with_score(Score(5)) is not state


def test_taunt_is_kept_between_ticks(state):
    assert run(state, 3).taunt == state.taunt


def test_random_empty_cell_avoids_snake_and_walls():
    size = Vec2i(4, 3)
    board = Board(size, [Vec2i(0, 0), Vec2i(3, 2)], random.Random(0))
    snake = Snake(RIGHT, Vec2i(1, 1), (Vec2i(0, 1),))
    state = GameState.start_with(board, snake, GameConfig(width=4, height=3, max_placement_attempts=3))
    for _ in range(50):
        pos = state.random_empty_cell()
        assert board.is_empty_cell(pos)
        assert not snake.contains(pos)


def test_initial_state():
    state = GameState.initial(rng=random.Random(11))
    assert state.board.size == Vec2i(40, 40)
    assert len(apples_on(state.board)) == 1
    assert state.score.points == 0
    assert state.level == 1
    assert not state.paused and not state.done
    assert not state.is_game_over()
    assert len(state.input_queue) == 0
    assert len(state.event_queue) == 0
    apple = apples_on(state.board)[0]
    assert not state.snake.contains(apple.position)


def test_initial_snake_survives_without_input():
    state = GameState.initial(GameConfig(width=30, height=30), random.Random(5))
    for _ in range(10):
        state = state.next_state()
        assert not state.is_game_over()


def test_turning_down(state):
    state.queue_input_event(inputs.MOVE_DOWN)
    assert state.next_state().snake.direction == DOWN


def test_play_again_builds_a_new_game_with_the_same_settings():
    settings = GameConfig(width=30, height=30, apple_points=7)
    over = run(walled_state(seed=1, settings=settings), 4)
    assert over.is_game_over()

    fresh = inputs.PLAY_AGAIN.apply(over)
    assert fresh is not over
    assert fresh.settings is settings
    assert fresh.rng is over.rng
    assert fresh.board.size == Vec2i(30, 30)
    assert fresh.score == Score()
    assert not fresh.is_game_over()
    assert [apple.points for apple in apples_on(fresh.board)] == [7]
