from __future__ import annotations

import argparse
import logging
import random
import sys

from . import config
from .config import GameConfig
from .errors import InvalidPlacementError
from .render import TextSink
from .runner import GameRunner
from .state import GameState


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridsnake",
        description="Play Snake in a pygame window, or simulate it headless.",
    )
    parser.add_argument("--width", type=int, default=config.GRID_WIDTH, help="Board width in cells.")
    parser.add_argument("--height", type=int, default=config.GRID_HEIGHT, help="Board height in cells.")
    parser.add_argument("--tick-ms", type=int, default=config.TICK_MS, help="Milliseconds per game tick.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible game.")
    parser.add_argument(
        "--safety-spaces",
        type=int,
        default=config.INITIAL_SAFETY_SPACES,
        help="Straight moves a new snake must survive from its spawn point.",
    )
    parser.add_argument(
        "--growth", type=int, default=config.GROWTH_STEPS_PER_APPLE, help="Segments gained per apple."
    )
    parser.add_argument("--apple-points", type=int, default=config.APPLE_POINTS, help="Points per apple.")
    parser.add_argument(
        "--apples-per-level", type=int, default=config.APPLES_PER_LEVEL, help="Apples needed to clear a level."
    )
    parser.add_argument("--no-grid", action="store_true", help="Do not draw grid lines.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity.",
    )
    parser.add_argument("--headless", action="store_true", help="Run without a window and print the last frame.")
    parser.add_argument("--ticks", type=int, default=50, help="Ticks to simulate with --headless.")
    return parser


def config_from_args(ns: argparse.Namespace) -> GameConfig:
    return GameConfig(
        width=ns.width,
        height=ns.height,
        tick_ms=ns.tick_ms,
        initial_safety_spaces=ns.safety_spaces,
        growth_per_apple=ns.growth,
        apple_points=ns.apple_points,
        apples_per_level=ns.apples_per_level,
        show_grid=not ns.no_grid,
    )


def run_headless(settings: GameConfig, rng: random.Random, ticks: int) -> GameState:
    runner = GameRunner(GameState.initial(settings, rng))
    state = runner.run_headless(ticks)

    sink = TextSink(settings.size)
    state.draw(sink)
    print(sink.render())
    print(f"ticks: {runner.ticks}  level: {state.level}  game over: {state.is_game_over()}")
    return state


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=ns.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = config_from_args(ns)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    rng = random.Random(ns.seed)
    try:
        if ns.headless:
            run_headless(settings, rng, ns.ticks)
        else:
            # Imported here so headless runs never initialise pygame.
            from .game import main as run_window

            state = run_window(settings, rng)
            print(f"Final score: {state.score}")
    except InvalidPlacementError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0
