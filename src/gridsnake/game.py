from __future__ import annotations

import random

import pygame

from . import inputs
from .config import GameConfig
from .primitives import PygameSink
from .runner import GameRunner
from .state import GameState

KEY_MAP: dict[int, inputs.InputEvent] = {
    pygame.K_UP: inputs.MOVE_UP,
    pygame.K_DOWN: inputs.MOVE_DOWN,
    pygame.K_LEFT: inputs.MOVE_LEFT,
    pygame.K_RIGHT: inputs.MOVE_RIGHT,
    pygame.K_p: inputs.TOGGLE_PAUSED,
    pygame.K_RETURN: inputs.PLAY_AGAIN,
    pygame.K_KP_ENTER: inputs.PLAY_AGAIN,
    pygame.K_ESCAPE: inputs.QUIT_GAME,
    pygame.K_q: inputs.QUIT_GAME,
}


def event_for_key(key: int) -> inputs.InputEvent:
    return KEY_MAP.get(key, inputs.NO_ACTION)


def main(settings: GameConfig, rng: random.Random | None = None) -> GameState:
    state = GameState.initial(settings, rng)

    pygame.init()
    screen = pygame.display.set_mode(PygameSink.pixel_size(settings.size))
    pygame.display.set_caption("Snake")
    sink = PygameSink(screen, settings.size)
    clock = pygame.time.Clock()

    runner = GameRunner(state, settings.tick_ms)
    runner.start()
    try:
        while runner.is_running():
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    runner.post(inputs.QUIT_GAME)
                elif event.type == pygame.KEYDOWN:
                    runner.post(event_for_key(event.key))

            sink.clear()
            runner.draw(sink)
            pygame.display.flip()
            clock.tick(60)
    finally:
        runner.stop(timeout=1.0)
        pygame.quit()
    return runner.state
