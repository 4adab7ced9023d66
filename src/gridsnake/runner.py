from __future__ import annotations

import logging
import threading

from .inputs import InputEvent
from .render import RenderSink
from .state import GameState

logger = logging.getLogger(__name__)


class GameRunner:
    """Drives a game: ticks on one thread while other threads post input.

    The current state is swapped under a lock, so readers always see a whole
    tick. Frames are drawn from a snapshot outside the lock; a state never
    changes once a tick has produced it.
    """

    def __init__(self, state: GameState, tick_ms: int | None = None):
        self._state = state
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self.tick_ms = tick_ms if tick_ms is not None else state.settings.tick_ms
        self.ticks = 0

    @property
    def state(self) -> GameState:
        with self._lock:
            return self._state

    def snapshot(self) -> GameState:
        return self.state

    def post(self, event: InputEvent | None) -> None:
        with self._lock:
            self._state.queue_input_event(event)

    def tick(self) -> GameState:
        with self._lock:
            self._state = self._state.next_state()
            self.ticks += 1
            return self._state

    def draw(self, sink: RenderSink) -> None:
        self.snapshot().draw(sink)

    def is_running(self) -> bool:
        return not self._stop.is_set() and not self.state.done

    def run(self, max_ticks: int | None = None) -> GameState:
        """Tick every `tick_ms` until quit, `stop()`, or `max_ticks`."""
        interval = self.tick_ms / 1000.0
        while self.is_running():
            if max_ticks is not None and self.ticks >= max_ticks:
                break
            self.tick()
            self._stop.wait(interval)
        logger.debug("driver stopped after %d ticks", self.ticks)
        return self.state

    def run_headless(self, ticks: int) -> GameState:
        """Run `ticks` ticks back to back, without waiting between them."""
        for _ in range(ticks):
            if self.state.done:
                break
            self.tick()
        return self.state

    def start(self) -> threading.Thread:
        self._stop.clear()
        self._thread = threading.Thread(target=self.run, name="gridsnake-driver", daemon=True)
        self._thread.start()
        return self._thread

    def stop(self, timeout: float | None = None) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
