from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from . import config
from .linalg import Vec2i

if TYPE_CHECKING:
    from .score import Score
    from .state import GameState

Color = tuple[int, int, int]


class RenderSink(Protocol):
    def set_color(self, color: Color) -> None: ...

    def draw_cell_at(self, pos: Vec2i) -> None: ...

    def draw_score(self, score: Score) -> None: ...

    def draw_game_over(self, message: str) -> None: ...

    def draw_grid(self) -> None: ...


def draw_state(state: GameState, sink: RenderSink) -> None:
    state.draw(sink)


class TextSink:
    """Renders a frame as ASCII lines, for terminals and headless runs."""

    GLYPHS: dict[Color, str] = {
        config.WALL_COLOR: "#",
        config.APPLE_COLOR: "@",
        config.SNAKE_TAIL_COLOR: "o",
        config.SNAKE_HEAD_COLOR: "O",
    }

    def __init__(self, size: Vec2i):
        self.size = size
        self.rows = [["."] * size.x for _ in range(size.y)]
        self.score_line = ""
        self.game_over_lines: list[str] = []
        self._glyph = "?"

    def set_color(self, color: Color) -> None:
        self._glyph = self.GLYPHS.get(color, "?")

    def draw_cell_at(self, pos: Vec2i) -> None:
        if 0 <= pos.x < self.size.x and 0 <= pos.y < self.size.y:
            self.rows[pos.y][pos.x] = self._glyph

    def draw_score(self, score: Score) -> None:
        self.score_line = f"Score: {score}"

    def draw_game_over(self, message: str) -> None:
        self.game_over_lines = [config.GAME_OVER_MESSAGE, message]

    def draw_grid(self) -> None:
        pass

    def lines(self) -> list[str]:
        if self.game_over_lines:
            return [self.score_line, *self.game_over_lines]
        return [self.score_line, *("".join(row) for row in self.rows)]

    def render(self) -> str:
        return "\n".join(self.lines())
