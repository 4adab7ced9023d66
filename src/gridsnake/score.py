from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .render import RenderSink


@dataclass(frozen=True)
class Score:
    points: int = 0

    def plus(self, points: int) -> Score:
        if points == 0:
            return self
        return Score(self.points + points)

    def __str__(self):
        return str(self.points)

    def draw(self, sink: RenderSink) -> None:
        sink.draw_score(self)
