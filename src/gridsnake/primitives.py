from __future__ import annotations

import pygame

from . import config
from .linalg import Vec2i
from .score import Score


class PygameSink:
    """Draws game frames onto a pygame surface.

    The score line sits above the board; board cell (0, 0) is drawn just below it.
    """

    def __init__(self, surface: pygame.Surface, board_size: Vec2i, cell_size: int = config.CELL_SIZE):
        self.surface = surface
        self.board_size = board_size
        self.cell_size = cell_size
        self.color: tuple[int, int, int] = config.BACKGROUND_COLOR
        self._fonts: dict[tuple[int, bool], pygame.font.Font] = {}

    @staticmethod
    def pixel_size(board_size: Vec2i, cell_size: int = config.CELL_SIZE) -> tuple[int, int]:
        return (board_size.x * cell_size, board_size.y * cell_size + config.SCORE_HEIGHT)

    def _font(self, size: int, bold: bool = False) -> pygame.font.Font:
        # Fonts are only loaded once something needs them.
        key = (size, bold)
        if key not in self._fonts:
            self._fonts[key] = pygame.font.SysFont("monospace", size, bold=bold)
        return self._fonts[key]

    def _cell_to_pixel(self, pos: Vec2i) -> tuple[int, int]:
        return (pos.x * self.cell_size, config.SCORE_HEIGHT + pos.y * self.cell_size)

    def clear(self) -> None:
        self.surface.fill(config.BACKGROUND_COLOR)

    def set_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def draw_cell_at(self, pos: Vec2i) -> None:
        x, y = self._cell_to_pixel(pos)
        pygame.draw.rect(self.surface, self.color, pygame.Rect(x, y, self.cell_size, self.cell_size))

    def draw_grid(self) -> None:
        width, height = self.surface.get_size()
        for cx in range(self.board_size.x):
            x = cx * self.cell_size
            pygame.draw.line(self.surface, config.GRID_COLOR, (x, config.SCORE_HEIGHT), (x, height))
        for cy in range(self.board_size.y):
            y = config.SCORE_HEIGHT + cy * self.cell_size
            pygame.draw.line(self.surface, config.GRID_COLOR, (0, y), (width, y))

    def draw_score(self, score: Score) -> None:
        font = self._font(config.SMALL_FONT_SIZE)
        label = font.render("Score: ", True, config.SCORE_COLOR)
        value = font.render(str(score), True, config.SCORE_VALUE_COLOR)
        self.surface.blit(label, (0, 0))
        self.surface.blit(value, (label.get_width(), 0))

    def _blit_centered(self, text: pygame.Surface, y: int) -> None:
        x = (self.surface.get_width() - text.get_width()) // 2
        self.surface.blit(text, (x, y))

    def draw_game_over(self, message: str) -> None:
        big = self._font(config.BIG_FONT_SIZE, bold=True)
        small = self._font(config.SMALL_FONT_SIZE)
        y = self.surface.get_height() // 2
        self._blit_centered(big.render(config.GAME_OVER_MESSAGE, True, config.GAME_OVER_COLOR), y)
        self._blit_centered(small.render(message, True, config.TAUNT_COLOR), y + big.get_linesize())
