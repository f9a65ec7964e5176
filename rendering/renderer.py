"""
Renderer - draws a GameSnapshot onto a pygame Surface.

Layout: a score bar of ``top_margin`` pixels across the top of the window,
then the grid with one ``cell_size`` square per cell. The renderer never
touches the simulation; it only reads snapshots.
"""

import pygame

from config import DEFAULT_CONFIG, GameConfig
from domain.constants import Cell
from domain.game_state import GameSnapshot
from .colors import ColorScheme, hex_to_rgb, with_alpha
from .digits import draw_text, text_width

SCORE_Y = 8.0
GAME_OVER_SCALE = 1.2


class Renderer:
    """Draws the board, the snake, the food and the score"""

    def __init__(self, config: GameConfig = DEFAULT_CONFIG, colors=ColorScheme):
        self.config = config
        self.colors = colors
        self.width, self.height = config.window_size

    def cell_rect(self, cell: Cell, inset: int = 0) -> pygame.Rect:
        size = self.config.cell_size
        x, y = cell
        return pygame.Rect(
            x * size + inset,
            self.config.top_margin + y * size + inset,
            size - 2 * inset,
            size - 2 * inset,
        )

    def draw(self, surface: pygame.Surface, snapshot: GameSnapshot) -> None:
        surface.fill(hex_to_rgb(self.colors.BACKGROUND))
        self._draw_score_bar(surface, snapshot.score)

        if snapshot.food is not None:
            pygame.draw.rect(surface, hex_to_rgb(self.colors.FOOD), self.cell_rect(snapshot.food, inset=2))

        head_color = hex_to_rgb(self.colors.SNAKE_HEAD)
        body_color = hex_to_rgb(self.colors.SNAKE_BODY)
        for idx, cell in enumerate(snapshot.snake):
            color = head_color if idx == 0 else body_color
            pygame.draw.rect(surface, color, self.cell_rect(cell, inset=1))

        if snapshot.game_over:
            self._draw_game_over(surface, snapshot.score)

    def _draw_score_bar(self, surface: pygame.Surface, score: int) -> None:
        pygame.draw.rect(surface, hex_to_rgb(self.colors.TOP_BAR),
                         pygame.Rect(0, 0, self.width, self.config.top_margin))
        text = str(score)
        x = (self.width - text_width(text)) / 2.0
        draw_text(surface, hex_to_rgb(self.colors.SCORE_TEXT), text, x, SCORE_Y)

    def _draw_game_over(self, surface: pygame.Surface, score: int) -> None:
        top = self.config.top_margin
        overlay = pygame.Surface((self.width, self.height - top), pygame.SRCALPHA)
        overlay.fill(with_alpha(self.colors.OVERLAY, self.colors.OVERLAY_ALPHA))
        surface.blit(overlay, (0, top))

        # Width uses the unscaled spacing, as the score bar does
        text = str(score)
        x = (self.width - text_width(text)) / 2.0
        y = top + (self.height - top) / 2.0 - 20.0
        draw_text(surface, hex_to_rgb(self.colors.GAME_OVER_TEXT), text, x, y, GAME_OVER_SCALE)
