"""
Seven-segment text drawing for the score.

Only digits, '-' and '.' have glyphs; other characters leave a blank
slot of the same width.
"""

from typing import Tuple

import pygame

SEGMENT_LENGTH = 18.0
SEGMENT_THICKNESS = 4.0
CHAR_SPACING = 26.0

# Segment order: top, top-left, top-right, middle, bottom-left, bottom-right, bottom
DIGIT_SEGMENTS = {
    0: (1, 1, 1, 0, 1, 1, 1),
    1: (0, 0, 1, 0, 0, 1, 0),
    2: (1, 0, 1, 1, 1, 0, 1),
    3: (1, 0, 1, 1, 0, 1, 1),
    4: (0, 1, 1, 1, 0, 1, 0),
    5: (1, 1, 0, 1, 0, 1, 1),
    6: (1, 1, 0, 1, 1, 1, 1),
    7: (1, 0, 1, 0, 0, 1, 0),
    8: (1, 1, 1, 1, 1, 1, 1),
    9: (1, 1, 1, 1, 0, 1, 1),
}


def segment_rects(digit: int, x: float, y: float, scale: float = 1.0):
    """Return the (x, y, w, h) boxes of the lit segments for ``digit``."""
    if digit not in DIGIT_SEGMENTS:
        return []
    seg = SEGMENT_LENGTH * scale
    thick = SEGMENT_THICKNESS * scale
    boxes = (
        (x, y, seg, thick),                                 # top
        (x, y + thick, thick, seg),                         # top-left
        (x + seg - thick, y + thick, thick, seg),           # top-right
        (x, y + seg, seg, thick),                           # middle
        (x, y + seg + thick, thick, seg),                   # bottom-left
        (x + seg - thick, y + seg + thick, thick, seg),     # bottom-right
        (x, y + 2 * seg + thick, seg, thick),               # bottom
    )
    return [box for box, on in zip(boxes, DIGIT_SEGMENTS[digit]) if on]


def text_width(text: str, scale: float = 1.0) -> float:
    return len(text) * CHAR_SPACING * scale


def draw_char(surface: pygame.Surface, color: Tuple[int, int, int], char: str,
              x: float, y: float, scale: float = 1.0) -> None:
    if char.isdigit():
        for bx, by, bw, bh in segment_rects(int(char), x, y, scale):
            pygame.draw.rect(surface, color, pygame.Rect(int(bx), int(by), int(bw), int(bh)))
    elif char == '-':
        mid = int(y + 12 * scale)
        pygame.draw.line(surface, color, (int(x), mid), (int(x + SEGMENT_LENGTH * scale), mid))
    elif char == '.':
        surface.set_at((int(x + 9 * scale), int(y + 36 * scale)), color)


def draw_text(surface: pygame.Surface, color: Tuple[int, int, int], text: str,
              x: float, y: float, scale: float = 1.0) -> None:
    spacing = CHAR_SPACING * scale
    for i, char in enumerate(text):
        draw_char(surface, color, char, x + i * spacing, y, scale)
