"""
Colour configuration for the board, snake, food and score.
"""

from typing import Tuple


class ColorScheme:
    """Colour configuration for every drawn element"""

    BACKGROUND = "#101010"
    TOP_BAR = "#1E1E1E"
    SCORE_TEXT = "#00C800"

    SNAKE_HEAD = "#3CDC3C"
    SNAKE_BODY = "#1EA01E"
    FOOD = "#DC2828"

    # Game over
    OVERLAY = "#000000"
    OVERLAY_ALPHA = 160
    GAME_OVER_TEXT = "#FF6464"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def with_alpha(hex_color: str, alpha: int) -> Tuple[int, int, int, int]:
    r, g, b = hex_to_rgb(hex_color)
    return (r, g, b, max(0, min(255, alpha)))
