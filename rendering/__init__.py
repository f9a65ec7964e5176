"""
Rendering for the snake game (pygame).
"""

from .colors import ColorScheme, hex_to_rgb
from .renderer import Renderer

__all__ = [
    'ColorScheme',
    'hex_to_rgb',
    'Renderer',
]
