"""
Input handling: turns raw pygame events into game commands.
"""

from .keymap import Command, KEY_BINDINGS
from .translator import InputTranslator

__all__ = [
    'Command',
    'KEY_BINDINGS',
    'InputTranslator',
]
