"""
InputTranslator - maps pygame events to directions and commands.
"""

import logging
from typing import Dict, Optional, Union

import pygame

from domain.constants import Direction
from domain.simulation import GameSimulation
from .keymap import Command, KEY_BINDINGS

logger = logging.getLogger(__name__)

Action = Union[Direction, Command]


class InputTranslator:
    """
    Looks events up in a key table.

    Only key-down and window-close events produce anything; every other
    event, and any unbound key, translates to None.
    """

    def __init__(self, bindings: Optional[Dict[int, Action]] = None):
        self.bindings = dict(KEY_BINDINGS if bindings is None else bindings)

    def translate(self, event) -> Optional[Action]:
        if event.type == pygame.QUIT:
            return Command.QUIT
        if event.type == pygame.KEYDOWN:
            return self.bindings.get(getattr(event, "key", None))
        return None

    def apply(self, action: Optional[Action], simulation: GameSimulation, loop) -> None:
        """
        Dispatch ``action`` to the simulation, or ask ``loop`` to stop.

        ``loop`` needs ``request_stop()`` and ``on_restart()``.
        """
        if action is None:
            return
        if action is Command.QUIT:
            logger.info("Quit requested")
            loop.request_stop()
        elif action is Command.RESTART:
            if simulation.restart():
                loop.on_restart()
        else:
            simulation.set_direction(action)
