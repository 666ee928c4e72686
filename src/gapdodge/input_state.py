"""
input_state.py: Keyboard state tracking.

The game only ever asks `is_pressed(name)`; the pygame event pump feeds
key events in through `handle_event`.
"""

import logging
from typing import Dict

import pygame

from .constants import KEY_LEFT, KEY_RIGHT

logger = logging.getLogger(__name__)

# pygame key code -> key name polled by the engine
KEY_NAMES: Dict[int, str] = {
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
    pygame.K_a: KEY_LEFT,
    pygame.K_d: KEY_RIGHT,
}


class InputState:
    """Stores the pressed/released state of each named key."""

    def __init__(self):
        self._keys: Dict[str, bool] = {}

    def press(self, key_name: str):
        self._keys[key_name] = True

    def release(self, key_name: str):
        self._keys[key_name] = False

    def is_pressed(self, key_name: str) -> bool:
        return self._keys.get(key_name, False)

    def clear(self):
        self._keys.clear()

    def handle_event(self, event) -> bool:
        """
        Updates the key table from a pygame KEYDOWN/KEYUP event.
        Returns True if the event was consumed.
        """
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return False

        key_name = KEY_NAMES.get(event.key)
        if key_name is None:
            return False

        if event.type == pygame.KEYDOWN:
            self.press(key_name)
        else:
            self.release(key_name)
        logger.debug("%s %s", key_name, "down" if self._keys[key_name] else "up")
        return True
