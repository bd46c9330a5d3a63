# -*- coding: utf-8 -*-
"""
This module provides the presentation utilities of the game.

It includes the mapping of keys and swipe gestures to move directions, and a `WindowBoard` class
drawing the board with Matplotlib.
"""

from .gesture import gesture_direction, key_direction
from .windows import WindowBoard

__all__ = ["gesture_direction", "key_direction", "WindowBoard"]
