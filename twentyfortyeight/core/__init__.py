# -*- coding: utf-8 -*-
"""
This module provides the board mechanics of the 2048 game.

It includes the move directions, line merging, board sliding, the candidate board of a move
and the spawning of new tiles.
"""

from .gameboard import (
    BOARD_SIZE,
    TILE_VALUES,
    Direction,
    fill_cells,
    is_same,
    latent_state,
    merge_line,
    slide_and_merge,
)

__all__ = [
    "BOARD_SIZE",
    "TILE_VALUES",
    "Direction",
    "merge_line",
    "slide_and_merge",
    "latent_state",
    "is_same",
    "fill_cells",
]
