# -*- coding: utf-8 -*-
"""
Play 2048 Game
"""
import logging
from argparse import ArgumentParser
from typing import Any

import numpy as np

from twentyfortyeight import GameConfig, TwentyFortyEight
from twentyfortyeight.core import BOARD_SIZE
from twentyfortyeight.utils import WindowBoard, gesture_direction, key_direction

logger = logging.getLogger(__name__)

# ##: Drags shorter than this, in pixels, are clicks.
SWIPE_THRESHOLD = 20.0


def redraw(window: WindowBoard, board: np.ndarray, score: int):
    """
    Redraw the game board.

    Parameters
    ----------
    window: WindowBoard
        Class to draw the game board

    board: np.ndarray
        Game board to draw

    score: int
        Score to draw
    """
    window.show_image(board, score)


def key_handler(envs: TwentyFortyEight, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    envs: TwentyFortyEight
        The Game engine

    window: WindowBoard
        Class to draw the game board

    event: Any
        event to handle
    """
    logger.debug("pressed %s", event.key)

    if event.key == "escape":
        window.close()
        return None

    if event.key == "backspace":
        envs.reset()
        return None

    direction = key_direction(event.key)
    if direction is not None:
        envs.move(direction)
    return None


def drag_handler(envs: TwentyFortyEight, dx: float, dy: float):
    """
    Handle a swipe.

    Parameters
    ----------
    envs: TwentyFortyEight
        The Game engine

    dx: float
        Horizontal displacement, positive to the right

    dy: float
        Vertical displacement, positive downward
    """
    direction = gesture_direction(dx, dy, threshold=SWIPE_THRESHOLD)
    if direction is not None:
        envs.move(direction)


def bind(envs: TwentyFortyEight, window: WindowBoard):
    """
    Connect the game engine and the window.

    Parameters
    ----------
    envs: TwentyFortyEight
        The Game engine

    window: WindowBoard
        Class to draw the game board
    """
    envs.subscribe(lambda board, score: redraw(window, board, score))
    window.register_key_handler(lambda event: key_handler(envs, window, event))
    window.register_drag_handler(lambda dx, dy: drag_handler(envs, dx, dy))
    window.register_reset_handler(envs.reset)
    redraw(window, envs.board, envs.score)


if __name__ == "__main__":
    parser = ArgumentParser(description="Play 2048 with the keyboard or by swiping with the mouse")
    parser.add_argument("--seed", type=int, default=None, help="Seed of the tile generator")
    parser.add_argument("--log-level", type=str, default="INFO", help="Logging level")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    env = TwentyFortyEight(config=GameConfig(seed=args.seed))
    window_board = WindowBoard(title="2048 Game", size=BOARD_SIZE)
    bind(env, window_board)

    # Blocking event loop
    window_board.show(block=True)
