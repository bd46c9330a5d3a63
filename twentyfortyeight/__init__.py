"""Single-player 2048 game: board engine, configuration and presentation utilities."""

from .config import GameConfig
from .core import Direction
from .envs import TwentyFortyEight

__all__ = ["Direction", "GameConfig", "TwentyFortyEight"]
