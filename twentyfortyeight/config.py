"""
Configuration of a 2048 game session.
"""

from dataclasses import dataclass

from twentyfortyeight.core.gameboard import TILE_VALUES


@dataclass
class GameConfig:
    """
    Configuration of a game session.

    Attributes
    ----------
    initial_tiles : int
        Number of tiles placed by a reset.
    tile_values : tuple[int, ...]
        Values a spawned tile can take, drawn uniformly.
    seed : int | None
        Seed of the random generator built when none is injected.
    """

    initial_tiles: int = 2
    tile_values: tuple[int, ...] = TILE_VALUES
    seed: int | None = None
