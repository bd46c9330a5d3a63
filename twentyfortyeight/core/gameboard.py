"""
Core functionality of the 2048 board: directions, line merging, sliding and tile spawning.
"""

from enum import IntEnum

from numpy import argwhere, array, array_equal, ndarray, rot90, zeros_like
from numpy.random import Generator

# ##>: The board is always a 4x4 grid.
BOARD_SIZE = 4

# ##>: New tiles are drawn uniformly from these values.
TILE_VALUES: tuple[int, ...] = (2, 4)


class Direction(IntEnum):
    """
    Move directions.

    The value of each member is the number of counter-clockwise quarter turns that brings the leading
    edge of the move to the left side of the board.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3


def merge_line(line: ndarray) -> tuple[int, ndarray]:
    """
    Compress a line toward its first cell and merge adjacent equal tiles.

    Parameters
    ----------
    line : ndarray
        A 1D array representing one row or column, oriented so that index 0 is the leading edge.

    Returns
    -------
    score : int
        Sum of the values of the merged tiles.
    merged_line : ndarray
        The compacted line after merging, without padding.

    Notes
    -----
    - Zeros are removed before merging.
    - The scan starts at the leading edge and skips both cells of a merged pair,
      so a tile takes part in at most one merge: ``[2, 2, 2, 0]`` gives ``[4, 2]``.
    """
    non_zero = line[line != 0]
    if len(non_zero) <= 1:
        return 0, non_zero

    result = []
    score = 0

    i = 0
    while i < len(non_zero):
        if i + 1 < len(non_zero) and non_zero[i] == non_zero[i + 1]:
            merged = int(non_zero[i]) * 2
            result.append(merged)
            score += merged
            i += 2
        else:
            result.append(non_zero[i])
            i += 1

    return score, array(result, dtype=line.dtype)


def slide_and_merge(board: ndarray) -> tuple[int, ndarray]:
    """
    Slide every row of the board to the left, merging adjacent equal tiles.

    Parameters
    ----------
    board : ndarray
        The game board represented as a 2D NumPy array.

    Returns
    -------
    score : int
        The total score obtained from all merges.
    updated_board : ndarray
        The board after sliding, right-padded with zeros.

    Notes
    -----
    For other directions, rotate the board before calling this function.
    """
    result = zeros_like(board)
    score = 0

    for i, row in enumerate(board):
        score_row, merged_row = merge_line(row)
        score += score_row
        result[i, : len(merged_row)] = merged_row

    return score, result


def latent_state(state: ndarray, direction: Direction | int) -> tuple[ndarray, int]:
    """
    Compute the board after a move, without adding a new tile.

    Parameters
    ----------
    state : ndarray
        The current state of the game board. Not modified.
    direction : Direction or int
        The direction of the move.

    Returns
    -------
    new_state : ndarray
        The candidate board after sliding and merging.
    score : int
        The score gained by the merges of this move.
    """
    turns = Direction(direction).value
    score, updated_board = slide_and_merge(rot90(state, k=turns))
    return rot90(updated_board, k=-turns).copy(), score


def is_same(state: ndarray, other: ndarray) -> bool:
    """Check whether two boards hold the same tiles."""
    return bool(array_equal(state, other))


def fill_cells(
    state: ndarray, number_tile: int, rng: Generator, tile_values: tuple[int, ...] = TILE_VALUES
) -> ndarray:
    """
    Fill empty cells with new tiles.

    Parameters
    ----------
    state : ndarray
        The current state of the game board. **Modified in-place.**
    number_tile : int
        Number of new tiles to add.
    rng : Generator
        Source of randomness for the cell positions and tile values.
    tile_values : tuple of int, optional
        Values a new tile can take, each equally likely (default is ``(2, 4)``).

    Returns
    -------
    ndarray
        The same array reference with new tiles added.

    Notes
    -----
    - Cells are chosen uniformly among the empty ones, without replacement.
    - If there are fewer empty cells than requested, all of them are filled.
    - A full board is left untouched.
    """
    available_cells = argwhere(state == 0)
    number_tile = min(number_tile, len(available_cells))
    if number_tile == 0:
        return state

    chosen_indices = rng.choice(len(available_cells), size=number_tile, replace=False)
    values = rng.choice(tile_values, size=number_tile)

    state[tuple(available_cells[chosen_indices].T)] = values
    return state
