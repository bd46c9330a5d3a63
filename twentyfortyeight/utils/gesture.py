"""
Translate raw user input into move directions.
"""

from math import hypot

from twentyfortyeight.core.gameboard import Direction

# ##: Keyboard keys bound to a direction.
KEY_DIRECTIONS = {
    'left': Direction.LEFT,
    'up': Direction.UP,
    'right': Direction.RIGHT,
    'down': Direction.DOWN,
}


def gesture_direction(dx: float, dy: float, threshold: float = 0.0) -> Direction | None:
    """
    Map a swipe displacement to a direction.

    Parameters
    ----------
    dx : float
        Horizontal displacement, positive to the right.
    dy : float
        Vertical displacement in screen convention, positive downward.
    threshold : float, optional
        Displacements not longer than this are ignored (default is 0).

    Returns
    -------
    Direction or None
        The direction of the dominant axis, or None for a displacement below the threshold.
    """
    if hypot(dx, dy) <= threshold:
        return None

    if abs(dx) > abs(dy):
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP


def key_direction(key: str | None) -> Direction | None:
    """Direction bound to a keyboard key, None if the key is not bound."""
    return KEY_DIRECTIONS.get(key)
