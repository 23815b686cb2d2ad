"""Map key presses and swipe gestures to move directions."""

from typing import Dict, Optional

from .game_env import Direction

# Gestures shorter than this (on both axes) are treated as taps.
SWIPE_THRESHOLD = 30

KEY_DIRECTIONS: Dict[str, Direction] = {
    'arrowup': Direction.UP,
    'arrowdown': Direction.DOWN,
    'arrowleft': Direction.LEFT,
    'arrowright': Direction.RIGHT,
    'up': Direction.UP,
    'down': Direction.DOWN,
    'left': Direction.LEFT,
    'right': Direction.RIGHT,
    'w': Direction.UP,
    's': Direction.DOWN,
    'a': Direction.LEFT,
    'd': Direction.RIGHT,
}


def direction_for_key(key: str) -> Optional[Direction]:
    """Direction for a key name, or None for keys that don't move."""
    return KEY_DIRECTIONS.get(key.strip().lower())


def swipe_direction(dx: float, dy: float, min_distance: float = SWIPE_THRESHOLD) -> Optional[Direction]:
    """
    Direction of a swipe from its displacement.

    The dominant axis decides; ties go to the vertical axis. Screen
    coordinates are assumed, so a positive ``dy`` points down.
    """
    abs_dx = abs(dx)
    abs_dy = abs(dy)
    if max(abs_dx, abs_dy) <= min_distance:
        return None
    if abs_dx > abs_dy:
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP
