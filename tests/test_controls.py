import pytest

from weather2048.controls import SWIPE_THRESHOLD, direction_for_key, swipe_direction
from weather2048.game_env import Direction


@pytest.mark.parametrize("key, expected", [
    ("ArrowUp", Direction.UP),
    ("ArrowDown", Direction.DOWN),
    ("ArrowLeft", Direction.LEFT),
    ("ArrowRight", Direction.RIGHT),
    ("w", Direction.UP),
    ("A", Direction.LEFT),
    (" down ", Direction.DOWN),
    ("right", Direction.RIGHT),
])
def test_direction_for_key(key, expected):
    assert direction_for_key(key) == expected


def test_unknown_key_has_no_direction():
    assert direction_for_key("Enter") is None
    assert direction_for_key("") is None


@pytest.mark.parametrize("dx, dy, expected", [
    (80, 10, Direction.RIGHT),
    (-80, 10, Direction.LEFT),
    (5, 60, Direction.DOWN),
    (5, -60, Direction.UP),
    (-40, 40, Direction.DOWN),
])
def test_swipe_direction(dx, dy, expected):
    assert swipe_direction(dx, dy) == expected


@pytest.mark.parametrize("dx, dy", [(0, 0), (29, -29), (SWIPE_THRESHOLD, 0), (-12, SWIPE_THRESHOLD)])
def test_short_swipes_are_ignored(dx, dy):
    assert swipe_direction(dx, dy) is None


def test_custom_swipe_threshold():
    assert swipe_direction(20, 0, min_distance=10) == Direction.RIGHT
    assert swipe_direction(50, 0, min_distance=60) is None
