import pytest

from weather2048.game_env import WIN_LEVEL
from weather2048.levels import WEATHER_LEVELS, glyph, tile_for


def test_every_level_has_a_tile():
    assert sorted(WEATHER_LEVELS) == list(range(1, WIN_LEVEL + 1))


def test_win_level_is_a_rainbow():
    assert tile_for(WIN_LEVEL).name == 'Rainbow'
    assert glyph(WIN_LEVEL) == '🌈'


def test_empty_cell_has_no_glyph():
    assert glyph(0) == ''


@pytest.mark.parametrize("level", [-1, WIN_LEVEL + 1])
def test_unknown_level(level):
    with pytest.raises(ValueError):
        tile_for(level)
