"""Weather theme for tile levels: 1 is a small cloud, WIN_LEVEL is a rainbow."""

from typing import Dict, NamedTuple


class WeatherTile(NamedTuple):
    emoji: str
    label: str
    name: str
    colour: str


WEATHER_LEVELS: Dict[int, WeatherTile] = {
    1: WeatherTile('☁️', '小云朵', 'Small cloud', 'white'),
    2: WeatherTile('☁️☁️', '大云朵', 'Big cloud', 'blue-50'),
    3: WeatherTile('🌧️', '小雨', 'Light rain', 'blue-100'),
    4: WeatherTile('🌧️🌧️', '大雨', 'Heavy rain', 'blue-200'),
    5: WeatherTile('⛈️', '雷雨', 'Thunderstorm', 'indigo-100'),
    6: WeatherTile('🌪️', '暴风雨', 'Storm', 'slate-200'),
    7: WeatherTile('🌀', '台风', 'Typhoon', 'cyan-100'),
    8: WeatherTile('🌈', '彩虹', 'Rainbow', 'rainbow'),
}


def tile_for(level: int) -> WeatherTile:
    try:
        return WEATHER_LEVELS[level]
    except KeyError:
        raise ValueError(f"no weather tile for level {level}") from None


def glyph(level: int) -> str:
    """Emoji for a cell, empty string for an empty cell."""
    if level == 0:
        return ''
    return tile_for(level).emoji
