"""WMO weather interpretation codes and compass helpers."""

import math
from types import MappingProxyType
from typing import NamedTuple, Optional


class WeatherCode(NamedTuple):
    icon: str
    description: str


WEATHER_CODES = MappingProxyType({
    0: WeatherCode('☀️', 'Clear sky'),
    1: WeatherCode('🌤️', 'Mainly clear'),
    2: WeatherCode('⛅', 'Partly cloudy'),
    3: WeatherCode('☁️', 'Overcast'),
    45: WeatherCode('🌫️', 'Foggy'),
    48: WeatherCode('🌫️', 'Depositing rime fog'),
    51: WeatherCode('🌦️', 'Light drizzle'),
    53: WeatherCode('🌦️', 'Moderate drizzle'),
    55: WeatherCode('🌦️', 'Dense drizzle'),
    61: WeatherCode('🌧️', 'Slight rain'),
    63: WeatherCode('🌧️', 'Moderate rain'),
    65: WeatherCode('🌧️', 'Heavy rain'),
    71: WeatherCode('🌨️', 'Slight snow'),
    73: WeatherCode('🌨️', 'Moderate snow'),
    75: WeatherCode('🌨️', 'Heavy snow'),
    77: WeatherCode('🌨️', 'Snow grains'),
    80: WeatherCode('🌦️', 'Slight rain showers'),
    81: WeatherCode('🌦️', 'Moderate rain showers'),
    82: WeatherCode('🌧️', 'Violent rain showers'),
    85: WeatherCode('🌨️', 'Slight snow showers'),
    86: WeatherCode('🌨️', 'Heavy snow showers'),
    95: WeatherCode('⛈️', 'Thunderstorm'),
    96: WeatherCode('⛈️', 'Thunderstorm with slight hail'),
    99: WeatherCode('⛈️', 'Thunderstorm with heavy hail'),
})

UNKNOWN_WEATHER = WeatherCode('❓', 'Unknown')

COMPASS_POINTS = ('N', 'NE', 'E', 'SE', 'S', 'SW', 'W', 'NW')


def resolve_weather_code(code: Optional[int]) -> WeatherCode:
    """Icon and description for a weather code, or the unknown marker."""
    return WEATHER_CODES.get(code, UNKNOWN_WEATHER)


def round_half_up(value: float) -> int:
    """Round like JavaScript Math.round (ties go up, also for negatives)."""
    return int(math.floor(value + 0.5))


def wind_direction(degrees: float) -> str:
    """Nearest of the 8 compass points, wrapping 360 back to N."""
    return COMPASS_POINTS[round_half_up(degrees / 45) % 8]
