"""
Weather display logic.

Static city catalogue, WMO weather code lookups, and widget rendering
for Open-Meteo responses.
"""

from skyboard.weather.cities import City, EUROPEAN_CITIES, get_city, default_city
from skyboard.weather.codes import WeatherCode, WEATHER_CODES, UNKNOWN_WEATHER, resolve_weather_code, wind_direction
from skyboard.weather.render import render_weather, render_weather_error, current_conditions, WEATHER_ERROR_MESSAGE

__all__ = [
    'City',
    'EUROPEAN_CITIES',
    'get_city',
    'default_city',
    'WeatherCode',
    'WEATHER_CODES',
    'UNKNOWN_WEATHER',
    'resolve_weather_code',
    'wind_direction',
    'render_weather',
    'render_weather_error',
    'current_conditions',
    'WEATHER_ERROR_MESSAGE',
]
