"""
Weather widget rendering.

Turns an Open-Meteo forecast response into the current-conditions block
shown on the dashboard.
"""

from datetime import date
from typing import Optional

from jinja2 import Environment

from skyboard.weather.codes import resolve_weather_code, round_half_up, wind_direction

WEATHER_ERROR_MESSAGE = 'Unable to load weather data. Please try again later.'

_env = Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True)

WEATHER_TEMPLATE = _env.from_string('''\
<div class="weather-header">
    <div class="weather-location">{{ city_name }}</div>
    <div class="weather-date">{{ date_label }}</div>
</div>
<div class="weather-current">
    <div class="weather-temp">{{ c.temperature }}°</div>
    <div class="weather-condition">
        <div class="weather-icon">{{ c.icon }}</div>
        <div>{{ c.description }}</div>
    </div>
</div>
<div class="weather-details">
    <div class="weather-detail">
        <div class="detail-label">Feels Like</div>
        <div class="detail-value">{{ c.feels_like }}°</div>
    </div>
    <div class="weather-detail">
        <div class="detail-label">Humidity</div>
        <div class="detail-value">{{ c.humidity }}%</div>
    </div>
    <div class="weather-detail">
        <div class="detail-label">Wind Speed</div>
        <div class="detail-value">{{ c.wind_speed }} mph</div>
    </div>
    <div class="weather-detail">
        <div class="detail-label">Wind Direction</div>
        <div class="detail-value">{{ c.wind_direction }}</div>
    </div>
</div>
''')

WEATHER_ERROR_TEMPLATE = _env.from_string(
    '<div class="weather-error">{{ message }}</div>'
)


def format_date(day: date) -> str:
    """Long US-style date, e.g. 'Monday, October 19, 2026'."""
    return f'{day:%A, %B} {day.day}, {day.year}'


def current_conditions(data: dict) -> dict:
    """
    Display values for the 'current' block of a forecast response.

    Raises KeyError if the response has no current block or is missing
    one of the displayed fields.
    """
    current = data['current']
    code = resolve_weather_code(current.get('weather_code'))
    return {
        'temperature': round_half_up(current['temperature_2m']),
        'feels_like': round_half_up(current['apparent_temperature']),
        'humidity': current['relative_humidity_2m'],
        'wind_speed': round_half_up(current['wind_speed_10m']),
        'wind_direction': wind_direction(current['wind_direction_10m']),
        'icon': code.icon,
        'description': code.description,
    }


def render_weather(data: dict, city_name: str, today: Optional[date] = None) -> str:
    """Render the current-conditions block for a city."""
    return WEATHER_TEMPLATE.render(
        city_name=city_name,
        date_label=format_date(today or date.today()),
        c=current_conditions(data),
    )


def render_weather_error(message: str = WEATHER_ERROR_MESSAGE) -> str:
    return WEATHER_ERROR_TEMPLATE.render(message=message)
