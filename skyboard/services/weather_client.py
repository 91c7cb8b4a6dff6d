"""
Open-Meteo API client.

Fetches current conditions plus hourly/daily forecast blocks for a
coordinate, and reverse-geocodes coordinates to a display label.
No API key required.
"""

import logging
from typing import Optional

import requests

from skyboard.config import config

logger = logging.getLogger(__name__)

CURRENT_FIELDS = (
    'temperature_2m',
    'relative_humidity_2m',
    'apparent_temperature',
    'weather_code',
    'wind_speed_10m',
    'wind_direction_10m',
)
HOURLY_FIELDS = ('temperature_2m', 'weather_code')
DAILY_FIELDS = ('temperature_2m_max', 'temperature_2m_min', 'weather_code')

UNKNOWN_LOCATION = 'Unknown Location'


class OpenMeteoClient:
    """
    Client for the Open-Meteo forecast and geocoding APIs.

    fetch_forecast() raises on failure; get_city_name() never does.
    """

    def __init__(
        self,
        forecast_url: str = 'https://api.open-meteo.com/v1/forecast',
        geocoding_url: str = 'https://geocoding-api.open-meteo.com/v1/search',
        timezone: str = 'America/Los_Angeles',
        timeout: float = 10,
        session: Optional[requests.Session] = None,
    ):
        self.forecast_url = forecast_url
        self.geocoding_url = geocoding_url
        self.timezone = timezone
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls) -> 'OpenMeteoClient':
        """Create client from application configuration."""
        return cls(
            forecast_url=config.weather.forecast_url,
            geocoding_url=config.weather.geocoding_url,
            timezone=config.weather.timezone,
            timeout=config.weather.timeout_seconds,
        )

    def forecast_params(self, lat: float, lon: float) -> dict:
        """Fixed query parameter set for a forecast request."""
        return {
            'latitude': lat,
            'longitude': lon,
            'current': ','.join(CURRENT_FIELDS),
            'hourly': ','.join(HOURLY_FIELDS),
            'daily': ','.join(DAILY_FIELDS),
            'temperature_unit': 'celsius',
            'wind_speed_unit': 'mph',
            'precipitation_unit': 'inch',
            'timezone': self.timezone,
        }

    def fetch_forecast(self, lat: float, lon: float) -> dict:
        """
        Fetch the forecast for a coordinate.

        Raises:
            requests.RequestException on network errors or non-OK status
            ValueError if the body is not valid JSON
        """
        logger.debug(f'Fetching weather for ({lat:.4f}, {lon:.4f})')

        try:
            response = self.session.get(
                self.forecast_url,
                params=self.forecast_params(lat, lon),
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response.json()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else '?'
            logger.error(f'Open-Meteo API error: {status}')
            raise
        except requests.exceptions.RequestException as e:
            logger.error(f'Open-Meteo request failed: {e}')
            raise

    def get_city_name(self, lat: float, lon: float) -> str:
        """
        Reverse-geocode a coordinate to 'City, Region'.

        Returns 'Unknown Location' when nothing matches or the lookup fails.
        """
        params = {
            'name': f'{lat},{lon}',
            'count': 1,
            'language': 'en',
            'format': 'json',
        }
        try:
            response = self.session.get(
                self.geocoding_url,
                params=params,
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f'Geocoding error: {e}')
            return UNKNOWN_LOCATION

        results = data.get('results') if isinstance(data, dict) else None
        if not isinstance(results, list) or not results or not isinstance(results[0], dict):
            return UNKNOWN_LOCATION

        result = results[0]
        region = result.get('admin1') or result.get('country')
        if region:
            return f'{result.get("name")}, {region}'
        return result.get('name') or UNKNOWN_LOCATION
