"""
Observer location detection.

Approximates the user's position from their public IP address and labels
it through reverse geocoding. Falls back to the default city whenever
detection fails.
"""

import logging
from dataclasses import dataclass

import geocoder

from skyboard.services.weather_client import OpenMeteoClient, UNKNOWN_LOCATION
from skyboard.weather.cities import default_city

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ObserverLocation:
    latitude: float
    longitude: float
    label: str
    detected: bool


def fallback_location() -> ObserverLocation:
    city = default_city()
    return ObserverLocation(city.latitude, city.longitude, city.name, detected=False)


def detect_location(weather_client: OpenMeteoClient) -> ObserverLocation:
    """Detect location via IP geolocation, or return the default city."""
    try:
        g = geocoder.ip('me')
    except Exception as e:
        logger.warning(f'Location auto-detect failed: {e}')
        return fallback_location()

    if not g.ok or not g.latlng:
        logger.warning('Could not determine location from IP')
        return fallback_location()

    lat, lon = g.latlng
    label = weather_client.get_city_name(lat, lon)
    if label == UNKNOWN_LOCATION and g.city:
        label = f'{g.city}, {g.country}' if g.country else g.city

    logger.info(f'Auto-detected location: ({lat}, {lon}) {label}')
    return ObserverLocation(lat, lon, label, detected=True)
