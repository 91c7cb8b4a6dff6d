"""
External integration services.

Handles Open-Meteo weather and geocoding calls, and IP-based observer
location with graceful fallback to the default city.
"""

from skyboard.services.weather_client import OpenMeteoClient
from skyboard.services.location import ObserverLocation, detect_location

__all__ = ['OpenMeteoClient', 'ObserverLocation', 'detect_location']
