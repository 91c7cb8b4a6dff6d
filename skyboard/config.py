"""
Configuration management for SkyBoard.

Loads settings from environment variables with sensible defaults.
All configuration is centralized here to avoid magic strings scattered
throughout the codebase.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class OpenSkyConfig:
    """OpenSky API configuration."""
    base_url: str = os.getenv('OPENSKY_BASE_URL', 'https://opensky-network.org/api')
    # Prefix such as 'https://corsproxy.io/?'; empty means direct requests
    cors_proxy: str = os.getenv('OPENSKY_CORS_PROXY', '')
    timeout_seconds: int = int(os.getenv('OPENSKY_TIMEOUT_SECONDS', '30'))

    @property
    def uses_proxy(self) -> bool:
        return bool(self.cors_proxy)


@dataclass(frozen=True)
class WeatherConfig:
    """Open-Meteo API configuration."""
    forecast_url: str = 'https://api.open-meteo.com/v1/forecast'
    geocoding_url: str = 'https://geocoding-api.open-meteo.com/v1/search'
    timezone: str = os.getenv('WEATHER_TIMEZONE', 'America/Los_Angeles')
    timeout_seconds: int = 10
    refresh_minutes: int = int(os.getenv('WEATHER_REFRESH_MINUTES', '30'))
    default_city: str = os.getenv('DEFAULT_CITY', 'london')


@dataclass(frozen=True)
class SnapshotConfig:
    """On-disk flight snapshot written by the proxy endpoint."""
    path: str = os.getenv('FLIGHTS_TEMP_PATH', 'flights_temp.json')
    size: int = 10  # Records kept per snapshot


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration."""
    opensky: OpenSkyConfig
    weather: WeatherConfig
    snapshot: SnapshotConfig

    # Flask settings
    port: int
    secret_key: str
    debug: bool


def load_config() -> AppConfig:
    """Load and validate all configuration."""
    return AppConfig(
        opensky=OpenSkyConfig(),
        weather=WeatherConfig(),
        snapshot=SnapshotConfig(),
        port=int(os.getenv('PORT', '3001')),
        secret_key=os.getenv('SECRET_KEY', 'dev-key-change-in-prod'),
        debug=os.getenv('FLASK_DEBUG', '0') == '1',
    )


# Singleton instance
config = load_config()
