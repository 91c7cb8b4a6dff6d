"""European cities offered in the weather city selector."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from skyboard.config import config


@dataclass(frozen=True)
class City:
    key: str
    latitude: float
    longitude: float
    name: str

    def to_dict(self) -> dict:
        return {
            'key': self.key,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'name': self.name,
        }


# Insertion order is the drop-down order
EUROPEAN_CITIES = MappingProxyType({
    city.key: city for city in (
        City('london', 51.5074, -0.1278, 'London, UK'),
        City('paris', 48.8566, 2.3522, 'Paris, France'),
        City('berlin', 52.5200, 13.4050, 'Berlin, Germany'),
        City('madrid', 40.4168, -3.7038, 'Madrid, Spain'),
        City('rome', 41.9028, 12.4964, 'Rome, Italy'),
        City('amsterdam', 52.3676, 4.9041, 'Amsterdam, Netherlands'),
        City('vienna', 48.2082, 16.3738, 'Vienna, Austria'),
        City('stockholm', 59.3293, 18.0686, 'Stockholm, Sweden'),
        City('copenhagen', 55.6761, 12.5683, 'Copenhagen, Denmark'),
        City('zurich', 47.3769, 8.5417, 'Zurich, Switzerland'),
    )
})


def get_city(key: Optional[str]) -> Optional[City]:
    """Look up a city by selector key (case-insensitive)."""
    if not key:
        return None
    return EUROPEAN_CITIES.get(key.strip().lower())


def default_city() -> City:
    """Configured default city, falling back to London."""
    return get_city(config.weather.default_city) or EUROPEAN_CITIES['london']
