"""
Dashboard application state.

Holds the latest flight snapshot and weather view shared between request
handlers and the background weather refresher.

Every fetch is tagged with a request token from begin_*(). A result is
committed only if its token is still the newest one issued on that
channel, so a slow response can never overwrite a newer one.
"""

import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Optional, Tuple

from skyboard.ingestion.opensky_client import StateVector
from skyboard.weather.cities import City

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FlightSnapshot:
    """Flights from one fetch cycle, in API order."""
    states: Tuple[StateVector, ...] = ()
    error: Optional[str] = None
    fetched_at: float = field(default_factory=time.time)


@dataclass(frozen=True)
class WeatherView:
    """Weather response for one city, or the error that replaced it."""
    city: City
    data: Optional[dict] = None
    error: Optional[str] = None
    fetched_at: float = field(default_factory=time.time)

    @property
    def ok(self) -> bool:
        return self.data is not None and self.error is None


class DashboardState:
    """
    Thread-safe container for the current dashboard view.

    Readers get immutable snapshots; writers go through token-checked
    commits.
    """

    def __init__(self, city: City):
        self._lock = threading.RLock()
        self._flights = FlightSnapshot()
        self._weather: Optional[WeatherView] = None
        self._selected_city = city

        self._flight_token = 0
        self._weather_token = 0

        # Statistics
        self._stale_drops = 0

    # -------------------------------------------------------------------------
    # Flights
    # -------------------------------------------------------------------------

    def begin_flights(self) -> int:
        """Issue a token for a new flight fetch."""
        with self._lock:
            self._flight_token += 1
            return self._flight_token

    def commit_flights(self, token: int, snapshot: FlightSnapshot) -> bool:
        """Store a flight snapshot if its token is still the latest."""
        with self._lock:
            if token != self._flight_token:
                self._stale_drops += 1
                logger.debug(f'Dropping stale flight response {token} (latest {self._flight_token})')
                return False
            self._flights = snapshot
        return True

    @property
    def flights(self) -> FlightSnapshot:
        with self._lock:
            return self._flights

    # -------------------------------------------------------------------------
    # Weather
    # -------------------------------------------------------------------------

    def begin_weather(self, city: Optional[City] = None) -> Tuple[int, City]:
        """
        Issue a token for a new weather fetch.

        Passing a city also makes it the selected city. Returns the token
        and the city the fetch should use.
        """
        with self._lock:
            if city is not None:
                self._selected_city = city
            self._weather_token += 1
            return self._weather_token, self._selected_city

    def commit_weather(self, token: int, view: WeatherView) -> bool:
        """Store a weather view if its token is still the latest."""
        with self._lock:
            if token != self._weather_token:
                self._stale_drops += 1
                logger.debug(f'Dropping stale weather response {token} (latest {self._weather_token})')
                return False
            self._weather = view
        return True

    @property
    def weather(self) -> Optional[WeatherView]:
        with self._lock:
            return self._weather

    @property
    def selected_city(self) -> City:
        with self._lock:
            return self._selected_city

    @property
    def stats(self) -> dict:
        """Get state statistics."""
        with self._lock:
            return {
                'flights': len(self._flights.states),
                'flight_token': self._flight_token,
                'weather_token': self._weather_token,
                'selected_city': self._selected_city.key,
                'stale_drops': self._stale_drops,
            }
