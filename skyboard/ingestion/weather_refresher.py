"""
Background weather refresh.

Reloads the selected city's weather on a fixed interval (30 minutes by
default). Runs on a daemon thread and commits through the same request
tokens as manual city changes.
"""

import logging
import threading
from typing import Optional

from skyboard.config import config
from skyboard.ingestion.loaders import load_weather
from skyboard.services.weather_client import OpenMeteoClient
from skyboard.state import DashboardState

logger = logging.getLogger(__name__)


class WeatherRefresher:
    """Periodically refreshes the dashboard weather view."""

    def __init__(
        self,
        state: DashboardState,
        client: Optional[OpenMeteoClient] = None,
        interval_seconds: Optional[float] = None,
    ):
        self.state = state
        self.client = client or OpenMeteoClient.from_config()
        self.interval = interval_seconds or config.weather.refresh_minutes * 60

        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

        # Statistics
        self._refresh_count = 0
        self._error_count = 0

    def refresh_once(self) -> bool:
        """Refresh the selected city. Returns True if the view was committed."""
        view, committed = load_weather(self.state, self.client)
        self._refresh_count += 1
        if not view.ok:
            self._error_count += 1
        return committed

    def run_continuous(self) -> None:
        """
        Refresh immediately, then once per interval until stopped.

        This method blocks - use start_background() for non-blocking.
        """
        logger.info(f'Starting weather refresh (interval={self.interval}s)')

        while not self._stop_event.is_set():
            try:
                self.refresh_once()
            except Exception as e:
                self._error_count += 1
                logger.error(f'Weather refresh error: {e}')
            self._stop_event.wait(self.interval)

        logger.info('Weather refresh stopped')

    def start_background(self) -> None:
        """Start refreshing in a background thread."""
        if self._thread and self._thread.is_alive():
            logger.warning('Weather refresh already running')
            return

        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self.run_continuous,
            name='weather-refresher',
            daemon=True,
        )
        self._thread.start()
        logger.info('Background weather refresh started')

    def stop(self) -> None:
        """Stop background refresh."""
        self._stop_event.set()
        if self._thread:
            self._thread.join(timeout=5)

    @property
    def running(self) -> bool:
        return bool(self._thread and self._thread.is_alive())

    @property
    def stats(self) -> dict:
        """Get refresh statistics."""
        return {
            'refresh_count': self._refresh_count,
            'error_count': self._error_count,
            'interval_seconds': self.interval,
            'running': self.running,
        }
