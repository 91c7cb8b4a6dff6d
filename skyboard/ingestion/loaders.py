"""
Fetch-and-commit helpers shared by request handlers and the refresher.

Each loader takes a request token, fetches, and commits the result into
the dashboard state. Failures are caught here and stored as the view's
error message.
"""

import logging
from typing import Optional, Tuple

import requests

from skyboard.ingestion.opensky_client import OpenSkyClient, fetch_flights
from skyboard.services.weather_client import OpenMeteoClient
from skyboard.state import DashboardState, FlightSnapshot, WeatherView
from skyboard.weather.cities import City
from skyboard.weather.render import WEATHER_ERROR_MESSAGE

logger = logging.getLogger(__name__)


def load_flights(state: DashboardState, client: OpenSkyClient) -> Tuple[FlightSnapshot, bool]:
    """
    Fetch flights and commit them.

    Returns the fetched snapshot and whether it became the current one.
    """
    token = state.begin_flights()
    states, error = fetch_flights(client)
    snapshot = FlightSnapshot(states=tuple(states), error=error)
    return snapshot, state.commit_flights(token, snapshot)


def load_weather(
    state: DashboardState,
    client: OpenMeteoClient,
    city: Optional[City] = None,
) -> Tuple[WeatherView, bool]:
    """
    Fetch weather for a city (default: the selected city) and commit it.

    Returns the fetched view and whether it became the current one.
    """
    token, city = state.begin_weather(city)
    try:
        data = client.fetch_forecast(city.latitude, city.longitude)
        view = WeatherView(city=city, data=data)
    except (requests.RequestException, ValueError) as e:
        logger.error(f'Weather loading error for {city.key}: {e}')
        view = WeatherView(city=city, error=WEATHER_ERROR_MESSAGE)

    committed = state.commit_weather(token, view)
    if committed:
        logger.info(f'Weather updated for {city.name}')
    return view, committed
