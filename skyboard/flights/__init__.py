"""
Flight data shaping.

Filters, airline lookups, and table rendering over OpenSky state vectors.
"""

from skyboard.flights.airlines import AIRLINE_CODES, get_airline_name
from skyboard.flights.filters import (
    utc_midnight,
    today_utc_midnight,
    filter_by_date,
    filter_by_destination,
    unique_destinations,
)
from skyboard.flights.render import render_flights_table, NO_FLIGHTS_MESSAGE

__all__ = [
    'AIRLINE_CODES',
    'get_airline_name',
    'utc_midnight',
    'today_utc_midnight',
    'filter_by_date',
    'filter_by_destination',
    'unique_destinations',
    'render_flights_table',
    'NO_FLIGHTS_MESSAGE',
]
