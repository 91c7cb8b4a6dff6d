"""
Flight filters over a fetched snapshot.

Filters never mutate their input and keep the original API order.
Records missing the field a filter relies on are excluded.
"""

from datetime import datetime, timezone
from typing import Iterable, List, Optional

from skyboard.ingestion.opensky_client import StateVector

SECONDS_PER_DAY = 86400


def utc_midnight(date_str: str) -> int:
    """
    Unix timestamp of UTC midnight for a 'YYYY-MM-DD' date string.

    Raises ValueError if the string is not a valid date.
    """
    day = datetime.strptime(date_str.strip(), '%Y-%m-%d')
    return int(day.replace(tzinfo=timezone.utc).timestamp())


def today_utc_midnight(now: Optional[datetime] = None) -> int:
    """Unix timestamp of the most recent UTC midnight."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return utc_midnight(now.astimezone(timezone.utc).strftime('%Y-%m-%d'))


def filter_by_date(states: Iterable[StateVector], date_str: str) -> List[StateVector]:
    """Keep records whose last contact falls within the given UTC day."""
    start = utc_midnight(date_str)
    end = start + SECONDS_PER_DAY
    return [
        s for s in states
        if s.last_contact and start <= s.last_contact < end
    ]


def filter_by_destination(
    states: Iterable[StateVector],
    destination: str,
    now: Optional[datetime] = None,
) -> List[StateVector]:
    """Keep today's records (UTC) heading to the selected destination."""
    start = today_utc_midnight(now)
    return [
        s for s in states
        if s.last_contact and s.last_contact >= start
        and s.destination and s.destination == destination
    ]


def unique_destinations(
    states: Iterable[StateVector],
    now: Optional[datetime] = None,
) -> List[str]:
    """Sorted destinations seen among today's records, for the drop-down."""
    start = today_utc_midnight(now)
    return sorted({
        s.destination for s in states
        if s.destination and s.last_contact and s.last_contact >= start
    })
