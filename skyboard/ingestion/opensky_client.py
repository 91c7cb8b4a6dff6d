"""
OpenSky Network API client.

Handles communication with the OpenSky REST API, including:
- Fetching the global /states/all snapshot
- Optional CORS-proxy prefix for deployments that cannot reach OpenSky directly
- Error logging (callers decide whether to degrade or re-raise)

OpenSky state vector format (array indices):
0: icao24          - ICAO24 hex address
1: callsign        - Callsign (8 chars max)
2: origin_country  - Country of registration
3: time_position   - Unix timestamp of last position update
4: last_contact    - Unix timestamp of last message
5: longitude       - WGS84 longitude
6: latitude        - WGS84 latitude
7: baro_altitude   - Barometric altitude (meters)
8: on_ground       - Boolean
9: velocity        - Ground speed (m/s)
10: true_track     - Track angle (degrees, 0=north)
11: vertical_rate  - Vertical rate (m/s)
12: sensors        - Sensor IDs (array); some feeds put a destination ICAO here
13: geo_altitude   - Geometric altitude (meters)
14: squawk         - Transponder code
15: spi            - Special position indicator
16: position_source - 0=ADS-B, 1=ASTERIX, 2=MLAT, 3=FLARM
"""

import logging
import time
from dataclasses import dataclass, asdict
from typing import Optional, List, Tuple, Any
from urllib.parse import quote

import requests

from skyboard.config import config

logger = logging.getLogger(__name__)

STATE_VECTOR_FIELDS = 17

FLIGHT_LOAD_ERROR = 'Failed to load flight data.'


@dataclass(frozen=True)
class StateVector:
    """
    Parsed state vector from OpenSky API.

    Normalizes the raw array format into a typed dataclass.
    All values may be None if not reported by the aircraft.
    """
    icao24: str
    callsign: Optional[str]
    origin_country: Optional[str]
    time_position: Optional[int]
    last_contact: Optional[int]
    longitude: Optional[float]
    latitude: Optional[float]
    baro_altitude: Optional[float]
    on_ground: bool
    velocity: Optional[float]
    true_track: Optional[float]
    vertical_rate: Optional[float]
    geo_altitude: Optional[float]
    squawk: Optional[str]
    spi: bool
    position_source: Optional[int]
    destination: Optional[str] = None

    @classmethod
    def from_array(cls, arr: List[Any]) -> Optional['StateVector']:
        """
        Parse OpenSky state vector array into StateVector object.

        Short arrays are padded with None. Returns None if the array is
        empty or has no ICAO24 address.
        """
        if not arr or not isinstance(arr, (list, tuple)):
            return None

        arr = list(arr) + [None] * (STATE_VECTOR_FIELDS - len(arr))

        icao24 = arr[0]
        if not icao24 or not isinstance(icao24, str):
            return None

        # Normalize callsign (strip whitespace, handle None)
        callsign = arr[1]
        if callsign:
            callsign = callsign.strip() or None

        # Index 12 is normally the sensors list; only a string is a destination
        destination = arr[12] if isinstance(arr[12], str) else None
        if destination:
            destination = destination.strip().upper() or None

        return cls(
            icao24=icao24.lower(),  # Normalize to lowercase
            callsign=callsign,
            origin_country=arr[2],
            time_position=arr[3],
            last_contact=arr[4],
            longitude=arr[5],
            latitude=arr[6],
            baro_altitude=arr[7],
            on_ground=bool(arr[8]),
            velocity=arr[9],
            true_track=arr[10],
            vertical_rate=arr[11],
            geo_altitude=arr[13],
            squawk=arr[14],
            spi=bool(arr[15]),
            position_source=arr[16],
            destination=destination,
        )

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict for API responses."""
        return asdict(self)


def parse_states(states_raw: List[Any]) -> List[StateVector]:
    """Parse raw state arrays, dropping malformed entries. Order is preserved."""
    states = []
    for arr in states_raw:
        sv = StateVector.from_array(arr)
        if sv:
            states.append(sv)
    return states


class OpenSkyClient:
    """
    Client for OpenSky Network API.

    Handles:
    - GET requests to /states/all endpoint
    - Optional CORS-proxy prefix
    """

    def __init__(
        self,
        base_url: str = 'https://opensky-network.org/api',
        cors_proxy: str = '',
        timeout: float = 30,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url
        self.cors_proxy = cors_proxy
        self.timeout = timeout
        self.session = session or requests.Session()

        if cors_proxy:
            logger.info(f'OpenSky client routed through proxy {cors_proxy}')

    @classmethod
    def from_config(cls) -> 'OpenSkyClient':
        """Create client from application configuration."""
        return cls(
            base_url=config.opensky.base_url,
            cors_proxy=config.opensky.cors_proxy,
            timeout=config.opensky.timeout_seconds,
        )

    @property
    def states_url(self) -> str:
        url = f'{self.base_url}/states/all'
        if self.cors_proxy:
            # Same escaping as JavaScript encodeURIComponent
            return self.cors_proxy + quote(url, safe="!~*'()")
        return url

    def get_raw_states(self) -> Tuple[int, List[List[Any]]]:
        """
        Fetch the current snapshot as raw state arrays.

        Returns:
            Tuple of (api_timestamp, list of raw state arrays)

        Raises:
            requests.RequestException on network/API errors
            ValueError if the body is not a JSON object
        """
        url = self.states_url
        logger.debug(f'Fetching states: {url}')

        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
            if not isinstance(data, dict):
                raise ValueError(f'expected a JSON object, got {type(data).__name__}')

        except requests.exceptions.Timeout:
            logger.error('OpenSky API timeout')
            raise
        except requests.exceptions.HTTPError as e:
            if e.response is not None and e.response.status_code == 429:
                logger.warning('OpenSky rate limit exceeded')
            else:
                status = e.response.status_code if e.response is not None else '?'
                logger.error(f'OpenSky API error: {status}')
            raise
        except requests.exceptions.RequestException as e:
            logger.error(f'OpenSky request failed: {e}')
            raise
        except ValueError as e:
            logger.error(f'OpenSky returned invalid JSON: {e}')
            raise

        api_time = data.get('time', int(time.time()))
        states_raw = data.get('states') or []

        logger.info(f'Received {len(states_raw)} state vectors from OpenSky')
        return api_time, states_raw

    def get_states(self) -> Tuple[int, List[StateVector]]:
        """
        Fetch current state vectors from OpenSky.

        Returns:
            Tuple of (api_timestamp, list of StateVectors) in API order

        Raises:
            requests.RequestException on network/API errors
            ValueError if the body is not a JSON object
        """
        api_time, states_raw = self.get_raw_states()
        states = parse_states(states_raw)
        logger.debug(f'Parsed {len(states)} valid state vectors')
        return api_time, states


def fetch_flights(client: OpenSkyClient) -> Tuple[List[StateVector], Optional[str]]:
    """
    Fetch flights, degrading to an empty list on any failure.

    Returns:
        (states, None) on success, ([], status message) on failure.
    """
    try:
        _, states = client.get_states()
    except (requests.RequestException, ValueError) as e:
        logger.warning(f'Flight fetch failed: {e}')
        return [], FLIGHT_LOAD_ERROR
    return states, None
