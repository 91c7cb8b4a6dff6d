"""
Flight data API endpoints.

Provides endpoints for:
- GET /api/flights - Fetch live flights, persist the first 10 as a snapshot
- GET /api/flights/temp - Serve the last persisted snapshot verbatim
- GET /api/flights/search - Filtered flights as JSON (date or destination)
"""

import logging
import time
from datetime import datetime, timezone
from typing import Any, List

import requests
from flask import Blueprint, Response, current_app, jsonify, request

from skyboard.flights import (
    filter_by_date,
    filter_by_destination,
    get_airline_name,
    unique_destinations,
)
from skyboard.ingestion.loaders import load_flights
from skyboard.ingestion.opensky_client import OpenSkyClient

logger = logging.getLogger(__name__)

flights_bp = Blueprint('flights', __name__, url_prefix='/api/flights')

FETCH_ERROR = 'Failed to fetch flight data.'
NO_SNAPSHOT_ERROR = 'No temp file found.'


def first_flights(client: OpenSkyClient, size: int) -> List[Any]:
    """
    Fetch the live snapshot and keep the first `size` raw records.

    Raises:
        requests.RequestException / ValueError on fetch failure
    """
    _, states_raw = client.get_raw_states()
    return states_raw[:size]


@flights_bp.route('', methods=['GET'])
def proxy_flights():
    """
    Fetch live flights and overwrite the snapshot file.

    Returns the same records that were written.
    """
    client = current_app.config['OPENSKY_CLIENT']
    store = current_app.config['SNAPSHOT_STORE']
    size = current_app.config['SNAPSHOT_SIZE']

    try:
        records = first_flights(client, size)
        store.write(records)
    except (requests.RequestException, ValueError, OSError) as e:
        logger.error(f'Flight proxy failed: {e}')
        return jsonify({'error': FETCH_ERROR}), 500

    return jsonify(records)


@flights_bp.route('/temp', methods=['GET'])
def get_snapshot():
    """Serve the snapshot file contents as-is."""
    store = current_app.config['SNAPSHOT_STORE']

    text = store.read_text()
    if text is None:
        return jsonify({'error': NO_SNAPSHOT_ERROR}), 404

    return Response(text, mimetype='application/json')


@flights_bp.route('/search', methods=['GET'])
def search_flights():
    """
    Fetch flights and filter them.

    Query parameters:
    - date: YYYY-MM-DD, keep flights last seen that UTC day
    - destination: ICAO code, keep today's flights to that airport
    - limit: int, max results to return (default all)

    With neither criterion, all fetched flights are returned.
    """
    start_time = time.perf_counter()

    date_str = request.args.get('date', '').strip()
    destination = request.args.get('destination', '').strip().upper()
    limit = request.args.get('limit', type=int)

    if date_str and destination:
        return jsonify({'error': 'Use either date or destination, not both'}), 400

    snapshot, _ = load_flights(
        current_app.config['DASHBOARD_STATE'],
        current_app.config['OPENSKY_CLIENT'],
    )
    if snapshot.error:
        return jsonify({'error': snapshot.error, 'flights': [], 'count': 0}), 502

    if date_str:
        try:
            flights = filter_by_date(snapshot.states, date_str)
        except ValueError:
            return jsonify({'error': 'date must be YYYY-MM-DD'}), 400
    elif destination:
        flights = filter_by_destination(snapshot.states, destination)
    else:
        flights = list(snapshot.states)

    if limit is not None and limit >= 0:
        flights = flights[:limit]

    flight_dicts = []
    for f in flights:
        flight_dict = f.to_dict()
        flight_dict['airline_name'] = get_airline_name(f.callsign)
        flight_dicts.append(flight_dict)

    query_time_ms = (time.perf_counter() - start_time) * 1000

    return jsonify({
        'flights': flight_dicts,
        'count': len(flight_dicts),
        'destinations': unique_destinations(snapshot.states),
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'query_time_ms': round(query_time_ms, 2),
    })
