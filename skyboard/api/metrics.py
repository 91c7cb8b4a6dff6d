"""
Status API endpoints.

Provides endpoints for:
- GET /api/metrics/status - Dashboard state, refresher and config summary
"""

import logging
import time
from datetime import datetime, timezone

from flask import Blueprint, jsonify, current_app

from skyboard.config import config

logger = logging.getLogger(__name__)

metrics_bp = Blueprint('metrics', __name__, url_prefix='/api/metrics')


@metrics_bp.route('/status', methods=['GET'])
def get_system_status():
    """
    Get system health and status information.

    Returns:
    - Dashboard state counters (tokens, stale drops)
    - Weather refresher status
    - Snapshot file presence
    - Configuration info
    """
    start_time = time.perf_counter()

    state = current_app.config['DASHBOARD_STATE']
    refresher = current_app.config.get('WEATHER_REFRESHER')
    refresher_stats = refresher.stats if refresher else {'running': False}
    store = current_app.config['SNAPSHOT_STORE']

    flights = state.flights
    weather = state.weather

    query_time_ms = (time.perf_counter() - start_time) * 1000

    return jsonify({
        'status': 'healthy' if not flights.error and (weather is None or weather.ok) else 'degraded',
        'state': state.stats,
        'flights': {
            'error': flights.error,
            'fetched_at': flights.fetched_at,
        },
        'weather': {
            'city': weather.city.key if weather else None,
            'error': weather.error if weather else None,
            'fetched_at': weather.fetched_at if weather else None,
        },
        'refresher': refresher_stats,
        'snapshot': {
            'path': store.path,
            'exists': store.exists(),
        },
        'config': {
            'opensky_proxy': config.opensky.uses_proxy,
            'weather_refresh_minutes': config.weather.refresh_minutes,
        },
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'query_time_ms': round(query_time_ms, 2),
    })
