"""
Weather API endpoints.

Provides endpoints for:
- GET /api/weather?city=<key> - Current conditions for a catalogue city
- GET /api/weather/cities - City catalogue for the selector
- GET /api/weather/location - IP-detected observer location
"""

import logging
from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify, request

from skyboard.ingestion.loaders import load_weather
from skyboard.services.location import detect_location
from skyboard.weather import EUROPEAN_CITIES, current_conditions, get_city

logger = logging.getLogger(__name__)

weather_bp = Blueprint('weather', __name__, url_prefix='/api/weather')


@weather_bp.route('', methods=['GET'])
def get_weather():
    """
    Get current conditions for a city.

    Query parameters:
    - city: catalogue key (default: the currently selected city)

    Selecting a city makes it the one the background refresh follows.
    """
    state = current_app.config['DASHBOARD_STATE']

    city_key = request.args.get('city')
    city = get_city(city_key) if city_key else state.selected_city
    if city is None:
        return jsonify({'error': f'Unknown city: {city_key}'}), 404

    view, committed = load_weather(state, current_app.config['WEATHER_CLIENT'], city)
    if not view.ok:
        return jsonify({'error': view.error, 'city': city.to_dict()}), 502

    try:
        conditions = current_conditions(view.data)
    except (KeyError, TypeError) as e:
        logger.error(f'Malformed weather response for {city.key}: {e}')
        return jsonify({'error': 'Weather response incomplete', 'city': city.to_dict()}), 502

    return jsonify({
        'city': city.to_dict(),
        'current': conditions,
        'current_view': committed,
        'timestamp': datetime.now(timezone.utc).isoformat(),
    })


@weather_bp.route('/cities', methods=['GET'])
def list_cities():
    """List the city catalogue in selector order."""
    state = current_app.config['DASHBOARD_STATE']
    return jsonify({
        'cities': [c.to_dict() for c in EUROPEAN_CITIES.values()],
        'selected': state.selected_city.key,
    })


@weather_bp.route('/location', methods=['GET'])
def get_location():
    """
    Detect the observer location from the server's public IP.

    Falls back to the default city when detection fails.
    """
    location = detect_location(current_app.config['WEATHER_CLIENT'])
    return jsonify({
        'location': {
            'latitude': location.latitude,
            'longitude': location.longitude,
        },
        'label': location.label,
        'source': 'ip' if location.detected else 'default',
    })
