"""
Dashboard views.

Server-rendered HTML for the dashboard page and the fragments it swaps in:
- GET / - Full page: flight search, destination selector, weather widget
- GET /flights - Flight table fragment (date, destination, or latest 10)
- GET /weather - Weather widget fragment for a city
"""

import logging

from flask import Blueprint, current_app, render_template_string, request
from markupsafe import Markup

from skyboard.flights import (
    filter_by_date,
    filter_by_destination,
    render_flights_table,
    unique_destinations,
    utc_midnight,
)
from skyboard.ingestion.loaders import load_flights, load_weather
from skyboard.weather import EUROPEAN_CITIES, get_city, render_weather, render_weather_error

logger = logging.getLogger(__name__)

dashboard_bp = Blueprint('dashboard', __name__)

# Rows shown when no filter is applied
LATEST_FLIGHTS_LIMIT = 10

DASHBOARD_TEMPLATE = '''<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <title>SkyBoard</title>
</head>
<body>
    <section id="flights">
        <form id="date-search" action="{{ url_for('dashboard.flights_fragment') }}" method="get">
            <input type="date" id="date-picker" name="date">
            <button type="submit" id="search-btn">Search</button>
        </form>
        <form id="destination-search" action="{{ url_for('dashboard.flights_fragment') }}" method="get">
            <select id="destination-dropdown" name="destination">
                {% for code in destinations %}
                <option value="{{ code }}">{{ code }}</option>
                {% endfor %}
            </select>
            <button type="submit">Search</button>
        </form>
        <div id="status">{{ flight_status or '' }}</div>
        <div id="results">{{ flights_html }}</div>
    </section>
    <section id="weather-widget">
        <div class="city-selector">
            <form action="{{ url_for('dashboard.weather_fragment') }}" method="get">
                <select id="city-dropdown" name="city">
                    {% for city in cities %}
                    <option value="{{ city.key }}"{% if city.key == selected_city.key %} selected{% endif %}>{{ city.name }}</option>
                    {% endfor %}
                </select>
                <button type="submit">Show</button>
            </form>
        </div>
        <div class="weather-content">{{ weather_html }}</div>
    </section>
</body>
</html>
'''


def _weather_html(view) -> Markup:
    if view is None or not view.ok:
        return Markup(render_weather_error())
    try:
        return Markup(render_weather(view.data, view.city.name))
    except (KeyError, TypeError) as e:
        logger.error(f'Malformed weather response for {view.city.key}: {e}')
        return Markup(render_weather_error())


@dashboard_bp.route('/')
def index():
    """Serve the dashboard, fetching flights and weather on every load."""
    state = current_app.config['DASHBOARD_STATE']

    flights, _ = load_flights(state, current_app.config['OPENSKY_CLIENT'])
    weather, _ = load_weather(state, current_app.config['WEATHER_CLIENT'])

    return render_template_string(
        DASHBOARD_TEMPLATE,
        flights_html=Markup(render_flights_table(
            flights.states, limit=LATEST_FLIGHTS_LIMIT, show_status=True,
        )),
        flight_status=flights.error,
        destinations=unique_destinations(flights.states),
        cities=list(EUROPEAN_CITIES.values()),
        selected_city=weather.city,
        weather_html=_weather_html(weather),
    )


@dashboard_bp.route('/flights')
def flights_fragment():
    """
    Fetch flights and render the results table.

    Query parameters:
    - date: YYYY-MM-DD, flights last seen that UTC day
    - destination: ICAO code, today's flights to that airport
    Without either, the first 10 flights are shown with their status.
    """
    date_str = request.args.get('date', '').strip()
    destination = request.args.get('destination', '').strip().upper()

    if date_str:
        try:
            # Validate before spending a fetch on a bad date
            utc_midnight(date_str)
        except ValueError:
            return '<p>Invalid date.</p>', 400

    snapshot, _ = load_flights(
        current_app.config['DASHBOARD_STATE'],
        current_app.config['OPENSKY_CLIENT'],
    )
    if snapshot.error:
        return f'<p>{snapshot.error}</p>', 502

    if date_str:
        return render_flights_table(filter_by_date(snapshot.states, date_str))
    if destination:
        return render_flights_table(filter_by_destination(snapshot.states, destination))
    return render_flights_table(snapshot.states, limit=LATEST_FLIGHTS_LIMIT, show_status=True)


@dashboard_bp.route('/weather')
def weather_fragment():
    """Load weather for the chosen city and render the widget."""
    state = current_app.config['DASHBOARD_STATE']

    city_key = request.args.get('city')
    city = get_city(city_key) if city_key else state.selected_city
    if city is None:
        return render_weather_error(f'Unknown city: {city_key}'), 404

    view, _ = load_weather(state, current_app.config['WEATHER_CLIENT'], city)
    return _weather_html(view)
