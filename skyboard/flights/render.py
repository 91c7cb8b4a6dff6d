"""
HTML table rendering for flight lists.

Templates are rendered with Jinja2 autoescaping so callsigns and country
names from the API can never inject markup.
"""

from typing import Optional, Sequence

from jinja2 import Environment

from skyboard.flights.airlines import get_airline_name
from skyboard.ingestion.opensky_client import StateVector

NO_FLIGHTS_MESSAGE = '<p>No flights found.</p>'

_env = Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True)

FLIGHTS_TABLE_TEMPLATE = _env.from_string(
    '<table><thead><tr>'
    '<th>Airline</th><th>Callsign</th><th>From</th>'
    '{% if show_status %}<th>Status</th>{% endif %}'
    '</tr></thead><tbody>'
    '{% for row in rows %}'
    '<tr><td>{{ row.airline }}</td><td>{{ row.callsign }}</td><td>{{ row.origin }}</td>'
    '{% if show_status %}<td>{{ row.status }}</td>{% endif %}</tr>'
    '{% endfor %}'
    '</tbody></table>'
)


def flight_status(state: StateVector) -> str:
    return 'On Ground' if state.on_ground else 'In Air'


def flight_row(state: StateVector) -> dict:
    """Display values for one table row."""
    return {
        'airline': get_airline_name(state.callsign),
        'callsign': state.callsign or 'N/A',
        'origin': state.origin_country or 'N/A',
        'status': flight_status(state),
    }


def render_flights_table(
    states: Sequence[StateVector],
    limit: Optional[int] = None,
    show_status: bool = False,
) -> str:
    """
    Render flights as an HTML table, one row per record in input order.

    Args:
        states: Filtered flight list (not modified)
        limit: Maximum rows to display, or None for all
        show_status: Add the On Ground / In Air column

    Returns:
        Table markup, or the fixed no-flights message for an empty list.
    """
    if not states:
        return NO_FLIGHTS_MESSAGE

    shown = states[:limit] if limit is not None else states
    return FLIGHTS_TABLE_TEMPLATE.render(
        rows=[flight_row(s) for s in shown],
        show_status=show_status,
    )
