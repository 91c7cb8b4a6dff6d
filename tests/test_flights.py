from datetime import datetime, timezone

import pytest

from skyboard.flights import (
    NO_FLIGHTS_MESSAGE,
    filter_by_date,
    filter_by_destination,
    get_airline_name,
    render_flights_table,
    today_utc_midnight,
    unique_destinations,
    utc_midnight,
)
from skyboard.ingestion.opensky_client import StateVector

from conftest import DAY, MIDNIGHT, make_state

NOW = datetime(2024, 3, 15, 12, 30, tzinfo=timezone.utc)
YESTERDAY = MIDNIGHT - 3600


def sv(**kwargs):
    return StateVector.from_array(make_state(**kwargs))


class TestAirlineResolver:
    @pytest.mark.parametrize('callsign, expected', [
        ('DLH4AB', 'Lufthansa'),
        ('dlh4ab', 'Lufthansa'),
        ('BaW12', 'British Airways'),
        ('EZY81QP', 'easyJet'),
        ('RYR', 'Ryanair'),
    ])
    def test_known_prefix(self, callsign, expected):
        assert get_airline_name(callsign) == expected

    @pytest.mark.parametrize('callsign, expected', [
        ('xyz123', 'XYZ'),
        ('N172SP', 'N17'),
        ('ab', 'AB'),
    ])
    def test_unknown_prefix_passes_through(self, callsign, expected):
        assert get_airline_name(callsign) == expected

    @pytest.mark.parametrize('callsign', ['', None])
    def test_empty(self, callsign):
        assert get_airline_name(callsign) == 'Unknown'


class TestDateFilter:
    def test_utc_midnight(self):
        assert utc_midnight(DAY) == MIDNIGHT
        assert utc_midnight('1970-01-01') == 0

    def test_invalid_date(self):
        with pytest.raises(ValueError):
            utc_midnight('15/03/2024')
        with pytest.raises(ValueError):
            utc_midnight('2024-02-30')

    def test_day_boundaries(self):
        states = [
            sv(icao24='before', last_contact=MIDNIGHT - 1),
            sv(icao24='start', last_contact=MIDNIGHT),
            sv(icao24='end', last_contact=MIDNIGHT + 86399),
            sv(icao24='after', last_contact=MIDNIGHT + 86400),
        ]

        assert [s.icao24 for s in filter_by_date(states, DAY)] == ['start', 'end']

    def test_missing_timestamp_excluded(self):
        states = [sv(icao24='none', last_contact=None), sv(icao24='zero', last_contact=0)]

        assert filter_by_date(states, '1970-01-01') == []

    def test_does_not_mutate_input(self):
        states = [sv(icao24='b'), sv(icao24='a', last_contact=1)]
        before = list(states)

        result = filter_by_date(states, DAY)

        assert states == before
        assert result is not states


class TestDestinationFilter:
    def test_today_midnight(self):
        assert today_utc_midnight(NOW) == MIDNIGHT
        assert today_utc_midnight(NOW.replace(tzinfo=None)) == MIDNIGHT

    def test_matches_destination_and_today(self):
        states = [
            sv(icao24='fra-today', destination='EDDF', last_contact=MIDNIGHT + 60),
            sv(icao24='lhr-today', destination='EGLL', last_contact=MIDNIGHT + 60),
            sv(icao24='none-today', destination='', last_contact=MIDNIGHT + 60),
            sv(icao24='fra-yesterday', destination='EDDF', last_contact=YESTERDAY),
            sv(icao24='lhr-yesterday', destination='EGLL', last_contact=YESTERDAY),
        ]

        assert [s.icao24 for s in filter_by_destination(states, 'EDDF', now=NOW)] == ['fra-today']
        assert [s.icao24 for s in filter_by_destination(states, 'EGLL', now=NOW)] == ['lhr-today']
        assert filter_by_destination(states, '', now=NOW) == []

    def test_keeps_api_order(self):
        states = [
            sv(icao24=f'x{i}', destination='EDDF', last_contact=MIDNIGHT + 100 - i)
            for i in range(5)
        ]

        result = filter_by_destination(states, 'EDDF', now=NOW)

        assert [s.icao24 for s in result] == ['x0', 'x1', 'x2', 'x3', 'x4']

    def test_unique_destinations(self):
        states = [
            sv(destination='EGLL', last_contact=MIDNIGHT + 1),
            sv(destination='EDDF', last_contact=MIDNIGHT + 2),
            sv(destination='EGLL', last_contact=MIDNIGHT + 3),
            sv(destination='LFPG', last_contact=YESTERDAY),
            sv(destination=None, last_contact=MIDNIGHT + 4),
        ]

        assert unique_destinations(states, now=NOW) == ['EDDF', 'EGLL']


class TestFlightRenderer:
    def test_empty(self):
        assert render_flights_table([]) == NO_FLIGHTS_MESSAGE
        assert render_flights_table([], limit=10, show_status=True) == NO_FLIGHTS_MESSAGE

    def test_one_row_per_record_in_order(self):
        states = [sv(icao24=f'a{i}', callsign=f'DLH{i}') for i in range(3)]

        html = render_flights_table(states)

        assert html.count('<tr><td>') == 3
        assert html.index('DLH0') < html.index('DLH1') < html.index('DLH2')
        assert '<th>Status</th>' not in html
        assert '<td>Lufthansa</td><td>DLH0</td><td>Germany</td>' in html

    def test_limit_caps_rows(self):
        states = [sv(icao24=f'a{i}', callsign=f'SWR{i}') for i in range(25)]

        html = render_flights_table(states, limit=10)

        assert html.count('<tr><td>') == 10
        assert 'SWR9<' in html
        assert 'SWR10' not in html
        assert len(states) == 25

    def test_status_column(self):
        states = [sv(icao24='g', on_ground=True), sv(icao24='a', on_ground=False)]

        html = render_flights_table(states, show_status=True)

        assert '<th>Status</th>' in html
        assert html.index('On Ground') < html.index('In Air')

    def test_missing_values(self):
        html = render_flights_table([sv(callsign=None, origin_country=None)])

        assert '<td>Unknown</td><td>N/A</td><td>N/A</td>' in html

    def test_escapes_api_text(self):
        html = render_flights_table([sv(callsign='<b>x', origin_country='A&B')])

        assert '<b>' not in html
        assert '&lt;b&gt;x' in html
        assert 'A&amp;B' in html
