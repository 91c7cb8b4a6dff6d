import pytest
import requests

from skyboard.ingestion.opensky_client import (
    FLIGHT_LOAD_ERROR,
    OpenSkyClient,
    StateVector,
    fetch_flights,
    parse_states,
)

from conftest import MIDNIGHT, SAMPLE_STATES, make_response, make_state


class TestStateVector:
    def test_from_array_names_fields(self):
        sv = StateVector.from_array(make_state(icao24='3C6444', on_ground=True))

        assert sv.icao24 == '3c6444'
        assert sv.callsign == 'DLH4AB'
        assert sv.origin_country == 'Germany'
        assert sv.last_contact == MIDNIGHT + 3600
        assert sv.on_ground is True
        assert sv.destination is None

    def test_blank_callsign_becomes_none(self):
        assert StateVector.from_array(make_state(callsign='        ')).callsign is None
        assert StateVector.from_array(make_state(callsign=None)).callsign is None

    def test_destination_only_from_string(self):
        assert StateVector.from_array(make_state(destination='eddf ')).destination == 'EDDF'
        # Regular OpenSky feeds carry a sensor id list at this position
        assert StateVector.from_array(make_state(destination=[1234])).destination is None

    def test_short_array_is_padded(self):
        sv = StateVector.from_array(['4b1805', 'SWR12', 'Switzerland'])

        assert sv.callsign == 'SWR12'
        assert sv.last_contact is None
        assert sv.on_ground is False

    def test_rejects_missing_icao24(self):
        assert StateVector.from_array([]) is None
        assert StateVector.from_array(None) is None
        assert StateVector.from_array(make_state(icao24=None)) is None

    def test_parse_states_keeps_order_and_drops_junk(self):
        raw = [make_state(icao24='bbb'), None, make_state(icao24=''), make_state(icao24='aaa')]

        assert [s.icao24 for s in parse_states(raw)] == ['bbb', 'aaa']


class TestOpenSkyClient:
    def test_get_states(self, opensky_client, opensky_session):
        api_time, states = opensky_client.get_states()

        assert api_time == MIDNIGHT + 7200
        assert [s.callsign for s in states] == [s[1] for s in SAMPLE_STATES]
        url = opensky_session.get.call_args[0][0]
        assert url == 'https://opensky-network.org/api/states/all'

    def test_null_states_is_empty(self, opensky_client, opensky_session):
        opensky_session.get.return_value = make_response({'time': 1, 'states': None})

        assert opensky_client.get_states() == (1, [])

    def test_get_raw_states_returns_arrays_untouched(self, opensky_client):
        _, raw = opensky_client.get_raw_states()

        assert raw == SAMPLE_STATES

    def test_cors_proxy_prefix(self):
        client = OpenSkyClient(cors_proxy='https://corsproxy.io/?')

        assert client.states_url == (
            'https://corsproxy.io/?https%3A%2F%2Fopensky-network.org%2Fapi%2Fstates%2Fall'
        )

    def test_http_error_raises(self, opensky_client, opensky_session):
        opensky_session.get.return_value = make_response({}, status=503)

        with pytest.raises(requests.HTTPError) as excinfo:
            opensky_client.get_states()

        assert excinfo.value.response.status_code == 503


class TestFetchFlights:
    def test_success(self, opensky_client):
        states, error = fetch_flights(opensky_client)

        assert len(states) == len(SAMPLE_STATES)
        assert error is None

    def test_http_error_degrades_to_empty(self, opensky_client, opensky_session):
        opensky_session.get.return_value = make_response({}, status=500)

        assert fetch_flights(opensky_client) == ([], FLIGHT_LOAD_ERROR)

    def test_network_error_degrades_to_empty(self, opensky_client, opensky_session):
        opensky_session.get.side_effect = requests.ConnectionError('connection refused')

        assert fetch_flights(opensky_client) == ([], FLIGHT_LOAD_ERROR)

    def test_bad_json_degrades_to_empty(self, opensky_client, opensky_session):
        opensky_session.get.return_value = make_response(body='<html>rate limited</html>')

        assert fetch_flights(opensky_client) == ([], FLIGHT_LOAD_ERROR)

    @pytest.mark.parametrize('body', ['null', '[]', '"ok"'])
    def test_non_object_body_degrades_to_empty(self, opensky_client, opensky_session, body):
        opensky_session.get.return_value = make_response(body=body)

        assert fetch_flights(opensky_client) == ([], FLIGHT_LOAD_ERROR)
