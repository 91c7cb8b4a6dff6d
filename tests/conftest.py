"""Shared fixtures: canned API payloads and mocked HTTP sessions."""

import json
from unittest import mock

import pytest
import requests

from skyboard.app import create_app
from skyboard.ingestion.opensky_client import OpenSkyClient
from skyboard.services.weather_client import OpenMeteoClient

# 2024-03-15T00:00:00Z
DAY = '2024-03-15'
MIDNIGHT = 1710460800


def make_state(
    icao24='3c6444',
    callsign='DLH4AB  ',
    origin_country='Germany',
    last_contact=MIDNIGHT + 3600,
    on_ground=False,
    destination=None,
):
    """Raw OpenSky state vector array."""
    return [
        icao24, callsign, origin_country, last_contact, last_contact,
        8.57, 50.03, 10668.0, on_ground, 231.5, 87.2, 0.0,
        destination, 10820.4, '1000', False, 0,
    ]


def make_response(payload=None, status=200, body=None):
    """Real requests.Response with a canned body."""
    response = requests.Response()
    response.status_code = status
    response.url = 'https://example.test/'
    if body is None:
        body = json.dumps(payload)
    response._content = body.encode('utf-8')
    return response


SAMPLE_STATES = [
    make_state(icao24=f'a0{i:04d}', callsign=f'BAW{100 + i}', origin_country='United Kingdom')
    for i in range(12)
]

WEATHER_PAYLOAD = {
    'latitude': 51.5,
    'longitude': -0.12,
    'current': {
        'time': '2024-03-15T12:00',
        'temperature_2m': 12.5,
        'relative_humidity_2m': 81,
        'apparent_temperature': 10.4,
        'weather_code': 3,
        'wind_speed_10m': 7.6,
        'wind_direction_10m': 200,
    },
    'hourly': {'time': [], 'temperature_2m': [], 'weather_code': []},
    'daily': {'time': [], 'temperature_2m_max': [], 'temperature_2m_min': [], 'weather_code': []},
}


@pytest.fixture
def opensky_session():
    session = mock.Mock(spec=requests.Session)
    session.get.return_value = make_response({'time': MIDNIGHT + 7200, 'states': SAMPLE_STATES})
    return session


@pytest.fixture
def opensky_client(opensky_session):
    return OpenSkyClient(session=opensky_session)


@pytest.fixture
def weather_session():
    session = mock.Mock(spec=requests.Session)
    session.get.return_value = make_response(WEATHER_PAYLOAD)
    return session


@pytest.fixture
def weather_client(weather_session):
    return OpenMeteoClient(session=weather_session)


@pytest.fixture
def snapshot_path(tmp_path):
    return tmp_path / 'flights_temp.json'


@pytest.fixture
def app(opensky_client, weather_client, snapshot_path):
    app = create_app(
        start_refresher=False,
        opensky_client=opensky_client,
        weather_client=weather_client,
        snapshot_path=str(snapshot_path),
    )
    app.config['TESTING'] = True
    return app


@pytest.fixture
def http(app):
    return app.test_client()
