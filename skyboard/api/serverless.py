"""
Serverless flight function.

Standalone WSGI app exposing GET /api/flights with the same 10-record
response as the local proxy, without writing a snapshot file. Deploy
with any WSGI host, e.g. `gunicorn skyboard.api.serverless:app`.
"""

import logging
from typing import Optional

import requests
from flask import Flask, jsonify

from skyboard.api.flights import FETCH_ERROR, first_flights
from skyboard.config import config
from skyboard.ingestion.opensky_client import OpenSkyClient

logger = logging.getLogger(__name__)


def create_serverless_app(client: Optional[OpenSkyClient] = None) -> Flask:
    """Build the single-route app. A client can be injected for testing."""
    app = Flask(__name__)
    app.config['OPENSKY_CLIENT'] = client or OpenSkyClient.from_config()

    @app.route('/api/flights', methods=['GET'])
    def handler():
        try:
            records = first_flights(app.config['OPENSKY_CLIENT'], config.snapshot.size)
        except (requests.RequestException, ValueError) as e:
            logger.error(f'Serverless flight fetch failed: {e}')
            return jsonify({'error': FETCH_ERROR}), 500
        return jsonify(records), 200

    return app


app = create_serverless_app()
