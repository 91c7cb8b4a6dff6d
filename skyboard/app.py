"""
SkyBoard Flask Application.

Main entry point for the web application. Initializes:
- Dashboard state and API clients
- Weather refresh loop
- Dashboard views and API routes

Usage:
    python -m skyboard.app

Or with gunicorn:
    gunicorn "skyboard.app:create_app()"
"""

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from skyboard.config import config
from skyboard.api import dashboard_bp, flights_bp, metrics_bp, weather_bp
from skyboard.ingestion import OpenSkyClient
from skyboard.ingestion.weather_refresher import WeatherRefresher
from skyboard.services.weather_client import OpenMeteoClient
from skyboard.snapshot import SnapshotStore
from skyboard.state import DashboardState
from skyboard.weather import default_city

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)
logger = logging.getLogger(__name__)


def create_app(
    start_refresher: bool = True,
    opensky_client: Optional[OpenSkyClient] = None,
    weather_client: Optional[OpenMeteoClient] = None,
    snapshot_path: Optional[str] = None,
) -> Flask:
    """
    Application factory for Flask.

    Args:
        start_refresher: Whether to start the background weather refresh.
                         Set to False for testing.
        opensky_client: Flight API client (created from config if None)
        weather_client: Weather API client (created from config if None)
        snapshot_path: Proxy snapshot file (config default if None)

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Configuration
    app.config['SECRET_KEY'] = config.secret_key

    # Enable CORS for API endpoints
    CORS(app, resources={r'/api/*': {'origins': '*'}})

    state = DashboardState(default_city())
    app.config['DASHBOARD_STATE'] = state
    app.config['OPENSKY_CLIENT'] = opensky_client or OpenSkyClient.from_config()
    app.config['WEATHER_CLIENT'] = weather_client or OpenMeteoClient.from_config()
    app.config['SNAPSHOT_STORE'] = SnapshotStore(snapshot_path or config.snapshot.path)
    app.config['SNAPSHOT_SIZE'] = config.snapshot.size

    # Register blueprints
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(flights_bp)
    app.register_blueprint(weather_bp)
    app.register_blueprint(metrics_bp)

    refresher = WeatherRefresher(state, client=app.config['WEATHER_CLIENT'])
    app.config['WEATHER_REFRESHER'] = refresher
    if start_refresher:
        refresher.start_background()
        logger.info(f'Weather refresh every {config.weather.refresh_minutes} minutes for {state.selected_city.name}')

    @app.route('/health')
    def health():
        """Simple health check endpoint."""
        return {'status': 'ok'}

    # -------------------------------------------------------------------------
    # Error handlers
    # -------------------------------------------------------------------------

    @app.errorhandler(404)
    def not_found(e):
        return {'error': 'Not found'}, 404

    @app.errorhandler(500)
    def server_error(e):
        logger.error(f'Server error: {e}')
        return {'error': 'Internal server error'}, 500

    return app


def run_development_server():
    """Run the development server."""
    app = create_app()

    port = config.port

    logger.info(f'Starting SkyBoard on http://localhost:{port}')
    logger.info(f'Snapshot endpoint: http://localhost:{port}/api/flights/temp')

    app.run(
        host='0.0.0.0',
        port=port,
        debug=config.debug,
        use_reloader=False,  # Disable reloader to prevent duplicate refresher threads
    )


if __name__ == '__main__':
    run_development_server()
