"""
SkyBoard Package.

Flight and weather dashboard built with Flask, requests, and Jinja2.

Modules:
    api/         Dashboard views, flight proxy/snapshot, weather and status endpoints
    flights/     Flight filters, airline lookup, and table rendering
    weather/     City catalogue, weather code lookup, and widget rendering
    ingestion/   OpenSky client, fetch-and-commit loaders, weather refresh loop
    services/    Open-Meteo client and IP location detection
    state.py     Token-guarded dashboard state shared across requests
    snapshot.py  Atomic on-disk flight snapshot for the proxy endpoint
    config.py    Centralized configuration from environment variables
"""

__version__ = '1.0.0'
