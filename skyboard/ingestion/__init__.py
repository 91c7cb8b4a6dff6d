"""
Data ingestion module for SkyBoard.

Handles fetching from OpenSky and Open-Meteo and committing the results
into the dashboard state. The periodic weather refresh lives in
skyboard.ingestion.weather_refresher.
"""

from skyboard.ingestion.opensky_client import OpenSkyClient, StateVector, fetch_flights

__all__ = ['OpenSkyClient', 'StateVector', 'fetch_flights']
