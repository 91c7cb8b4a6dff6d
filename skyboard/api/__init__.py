"""
API module for SkyBoard.

Provides:
- Dashboard HTML views
- Flight proxy/snapshot and search endpoints
- Weather endpoints
- System status
"""

from skyboard.api.dashboard import dashboard_bp
from skyboard.api.flights import flights_bp
from skyboard.api.metrics import metrics_bp
from skyboard.api.weather import weather_bp

__all__ = ['dashboard_bp', 'flights_bp', 'metrics_bp', 'weather_bp']
