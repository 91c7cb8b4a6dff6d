"""Airline lookup by ICAO callsign prefix."""

from types import MappingProxyType
from typing import Optional

# ICAO airline designator to display name
AIRLINE_CODES = MappingProxyType({
    'DLH': 'Lufthansa',
    'BAW': 'British Airways',
    'AFR': 'Air France',
    'KLM': 'KLM',
    'AAL': 'American Airlines',
    'UAL': 'United Airlines',
    'SWR': 'Swiss',
    'RYR': 'Ryanair',
    'EZY': 'easyJet',
    'WZZ': 'Wizz Air',
    'SAS': 'Scandinavian Airlines',
    'TAP': 'TAP Air Portugal',
    'IBE': 'Iberia',
    'QTR': 'Qatar Airways',
    'THY': 'Turkish Airlines',
    'DLR': 'German Aerospace Center',
})


def get_airline_name(callsign: Optional[str]) -> str:
    """
    Get airline name from callsign.

    Callsigns are typically formatted as ICAO designator + flight number,
    e.g. DLH4AB -> Lufthansa. Unknown designators are returned uppercased.
    """
    if not callsign:
        return 'Unknown'
    code = callsign[:3].upper()
    return AIRLINE_CODES.get(code, code)
