"""
External integration services.

Handles the AeroAPI call and the reshaping of its arrivals, with graceful
degradation when the service is unavailable or not configured.
"""

from ncflights.services.aeroapi_client import AeroApiClient
from ncflights.services.arrivals import ArrivalsResult, ArrivalsService, normalize_arrival
from ncflights.services.simulated import get_simulated_flight

__all__ = [
    'AeroApiClient',
    'ArrivalsResult',
    'ArrivalsService',
    'get_simulated_flight',
    'normalize_arrival',
]
