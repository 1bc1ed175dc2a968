"""
API module for NC Flights.

Provides the JSON endpoint for arrivals into the target airport.
"""

from ncflights.api.flights import list_flights

__all__ = ['list_flights']
