"""
Data models for NC Flights.

Plain frozen dataclasses; nothing is persisted.
"""

from ncflights.models.flight import FlightRecord, TARGET_AIRPORT_CODE, TARGET_AIRPORT_NAME

__all__ = ['FlightRecord', 'TARGET_AIRPORT_CODE', 'TARGET_AIRPORT_NAME']
