"""
Flight data API endpoint.

GET /api/flights (and anything under that prefix) returns
    {"flights": [FlightRecord, ...]}
with the simulated flight always last. This endpoint always answers 200;
upstream failures only shrink the list.
"""

import logging

from flask import Response, jsonify

from ncflights.services import ArrivalsService

logger = logging.getLogger(__name__)


def list_flights(arrivals_service: ArrivalsService) -> Response:
    """List real arrivals into the target airport plus the simulated flight."""
    flights = arrivals_service.fetch_arrivals()

    logger.debug(f'Returning {len(flights)} flights')

    return jsonify({
        'flights': [f.to_dict() for f in flights],
    })
