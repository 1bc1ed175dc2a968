"""
Arrivals service - aggregates real and simulated flights.

Fetches arrivals into the target airport from AeroAPI, reshapes each one
into a FlightRecord and appends the simulated Bluff City flight.

The public entry point never raises. Upstream problems (missing
configuration, HTTP errors, bad JSON) are logged and degrade to an empty
list of real flights, so clients always get at least the simulated entry.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Mapping, Optional, Sequence, Tuple

import requests

from ncflights.config import AeroApiConfig
from ncflights.models import FlightRecord, TARGET_AIRPORT_CODE
from ncflights.services.aeroapi_client import AeroApiClient
from ncflights.services.simulated import get_simulated_flight

logger = logging.getLogger(__name__)

KeyPath = Tuple[str, ...]

# Ordered lookups per field; the first non-empty value wins
ID_PATHS: Sequence[KeyPath] = (('ident',),)
AIRLINE_PATHS: Sequence[KeyPath] = (('operator',), ('airline',))
FLIGHT_NUMBER_PATHS: Sequence[KeyPath] = (('ident',), ('ident_iata',))
ORIGIN_PATHS: Sequence[KeyPath] = (
    ('origin', 'airport_name'),
    ('origin', 'name'),
)
ORIGIN_CODE_PATHS: Sequence[KeyPath] = (
    ('origin', 'code_iata'),
    ('origin', 'code_icao'),
    ('origin', 'code'),
)
SCHEDULED_PATHS: Sequence[KeyPath] = (
    ('scheduled_in',),
    ('estimated_in',),
    ('scheduled_on',),
)
STATUS_PATHS: Sequence[KeyPath] = (('status',),)


@dataclass(frozen=True)
class ArrivalsResult:
    """
    Outcome of one upstream fetch.

    Always success-shaped: flights is empty when anything went wrong and
    error describes the problem for logging only.
    """
    flights: Tuple[FlightRecord, ...] = ()
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _lookup(record: Mapping[str, Any], path: KeyPath) -> Any:
    """Walk nested objects along path, or None if any step is missing."""
    value: Any = record
    for key in path:
        if not isinstance(value, Mapping):
            return None
        value = value.get(key)
    return value


def first_present(record: Mapping[str, Any], paths: Sequence[KeyPath], default: str) -> str:
    """Return the first non-empty value found along paths, else default."""
    for path in paths:
        value = _lookup(record, path)
        if value:
            return str(value)
    return default


def normalize_arrival(raw: Mapping[str, Any], index: int) -> FlightRecord:
    """
    Map one AeroAPI arrival into a FlightRecord.

    These are arrivals into the target airport, so origin comes from the
    upstream origin object and destination is always the target.
    """
    return FlightRecord(
        id=first_present(raw, ID_PATHS, f'REAL-{index}'),
        airline=first_present(raw, AIRLINE_PATHS, 'Unknown Airline'),
        flight_number=first_present(raw, FLIGHT_NUMBER_PATHS, 'N/A'),
        origin=first_present(raw, ORIGIN_PATHS, 'Unknown'),
        origin_code=first_present(raw, ORIGIN_CODE_PATHS, '??'),
        scheduled=first_present(raw, SCHEDULED_PATHS, ''),
        status=first_present(raw, STATUS_PATHS, 'Scheduled'),
    )


def extract_arrivals(data: Any) -> List[Mapping[str, Any]]:
    """Pull the arrivals list out of a flight board response."""
    arrivals = data.get('arrivals') if isinstance(data, Mapping) else None
    if not isinstance(arrivals, list):
        return []

    valid = []
    for i, item in enumerate(arrivals):
        if isinstance(item, Mapping):
            valid.append(item)
        else:
            logger.debug(f'Skipping malformed arrival at index {i}: {item!r}')
    return valid


class ArrivalsService:
    """
    Flight aggregator for the target airport.

    Holds no mutable state; concurrent requests each make their own
    upstream call.
    """

    def __init__(
        self,
        aeroapi: AeroApiConfig,
        client: Optional[AeroApiClient] = None,
        airport_code: str = TARGET_AIRPORT_CODE,
    ):
        self.airport_code = airport_code
        self.client = client
        if self.client is None and aeroapi.is_configured:
            self.client = AeroApiClient.from_config(aeroapi)

        if self.client is None:
            logger.warning('COLLINS_BASE_URL or COLLINS_API_KEY not configured - real flight lookups disabled')

    def fetch_real_arrivals(self) -> ArrivalsResult:
        """Fetch and normalize real arrivals. Never raises."""
        if self.client is None:
            logger.error('Missing COLLINS_BASE_URL or COLLINS_API_KEY')
            return ArrivalsResult(error='AeroAPI not configured')

        try:
            data = self.client.get_airport_flights(self.airport_code)
        except requests.RequestException as e:
            logger.error(f'FlightAware fetch failed: {e}')
            return ArrivalsResult(error=str(e) or type(e).__name__)
        except ValueError as e:
            logger.error(f'FlightAware returned invalid JSON: {e}')
            return ArrivalsResult(error=f'invalid JSON: {e}')

        arrivals = extract_arrivals(data)
        logger.info(f'Got {len(arrivals)} real arrivals from AeroAPI')

        return ArrivalsResult(
            flights=tuple(normalize_arrival(raw, i) for i, raw in enumerate(arrivals)),
        )

    def fetch_arrivals(self, now: Optional[datetime] = None) -> List[FlightRecord]:
        """
        Get real arrivals followed by the simulated flight.

        The simulated flight is always present and always last, even when
        no real flights could be fetched.
        """
        result = self.fetch_real_arrivals()
        if not result.ok:
            logger.debug(f'Serving simulated flight only ({result.error})')

        flights = list(result.flights)
        flights.append(get_simulated_flight(now))
        return flights
