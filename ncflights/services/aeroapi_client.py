"""
FlightAware AeroAPI client.

Handles communication with the AeroAPI REST endpoint:
- API key authentication via the x-apikey header
- Airport flight board queries (arrivals and departures)
- Error logging; errors are raised to the caller

Only GET /airports/{code}/flights is used. Its response looks like:
    {"arrivals": [...], "departures": [...], ...}
"""

import logging
from typing import Any, Optional

import requests

from ncflights.config import AeroApiConfig

logger = logging.getLogger(__name__)


class AeroApiClient:
    """
    Client for the FlightAware AeroAPI.

    One instance is shared by all requests; the underlying
    requests.Session only pools connections and holds no per-call state.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.headers = {
            'x-apikey': api_key,
            'Accept': 'application/json',
        }

    @classmethod
    def from_config(
        cls,
        aeroapi: AeroApiConfig,
        session: Optional[requests.Session] = None,
    ) -> 'AeroApiClient':
        """Create client from application configuration."""
        return cls(
            base_url=aeroapi.base_url,
            api_key=aeroapi.api_key,
            timeout=aeroapi.timeout_seconds,
            session=session,
        )

    def get_airport_flights(self, airport_code: str) -> Any:
        """
        Fetch the flight board for an airport.

        Args:
            airport_code: ICAO or IATA airport code, e.g. KCLT

        Returns:
            Decoded JSON body.

        Raises:
            requests.RequestException on network/HTTP errors
            ValueError if the body is not valid JSON
        """
        url = f'{self.base_url}/airports/{airport_code}/flights'

        logger.info(f'Fetching real flights from: {url}')

        try:
            response = self.session.get(url, headers=self.headers, timeout=self.timeout)
            response.raise_for_status()
            # raise_for_status lets unfollowed 1xx/3xx replies through
            if not 200 <= response.status_code < 300:
                raise requests.HTTPError(
                    f'AeroAPI error {response.status_code}', response=response,
                )
        except requests.exceptions.Timeout:
            logger.error('AeroAPI timeout')
            raise
        except requests.exceptions.HTTPError as e:
            if e.response is not None and e.response.status_code == 429:
                logger.warning('AeroAPI rate limit exceeded')
            else:
                status = e.response.status_code if e.response is not None else 'unknown'
                logger.error(f'AeroAPI error {status}')
            raise
        except requests.exceptions.RequestException as e:
            logger.error(f'AeroAPI request failed: {e}')
            raise

        return response.json()
