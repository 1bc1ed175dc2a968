"""
Flight record model.

FlightRecord is the single entity served by the API. It is built fresh on
every request (from upstream arrivals or the simulated entry) and never
mutated afterwards.
"""

from dataclasses import dataclass

# Every record returned by the service lands at this airport
TARGET_AIRPORT_CODE = 'KCLT'
TARGET_AIRPORT_NAME = 'Charlotte Douglas Intl (KCLT)'


@dataclass(frozen=True)
class FlightRecord:
    """One arrival into the target airport, as shown by the frontend."""
    id: str
    airline: str
    flight_number: str
    origin: str
    origin_code: str
    scheduled: str  # ISO-8601, or empty when upstream has no time
    status: str
    destination: str = TARGET_AIRPORT_NAME
    destination_code: str = TARGET_AIRPORT_CODE
    note: str = ''  # empty for real flights

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict for API responses."""
        return {
            'id': self.id,
            'airline': self.airline,
            'flightNumber': self.flight_number,
            'origin': self.origin,
            'originCode': self.origin_code,
            'destination': self.destination,
            'destinationCode': self.destination_code,
            'scheduled': self.scheduled,
            'status': self.status,
            'note': self.note,
        }
