"""Simulated Bluff City flight, appended to every flight list."""

from datetime import datetime, timedelta, timezone
from typing import Optional

from ncflights.models import FlightRecord

SIMULATED_ID = 'SIM-BLUFF-001'
SIMULATED_STATUS = 'SIMULATED'
SIMULATED_ORIGIN_CODE = 'NIH'
SIMULATED_NOTE = 'SIMULATED ENTRY - FOR DEMO/TESTING ONLY. NOT REAL FLIGHT DATA.'
SIMULATED_ARRIVAL_OFFSET = timedelta(hours=2)


def format_timestamp(moment: datetime) -> str:
    """Format as UTC ISO-8601 with milliseconds and a Z suffix."""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def get_simulated_flight(now: Optional[datetime] = None) -> FlightRecord:
    """
    Build the simulated flight.

    The scheduled time is recomputed on every call as now + 2 hours,
    so two requests may see slightly different timestamps.
    """
    now = now or datetime.now(timezone.utc)
    return FlightRecord(
        id=SIMULATED_ID,
        airline='Bluff City Air (SIMULATED)',
        flight_number='BC999',
        origin='Bluff City Airport (NIH) - SIMULATED - NOT REAL',
        origin_code=SIMULATED_ORIGIN_CODE,
        scheduled=format_timestamp(now + SIMULATED_ARRIVAL_OFFSET),
        status=SIMULATED_STATUS,
        note=SIMULATED_NOTE,
    )
