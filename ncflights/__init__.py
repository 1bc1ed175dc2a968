"""
NC Flights Backend Package.

Arrivals board for Charlotte Douglas Intl (KCLT) built with Flask and
requests. Real arrivals come from FlightAware AeroAPI; one clearly labelled
simulated flight is always appended.

Modules:
    api/         JSON endpoint for the flight list
    models/      FlightRecord dataclass
    services/    AeroAPI client, arrivals aggregation, simulated flight
    router.py    Path prefix routing
    frontend.py  Static HTML page serving
    config.py    Immutable configuration from environment variables
"""

__version__ = '1.0.0'
