"""
Configuration management for NC Flights.

Loads settings from environment variables (and a local .env file) once at
start-up. The resulting AppConfig is immutable and is handed to the
application factory and the services explicitly, so nothing re-reads the
environment while serving requests.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_PORT = 3000
DEFAULT_INDEX_PATH = Path(__file__).resolve().parent.parent / 'frontend' / 'index.html'


def _parse_timeout(value: Optional[str]) -> Optional[float]:
    """Parse an optional timeout in seconds, or None if empty/invalid."""
    if not value:
        return None
    try:
        timeout = float(value)
    except ValueError:
        return None
    return timeout if timeout > 0 else None


@dataclass(frozen=True)
class AeroApiConfig:
    """Upstream arrivals API (FlightAware AeroAPI) configuration."""
    base_url: Optional[str] = None
    api_key: Optional[str] = None
    # None leaves the transport default in place (no timeout)
    timeout_seconds: Optional[float] = None

    @property
    def is_configured(self) -> bool:
        return bool(self.base_url and self.api_key)


@dataclass(frozen=True)
class ServerConfig:
    """HTTP listener settings."""
    host: str = '0.0.0.0'
    port: int = DEFAULT_PORT


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration."""
    aeroapi: AeroApiConfig
    server: ServerConfig

    # Static page served on / and /index.html
    index_path: Path

    debug: bool


def load_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """
    Load all configuration from the environment.

    Args:
        environ: Mapping to read from instead of os.environ (used by tests).

    Returns:
        Frozen AppConfig instance.
    """
    env = os.environ if environ is None else environ

    base_url = env.get('COLLINS_BASE_URL') or None
    if base_url:
        base_url = base_url.rstrip('/')

    return AppConfig(
        aeroapi=AeroApiConfig(
            base_url=base_url,
            api_key=env.get('COLLINS_API_KEY') or None,
            timeout_seconds=_parse_timeout(env.get('AEROAPI_TIMEOUT_SECONDS')),
        ),
        server=ServerConfig(
            host=env.get('HOST') or '0.0.0.0',
            port=int(env.get('PORT') or DEFAULT_PORT),
        ),
        index_path=Path(env.get('INDEX_HTML_PATH') or DEFAULT_INDEX_PATH),
        debug=env.get('FLASK_DEBUG', '0') == '1',
    )
