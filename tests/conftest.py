"""Pytest configuration and fixtures."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests

from ncflights.config import AeroApiConfig, AppConfig, ServerConfig
from ncflights.services import AeroApiClient, ArrivalsService

INDEX_HTML = '<!DOCTYPE html><html><body><h1>NC Flights</h1></body></html>'


def make_response(payload=None, status_code: int = 200, json_error: Exception = None) -> MagicMock:
    """Fake requests.Response returning payload from .json()."""
    response = MagicMock()
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f'{status_code} Error', response=response,
        )
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def index_file(tmp_path: Path) -> Path:
    path = tmp_path / 'index.html'
    path.write_text(INDEX_HTML, encoding='utf-8')
    return path


@pytest.fixture
def aeroapi_config() -> AeroApiConfig:
    return AeroApiConfig(base_url='https://aero.example.com/aeroapi', api_key='test-key')


@pytest.fixture
def app_config(aeroapi_config: AeroApiConfig, index_file: Path) -> AppConfig:
    return AppConfig(
        aeroapi=aeroapi_config,
        server=ServerConfig(),
        index_path=index_file,
        debug=False,
    )


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture
def arrivals_service(aeroapi_config: AeroApiConfig, session: MagicMock) -> ArrivalsService:
    client = AeroApiClient.from_config(aeroapi_config, session=session)
    return ArrivalsService(aeroapi_config, client=client)
