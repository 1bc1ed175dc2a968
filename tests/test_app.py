"""End-to-end tests through the Flask test client."""

import json
from unittest.mock import MagicMock

import pytest

from ncflights.app import create_app
from ncflights.config import AeroApiConfig
from ncflights.services import ArrivalsService

from conftest import INDEX_HTML, make_response

FLIGHT_FIELDS = {
    'id', 'airline', 'flightNumber', 'origin', 'originCode',
    'destination', 'destinationCode', 'scheduled', 'status', 'note',
}


@pytest.fixture
def client(app_config, arrivals_service):
    app = create_app(app_config, arrivals_service=arrivals_service)
    app.config['TESTING'] = True
    return app.test_client()


class TestIndex:

    # The query string is not part of the routed path
    @pytest.mark.parametrize('path', ['/', '/?x=1', '/index.html', '/index.html?v=2'])
    def test_serves_static_page(self, client, path):
        response = client.get(path)

        assert response.status_code == 200
        assert response.mimetype == 'text/html'
        assert response.get_data(as_text=True) == INDEX_HTML

    def test_reads_file_on_every_request(self, client, index_file):
        client.get('/')
        index_file.write_text('<p>updated</p>', encoding='utf-8')

        assert client.get('/').get_data(as_text=True) == '<p>updated</p>'

    def test_missing_file_is_server_error(self, client, index_file):
        index_file.unlink()

        response = client.get('/')

        assert response.status_code == 500
        assert response.mimetype == 'text/plain'
        assert response.get_data(as_text=True) == 'Error loading index.html'


class TestFlightsApi:

    def test_upstream_arrivals_plus_simulated(self, client, session):
        session.get.return_value = make_response({
            'arrivals': [
                {'ident': 'ABC123', 'operator': 'Test Air', 'scheduled_in': '2024-01-01T00:00:00Z'},
            ],
        })

        response = client.get('/api/flights')

        assert response.status_code == 200
        assert response.mimetype == 'application/json'
        flights = response.get_json()['flights']
        assert len(flights) == 2
        assert flights[0]['id'] == 'ABC123'
        assert flights[0]['airline'] == 'Test Air'
        assert flights[0]['destinationCode'] == 'KCLT'
        assert flights[0]['note'] == ''
        assert flights[1]['status'] == 'SIMULATED'
        assert flights[1]['note']

    def test_body_round_trips_as_flight_records(self, client, session):
        session.get.return_value = make_response({'arrivals': [{'ident': 'X1'}, {}]})

        body = json.loads(client.get('/api/flights').get_data(as_text=True))

        assert list(body) == ['flights']
        assert len(body['flights']) == 3
        for flight in body['flights']:
            assert set(flight) == FLIGHT_FIELDS
            assert all(isinstance(v, str) for v in flight.values())

    def test_upstream_failure_still_returns_simulated(self, client, session):
        session.get.return_value = make_response(status_code=502)

        response = client.get('/api/flights')

        assert response.status_code == 200
        flights = response.get_json()['flights']
        assert len(flights) == 1
        assert flights[0]['status'] == 'SIMULATED'
        assert flights[0]['destinationCode'] == 'KCLT'
        assert flights[0]['originCode'] == 'NIH'

    def test_unconfigured_upstream_returns_simulated_only(self, app_config):
        app = create_app(app_config, arrivals_service=ArrivalsService(AeroApiConfig()))

        flights = app.test_client().get('/api/flights').get_json()['flights']

        assert [f['id'] for f in flights] == ['SIM-BLUFF-001']

    @pytest.mark.parametrize('path', ['/api/flights/anything?x=1', '/api/flightsboard'])
    def test_prefix_match(self, client, session, path):
        session.get.return_value = make_response({'arrivals': []})

        response = client.get(path)

        assert response.status_code == 200
        assert response.get_json()['flights'][-1]['id'] == 'SIM-BLUFF-001'

    def test_other_methods_dispatch_by_path(self, client, session):
        session.get.return_value = make_response({'arrivals': []})

        assert client.post('/api/flights').status_code == 200
        assert client.delete('/nope').status_code == 404

    def test_options_dispatch_by_path(self, client, session):
        session.get.return_value = make_response({'arrivals': []})

        unknown = client.options('/unknown/path')
        assert unknown.status_code == 404
        assert unknown.mimetype == 'text/plain'
        assert unknown.get_data(as_text=True) == 'Not Found'

        assert client.options('/').get_data(as_text=True) == INDEX_HTML
        assert client.options('/api/flights').get_json()['flights'][-1]['id'] == 'SIM-BLUFF-001'

    def test_unlisted_methods_dispatch_by_path(self, client, session):
        session.get.return_value = make_response({'arrivals': []})

        index = client.open('/', method='TRACE')
        assert index.status_code == 200
        assert index.get_data(as_text=True) == INDEX_HTML

        flights = client.open('/api/flights', method='PROPFIND')
        assert flights.status_code == 200
        assert flights.get_json()['flights'][-1]['id'] == 'SIM-BLUFF-001'

        unknown = client.open('/unknown/path', method='PROPFIND')
        assert unknown.status_code == 404
        assert unknown.get_data(as_text=True) == 'Not Found'

    def test_cors_enabled(self, client, session):
        session.get.return_value = make_response({'arrivals': []})

        response = client.get('/api/flights', headers={'Origin': 'http://example.com'})

        assert response.headers['Access-Control-Allow-Origin'] in ('*', 'http://example.com')

    def test_uses_injected_service(self, app_config):
        service = MagicMock()
        service.fetch_arrivals.return_value = []
        app = create_app(app_config, arrivals_service=service)

        response = app.test_client().get('/api/flights')

        assert response.get_json() == {'flights': []}
        service.fetch_arrivals.assert_called_once_with()


@pytest.mark.parametrize('path', ['/unknown/path', '/api', '/favicon.ico'])
def test_unknown_path_is_not_found(client, path):
    response = client.get(path)

    assert response.status_code == 404
    assert response.mimetype == 'text/plain'
    assert response.get_data(as_text=True) == 'Not Found'
