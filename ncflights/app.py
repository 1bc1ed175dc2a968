"""
NC Flights Flask Application.

Main entry point for the web application. Wires together:
- Configuration (loaded once, passed explicitly)
- Arrivals service (AeroAPI + simulated flight)
- Request routing for the static page and the flights API

Usage:
    python -m ncflights.app

Or with gunicorn:
    gunicorn 'ncflights.app:create_app()'
"""

import logging
from typing import Optional

from flask import Flask, Response, request
from flask_cors import CORS

from ncflights.api import list_flights
from ncflights.config import AppConfig, load_config
from ncflights.frontend import serve_index
from ncflights.router import Route, resolve_route
from ncflights.services import ArrivalsService

logger = logging.getLogger(__name__)

# Routing is by path only, so every common method reaches the router
DISPATCH_METHODS = ['GET', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )


def create_app(
    app_config: Optional[AppConfig] = None,
    arrivals_service: Optional[ArrivalsService] = None,
) -> Flask:
    """
    Application factory for Flask.

    Args:
        app_config: Configuration to use. Loaded from the environment
                    when omitted.
        arrivals_service: Service producing the flight list. Built from
                          app_config when omitted; pass a stub for testing.

    Returns:
        Configured Flask application instance.
    """
    app_config = app_config or load_config()
    configure_logging(app_config.debug)

    app = Flask(__name__, static_folder=None)
    app.json.sort_keys = False

    # Enable CORS for API endpoints
    CORS(app, resources={r'/api/*': {'origins': '*'}})

    arrivals_service = arrivals_service or ArrivalsService(app_config.aeroapi)

    @app.before_request
    def log_request():
        logger.info(f'{request.method} {request.full_path.rstrip("?")}')

    def handle(path: str) -> Response:
        """Send a path to the static page, the flights API or a 404."""
        route = resolve_route(path)

        if route is Route.INDEX:
            return serve_index(app_config.index_path)
        if route is Route.FLIGHTS:
            return list_flights(arrivals_service)
        return not_found(None)

    # -------------------------------------------------------------------------
    # Routes
    # -------------------------------------------------------------------------

    @app.route('/', defaults={'path': ''}, methods=DISPATCH_METHODS, provide_automatic_options=False)
    @app.route('/<path:path>', methods=DISPATCH_METHODS, provide_automatic_options=False)
    def dispatch(path: str):
        # request.path excludes the query string, so /?x=1 still serves the index
        return handle(request.path)

    # -------------------------------------------------------------------------
    # Error handlers
    # -------------------------------------------------------------------------

    @app.errorhandler(404)
    def not_found(e):
        return Response('Not Found', status=404, mimetype='text/plain')

    @app.errorhandler(405)
    def method_not_listed(e):
        # Methods outside DISPATCH_METHODS are routed by path like any other
        return handle(request.path)

    @app.errorhandler(500)
    def server_error(e):
        logger.error(f'Server error: {e}')
        return Response('Internal Server Error', status=500, mimetype='text/plain')

    return app


def run_development_server():
    """Run the development server."""
    app_config = load_config()
    app = create_app(app_config)

    host = app_config.server.host
    port = app_config.server.port

    logger.info(f'Server running at http://localhost:{port}')

    app.run(
        host=host,
        port=port,
        debug=app_config.debug,
        use_reloader=False,
    )


if __name__ == '__main__':
    run_development_server()
