"""
Request routing.

Maps a request path to one of three routes. Rules are checked in order and
only look at the path prefix; there are no path parameters and the query
string is ignored.
"""

from enum import Enum

INDEX_PATH = '/'
INDEX_PREFIX = '/index.html'
FLIGHTS_PREFIX = '/api/flights'


class Route(Enum):
    INDEX = 'index'
    FLIGHTS = 'flights'
    NOT_FOUND = 'not_found'


def resolve_route(path: str) -> Route:
    """Pick the route for a request path."""
    if path == INDEX_PATH or path.startswith(INDEX_PREFIX):
        return Route.INDEX
    if path.startswith(FLIGHTS_PREFIX):
        return Route.FLIGHTS
    return Route.NOT_FOUND
