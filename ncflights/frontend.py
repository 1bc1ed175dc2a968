"""Static frontend page."""

import logging
from pathlib import Path

from flask import Response

logger = logging.getLogger(__name__)


def serve_index(index_path: Path) -> Response:
    """
    Serve the HTML page, read fresh from disk on every request.

    Read failures are logged and answered with a generic 500.
    """
    try:
        body = index_path.read_bytes()
    except OSError as e:
        logger.error(f'Failed to read {index_path}: {e}')
        return Response('Error loading index.html', status=500, mimetype='text/plain')

    return Response(body, status=200, mimetype='text/html')
