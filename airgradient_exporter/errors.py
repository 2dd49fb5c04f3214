"""HTTP error handlers.

Only GET (and the HEAD Flask derives from it) is routed. A request with any
other method on a known path is answered exactly like an unknown path.
"""

from flask import Flask, Response
from werkzeug.exceptions import MethodNotAllowed, NotFound


def _not_found(error: Exception) -> Response:
    return Response("Not Found", status=404, mimetype="text/plain")


def register_error_handlers(app: Flask) -> None:
    """Register the plain-text 404 handlers."""
    app.register_error_handler(NotFound, _not_found)
    app.register_error_handler(MethodNotAllowed, _not_found)
