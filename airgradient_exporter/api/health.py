"""Liveness endpoint."""

from flask import Blueprint, Response

health_bp = Blueprint("health", __name__, url_prefix="/health")


@health_bp.route("", methods=["GET"], provide_automatic_options=False)
def get_health() -> Response:
    """Liveness probe; does not check the AirGradient API."""
    return Response("OK", status=200, mimetype="text/plain")
