"""Metrics API endpoint for Prometheus scraping."""

from typing import Any

from dependency_injector.wiring import Provide, inject
from flask import Blueprint, Response

from airgradient_exporter.metrics.registry import MetricsRegistry
from airgradient_exporter.services.scrape_service import ScrapeService

metrics_bp = Blueprint("metrics", __name__, url_prefix="/metrics")


@metrics_bp.route("", methods=["GET"], provide_automatic_options=False)
@inject
def get_metrics(
    scrape_service: ScrapeService = Provide["scrape_service"],
    metrics_registry: MetricsRegistry = Provide["metrics_registry"],
) -> Any:
    """Refresh from the AirGradient API and return metrics in Prometheus text format.

    Upstream failures are reported through the health gauges, never through
    the HTTP status, so this endpoint always answers 200.
    """
    metrics_text = scrape_service.collect()

    return Response(
        metrics_text,
        status=200,
        content_type=metrics_registry.content_type,
    )
