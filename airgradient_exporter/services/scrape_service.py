"""On-demand refresh of the AirGradient gauges for one scrape."""

import logging

from airgradient_exporter.exceptions import UpstreamException
from airgradient_exporter.metrics.registry import MetricsRegistry
from airgradient_exporter.metrics.updater import MetricsUpdater
from airgradient_exporter.services.airgradient_client import AirGradientClient

logger = logging.getLogger(__name__)


class ScrapeService:
    """Runs fetch, update and render for a single /metrics request.

    Failures never escape: they are logged and surface only through the
    config_ok and post_ok gauges so the scrape itself keeps succeeding.
    """

    def __init__(
        self,
        client: AirGradientClient,
        updater: MetricsUpdater,
        registry: MetricsRegistry,
    ):
        self.client = client
        self.updater = updater
        self.registry = registry

    def collect(self) -> str:
        """Refresh the gauges from the API and return the exposition text."""
        try:
            readings = self.client.fetch_current_measures()
            self.updater.update(readings)
        except UpstreamException as e:
            logger.error(f"Failed to fetch AirGradient data: {e.message} ({e.error_code})")
            self.updater.mark_unavailable()
        except Exception as e:
            logger.error(f"Error updating AirGradient metrics: {e}", exc_info=True)
            self.updater.mark_unavailable()

        return self.registry.render()
