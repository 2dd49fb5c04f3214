"""Application dependency injection container."""

from dependency_injector import containers, providers

from airgradient_exporter.config import Settings
from airgradient_exporter.metrics.registry import MetricsRegistry
from airgradient_exporter.metrics.updater import MetricsUpdater
from airgradient_exporter.services.airgradient_client import AirGradientClient
from airgradient_exporter.services.scrape_service import ScrapeService


class ServiceContainer(containers.DeclarativeContainer):
    """Exporter service container.

    The config provider must be overridden with a validated Settings
    instance before any service is resolved.
    """

    # Configuration - must be overridden by the app factory
    config = providers.Dependency(instance_of=Settings)

    # Gauge state lives for the process lifetime
    metrics_registry = providers.Singleton(
        MetricsRegistry,
        include_runtime_collectors=config.provided.metrics_include_runtime,
    )

    metrics_updater = providers.Singleton(
        MetricsUpdater,
        registry=metrics_registry,
    )

    airgradient_client = providers.Singleton(
        AirGradientClient,
        base_url=config.provided.airgradient_api_url,
        api_token=config.provided.airgradient_api_token,
    )

    scrape_service = providers.Singleton(
        ScrapeService,
        client=airgradient_client,
        updater=metrics_updater,
        registry=metrics_registry,
    )
