"""Flask application factory."""

import logging

from airgradient_exporter.config import Settings
from airgradient_exporter.flask_app import App

logger = logging.getLogger(__name__)


def create_app(settings: "Settings | None" = None) -> App:
    """Create and configure the Flask application.

    Args:
        settings: Optional settings instance (loaded from the environment if not provided)

    Raises:
        ConfigurationError: If the configuration is incomplete
    """
    # Load and validate configuration before anything is built
    if settings is None:
        settings = Settings.load()

    settings.validate_config()

    app = App(__name__)

    # Initialize service container
    from airgradient_exporter.container import ServiceContainer

    container = ServiceContainer()
    container.config.override(settings)

    # Wire container to all API modules via package scanning
    container.wire(packages=["airgradient_exporter.api"])

    app.container = container

    # Register gauges eagerly so the first scrape sees a complete registry
    container.metrics_updater()

    from airgradient_exporter.errors import register_error_handlers

    register_error_handlers(app)

    from airgradient_exporter.api.health import health_bp
    from airgradient_exporter.api.metrics import metrics_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(metrics_bp)

    logger.debug("Application created")

    return app
