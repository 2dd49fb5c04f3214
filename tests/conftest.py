"""Pytest fixtures for exporter tests.

Upstream calls are never made for real: tests patch ``requests.get`` and
hand back canned responses built with ``tests.testing_utils``.
"""

from collections.abc import Generator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from airgradient_exporter import create_app
from airgradient_exporter.config import Settings
from airgradient_exporter.metrics.registry import MetricsRegistry
from airgradient_exporter.metrics.updater import MetricsUpdater
from tests.testing_utils import TEST_API_TOKEN, TEST_API_URL


def _build_test_settings() -> Settings:
    """Construct base Settings object for tests."""
    return Settings(
        host="127.0.0.1",
        port=3000,
        waitress_threads=1,
        log_level="DEBUG",
        airgradient_api_token=TEST_API_TOKEN,
        airgradient_api_url=TEST_API_URL,
        metrics_include_runtime=False,
    )


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings."""
    return _build_test_settings()


@pytest.fixture
def app(test_settings: Settings) -> Generator[Flask, None, None]:
    """Create Flask app for testing."""
    application = create_app(test_settings)

    try:
        yield application
    finally:
        application.container.unwire()


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create test client."""
    return app.test_client()


@pytest.fixture
def registry() -> MetricsRegistry:
    """Create an empty, standalone registry."""
    return MetricsRegistry()


@pytest.fixture
def updater(registry: MetricsRegistry) -> MetricsUpdater:
    """Create an updater with all AirGradient gauges registered."""
    return MetricsUpdater(registry)
