"""Flask application class carrying the service container."""

from typing import TYPE_CHECKING

from flask import Flask

if TYPE_CHECKING:
    from airgradient_exporter.container import ServiceContainer


class App(Flask):
    """Flask application with a typed ``container`` attribute.

    Tests reach the registry through ``app.container.metrics_registry()``.
    """

    container: "ServiceContainer"
