"""Application runner with signal-driven shutdown."""

import logging
import signal
import sys
import threading

from waitress import create_server

from airgradient_exporter import create_app
from airgradient_exporter.config import Settings
from airgradient_exporter.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def run() -> None:
    """Run the exporter until SIGTERM or SIGINT.

    Configuration is validated and the listening socket is bound before
    the server thread starts. Invalid configuration or a failed bind
    prints the problem to stderr and exits with status 1.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        settings = Settings.load()
        app = create_app(settings)
    except ConfigurationError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    logging.getLogger().setLevel(settings.log_level)

    try:
        server = create_server(
            app, host=settings.host, port=settings.port, threads=settings.waitress_threads
        )
    except OSError as e:
        print(f"Failed to bind {settings.host}:{settings.port}: {e}", file=sys.stderr)
        sys.exit(1)

    stop_event = threading.Event()
    server_failed = False

    def handle_signal(signum: int, frame: object) -> None:
        logger.info(f"Received signal {signum}, shutting down")
        stop_event.set()

    signal.signal(signal.SIGTERM, handle_signal)
    signal.signal(signal.SIGINT, handle_signal)

    def runner() -> None:
        nonlocal server_failed
        logger.info(f"Using Waitress WSGI server with {settings.waitress_threads} threads")
        try:
            server.run()
        except Exception:
            logger.exception("Waitress server stopped unexpectedly")
            server_failed = True
        finally:
            stop_event.set()

    # Run server in daemon thread so the signal handler controls exit
    thread = threading.Thread(target=runner, daemon=True, name="waitress")
    thread.start()

    logger.info(f"AirGradient Prometheus exporter running on port {settings.port}")
    logger.info(f"Metrics available at http://localhost:{settings.port}/metrics")
    logger.info(f"Health check at http://localhost:{settings.port}/health")

    stop_event.wait()
    server.close()

    if server_failed:
        sys.exit(1)
