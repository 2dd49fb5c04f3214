"""Gauge registry rendering the Prometheus text exposition format."""

import logging
import threading
from collections.abc import Mapping, Sequence

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Gauge,
    GCCollector,
    PlatformCollector,
    ProcessCollector,
    generate_latest,
)

from airgradient_exporter.exceptions import (
    DuplicateMetricException,
    MetricNotRegisteredException,
)

logger = logging.getLogger(__name__)


class MetricsRegistry:
    """Process-wide set of named gauges backed by a private CollectorRegistry.

    Gauges are registered once with fixed help text and label keys; only
    label values and sample values change afterwards. Rendering follows
    prometheus_client semantics: unlabeled gauges report 0.0 until first
    set, labeled gauges report no samples until a label combination is set.
    """

    def __init__(self, include_runtime_collectors: bool = False):
        """Initialize the registry.

        Args:
            include_runtime_collectors: Also export process, platform and GC
                metrics from prometheus_client's default collectors
        """
        self._registry = CollectorRegistry()
        self._gauges: dict[str, Gauge] = {}
        self._label_keys: dict[str, tuple[str, ...]] = {}
        self._lock = threading.Lock()

        if include_runtime_collectors:
            ProcessCollector(registry=self._registry)
            PlatformCollector(registry=self._registry)
            GCCollector(registry=self._registry)
            logger.info("Runtime collectors enabled")

    @property
    def content_type(self) -> str:
        return CONTENT_TYPE_LATEST

    def register(self, name: str, help_text: str, label_keys: Sequence[str] = ()) -> None:
        """Register a gauge.

        Raises:
            DuplicateMetricException: If a gauge with this name already exists
        """
        with self._lock:
            if name in self._gauges:
                raise DuplicateMetricException(name)

            self._gauges[name] = Gauge(
                name,
                help_text,
                list(label_keys),
                registry=self._registry,
            )
            self._label_keys[name] = tuple(label_keys)

    def set(
        self,
        name: str,
        value: float,
        label_values: Mapping[str, str] | None = None,
    ) -> None:
        """Overwrite the value of a gauge for one label combination."""
        gauge = self._get_gauge(name)
        if label_values:
            gauge.labels(**label_values).set(value)
        else:
            gauge.set(value)

    def remove(self, name: str, label_values: Mapping[str, str]) -> None:
        """Drop one label combination from a labeled gauge."""
        gauge = self._get_gauge(name)
        values = [label_values[key] for key in self._label_keys[name]]
        try:
            gauge.remove(*values)
        except KeyError:
            pass  # Never set for this combination

    def get_value(
        self,
        name: str,
        label_values: Mapping[str, str] | None = None,
    ) -> float | None:
        """Return the current sample value, or None when no sample exists."""
        self._get_gauge(name)
        return self._registry.get_sample_value(name, dict(label_values or {}))

    @property
    def names(self) -> list[str]:
        with self._lock:
            return list(self._gauges)

    def render(self) -> str:
        """Generate the exposition in Prometheus text format."""
        return generate_latest(self._registry).decode("utf-8")

    def _get_gauge(self, name: str) -> Gauge:
        with self._lock:
            gauge = self._gauges.get(name)
        if gauge is None:
            raise MetricNotRegisteredException(name)
        return gauge
