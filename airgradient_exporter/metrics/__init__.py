"""Prometheus metrics module.

The registry owns every AirGradient gauge; the updater is the only code
that writes device data into it:

    registry = MetricsRegistry()
    updater = MetricsUpdater(registry)
    updater.update(readings)
    text = registry.render()
"""

from airgradient_exporter.metrics.registry import MetricsRegistry
from airgradient_exporter.metrics.updater import DeviceType, MetricsUpdater, classify_device

__all__ = [
    "DeviceType",
    "MetricsRegistry",
    "MetricsUpdater",
    "classify_device",
]
