"""Projection of AirGradient device readings onto the gauge registry."""

import logging
import math
import threading
from collections.abc import Callable, Sequence
from enum import Enum

from airgradient_exporter.metrics import definitions as gauges
from airgradient_exporter.metrics.definitions import GaugeDefinition
from airgradient_exporter.metrics.registry import MetricsRegistry
from airgradient_exporter.schemas.device_reading import DeviceReading

logger = logging.getLogger(__name__)

INDOOR_MARKER = "INDOOR"


class DeviceType(str, Enum):
    """Device classification exported on the info series."""

    ONE_INDOOR = "ONE_INDOOR"
    OUTDOOR = "OUTDOOR"


def classify_device(device_model: str) -> DeviceType:
    if INDOOR_MARKER in device_model:
        return DeviceType.ONE_INDOOR
    return DeviceType.OUTDOOR


# Raw NOx has no upstream field and is always exported as 0.
_SCALAR_FIELDS: tuple[tuple[GaugeDefinition, Callable[[DeviceReading], float | None]], ...] = (
    (gauges.WIFI_RSSI, lambda reading: reading.wifi),
    (gauges.PM1, lambda reading: reading.pm01),
    (gauges.PM2D5, lambda reading: reading.pm02),
    (gauges.PM10, lambda reading: reading.pm10),
    (gauges.PM0D3, lambda reading: reading.pm003_count),
    (gauges.TVOC_INDEX, lambda reading: reading.tvoc_index),
    (gauges.TVOC_RAW, lambda reading: reading.tvoc),
    (gauges.NOX_INDEX, lambda reading: reading.nox_index),
    (gauges.NOX_RAW, lambda reading: 0),
    (gauges.CO2, lambda reading: reading.rco2),
    (gauges.TEMPERATURE, lambda reading: reading.atmp),
    (gauges.TEMPERATURE_COMPENSATED, lambda reading: reading.atmp_corrected),
    (gauges.HUMIDITY, lambda reading: reading.rhum),
    (gauges.HUMIDITY_COMPENSATED, lambda reading: reading.rhum_corrected),
)


class MetricsUpdater:
    """Maps device readings onto the AirGradient gauges.

    Scalar gauges carry no per-device labels, so with several devices the
    last reading in upstream order wins. Each device keeps exactly one
    info row: when its identity labels change the previous row is removed.
    """

    def __init__(self, registry: MetricsRegistry):
        """Register all AirGradient gauges.

        Args:
            registry: Registry owning the gauge state
        """
        self.registry = registry
        self._info_labels: dict[str, dict[str, str]] = {}
        self._lock = threading.Lock()

        for definition in gauges.ALL_GAUGES:
            registry.register(definition.name, definition.help, definition.label_keys)

    def update(self, readings: Sequence[DeviceReading]) -> None:
        """Apply one successfully fetched snapshot."""
        with self._lock:
            for reading in readings:
                self._update_device(reading)

            self._set_health(1)

        logger.debug(f"Updated metrics for {len(readings)} device(s)")

    def mark_unavailable(self) -> None:
        """Flag the last fetch as failed without touching measurements."""
        with self._lock:
            self._set_health(0)

    def _update_device(self, reading: DeviceReading) -> None:
        info_labels = {
            gauges.LABEL_SERIAL_NUMBER: reading.serial_number,
            gauges.LABEL_DEVICE_TYPE: classify_device(reading.device_model).value,
            gauges.LABEL_LIBRARY_VERSION: reading.firmware_version or "",
        }

        previous = self._info_labels.get(reading.serial_number)
        if previous is not None and previous != info_labels:
            self.registry.remove(gauges.INFO.name, previous)
        self._info_labels[reading.serial_number] = info_labels
        self.registry.set(gauges.INFO.name, 1, info_labels)

        for definition, extract in _SCALAR_FIELDS:
            value = extract(reading)
            self.registry.set(definition.name, math.nan if value is None else value)

    def _set_health(self, value: int) -> None:
        self.registry.set(gauges.CONFIG_OK.name, value)
        self.registry.set(gauges.POST_OK.name, value)
