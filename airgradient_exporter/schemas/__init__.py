"""Pydantic schemas for upstream payloads."""

from airgradient_exporter.schemas.device_reading import DeviceReading, DeviceReadingList

__all__ = [
    "DeviceReading",
    "DeviceReadingList",
]
