"""AirGradient gauge names, help text and label keys.

Series names, help text and label keys are part of the exporter's public
contract: dashboards and alerts select on them.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GaugeDefinition:
    name: str
    help: str
    label_keys: tuple[str, ...] = ()


LABEL_SERIAL_NUMBER = "airgradient_serial_number"
LABEL_DEVICE_TYPE = "airgradient_device_type"
LABEL_LIBRARY_VERSION = "airgradient_library_version"

INFO = GaugeDefinition(
    "airgradient_info",
    "AirGradient device information",
    (LABEL_SERIAL_NUMBER, LABEL_DEVICE_TYPE, LABEL_LIBRARY_VERSION),
)
CONFIG_OK = GaugeDefinition(
    "airgradient_config_ok",
    "1 if the AirGradient device was able to successfully fetch its configuration from the server",
)
POST_OK = GaugeDefinition(
    "airgradient_post_ok",
    "1 if the AirGradient device was able to successfully send to the server",
)
WIFI_RSSI = GaugeDefinition(
    "airgradient_wifi_rssi_dbm",
    "WiFi signal strength from the AirGradient device perspective, in dBm",
)
PM1 = GaugeDefinition(
    "airgradient_pm1_ugm3",
    "PM1.0 concentration as measured by the AirGradient PMS sensor, in micrograms per cubic meter",
)
PM2D5 = GaugeDefinition(
    "airgradient_pm2d5_ugm3",
    "PM2.5 concentration as measured by the AirGradient PMS sensor, in micrograms per cubic meter",
)
PM10 = GaugeDefinition(
    "airgradient_pm10_ugm3",
    "PM10 concentration as measured by the AirGradient PMS sensor, in micrograms per cubic meter",
)
PM0D3 = GaugeDefinition(
    "airgradient_pm0d3_p100ml",
    "PM0.3 concentration as measured by the AirGradient PMS sensor, in number of particules per 100 milliliters",
)
TVOC_INDEX = GaugeDefinition(
    "airgradient_tvoc_index",
    "The processed Total Volatile Organic Compounds (TVOC) index as measured by the AirGradient SGP sensor",
)
TVOC_RAW = GaugeDefinition(
    "airgradient_tvoc_raw",
    "The raw input value to the Total Volatile Organic Compounds (TVOC) index as measured by the AirGradient SGP sensor",
)
NOX_INDEX = GaugeDefinition(
    "airgradient_nox_index",
    "The processed Nitrous Oxide (NOx) index as measured by the AirGradient SGP sensor",
)
NOX_RAW = GaugeDefinition(
    "airgradient_nox_raw",
    "The raw input value to the Nitrous Oxide (NOx) index as measured by the AirGradient SGP sensor",
)
CO2 = GaugeDefinition(
    "airgradient_co2_ppm",
    "Carbon dioxide concentration as measured by the AirGradient S8 sensor, in parts per million",
)
TEMPERATURE = GaugeDefinition(
    "airgradient_temperature_celsius",
    "The ambient temperature as measured by the AirGradient SHT / PMS sensor, in degrees Celsius",
)
TEMPERATURE_COMPENSATED = GaugeDefinition(
    "airgradient_temperature_compensated_celsius",
    "The compensated ambient temperature as measured by the AirGradient SHT / PMS sensor, in degrees Celsius",
)
HUMIDITY = GaugeDefinition(
    "airgradient_humidity_percent",
    "The relative humidity as measured by the AirGradient SHT sensor",
)
HUMIDITY_COMPENSATED = GaugeDefinition(
    "airgradient_humidity_compensated_percent",
    "The compensated relative humidity as measured by the AirGradient SHT / PMS sensor",
)

# Registration order is exposition order.
ALL_GAUGES: tuple[GaugeDefinition, ...] = (
    INFO,
    CONFIG_OK,
    POST_OK,
    WIFI_RSSI,
    PM1,
    PM2D5,
    PM10,
    PM0D3,
    TVOC_INDEX,
    TVOC_RAW,
    NOX_INDEX,
    NOX_RAW,
    CO2,
    TEMPERATURE,
    TEMPERATURE_COMPENSATED,
    HUMIDITY,
    HUMIDITY_COMPENSATED,
)
