"""AirGradient API schemas."""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class DeviceReading(BaseModel):
    """Latest measurement snapshot of one AirGradient monitor."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    serial_number: str = Field(..., alias="serialno", description="Device serial number")
    device_model: str = Field(..., alias="model", description="Model string, e.g. I-9PSL INDOOR")
    firmware_version: str | None = Field(None, alias="firmwareVersion")
    location_id: int | None = Field(None, alias="locationId")
    location_name: str | None = Field(None, alias="locationName")

    pm01: float | None = Field(None, description="PM1.0 in ug/m3")
    pm02: float | None = Field(None, description="PM2.5 in ug/m3")
    pm10: float | None = Field(None, description="PM10 in ug/m3")
    pm003_count: float | None = Field(None, alias="pm003Count", description="PM0.3 particles per 100ml")

    rco2: float | None = Field(None, description="CO2 in ppm")
    rco2_corrected: float | None = None
    tvoc: float | None = Field(None, description="Raw TVOC sensor value")
    tvoc_index: float | None = Field(None, alias="tvocIndex")
    nox_index: float | None = Field(None, alias="noxIndex")

    atmp: float | None = Field(None, description="Temperature in degrees Celsius")
    atmp_corrected: float | None = None
    rhum: float | None = Field(None, description="Relative humidity in percent")
    rhum_corrected: float | None = None

    wifi: float | None = Field(None, description="WiFi RSSI in dBm")


DeviceReadingList = TypeAdapter(list[DeviceReading])
