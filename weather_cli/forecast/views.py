from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator

# =============================================================================
# Locationforecast 2.0 Response Models (MET Norway API Mappings)
# =============================================================================


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class Details(_FrozenModel):
    """Measured or forecast values; upstream omits any field it has no value for."""

    air_pressure_at_sea_level: float | None = None
    air_temperature: float | None = None
    cloud_area_fraction: float | None = None
    relative_humidity: float | None = None
    wind_from_direction: float | None = None
    wind_speed: float | None = None
    precipitation_amount: float | None = None


class Summary(_FrozenModel):
    symbol_code: str


class NextHoursForecast(_FrozenModel):
    """Outlook for the next 1, 6 or 12 hours after an entry's timestamp."""

    summary: Summary
    details: Details | None = None


class Instant(_FrozenModel):
    details: Details


class TimeseriesData(_FrozenModel):
    instant: Instant
    next_1_hours: NextHoursForecast | None = None
    next_6_hours: NextHoursForecast | None = None
    next_12_hours: NextHoursForecast | None = None


class TimeseriesEntry(_FrozenModel):
    """Single timestamped forecast sample."""

    time: datetime
    data: TimeseriesData

    @field_validator("time")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class Units(_FrozenModel):
    air_pressure_at_sea_level: str | None = None
    air_temperature: str | None = None
    cloud_area_fraction: str | None = None
    precipitation_amount: str | None = None
    relative_humidity: str | None = None
    wind_from_direction: str | None = None
    wind_speed: str | None = None


class Meta(_FrozenModel):
    updated_at: datetime
    units: Units


class Properties(_FrozenModel):
    meta: Meta
    timeseries: list[TimeseriesEntry] = Field(min_length=1)


class Geometry(_FrozenModel):
    type: str
    coordinates: list[float]


class WeatherData(_FrozenModel):
    """Complete Locationforecast GeoJSON document."""

    type: str
    geometry: Geometry
    properties: Properties

    @property
    def timeseries(self) -> list[TimeseriesEntry]:
        return self.properties.timeseries
