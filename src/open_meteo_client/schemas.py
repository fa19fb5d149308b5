"""
Response models for the Open-Meteo APIs.

Pydantic models mirroring the JSON the API returns. Field names are matched
case-insensitively, unknown fields are ignored and absent fields keep their
default, so a partial response still validates.

The time-series blocks (``hourly``, ``daily``, ``minutely_15``, ``current``)
are generated from the parameter vocabularies, so every variable that can be
requested has a matching attribute.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, create_model, model_validator

from open_meteo_client.options.parameters import (
    AirQualityHourlyParameter,
    CurrentParameter,
    DailyParameter,
    HourlyParameter,
    Minutely15Parameter,
)


class ApiModel(BaseModel):
    """Base for every response model: case-insensitive, lenient."""

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _match_field_names(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        keys: dict[str, str] = {}
        for name, info in cls.model_fields.items():
            key = info.alias or name
            keys[name.lower()] = key
            keys[key.lower()] = key
        return {
            keys.get(k.lower(), k) if isinstance(k, str) else k: v for k, v in data.items()
        }


# =============================================================================
# Time series
# =============================================================================


class TimeSeries(ApiModel):
    """A block of parallel arrays keyed by variable name, indexed by ``time``."""

    time: list[str | int] = Field(default_factory=list)

    def values(self, parameter: str) -> list[Any] | None:
        """Array for ``parameter`` (enum member or wire name), or None if not returned."""
        return getattr(self, str(parameter), None)


class CurrentValues(ApiModel):
    """Single-instant values returned for the ``current`` field."""

    time: str | int | None = None
    interval: int | None = None

    def value(self, parameter: str) -> Any:
        return getattr(self, str(parameter), None)


_INTEGER_VARIABLES = {"weathercode", "is_day"}
_TEXT_VARIABLES = {"sunrise", "sunset"}


def _series_type(name: str) -> Any:
    if name in _INTEGER_VARIABLES:
        return list[int | None] | None
    if name in _TEXT_VARIABLES:
        return list[str | int | None] | None
    return list[float | None] | None


def _scalar_type(name: str) -> Any:
    if name in _INTEGER_VARIABLES:
        return int | None
    return float | None


def _series_model(model_name: str, parameters: type[StrEnum]) -> type[TimeSeries]:
    fields: dict[str, Any] = {p.value: (_series_type(p.value), None) for p in parameters}
    return create_model(model_name, __base__=TimeSeries, **fields)


HourlyData = _series_model("HourlyData", HourlyParameter)
DailyData = _series_model("DailyData", DailyParameter)
Minutely15Data = _series_model("Minutely15Data", Minutely15Parameter)
AirQualityHourlyData = _series_model("AirQualityHourlyData", AirQualityHourlyParameter)

CurrentData: type[CurrentValues] = create_model(
    "CurrentData",
    __base__=CurrentValues,
    **{p.value: (_scalar_type(p.value), None) for p in CurrentParameter},
)


# =============================================================================
# Forecast
# =============================================================================


class CurrentWeather(ApiModel):
    """Legacy ``current_weather`` block."""

    time: str | int | None = None
    temperature: float | None = None
    windspeed: float | None = None
    winddirection: float | None = None
    weathercode: int | None = None
    is_day: int | None = None


class WeatherForecast(ApiModel):
    """Response of the forecast API."""

    latitude: float = 0.0
    longitude: float = 0.0
    elevation: float | None = None
    generationtime_ms: float | None = None
    utc_offset_seconds: int = 0
    timezone: str | None = None
    timezone_abbreviation: str | None = None

    current_weather: CurrentWeather | None = None
    current: CurrentData | None = None  # type: ignore[valid-type]
    current_units: dict[str, str] | None = None
    hourly: HourlyData | None = None  # type: ignore[valid-type]
    hourly_units: dict[str, str] | None = None
    daily: DailyData | None = None  # type: ignore[valid-type]
    daily_units: dict[str, str] | None = None
    minutely_15: Minutely15Data | None = None  # type: ignore[valid-type]
    minutely_15_units: dict[str, str] | None = None


# =============================================================================
# Geocoding
# =============================================================================


class Location(ApiModel):
    """One geocoding match."""

    id: int | None = None
    name: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    elevation: float | None = None
    feature_code: str | None = None
    country_code: str | None = None
    country: str | None = None
    country_id: int | None = None
    timezone: str | None = None
    population: int | None = None
    postcodes: list[str] = Field(default_factory=list)
    admin1: str | None = None
    admin2: str | None = None
    admin3: str | None = None
    admin4: str | None = None
    admin1_id: int | None = None
    admin2_id: int | None = None
    admin3_id: int | None = None
    admin4_id: int | None = None


class GeocodingApiResponse(ApiModel):
    """Response of the geocoding search API. ``results`` is absent when nothing matched."""

    locations: list[Location] = Field(default_factory=list, alias="results")
    generationtime_ms: float | None = None


# =============================================================================
# Air quality
# =============================================================================


class AirQuality(ApiModel):
    """Response of the air-quality API."""

    latitude: float = 0.0
    longitude: float = 0.0
    elevation: float | None = None
    generationtime_ms: float | None = None
    utc_offset_seconds: int = 0
    timezone: str | None = None
    timezone_abbreviation: str | None = None

    hourly: AirQualityHourlyData | None = None  # type: ignore[valid-type]
    hourly_units: dict[str, str] | None = None
