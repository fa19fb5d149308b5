"""Request option bundles: everything needed to describe one API call."""

from __future__ import annotations

import copy
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Self, TypeVar

from open_meteo_client.options.collections import (
    AirQualityHourlyOptions,
    CurrentOptions,
    DailyOptions,
    HourlyOptions,
    Minutely15Options,
    ModelsOptions,
    OptionCollection,
)

C = TypeVar("C", bound=OptionCollection[Any])


def _as_collection(collection_type: type[C], value: C | Iterable[Any]) -> C:
    """Accept a ready collection or any iterable of members/names."""
    if isinstance(value, collection_type):
        return value
    return collection_type(value)


@dataclass
class WeatherForecastOptions:
    """
    Options for the forecast API.

    Empty strings (``timezone``, ``start_date``, ``end_date``) and empty
    collections are left out of the query. ``current_weather`` is kept for
    callers that mirror the legacy schema; it is not sent.
    """

    latitude: float = 0.0
    longitude: float = 0.0
    temperature_unit: str = "celsius"
    windspeed_unit: str = "kmh"
    precipitation_unit: str = "mm"
    timezone: str = ""
    hourly: HourlyOptions = field(default_factory=HourlyOptions)
    daily: DailyOptions = field(default_factory=DailyOptions)
    current_weather: bool = True
    timeformat: str = "iso8601"
    past_days: int = 0
    start_date: str = ""
    end_date: str = ""
    cell_selection: str = "land"
    models: ModelsOptions = field(default_factory=ModelsOptions)
    current: CurrentOptions = field(default_factory=CurrentOptions)
    minutely_15: Minutely15Options = field(default_factory=Minutely15Options)

    def __post_init__(self) -> None:
        self.hourly = _as_collection(HourlyOptions, self.hourly)
        self.daily = _as_collection(DailyOptions, self.daily)
        self.models = _as_collection(ModelsOptions, self.models)
        self.current = _as_collection(CurrentOptions, self.current)
        self.minutely_15 = _as_collection(Minutely15Options, self.minutely_15)

    def copy(self) -> Self:
        """Independent copy, collections included."""
        return copy.deepcopy(self)

    def with_coordinates(self, latitude: float, longitude: float) -> Self:
        """Copy of this bundle pointed at another location."""
        other = self.copy()
        other.latitude = latitude
        other.longitude = longitude
        return other


@dataclass
class GeocodingOptions:
    """Options for the geocoding search API. ``count=0`` uses the API default."""

    name: str
    language: str = ""
    count: int = 0
    format: str = ""


@dataclass
class AirQualityOptions:
    """Options for the air-quality API."""

    latitude: float = 0.0
    longitude: float = 0.0
    hourly: AirQualityHourlyOptions = field(default_factory=AirQualityHourlyOptions)
    domains: str = "auto"
    timeformat: str = "iso8601"
    timezone: str = "GMT"

    def __post_init__(self) -> None:
        self.hourly = _as_collection(AirQualityHourlyOptions, self.hourly)

    def copy(self) -> Self:
        return copy.deepcopy(self)
