"""
Open-Meteo client.

Combines the query encoder with the HTTP transport. Three kinds of query:

- forecast for known coordinates (one request)
- forecast for a place name (geocoding request, then forecast request)
- air quality for known coordinates (one request)

Failures are logged and reported as ``None`` by the ``query*`` methods; the
``fetch*`` methods return a ``QueryResult`` that carries the error instead.

Example::

    client = OpenMeteoClient()
    forecast = client.query("Berlin")
    if forecast is not None:
        print(forecast.current.temperature_2m)

Every synchronous method runs its async counterpart with ``asyncio.run``, so
it cannot be called from inside a running event loop; use the ``*_async``
methods there.
"""

from __future__ import annotations

import asyncio
import logging
from enum import StrEnum
from typing import TypeVar

from pydantic import BaseModel

from open_meteo_client.encoding import build_url
from open_meteo_client.exceptions import (
    DecodeError,
    LocationNotFoundError,
    OpenMeteoError,
    TransportError,
)
from open_meteo_client.options import (
    AirQualityOptions,
    CurrentOptions,
    GeocodingOptions,
    WeatherForecastOptions,
)
from open_meteo_client.results import QueryResult
from open_meteo_client.schemas import AirQuality, GeocodingApiResponse, Location, WeatherForecast
from open_meteo_client.transport import HttpTransport
from open_meteo_client.weather_utils import weathercode_to_string

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

QueryTarget = (
    str | GeocodingOptions | WeatherForecastOptions | AirQualityOptions | tuple[float, float]
)


def _geocoding_options(location: str | GeocodingOptions) -> GeocodingOptions:
    if isinstance(location, GeocodingOptions):
        return location
    return GeocodingOptions(name=location)


class QueryState(StrEnum):
    """Progress of a ``LocationForecastQuery``."""

    AWAITING_GEOCODE = "awaiting_geocode"
    AWAITING_FORECAST = "awaiting_forecast"
    DONE = "done"
    FAILED = "failed"


class LocationForecastQuery:
    """
    Geocode a place, then fetch the forecast for the first match.

    If the search finds nothing, the query fails with
    ``LocationNotFoundError`` and no forecast request is made. Without
    explicit forecast options, all current-weather variables are requested.
    The caller's forecast options are copied, never modified.
    """

    def __init__(
        self,
        geocoding: GeocodingOptions,
        forecast: WeatherForecastOptions | None = None,
    ) -> None:
        self.geocoding = geocoding
        self.forecast = forecast
        self.state = QueryState.AWAITING_GEOCODE
        self.location: Location | None = None
        self.result: QueryResult[WeatherForecast] | None = None

    def forecast_options_for(self, location: Location) -> WeatherForecastOptions:
        if self.forecast is None:
            return WeatherForecastOptions(
                latitude=location.latitude,
                longitude=location.longitude,
                current=CurrentOptions.all(),
            )
        return self.forecast.with_coordinates(location.latitude, location.longitude)

    async def run(self, client: OpenMeteoClient) -> QueryResult[WeatherForecast]:
        if self.state is not QueryState.AWAITING_GEOCODE:
            raise RuntimeError(f"Query already run (state: {self.state})")

        geocoded = await client.fetch_geocoding_async(self.geocoding)
        if geocoded.error is not None:
            return self._fail(geocoded.error)

        locations = geocoded.unwrap().locations
        if not locations:
            logger.warning("No location found for %r", self.geocoding.name)
            return self._fail(LocationNotFoundError(self.geocoding.name))

        self.location = locations[0]
        self.state = QueryState.AWAITING_FORECAST
        self.result = await client.fetch_forecast_async(self.forecast_options_for(self.location))
        self.state = QueryState.DONE if self.result.ok else QueryState.FAILED
        return self.result

    def _fail(self, error: OpenMeteoError) -> QueryResult[WeatherForecast]:
        self.state = QueryState.FAILED
        self.result = QueryResult.failure(error)
        return self.result


class OpenMeteoClient:
    """
    Client for the Open-Meteo forecast, geocoding and air-quality APIs.

    Args:
        transport: HTTP transport to use. Defaults to one over the shared
            process-wide session.
    """

    weathercode_to_string = staticmethod(weathercode_to_string)

    def __init__(self, transport: HttpTransport | None = None) -> None:
        self.transport = transport if transport is not None else HttpTransport()

    # ------------------------------------------------------------------
    # Result-returning queries
    # ------------------------------------------------------------------

    async def _fetch(self, url: str, model: type[M]) -> QueryResult[M]:
        try:
            value = await self.transport.fetch_model_async(url, model)
        except (TransportError, DecodeError) as e:
            logger.warning("Open-Meteo request failed: %s (%s)", e, url)
            return QueryResult.failure(e)
        return QueryResult.success(value)

    async def fetch_forecast_async(
        self, options: WeatherForecastOptions
    ) -> QueryResult[WeatherForecast]:
        return await self._fetch(build_url(options), WeatherForecast)

    async def fetch_geocoding_async(
        self, location: str | GeocodingOptions
    ) -> QueryResult[GeocodingApiResponse]:
        return await self._fetch(build_url(_geocoding_options(location)), GeocodingApiResponse)

    async def fetch_air_quality_async(self, options: AirQualityOptions) -> QueryResult[AirQuality]:
        return await self._fetch(build_url(options), AirQuality)

    async def fetch_location_forecast_async(
        self,
        location: str | GeocodingOptions,
        options: WeatherForecastOptions | None = None,
    ) -> QueryResult[WeatherForecast]:
        """Geocode ``location`` and fetch the forecast for the first match."""
        query = LocationForecastQuery(_geocoding_options(location), options)
        return await query.run(self)

    # ------------------------------------------------------------------
    # Value-or-None queries
    # ------------------------------------------------------------------

    async def query_forecast_async(self, options: WeatherForecastOptions) -> WeatherForecast | None:
        return (await self.fetch_forecast_async(options)).value

    async def query_coordinates_async(
        self, latitude: float, longitude: float
    ) -> WeatherForecast | None:
        options = WeatherForecastOptions(latitude=latitude, longitude=longitude)
        return await self.query_forecast_async(options)

    async def query_location_async(
        self,
        location: str | GeocodingOptions,
        options: WeatherForecastOptions | None = None,
    ) -> WeatherForecast | None:
        return (await self.fetch_location_forecast_async(location, options)).value

    async def query_air_quality_async(self, options: AirQualityOptions) -> AirQuality | None:
        return (await self.fetch_air_quality_async(options)).value

    async def get_location_data_async(
        self, location: str | GeocodingOptions
    ) -> GeocodingApiResponse | None:
        return (await self.fetch_geocoding_async(location)).value

    async def get_location_coordinates_async(
        self, location: str | GeocodingOptions
    ) -> tuple[float, float] | None:
        """``(latitude, longitude)`` of the first match, or None."""
        response = await self.get_location_data_async(location)
        if response is None or not response.locations:
            return None
        first = response.locations[0]
        return first.latitude, first.longitude

    async def query_async(
        self,
        target: QueryTarget,
        options: WeatherForecastOptions | None = None,
    ) -> WeatherForecast | AirQuality | None:
        """
        Run whichever query fits ``target``.

        Args:
            target: Place name or ``GeocodingOptions`` (geocode, then
                forecast), ``WeatherForecastOptions`` (forecast),
                ``AirQualityOptions`` (air quality) or a
                ``(latitude, longitude)`` pair (forecast with defaults).
            options: Forecast options for a place-name target.
        """
        if isinstance(target, str | GeocodingOptions):
            return await self.query_location_async(target, options)
        if options is not None:
            raise TypeError("options only apply to place-name queries")
        if isinstance(target, WeatherForecastOptions):
            return await self.query_forecast_async(target)
        if isinstance(target, AirQualityOptions):
            return await self.query_air_quality_async(target)
        if isinstance(target, tuple):
            latitude, longitude = target
            return await self.query_coordinates_async(latitude, longitude)
        raise TypeError(f"Cannot query {type(target).__name__}")

    # ------------------------------------------------------------------
    # Synchronous wrappers
    # ------------------------------------------------------------------

    def query(
        self,
        target: QueryTarget,
        options: WeatherForecastOptions | None = None,
    ) -> WeatherForecast | AirQuality | None:
        return asyncio.run(self.query_async(target, options))

    def query_forecast(self, options: WeatherForecastOptions) -> WeatherForecast | None:
        return asyncio.run(self.query_forecast_async(options))

    def query_location(
        self,
        location: str | GeocodingOptions,
        options: WeatherForecastOptions | None = None,
    ) -> WeatherForecast | None:
        return asyncio.run(self.query_location_async(location, options))

    def query_air_quality(self, options: AirQualityOptions) -> AirQuality | None:
        return asyncio.run(self.query_air_quality_async(options))

    def get_location_data(self, location: str | GeocodingOptions) -> GeocodingApiResponse | None:
        return asyncio.run(self.get_location_data_async(location))

    def get_location_coordinates(
        self, location: str | GeocodingOptions
    ) -> tuple[float, float] | None:
        return asyncio.run(self.get_location_coordinates_async(location))
