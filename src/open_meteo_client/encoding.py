"""
Render request option bundles as query strings.

Parameters are emitted in a fixed order per endpoint, so the same bundle
always produces the same URL::

    >>> build_url(GeocodingOptions(name="Berlin", count=5))
    'https://geocoding-api.open-meteo.com/v1/search?name=Berlin&count=5'

Multi-valued fields (``hourly``, ``daily``, ``models``, ...) are comma-joined
in collection order and skipped when empty. Values are percent-encoded, with
``,`` and ``/`` left as-is so lists and IANA timezone names stay readable.
"""

from __future__ import annotations

from functools import singledispatch
from typing import Any
from urllib.parse import quote

from open_meteo_client.endpoints import AIR_QUALITY_API, FORECAST_API, GEOCODING_API
from open_meteo_client.options.bundles import (
    AirQualityOptions,
    GeocodingOptions,
    WeatherForecastOptions,
)
from open_meteo_client.options.collections import OptionCollection

QueryParams = list[tuple[str, str]]

_SAFE_CHARS = ",/"


def format_coordinate(value: float) -> str:
    """Shortest round-tripping decimal, always with ``.`` (``0.0`` -> ``"0"``)."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def _joined(collection: OptionCollection[Any]) -> str:
    return ",".join(collection.names())


def forecast_params(options: WeatherForecastOptions) -> QueryParams:
    params: QueryParams = [
        ("latitude", format_coordinate(options.latitude)),
        ("longitude", format_coordinate(options.longitude)),
        ("temperature_unit", options.temperature_unit),
        ("windspeed_unit", options.windspeed_unit),
        ("precipitation_unit", options.precipitation_unit),
    ]
    if options.timezone:
        params.append(("timezone", options.timezone))
    params.append(("timeformat", options.timeformat))
    params.append(("past_days", str(int(options.past_days))))
    if options.start_date:
        params.append(("start_date", options.start_date))
    if options.end_date:
        params.append(("end_date", options.end_date))
    if options.hourly:
        params.append(("hourly", _joined(options.hourly)))
    if options.daily:
        params.append(("daily", _joined(options.daily)))
    params.append(("cell_selection", options.cell_selection))
    if options.models:
        params.append(("models", _joined(options.models)))
    if options.current:
        params.append(("current", _joined(options.current)))
    if options.minutely_15:
        params.append(("minutely_15", _joined(options.minutely_15)))
    return params


def geocoding_params(options: GeocodingOptions) -> QueryParams:
    params: QueryParams = [("name", options.name)]
    if options.count > 0:
        params.append(("count", str(int(options.count))))
    if options.format:
        params.append(("format", options.format))
    if options.language:
        params.append(("language", options.language))
    return params


def air_quality_params(options: AirQualityOptions) -> QueryParams:
    params: QueryParams = [
        ("latitude", format_coordinate(options.latitude)),
        ("longitude", format_coordinate(options.longitude)),
    ]
    if options.domains:
        params.append(("domains", options.domains))
    if options.timeformat:
        params.append(("timeformat", options.timeformat))
    if options.timezone:
        params.append(("timezone", options.timezone))
    if options.hourly:
        params.append(("hourly", _joined(options.hourly)))
    return params


def render_query(params: QueryParams) -> str:
    """Join ``(name, value)`` pairs as ``name=value&name=value``."""
    return "&".join(f"{name}={quote(value, safe=_SAFE_CHARS)}" for name, value in params)


def encode_forecast_query(options: WeatherForecastOptions) -> str:
    return render_query(forecast_params(options))


def encode_geocoding_query(options: GeocodingOptions) -> str:
    return render_query(geocoding_params(options))


def encode_air_quality_query(options: AirQualityOptions) -> str:
    return render_query(air_quality_params(options))


def _append_query(base_url: str, query: str) -> str:
    if base_url.endswith(("?", "&")):
        return base_url + query
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{query}"


@singledispatch
def build_url(options: object, base_url: str | None = None) -> str:
    """
    Full request URL for an option bundle.

    Args:
        options: A ``WeatherForecastOptions``, ``GeocodingOptions`` or
            ``AirQualityOptions``.
        base_url: Endpoint to append the query to (defaults to the bundle's
            own Open-Meteo endpoint).
    """
    raise TypeError(f"Cannot build a URL from {type(options).__name__}")


@build_url.register
def _(options: WeatherForecastOptions, base_url: str | None = None) -> str:
    return _append_query(base_url or FORECAST_API, encode_forecast_query(options))


@build_url.register
def _(options: GeocodingOptions, base_url: str | None = None) -> str:
    return _append_query(base_url or GEOCODING_API, encode_geocoding_query(options))


@build_url.register
def _(options: AirQualityOptions, base_url: str | None = None) -> str:
    return _append_query(base_url or AIR_QUALITY_API, encode_air_quality_query(options))
