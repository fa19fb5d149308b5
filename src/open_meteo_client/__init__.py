"""Open-Meteo client - forecast, geocoding and air-quality queries.

Architecture::

    options/        Parameter vocabularies, ordered option collections, request bundles
    encoding.py     Bundle → canonical query string / URL
    services/       Shared HTTP session (connection pool, timeout, headers)
    transport.py    GET + JSON decode, errors mapped to package exceptions
    schemas.py      Pydantic response models (case-insensitive, lenient)
    client.py       OpenMeteoClient and the geocode-then-forecast query
    cli.py          ``open-meteo`` command

Data flow: options → encoding (URL) → transport (JSON) → schemas → caller
"""

__version__ = "0.3.0"

from open_meteo_client.client import LocationForecastQuery, OpenMeteoClient, QueryState
from open_meteo_client.config import Settings
from open_meteo_client.exceptions import (
    DecodeError,
    LocationNotFoundError,
    OpenMeteoError,
    TransportError,
    UnknownParameterError,
)
from open_meteo_client.options import (
    AirQualityHourlyOptions,
    AirQualityHourlyParameter,
    AirQualityOptions,
    CurrentOptions,
    CurrentParameter,
    DailyOptions,
    DailyParameter,
    GeocodingOptions,
    HourlyOptions,
    HourlyParameter,
    Minutely15Options,
    Minutely15Parameter,
    ModelsOptions,
    ModelsParameter,
    WeatherForecastOptions,
)
from open_meteo_client.results import QueryResult
from open_meteo_client.schemas import AirQuality, GeocodingApiResponse, Location, WeatherForecast
from open_meteo_client.weather_utils import weathercode_to_string

__all__ = [
    "AirQuality",
    "AirQualityHourlyOptions",
    "AirQualityHourlyParameter",
    "AirQualityOptions",
    "CurrentOptions",
    "CurrentParameter",
    "DailyOptions",
    "DailyParameter",
    "DecodeError",
    "GeocodingApiResponse",
    "GeocodingOptions",
    "HourlyOptions",
    "HourlyParameter",
    "Location",
    "LocationForecastQuery",
    "LocationNotFoundError",
    "Minutely15Options",
    "Minutely15Parameter",
    "ModelsOptions",
    "ModelsParameter",
    "OpenMeteoClient",
    "OpenMeteoError",
    "QueryResult",
    "QueryState",
    "Settings",
    "TransportError",
    "UnknownParameterError",
    "WeatherForecast",
    "WeatherForecastOptions",
    "__version__",
    "weathercode_to_string",
]
