"""Query options: parameter vocabularies, their collections and request bundles.

Public API:
  - parameters: CurrentParameter, HourlyParameter, DailyParameter,
                Minutely15Parameter, ModelsParameter, AirQualityHourlyParameter
  - collections: one OptionCollection subclass per vocabulary
  - bundles: WeatherForecastOptions, GeocodingOptions, AirQualityOptions
"""

from open_meteo_client.options.bundles import (
    AirQualityOptions,
    GeocodingOptions,
    WeatherForecastOptions,
)
from open_meteo_client.options.collections import (
    AirQualityHourlyOptions,
    CurrentOptions,
    DailyOptions,
    HourlyOptions,
    Minutely15Options,
    ModelsOptions,
    OptionCollection,
)
from open_meteo_client.options.parameters import (
    AirQualityHourlyParameter,
    CurrentParameter,
    DailyParameter,
    HourlyParameter,
    Minutely15Parameter,
    ModelsParameter,
)

__all__ = [
    "AirQualityHourlyOptions",
    "AirQualityHourlyParameter",
    "AirQualityOptions",
    "CurrentOptions",
    "CurrentParameter",
    "DailyOptions",
    "DailyParameter",
    "GeocodingOptions",
    "HourlyOptions",
    "HourlyParameter",
    "Minutely15Options",
    "Minutely15Parameter",
    "ModelsOptions",
    "ModelsParameter",
    "OptionCollection",
    "WeatherForecastOptions",
]
