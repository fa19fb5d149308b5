"""
Command-line interface for the Open-Meteo client.

This module provides the ``open-meteo`` entry point.
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import BaseModel

from open_meteo_client import __version__
from open_meteo_client.client import OpenMeteoClient
from open_meteo_client.config import get_settings
from open_meteo_client.encoding import build_url
from open_meteo_client.exceptions import UnknownParameterError
from open_meteo_client.options import (
    AirQualityOptions,
    CurrentOptions,
    GeocodingOptions,
    WeatherForecastOptions,
)
from open_meteo_client.weather_utils import weathercode_to_string


def _split(value: str | None) -> list[str]:
    """Parse a comma-separated option value."""
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="open-meteo",
        description="Query the Open-Meteo forecast, geocoding and air-quality APIs",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'forecast' command
    forecast_parser = subparsers.add_parser("forecast", help="Fetch a weather forecast")
    where = forecast_parser.add_mutually_exclusive_group(required=True)
    where.add_argument("--location", type=str, help="Place name to geocode first")
    where.add_argument("--lat", type=float, help="Latitude (requires --lon)")
    forecast_parser.add_argument("--lon", type=float, help="Longitude")
    forecast_parser.add_argument("--hourly", help="Comma-separated hourly variables")
    forecast_parser.add_argument("--daily", help="Comma-separated daily variables")
    forecast_parser.add_argument("--current", help="Comma-separated current variables")
    forecast_parser.add_argument("--models", help="Comma-separated weather models")
    forecast_parser.add_argument("--minutely-15", help="Comma-separated 15-minute variables")
    forecast_parser.add_argument("--timezone", default="", help="IANA timezone or 'auto'")
    forecast_parser.add_argument("--past-days", type=int, default=0)
    forecast_parser.add_argument("--start-date", default="", help="YYYY-MM-DD")
    forecast_parser.add_argument("--end-date", default="", help="YYYY-MM-DD")
    forecast_parser.add_argument(
        "--temperature-unit", default="celsius", choices=["celsius", "fahrenheit"]
    )
    forecast_parser.add_argument(
        "--url",
        action="store_true",
        help="Print the request URL instead of fetching (coordinates only)",
    )

    # 'geocode' command
    geocode_parser = subparsers.add_parser("geocode", help="Search for a location")
    geocode_parser.add_argument("name", type=str)
    geocode_parser.add_argument("--count", type=int, default=0)
    geocode_parser.add_argument("--language", default="")

    # 'air-quality' command
    air_parser = subparsers.add_parser("air-quality", help="Fetch air-quality data")
    air_parser.add_argument("--lat", type=float, required=True)
    air_parser.add_argument("--lon", type=float, required=True)
    air_parser.add_argument("--hourly", help="Comma-separated air-quality variables")
    air_parser.add_argument("--timezone", default="GMT")
    air_parser.add_argument("--domains", default="auto")

    # 'weathercode' command
    code_parser = subparsers.add_parser("weathercode", help="Describe a WMO weather code")
    code_parser.add_argument("code", type=int)

    # 'info' command
    subparsers.add_parser("info", help="Show application info")

    return parser


def configure_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else get_settings().log_level.upper()
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")


def _print_model(model: BaseModel | None, what: str) -> int:
    if model is None:
        print(f"Error: no {what} returned (see log for details)", file=sys.stderr)
        return 1
    print(model.model_dump_json(indent=2, exclude_none=True, by_alias=True))
    return 0


def forecast_options_from_args(args: argparse.Namespace) -> WeatherForecastOptions:
    """Build forecast options from parsed ``forecast`` arguments."""
    options = WeatherForecastOptions(
        latitude=args.lat if args.lat is not None else 0.0,
        longitude=args.lon if args.lon is not None else 0.0,
        temperature_unit=args.temperature_unit,
        timezone=args.timezone,
        past_days=args.past_days,
        start_date=args.start_date,
        end_date=args.end_date,
        hourly=_split(args.hourly),
        daily=_split(args.daily),
        current=_split(args.current),
        models=_split(args.models),
        minutely_15=_split(args.minutely_15),
    )
    if not (options.hourly or options.daily or options.minutely_15 or options.current):
        options.current = CurrentOptions.all()
    return options


def cmd_forecast(args: argparse.Namespace) -> int:
    """Handle the 'forecast' command."""
    if args.lat is not None and args.lon is None:
        print("Error: --lat requires --lon", file=sys.stderr)
        return 2
    try:
        options = forecast_options_from_args(args)
    except UnknownParameterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.url:
        if args.location:
            print("Error: --url needs --lat/--lon", file=sys.stderr)
            return 2
        print(build_url(options))
        return 0

    client = OpenMeteoClient()
    if args.location:
        forecast = client.query_location(args.location, options)
    else:
        forecast = client.query_forecast(options)
    return _print_model(forecast, "forecast")


def cmd_geocode(args: argparse.Namespace) -> int:
    """Handle the 'geocode' command."""
    options = GeocodingOptions(name=args.name, count=args.count, language=args.language)
    response = OpenMeteoClient().get_location_data(options)
    if response is not None and not response.locations:
        print(f"No location found for {args.name!r}", file=sys.stderr)
        return 1
    return _print_model(response, "geocoding result")


def cmd_air_quality(args: argparse.Namespace) -> int:
    """Handle the 'air-quality' command."""
    try:
        options = AirQualityOptions(
            latitude=args.lat,
            longitude=args.lon,
            hourly=_split(args.hourly),
            timezone=args.timezone,
            domains=args.domains,
        )
    except UnknownParameterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    return _print_model(OpenMeteoClient().query_air_quality(options), "air-quality data")


def cmd_weathercode(args: argparse.Namespace) -> int:
    """Handle the 'weathercode' command."""
    print(weathercode_to_string(args.code))
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Request timeout: {settings.request_timeout}s")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(getattr(args, "debug", False) or get_settings().debug)

    commands = {
        "forecast": cmd_forecast,
        "geocode": cmd_geocode,
        "air-quality": cmd_air_quality,
        "weathercode": cmd_weathercode,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
