"""
Tests for request option bundles.
"""

from __future__ import annotations

from open_meteo_client.options import (
    AirQualityHourlyOptions,
    AirQualityOptions,
    CurrentOptions,
    DailyOptions,
    DailyParameter,
    GeocodingOptions,
    HourlyOptions,
    HourlyParameter,
    WeatherForecastOptions,
)


class TestWeatherForecastOptions:
    """Test forecast bundle defaults and behaviour."""

    def test_defaults(self) -> None:
        """Default bundle matches the documented API defaults."""
        options = WeatherForecastOptions()
        assert options.latitude == 0.0
        assert options.longitude == 0.0
        assert options.temperature_unit == "celsius"
        assert options.windspeed_unit == "kmh"
        assert options.precipitation_unit == "mm"
        assert options.timeformat == "iso8601"
        assert options.cell_selection == "land"
        assert options.past_days == 0
        assert options.current_weather is True
        assert options.timezone == ""
        assert options.start_date == ""
        assert options.end_date == ""
        assert len(options.hourly) == 0
        assert len(options.daily) == 0
        assert len(options.current) == 0

    def test_coordinates(self) -> None:
        """Positional latitude/longitude."""
        options = WeatherForecastOptions(2.4, 3.5)
        assert options.latitude == 2.4
        assert options.longitude == 3.5
        assert options.current_weather is True

    def test_full_constructor(self) -> None:
        """Every scalar can be set at construction."""
        options = WeatherForecastOptions(
            latitude=10.5,
            longitude=20.5,
            temperature_unit="fahrenheit",
            windspeed_unit="kmh",
            precipitation_unit="mm",
            timezone="auto",
            hourly=HourlyOptions(),
            daily=DailyOptions(),
            current_weather=False,
            timeformat="iso8601",
            past_days=1,
        )
        assert options.current_weather is False
        assert options.temperature_unit == "fahrenheit"
        assert options.timezone == "auto"
        assert options.past_days == 1

    def test_collections_accept_names(self) -> None:
        """Plain lists of names are turned into collections."""
        options = WeatherForecastOptions(hourly=["cloudcover", "cloudcover"], daily=["sunset"])
        assert isinstance(options.hourly, HourlyOptions)
        assert isinstance(options.daily, DailyOptions)
        assert options.hourly.names() == ["cloudcover"]

    def test_daily_hourly_by_name(self) -> None:
        """Names can be added to the embedded collections."""
        options = WeatherForecastOptions(10.5, 20.5)
        options.daily.add("sunset")
        options.daily.add("sunrise")
        options.hourly.add("cloudcover_low")
        options.hourly.add("cloudcover_high")

        assert len(options.daily) == 2
        assert "sunrise" in options.daily
        assert DailyParameter.SUNSET in options.daily
        assert len(options.hourly) == 2
        assert HourlyParameter.CLOUDCOVER_HIGH in options.hourly

    def test_default_collections_not_shared(self) -> None:
        """Each bundle owns its own collections."""
        first = WeatherForecastOptions()
        second = WeatherForecastOptions()
        first.hourly.add("rain")
        assert len(second.hourly) == 0

    def test_with_coordinates_copies(self) -> None:
        """with_coordinates leaves the original untouched."""
        options = WeatherForecastOptions(hourly=["rain"], timezone="auto")
        moved = options.with_coordinates(52.52, 13.41)

        assert (moved.latitude, moved.longitude) == (52.52, 13.41)
        assert (options.latitude, options.longitude) == (0.0, 0.0)
        assert moved.timezone == "auto"
        moved.hourly.add("snowfall")
        assert options.hourly.names() == ["rain"]

    def test_current_all(self) -> None:
        """A bundle can request every current variable."""
        options = WeatherForecastOptions(current=CurrentOptions.all())
        assert options.current == CurrentOptions.all()


class TestGeocodingOptions:
    """Test geocoding bundle defaults."""

    def test_defaults(self) -> None:
        options = GeocodingOptions("Berlin")
        assert options.name == "Berlin"
        assert options.count == 0
        assert options.format == ""
        assert options.language == ""


class TestAirQualityOptions:
    """Test air-quality bundle defaults."""

    def test_defaults(self) -> None:
        options = AirQualityOptions()
        assert options.domains == "auto"
        assert options.timeformat == "iso8601"
        assert options.timezone == "GMT"
        assert isinstance(options.hourly, AirQualityHourlyOptions)
        assert len(options.hourly) == 0

    def test_hourly_all(self) -> None:
        options = AirQualityOptions(
            latitude=52.5235, longitude=13.4115, hourly=AirQualityHourlyOptions.all()
        )
        assert len(options.hourly) > 0
        assert options.copy().hourly == options.hourly
