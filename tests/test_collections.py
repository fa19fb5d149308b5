"""
Tests for parameter vocabularies and option collections.
"""

from __future__ import annotations

import pytest

from open_meteo_client.exceptions import UnknownParameterError
from open_meteo_client.options import (
    AirQualityHourlyOptions,
    AirQualityHourlyParameter,
    CurrentOptions,
    CurrentParameter,
    DailyOptions,
    DailyParameter,
    HourlyOptions,
    HourlyParameter,
    Minutely15Options,
    Minutely15Parameter,
    ModelsOptions,
    ModelsParameter,
)

ALL_COLLECTIONS = [
    (CurrentOptions, CurrentParameter),
    (HourlyOptions, HourlyParameter),
    (DailyOptions, DailyParameter),
    (Minutely15Options, Minutely15Parameter),
    (ModelsOptions, ModelsParameter),
    (AirQualityHourlyOptions, AirQualityHourlyParameter),
]


class TestAll:
    """Test the all() factory."""

    @pytest.mark.parametrize(("collection_type", "parameter_type"), ALL_COLLECTIONS)
    def test_contains_every_member_in_declaration_order(
        self, collection_type: type, parameter_type: type
    ) -> None:
        """all() has one entry per member, in enum order."""
        options = collection_type.all()
        assert len(options) == len(parameter_type)
        assert list(options) == list(parameter_type)

    def test_returns_independent_collections(self) -> None:
        """Mutating one all() result leaves the next one untouched."""
        first = HourlyOptions.all()
        first.clear()
        assert len(HourlyOptions.all()) == len(HourlyParameter)

    def test_add_already_present_keeps_size(self) -> None:
        """Adding to a full collection changes nothing."""
        hourly = HourlyOptions.all()
        old_count = len(hourly)
        hourly.add(HourlyParameter.CLOUDCOVER)
        assert len(hourly) == old_count


class TestAdd:
    """Test insertion and deduplication."""

    def test_add_one_parameter(self) -> None:
        """A new collection is empty and grows by one on add."""
        options = HourlyOptions()
        assert len(options) == 0
        options.add(HourlyParameter.WINDDIRECTION_80M)
        assert len(options) == 1
        assert HourlyParameter.WINDDIRECTION_80M in options

    def test_duplicate_in_constructor(self) -> None:
        """Constructor input is deduplicated."""
        options = HourlyOptions(
            [HourlyParameter.SOIL_MOISTURE_3_9CM, HourlyParameter.SOIL_MOISTURE_3_9CM]
        )
        assert len(options) == 1

    def test_insertion_order_not_vocabulary_order(self) -> None:
        """Iteration follows the order values were added."""
        options = HourlyOptions()
        options.add(HourlyParameter.WINDSPEED_10M)
        options.add(HourlyParameter.CLOUDCOVER)
        options.add(HourlyParameter.TEMPERATURE_2M)
        assert options.names() == ["windspeed_10m", "cloudcover", "temperature_2m"]

    def test_size_equals_distinct_adds(self) -> None:
        """Any sequence of adds leaves exactly the distinct values."""
        sequence = ["rain_sum", "sunset", "rain_sum", "sunrise", "sunset", "rain_sum"]
        options = DailyOptions()
        for name in sequence:
            options.add(name)
        assert len(options) == 3
        assert options.names() == ["rain_sum", "sunset", "sunrise"]

    def test_re_add_keeps_position(self) -> None:
        """Re-adding an existing value does not move it."""
        options = DailyOptions(["sunset", "sunrise"])
        options.add("sunset")
        assert options.names() == ["sunset", "sunrise"]

    def test_add_returns_none(self) -> None:
        """add() gives no signal about duplicates."""
        options = CurrentOptions()
        assert options.add(CurrentParameter.RAIN) is None
        assert options.add(CurrentParameter.RAIN) is None


class TestStringNames:
    """Test the name-based convenience path."""

    def test_add_by_name(self) -> None:
        """Wire names are coerced to enum members."""
        options = DailyOptions()
        options.add("sunset")
        options.add("sunrise")
        assert len(options) == 2
        assert "sunrise" in options
        assert DailyParameter.SUNSET in options
        assert all(isinstance(p, DailyParameter) for p in options)

    def test_string_and_enum_are_same_member(self) -> None:
        """A name and its enum member never produce two entries."""
        options = HourlyOptions()
        options.add("cloudcover_low")
        options.add(HourlyParameter.CLOUDCOVER_LOW)
        assert len(options) == 1

    def test_unknown_name_raises(self) -> None:
        """Names outside the vocabulary fail loudly."""
        options = HourlyOptions()
        with pytest.raises(UnknownParameterError, match="not a valid hourly parameter"):
            options.add("not_a_variable")
        assert len(options) == 0

    def test_unknown_name_is_value_error(self) -> None:
        """UnknownParameterError can be caught as ValueError."""
        with pytest.raises(ValueError):
            CurrentOptions(["temperature_2m", "bogus"])

    def test_unknown_name_in_remove_raises(self) -> None:
        """remove() validates names too."""
        with pytest.raises(UnknownParameterError):
            DailyOptions().remove("bogus")

    def test_non_string_raises(self) -> None:
        """Non-string values are rejected."""
        with pytest.raises(UnknownParameterError):
            ModelsOptions().add(42)  # type: ignore[arg-type]

    def test_unknown_name_membership_is_false(self) -> None:
        """Membership tests never raise."""
        options = HourlyOptions.all()
        assert "bogus" not in options
        assert 3 not in options
        assert options.contains("cloudcover") is True


class TestRemoveAndClear:
    """Test removal."""

    def test_remove_present(self) -> None:
        """Removing a present value returns True."""
        options = CurrentOptions([CurrentParameter.RAIN, CurrentParameter.SNOWFALL])
        assert options.remove(CurrentParameter.RAIN) is True
        assert list(options) == [CurrentParameter.SNOWFALL]

    def test_remove_absent(self) -> None:
        """Removing an absent value returns False and changes nothing."""
        options = CurrentOptions([CurrentParameter.RAIN, CurrentParameter.SNOWFALL])
        assert options.remove(CurrentParameter.SHOWERS) is False
        assert list(options) == [CurrentParameter.RAIN, CurrentParameter.SNOWFALL]

    def test_clear(self) -> None:
        """clear() empties the collection."""
        options = AirQualityHourlyOptions.all()
        options.clear()
        assert len(options) == 0
        assert not options


class TestIndexing:
    """Test positional access."""

    def test_get(self) -> None:
        """Items are indexed in insertion order."""
        options = HourlyOptions(["cloudcover", "windspeed_10m"])
        assert options[0] is HourlyParameter.CLOUDCOVER
        assert options[1] is HourlyParameter.WINDSPEED_10M
        assert options[-1] is HourlyParameter.WINDSPEED_10M

    def test_get_out_of_range(self) -> None:
        """Out-of-range reads raise IndexError."""
        with pytest.raises(IndexError):
            HourlyOptions()[0]

    def test_set(self) -> None:
        """Assignment replaces in place."""
        options = HourlyOptions(["cloudcover", "windspeed_10m"])
        options[0] = "rain"
        assert options.names() == ["rain", "windspeed_10m"]

    def test_set_same_value(self) -> None:
        """Assigning the value already at that position is a no-op."""
        options = HourlyOptions(["cloudcover", "windspeed_10m"])
        options[1] = HourlyParameter.WINDSPEED_10M
        assert options.names() == ["cloudcover", "windspeed_10m"]

    def test_set_out_of_range(self) -> None:
        """Out-of-range writes raise IndexError."""
        options = HourlyOptions(["cloudcover"])
        with pytest.raises(IndexError):
            options[5] = "rain"

    def test_set_duplicate_rejected(self) -> None:
        """Assigning a value held elsewhere would duplicate it."""
        options = HourlyOptions(["cloudcover", "windspeed_10m"])
        with pytest.raises(ValueError, match="already selected"):
            options[0] = "windspeed_10m"
        assert options.names() == ["cloudcover", "windspeed_10m"]


class TestIteration:
    """Test iteration and comparison helpers."""

    def test_iteration_is_restartable(self) -> None:
        """Each iteration is a fresh pass."""
        options = DailyOptions(["sunrise", "sunset"])
        assert list(options) == list(options)

    def test_copy_is_independent(self) -> None:
        """copy() does not share storage."""
        options = DailyOptions(["sunrise"])
        other = options.copy()
        other.add("sunset")
        assert len(options) == 1
        assert len(other) == 2

    def test_equality(self) -> None:
        """Collections compare by vocabulary and order."""
        assert DailyOptions(["sunrise", "sunset"]) == DailyOptions(["sunrise", "sunset"])
        assert DailyOptions(["sunrise", "sunset"]) != DailyOptions(["sunset", "sunrise"])
        assert CurrentOptions(["rain"]) != HourlyOptions(["rain"])

    def test_repr(self) -> None:
        """repr shows the wire names."""
        assert repr(ModelsOptions(["icon_eu"])) == "ModelsOptions(['icon_eu'])"
