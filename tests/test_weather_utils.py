"""Tests for weather utility functions."""

from __future__ import annotations

import pytest

from open_meteo_client.weather_utils import (
    INVALID_WEATHERCODE,
    WMO_CONDITIONS,
    weathercode_to_string,
)


class TestWeathercodeToString:
    """Test WMO code descriptions."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            (0, "Clear sky"),
            (1, "Mainly clear"),
            (2, "Partly cloudy"),
            (3, "Overcast"),
            (48, "Depositing rime Fog"),
            (51, "Light drizzle"),
            (53, "Moderate drizzle"),
            (77, "Snow grains"),
            (96, "Thunderstorm with light hail"),
            (99, "Thunderstorm with heavy hail"),
        ],
    )
    def test_known_codes(self, code: int, expected: str) -> None:
        assert weathercode_to_string(code) == expected

    @pytest.mark.parametrize("code", [100, -1, 4, 50, 98])
    def test_unknown_codes(self, code: int) -> None:
        assert weathercode_to_string(code) == "Invalid weathercode"

    def test_table_size(self) -> None:
        """28 WMO codes are described."""
        assert len(WMO_CONDITIONS) == 28
        assert INVALID_WEATHERCODE not in WMO_CONDITIONS.values()
