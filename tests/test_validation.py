"""Tests for query argument validation."""

import pytest

from acnh_cli.catalog.validation import validate_hour, validate_weather
from acnh_cli.exceptions import ValidationError
from acnh_cli.models import Weather


@pytest.mark.parametrize("hour", [0, 12, 23])
def test_validate_hour_accepts_range(hour):
    assert validate_hour(hour) == hour


@pytest.mark.parametrize("hour", [-1, 24, 100, -24])
def test_validate_hour_rejects_out_of_range(hour):
    with pytest.raises(ValidationError, match="between 0 and 23"):
        validate_hour(hour)


@pytest.mark.parametrize("hour", ["18", 18.0, None, True])
def test_validate_hour_rejects_non_integers(hour):
    with pytest.raises(ValidationError):
        validate_hour(hour)


def test_validate_weather_accepts_members_and_values():
    assert validate_weather(Weather.RAINY) is Weather.RAINY
    assert validate_weather("Snowy") is Weather.SNOWY


@pytest.mark.parametrize("weather", ["sunny", "Foggy", "", None, 3])
def test_validate_weather_rejects_unknown(weather):
    with pytest.raises(ValidationError, match="Sunny, Rainy, Snowy"):
        validate_weather(weather)
