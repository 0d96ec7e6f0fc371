"""
Argument validation shared by the catalog query operations.

Every check here runs before any request is made.
"""

from acnh_cli.exceptions import ValidationError
from acnh_cli.models.records import Weather

MIN_HOUR = 0
MAX_HOUR = 23

ASSET_FILE_EXTENSION = ".mp3"


def validate_hour(hour: int) -> int:
    """Ensures the hour is an integer in [MIN_HOUR, MAX_HOUR]."""
    if isinstance(hour, bool) or not isinstance(hour, int):
        raise ValidationError(f"hour must be an integer, got {hour!r}")
    if hour < MIN_HOUR or hour > MAX_HOUR:
        raise ValidationError(f"hour must be between {MIN_HOUR} and {MAX_HOUR}")
    return hour


def validate_weather(weather: Weather | str) -> Weather:
    """
    Coerces the argument to a Weather member.

    Accepts a member or its exact string value ("Sunny", "Rainy", "Snowy").
    """
    try:
        return Weather(weather)
    except ValueError:
        choices = ", ".join(w.value for w in Weather)
        raise ValidationError(f"weather must be one of {choices}, got {weather!r}") from None
