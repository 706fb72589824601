# ABOUTME: Pure message formatters for the temperature, condition, and location lines.
# ABOUTME: Temperature banding, a fixed condition lookup, and a clock-driven day/night qualifier.

from collections.abc import Callable
from datetime import datetime

Clock = Callable[[], datetime]

CONDITION_MESSAGES: dict[str, str] = {
    "sunny": "It's a Beautiful Sunny Day!",
    "partly cloudy": "Expect some Clouds and Sunshine.",
    "cloudy": "It's cloudy today.",
    "overcast": "The sky is Overcast.",
    "rain": "Don't forget your Umbrella! It's raining.",
    "thunderstorm": "Thunderstorms are expected today.",
    "snow": "Bundle up! It's Snowing.",
    "mist": "It's misty outside.",
    "fog": "Be careful, there's fog outside.",
}

NIGHT_STARTS_AT = 18
DAY_STARTS_AT = 6


def _number(value: float) -> str:
    """Render a number as supplied: 5.0 prints as 5, 12.3 as 12.3."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_temperature(temperature: float, unit: str) -> str:
    """Describe a temperature, banded for Celsius and passed through otherwise.

    Bands are half-open and checked in order: below 0, below 10, below 20,
    below 30, and everything from 30 up.
    """
    t = _number(temperature)
    if unit != "C":
        return f"{t}°{unit}"
    if temperature < 0:
        return f"It's freezing at {t}°C! Bundle up!"
    if temperature < 10:
        return f"It's quite cold at {t}°C! Wear Warm Clothes."
    if temperature < 20:
        return f"The temperature is {t}°C. Comfortable for a Light Jacket."
    if temperature < 30:
        return f"It's a pleasant {t}°C. Enjoy the nice weather!"
    return f"It's hot at {t}°C. Stay hydrated!"


def format_condition(description: str) -> str:
    """Turn a known condition into a sentence; unknown text comes back unchanged."""
    return CONDITION_MESSAGES.get(description.lower(), description)


def is_night(hour: int) -> bool:
    return hour >= NIGHT_STARTS_AT or hour < DAY_STARTS_AT


def format_location(location: str, clock: Clock = datetime.now) -> str:
    """Qualify a location with the time of day read from `clock` at call time.

    The hour comes from the caller's local clock, not the location's timezone.
    """
    if is_night(clock().hour):
        return f"{location} at Night"
    return f"{location} During the Day"
