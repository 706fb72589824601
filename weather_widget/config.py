# ABOUTME: Environment-driven configuration for the weather widget.
# ABOUTME: Loads .env once at import; the API key is re-read on every fetch call.

import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_WEATHER_API_URL = "https://api.weatherapi.com/v1/current.json"

WIDGET_HOST = os.getenv("WIDGET_HOST", "127.0.0.1")
WIDGET_PORT = int(os.getenv("WIDGET_PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def get_weather_api_key() -> str:
    """Return the WeatherAPI.com key from the environment, or an empty string."""
    return os.environ.get("WEATHER_API_KEY", "")


def get_weather_api_url() -> str:
    return os.environ.get("WEATHER_API_URL", DEFAULT_WEATHER_API_URL)
