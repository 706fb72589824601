# ABOUTME: Service layer for the WeatherAPI.com current-conditions call.
# ABOUTME: Maps the raw payload into WeatherResult and classifies every failure as a FetchError.

import logging

import httpx

from weather_widget import config
from weather_widget.errors import DecodeError, HttpStatusError, NetworkError
from weather_widget.models import CurrentWeatherResponse, WeatherResult

logger = logging.getLogger(__name__)

CELSIUS = "C"


async def fetch_weather(client: httpx.AsyncClient, location: str, api_key: str | None = None) -> WeatherResult:
    """Fetch current conditions for a location from WeatherAPI.com.

    The location is sent as-is in the `q` parameter. Any non-2xx status is a
    failure regardless of the body.

    Raises:
        NetworkError: The request could not be built or sent, or no response arrived.
        HttpStatusError: The API answered with a non-success status.
        DecodeError: The body was not JSON or lacked the expected fields.
    """
    if api_key is None:
        api_key = config.get_weather_api_key()
    url = config.get_weather_api_url()
    logger.debug("Fetching current weather for %r from %s", location, url)

    try:
        resp = await client.get(url, params={"key": api_key, "q": location})
        resp.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise HttpStatusError(e.response.status_code) from e
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
        # ValueError covers params httpx cannot encode, e.g. lone surrogates
        raise NetworkError(f"Weather API request failed: {e}") from e

    try:
        return parse_current_weather(resp.json())
    except ValueError as e:
        raise DecodeError(f"Unexpected weather API payload: {e}") from e


def parse_current_weather(data: dict) -> WeatherResult:
    """Map a current.json payload into a WeatherResult with the unit fixed to Celsius."""
    parsed = CurrentWeatherResponse.model_validate(data)
    return WeatherResult(
        temperature=parsed.current.temp_c,
        description=parsed.current.condition.text,
        location=parsed.location.name,
        unit=CELSIUS,
    )
