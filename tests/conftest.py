# ABOUTME: Shared test fixtures for the weather widget test suite.
# ABOUTME: Provides a fixed API key, a canned payload, a mock HTTP client factory, and a frozen clock.

from datetime import datetime
from unittest.mock import AsyncMock

import httpx
import pytest


@pytest.fixture(autouse=True)
def weather_api_env(monkeypatch):
    """Pin the API key and endpoint so no test depends on a local .env file."""
    monkeypatch.setenv("WEATHER_API_KEY", "test-key")
    monkeypatch.setenv("WEATHER_API_URL", "https://api.weatherapi.com/v1/current.json")


@pytest.fixture
def london_payload() -> dict:
    """A current.json body for London with extra fields the widget ignores."""
    return {
        "location": {"name": "London", "region": "City of London, Greater London", "country": "United Kingdom"},
        "current": {"temp_c": 5, "temp_f": 41.0, "condition": {"text": "Rain", "code": 1189}},
    }


@pytest.fixture
def make_client():
    """Factory for a mock httpx.AsyncClient whose get() returns one canned response."""

    def _make(json_data=None, status_code: int = 200, content: bytes | None = None) -> httpx.AsyncClient:
        mock = AsyncMock(spec=httpx.AsyncClient)
        request = httpx.Request("GET", "https://api.weatherapi.com/v1/current.json")
        if content is not None:
            response = httpx.Response(status_code=status_code, content=content, request=request)
        else:
            response = httpx.Response(status_code=status_code, json=json_data, request=request)
        mock.get.return_value = response
        return mock

    return _make


@pytest.fixture
def clock_at():
    """Factory for a clock callable frozen at a given local hour."""

    def _clock(hour: int):
        return lambda: datetime(2025, 1, 15, hour, 30)

    return _clock
