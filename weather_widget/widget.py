# ABOUTME: Input/state controller for the weather widget.
# ABOUTME: Owns query, result, error, and busy state; validates input and drives one fetch per submission.

import logging
from collections.abc import Awaitable, Callable
from datetime import datetime

from weather_widget.deps import WidgetDeps
from weather_widget.errors import FetchError
from weather_widget.formatters import Clock, format_condition, format_location, format_temperature
from weather_widget.models import ResultLines, WeatherResult, WidgetView
from weather_widget.weather_service import fetch_weather

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Please Enter a Valid Location"
NOT_FOUND_MESSAGE = "Not found. Please Try Again."

SEARCH_LABEL = "Search"
LOADING_LABEL = "Loading..."

Fetcher = Callable[[str], Awaitable[WeatherResult]]


class WeatherWidget:
    """State machine behind the search form.

    Every submission takes a new sequence number. Only the resolution that
    carries the latest number may write the result or error, so a slow
    response never overwrites a newer one. Fetches are never cancelled.
    """

    def __init__(self, fetcher: Fetcher, clock: Clock = datetime.now):
        self._fetcher = fetcher
        self._clock = clock
        self._sequence = 0
        self._in_flight = 0
        self.query = ""
        self.weather: WeatherResult | None = None
        self.error: str | None = None

    @classmethod
    def from_deps(cls, deps: WidgetDeps, clock: Clock = datetime.now) -> "WeatherWidget":
        """Build a widget whose fetcher calls the weather API through the deps' client."""

        async def fetcher(location: str) -> WeatherResult:
            return await fetch_weather(deps.http_client, location)

        return cls(fetcher, clock=clock)

    @property
    def is_loading(self) -> bool:
        return self._in_flight > 0

    def set_query(self, text: str) -> None:
        self.query = text

    async def submit(self, raw_query: str) -> None:
        """Validate the query and, if non-empty, fetch its current weather."""
        self.query = raw_query
        location = raw_query.strip()
        self._sequence += 1
        token = self._sequence

        if not location:
            self.error = EMPTY_INPUT_MESSAGE
            self.weather = None
            return

        self.error = None
        self._in_flight += 1
        try:
            result = await self._fetcher(location)
        except FetchError as e:
            if token != self._sequence:
                logger.debug("Discarding stale failure for %r (request %d)", location, token)
                return
            logger.warning("Weather lookup for %r failed (%s): %s", location, e.kind, e)
            self.error = NOT_FOUND_MESSAGE
            self.weather = None
        else:
            if token != self._sequence:
                logger.debug("Discarding stale result for %r (request %d)", location, token)
                return
            self.weather = result
        finally:
            self._in_flight -= 1

    def render(self) -> WidgetView:
        """Derive the display state; formatters run fresh on every call."""
        lines = None
        if self.weather is not None and self.error is None:
            lines = ResultLines(
                temperature=format_temperature(self.weather.temperature, self.weather.unit),
                condition=format_condition(self.weather.description),
                location=format_location(self.weather.location, clock=self._clock),
            )
        return WidgetView(
            query=self.query,
            is_loading=self.is_loading,
            button_label=LOADING_LABEL if self.is_loading else SEARCH_LABEL,
            submit_disabled=self.is_loading,
            error=self.error,
            lines=lines,
        )
