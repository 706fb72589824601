# ABOUTME: Pydantic BaseModels for the WeatherAPI.com payload and widget state.
# ABOUTME: Defines the raw current-conditions shape, WeatherResult, and the rendered view.

from pydantic import BaseModel, ConfigDict


class Condition(BaseModel):
    """Condition block nested in the current-conditions payload."""

    text: str


class CurrentConditions(BaseModel):
    """The `current` object from the current-conditions endpoint."""

    temp_c: float
    condition: Condition


class LocationInfo(BaseModel):
    """The `location` object from the current-conditions endpoint."""

    name: str


class CurrentWeatherResponse(BaseModel):
    """Parsed response from the WeatherAPI.com current.json endpoint.

    Only the fields the widget reads are declared; everything else is ignored.
    """

    current: CurrentConditions
    location: LocationInfo


class WeatherResult(BaseModel):
    """Display-ready outcome of one successful fetch."""

    model_config = ConfigDict(frozen=True)

    temperature: float
    description: str
    location: str
    unit: str = "C"


class ResultLines(BaseModel):
    """The three messages shown under the search form for a result."""

    temperature: str
    condition: str
    location: str


class WidgetView(BaseModel):
    """Everything the UI needs to draw the widget at one instant."""

    query: str
    is_loading: bool
    button_label: str
    submit_disabled: bool
    error: str | None = None
    lines: ResultLines | None = None
