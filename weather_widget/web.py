# ABOUTME: ASGI web entry point for the weather widget UI.
# ABOUTME: Serves the search page and a JSON endpoint that submits queries and returns the rendered view.

import json
import logging
from contextlib import asynccontextmanager

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse
from starlette.routing import Route

from weather_widget.deps import WidgetDeps, create_http_client
from weather_widget.widget import WeatherWidget

logger = logging.getLogger(__name__)

PAGE = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Weather Widget</title>
</head>
<body>
<h1>Weather Widget</h1>
<p>Search for the Current Weather Conditions in your City.</p>
<form id="search">
  <input id="query" type="text" placeholder="Enter a City Name" autocomplete="off">
  <button id="submit" type="submit">Search</button>
</form>
<div id="error" hidden></div>
<div id="result" hidden>
  <div id="temperature"></div>
  <div id="condition"></div>
  <div id="location"></div>
</div>
<script>
const form = document.getElementById("search");
const button = document.getElementById("submit");

function show(view) {
  button.disabled = view.submit_disabled;
  button.textContent = view.button_label;
  const error = document.getElementById("error");
  error.hidden = !view.error;
  error.textContent = view.error || "";
  const result = document.getElementById("result");
  result.hidden = !view.lines;
  if (view.lines) {
    for (const key of ["temperature", "condition", "location"]) {
      document.getElementById(key).textContent = view.lines[key];
    }
  }
}

form.addEventListener("submit", async (event) => {
  event.preventDefault();
  show({submit_disabled: true, button_label: "Loading...", error: null, lines: null});
  const resp = await fetch("/api/weather", {
    method: "POST",
    headers: {"content-type": "application/json"},
    body: JSON.stringify({query: document.getElementById("query").value}),
  });
  show(await resp.json());
});
</script>
</body>
</html>
"""


class ViewResponse(JSONResponse):
    """JSON response with non-ASCII escaped, so any str the widget holds serializes."""

    def render(self, content) -> bytes:
        return json.dumps(content, ensure_ascii=True, allow_nan=False, separators=(",", ":")).encode("ascii")


def extract_query(body: bytes) -> str:
    """Pull the query string out of a JSON request body, or return an empty string."""
    try:
        data = json.loads(body)
        query = data.get("query", "")
        return query if isinstance(query, str) else ""
    except (ValueError, RecursionError, AttributeError):
        return ""


def create_app(widget: WeatherWidget | None = None, deps: WidgetDeps | None = None) -> Starlette:
    """Build the Starlette app around one widget instance.

    Without a widget, one is built from `deps` (or a fresh HTTP client) and the
    app closes that client on shutdown.
    """
    owned_client = None
    if widget is None:
        if deps is None:
            deps = WidgetDeps(http_client=create_http_client())
        owned_client = deps.http_client
        widget = WeatherWidget.from_deps(deps)

    @asynccontextmanager
    async def lifespan(app: Starlette):
        yield
        if owned_client is not None:
            await owned_client.aclose()

    async def index(request: Request) -> HTMLResponse:
        return HTMLResponse(PAGE)

    async def get_view(request: Request) -> ViewResponse:
        return ViewResponse(widget.render().model_dump())

    async def submit(request: Request) -> ViewResponse:
        query = extract_query(await request.body())
        await widget.submit(query)
        view = widget.render()
        if view.error:
            logger.info("Search for %r ended with error: %s", query, view.error)
        return ViewResponse(view.model_dump())

    return Starlette(
        routes=[
            Route("/", index, methods=["GET"]),
            Route("/api/weather", get_view, methods=["GET"]),
            Route("/api/weather", submit, methods=["POST"]),
        ],
        lifespan=lifespan,
    )


app = create_app()
