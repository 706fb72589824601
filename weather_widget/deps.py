# ABOUTME: Dependency container for the weather widget using Pydantic BaseModel.
# ABOUTME: Holds the httpx.AsyncClient the fetcher uses to call the weather API.

import httpx
from pydantic import BaseModel, ConfigDict


class WidgetDeps(BaseModel):
    """Dependencies injected into the widget controller."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient


def create_http_client() -> httpx.AsyncClient:
    """Create the httpx client used for weather lookups.

    No retry transport: each submission makes exactly one request.
    """
    return httpx.AsyncClient()
