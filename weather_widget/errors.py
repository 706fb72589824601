# ABOUTME: Tagged error taxonomy for weather fetch failures.
# ABOUTME: Every failure kind collapses to one user-facing message in the widget.


class FetchError(Exception):
    """Base class for any failure while fetching current weather."""

    kind = "fetch"


class NetworkError(FetchError):
    """The request never produced a response (connection, timeout, bad URL)."""

    kind = "network"


class HttpStatusError(FetchError):
    """The API answered with a non-success status code."""

    kind = "http_status"

    def __init__(self, status_code: int, message: str = ""):
        super().__init__(message or f"Weather API returned HTTP {status_code}")
        self.status_code = status_code


class DecodeError(FetchError):
    """The response body was not JSON or did not have the expected shape."""

    kind = "decode"
