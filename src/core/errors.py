"""Error taxonomy for calls against the REST service.

Every failure detected by the request helper is one of these. They all carry
the request that failed so callers can report it without extra bookkeeping.
"""

from __future__ import annotations


class ApiRequestError(Exception):
    """Base class: a single API call did not produce a usable result."""

    def __init__(self, message: str, *, url: str | None = None, method: str | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.method = method


class HttpStatusError(ApiRequestError):
    """The service answered with a non-2xx status."""

    def __init__(self, status_code: int, *, url: str | None = None, method: str | None = None) -> None:
        super().__init__(f"HTTP error! status: {status_code}", url=url, method=method)
        self.status_code = status_code


class ApiTransportError(ApiRequestError):
    """The request never got a response (DNS, connection refused, timeout...)."""


class ApiDecodeError(ApiRequestError):
    """The response body was not valid JSON."""
