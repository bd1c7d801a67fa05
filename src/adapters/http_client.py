"""httpx wrapper.

Why a wrapper:
- `build_async_client` standardizes timeout, headers and redirects so every
  resource behaves the same way.
- `make_request` is the single place that turns an HTTP exchange into either
  decoded JSON or one of the `core.errors` exceptions, and the single place
  that logs failures.
- Tests swap the network for `httpx.MockTransport` through one parameter.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

import httpx

from core.config import AppSettings, get_settings
from core.errors import ApiDecodeError, ApiRequestError, ApiTransportError, HttpStatusError

logger = logging.getLogger(__name__)

DEFAULT_HEADERS: dict[str, str] = {"Content-Type": "application/json"}

NO_CONTENT_RESULT: dict[str, Any] = {"success": True}


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the application's defaults.

    `transport` lets tests (or callers with special needs) plug in a custom
    transport such as `httpx.MockTransport`.
    """

    settings = settings or get_settings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def _fail(error: ApiRequestError) -> ApiRequestError:
    logger.error("API request failed: %s %s: %s", error.method, error.url, error)
    return error


async def make_request(
    client: httpx.AsyncClient,
    url: str,
    *,
    method: str = "GET",
    headers: Mapping[str, str] | None = None,
    json_body: Any = None,
) -> Any:
    """Perform one request and return the decoded JSON body.

    Caller headers are merged over `DEFAULT_HEADERS` (caller wins). A 204
    answer yields `{"success": True}` without touching the body.

    Raises:
        HttpStatusError: the status is not 2xx.
        ApiTransportError: no response was received.
        ApiDecodeError: the body is not valid JSON.
    """

    method = method.upper()
    merged = httpx.Headers(DEFAULT_HEADERS)
    if headers:
        merged.update(headers)
    content = json.dumps(json_body) if json_body is not None else None

    logger.debug("%s %s", method, url)
    try:
        response = await client.request(method, url, headers=merged, content=content)
    except httpx.HTTPError as exc:
        raise _fail(ApiTransportError(str(exc) or type(exc).__name__, url=url, method=method)) from exc

    if not response.is_success:
        raise _fail(HttpStatusError(response.status_code, url=url, method=method))

    if response.status_code == 204:
        return dict(NO_CONTENT_RESULT)

    try:
        return response.json()
    except ValueError as exc:
        raise _fail(ApiDecodeError(f"Invalid JSON in response: {exc}", url=url, method=method)) from exc
