"""Request helper: header merging, status handling, error taxonomy."""

import asyncio
import json
import logging

import httpx
import pytest

from adapters.http_client import build_async_client, make_request
from core.config import AppSettings
from core.errors import ApiDecodeError, ApiRequestError, ApiTransportError, HttpStatusError

URL = "https://api.test/posts/1"


def _request(handler, **kwargs):
    seen = []

    def recording(request):
        seen.append(request)
        return handler(request)

    async def scenario():
        settings = AppSettings(api_base_url="https://api.test", user_agent="tests/1.0")
        async with build_async_client(settings, transport=httpx.MockTransport(recording)) as client:
            return await make_request(client, URL, **kwargs)

    return asyncio.run(scenario()), seen


class TestHeaders:
    def test_default_content_type(self):
        _, seen = _request(lambda r: httpx.Response(200, json={}))
        assert seen[0].headers["content-type"] == "application/json"

    def test_caller_header_wins(self):
        _, seen = _request(
            lambda r: httpx.Response(200, json={}),
            headers={"content-type": "text/plain", "X-Trace": "abc"},
        )
        assert seen[0].headers["content-type"] == "text/plain"
        assert seen[0].headers["x-trace"] == "abc"

    def test_client_defaults(self):
        _, seen = _request(lambda r: httpx.Response(200, json={}))
        assert seen[0].headers["user-agent"] == "tests/1.0"
        assert seen[0].headers["accept"] == "application/json"


class TestResponses:
    def test_returns_decoded_json(self):
        result, _ = _request(lambda r: httpx.Response(200, json={"id": 1, "title": "x"}))
        assert result == {"id": 1, "title": "x"}

    def test_json_body_is_serialized(self):
        _, seen = _request(
            lambda r: httpx.Response(201, json={"id": 101}),
            method="post",
            json_body={"title": "t", "body": "b", "userId": 1},
        )
        assert seen[0].method == "POST"
        assert json.loads(seen[0].content) == {"title": "t", "body": "b", "userId": 1}

    def test_no_body_without_payload(self):
        _, seen = _request(lambda r: httpx.Response(200, json={}), method="DELETE")
        assert seen[0].content == b""

    def test_204_is_success_marker(self):
        # Body is not JSON: a parse attempt would fail.
        result, _ = _request(lambda r: httpx.Response(204, content=b"<not json>"))
        assert result == {"success": True}


class TestFailures:
    @pytest.mark.parametrize("status", [400, 404, 500, 503])
    def test_non_2xx_raises_with_status(self, status):
        with pytest.raises(HttpStatusError) as excinfo:
            _request(lambda r: httpx.Response(status, json={"error": "nope"}))
        assert excinfo.value.status_code == status
        assert str(status) in str(excinfo.value)
        assert excinfo.value.url == URL
        assert excinfo.value.method == "GET"

    def test_transport_error(self):
        def boom(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ApiTransportError, match="connection refused"):
            _request(boom)

    def test_invalid_json(self):
        with pytest.raises(ApiDecodeError):
            _request(lambda r: httpx.Response(200, content=b"{not json"))

    def test_all_failures_share_a_base(self):
        assert issubclass(HttpStatusError, ApiRequestError)
        assert issubclass(ApiTransportError, ApiRequestError)
        assert issubclass(ApiDecodeError, ApiRequestError)

    def test_failure_is_logged(self, caplog):
        with caplog.at_level(logging.ERROR, logger="adapters.http_client"):
            with pytest.raises(HttpStatusError):
                _request(lambda r: httpx.Response(404))
        assert "API request failed" in caplog.text
        assert "404" in caplog.text
