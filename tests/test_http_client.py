"""Tests for the shared MuxHttp transport.

WHY: Every resource relies on the transport for auth, envelope unwrapping
and error translation; a regression here breaks every endpoint at once.

HOW: MuxHttp is driven directly against an httpx.MockTransport, with
asyncio.run() wrapping each scenario.

RULES:
- Error statuses map to the documented MuxAPIError subclasses
- Network errors are not wrapped
"""

from __future__ import annotations

import asyncio
import base64

import httpx
import pytest

from mux_client.api.client import (
    AuthenticationError,
    MuxAPIError,
    MuxHttp,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    serialize_params,
)


def _request(handler, method="GET", path="/video/v1/assets", **kwargs):
    async def _run():
        async with MuxHttp(
            "token-id",
            "token-secret",
            base_url="https://api.example.test",
            user_agent="mux-python-client/test",
            transport=httpx.MockTransport(handler),
        ) as http:
            return await http.request(method, path, **kwargs)

    return asyncio.run(_run())


class TestRequests:
    def test_sends_basic_auth_and_headers(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"data": []})

        _request(handler)

        expected = "Basic " + base64.b64encode(b"token-id:token-secret").decode()
        assert seen[0].headers["Authorization"] == expected
        assert seen[0].headers["User-Agent"] == "mux-python-client/test"
        assert seen[0].url.host == "api.example.test"

    def test_unwraps_data_envelope(self):
        result = _request(lambda r: httpx.Response(200, json={"data": {"id": "a"}}))
        assert result == {"id": "a"}

    def test_returns_body_without_envelope(self):
        result = _request(lambda r: httpx.Response(200, json={"id": "a"}))
        assert result == {"id": "a"}

    def test_empty_body_returns_none(self):
        assert _request(lambda r: httpx.Response(204), method="DELETE") is None

    def test_json_body_is_sent(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(201, json={"data": {"id": "new"}})

        result = _request(handler, method="POST", json={"input": "https://x"})

        assert seen[0].headers["Content-Type"] == "application/json"
        assert result == {"id": "new"}

    def test_outside_context_manager_raises(self):
        http = MuxHttp("token-id", "token-secret")
        with pytest.raises(RuntimeError, match="async context manager"):
            asyncio.run(http.get("/video/v1/assets"))


class TestErrors:
    @pytest.mark.parametrize(
        "status,error_cls",
        [
            (400, MuxAPIError),
            (401, AuthenticationError),
            (403, PermissionDeniedError),
            (404, NotFoundError),
            (429, RateLimitError),
            (500, MuxAPIError),
        ],
    )
    def test_status_maps_to_error_class(self, status, error_cls):
        body = {"error": {"type": "invalid_parameters", "messages": ["Bad thing.", "Other thing."]}}

        with pytest.raises(error_cls) as exc_info:
            _request(lambda r: httpx.Response(status, json=body))

        err = exc_info.value
        assert type(err) is error_cls
        assert err.status_code == status
        assert err.error_type == "invalid_parameters"
        assert err.messages == ["Bad thing.", "Other thing."]
        assert err.message == "Bad thing.; Other thing."

    def test_non_json_error_uses_text(self):
        with pytest.raises(MuxAPIError) as exc_info:
            _request(lambda r: httpx.Response(502, text="Bad Gateway from proxy"))

        assert exc_info.value.message == "Bad Gateway from proxy"
        assert exc_info.value.error_type is None
        assert "502" in str(exc_info.value)

    def test_network_errors_pass_through(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(httpx.ConnectError):
            _request(handler)


class TestSerializeParams:
    def test_none_and_empty(self):
        assert serialize_params(None) is None
        assert serialize_params({}) is None
        assert serialize_params({"page": None}) is None

    def test_lists_use_brackets(self):
        pairs = serialize_params({"limit": 10, "timeframe": ["1:hours"], "filters": ("a:b", "c:d")})
        assert pairs == [
            ("limit", 10),
            ("timeframe[]", "1:hours"),
            ("filters[]", "a:b"),
            ("filters[]", "c:d"),
        ]
