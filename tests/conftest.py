"""Shared test fixtures for the mux_client test suite.

WHY: Almost every test needs a Mux client whose requests are captured
instead of sent, plus a way to await a call inside the client's context
manager from a synchronous test.

HOW: RecordingTransport is the handler behind an httpx.MockTransport. It
stores every request and answers with queued responses (or a default
{"data": {"id": "abc123"}} envelope). run_with() drives a coroutine via
asyncio.run(), the same way the CLI does.

RULES:
- No test ever reaches the network
- Each test gets a fresh recorder and client (no shared state)
"""

from __future__ import annotations

import asyncio
import json
from typing import Any, Awaitable, Callable, List

import httpx
import pytest

from mux_client import Mux

DEFAULT_BODY = {"data": {"id": "abc123"}}


class RecordingTransport:
    """Capture requests and reply with queued httpx.Response objects."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.responses: List[httpx.Response] = []

    def queue(self, status_code: int = 200, **kwargs: Any) -> None:
        self.responses.append(httpx.Response(status_code, **kwargs))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.responses:
            return self.responses.pop(0)
        return httpx.Response(200, json=DEFAULT_BODY)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        content = self.last.content
        return json.loads(content) if content else None


def run_with(mux: Mux, call: Callable[[Mux], Awaitable[Any]]) -> Any:
    """Open the client, await call(mux), close the client, return the result."""

    async def _run() -> Any:
        async with mux:
            return await call(mux)

    return asyncio.run(_run())


@pytest.fixture
def recorder() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def mux(recorder: RecordingTransport) -> Mux:
    """A Mux client wired to the recording transport."""
    return Mux("test-token", "test-secret", transport=httpx.MockTransport(recorder.handler))


@pytest.fixture
def call(mux: Mux) -> Callable[[Callable[[Mux], Awaitable[Any]]], Any]:
    """Await one call on the recording client: call(lambda m: m.video.assets.get("x"))."""
    return lambda fn: run_with(mux, fn)
