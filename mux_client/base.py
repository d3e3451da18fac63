"""Shared base class for Mux API resources.

WHY: Every resource (live streams, assets, video views, ...) talks to the
API through the same transport and validates its arguments the same way.

HOW: Base stores the shared MuxHttp transport on self.http. The require()
helper raises MissingParameterError when an identifier or params object
is absent, so resource methods fail before any request is sent.

RULES:
- Identifiers are missing when falsy (None or "")
- Params objects are missing only when None; an empty dict is allowed
"""

from __future__ import annotations

from typing import Any

from mux_client.api.client import MuxHttp


class MissingParameterError(ValueError):
    """Raised when a required identifier or params object is missing.

    RULES:
    - Raised before any API call is made
    - The message names the missing value and the attempted action
    """


def require(value: Any, message: str) -> None:
    """Raise MissingParameterError(message) if an identifier is empty."""
    if not value:
        raise MissingParameterError(message)


def require_params(params: dict | None, message: str) -> None:
    """Raise MissingParameterError(message) if params is None."""
    if params is None:
        raise MissingParameterError(message)


class Base:
    """Base class for resources; holds the shared HTTP transport."""

    def __init__(self, http: MuxHttp) -> None:
        self.http = http
