"""Mux API client: async Python access to the Mux Video and Data APIs.

WHY: The Mux REST API is large but uniform: named resources, each a handful
of endpoints. This package maps every endpoint to one awaitable method so
callers never build paths or handle auth themselves.

HOW: Three layers: a shared httpx transport (api.client), thin resource
classes that validate identifiers and build paths (video/, data/), and the
Mux object tying them together. Signing and webhook helpers live in
helpers/.

RULES:
- Every resource method issues at most one HTTP request
- Missing identifiers fail locally with MissingParameterError
- API errors surface as MuxAPIError; network errors pass through
"""

__version__ = "0.1.0"

from mux_client.api.client import (  # noqa: E402
    AuthenticationError,
    MuxAPIError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
)
from mux_client.base import MissingParameterError  # noqa: E402
from mux_client.helpers.webhooks import WebhookVerificationError  # noqa: E402
from mux_client.mux import Mux  # noqa: E402

__all__ = [
    "AuthenticationError",
    "MissingParameterError",
    "Mux",
    "MuxAPIError",
    "NotFoundError",
    "PermissionDeniedError",
    "RateLimitError",
    "WebhookVerificationError",
    "__version__",
]
