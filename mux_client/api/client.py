"""Async HTTP transport shared by every Mux resource.

WHY: Resource classes only know paths and verbs. Authentication, JSON
encoding, query serialization, response unwrapping and error translation
are the same for every endpoint, so they live in one transport object
that all resources share.

HOW: Uses httpx.AsyncClient with HTTP Basic auth (access token id and
secret). MuxHttp is an async context manager: enter it to open the
connection pool, exit to close it. Each verb helper sends exactly one
request and returns the decoded JSON body, unwrapped from Mux's
{"data": ...} envelope.

RULES:
- Always use the async context manager (async with MuxHttp(...) as http:)
- One call, one request: no retries, no caching
- Non-2xx responses raise MuxAPIError (or a status-specific subclass)
- Network errors (httpx.HTTPError) propagate unmodified
- List-valued query params are sent in bracket form: key[]=a&key[]=b
- Empty response bodies (e.g. 204 No Content) return None
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from mux_client.config import MUX_BASE_URL, MUX_CONNECT_TIMEOUT_S, MUX_TIMEOUT_S

logger = logging.getLogger(__name__)


class MuxAPIError(Exception):
    """Raised when the Mux API returns an error response.

    WHY: Callers need a typed exception to tell Mux errors apart from
    network errors or local validation failures.

    HOW: Carries the HTTP status code plus the error type and messages
    from Mux's {"error": {"type": ..., "messages": [...]}} body.

    RULES:
    - status_code and message are always set
    - error_type and messages are None/empty when the body is not JSON
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        error_type: str | None = None,
        messages: list[str] | None = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.error_type = error_type
        self.messages = messages or []
        super().__init__(f"Mux API error {status_code}: {message}")


class AuthenticationError(MuxAPIError):
    """401: the access token is missing, wrong, or revoked."""


class PermissionDeniedError(MuxAPIError):
    """403: the access token lacks the permission for this call."""


class NotFoundError(MuxAPIError):
    """404: the resource does not exist."""


class RateLimitError(MuxAPIError):
    """429: too many requests."""


_ERRORS_BY_STATUS: dict[int, type[MuxAPIError]] = {
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: NotFoundError,
    429: RateLimitError,
}


class MuxHttp:
    """Async transport for the Mux REST API.

    WHY: Gives every resource one authenticated way to talk to Mux
    without knowing about httpx, auth or response envelopes.

    HOW: Wraps httpx.AsyncClient. The optional `transport` argument is
    passed straight to httpx, which lets tests plug in
    httpx.MockTransport and observe requests.

    RULES:
    - Use as: async with MuxHttp(token_id, token_secret) as http: ...
    - base_url defaults to MUX_BASE_URL from config
    - timeout defaults to MUX_TIMEOUT_S from config
    """

    def __init__(
        self,
        token_id: str,
        token_secret: str,
        base_url: str | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._auth = (token_id, token_secret)
        self._base_url = (base_url or MUX_BASE_URL).rstrip("/")
        self._timeout = timeout if timeout is not None else MUX_TIMEOUT_S
        self._user_agent = user_agent
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> MuxHttp:
        headers = {"Accept": "application/json"}
        if self._user_agent:
            headers["User-Agent"] = self._user_agent
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            auth=self._auth,
            headers=headers,
            timeout=httpx.Timeout(self._timeout, connect=MUX_CONNECT_TIMEOUT_S),
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        await self.aclose()

    async def aclose(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    def _ensure_client(self) -> httpx.AsyncClient:
        """Return the active httpx client, raising if not in context manager."""
        if self._client is None:
            raise RuntimeError(
                "The Mux client must be used as an async context manager: "
                "async with Mux(...) as mux: ..."
            )
        return self._client

    # ------------------------------------------------------------------
    # Verb helpers
    # ------------------------------------------------------------------

    async def get(self, path: str, params: dict | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: dict | None = None) -> Any:
        return await self.request("POST", path, json=json)

    async def put(self, path: str, json: dict | None = None) -> Any:
        return await self.request("PUT", path, json=json)

    async def patch(self, path: str, json: dict | None = None) -> Any:
        return await self.request("PATCH", path, json=json)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)

    async def request(
        self,
        method: str,
        path: str,
        json: dict | None = None,
        params: dict | None = None,
    ) -> Any:
        """Send one request and return the unwrapped response body.

        Args:
            method: HTTP verb.
            path: API path starting with "/", e.g. "/video/v1/assets".
            json: Optional JSON request body.
            params: Optional query parameters. List values use bracket form.

        Returns:
            The "data" member of the JSON response when present, the whole
            decoded body otherwise, or None for an empty body.

        Raises:
            MuxAPIError: On non-2xx responses.
            RuntimeError: If called outside the async context manager.
        """
        client = self._ensure_client()
        logger.debug("%s %s", method, path)

        resp = await client.request(
            method,
            path,
            json=json,
            params=serialize_params(params),
        )

        if resp.is_error:
            error = error_from_response(resp)
            logger.warning("%s %s failed: %s", method, path, error)
            raise error

        if not resp.content:
            return None

        body = resp.json()
        if isinstance(body, dict) and "data" in body:
            return body["data"]
        return body


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def serialize_params(params: dict | None) -> list[tuple[str, Any]] | None:
    """Flatten query params into (key, value) pairs.

    WHY: The Mux Data API expects repeated array params with a bracket
    suffix (timeframe[]=...&timeframe[]=...), while httpx repeats the
    plain key by default.

    RULES:
    - None values are dropped
    - list/tuple values become one "key[]" pair per item
    - Returns None when there is nothing to send
    """
    if not params:
        return None

    pairs: list[tuple[str, Any]] = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((f"{key}[]", item) for item in value)
        else:
            pairs.append((key, value))
    return pairs or None


def error_from_response(resp: httpx.Response) -> MuxAPIError:
    """Build the MuxAPIError matching an error response."""
    error_type = None
    messages: list[str] = []
    try:
        body = resp.json()
    except ValueError:
        body = None

    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        error_type = body["error"].get("type")
        messages = [str(m) for m in body["error"].get("messages") or []]

    message = "; ".join(messages) or resp.text or resp.reason_phrase
    error_cls = _ERRORS_BY_STATUS.get(resp.status_code, MuxAPIError)
    return error_cls(resp.status_code, message, error_type, messages)
