"""Top-level Mux client.

WHY: Callers want one object that holds their credentials and exposes the
whole API: mux.video.live_streams.create(...), mux.data.metrics.overall(...).
The JWT and webhook helpers need no credentials, so they hang off the
class itself.

HOW: Mux resolves credentials (explicit arguments, else the environment),
builds a single MuxHttp transport and hands it to the Video and Data
namespaces. Entering the async context manager opens the transport's
connection pool; exiting closes it.

RULES:
- Use as: async with Mux(token_id, token_secret) as mux: ...
- Missing credentials raise ValueError at construction
- Mux.jwt and Mux.webhooks are usable without an instance
"""

from __future__ import annotations

import httpx

from mux_client import __version__
from mux_client.api.client import MuxHttp
from mux_client.config import load_credentials
from mux_client.data import Data
from mux_client.helpers.signing import JWT
from mux_client.helpers.webhooks import Webhooks
from mux_client.video import Video


def build_user_agent(platform: dict | None = None) -> str:
    """Return the User-Agent header value, with optional platform info.

    platform is {"name": ..., "version": ...} describing the integration
    built on top of this client.
    """
    user_agent = f"mux-python-client/{__version__}"
    if platform and platform.get("name"):
        user_agent += " ({}{})".format(
            platform["name"],
            "/{}".format(platform["version"]) if platform.get("version") else "",
        )
    return user_agent


class Mux:
    """Client for the Mux Video and Mux Data APIs.

    Example:
        async with Mux("token-id", "token-secret") as mux:
            streams = await mux.video.live_streams.list()
            views = await mux.data.video_views.list({"timeframe": ["24:hours"]})

        token = Mux.jwt.sign_playback_id(playback_id, type="thumbnail")
    """

    jwt = JWT
    webhooks = Webhooks

    def __init__(
        self,
        token_id: str | None = None,
        token_secret: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        platform: dict | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._token_id, self._token_secret = load_credentials(token_id, token_secret)
        self.http = MuxHttp(
            self._token_id,
            self._token_secret,
            base_url=base_url,
            timeout=timeout,
            user_agent=build_user_agent(platform),
            transport=transport,
        )
        self.video = Video(self.http)
        self.data = Data(self.http)

    async def __aenter__(self) -> Mux:
        await self.http.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        await self.http.aclose()
