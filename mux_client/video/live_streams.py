"""Mux Video live streams resource.

WHY: Live streams are the ingest side of Mux Video. Besides plain CRUD,
they carry playback IDs, simulcast targets and embedded subtitle
settings, each with its own sub-path.

HOW: Every method checks its required identifiers, builds the path under
/video/v1/live-streams and makes exactly one call on the shared
transport, returning its result unmodified.

RULES:
- Missing identifiers raise MissingParameterError before any request
- One method, one request; no retries or caching here
"""

from __future__ import annotations

from typing import Any

from mux_client.base import Base, MissingParameterError, require, require_params

PATH = "/video/v1/live-streams"


def build_base_path(live_stream_id: str) -> str:
    """Return the path of a single live stream."""
    return f"{PATH}/{live_stream_id}"


class LiveStreams(Base):
    """Access to the Mux Video live streams API.

    Example:
        async with Mux(token_id, token_secret) as mux:
            stream = await mux.video.live_streams.create({
                "playback_policy": "public",
                "new_asset_settings": {"playback_policy": "public"},
            })
    """

    async def create(self, params: dict | None = None) -> dict:
        """Create a live stream.

        Args:
            params: Live stream JSON parameters (playback_policy,
                new_asset_settings, reconnect_window, ...).

        Returns:
            The created live stream object.
        """
        return await self.http.post(PATH, params)

    async def update(self, live_stream_id: str, params: dict | None) -> dict:
        """Update an existing live stream with new parameters (PATCH)."""
        require(live_stream_id, "A live stream ID is required to update a live stream")
        require_params(params, "Params are required to update a live stream")
        return await self.http.patch(build_base_path(live_stream_id), params)

    async def delete(self, live_stream_id: str) -> Any:
        """Delete a live stream."""
        require(live_stream_id, "A live stream ID is required to delete a live stream")
        return await self.http.delete(build_base_path(live_stream_id))

    del_ = delete

    async def get(self, live_stream_id: str) -> dict:
        require(live_stream_id, "A live stream ID is required to get a live stream")
        return await self.http.get(build_base_path(live_stream_id))

    async def list(self, params: dict | None = None) -> list[dict]:
        """List the live streams of the environment tied to the access token.

        Args:
            params: Optional query params, e.g. {"limit": 25, "page": 2}.
        """
        return await self.http.get(PATH, params=params)

    async def signal_complete(self, live_stream_id: str) -> Any:
        """Signal that a live stream is finished.

        Mux stops waiting for a reconnect and finalizes the recorded asset.
        """
        require(
            live_stream_id,
            "A live stream ID is required to signal a stream is complete",
        )
        return await self.http.put(f"{build_base_path(live_stream_id)}/complete")

    async def reset_stream_key(self, live_stream_id: str) -> dict:
        """Reset the stream key of a live stream.

        The current key stops working immediately; the response carries
        the new key to use for future broadcasts.
        """
        require(live_stream_id, "A live stream ID is required to reset a live stream key")
        return await self.http.post(f"{build_base_path(live_stream_id)}/reset-stream-key")

    # ------------------------------------------------------------------
    # Playback IDs
    # ------------------------------------------------------------------

    async def create_playback_id(self, live_stream_id: str, params: dict | None) -> dict:
        """Create a playback ID for a live stream.

        Args:
            live_stream_id: The ID of the live stream.
            params: Playback ID parameters, e.g. {"policy": "public"}.
        """
        require(
            live_stream_id,
            "A live stream ID is required to create a live stream playback ID",
        )
        require_params(
            params,
            "A playback policy is required to create a live stream playback ID",
        )
        return await self.http.post(f"{build_base_path(live_stream_id)}/playback-ids", params)

    async def delete_playback_id(self, live_stream_id: str, playback_id: str) -> Any:
        require(
            live_stream_id,
            "A live stream ID is required to delete a live stream playback ID",
        )
        require(
            playback_id,
            "A live stream playback ID is required to delete a live stream playback ID",
        )
        return await self.http.delete(
            f"{build_base_path(live_stream_id)}/playback-ids/{playback_id}"
        )

    async def playback_id(self, live_stream_id: str, playback_id: str) -> dict:
        """Return one playback ID of a live stream."""
        require(live_stream_id, "A live stream ID is required")
        require(playback_id, "A playback ID is required")
        return await self.http.get(
            f"{build_base_path(live_stream_id)}/playback-ids/{playback_id}"
        )

    # ------------------------------------------------------------------
    # Simulcast targets
    # ------------------------------------------------------------------

    async def create_simulcast_target(self, live_stream_id: str, params: dict | None) -> dict:
        """Create a simulcast target that restreams to a third-party service.

        Args:
            live_stream_id: The ID of the live stream.
            params: Target parameters. "url" is required; "stream_key" and
                "passthrough" are optional.

        Example:
            await mux.video.live_streams.create_simulcast_target(stream_id, {
                "url": "rtmp://live.example.com/app",
                "stream_key": "difvbfgi",
                "passthrough": "Example Live Streaming service",
            })
        """
        require(
            live_stream_id,
            "A live stream ID is required to create a simulcast target",
        )
        if not (params and params.get("url")):
            raise MissingParameterError("A url is required to create a simulcast target")
        return await self.http.post(
            f"{build_base_path(live_stream_id)}/simulcast-targets", params
        )

    async def get_simulcast_target(self, live_stream_id: str, simulcast_target_id: str) -> dict:
        require(live_stream_id, "A live stream ID is required to get a simulcast target")
        require(
            simulcast_target_id,
            "A simulcast target ID is required to get a simulcast target",
        )
        return await self.http.get(
            f"{build_base_path(live_stream_id)}/simulcast-targets/{simulcast_target_id}"
        )

    async def delete_simulcast_target(self, live_stream_id: str, simulcast_target_id: str) -> Any:
        require(live_stream_id, "A live stream ID is required to delete a simulcast target")
        require(
            simulcast_target_id,
            "A simulcast target ID is required to delete a simulcast target",
        )
        return await self.http.delete(
            f"{build_base_path(live_stream_id)}/simulcast-targets/{simulcast_target_id}"
        )

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    async def update_embedded_subtitles(self, live_stream_id: str, params: dict | None) -> dict:
        """Configure a live stream to receive embedded closed captions.

        The resulting asset's subtitle text track has closed_captions set.

        Args:
            live_stream_id: The ID of the live stream.
            params: {"embedded_subtitles": [{"name": ..., "language_code": ...,
                "language_channel": "cc1"}]}. An empty list turns them off.
        """
        require(
            live_stream_id,
            "A live stream ID is required to update embedded subtitles",
        )
        require_params(params, "Params are required to update embedded subtitles")
        return await self.http.put(
            f"{build_base_path(live_stream_id)}/embedded-subtitles", params
        )

    async def disable(self, live_stream_id: str) -> Any:
        """Disable a live stream; new connections are refused until enabled."""
        require(live_stream_id, "A live stream ID is required to disable a live stream")
        return await self.http.put(f"{build_base_path(live_stream_id)}/disable")

    async def enable(self, live_stream_id: str) -> Any:
        require(live_stream_id, "A live stream ID is required to enable a live stream")
        return await self.http.put(f"{build_base_path(live_stream_id)}/enable")
