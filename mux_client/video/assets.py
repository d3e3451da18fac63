"""Mux Video assets resource.

WHY: Assets are the stored, playable videos in Mux: uploads, ingested
URLs and recorded live streams all end up as assets.

HOW: Same pattern as the other resources: validate, build the path under
/video/v1/assets, make one call on the shared transport.

RULES:
- Missing identifiers or params raise MissingParameterError before any request
"""

from __future__ import annotations

from typing import Any

from mux_client.base import Base, require, require_params

PATH = "/video/v1/assets"


def build_base_path(asset_id: str) -> str:
    return f"{PATH}/{asset_id}"


class Assets(Base):
    """Access to the Mux Video assets API.

    Example:
        async with Mux(token_id, token_secret) as mux:
            asset = await mux.video.assets.create({
                "input": "https://storage.googleapis.com/muxdemofiles/mux-video-intro.mp4",
                "playback_policy": ["public"],
            })
    """

    async def create(self, params: dict | None) -> dict:
        """Create an asset from an input URL.

        Args:
            params: Asset JSON parameters; "input" is the source URL.
        """
        require_params(params, "Params are required for creating an asset")
        return await self.http.post(PATH, params)

    async def update(self, asset_id: str, params: dict | None) -> dict:
        require(asset_id, "An asset ID is required to update an asset")
        require_params(params, "Params are required to update an asset")
        return await self.http.patch(build_base_path(asset_id), params)

    async def delete(self, asset_id: str) -> Any:
        require(asset_id, "An asset ID is required to delete an asset")
        return await self.http.delete(build_base_path(asset_id))

    del_ = delete

    async def get(self, asset_id: str) -> dict:
        require(asset_id, "An asset ID is required to get an asset")
        return await self.http.get(build_base_path(asset_id))

    async def input_info(self, asset_id: str) -> list[dict]:
        """Return information about the input file(s) used to create an asset."""
        require(asset_id, "An asset ID is required to get input-info")
        return await self.http.get(f"{build_base_path(asset_id)}/input-info")

    async def list(self, params: dict | None = None) -> list[dict]:
        """List assets, e.g. list({"limit": 10, "page": 1})."""
        return await self.http.get(PATH, params=params)

    # ------------------------------------------------------------------
    # Playback IDs
    # ------------------------------------------------------------------

    async def create_playback_id(self, asset_id: str, params: dict | None) -> dict:
        """Create a playback ID for an asset, e.g. {"policy": "signed"}."""
        require(asset_id, "An asset ID is required to create a playback ID")
        require_params(params, "A playback policy is required to create a playback ID")
        return await self.http.post(f"{build_base_path(asset_id)}/playback-ids", params)

    async def delete_playback_id(self, asset_id: str, playback_id: str) -> Any:
        require(asset_id, "An asset ID is required to delete a playback ID")
        require(playback_id, "A playback ID is required to delete a playback ID")
        return await self.http.delete(f"{build_base_path(asset_id)}/playback-ids/{playback_id}")

    async def playback_id(self, asset_id: str, playback_id: str) -> dict:
        require(asset_id, "An asset ID is required to get a playback ID")
        require(playback_id, "A playback ID is required to get a playback ID")
        return await self.http.get(f"{build_base_path(asset_id)}/playback-ids/{playback_id}")

    # ------------------------------------------------------------------
    # Settings and tracks
    # ------------------------------------------------------------------

    async def update_mp4_support(self, asset_id: str, params: dict | None) -> dict:
        """Enable or disable static MP4 renditions, e.g. {"mp4_support": "standard"}."""
        require(asset_id, "An asset ID is required to update mp4 support")
        require_params(params, "Params are required to update mp4 support")
        return await self.http.put(f"{build_base_path(asset_id)}/mp4-support", params)

    async def update_master_access(self, asset_id: str, params: dict | None) -> dict:
        """Request temporary access to the master file, e.g. {"master_access": "temporary"}."""
        require(asset_id, "An asset ID is required to update master access")
        require_params(params, "Params are required to update master access")
        return await self.http.put(f"{build_base_path(asset_id)}/master-access", params)

    async def create_track(self, asset_id: str, params: dict | None) -> dict:
        """Add a text or audio track to an asset.

        Args:
            asset_id: The ID of the asset.
            params: Track parameters: url, type ("text" | "audio"),
                text_type, language_code, name, closed_captions, passthrough.
        """
        require(asset_id, "An asset ID is required to create a track")
        require_params(params, "Params are required to create a track")
        return await self.http.post(f"{build_base_path(asset_id)}/tracks", params)

    async def delete_track(self, asset_id: str, track_id: str) -> Any:
        require(asset_id, "An asset ID is required to delete a track")
        require(track_id, "A track ID is required to delete a track")
        return await self.http.delete(f"{build_base_path(asset_id)}/tracks/{track_id}")
