"""Mux Video playback ID lookup."""

from __future__ import annotations

from mux_client.base import Base, require

PATH = "/video/v1/playback-ids"


class PlaybackIds(Base):
    """Look up the asset or live stream a playback ID belongs to."""

    async def get(self, playback_id: str) -> dict:
        """Return {"id", "policy", "object": {"type", "id"}} for a playback ID."""
        require(playback_id, "A playback ID is required to get a playback ID")
        return await self.http.get(f"{PATH}/{playback_id}")
