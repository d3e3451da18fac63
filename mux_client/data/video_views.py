"""Mux Data video views resource."""

from __future__ import annotations

from mux_client.base import Base, require

PATH = "/data/v1/video-views"


class VideoViews(Base):
    """Access to individual video views collected by Mux Data.

    Example:
        views = await mux.data.video_views.list({
            "viewer_id": "abc",
            "timeframe": ["7:days"],
            "filters": ["country:US"],
        })
    """

    async def list(self, params: dict | None = None) -> list[dict]:
        """List video views; list params are sent in bracket form."""
        return await self.http.get(PATH, params=params)

    async def get(self, view_id: str) -> dict:
        require(view_id, "A video view ID is required to get a video view")
        return await self.http.get(f"{PATH}/{view_id}")
