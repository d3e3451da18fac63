"""Mux Video direct uploads resource.

WHY: Direct uploads let a browser or device PUT a file straight to Mux
through a signed URL, without passing through the caller's servers.

HOW: create() returns an upload object with a "url" to PUT the file to;
get() reports its status and the resulting asset_id once processed.
"""

from __future__ import annotations

from mux_client.base import Base, require, require_params

PATH = "/video/v1/uploads"


class Uploads(Base):
    """Access to the Mux Video direct uploads API."""

    async def create(self, params: dict | None) -> dict:
        """Create a direct upload URL.

        Args:
            params: e.g. {"cors_origin": "https://example.com",
                "new_asset_settings": {"playback_policy": ["public"]}}.
        """
        require_params(params, "Params are required for creating a direct upload")
        return await self.http.post(PATH, params)

    async def cancel(self, upload_id: str) -> dict:
        require(upload_id, "An upload ID is required to cancel an upload")
        return await self.http.put(f"{PATH}/{upload_id}/cancel")

    async def get(self, upload_id: str) -> dict:
        require(upload_id, "An upload ID is required to get an upload")
        return await self.http.get(f"{PATH}/{upload_id}")

    async def list(self, params: dict | None = None) -> list[dict]:
        return await self.http.get(PATH, params=params)
