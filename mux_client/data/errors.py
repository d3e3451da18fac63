"""Mux Data playback errors resource."""

from __future__ import annotations

from mux_client.base import Base

PATH = "/data/v1/errors"


class Errors(Base):
    """Playback errors reported by players, with their occurrence counts."""

    async def list(self, params: dict | None = None) -> list[dict]:
        return await self.http.get(PATH, params=params)
