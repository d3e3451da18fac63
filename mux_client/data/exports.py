"""Mux Data exports resource."""

from __future__ import annotations

from mux_client.base import Base

PATH = "/data/v1/exports"


class Exports(Base):
    """Daily CSV exports of raw view data."""

    async def list(self) -> list[str]:
        """Return download URLs of the available export files."""
        return await self.http.get(PATH)
