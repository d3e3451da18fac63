"""Mux Data filters resource."""

from __future__ import annotations

from mux_client.base import Base, require

PATH = "/data/v1/filters"


class Filters(Base):
    """Dimensions usable as filters, and the values seen for each."""

    async def list(self, params: dict | None = None) -> dict:
        return await self.http.get(PATH, params=params)

    async def get(self, filter_id: str, params: dict | None = None) -> list[dict]:
        """Values seen for one filter, e.g. get("browser", {"limit": 5})."""
        require(filter_id, "A filter ID is required to get filter information")
        return await self.http.get(f"{PATH}/{filter_id}", params=params)
