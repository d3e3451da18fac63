"""Mux Data metrics resource.

WHY: Metrics (viewer experience score, rebuffer percentage, startup time,
...) can be read as totals, broken down by a dimension, as a time series,
or as insights. Each view is its own endpoint under the metric ID.

HOW: One method per view. All but comparison() need a metric ID, e.g.
"video_startup_time".

RULES:
- Missing metric IDs raise MissingParameterError before any request
- params (timeframe, filters, group_by, measurement, ...) pass through
  as query params; lists use bracket form
"""

from __future__ import annotations

from mux_client.base import Base, require

PATH = "/data/v1/metrics"


class Metrics(Base):
    """Access to the Mux Data metrics API."""

    async def breakdown(self, metric_id: str, params: dict | None = None) -> list[dict]:
        """Metric values broken down by a dimension (params["group_by"])."""
        require(metric_id, "A metric ID is required for breakdown metrics")
        return await self.http.get(f"{PATH}/{metric_id}/breakdown", params=params)

    async def comparison(self, params: dict | None = None) -> list[dict]:
        """All metrics for one dimension value compared to the overall values."""
        return await self.http.get(f"{PATH}/comparison", params=params)

    async def insights(self, metric_id: str, params: dict | None = None) -> list[dict]:
        require(metric_id, "A metric ID is required for insight metrics")
        return await self.http.get(f"{PATH}/{metric_id}/insights", params=params)

    async def overall(self, metric_id: str, params: dict | None = None) -> dict:
        require(metric_id, "A metric ID is required for overall metrics")
        return await self.http.get(f"{PATH}/{metric_id}/overall", params=params)

    async def timeseries(self, metric_id: str, params: dict | None = None) -> list[list]:
        require(metric_id, "A metric ID is required for timeseries metrics")
        return await self.http.get(f"{PATH}/{metric_id}/timeseries", params=params)
