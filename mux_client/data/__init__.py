"""Mux Data API namespace.

WHY: Groups the Data resources (video views, errors, metrics, filters,
exports) behind one object.

HOW: Data builds one instance of each resource class around the shared
MuxHttp transport.
"""

from __future__ import annotations

from mux_client.api.client import MuxHttp
from mux_client.data.errors import Errors
from mux_client.data.exports import Exports
from mux_client.data.filters import Filters
from mux_client.data.metrics import Metrics
from mux_client.data.video_views import VideoViews


class Data:
    """Mux Data resources."""

    def __init__(self, http: MuxHttp) -> None:
        self.errors = Errors(http)
        self.exports = Exports(http)
        self.filters = Filters(http)
        self.metrics = Metrics(http)
        self.video_views = VideoViews(http)


__all__ = ["Data", "Errors", "Exports", "Filters", "Metrics", "VideoViews"]
