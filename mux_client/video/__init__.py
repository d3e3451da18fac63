"""Mux Video API namespace.

WHY: Groups the Video resources (live streams, assets, playback IDs,
direct uploads) behind one object, mirroring the Mux API reference.

HOW: Video builds one instance of each resource class around the shared
MuxHttp transport.

RULES:
- All resources share the transport of the owning Mux client
- Adding a resource = one new module plus one attribute here
"""

from __future__ import annotations

from mux_client.api.client import MuxHttp
from mux_client.video.assets import Assets
from mux_client.video.live_streams import LiveStreams
from mux_client.video.playback_ids import PlaybackIds
from mux_client.video.uploads import Uploads


class Video:
    """Mux Video resources."""

    def __init__(self, http: MuxHttp) -> None:
        self.assets = Assets(http)
        self.live_streams = LiveStreams(http)
        self.playback_ids = PlaybackIds(http)
        self.uploads = Uploads(http)


__all__ = ["Assets", "LiveStreams", "PlaybackIds", "Uploads", "Video"]
