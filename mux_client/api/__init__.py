"""Transport and data models for the Mux REST API.

WHY: Every resource talks to Mux the same way; this package holds that
shared HTTP layer and the typed views of the main API objects.

HOW: MuxHttp wraps httpx.AsyncClient with Basic auth, envelope unwrapping
and error translation. models.py holds dataclasses parsed from API dicts.

RULES:
- All HTTP calls go through MuxHttp (no direct httpx usage elsewhere)
- Authentication is via the access token pair from config
"""

from mux_client.api.client import MuxAPIError, MuxHttp
from mux_client.api.models import Asset, LiveStream, PlaybackId, SimulcastTarget

__all__ = ["Asset", "LiveStream", "MuxAPIError", "MuxHttp", "PlaybackId", "SimulcastTarget"]
