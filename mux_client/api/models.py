"""Typed views of the Mux Video objects the client deals with most.

WHY: Resource methods return the API's JSON unmodified, as plain dicts.
When a caller wants typed access (the CLI summaries, for instance), these
dataclasses give names to the fields that matter.

HOW: Each dataclass maps to one Mux JSON object. from_dict factories
parse raw API dicts, tolerating absent optional fields.

RULES:
- id is the only required field on every object
- Nested lists (playback_ids, simulcast_targets, ...) default to empty
- Unknown fields are ignored; the raw dict stays the source of truth
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class PlaybackId:
    """A playback ID attached to an asset or live stream.

    RULES:
    - policy is "public" or "signed"
    """

    id: str
    policy: str = "public"

    @classmethod
    def from_dict(cls, data: dict) -> PlaybackId:
        return cls(id=data["id"], policy=data.get("policy", "public"))


@dataclass
class SimulcastTarget:
    """A third-party RTMP destination a live stream is restreamed to."""

    id: str
    url: str | None = None
    stream_key: str | None = None
    passthrough: str | None = None
    status: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> SimulcastTarget:
        return cls(
            id=data["id"],
            url=data.get("url"),
            stream_key=data.get("stream_key"),
            passthrough=data.get("passthrough"),
            status=data.get("status"),
        )


@dataclass
class EmbeddedSubtitle:
    """Closed caption (CEA-608) channel configuration on a live stream."""

    name: str | None = None
    language_code: str | None = None
    language_channel: str | None = None
    passthrough: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> EmbeddedSubtitle:
        return cls(
            name=data.get("name"),
            language_code=data.get("language_code"),
            language_channel=data.get("language_channel"),
            passthrough=data.get("passthrough"),
        )


@dataclass
class LiveStream:
    """A Mux live stream.

    WHY: The live stream object nests playback IDs, simulcast targets and
    embedded subtitle settings; parsing them once keeps callers from
    repeating dict lookups.

    RULES:
    - status is "idle", "active" or "disabled"
    - stream_key is secret; callers decide whether to display it
    """

    id: str
    status: str | None = None
    stream_key: str | None = None
    playback_ids: list[PlaybackId] = field(default_factory=list)
    simulcast_targets: list[SimulcastTarget] = field(default_factory=list)
    embedded_subtitles: list[EmbeddedSubtitle] = field(default_factory=list)
    active_asset_id: str | None = None
    passthrough: str | None = None
    created_at: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> LiveStream:
        return cls(
            id=data["id"],
            status=data.get("status"),
            stream_key=data.get("stream_key"),
            playback_ids=[PlaybackId.from_dict(p) for p in data.get("playback_ids") or []],
            simulcast_targets=[
                SimulcastTarget.from_dict(t) for t in data.get("simulcast_targets") or []
            ],
            embedded_subtitles=[
                EmbeddedSubtitle.from_dict(s) for s in data.get("embedded_subtitles") or []
            ],
            active_asset_id=data.get("active_asset_id"),
            passthrough=data.get("passthrough"),
            created_at=data.get("created_at"),
        )


@dataclass
class Asset:
    """A Mux video asset."""

    id: str
    status: str | None = None
    duration: float | None = None
    playback_ids: list[PlaybackId] = field(default_factory=list)
    passthrough: str | None = None
    created_at: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> Asset:
        return cls(
            id=data["id"],
            status=data.get("status"),
            duration=data.get("duration"),
            playback_ids=[PlaybackId.from_dict(p) for p in data.get("playback_ids") or []],
            passthrough=data.get("passthrough"),
            created_at=data.get("created_at"),
        )
