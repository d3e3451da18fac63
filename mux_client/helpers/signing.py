"""Signed playback tokens (JWT) for Mux playback IDs.

WHY: Playback IDs with the "signed" policy only play when the URL
carries a token signed with one of the environment's URL signing keys.
Generating those tokens is pure local work, no API call involved.

HOW: PyJWT signs RS256 tokens with the signing key's private key. The
key id goes into the "kid" header so Mux knows which public key to check
against. The token type selects the audience claim (video, thumbnail,
gif, storyboard).

RULES:
- key_id / key_secret fall back to MUX_SIGNING_KEY / MUX_PRIVATE_KEY
- key_secret is a base64-encoded PEM (as Mux hands it out) or a raw PEM
- expiration is seconds (int) or a duration string: "30s", "15m", "12h", "7d", "2w"
- decode() does NOT verify the signature; it is for inspection only
"""

from __future__ import annotations

import base64
import re
import time
from typing import Any

import jwt

from mux_client.base import require
from mux_client.config import load_signing_key

TOKEN_AUDIENCES: dict[str, str] = {
    "video": "v",
    "thumbnail": "t",
    "gif": "g",
    "storyboard": "s",
}

DEFAULT_EXPIRATION = "7d"

_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhdw]?)\s*$")
_UNIT_SECONDS = {"": 1, "s": 1, "m": 60, "h": 3600, "d": 86400, "w": 604800}


def parse_expiration(expiration: int | str) -> int:
    """Convert an expiration (seconds or "7d"-style string) to seconds.

    Raises:
        ValueError: If the value is negative or not a recognised duration.
    """
    if isinstance(expiration, int) and not isinstance(expiration, bool):
        seconds = expiration
    else:
        match = _DURATION_RE.match(str(expiration))
        if not match:
            raise ValueError(f"Invalid expiration: {expiration!r}")
        seconds = int(match.group(1)) * _UNIT_SECONDS[match.group(2)]
    if seconds < 0:
        raise ValueError(f"Expiration must not be negative: {expiration!r}")
    return seconds


def load_private_key(key_secret: str) -> str:
    """Return the PEM text of a signing key given as base64 or raw PEM."""
    if key_secret.lstrip().startswith("-----BEGIN"):
        return key_secret
    try:
        return base64.b64decode(key_secret, validate=True).decode("utf-8")
    except ValueError as exc:
        raise ValueError("Private key must be a PEM or a base64-encoded PEM") from exc


class JWT:
    """Static helpers for signing and decoding Mux playback tokens."""

    @staticmethod
    def sign_playback_id(
        playback_id: str,
        key_id: str | None = None,
        key_secret: str | None = None,
        type: str = "video",  # noqa: A002
        expiration: int | str = DEFAULT_EXPIRATION,
        params: dict[str, Any] | None = None,
    ) -> str:
        """Sign a token for a signed playback ID.

        Args:
            playback_id: The playback ID the token grants access to.
            key_id: URL signing key ID.
            key_secret: URL signing private key (base64 PEM or PEM).
            type: "video", "thumbnail", "gif" or "storyboard".
            expiration: Token lifetime, seconds or a duration string.
            params: Extra claims, e.g. thumbnail {"time": 10, "width": 640}.

        Returns:
            The encoded JWT.

        Raises:
            MissingParameterError: If playback_id is empty.
            ValueError: On unknown type, bad expiration or missing key.
        """
        require(playback_id, "A playback ID is required to sign a token")
        audience = TOKEN_AUDIENCES.get(type)
        if audience is None:
            raise ValueError(
                "Invalid token type {!r}; expected one of: {}".format(
                    type, ", ".join(sorted(TOKEN_AUDIENCES))
                )
            )
        key_id, key_secret = load_signing_key(key_id, key_secret)

        claims: dict[str, Any] = dict(params or {})
        claims.update(
            sub=playback_id,
            aud=audience,
            exp=int(time.time()) + parse_expiration(expiration),
        )
        return jwt.encode(
            claims,
            load_private_key(key_secret),
            algorithm="RS256",
            headers={"kid": key_id},
        )

    @staticmethod
    def decode(token: str) -> dict[str, Any]:
        """Decode a token's claims without verifying its signature."""
        return jwt.decode(token, options={"verify_signature": False})
