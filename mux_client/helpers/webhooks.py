"""Webhook signature verification.

WHY: Mux signs every webhook request. Verifying the mux-signature header
proves the payload came from Mux and was not replayed.

HOW: The header has the form "t=<unix ts>,v1=<hex sig>[,v1=<hex sig>]".
The expected signature is HMAC-SHA256 of "<t>.<raw body>" keyed with the
webhook signing secret, compared in constant time against every v1
signature in the header.

RULES:
- payload must be the raw request body, before any JSON parsing
- Timestamps older than tolerance seconds are rejected
- Every failure raises WebhookVerificationError; success returns True
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import time

from mux_client.config import WEBHOOK_TOLERANCE_S, load_webhook_secret

logger = logging.getLogger(__name__)

SIGNATURE_SCHEME = "v1"


class WebhookVerificationError(ValueError):
    """Raised when a webhook signature header does not verify."""


def parse_signature_header(header: str) -> tuple[int, list[str]]:
    """Split a mux-signature header into its timestamp and v1 signatures."""
    timestamp: int | None = None
    signatures: list[str] = []
    for element in (header or "").split(","):
        if "=" not in element:
            continue
        key, value = element.split("=", 1)
        key = key.strip()
        value = value.strip()
        if key == "t":
            try:
                timestamp = int(value)
            except ValueError:
                timestamp = None
        elif key == SIGNATURE_SCHEME:
            signatures.append(value)

    if timestamp is None:
        raise WebhookVerificationError(
            "Unable to extract timestamp and signatures from header"
        )
    if not signatures:
        raise WebhookVerificationError("No signatures found with expected scheme")
    return timestamp, signatures


def compute_signature(payload: bytes | str, timestamp: int, secret: str) -> str:
    """Return the hex HMAC-SHA256 signature Mux would send for payload."""
    if isinstance(payload, str):
        payload = payload.encode("utf-8")
    signed_payload = f"{timestamp}.".encode("utf-8") + payload
    return hmac.new(secret.encode("utf-8"), signed_payload, hashlib.sha256).hexdigest()


class Webhooks:
    """Static helpers for Mux webhook requests."""

    @staticmethod
    def verify_header(
        payload: bytes | str,
        header: str,
        secret: str | None = None,
        tolerance: int = WEBHOOK_TOLERANCE_S,
    ) -> bool:
        """Verify the mux-signature header of a webhook request.

        Args:
            payload: Raw request body.
            header: Value of the "mux-signature" header.
            secret: Webhook signing secret; defaults to MUX_WEBHOOK_SECRET.
            tolerance: Maximum signature age in seconds.

        Returns:
            True when the signature is valid.

        Raises:
            WebhookVerificationError: If the header is malformed, stale,
                or no signature matches.
        """
        secret = load_webhook_secret(secret)
        timestamp, signatures = parse_signature_header(header)

        expected = compute_signature(payload, timestamp, secret)
        if not any(hmac.compare_digest(expected, sig) for sig in signatures):
            raise WebhookVerificationError(
                "No signatures found matching the expected signature for payload"
            )

        age = abs(int(time.time()) - timestamp)
        if tolerance > 0 and age > tolerance:
            logger.warning("Rejected webhook signed %ss ago (tolerance %ss)", age, tolerance)
            raise WebhookVerificationError("Timestamp outside the tolerance zone")

        return True
