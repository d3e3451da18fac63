"""Local helpers that need no API call: playback token signing and webhook verification."""

from mux_client.helpers.signing import JWT
from mux_client.helpers.webhooks import Webhooks, WebhookVerificationError

__all__ = ["JWT", "Webhooks", "WebhookVerificationError"]
