"""Configuration defaults and .env loading for the Mux client.

WHY: Credentials, the API base URL and signing secrets vary per Mux
environment. Keeping every default in one module makes them easy to find
and override without touching the client code.

HOW: python-dotenv loads the .env file on import. Defaults are
module-level constants read from the environment. The load_* helpers
give a clear error when a required value is missing.

RULES:
- Credentials are never hardcoded, only read from the environment / .env
- MUX_BASE_URL defaults to the public Mux API host
- load_credentials() raises ValueError when the token pair is incomplete
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the working directory
load_dotenv()

# ---------------------------------------------------------------------------
# API configuration defaults
# ---------------------------------------------------------------------------

MUX_BASE_URL = os.getenv("MUX_BASE_URL", "https://api.mux.com")
MUX_TIMEOUT_S = float(os.getenv("MUX_TIMEOUT_S", "30"))
MUX_CONNECT_TIMEOUT_S = 10.0

WEBHOOK_TOLERANCE_S = 300
"""Maximum age of a webhook signature timestamp, in seconds."""


def load_credentials(
    token_id: str | None = None,
    token_secret: str | None = None,
) -> tuple[str, str]:
    """Resolve the API access token pair.

    WHY: Every Mux API call is authenticated with an access token id and
    secret. Callers may pass them explicitly or rely on the environment.

    HOW: Explicit arguments win; otherwise MUX_TOKEN_ID and
    MUX_TOKEN_SECRET are read from os.environ (populated by python-dotenv).

    RULES:
    - Raises ValueError if either value is missing or empty
    - Never returns a placeholder value
    """
    token_id = (token_id or os.getenv("MUX_TOKEN_ID", "")).strip()
    token_secret = (token_secret or os.getenv("MUX_TOKEN_SECRET", "")).strip()
    if not token_id:
        raise ValueError(
            "API access token must be provided. "
            "Pass token_id or set MUX_TOKEN_ID in the environment."
        )
    if not token_secret:
        raise ValueError(
            "API secret key must be provided. "
            "Pass token_secret or set MUX_TOKEN_SECRET in the environment."
        )
    return token_id, token_secret


def load_signing_key(
    key_id: str | None = None,
    key_secret: str | None = None,
) -> tuple[str, str]:
    """Resolve the URL signing key pair used for playback JWTs.

    Falls back to MUX_SIGNING_KEY and MUX_PRIVATE_KEY. Raises ValueError
    when either is missing.
    """
    key_id = key_id or os.getenv("MUX_SIGNING_KEY", "")
    key_secret = key_secret or os.getenv("MUX_PRIVATE_KEY", "")
    if not key_id:
        raise ValueError("Signing key ID required. Set MUX_SIGNING_KEY or pass key_id.")
    if not key_secret:
        raise ValueError("Private key required. Set MUX_PRIVATE_KEY or pass key_secret.")
    return key_id, key_secret


def load_webhook_secret(secret: str | None = None) -> str:
    """Resolve the webhook signing secret, falling back to MUX_WEBHOOK_SECRET."""
    secret = secret or os.getenv("MUX_WEBHOOK_SECRET", "")
    if not secret:
        raise ValueError(
            "Webhook signing secret required. "
            "Set MUX_WEBHOOK_SECRET or pass secret."
        )
    return secret
