"""Tests for webhook signature verification.

WHY: A verifier that accepts tampered or replayed payloads is worse than
none; one that rejects genuine Mux requests breaks every webhook.

HOW: Signatures are computed independently with hmac in the test, so a
bug in compute_signature() cannot cancel itself out.
"""

from __future__ import annotations

import hashlib
import hmac
import time

import pytest

from mux_client import Mux, WebhookVerificationError
from mux_client.helpers.webhooks import parse_signature_header

SECRET = "whsec_test_secret"
BODY = b'{"type":"video.live_stream.active","data":{"id":"ls-1"}}'


def _sign(body: bytes, timestamp: int, secret: str = SECRET) -> str:
    signed = "{}.".format(timestamp).encode("utf-8") + body
    return hmac.new(secret.encode("utf-8"), signed, hashlib.sha256).hexdigest()


def _header(body: bytes = BODY, timestamp: int | None = None, secret: str = SECRET) -> str:
    ts = int(time.time()) if timestamp is None else timestamp
    return "t={},v1={}".format(ts, _sign(body, ts, secret))


class TestVerifyHeader:
    def test_valid_signature(self):
        assert Mux.webhooks.verify_header(BODY, _header(), SECRET) is True

    def test_accepts_str_payload(self):
        assert Mux.webhooks.verify_header(BODY.decode("utf-8"), _header(), SECRET) is True

    def test_any_matching_signature_is_enough(self):
        ts = int(time.time())
        header = "t={},v1={},v1={}".format(ts, "0" * 64, _sign(BODY, ts))
        assert Mux.webhooks.verify_header(BODY, header, SECRET) is True

    def test_tampered_body_rejected(self):
        with pytest.raises(WebhookVerificationError, match="No signatures found matching"):
            Mux.webhooks.verify_header(BODY + b" ", _header(), SECRET)

    def test_wrong_secret_rejected(self):
        with pytest.raises(WebhookVerificationError, match="No signatures found matching"):
            Mux.webhooks.verify_header(BODY, _header(secret="other"), SECRET)

    def test_stale_timestamp_rejected(self):
        old = int(time.time()) - 3600
        with pytest.raises(WebhookVerificationError, match="tolerance zone"):
            Mux.webhooks.verify_header(BODY, _header(timestamp=old), SECRET)

    def test_custom_tolerance(self):
        old = int(time.time()) - 3600
        assert Mux.webhooks.verify_header(BODY, _header(timestamp=old), SECRET, tolerance=7200)

    def test_secret_from_environment(self, monkeypatch):
        monkeypatch.setenv("MUX_WEBHOOK_SECRET", SECRET)
        assert Mux.webhooks.verify_header(BODY, _header())

    def test_missing_secret_raises(self, monkeypatch):
        monkeypatch.delenv("MUX_WEBHOOK_SECRET", raising=False)
        with pytest.raises(ValueError, match="Webhook signing secret required"):
            Mux.webhooks.verify_header(BODY, _header())

    def test_verification_error_is_value_error(self):
        assert issubclass(WebhookVerificationError, ValueError)


class TestParseSignatureHeader:
    def test_parses_timestamp_and_signatures(self):
        assert parse_signature_header("t=1565220904,v1=abc,v0=old,v1=def") == (1565220904, ["abc", "def"])

    @pytest.mark.parametrize("header", ["", "garbage", "v1=abc", "t=notanumber,v1=abc"])
    def test_missing_timestamp(self, header):
        with pytest.raises(WebhookVerificationError, match="Unable to extract timestamp"):
            parse_signature_header(header)

    def test_missing_v1_signature(self):
        with pytest.raises(WebhookVerificationError, match="expected scheme"):
            parse_signature_header("t=1565220904,v0=abc")
