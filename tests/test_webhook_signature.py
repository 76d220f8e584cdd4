"""Webhook signature verification."""

import logging
import time

import pytest

from blockfrost_client import (
    DecodeError,
    InvalidHeaderError,
    NoValidSignatureError,
    NotSignedError,
    TooOldError,
    WebhookError,
)
from blockfrost_client.webhooks import (
    SIGNATURE_HEADER,
    compute_signature,
    parse_signature_header,
    sign_payload,
    verify_webhook_signature,
    verify_webhook_signature_ignoring_tolerance,
)

from conftest import WEBHOOK_BODY, WEBHOOK_SECRET, WEBHOOK_SIGNATURE, WEBHOOK_TIMESTAMP

VALID_HEADER = f"t={WEBHOOK_TIMESTAMP},v1={WEBHOOK_SIGNATURE}"


def test_header_name():
    assert SIGNATURE_HEADER == "Blockfrost-Signature"


def test_compute_signature_matches_recorded_delivery():
    assert compute_signature(WEBHOOK_TIMESTAMP, WEBHOOK_BODY, WEBHOOK_SECRET).hex() == WEBHOOK_SIGNATURE


def test_multiple_signatures_first_invalid():
    header = f"t={WEBHOOK_TIMESTAMP},v1=abc,t={WEBHOOK_TIMESTAMP},v1={WEBHOOK_SIGNATURE}"

    event = verify_webhook_signature_ignoring_tolerance(WEBHOOK_BODY.encode(), header, WEBHOOK_SECRET)

    assert event.type == "block"
    assert event.id == "47668401-c3a4-42d4-bac1-ad46515924a3"
    assert event.webhook_id == "cf68eb9c-635f-415e-a5a8-6233638f28d7"
    assert event.created == WEBHOOK_TIMESTAMP
    assert event.payload["height"] == 7126256


def test_stale_signature_rejected():
    with pytest.raises(TooOldError) as exc_info:
        verify_webhook_signature(WEBHOOK_BODY, VALID_HEADER, WEBHOOK_SECRET)

    assert exc_info.value.event.type == "block"
    assert str(exc_info.value) == "Signature's timestamp is not within time tolerance"


def test_missing_timestamp_is_invalid_header():
    with pytest.raises(InvalidHeaderError):
        verify_webhook_signature(WEBHOOK_BODY, f"v1={WEBHOOK_SIGNATURE}", WEBHOOK_SECRET)


def test_unsupported_scheme_has_no_valid_signature(caplog):
    with caplog.at_level(logging.WARNING, logger="blockfrost_client.webhooks.signature"):
        with pytest.raises(NoValidSignatureError):
            verify_webhook_signature(WEBHOOK_BODY, f"v42={WEBHOOK_SIGNATURE}", WEBHOOK_SECRET)

    assert "v42" in caplog.text


@pytest.mark.parametrize("header", ["", None])
def test_missing_header_is_not_signed(header):
    with pytest.raises(NotSignedError) as exc_info:
        verify_webhook_signature(WEBHOOK_BODY, header, WEBHOOK_SECRET)

    assert exc_info.value.event is not None


def test_tampered_body_rejected():
    tampered = WEBHOOK_BODY.replace('"tx_count":13', '"tx_count":14')

    with pytest.raises(NoValidSignatureError):
        verify_webhook_signature_ignoring_tolerance(tampered, VALID_HEADER, WEBHOOK_SECRET)


def test_wrong_secret_rejected():
    with pytest.raises(NoValidSignatureError):
        verify_webhook_signature_ignoring_tolerance(WEBHOOK_BODY, VALID_HEADER, "another-secret")


def test_fresh_signature_accepted_with_tolerance():
    header = sign_payload(WEBHOOK_BODY, WEBHOOK_SECRET)

    event = verify_webhook_signature(WEBHOOK_BODY, header, WEBHOOK_SECRET, tolerance=600)

    assert event.type == "block"


def test_tolerance_boundary():
    old = int(time.time()) - 1000
    header = sign_payload(WEBHOOK_BODY, WEBHOOK_SECRET, timestamp=old)

    with pytest.raises(TooOldError):
        verify_webhook_signature(WEBHOOK_BODY, header, WEBHOOK_SECRET, tolerance=600)
    assert verify_webhook_signature(WEBHOOK_BODY, header, WEBHOOK_SECRET, tolerance=3600).type == "block"


def test_sign_then_verify_arbitrary_body():
    body = b'{"id":"x","webhook_id":"y","created":1,"type":"epoch","payload":{}}'
    header = sign_payload(body, "s3cret", timestamp=1700000000)

    assert header.startswith("t=1700000000,v1=")
    assert verify_webhook_signature_ignoring_tolerance(body, header, "s3cret").type == "epoch"


def test_conflicting_timestamps_rejected():
    header = f"t={WEBHOOK_TIMESTAMP},v1={WEBHOOK_SIGNATURE},t={WEBHOOK_TIMESTAMP + 1}"

    with pytest.raises(InvalidHeaderError):
        verify_webhook_signature_ignoring_tolerance(WEBHOOK_BODY, header, WEBHOOK_SECRET)


@pytest.mark.parametrize(
    "header",
    [
        f"t={WEBHOOK_TIMESTAMP};v1={WEBHOOK_SIGNATURE}",
        f"t=,v1={WEBHOOK_SIGNATURE}",
        f"t=yesterday,v1={WEBHOOK_SIGNATURE}",
        f"t=1_650_013_856,v1={WEBHOOK_SIGNATURE}",
        f"t= {WEBHOOK_TIMESTAMP},v1={WEBHOOK_SIGNATURE}",
        f"t={WEBHOOK_TIMESTAMP} ,v1={WEBHOOK_SIGNATURE}",
        f"t=\u0661\u0662,v1={WEBHOOK_SIGNATURE}",
        f"t={WEBHOOK_TIMESTAMP},v1",
    ],
)
def test_malformed_components_are_invalid_header(header):
    with pytest.raises(InvalidHeaderError):
        parse_signature_header(header)


def test_parse_header_collects_signatures():
    signed = parse_signature_header(f"t=1,v1=00ff,v0=dead,v1=zz,v1={WEBHOOK_SIGNATURE}")

    assert signed.timestamp == 1
    assert signed.signatures == [b"\x00\xff", bytes.fromhex(WEBHOOK_SIGNATURE)]


def test_only_invalid_hex_has_no_valid_signature():
    with pytest.raises(NoValidSignatureError):
        parse_signature_header("t=1,v1=abc")


def test_malformed_body_is_decode_error():
    with pytest.raises(DecodeError):
        verify_webhook_signature(b"not json", VALID_HEADER, WEBHOOK_SECRET)


def test_all_failures_share_base_class():
    for cls in (NotSignedError, InvalidHeaderError, TooOldError, NoValidSignatureError):
        assert issubclass(cls, WebhookError)


def test_signed_timestamp_parses():
    assert parse_signature_header("t=+42,v1=00ff").timestamp == 42
    assert parse_signature_header("t=-1,v1=00ff").timestamp == -1
