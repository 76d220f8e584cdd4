"""
Webhook signature verification.

Deliveries carry a `Blockfrost-Signature` header of the form
`t=<unix seconds>,v1=<hex>[,v1=<hex>...]`. Each v1 value is an
HMAC-SHA256, keyed with the webhook secret, over `"<t>.<raw body>"`.
"""

import hashlib
import hmac
import logging
import re
import time
from dataclasses import dataclass, field
from typing import List, Optional, Union

from blockfrost_client.errors import InvalidHeaderError, NoValidSignatureError, NotSignedError, TooOldError
from .events import WebhookEvent, parse_envelope

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "Blockfrost-Signature"
SIGNING_VERSION = "v1"
DEFAULT_TOLERANCE = 600  # seconds

_TIMESTAMP = re.compile(r"[+-]?[0-9]+")


@dataclass
class SignedHeader:
    timestamp: int
    signatures: List[bytes] = field(default_factory=list)


def _as_bytes(value: Union[str, bytes]) -> bytes:
    return value.encode() if isinstance(value, str) else value


def compute_signature(timestamp: int, body: Union[str, bytes], secret: str) -> bytes:
    """Raw HMAC-SHA256 of `"<timestamp>.<body>"` keyed with `secret`."""
    mac = hmac.new(secret.encode(), digestmod=hashlib.sha256)
    mac.update(f"{timestamp}.".encode())
    mac.update(_as_bytes(body))
    return mac.digest()


def sign_payload(body: Union[str, bytes], secret: str, timestamp: Optional[int] = None) -> str:
    """Header value signing `body` at `timestamp` (now if omitted)."""
    if timestamp is None:
        timestamp = int(time.time())
    return f"t={timestamp},{SIGNING_VERSION}={compute_signature(timestamp, body, secret).hex()}"


def parse_signature_header(header: Optional[str]) -> SignedHeader:
    """
    Split a signature header into its timestamp and decoded v1 signatures.

    v1 values that are not valid hex are skipped; unknown keys are logged and
    ignored. A repeated `t` is accepted only when it carries the same value.

    Raises:
        NotSignedError: header missing or empty.
        InvalidHeaderError: a component is not `key=value`, `t` is not an
            integer, `t` values conflict, or no `t` was given.
        NoValidSignatureError: no usable v1 signature.
    """
    if not header:
        raise NotSignedError()

    timestamp: Optional[int] = None
    signatures: List[bytes] = []

    for pair in header.split(","):
        parts = pair.split("=")
        if len(parts) != 2:
            raise InvalidHeaderError()
        key, value = parts

        if key == "t":
            # ASCII decimal with optional sign, as strconv-style parsers accept
            if not _TIMESTAMP.fullmatch(value):
                raise InvalidHeaderError()
            parsed = int(value)
            if timestamp is not None and parsed != timestamp:
                raise InvalidHeaderError(f"Conflicting timestamps in signature header: {timestamp} and {parsed}")
            timestamp = parsed
        elif key == SIGNING_VERSION:
            try:
                signatures.append(bytes.fromhex(value))
            except ValueError:
                continue
        else:
            logger.warning(f"Ignoring unsupported signature header key {key!r}")

    if not signatures:
        raise NoValidSignatureError()
    if timestamp is None:
        raise InvalidHeaderError()
    return SignedHeader(timestamp, signatures)


def _verify(body: bytes, header: Optional[str], secret: str, tolerance: Optional[float]) -> WebhookEvent:
    event = parse_envelope(body)

    try:
        signed = parse_signature_header(header)
    except (NotSignedError, InvalidHeaderError, NoValidSignatureError) as e:
        e.event = event
        raise

    expected = compute_signature(signed.timestamp, body, secret)
    if tolerance is not None and time.time() - signed.timestamp > tolerance:
        raise TooOldError(event=event)

    for signature in signed.signatures:
        if hmac.compare_digest(expected, signature):
            return event

    raise NoValidSignatureError(event=event)


def verify_webhook_signature(
    body: Union[str, bytes], header: Optional[str], secret: str, tolerance: float = DEFAULT_TOLERANCE
) -> WebhookEvent:
    """
    Verify a delivery and return its envelope.

    Usage (any web framework):
        event = verify_webhook_signature(
            await request.body(), request.headers.get(SIGNATURE_HEADER), secret
        )

    Raises:
        DecodeError: the body is not a webhook envelope.
        WebhookError: a subclass naming the failure; `exc.event` holds the
            parsed envelope.
    """
    return _verify(_as_bytes(body), header, secret, tolerance)


def verify_webhook_signature_ignoring_tolerance(
    body: Union[str, bytes], header: Optional[str], secret: str
) -> WebhookEvent:
    """Same as verify_webhook_signature without the timestamp age check (replaying recorded deliveries)."""
    return _verify(_as_bytes(body), header, secret, None)
