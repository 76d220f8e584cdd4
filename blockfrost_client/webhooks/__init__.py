"""Webhook delivery verification and event parsing."""

from .events import (
    WebhookEvent,
    BlockEvent,
    TransactionEvent,
    DelegationEvent,
    EpochEvent,
    TransactionPayload,
    DelegationPayload,
    EpochPayload,
    EVENT_TYPES,
    parse_event,
)
from .signature import (
    SIGNATURE_HEADER,
    DEFAULT_TOLERANCE,
    SignedHeader,
    compute_signature,
    sign_payload,
    parse_signature_header,
    verify_webhook_signature,
    verify_webhook_signature_ignoring_tolerance,
)

__all__ = [
    "WebhookEvent", "BlockEvent", "TransactionEvent", "DelegationEvent", "EpochEvent",
    "TransactionPayload", "DelegationPayload", "EpochPayload", "EVENT_TYPES", "parse_event",
    "SIGNATURE_HEADER", "DEFAULT_TOLERANCE", "SignedHeader", "compute_signature", "sign_payload",
    "parse_signature_header", "verify_webhook_signature", "verify_webhook_signature_ignoring_tolerance",
]
