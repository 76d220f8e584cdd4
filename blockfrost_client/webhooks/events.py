"""Webhook event envelopes and typed payloads."""

import logging
from typing import Any, Dict, List, Optional, Type

from blockfrost_client.resources.base import BlockfrostModel, decode
from blockfrost_client.resources.blocks import Block
from blockfrost_client.resources.epochs import Epoch
from blockfrost_client.resources.pools import Pool
from blockfrost_client.resources.transactions import (
    TransactionContent,
    TransactionDelegation,
    UTXOInput,
    UTXOOutput,
)

logger = logging.getLogger(__name__)

EVENT_BLOCK = "block"
EVENT_TRANSACTION = "transaction"
EVENT_DELEGATION = "delegation"
EVENT_EPOCH = "epoch"


class WebhookEvent(BlockfrostModel):
    """Envelope common to every delivery. `payload` is left undecoded."""
    id: str = ""
    webhook_id: str = ""
    created: int = 0
    api_version: Optional[int] = None
    type: str = ""
    payload: Any = None


class TransactionPayload(BlockfrostModel):
    tx: TransactionContent = TransactionContent()
    inputs: List[UTXOInput] = []
    outputs: List[UTXOOutput] = []


class DelegationCert(TransactionDelegation):
    pool: Optional[Pool] = None


class DelegationPayload(BlockfrostModel):
    tx: TransactionContent = TransactionContent()
    delegations: List[DelegationCert] = []


class CurrentEpoch(BlockfrostModel):
    epoch: int = 0
    start_time: int = 0
    end_time: int = 0


class EpochPayload(BlockfrostModel):
    previous_epoch: Epoch = Epoch()
    current_epoch: CurrentEpoch = CurrentEpoch()


class BlockEvent(WebhookEvent):
    payload: Block = Block()


class TransactionEvent(WebhookEvent):
    payload: List[TransactionPayload] = []


class DelegationEvent(WebhookEvent):
    payload: List[DelegationPayload] = []


class EpochEvent(WebhookEvent):
    payload: EpochPayload = EpochPayload()


# Event type registry
EVENT_TYPES: Dict[str, Type[WebhookEvent]] = {
    EVENT_BLOCK: BlockEvent,
    EVENT_TRANSACTION: TransactionEvent,
    EVENT_DELEGATION: DelegationEvent,
    EVENT_EPOCH: EpochEvent,
}


def parse_envelope(body: bytes) -> WebhookEvent:
    """Decode the common envelope; raises DecodeError on malformed JSON."""
    return decode(WebhookEvent, body)


def parse_event(body: bytes) -> WebhookEvent:
    """
    Decode a delivery into the event class registered for its `type`.

    Unknown types fall back to the plain envelope with the raw payload.
    """
    envelope = parse_envelope(body)
    event_cls = EVENT_TYPES.get(envelope.type)
    if event_cls is None:
        logger.debug(f"No payload model for webhook type {envelope.type!r}")
        return envelope
    return decode(event_cls, body)
