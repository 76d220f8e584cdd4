"""
Transaction lookups, submission and script evaluation.

Submission and evaluation take raw CBOR: bytes, a hex string, or any
pycardano CBOR-serializable object (typically a signed Transaction).
"""

import json
import logging
from typing import Any, Dict, List, Optional, Sequence, Union

from pycardano.serialization import CBORSerializable
from pydantic import Field

from blockfrost_client.transport import CBOR_CONTENT, JSON_CONTENT
from .base import Amount, BlockfrostModel, ResourceMixin, cbor_bytes

logger = logging.getLogger(__name__)

TxLike = Union[bytes, bytearray, str, CBORSerializable]


class TransactionContent(BlockfrostModel):
    hash: str = ""
    block: str = ""
    block_height: int = 0
    block_time: int = 0
    slot: int = 0
    index: int = 0
    output_amount: List[Amount] = []
    fees: str = ""
    deposit: str = ""
    size: int = 0
    invalid_before: Optional[str] = None
    invalid_hereafter: Optional[str] = None
    utxo_count: int = 0
    withdrawal_count: int = 0
    mir_cert_count: int = 0
    delegation_count: int = 0
    stake_cert_count: int = 0
    pool_update_count: int = 0
    pool_retire_count: int = 0
    asset_mint_or_burn_count: int = 0
    redeemer_count: int = 0
    valid_contract: bool = False


class UTXOInput(BlockfrostModel):
    address: str = ""
    amount: List[Amount] = []
    tx_hash: str = ""
    output_index: int = 0
    data_hash: Optional[str] = None
    inline_datum: Optional[str] = None
    reference_script_hash: Optional[str] = None
    collateral: bool = False
    reference: bool = False


class UTXOOutput(BlockfrostModel):
    address: str = ""
    amount: List[Amount] = []
    output_index: int = 0
    data_hash: Optional[str] = None
    inline_datum: Optional[str] = None
    collateral: bool = False
    reference_script_hash: Optional[str] = None


class TransactionUTXOs(BlockfrostModel):
    hash: str = ""
    inputs: List[UTXOInput] = []
    outputs: List[UTXOOutput] = []


class TransactionStake(BlockfrostModel):
    cert_index: int = 0
    address: str = ""
    registration: bool = False


class TransactionDelegation(BlockfrostModel):
    index: int = 0
    cert_index: int = 0
    address: str = ""
    pool_id: str = ""
    active_epoch: int = 0


class TransactionWithdrawal(BlockfrostModel):
    address: str = ""
    amount: str = ""


class TransactionMIR(BlockfrostModel):
    pot: str = ""  # reserve | treasury
    cert_index: int = 0
    address: str = ""
    amount: str = ""


class PoolCertMetadata(BlockfrostModel):
    url: Optional[str] = None
    hash: Optional[str] = None
    ticker: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    homepage: Optional[str] = None


class PoolCertRelay(BlockfrostModel):
    ipv4: Optional[str] = None
    ipv6: Optional[str] = None
    dns: Optional[str] = None
    dns_srv: Optional[str] = None
    port: int = 0


class TransactionPoolUpdate(BlockfrostModel):
    cert_index: int = 0
    pool_id: str = ""
    vrf_key: str = ""
    pledge: str = ""
    margin_cost: float = 0.0
    fixed_cost: str = ""
    reward_account: str = ""
    owners: List[str] = []
    metadata: Optional[PoolCertMetadata] = None
    relays: List[PoolCertRelay] = []
    active_epoch: int = 0


class TransactionPoolRetire(BlockfrostModel):
    cert_index: int = 0
    pool_id: str = ""
    retiring_epoch: int = 0


class TransactionMetadata(BlockfrostModel):
    label: str = ""
    json_metadata: Optional[Any] = None


class TransactionMetadataCBOR(BlockfrostModel):
    label: str = ""
    metadata: Optional[str] = None


class TransactionRedeemer(BlockfrostModel):
    tx_index: int = 0
    purpose: str = ""
    script_hash: str = ""
    redeemer_data_hash: str = ""
    unit_mem: str = ""
    unit_steps: str = ""
    fee: str = ""


# Additional UTxO set for evaluation, in Ogmios notation

class TxIn(BlockfrostModel):
    tx_id: str = Field(alias="txId")
    index: int


class Value(BlockfrostModel):
    coins: str
    assets: Optional[Dict[str, str]] = None


class TxOut(BlockfrostModel):
    address: str
    value: Value
    datum_hash: Optional[str] = Field(None, alias="datumHash")
    datum: Optional[Any] = None
    script: Optional[Any] = None


class AdditionalUtxo(BlockfrostModel):
    tx_in: TxIn
    tx_out: TxOut


class EvaluationResponse(BlockfrostModel):
    """Ogmios-style JSON-WSP envelope returned by the evaluation endpoints."""
    type: str = ""
    version: str = ""
    servicename: str = ""
    methodname: str = ""
    reflection: Optional[Dict[str, Any]] = None
    result: Optional[Any] = None


class TransactionsMixin(ResourceMixin):

    async def transaction(self, tx_hash: str) -> TransactionContent:
        return await self._get(TransactionContent, "txs", tx_hash)

    async def transaction_utxos(self, tx_hash: str) -> TransactionUTXOs:
        return await self._get(TransactionUTXOs, "txs", tx_hash, "utxos")

    async def transaction_stakes(self, tx_hash: str) -> List[TransactionStake]:
        """Stake address (de)registration certificates."""
        return await self._get(List[TransactionStake], "txs", tx_hash, "stakes")

    async def transaction_delegations(self, tx_hash: str) -> List[TransactionDelegation]:
        return await self._get(List[TransactionDelegation], "txs", tx_hash, "delegations")

    async def transaction_withdrawals(self, tx_hash: str) -> List[TransactionWithdrawal]:
        return await self._get(List[TransactionWithdrawal], "txs", tx_hash, "withdrawals")

    async def transaction_mirs(self, tx_hash: str) -> List[TransactionMIR]:
        return await self._get(List[TransactionMIR], "txs", tx_hash, "mirs")

    async def transaction_pool_updates(self, tx_hash: str) -> List[TransactionPoolUpdate]:
        return await self._get(List[TransactionPoolUpdate], "txs", tx_hash, "pool_updates")

    async def transaction_pool_retires(self, tx_hash: str) -> List[TransactionPoolRetire]:
        return await self._get(List[TransactionPoolRetire], "txs", tx_hash, "pool_retires")

    async def transaction_metadata(self, tx_hash: str) -> List[TransactionMetadata]:
        return await self._get(List[TransactionMetadata], "txs", tx_hash, "metadata")

    async def transaction_metadata_cbor(self, tx_hash: str) -> List[TransactionMetadataCBOR]:
        return await self._get(List[TransactionMetadataCBOR], "txs", tx_hash, "metadata", "cbor")

    async def transaction_redeemers(self, tx_hash: str) -> List[TransactionRedeemer]:
        return await self._get(List[TransactionRedeemer], "txs", tx_hash, "redeemers")

    async def transaction_submit(self, tx: TxLike) -> str:
        """
        Submit a signed transaction.

        Returns:
            The transaction id (hex) reported by the node.

        Raises:
            BadRequest: the node rejected the transaction; `message` holds its reason.
        """
        tx_hash = await self._post(str, "tx", "submit", content=cbor_bytes(tx), content_type=CBOR_CONTENT)
        logger.info(f"Submitted transaction {tx_hash}")
        return tx_hash

    async def transaction_evaluate(self, tx: TxLike) -> EvaluationResponse:
        """Estimate execution units of the transaction's scripts."""
        return await self._post(
            EvaluationResponse, "utils", "txs", "evaluate",
            # the evaluator takes the CBOR as hex text
            content=cbor_bytes(tx).hex().encode(), content_type=CBOR_CONTENT,
        )

    async def transaction_evaluate_utxos(
        self, tx: TxLike, additional_utxo_set: Sequence[AdditionalUtxo] = ()
    ) -> EvaluationResponse:
        """
        Evaluate a transaction against the chain plus `additional_utxo_set`,
        for transactions spending outputs that are not on-chain yet.
        """
        payload = {
            "cbor": cbor_bytes(tx).hex(),
            "additionalUtxoSet": [
                [
                    utxo.tx_in.model_dump(by_alias=True),
                    utxo.tx_out.model_dump(by_alias=True, exclude_none=True),
                ]
                for utxo in additional_utxo_set
            ],
        }
        return await self._post(
            EvaluationResponse, "utils", "txs", "evaluate", "utxos",
            content=json.dumps(payload).encode(), content_type=JSON_CONTENT,
        )
