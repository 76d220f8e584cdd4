"""Mempool endpoints: transactions submitted through Blockfrost and not yet in a block."""

from typing import List, Optional

from blockfrost_client.fetching import FanOut
from blockfrost_client.types import ListingOptions
from .addresses import AddressLike
from .base import Amount, BlockfrostModel, ResourceMixin, address_str


class MempoolEntry(BlockfrostModel):
    tx_hash: str = ""


class MempoolTransaction(BlockfrostModel):
    hash: str = ""
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


class MempoolInput(BlockfrostModel):
    address: str = ""
    tx_hash: str = ""
    output_index: int = 0
    collateral: bool = False
    reference: bool = False


class MempoolOutput(BlockfrostModel):
    address: str = ""
    amount: List[Amount] = []
    output_index: int = 0
    data_hash: Optional[str] = None
    inline_datum: Optional[str] = None
    collateral: bool = False
    reference_script_hash: Optional[str] = None


class MempoolRedeemer(BlockfrostModel):
    tx_index: int = 0
    purpose: str = ""
    unit_mem: str = ""
    unit_steps: str = ""


class MempoolTransactionContent(BlockfrostModel):
    tx: MempoolTransaction = MempoolTransaction()
    inputs: List[MempoolInput] = []
    outputs: List[MempoolOutput] = []
    redeemers: List[MempoolRedeemer] = []


class MempoolMixin(ResourceMixin):

    async def mempool(self, options: Optional[ListingOptions] = None) -> List[MempoolEntry]:
        return await self._get(List[MempoolEntry], "mempool", options=options)

    def mempool_all(self) -> FanOut:
        return self._all(self.mempool)

    async def mempool_tx(self, tx_hash: str) -> MempoolTransactionContent:
        return await self._get(MempoolTransactionContent, "mempool", tx_hash)

    async def mempool_address(self, address: AddressLike, options: Optional[ListingOptions] = None) -> List[MempoolEntry]:
        """Mempool transactions spending from or paying to `address`."""
        return await self._get(List[MempoolEntry], "mempool", "addresses", address_str(address), options=options)

    def mempool_address_all(self, address: AddressLike) -> FanOut:
        return self._all(lambda o: self.mempool_address(address, o))
