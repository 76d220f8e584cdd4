"""Block endpoints. `hash_or_number` accepts a block hash or a height."""

from typing import List, Optional, Union

from blockfrost_client.fetching import FanOut
from blockfrost_client.types import ListingOptions
from .base import BlockfrostModel, ResourceMixin

HashOrNumber = Union[str, int]


class Block(BlockfrostModel):
    time: int = 0
    height: Optional[int] = None
    hash: str = ""
    slot: Optional[int] = None
    epoch: Optional[int] = None
    epoch_slot: Optional[int] = None
    slot_leader: str = ""
    size: int = 0
    tx_count: int = 0
    output: Optional[str] = None
    fees: Optional[str] = None
    block_vrf: Optional[str] = None
    op_cert: Optional[str] = None
    op_cert_counter: Optional[str] = None
    previous_block: Optional[str] = None
    next_block: Optional[str] = None
    confirmations: int = 0


class BlockTransactionRef(BlockfrostModel):
    tx_hash: str = ""


class BlockAffectedAddress(BlockfrostModel):
    address: str = ""
    transactions: List[BlockTransactionRef] = []


class BlocksMixin(ResourceMixin):

    async def block_latest(self) -> Block:
        return await self._get(Block, "blocks", "latest")

    async def block_latest_transactions(self, options: Optional[ListingOptions] = None) -> List[str]:
        """Transaction hashes in the latest block."""
        return await self._get(List[str], "blocks", "latest", "txs", options=options)

    def block_latest_transactions_all(self) -> FanOut:
        return self._all(self.block_latest_transactions)

    async def block(self, hash_or_number: HashOrNumber) -> Block:
        return await self._get(Block, "blocks", hash_or_number)

    async def blocks_next(self, hash_or_number: HashOrNumber, options: Optional[ListingOptions] = None) -> List[Block]:
        return await self._get(List[Block], "blocks", hash_or_number, "next", options=options)

    def blocks_next_all(self, hash_or_number: HashOrNumber) -> FanOut:
        return self._all(lambda o: self.blocks_next(hash_or_number, o))

    async def blocks_previous(self, hash_or_number: HashOrNumber, options: Optional[ListingOptions] = None) -> List[Block]:
        return await self._get(List[Block], "blocks", hash_or_number, "previous", options=options)

    def blocks_previous_all(self, hash_or_number: HashOrNumber) -> FanOut:
        return self._all(lambda o: self.blocks_previous(hash_or_number, o))

    async def block_transactions(self, hash_or_number: HashOrNumber, options: Optional[ListingOptions] = None) -> List[str]:
        return await self._get(List[str], "blocks", hash_or_number, "txs", options=options)

    def block_transactions_all(self, hash_or_number: HashOrNumber) -> FanOut:
        return self._all(lambda o: self.block_transactions(hash_or_number, o))

    async def block_slot(self, slot: int) -> Block:
        return await self._get(Block, "blocks", "slot", slot)

    async def block_epoch_slot(self, epoch: int, slot: int) -> Block:
        """Block at `slot` within `epoch`."""
        return await self._get(Block, "blocks", "epoch", epoch, "slot", slot)

    async def blocks_addresses(
        self, hash_or_number: HashOrNumber, options: Optional[ListingOptions] = None
    ) -> List[BlockAffectedAddress]:
        """Addresses affected by the block's transactions."""
        return await self._get(List[BlockAffectedAddress], "blocks", hash_or_number, "addresses", options=options)

    def blocks_addresses_all(self, hash_or_number: HashOrNumber) -> FanOut:
        return self._all(lambda o: self.blocks_addresses(hash_or_number, o))
