"""Stake pool endpoints."""

from typing import List, Optional

from blockfrost_client.fetching import FanOut
from blockfrost_client.types import ListingOptions
from .base import BlockfrostModel, ResourceMixin


class PoolRetirement(BlockfrostModel):
    pool_id: str = ""
    epoch: int = 0


class Pool(BlockfrostModel):
    pool_id: str = ""
    hex: str = ""
    vrf_key: str = ""
    blocks_minted: int = 0
    blocks_epoch: int = 0
    live_stake: str = ""
    live_size: float = 0.0
    live_saturation: float = 0.0
    live_delegators: int = 0
    active_stake: str = ""
    active_size: float = 0.0
    declared_pledge: str = ""
    live_pledge: str = ""
    margin_cost: float = 0.0
    fixed_cost: str = ""
    reward_account: str = ""
    owners: List[str] = []
    registration: List[str] = []
    retirement: List[str] = []


class PoolHistory(BlockfrostModel):
    epoch: int = 0
    blocks: int = 0
    active_stake: str = ""
    active_size: float = 0.0
    delegators_count: int = 0
    rewards: str = ""
    fees: str = ""


class PoolMetadata(BlockfrostModel):
    pool_id: str = ""
    hex: str = ""
    url: Optional[str] = None
    hash: Optional[str] = None
    ticker: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    homepage: Optional[str] = None


class PoolRelay(BlockfrostModel):
    ipv4: Optional[str] = None
    ipv6: Optional[str] = None
    dns: Optional[str] = None
    dns_srv: Optional[str] = None
    port: int = 0


class PoolDelegator(BlockfrostModel):
    address: str = ""
    live_stake: str = ""


class PoolUpdate(BlockfrostModel):
    tx_hash: str = ""
    cert_index: int = 0
    action: str = ""  # registered | deregistered


class PoolsMixin(ResourceMixin):

    async def pools(self, options: Optional[ListingOptions] = None) -> List[str]:
        """Bech32 ids of every registered pool."""
        return await self._get(List[str], "pools", options=options)

    def pools_all(self) -> FanOut:
        return self._all(self.pools)

    async def pools_retired(self, options: Optional[ListingOptions] = None) -> List[PoolRetirement]:
        return await self._get(List[PoolRetirement], "pools", "retired", options=options)

    def pools_retired_all(self) -> FanOut:
        return self._all(self.pools_retired)

    async def pools_retiring(self, options: Optional[ListingOptions] = None) -> List[PoolRetirement]:
        return await self._get(List[PoolRetirement], "pools", "retiring", options=options)

    def pools_retiring_all(self) -> FanOut:
        return self._all(self.pools_retiring)

    async def pool(self, pool_id: str) -> Pool:
        return await self._get(Pool, "pools", pool_id)

    async def pool_history(self, pool_id: str, options: Optional[ListingOptions] = None) -> List[PoolHistory]:
        return await self._get(List[PoolHistory], "pools", pool_id, "history", options=options)

    def pool_history_all(self, pool_id: str) -> FanOut:
        return self._all(lambda o: self.pool_history(pool_id, o))

    async def pool_metadata(self, pool_id: str) -> PoolMetadata:
        return await self._get(PoolMetadata, "pools", pool_id, "metadata")

    async def pool_relays(self, pool_id: str) -> List[PoolRelay]:
        return await self._get(List[PoolRelay], "pools", pool_id, "relays")

    async def pool_delegators(self, pool_id: str, options: Optional[ListingOptions] = None) -> List[PoolDelegator]:
        return await self._get(List[PoolDelegator], "pools", pool_id, "delegators", options=options)

    def pool_delegators_all(self, pool_id: str) -> FanOut:
        return self._all(lambda o: self.pool_delegators(pool_id, o))

    async def pool_blocks(self, pool_id: str, options: Optional[ListingOptions] = None) -> List[str]:
        """Hashes of blocks minted by the pool."""
        return await self._get(List[str], "pools", pool_id, "blocks", options=options)

    def pool_blocks_all(self, pool_id: str) -> FanOut:
        return self._all(lambda o: self.pool_blocks(pool_id, o))

    async def pool_updates(self, pool_id: str, options: Optional[ListingOptions] = None) -> List[PoolUpdate]:
        """Registration and retirement certificates of the pool."""
        return await self._get(List[PoolUpdate], "pools", pool_id, "updates", options=options)

    def pool_updates_all(self, pool_id: str) -> FanOut:
        return self._all(lambda o: self.pool_updates(pool_id, o))
