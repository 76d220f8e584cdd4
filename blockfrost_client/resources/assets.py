"""Native asset endpoints. An asset id is the policy id concatenated with the hex asset name."""

from typing import Any, List, Optional

from blockfrost_client.fetching import FanOut
from blockfrost_client.types import ListingOptions
from .base import BlockfrostModel, ResourceMixin


class AssetListing(BlockfrostModel):
    asset: str = ""
    quantity: str = ""


class Asset(BlockfrostModel):
    asset: str = ""
    policy_id: str = ""
    asset_name: Optional[str] = None
    fingerprint: str = ""
    quantity: str = ""
    initial_mint_tx_hash: str = ""
    mint_or_burn_count: int = 0
    onchain_metadata: Optional[Any] = None
    metadata: Optional[Any] = None


class AssetHistory(BlockfrostModel):
    tx_hash: str = ""
    action: str = ""  # minted | burned
    amount: str = ""


class AssetTransaction(BlockfrostModel):
    tx_hash: str = ""
    tx_index: int = 0
    block_height: int = 0
    block_time: int = 0


class AssetAddress(BlockfrostModel):
    address: str = ""
    quantity: str = ""


class AssetsMixin(ResourceMixin):

    async def assets(self, options: Optional[ListingOptions] = None) -> List[AssetListing]:
        return await self._get(List[AssetListing], "assets", options=options)

    def assets_all(self) -> FanOut:
        return self._all(self.assets)

    async def asset(self, asset: str) -> Asset:
        return await self._get(Asset, "assets", asset)

    async def asset_history(self, asset: str, options: Optional[ListingOptions] = None) -> List[AssetHistory]:
        """Mint and burn events."""
        return await self._get(List[AssetHistory], "assets", asset, "history", options=options)

    def asset_history_all(self, asset: str) -> FanOut:
        return self._all(lambda o: self.asset_history(asset, o))

    async def asset_transactions(self, asset: str, options: Optional[ListingOptions] = None) -> List[AssetTransaction]:
        return await self._get(List[AssetTransaction], "assets", asset, "transactions", options=options)

    def asset_transactions_all(self, asset: str) -> FanOut:
        return self._all(lambda o: self.asset_transactions(asset, o))

    async def asset_addresses(self, asset: str, options: Optional[ListingOptions] = None) -> List[AssetAddress]:
        """Current holders of an asset."""
        return await self._get(List[AssetAddress], "assets", asset, "addresses", options=options)

    def asset_addresses_all(self, asset: str) -> FanOut:
        return self._all(lambda o: self.asset_addresses(asset, o))

    async def assets_policy(self, policy_id: str, options: Optional[ListingOptions] = None) -> List[AssetListing]:
        return await self._get(List[AssetListing], "assets", "policy", policy_id, options=options)

    def assets_policy_all(self, policy_id: str) -> FanOut:
        return self._all(lambda o: self.assets_policy(policy_id, o))
