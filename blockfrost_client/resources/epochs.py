"""Epoch endpoints."""

from typing import Any, Dict, List, Optional

from blockfrost_client.fetching import FanOut
from blockfrost_client.types import ListingOptions
from .base import BlockfrostModel, ResourceMixin


class Epoch(BlockfrostModel):
    epoch: int = 0
    start_time: int = 0
    end_time: int = 0
    first_block_time: int = 0
    last_block_time: int = 0
    block_count: int = 0
    tx_count: int = 0
    output: str = ""
    fees: str = ""
    active_stake: Optional[str] = None


class EpochStake(BlockfrostModel):
    stake_address: str = ""
    pool_id: str = ""
    amount: str = ""


class EpochParameters(BlockfrostModel):
    epoch: int = 0
    min_fee_a: int = 0
    min_fee_b: int = 0
    max_block_size: int = 0
    max_tx_size: int = 0
    max_block_header_size: int = 0
    key_deposit: str = ""
    pool_deposit: str = ""
    e_max: int = 0
    n_opt: int = 0
    a0: float = 0.0
    rho: float = 0.0
    tau: float = 0.0
    decentralisation_param: float = 0.0
    extra_entropy: Optional[Dict[str, Any]] = None
    protocol_major_ver: int = 0
    protocol_minor_ver: int = 0
    min_utxo: str = ""
    min_pool_cost: str = ""
    nonce: str = ""
    price_mem: Optional[float] = None
    price_step: Optional[float] = None
    max_tx_ex_mem: Optional[str] = None
    max_tx_ex_steps: Optional[str] = None
    max_block_ex_mem: Optional[str] = None
    max_block_ex_steps: Optional[str] = None
    max_val_size: Optional[str] = None
    collateral_percent: Optional[int] = None
    max_collateral_inputs: Optional[int] = None
    coins_per_utxo_word: Optional[str] = None
    coins_per_utxo_size: Optional[str] = None


class EpochsMixin(ResourceMixin):

    async def epoch_latest(self) -> Epoch:
        return await self._get(Epoch, "epochs", "latest")

    async def epoch_latest_parameters(self) -> EpochParameters:
        return await self._get(EpochParameters, "epochs", "latest", "parameters")

    async def epoch(self, number: int) -> Epoch:
        return await self._get(Epoch, "epochs", number)

    async def epochs_next(self, number: int, options: Optional[ListingOptions] = None) -> List[Epoch]:
        return await self._get(List[Epoch], "epochs", number, "next", options=options)

    def epochs_next_all(self, number: int) -> FanOut:
        return self._all(lambda o: self.epochs_next(number, o))

    async def epochs_previous(self, number: int, options: Optional[ListingOptions] = None) -> List[Epoch]:
        return await self._get(List[Epoch], "epochs", number, "previous", options=options)

    def epochs_previous_all(self, number: int) -> FanOut:
        return self._all(lambda o: self.epochs_previous(number, o))

    async def epoch_stakes(self, number: int, options: Optional[ListingOptions] = None) -> List[EpochStake]:
        """Active stake distribution for the epoch."""
        return await self._get(List[EpochStake], "epochs", number, "stakes", options=options)

    def epoch_stakes_all(self, number: int) -> FanOut:
        return self._all(lambda o: self.epoch_stakes(number, o))

    async def epoch_pool_stakes(self, number: int, pool_id: str, options: Optional[ListingOptions] = None) -> List[EpochStake]:
        return await self._get(List[EpochStake], "epochs", number, "stakes", pool_id, options=options)

    def epoch_pool_stakes_all(self, number: int, pool_id: str) -> FanOut:
        return self._all(lambda o: self.epoch_pool_stakes(number, pool_id, o))

    async def epoch_blocks(self, number: int, options: Optional[ListingOptions] = None) -> List[str]:
        """Hashes of the blocks minted in the epoch."""
        return await self._get(List[str], "epochs", number, "blocks", options=options)

    def epoch_blocks_all(self, number: int) -> FanOut:
        return self._all(lambda o: self.epoch_blocks(number, o))

    async def epoch_pool_blocks(self, number: int, pool_id: str, options: Optional[ListingOptions] = None) -> List[str]:
        return await self._get(List[str], "epochs", number, "blocks", pool_id, options=options)

    def epoch_pool_blocks_all(self, number: int, pool_id: str) -> FanOut:
        return self._all(lambda o: self.epoch_pool_blocks(number, pool_id, o))

    async def epoch_parameters(self, number: int) -> EpochParameters:
        return await self._get(EpochParameters, "epochs", number, "parameters")
