from .base import BlockfrostModel, ResourceMixin


class GenesisBlock(BlockfrostModel):
    """Blockchain genesis parameters."""
    active_slots_coefficient: float = 0.0
    update_quorum: int = 0
    max_lovelace_supply: str = ""
    network_magic: int = 0
    epoch_length: int = 0
    system_start: int = 0
    slots_per_kes_period: int = 0
    slot_length: int = 0
    max_kes_evolutions: int = 0
    security_param: int = 0


class LedgerMixin(ResourceMixin):

    async def genesis(self) -> GenesisBlock:
        return await self._get(GenesisBlock, "genesis")
