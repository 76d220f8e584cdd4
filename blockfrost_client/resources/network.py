from .base import BlockfrostModel, ResourceMixin


class NetworkSupply(BlockfrostModel):
    max: str = ""
    total: str = ""
    circulating: str = ""
    locked: str = ""
    treasury: str = ""
    reserves: str = ""


class NetworkStake(BlockfrostModel):
    live: str = ""
    active: str = ""


class NetworkInfo(BlockfrostModel):
    supply: NetworkSupply = NetworkSupply()
    stake: NetworkStake = NetworkStake()


class NetworkMixin(ResourceMixin):

    async def network(self) -> NetworkInfo:
        """Supply and stake totals (lovelace)."""
        return await self._get(NetworkInfo, "network")
