"""Root, health and clock endpoints."""

from .base import BlockfrostModel, ResourceMixin


class Info(BlockfrostModel):
    url: str = ""
    version: str = ""


class Health(BlockfrostModel):
    is_healthy: bool = False


class HealthClock(BlockfrostModel):
    server_time: int = 0  # unix milliseconds


class HealthMixin(ResourceMixin):

    async def info(self) -> Info:
        """Root endpoint; points to the API documentation."""
        return await self._get(Info, "")

    async def health(self) -> Health:
        """Backend health. Handle `is_healthy == False` as an unavailable backend."""
        return await self._get(Health, "health")

    async def health_clock(self) -> HealthClock:
        """Server time, useful to check the local clock is in sync."""
        return await self._get(HealthClock, "health", "clock")
