"""Usage metrics for the configured project."""

from typing import List

from .base import BlockfrostModel, ResourceMixin


class Metric(BlockfrostModel):
    time: int = 0
    calls: int = 0


class MetricsEndpoint(BlockfrostModel):
    time: int = 0
    calls: int = 0
    endpoint: str = ""


class MetricsMixin(ResourceMixin):

    async def metrics(self) -> List[Metric]:
        """Usage history over the past 30 days."""
        return await self._get(List[Metric], "metrics")

    async def metrics_endpoints(self) -> List[MetricsEndpoint]:
        """Usage history per endpoint over the past 30 days."""
        return await self._get(List[MetricsEndpoint], "metrics", "endpoints")
