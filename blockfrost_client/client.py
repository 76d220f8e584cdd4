"""Blockfrost API and IPFS clients."""

import logging
from typing import Optional

import httpx

from blockfrost_client.config import ClientOptions, IPFS_PROJECT_ID_ENV, PROJECT_ID_ENV, resolve_project_id
from blockfrost_client.errors import ClientConstructError
from blockfrost_client.transport import HttpRequestDoer, Transport
from blockfrost_client.types import CARDANO_MAINNET, IPFS
from blockfrost_client.resources import (
    AccountsMixin,
    AddressesMixin,
    AssetsMixin,
    BlocksMixin,
    EpochsMixin,
    HealthMixin,
    IPFSMixin,
    LedgerMixin,
    MempoolMixin,
    MetadataMixin,
    MetricsMixin,
    NetworkMixin,
    NutlinkMixin,
    PoolsMixin,
    ScriptsMixin,
    TransactionsMixin,
)

logger = logging.getLogger(__name__)


class BaseClient:
    """
    Shared construction and lifecycle.

    The client is immutable once built and safe to share between tasks.
    When no `http_doer` is given it creates and owns an httpx.AsyncClient,
    closed by `aclose()` or on leaving `async with`. An injected executor is
    never closed here.
    """
    DEFAULT_SERVER: str = CARDANO_MAINNET
    PROJECT_ID_ENV: str = PROJECT_ID_ENV

    def __init__(self, options: Optional[ClientOptions] = None):
        options = options or ClientOptions()
        if options.routines < 1:
            raise ClientConstructError(f"routines must be >= 1, got {options.routines}")
        if options.timeout <= 0:
            raise ClientConstructError(f"timeout must be > 0, got {options.timeout}")

        self.server = options.server or self.DEFAULT_SERVER
        project_id = resolve_project_id(options.project_id, self.PROJECT_ID_ENV)
        if not project_id:
            logger.warning(f"No project id given and {self.PROJECT_ID_ENV} is not set; requests will be rejected")

        self._owns_doer = options.http_doer is None
        doer: HttpRequestDoer = options.http_doer or httpx.AsyncClient(timeout=options.timeout)
        self._transport = Transport(self.server, project_id, doer)
        self._routines = options.routines

    @property
    def routines(self) -> int:
        return self._routines

    async def aclose(self):
        if self._owns_doer:
            await self._transport.doer.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(server={self.server!r}, routines={self._routines})"


class APIClient(
    HealthMixin,
    MetricsMixin,
    AccountsMixin,
    AddressesMixin,
    AssetsMixin,
    BlocksMixin,
    EpochsMixin,
    LedgerMixin,
    NetworkMixin,
    MempoolMixin,
    MetadataMixin,
    NutlinkMixin,
    PoolsMixin,
    ScriptsMixin,
    TransactionsMixin,
    BaseClient,
):
    """
    Cardano API client.

    Usage:
        async with APIClient(ClientOptions(project_id="mainnet...")) as client:
            block = await client.block_latest()
            pools = await collect_pages(client.pools_all())
    """


class IPFSClient(IPFSMixin, BaseClient):
    """IPFS client; defaults to the IPFS server and BLOCKFROST_IPFS_PROJECT_ID."""
    DEFAULT_SERVER = IPFS
    PROJECT_ID_ENV = IPFS_PROJECT_ID_ENV
