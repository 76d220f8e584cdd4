"""Nut.link oracle endpoints."""

from typing import Any, List, Optional

from blockfrost_client.fetching import FanOut
from blockfrost_client.types import ListingOptions
from .addresses import AddressLike
from .base import BlockfrostModel, ResourceMixin, address_str


class NutlinkMetadata(BlockfrostModel):
    ticker: str = ""
    name: str = ""
    description: str = ""
    homepage: str = ""
    address: str = ""


class NutlinkAddress(BlockfrostModel):
    address: str = ""
    metadata_url: str = ""
    metadata_hash: str = ""
    metadata: Optional[NutlinkMetadata] = None


class Ticker(BlockfrostModel):
    name: str = ""
    count: int = 0
    latest_block: int = 0


class TickerRecord(BlockfrostModel):
    tx_hash: str = ""
    block_height: int = 0
    tx_index: int = 0
    payload: Optional[Any] = None


class AddressTickerRecord(TickerRecord):
    address: str = ""


class NutlinkMixin(ResourceMixin):

    async def nutlink(self, address: AddressLike) -> NutlinkAddress:
        return await self._get(NutlinkAddress, "nutlink", address_str(address))

    async def nutlink_address_tickers(self, address: AddressLike, options: Optional[ListingOptions] = None) -> List[Ticker]:
        """Tickers published by an oracle address."""
        return await self._get(List[Ticker], "nutlink", address_str(address), "tickers", options=options)

    def nutlink_address_tickers_all(self, address: AddressLike) -> FanOut:
        return self._all(lambda o: self.nutlink_address_tickers(address, o))

    async def nutlink_address_ticker(
        self, address: AddressLike, ticker: str, options: Optional[ListingOptions] = None
    ) -> List[TickerRecord]:
        return await self._get(List[TickerRecord], "nutlink", address_str(address), "tickers", ticker, options=options)

    def nutlink_address_ticker_all(self, address: AddressLike, ticker: str) -> FanOut:
        return self._all(lambda o: self.nutlink_address_ticker(address, ticker, o))

    async def nutlink_ticker(self, ticker: str, options: Optional[ListingOptions] = None) -> List[AddressTickerRecord]:
        """Records of `ticker` across every oracle."""
        return await self._get(List[AddressTickerRecord], "nutlink", "tickers", ticker, options=options)

    def nutlink_ticker_all(self, ticker: str) -> FanOut:
        return self._all(lambda o: self.nutlink_ticker(ticker, o))
