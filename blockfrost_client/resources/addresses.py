"""Address endpoints. Addresses may be bech32 strings or pycardano Address objects."""

from typing import List, Optional, Union

from pycardano import Address as CardanoAddress

from blockfrost_client.fetching import FanOut
from blockfrost_client.types import ListingOptions
from .base import Amount, BlockfrostModel, ResourceMixin, address_str

AddressLike = Union[str, CardanoAddress]


class Address(BlockfrostModel):
    address: str = ""
    amount: List[Amount] = []
    stake_address: Optional[str] = None
    type: str = ""  # byron | shelley
    script: bool = False


class AddressDetails(BlockfrostModel):
    """Totals from /addresses/{address}/total."""
    address: str = ""
    received_sum: List[Amount] = []
    sent_sum: List[Amount] = []
    tx_count: int = 0


class AddressTransaction(BlockfrostModel):
    tx_hash: str = ""
    tx_index: int = 0
    block_height: int = 0
    block_time: int = 0


class AddressUTXO(BlockfrostModel):
    tx_hash: str = ""
    output_index: int = 0
    amount: List[Amount] = []
    block: str = ""
    data_hash: Optional[str] = None
    inline_datum: Optional[str] = None
    reference_script_hash: Optional[str] = None


class AddressesMixin(ResourceMixin):

    async def address(self, address: AddressLike) -> Address:
        return await self._get(Address, "addresses", address_str(address))

    async def address_total(self, address: AddressLike) -> AddressDetails:
        return await self._get(AddressDetails, "addresses", address_str(address), "total")

    async def address_transactions(
        self, address: AddressLike, options: Optional[ListingOptions] = None
    ) -> List[AddressTransaction]:
        """
        Transactions touching an address.

        `options.from_` / `options.to` bound the block range, as
        "<height>" or "<height>:<tx index>".
        """
        return await self._get(
            List[AddressTransaction], "addresses", address_str(address), "transactions", options=options
        )

    def address_transactions_all(self, address: AddressLike) -> FanOut:
        return self._all(lambda o: self.address_transactions(address, o))

    async def address_utxos(self, address: AddressLike, options: Optional[ListingOptions] = None) -> List[AddressUTXO]:
        return await self._get(List[AddressUTXO], "addresses", address_str(address), "utxos", options=options)

    def address_utxos_all(self, address: AddressLike) -> FanOut:
        return self._all(lambda o: self.address_utxos(address, o))

    async def address_utxos_asset(
        self, address: AddressLike, asset: str, options: Optional[ListingOptions] = None
    ) -> List[AddressUTXO]:
        """UTxOs of an address holding `asset` (policy id + hex asset name)."""
        return await self._get(List[AddressUTXO], "addresses", address_str(address), "utxos", asset, options=options)

    def address_utxos_asset_all(self, address: AddressLike, asset: str) -> FanOut:
        return self._all(lambda o: self.address_utxos_asset(address, asset, o))
