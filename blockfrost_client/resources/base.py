"""Base classes and helpers shared by resource mixins."""

from functools import lru_cache
from typing import Any, Dict, Optional, Union

from pycardano import Address
from pycardano.serialization import CBORSerializable
from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from blockfrost_client.errors import DecodeError
from blockfrost_client.fetching import FanOut, PageFetcher
from blockfrost_client.transport import Transport
from blockfrost_client.types import ListingOptions


class BlockfrostModel(BaseModel):
    """Base for response payloads: unknown fields ignored, missing fields defaulted."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Amount(BlockfrostModel):
    """Quantity of a unit (lovelace or policy_id + asset_name hex)."""
    unit: str = ""
    quantity: str = ""


@lru_cache(maxsize=None)
def _adapter(model: Any) -> TypeAdapter:
    return TypeAdapter(model)


def decode(model: Any, body: bytes) -> Any:
    """Decode a JSON body into `model` (a model class, List[...], str, ...)."""
    try:
        return _adapter(model).validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"Failed to decode response as {model}: {e}") from e


def address_str(address: Union[str, Address]) -> str:
    """Bech32 form of an address given as a string or a pycardano Address."""
    return str(address) if isinstance(address, Address) else address


def cbor_bytes(tx: Union[bytes, bytearray, str, CBORSerializable]) -> bytes:
    """Raw CBOR from bytes, a hex string, or any pycardano serializable (Transaction)."""
    if isinstance(tx, CBORSerializable):
        return tx.to_cbor()
    if isinstance(tx, str):
        try:
            return bytes.fromhex(tx)
        except ValueError as e:
            raise ValueError(f"Transaction string is not valid CBOR hex: {e}") from e
    return bytes(tx)


class ResourceMixin:
    """
    Generic request helpers. Resource mixins are thin wrappers over these.

    Subclasses (the clients) set `_transport` and `_routines`.
    """
    _transport: Transport
    _routines: int

    async def _get(self, model: Any, *segments: Any, options: Optional[ListingOptions] = None, safe: str = "") -> Any:
        url = self._transport.url(*segments, query=options, safe=safe)
        return decode(model, await self._transport.get(url))

    async def _get_raw(self, *segments: Any, safe: str = "") -> bytes:
        return await self._transport.get(self._transport.url(*segments, safe=safe))

    async def _post(
        self,
        model: Any,
        *segments: Any,
        content: Optional[bytes] = None,
        content_type: Optional[str] = None,
        files: Optional[Dict[str, Any]] = None,
    ) -> Any:
        url = self._transport.url(*segments)
        body = await self._transport.request("POST", url, content=content, files=files, content_type=content_type)
        return decode(model, body)

    def _all(self, fetch_page: PageFetcher) -> FanOut:
        return FanOut(fetch_page, self._routines)
