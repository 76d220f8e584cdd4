"""Script and datum endpoints."""

from typing import Any, List, Optional

from pydantic import Field

from blockfrost_client.fetching import FanOut
from blockfrost_client.types import ListingOptions
from .base import BlockfrostModel, ResourceMixin


class ScriptRef(BlockfrostModel):
    script_hash: str = ""


class Script(BlockfrostModel):
    script_hash: str = ""
    type: str = ""  # timelock | plutusV1 | plutusV2
    serialised_size: Optional[int] = None


class ScriptJSON(BlockfrostModel):
    json_: Optional[Any] = Field(None, alias="json")


class ScriptCBOR(BlockfrostModel):
    cbor: Optional[str] = None


class ScriptRedeemer(BlockfrostModel):
    tx_hash: str = ""
    tx_index: int = 0
    purpose: str = ""  # spend | mint | cert | reward
    redeemer_data_hash: str = ""
    datum_hash: str = ""
    unit_mem: str = ""
    unit_steps: str = ""
    fee: str = ""


class Datum(BlockfrostModel):
    json_value: Optional[Any] = None


class ScriptsMixin(ResourceMixin):

    async def scripts(self, options: Optional[ListingOptions] = None) -> List[ScriptRef]:
        return await self._get(List[ScriptRef], "scripts", options=options)

    def scripts_all(self) -> FanOut:
        return self._all(self.scripts)

    async def script(self, script_hash: str) -> Script:
        return await self._get(Script, "scripts", script_hash)

    async def script_json(self, script_hash: str) -> ScriptJSON:
        """JSON form of a timelock script; `json_` is None for Plutus scripts."""
        return await self._get(ScriptJSON, "scripts", script_hash, "json")

    async def script_cbor(self, script_hash: str) -> ScriptCBOR:
        """CBOR hex of a Plutus script; `cbor` is None for timelock scripts."""
        return await self._get(ScriptCBOR, "scripts", script_hash, "cbor")

    async def script_redeemers(self, script_hash: str, options: Optional[ListingOptions] = None) -> List[ScriptRedeemer]:
        return await self._get(List[ScriptRedeemer], "scripts", script_hash, "redeemers", options=options)

    def script_redeemers_all(self, script_hash: str) -> FanOut:
        return self._all(lambda o: self.script_redeemers(script_hash, o))

    async def script_datum(self, datum_hash: str) -> Datum:
        return await self._get(Datum, "scripts", "datum", datum_hash)
