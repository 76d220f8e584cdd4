"""Transaction metadata, grouped by label."""

from typing import Any, List, Optional

from blockfrost_client.fetching import FanOut
from blockfrost_client.types import ListingOptions
from .base import BlockfrostModel, ResourceMixin


class MetadataLabel(BlockfrostModel):
    label: str = ""
    cip10: Optional[str] = None
    count: str = ""


class MetadataJSON(BlockfrostModel):
    tx_hash: str = ""
    json_metadata: Optional[Any] = None


class MetadataCBOR(BlockfrostModel):
    tx_hash: str = ""
    metadata: Optional[str] = None


class MetadataMixin(ResourceMixin):

    async def metadata_labels(self, options: Optional[ListingOptions] = None) -> List[MetadataLabel]:
        return await self._get(List[MetadataLabel], "metadata", "txs", "labels", options=options)

    def metadata_labels_all(self) -> FanOut:
        return self._all(self.metadata_labels)

    async def metadata_label_json(self, label: str, options: Optional[ListingOptions] = None) -> List[MetadataJSON]:
        return await self._get(List[MetadataJSON], "metadata", "txs", "labels", label, options=options)

    def metadata_label_json_all(self, label: str) -> FanOut:
        return self._all(lambda o: self.metadata_label_json(label, o))

    async def metadata_label_cbor(self, label: str, options: Optional[ListingOptions] = None) -> List[MetadataCBOR]:
        return await self._get(List[MetadataCBOR], "metadata", "txs", "labels", label, "cbor", options=options)

    def metadata_label_cbor_all(self, label: str) -> FanOut:
        return self._all(lambda o: self.metadata_label_cbor(label, o))
