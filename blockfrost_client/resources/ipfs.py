"""IPFS storage, pinning and gateway endpoints (served by the IPFS server)."""

import logging
import os
from typing import List, Optional

import aiofiles

from blockfrost_client.fetching import FanOut
from blockfrost_client.types import ListingOptions
from .base import BlockfrostModel, ResourceMixin

logger = logging.getLogger(__name__)


class IPFSObject(BlockfrostModel):
    name: str = ""
    ipfs_hash: str = ""
    size: str = ""


class IPFSPinnedObject(BlockfrostModel):
    time_created: int = 0
    time_pinned: int = 0
    ipfs_hash: str = ""
    size: str = ""
    state: str = ""  # queued | pinned | unpinned | failed | gc


class IPFSMixin(ResourceMixin):

    async def add(self, path: str) -> IPFSObject:
        """
        Upload a local file. The object must be pinned afterwards or it will
        be garbage collected.

        Raises:
            OSError: the file could not be read.
        """
        async with aiofiles.open(path, "rb") as f:
            content = await f.read()
        return await self.add_content(content, os.path.basename(path))

    async def add_content(self, content: bytes, filename: str = "file") -> IPFSObject:
        """Upload `content` as a single multipart `file` part."""
        obj = await self._post(IPFSObject, "ipfs", "add", files={"file": (filename, content)})
        logger.info(f"Added {filename} to IPFS as {obj.ipfs_hash} ({obj.size} bytes)")
        return obj

    async def pin(self, ipfs_path: str) -> IPFSPinnedObject:
        return await self._post(IPFSPinnedObject, "ipfs", "pin", "add", ipfs_path)

    async def pinned_object(self, ipfs_path: str) -> IPFSPinnedObject:
        return await self._get(IPFSPinnedObject, "ipfs", "pin", "list", ipfs_path)

    async def pinned_objects(self, options: Optional[ListingOptions] = None) -> List[IPFSPinnedObject]:
        return await self._get(List[IPFSPinnedObject], "ipfs", "pin", "list", options=options)

    def pinned_objects_all(self) -> FanOut:
        return self._all(self.pinned_objects)

    async def remove(self, ipfs_path: str) -> IPFSObject:
        """Unpin an object; it becomes eligible for garbage collection."""
        return await self._post(IPFSObject, "ipfs", "pin", "remove", ipfs_path)

    async def gateway(self, ipfs_path: str) -> bytes:
        """Raw content of an object. `ipfs_path` may be a CID or a CID/sub/path."""
        return await self._get_raw("ipfs", "gateway", ipfs_path, safe="/")
