"""IPFS client."""

import asyncio
import time

import aiofiles.threadpool
import httpx
import pytest

from blockfrost_client import NotFound, collect_pages

from conftest import PROJECT_ID

CID = "QmUCXMTcvuJpwHF3gABRr69ceQR2uEG2Fsik9CyWh8MUoQ"


@pytest.mark.asyncio
async def test_add_uploads_multipart_file(ipfs, backend, tmp_path):
    path = tmp_path / "README.md"
    path.write_bytes(b"# hello ipfs\n")
    backend.add("/ipfs/add", {"name": "README.md", "ipfs_hash": CID, "size": "125297"}, method="POST")

    obj = await ipfs.add(str(path))

    request = backend.last
    assert obj.ipfs_hash == CID
    assert request.headers["project_id"] == PROJECT_ID
    assert request.headers["content-type"].startswith("multipart/form-data; boundary=")
    body = request.content
    assert b'name="file"; filename="README.md"' in body
    assert b"# hello ipfs\n" in body


@pytest.mark.asyncio
async def test_add_content(ipfs, backend):
    backend.add("/ipfs/add", {"name": "data.json", "ipfs_hash": CID, "size": "2"}, method="POST")

    obj = await ipfs.add_content(b"{}", "data.json")

    assert obj.name == "data.json"
    assert b'filename="data.json"' in backend.last.content


@pytest.mark.asyncio
async def test_add_missing_file(ipfs, backend, tmp_path):
    with pytest.raises(FileNotFoundError):
        await ipfs.add(str(tmp_path / "missing.bin"))
    assert backend.requests == []


@pytest.mark.asyncio
async def test_add_reads_file_off_the_event_loop(ipfs, backend, tmp_path, monkeypatch):
    path = tmp_path / "slow.bin"
    path.write_bytes(b"slow")
    backend.add("/ipfs/add", {"name": "slow.bin", "ipfs_hash": CID, "size": "4"}, method="POST")

    real_open = aiofiles.threadpool.sync_open

    def slow_open(*args, **kwargs):
        time.sleep(0.3)
        return real_open(*args, **kwargs)

    monkeypatch.setattr(aiofiles.threadpool, "sync_open", slow_open)

    gaps = []

    async def ticker():
        last = time.monotonic()
        while True:
            await asyncio.sleep(0.02)
            now = time.monotonic()
            gaps.append(now - last)
            last = now

    ticks = asyncio.ensure_future(ticker())
    try:
        obj = await ipfs.add(str(path))
    finally:
        ticks.cancel()

    assert obj.name == "slow.bin"
    assert gaps and max(gaps) < 0.2


@pytest.mark.asyncio
async def test_pin_and_remove_are_posts(ipfs, backend):
    pinned = {"time_created": 1615551024, "time_pinned": 1615551024, "ipfs_hash": CID, "size": "1615551024",
              "state": "queued"}
    backend.add(f"/ipfs/pin/add/{CID}", pinned, method="POST")
    backend.add(f"/ipfs/pin/remove/{CID}", {"name": CID, "ipfs_hash": CID, "size": ""}, method="POST")

    assert (await ipfs.pin(CID)).state == "queued"
    assert backend.last.method == "POST"
    assert (await ipfs.remove(CID)).ipfs_hash == CID


@pytest.mark.asyncio
async def test_pinned_objects(ipfs, backend):
    pinned = {"time_created": 1, "time_pinned": 2, "ipfs_hash": CID, "size": "3", "state": "pinned"}
    backend.add(f"/ipfs/pin/list/{CID}", pinned)
    backend.add_handler("/ipfs/pin/list", lambda request: httpx.Response(
        200, json=[pinned] if request.url.params.get("page", "1") == "1" else []
    ))

    assert (await ipfs.pinned_object(CID)).state == "pinned"
    assert len(await ipfs.pinned_objects()) == 1
    assert len(await collect_pages(ipfs.pinned_objects_all())) == 1


@pytest.mark.asyncio
async def test_gateway_returns_raw_bytes(ipfs, backend):
    backend.add(f"/ipfs/gateway/{CID}/docs/index.html", b"<html>hi</html>")

    content = await ipfs.gateway(f"{CID}/docs/index.html")

    assert content == b"<html>hi</html>"


@pytest.mark.asyncio
async def test_gateway_not_found(ipfs):
    with pytest.raises(NotFound):
        await ipfs.gateway("QmMissing")
