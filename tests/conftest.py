"""
Blockfrost client - pytest fixtures.

Provides:
- FakeBackend: in-process executor built on httpx.MockTransport
- api / ipfs clients wired to it
- Webhook fixture payload and secret
"""
import json
from typing import Any, Callable, Dict, List, Tuple, Union

import httpx
import pytest

from blockfrost_client import APIClient, ClientOptions, IPFSClient

# =============================================================================
# Constants
# =============================================================================
PROJECT_ID = "mainnetTestProjectId"
SERVER = "https://blockfrost.test/api/v0"
BASE_PATH = "/api/v0"

STAKE_ADDRESS = "stake1ux3g2c9dx2nhhehyrezyxpkstartcqmu9hk63qgfkccw5rqttygt7"
MAINNET_ADDRESS = (
    "addr1zxn9efv2f6w82hagxqtn62ju4m293tqvw0uhmdl64ch8uw6j2c79gy9l76sdg0xwhd7r0c0kna0tycz4y5s6mlenh8pq6s3z70"
)

WEBHOOK_SECRET = "59a1eb46-96f4-4f0b-8a03-b4d26e70593a"
WEBHOOK_TIMESTAMP = 1650013856
WEBHOOK_SIGNATURE = "f4c3bb2a8b0c8e21fa7d5fdada2ee87c9c6f6b0b159cc22e483146917e195c3e"
WEBHOOK_BODY = (
    '{"id":"47668401-c3a4-42d4-bac1-ad46515924a3","webhook_id":"cf68eb9c-635f-415e-a5a8-6233638f28d7",'
    '"created":1650013856,"type":"block","payload":{"time":1650013853,"height":7126256,'
    '"hash":"f49521b67b440e5030adf124aee8f88881b7682ba07acf06c2781405b0f806a4","slot":58447562,'
    '"epoch":332,"epoch_slot":386762,"slot_leader":"pool1njjr0zn7uvydjy8067nprgwlyxqnznp9wgllfnag24nycgkda25",'
    '"size":34617,"tx_count":13,"output":"13403118309871","fees":"4986390",'
    '"block_vrf":"vrf_vk197w95j9alkwt8l4g7xkccknhn4pqwx65c5saxnn5ej3cpmps72msgpw69d",'
    '"previous_block":"9e3f5bfc9f0be44cf6e14db9ed5f1efb6b637baff0ea1740bb6711786c724915",'
    '"next_block":null,"confirmations":0}}'
)

Route = Union[Tuple[int, Any], Callable[[httpx.Request], httpx.Response]]


# =============================================================================
# Fake backend
# =============================================================================
class FakeBackend:
    """
    Answers requests by path (relative to the API base, query ignored) and
    records every request it sees. Unrouted paths answer 404.
    """

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Route] = {}
        self.requests: List[httpx.Request] = []

    def add(self, path: str, body: Any = None, status: int = 200, method: str = "GET"):
        self.routes[(method, path)] = (status, body)

    def add_handler(self, path: str, handler: Callable[[httpx.Request], httpx.Response], method: str = "GET"):
        self.routes[(method, path)] = handler

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path.startswith(BASE_PATH):
            path = path[len(BASE_PATH):] or "/"
        route = self.routes.get((request.method, path))
        if route is None:
            return httpx.Response(404, json={"status_code": 404, "error": "Not Found", "message": path})
        if callable(route):
            return route(request)
        status, body = route
        if isinstance(body, bytes):
            return httpx.Response(status, content=body)
        return httpx.Response(status, content=json.dumps(body).encode())

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def page_handler(total_items: int, page_size: int = 100) -> Callable[[httpx.Request], httpx.Response]:
    """Serve `total_items` integers split into pages honouring count/page."""
    def handle(request: httpx.Request) -> httpx.Response:
        count = int(request.url.params.get("count", page_size))
        page = int(request.url.params.get("page", 1))
        start = (page - 1) * count
        items = [f"item{i}" for i in range(start, min(start + count, total_items))]
        return httpx.Response(200, json=items)
    return handle


# =============================================================================
# Fixtures
# =============================================================================
@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def http_doer(backend: FakeBackend) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(backend.handler))


@pytest.fixture
def api(http_doer: httpx.AsyncClient) -> APIClient:
    return APIClient(ClientOptions(project_id=PROJECT_ID, server=SERVER, http_doer=http_doer))


@pytest.fixture
def ipfs(http_doer: httpx.AsyncClient) -> IPFSClient:
    return IPFSClient(ClientOptions(project_id=PROJECT_ID, server=SERVER, http_doer=http_doer))
