"""
Async client for the Blockfrost Cardano and IPFS APIs.

Structure:
    blockfrost_client/
    ├── types.py          # Server presets, ListingOptions
    ├── pagination.py     # ListingOptions -> query string
    ├── errors.py         # BlockfrostError hierarchy
    ├── config/           # ClientOptions, env fallback
    ├── transport/        # Authenticated request pipeline (httpx)
    ├── fetching/         # Concurrent page fan-out
    ├── resources/        # Endpoint mixins and payload models
    ├── webhooks/         # Signature verification, event models
    └── client.py         # APIClient, IPFSClient

Usage:
    from blockfrost_client import APIClient, ClientOptions, ListingOptions, collect_pages
    from blockfrost_client.webhooks import verify_webhook_signature
"""

from .version import __version__
from .types import (
    CARDANO_MAINNET,
    CARDANO_TESTNET,
    CARDANO_PREPROD,
    CARDANO_PREVIEW,
    IPFS,
    MAX_PAGE_SIZE,
    ORDER_ASC,
    ORDER_DESC,
    ListingOptions,
)
from .errors import (
    BlockfrostError,
    ClientConstructError,
    NetworkError,
    DecodeError,
    APIError,
    BadRequest,
    Unauthorized,
    NotFound,
    AutoBanned,
    OverusageLimit,
    InternalServerError,
    UnknownError,
    WebhookError,
    NotSignedError,
    InvalidHeaderError,
    TooOldError,
    NoValidSignatureError,
)
from .config import ClientOptions
from .fetching import FanOut, PageResult, fetch_all, collect_pages
from .client import APIClient, IPFSClient

__all__ = [
    "__version__",
    # Types
    "CARDANO_MAINNET", "CARDANO_TESTNET", "CARDANO_PREPROD", "CARDANO_PREVIEW", "IPFS",
    "MAX_PAGE_SIZE", "ORDER_ASC", "ORDER_DESC", "ListingOptions",
    # Errors
    "BlockfrostError", "ClientConstructError", "NetworkError", "DecodeError",
    "APIError", "BadRequest", "Unauthorized", "NotFound", "AutoBanned", "OverusageLimit",
    "InternalServerError", "UnknownError",
    "WebhookError", "NotSignedError", "InvalidHeaderError", "TooOldError", "NoValidSignatureError",
    # Clients
    "ClientOptions", "APIClient", "IPFSClient",
    # Fan-out
    "FanOut", "PageResult", "fetch_all", "collect_pages",
]
