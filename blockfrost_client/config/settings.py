"""
Client configuration - pass values when constructing a client.
"""

import os
from dataclasses import dataclass
from typing import Optional

from blockfrost_client.transport.doer import HttpRequestDoer

PROJECT_ID_ENV = "BLOCKFROST_PROJECT_ID"
IPFS_PROJECT_ID_ENV = "BLOCKFROST_IPFS_PROJECT_ID"

DEFAULT_ROUTINES = 10
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class ClientOptions:
    """Construction-time options for APIClient and IPFSClient."""

    # ===================
    # Authentication
    # ===================
    project_id: Optional[str] = None  # falls back to BLOCKFROST_PROJECT_ID / BLOCKFROST_IPFS_PROJECT_ID

    # ===================
    # Transport
    # ===================
    server: Optional[str] = None  # None = client default (mainnet, or IPFS for IPFSClient)
    http_doer: Optional[HttpRequestDoer] = None  # replaces the default httpx.AsyncClient
    timeout: float = DEFAULT_TIMEOUT  # seconds, default executor only

    # ===================
    # Fan-out
    # ===================
    routines: int = DEFAULT_ROUTINES  # workers for *_all methods


def resolve_project_id(explicit: Optional[str], env_var: str) -> str:
    """Explicit value wins; otherwise read `env_var` (empty string if unset)."""
    if explicit:
        return explicit
    return os.environ.get(env_var, "")
