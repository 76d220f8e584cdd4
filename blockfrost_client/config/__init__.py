"""Client configuration."""

from .settings import (
    ClientOptions,
    resolve_project_id,
    PROJECT_ID_ENV,
    IPFS_PROJECT_ID_ENV,
    DEFAULT_ROUTINES,
    DEFAULT_TIMEOUT,
)

__all__ = [
    "ClientOptions", "resolve_project_id",
    "PROJECT_ID_ENV", "IPFS_PROJECT_ID_ENV", "DEFAULT_ROUTINES", "DEFAULT_TIMEOUT",
]
