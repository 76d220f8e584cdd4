"""Authenticated request pipeline shared by every resource."""

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from blockfrost_client.errors import ClientConstructError, NetworkError, api_error_for
from blockfrost_client.pagination import encode_query
from blockfrost_client.types import ListingOptions
from blockfrost_client.version import __version__
from .doer import HttpRequestDoer

logger = logging.getLogger(__name__)

USER_AGENT = f"blockfrost-client/{__version__}"
JSON_CONTENT = "application/json"
CBOR_CONTENT = "application/cbor"


def validate_base_url(server: str) -> str:
    """Return `server` without a trailing slash; raise ClientConstructError if unusable."""
    try:
        url = httpx.URL(server)
    except (httpx.InvalidURL, TypeError) as e:
        raise ClientConstructError(f"Invalid server URL {server!r}: {e}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise ClientConstructError(f"Server URL must be absolute http(s): {server!r}")
    return server.rstrip("/")


class Transport:
    """
    Issues one authenticated request and returns the body or raises a typed error.

    Holds no mutable state; safe to share between tasks as long as the
    executor is.
    """

    def __init__(self, base_url: str, project_id: str, doer: HttpRequestDoer):
        self.base_url = validate_base_url(base_url)
        self.project_id = project_id
        self.doer = doer

    def url(self, *segments: Any, query: Optional[ListingOptions] = None, safe: str = "") -> str:
        """
        Build `<base>/<segment>/.../<segment>[?query]`.

        Segments are percent-quoted; pass safe="/" for parameters that are
        themselves paths (IPFS gateway).
        """
        path = "/".join(quote(str(s), safe=safe) for s in segments)
        url = f"{self.base_url}/{path}" if segments else self.base_url
        qs = encode_query(query)
        return f"{url}?{qs}" if qs else url

    def _headers(self, content_type: Optional[str], multipart: bool) -> Dict[str, str]:
        headers = {"project_id": self.project_id, "User-Agent": USER_AGENT}
        # multipart bodies carry their own boundary header
        if not multipart:
            headers["content-type"] = content_type or JSON_CONTENT
        return headers

    def build_request(
        self,
        method: str,
        url: str,
        content: Optional[bytes] = None,
        files: Optional[Dict[str, Any]] = None,
        content_type: Optional[str] = None,
    ) -> httpx.Request:
        try:
            return httpx.Request(
                method, url,
                headers=self._headers(content_type, files is not None),
                content=content, files=files,
            )
        except httpx.InvalidURL as e:
            raise ClientConstructError(f"Invalid request URL {url!r}: {e}") from e

    async def request(
        self,
        method: str,
        url: str,
        content: Optional[bytes] = None,
        files: Optional[Dict[str, Any]] = None,
        content_type: Optional[str] = None,
    ) -> bytes:
        """
        Send a request and return the fully read response body.

        Raises:
            NetworkError: the executor failed (connection, timeout, protocol).
            APIError: the response status was not 2xx (variant picked by status).
        """
        request = self.build_request(method, url, content, files, content_type)
        try:
            response = await self.doer.send(request)
        except (httpx.HTTPError, OSError, RuntimeError) as e:
            # RuntimeError: the executor was already closed
            raise NetworkError(f"{method} {url} failed: {e}") from e

        try:
            body = await response.aread()
        except httpx.HTTPError as e:
            raise NetworkError(f"{method} {url}: failed reading response: {e}") from e
        finally:
            await response.aclose()

        status = response.status_code
        logger.debug(f"{method} {url} -> {status} ({len(body)} bytes)")
        if 200 <= status < 300:
            return body
        raise api_error_for(status, body)

    async def get(self, url: str) -> bytes:
        return await self.request("GET", url)
