"""HTTP executor protocol used by the transport."""

from typing import Protocol, runtime_checkable

import httpx


@runtime_checkable
class HttpRequestDoer(Protocol):
    """
    Anything that can perform a prepared request (httpx.AsyncClient, fakes, proxies).

    Implementations must be safe to share between concurrent tasks; a single
    executor serves every call made through one client.
    """

    async def send(self, request: httpx.Request) -> httpx.Response:
        """Perform `request` and return the response."""
        ...
