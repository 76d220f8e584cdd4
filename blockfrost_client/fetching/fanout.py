"""Concurrent page walker for listing endpoints."""

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import AsyncIterable, AsyncIterator, Awaitable, Callable, Generic, List, Optional, TypeVar

from blockfrost_client.types import ListingOptions, MAX_PAGE_SIZE

logger = logging.getLogger(__name__)

T = TypeVar("T")
PageFetcher = Callable[[ListingOptions], Awaitable[List[T]]]

_CLOSED = object()


class FanOutState(str, Enum):
    ENQUEUEING = "enqueueing"  # workers may claim new pages
    DRAINING = "draining"      # tail or error seen; in-flight pages finishing
    CLOSED = "closed"          # workers joined, stream closed


@dataclass
class PageResult(Generic[T]):
    """One page of a listing, or the error that fetching it raised."""
    page: int
    items: List[T] = field(default_factory=list)
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class FanOut(Generic[T]):
    """
    Walks every page of a listing with a fixed pool of worker tasks.

    Each worker claims the next page index (count=page_size) and calls
    `fetch_page`. The first short page or error moves the walker to DRAINING:
    no new pages are claimed, in-flight pages still complete and are delivered.

    Results arrive in completion order, not page order (sort by `page`, or
    use workers=1 for serial iteration). Empty pages past the tail carry no
    items and are not delivered. The result queue holds at most `workers`
    entries, so a slow consumer stalls the workers instead of dropping pages.

    Iterate once:
        async for result in FanOut(client.pools, workers=10):
            if not result.ok:
                raise result.error
            ...
    Leaving the loop early or cancelling the consuming task cancels the
    workers; wrap in contextlib.aclosing() to make early exit deterministic.
    """

    def __init__(self, fetch_page: PageFetcher, workers: int, page_size: int = MAX_PAGE_SIZE, order: str = ""):
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")
        self.fetch_page = fetch_page
        self.workers = workers
        self.page_size = page_size
        self.order = order
        self.state = FanOutState.ENQUEUEING
        self._next_page = 1
        self._results: Optional[asyncio.Queue] = None
        self._started = False

    def _claim_job(self) -> Optional[ListingOptions]:
        if self.state is not FanOutState.ENQUEUEING:
            return None
        page = self._next_page
        self._next_page += 1
        return ListingOptions(count=self.page_size, page=page, order=self.order)

    def _terminate(self, reason: str):
        # Edge-triggered: only the first signal changes state
        if self.state is FanOutState.ENQUEUEING:
            self.state = FanOutState.DRAINING
            logger.debug(f"Fan-out draining after page {self._next_page - 1}: {reason}")

    async def _worker(self):
        while (job := self._claim_job()) is not None:
            try:
                items = await self.fetch_page(job)
            except Exception as e:
                self._terminate(f"page {job.page} failed: {e}")
                await self._results.put(PageResult(job.page, [], e))
                continue

            if len(items) < job.count:
                self._terminate(f"page {job.page} returned {len(items)} items")
                if not items:
                    continue
            await self._results.put(PageResult(job.page, list(items)))

    async def _close_when_done(self, workers: List["asyncio.Task"]):
        await asyncio.wait(workers)
        self.state = FanOutState.CLOSED
        await self._results.put(_CLOSED)

    def __aiter__(self) -> AsyncIterator[PageResult[T]]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[PageResult[T]]:
        if self._started:
            raise RuntimeError("FanOut can only be iterated once")
        self._started = True
        self._results = asyncio.Queue(maxsize=self.workers)

        workers = [asyncio.ensure_future(self._worker()) for _ in range(self.workers)]
        supervisor = asyncio.ensure_future(self._close_when_done(workers))
        try:
            while True:
                result = await self._results.get()
                if result is _CLOSED:
                    break
                yield result
        finally:
            tasks = [*workers, supervisor]
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            self.state = FanOutState.CLOSED


def fetch_all(fetch_page: PageFetcher, workers: int, order: str = "") -> FanOut:
    """Stream every page of a listing using `workers` concurrent requests."""
    return FanOut(fetch_page, workers, MAX_PAGE_SIZE, order)


async def collect_pages(stream: AsyncIterable[PageResult[T]]) -> List[T]:
    """
    Drain a fan-out stream into one list in page order.

    Raises the error of the lowest failing page, after the stream has closed.
    """
    results = [result async for result in stream]
    results.sort(key=lambda r: r.page)
    for result in results:
        if result.error is not None:
            raise result.error
    return [item for result in results for item in result.items]
