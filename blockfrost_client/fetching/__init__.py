"""Fan-out iteration over paginated listings."""

from .fanout import FanOut, FanOutState, PageResult, PageFetcher, fetch_all, collect_pages

__all__ = ["FanOut", "FanOutState", "PageResult", "PageFetcher", "fetch_all", "collect_pages"]
