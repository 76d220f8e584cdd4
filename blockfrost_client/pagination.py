"""Listing options → query parameters."""

from typing import Dict, Optional
from urllib.parse import urlencode

from .types import ListingOptions, MAX_PAGE_SIZE, ORDER_ASC, ORDER_DESC


def encode_listing_options(options: Optional[ListingOptions]) -> Dict[str, str]:
    """Return the query parameters for `options`, dropping anything out of range."""
    if options is None:
        return {}
    params: Dict[str, str] = {}
    if 1 <= options.count <= MAX_PAGE_SIZE:
        params["count"] = str(options.count)
    if options.page > 0:
        params["page"] = str(options.page)
    if options.order in (ORDER_ASC, ORDER_DESC):
        params["order"] = options.order
    if options.from_:
        params["from"] = options.from_
    if options.to:
        params["to"] = options.to
    return params


def encode_query(options: Optional[ListingOptions]) -> str:
    """URL-encoded query string, keys sorted (count, from, order, page, to)."""
    return urlencode(sorted(encode_listing_options(options).items()))
