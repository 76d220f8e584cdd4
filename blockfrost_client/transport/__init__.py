"""HTTP transport."""

from .doer import HttpRequestDoer
from .http_client import Transport, validate_base_url, USER_AGENT, JSON_CONTENT, CBOR_CONTENT

__all__ = ["HttpRequestDoer", "Transport", "validate_base_url", "USER_AGENT", "JSON_CONTENT", "CBOR_CONTENT"]
