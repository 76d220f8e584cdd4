"""
Exception hierarchy.

Every failure raised by the library derives from BlockfrostError. Non-2xx
responses map to one APIError subclass per documented status; anything else
becomes UnknownError with the status preserved.
"""

from typing import Any, Dict, Optional, Type

from pydantic import BaseModel, ValidationError


class BlockfrostError(Exception):
    """Base exception for Blockfrost client errors."""

class ClientConstructError(BlockfrostError, ValueError):
    """Invalid client configuration (base URL, worker count, timeout)."""

class NetworkError(BlockfrostError):
    """The HTTP executor failed: connection, DNS, timeout or protocol errors."""

class DecodeError(BlockfrostError):
    """A response or webhook body could not be decoded."""


class ErrorResponse(BaseModel):
    """Error body returned by the API: {"status_code", "error", "message"}."""
    status_code: int = 0
    error: str = ""
    message: str = ""


class APIError(BlockfrostError):
    """Non-2xx response. Subclasses identify which error shape the server sent."""
    STATUS: Optional[int] = None

    def __init__(self, status_code: int, message: str = "", error: str = ""):
        self.status_code = status_code
        self.message = message
        self.error = error
        super().__init__(f"{status_code} {error}: {message}" if error or message else f"{status_code}")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(status_code={self.status_code}, error={self.error!r}, message={self.message!r})"

class BadRequest(APIError):
    STATUS = 400

class Unauthorized(APIError):
    STATUS = 403

class NotFound(APIError):
    STATUS = 404

class AutoBanned(APIError):
    STATUS = 418

class OverusageLimit(APIError):
    STATUS = 429

class InternalServerError(APIError):
    STATUS = 500

class UnknownError(APIError):
    """Any status without a documented error shape."""


# Status registry
API_ERRORS: Dict[int, Type[APIError]] = {
    cls.STATUS: cls
    for cls in (BadRequest, Unauthorized, NotFound, AutoBanned, OverusageLimit, InternalServerError)
}


def api_error_for(status: int, body: bytes) -> APIError:
    """
    Build the APIError variant for `status` from a raw error body.

    An undecodable body still yields the right variant and status code,
    with empty message and error fields.
    """
    cls = API_ERRORS.get(status, UnknownError)
    try:
        payload = ErrorResponse.model_validate_json(body) if body else ErrorResponse()
    except ValidationError:
        payload = ErrorResponse()
    return cls(payload.status_code or status, payload.message, payload.error)


class WebhookError(BlockfrostError):
    """
    Webhook signature verification failed.

    `event` holds the parsed envelope when the body decoded, so callers can
    log which delivery was rejected.
    """
    default_message = "webhook verification failed"

    def __init__(self, message: Optional[str] = None, event: Any = None):
        self.event = event
        super().__init__(message or self.default_message)

class NotSignedError(WebhookError):
    default_message = "Missing blockfrost-signature header"

class InvalidHeaderError(WebhookError):
    default_message = "Invalid blockfrost-signature header format"

class TooOldError(WebhookError):
    default_message = "Signature's timestamp is not within time tolerance"

class NoValidSignatureError(WebhookError):
    default_message = "No valid signature"
