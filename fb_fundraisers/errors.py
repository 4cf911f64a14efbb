"""
Error types raised by the fundraiser client.

Every failure surfaces to the caller as a FundraiserClientError subclass.
Only PlatformError carries the Graph API error payload; callers that need
platform error codes should go through error_codes(), error_messages()
or is_cover_photo_error() rather than matching on message text.
"""
import math
from typing import Any

from fb_fundraisers.config import CREATE_FUNDRAISER_ENDPOINT

BAD_REQUEST = 400

# (code, error_subcode) pairs the Graph API returns for rejected cover photos.
#   100 1366046: photos should be smaller than 4 MB and saved as JPG, PNG, GIF, TIFF, HEIF or WebP.
#   100 1366055: photos should be less than 30,000 pixels in any dimension and
#                less than 80,000,000 pixels in total size.
COVER_PHOTO_ERROR_CODES = frozenset({(100, 1366046), (100, 1366055)})


class FundraiserClientError(Exception):
    """Base class for all fundraiser client failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class EncodingError(FundraiserClientError):
    """Raised when a field or attachment cannot be written into the request form."""
    pass


class MaxSizeExceededError(FundraiserClientError):
    """Raised by RestrictedReader once more than max_size bytes have been read."""

    def __init__(self, max_size: int, bytes_read: int):
        self.max_size = max_size
        self.bytes_read = bytes_read
        super().__init__("max size exceeded")


class TransportError(FundraiserClientError):
    """Raised when the request cannot be sent or its response cannot be read."""
    pass


class ResponseParseError(FundraiserClientError):
    """Raised when a non-empty response body is not a JSON object."""
    pass


class InvalidResponseError(FundraiserClientError):
    """Raised on an unexpected status whose body carries no `error` object."""

    def __init__(self, status: int):
        self.status = status
        super().__init__(f"invalid response {status}")


class PlatformError(FundraiserClientError):
    """
    A failure reported by the Graph API itself.

    See https://developers.facebook.com/docs/graph-api/using-graph-api/error-handling/

    Args:
        endpoint: The endpoint URL that was called.
        status: The HTTP status code received.
        error_map: The decoded `error` object from the response body.
    """

    def __init__(self, endpoint: str, status: int, error_map: dict[str, Any]):
        self.endpoint = endpoint
        self.status = status
        self.error_map = error_map
        super().__init__(f"{endpoint} {status} {error_map}")

    def _int_field(self, key: str) -> int:
        value = self.error_map.get(key)
        if isinstance(value, bool):
            return 0
        if isinstance(value, int):
            return value
        if isinstance(value, float) and math.isfinite(value):
            return int(value)
        return 0

    def _str_field(self, key: str) -> str:
        value = self.error_map.get(key)
        return value if isinstance(value, str) else ""

    @property
    def code(self) -> int:
        return self._int_field("code")

    @property
    def error_subcode(self) -> int:
        return self._int_field("error_subcode")

    @property
    def error_message(self) -> str:
        return self._str_field("message")

    @property
    def error_user_title(self) -> str:
        return self._str_field("error_user_title")

    @property
    def error_user_msg(self) -> str:
        return self._str_field("error_user_msg")

    def error_codes(self) -> tuple[int, int]:
        return self.code, self.error_subcode

    def messages(self) -> tuple[str, str, str]:
        return self.error_message, self.error_user_title, self.error_user_msg


def error_codes(exc: BaseException) -> tuple[int, int]:
    """Return the Graph API (code, error_subcode) for exc, or (0, 0) if it is not a PlatformError."""
    if isinstance(exc, PlatformError):
        return exc.error_codes()
    return 0, 0


def error_messages(exc: BaseException) -> tuple[str, str, str]:
    """
    Return (message, error_user_title, error_user_msg) for exc.

    Errors that did not come from the Graph API report str(exc) as the
    message and empty user-facing strings.
    """
    if isinstance(exc, PlatformError):
        return exc.messages()
    return str(exc), "", ""


def is_cover_photo_error(exc: BaseException) -> bool:
    """Return True if exc means the fundraiser cover photo was rejected, locally or by the platform."""
    if isinstance(exc, MaxSizeExceededError):
        return True
    if isinstance(exc, PlatformError):
        return (
            exc.endpoint == CREATE_FUNDRAISER_ENDPOINT
            and exc.status == BAD_REQUEST
            and exc.error_codes() in COVER_PHOTO_ERROR_CODES
        )
    return False
