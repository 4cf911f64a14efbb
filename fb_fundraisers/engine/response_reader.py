from __future__ import annotations

"""
Response classification for Graph API calls.

Pure function with no I/O: the caller reads the body, this module decides
whether the call succeeded and which error to raise if it did not.
"""
import json
from typing import Any, Optional

from fb_fundraisers.errors import InvalidResponseError, PlatformError, ResponseParseError


def _reject_constant(token: str) -> Any:
    raise ValueError(f"non-standard JSON constant {token}")


def decode_body(body: Optional[bytes]) -> dict[str, Any]:
    """
    Decode a response body as a JSON object.

    An absent or empty body decodes to an empty dict.

    Raises:
        ResponseParseError: If the body is not valid JSON or not a JSON object.
    """
    if not body:
        return {}
    try:
        decoded = json.loads(body, parse_constant=_reject_constant)
    except ValueError as exc:
        raise ResponseParseError(f"error parsing response {exc}") from exc
    if not isinstance(decoded, dict):
        raise ResponseParseError(
            f"error parsing response: expected a JSON object, got {type(decoded).__name__}"
        )
    return decoded


def classify_response(
    endpoint: str,
    expected_status: int,
    status: int,
    body: Optional[bytes],
) -> dict[str, Any]:
    """
    Turn a status and raw body into the decoded result or a typed error.

    Args:
        endpoint: The endpoint URL that was called.
        expected_status: The status code that means success.
        status: The status code actually received.
        body: The raw response body, or None if none was read.

    Returns:
        The decoded JSON object when status matches expected_status.

    Raises:
        ResponseParseError: Status matched but the body is not a JSON object.
        PlatformError: Status mismatched and the body has an `error` object.
        InvalidResponseError: Status mismatched and there is no `error` object.
    """
    parse_error: ResponseParseError | None = None
    try:
        result = decode_body(body)
    except ResponseParseError as exc:
        if status == expected_status:
            raise
        parse_error = exc
        result = {}

    if status == expected_status:
        return result

    error_map = result.get("error")
    if isinstance(error_map, dict):
        raise PlatformError(endpoint=endpoint, status=status, error_map=error_map)
    raise InvalidResponseError(status) from parse_error
