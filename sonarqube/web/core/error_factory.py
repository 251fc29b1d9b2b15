"""Map HTTP error responses onto the exception hierarchy.

The server reports failures as ``{"errors": [{"msg": "..."}]}``. The status
code alone decides the exception class; the body only supplies messages.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from .enums import ValidationReason
from .exceptions import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    IndexingInProgressError,
    NotFoundError,
    RateLimitError,
    ServerError,
    SonarQubeError,
    ValidationError,
)

_INDEXING_MARKERS = ("indexing in progress", "issues index", "index is not ready")


def parse_error_messages(body: str | None, content_type: str | None = None) -> list[str]:
    """Extract ``errors[].msg`` values from a JSON error body."""
    if not body:
        return []
    if content_type is not None and "json" not in content_type.lower():
        return []
    try:
        payload = json.loads(body)
    except ValueError:
        return []
    if not isinstance(payload, dict):
        return []
    errors = payload.get("errors")
    if not isinstance(errors, list):
        return []
    return [str(e["msg"]) for e in errors if isinstance(e, dict) and e.get("msg")]


def parse_retry_after(value: str | None) -> int | None:
    """Parse a ``Retry-After`` header given in seconds."""
    if not value:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def is_indexing_message(message: str) -> bool:
    lowered = message.lower()
    if any(marker in lowered for marker in _INDEXING_MARKERS):
        return True
    return "index" in lowered and "progress" in lowered


def error_from_response(
    status: int,
    body: str | None = None,
    *,
    content_type: str | None = None,
    reason: str | None = None,
    headers: Mapping[str, str] | None = None,
) -> SonarQubeError:
    """Build the exception matching an HTTP error response.

    Args:
        status: HTTP status code
        body: Raw response body, if any
        content_type: Response Content-Type header
        reason: HTTP reason phrase, used when the body carries no messages
        headers: Response headers (Retry-After is read for 429)

    Returns:
        Exception instance ready to be raised
    """
    errors = parse_error_messages(body, content_type)
    if errors:
        message = ", ".join(errors)
    elif reason:
        message = reason
    else:
        message = f"HTTP {status}"

    details: dict[str, Any] = {}
    if headers:
        details["headers"] = dict(headers)

    if status == 400:
        return ValidationError(
            message,
            reason=ValidationReason.SERVER_REJECTED,
            status_code=400,
            errors=errors,
            details=details,
        )
    if status == 401:
        return AuthenticationError(message, errors=errors, details=details)
    if status == 403:
        return AuthorizationError(message, errors=errors, details=details)
    if status == 404:
        return NotFoundError(message, errors=errors, details=details)
    if status == 429:
        retry_after = parse_retry_after((headers or {}).get("Retry-After"))
        return RateLimitError(message, retry_after=retry_after, errors=errors, details=details)
    if status == 503 and is_indexing_message(message):
        return IndexingInProgressError(message, errors=errors, details=details)
    if 500 <= status < 600:
        return ServerError(message, status_code=status, errors=errors, details=details)
    return ApiError(message, status_code=status, errors=errors, details=details)
