"""Core enumerations shared by the transport, builders and resource clients.

Architecture:
    String enums keep wire values and log fields readable while still giving
    type safety at call sites. Resource-specific value sets (issue statuses,
    project visibility, ...) live next to their resource schemas.
"""

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP verbs used by the Web API."""

    GET = "GET"
    POST = "POST"


class ResponseType(str, Enum):
    """How a successful response body is decoded."""

    JSON = "json"
    TEXT = "text"
    BYTES = "bytes"


class ValidationReason(str, Enum):
    """Machine-readable reason attached to a ValidationError."""

    MISSING_REQUIRED = "missing_required"
    MUTUALLY_EXCLUSIVE = "mutually_exclusive"
    OUT_OF_RANGE = "out_of_range"
    INVALID_CHOICE = "invalid_choice"
    SERVER_REJECTED = "server_rejected"


class PaginationState(str, Enum):
    """Lifecycle of a single page walk.

    READY -> FETCHING -> HAS_PAGE -> (FETCHING ... | EXHAUSTED)
    Any fetch failure moves the walk to FAILED.
    """

    READY = "ready"
    FETCHING = "fetching"
    HAS_PAGE = "has_page"
    EXHAUSTED = "exhausted"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (PaginationState.EXHAUSTED, PaginationState.FAILED)
