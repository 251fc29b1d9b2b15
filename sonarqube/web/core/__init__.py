"""Core components."""

from .enums import HttpMethod, PaginationState, ResponseType, ValidationReason
from .error_factory import error_from_response, parse_error_messages, parse_retry_after
from .exceptions import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    IndexingInProgressError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    RequestTimeoutError,
    ResponseParseError,
    ServerError,
    SonarQubeError,
    ValidationError,
)

__all__ = [
    "HttpMethod",
    "PaginationState",
    "ResponseType",
    "ValidationReason",
    "SonarQubeError",
    "ApiError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "IndexingInProgressError",
    "ValidationError",
    "NetworkError",
    "RequestTimeoutError",
    "ResponseParseError",
    "error_from_response",
    "parse_error_messages",
    "parse_retry_after",
]
