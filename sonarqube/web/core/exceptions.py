"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any

from .enums import ValidationReason


class SonarQubeError(Exception):
    """Base exception for all library errors."""

    code = "UNKNOWN_ERROR"

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        errors: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = errors or []
        self.details = details or {}


class ApiError(SonarQubeError):
    """Non-2xx response without a more specific classification."""

    code = "API_ERROR"

    def __init__(
        self,
        message: str,
        status_code: int,
        errors: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code, errors=errors, details=details)


class AuthenticationError(ApiError):
    """Missing or invalid credentials (401)."""

    code = "AUTHENTICATION_ERROR"

    def __init__(self, message: str = "Authentication failed", **kwargs: Any) -> None:
        super().__init__(message, status_code=401, **kwargs)


class AuthorizationError(ApiError):
    """Authenticated but not allowed (403)."""

    code = "AUTHORIZATION_ERROR"

    def __init__(self, message: str = "Insufficient permissions", **kwargs: Any) -> None:
        super().__init__(message, status_code=403, **kwargs)


class NotFoundError(ApiError):
    """Resource does not exist (404)."""

    code = "NOT_FOUND_ERROR"

    def __init__(self, message: str = "Resource not found", **kwargs: Any) -> None:
        super().__init__(message, status_code=404, **kwargs)


class RateLimitError(ApiError):
    """Server rate limit exceeded (429)."""

    code = "RATE_LIMIT_ERROR"

    def __init__(self, message: str, retry_after: int | None = None, **kwargs: Any) -> None:
        super().__init__(message, status_code=429, **kwargs)
        self.retry_after = retry_after


class ServerError(ApiError):
    """Server-side failure (5xx)."""

    code = "SERVER_ERROR"


class IndexingInProgressError(ServerError):
    """Issue index is rebuilding; the call can be repeated later (503)."""

    code = "INDEXING_IN_PROGRESS"

    def __init__(
        self,
        message: str = "Issue indexing in progress, please try again later",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, status_code=503, **kwargs)


class ValidationError(SonarQubeError):
    """Request parameters rejected.

    Raised client-side by builder rules before any I/O, or for a 400 response
    (reason ``SERVER_REJECTED``, ``status_code`` set).
    """

    code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str,
        reason: ValidationReason = ValidationReason.MISSING_REQUIRED,
        field: str | None = None,
        status_code: int | None = None,
        errors: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code, errors=errors, details=details)
        self.reason = reason
        self.field = field


class NetworkError(SonarQubeError):
    """No response was received from the server."""

    code = "NETWORK_ERROR"

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class RequestTimeoutError(NetworkError):
    """Transport gave up waiting for a response."""

    code = "TIMEOUT_ERROR"

    def __init__(
        self,
        message: str = "Request timed out",
        timeout: float | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.timeout = timeout


class ResponseParseError(SonarQubeError):
    """A 2xx body does not match the schema of its endpoint."""

    code = "RESPONSE_PARSE_ERROR"

    def __init__(
        self,
        message: str,
        model: str | None = None,
        errors: list[str] | None = None,
    ) -> None:
        super().__init__(message, errors=errors, details={"model": model} if model else None)
        self.model = model
