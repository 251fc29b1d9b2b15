"""SonarQube Web API - async client for the SonarQube REST API."""

from .client import SonarQubeClient
from .config import DEFAULT_PAGE_SIZE, DEFAULT_TIMEOUT, MAX_PAGE_SIZE, ClientConfig
from .core import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    IndexingInProgressError,
    NetworkError,
    NotFoundError,
    PaginationState,
    RateLimitError,
    RequestTimeoutError,
    ResponseParseError,
    ServerError,
    SonarQubeError,
    ValidationError,
    ValidationReason,
)
from .models import ApiModel, PaginatedResponse, Paging
from .resources import (
    ComponentsClient,
    IssuesClient,
    ProjectsClient,
    SettingsClient,
    SystemClient,
    UsersClient,
)
from .runtime.builders import PageIterator, PaginatedBuilder, RequestBuilder

__version__ = "0.1.0"

__all__ = [
    # Client
    "SonarQubeClient",
    "ClientConfig",
    "DEFAULT_TIMEOUT",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    # Resources
    "ProjectsClient",
    "IssuesClient",
    "SettingsClient",
    "UsersClient",
    "ComponentsClient",
    "SystemClient",
    # Builders
    "RequestBuilder",
    "PaginatedBuilder",
    "PageIterator",
    "PaginationState",
    # Models
    "ApiModel",
    "Paging",
    "PaginatedResponse",
    # Exceptions
    "SonarQubeError",
    "ApiError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "IndexingInProgressError",
    "ValidationError",
    "ValidationReason",
    "NetworkError",
    "RequestTimeoutError",
    "ResponseParseError",
]
