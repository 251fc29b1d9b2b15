"""Pydantic v2 models for Web API responses.

Resource-specific models live in ``sonarqube.web.resources.<name>.schemas``;
this package holds the shared base and pagination envelope.
"""

from .base import ApiModel
from .paging import PaginatedResponse, Paging

__all__ = [
    "ApiModel",
    "Paging",
    "PaginatedResponse",
]
