"""Projects resource."""

from .builders import BulkDeleteProjectsBuilder, SearchProjectsBuilder
from .client import ProjectsClient
from .schemas import (
    CreateProjectResponse,
    Project,
    ProjectQualifier,
    ProjectVisibility,
    SearchProjectsResponse,
)

__all__ = [
    "ProjectsClient",
    "SearchProjectsBuilder",
    "BulkDeleteProjectsBuilder",
    "Project",
    "ProjectQualifier",
    "ProjectVisibility",
    "SearchProjectsResponse",
    "CreateProjectResponse",
]
