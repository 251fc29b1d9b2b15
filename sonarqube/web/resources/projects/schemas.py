"""Projects API response schemas."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from ...models import ApiModel, PaginatedResponse


class ProjectVisibility(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"


class ProjectQualifier(str, Enum):
    PROJECT = "TRK"
    APPLICATION = "APP"
    PORTFOLIO = "VW"


class Project(ApiModel):
    """Project as listed by ``/api/projects/search``."""

    key: str
    name: str
    qualifier: str | None = None
    visibility: str | None = None
    last_analysis_date: str | None = None
    revision: str | None = None
    managed: bool | None = None


class SearchProjectsResponse(PaginatedResponse):
    components: list[Project] = Field(default_factory=list)


class CreateProjectResponse(ApiModel):
    project: Project
