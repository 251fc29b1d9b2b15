"""Issues API response schemas and value sets."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field

from ...models import ApiModel, PaginatedResponse


class IssueStatus(str, Enum):
    """Issue statuses of the current workflow."""

    OPEN = "OPEN"
    CONFIRMED = "CONFIRMED"
    ACCEPTED = "ACCEPTED"
    FIXED = "FIXED"
    FALSE_POSITIVE = "FALSE_POSITIVE"


class LegacyIssueStatus(str, Enum):
    """Statuses of the pre-10.4 workflow (``statuses`` filter)."""

    OPEN = "OPEN"
    CONFIRMED = "CONFIRMED"
    REOPENED = "REOPENED"
    RESOLVED = "RESOLVED"
    CLOSED = "CLOSED"


class IssueSeverity(str, Enum):
    INFO = "INFO"
    MINOR = "MINOR"
    MAJOR = "MAJOR"
    CRITICAL = "CRITICAL"
    BLOCKER = "BLOCKER"


class IssueType(str, Enum):
    CODE_SMELL = "CODE_SMELL"
    BUG = "BUG"
    VULNERABILITY = "VULNERABILITY"


class ImpactSeverity(str, Enum):
    INFO = "INFO"
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    BLOCKER = "BLOCKER"


class ImpactSoftwareQuality(str, Enum):
    MAINTAINABILITY = "MAINTAINABILITY"
    RELIABILITY = "RELIABILITY"
    SECURITY = "SECURITY"


class CleanCodeAttributeCategory(str, Enum):
    ADAPTABLE = "ADAPTABLE"
    CONSISTENT = "CONSISTENT"
    INTENTIONAL = "INTENTIONAL"
    RESPONSIBLE = "RESPONSIBLE"


class FacetMode(str, Enum):
    COUNT = "count"
    EFFORT = "effort"


class Impact(ApiModel):
    software_quality: str
    severity: str


class TextRange(ApiModel):
    start_line: int
    end_line: int
    start_offset: int | None = None
    end_offset: int | None = None


class Comment(ApiModel):
    key: str
    login: str | None = None
    html_text: str | None = None
    markdown: str | None = None
    created_at: str | None = None


class Issue(ApiModel):
    """Issue as returned by search and by the write actions."""

    key: str
    rule: str | None = None
    component: str | None = None
    project: str | None = None
    line: int | None = None
    text_range: TextRange | None = None
    message: str | None = None
    status: str | None = None
    issue_status: str | None = None
    resolution: str | None = None
    severity: str | None = None
    type: str | None = None
    impacts: list[Impact] = Field(default_factory=list)
    clean_code_attribute: str | None = None
    clean_code_attribute_category: str | None = None
    author: str | None = None
    assignee: str | None = None
    tags: list[str] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    creation_date: str | None = None
    update_date: str | None = None


class FacetValue(ApiModel):
    val: str
    count: int


class Facet(ApiModel):
    property: str
    values: list[FacetValue] = Field(default_factory=list)


class SearchIssuesResponse(PaginatedResponse):
    issues: list[Issue] = Field(default_factory=list)
    components: list[dict[str, Any]] = Field(default_factory=list)
    rules: list[dict[str, Any]] = Field(default_factory=list)
    users: list[dict[str, Any]] = Field(default_factory=list)
    facets: list[Facet] = Field(default_factory=list)


class IssueResponse(ApiModel):
    """Response of single-issue write actions (comment, assign, transition, tags)."""

    issue: Issue
    components: list[dict[str, Any]] = Field(default_factory=list)
    rules: list[dict[str, Any]] = Field(default_factory=list)
    users: list[dict[str, Any]] = Field(default_factory=list)


class SearchTagsResponse(ApiModel):
    tags: list[str] = Field(default_factory=list)
