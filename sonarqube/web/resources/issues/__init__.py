"""Issues resource."""

from .builders import SearchIssuesBuilder
from .client import IssuesClient
from .schemas import (
    CleanCodeAttributeCategory,
    Comment,
    Facet,
    FacetMode,
    FacetValue,
    Impact,
    ImpactSeverity,
    ImpactSoftwareQuality,
    Issue,
    IssueResponse,
    IssueSeverity,
    IssueStatus,
    IssueType,
    LegacyIssueStatus,
    SearchIssuesResponse,
    SearchTagsResponse,
    TextRange,
)

__all__ = [
    "IssuesClient",
    "SearchIssuesBuilder",
    "Issue",
    "IssueResponse",
    "SearchIssuesResponse",
    "SearchTagsResponse",
    "Comment",
    "Facet",
    "FacetValue",
    "Impact",
    "TextRange",
    "IssueStatus",
    "LegacyIssueStatus",
    "IssueSeverity",
    "IssueType",
    "ImpactSeverity",
    "ImpactSoftwareQuality",
    "CleanCodeAttributeCategory",
    "FacetMode",
]
