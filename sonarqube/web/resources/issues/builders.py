"""Builder for ``/api/issues/search``."""

from __future__ import annotations

import warnings
from enum import Enum
from typing import Any, Self

from ...runtime.builders import MutuallyExclusive, OneOf, PaginatedBuilder
from .schemas import (
    CleanCodeAttributeCategory,
    FacetMode,
    ImpactSeverity,
    ImpactSoftwareQuality,
    Issue,
    IssueSeverity,
    IssueStatus,
    IssueType,
    LegacyIssueStatus,
    SearchIssuesResponse,
)

RESOLUTIONS = ("FALSE-POSITIVE", "WONTFIX", "FIXED", "REMOVED")


def _values(enum: type[Enum]) -> tuple[str, ...]:
    return tuple(member.value for member in enum)


def _deprecated(name: str, replacement: str) -> None:
    warnings.warn(
        f"{name} is deprecated since SonarQube 10.4, use {replacement} instead",
        DeprecationWarning,
        stacklevel=3,
    )


class SearchIssuesBuilder(PaginatedBuilder[SearchIssuesResponse, Issue]):
    """Paginated issue search.

    List filters are sent comma-joined. Date filters accept ISO dates or
    datetimes; ``created_in_last`` takes a span such as ``"1m2w"``.

    Example:
        >>> issues = await (
        ...     client.issues.search()
        ...     .projects(["my-app"])
        ...     .impact_severities(["HIGH", "BLOCKER"])
        ...     .to_list()
        ... )
    """

    items_field = "issues"
    rules = (
        MutuallyExclusive(("createdAt", "createdAfter")),
        MutuallyExclusive(("createdAt", "createdBefore")),
        MutuallyExclusive(("createdAt", "createdInLast")),
        MutuallyExclusive(("createdAfter", "createdInLast")),
        MutuallyExclusive(("branch", "pullRequest")),
        OneOf("issueStatuses", _values(IssueStatus)),
        OneOf("impactSeverities", _values(ImpactSeverity)),
        OneOf("impactSoftwareQualities", _values(ImpactSoftwareQuality)),
        OneOf("cleanCodeAttributeCategories", _values(CleanCodeAttributeCategory)),
        OneOf("statuses", _values(LegacyIssueStatus)),
        OneOf("severities", _values(IssueSeverity)),
        OneOf("types", _values(IssueType)),
        OneOf("resolutions", RESOLUTIONS),
        OneOf("facetMode", _values(FacetMode)),
    )

    # Scope

    def components(self, keys: list[str]) -> Self:
        return self._set_param("componentKeys", keys)

    def projects(self, keys: list[str]) -> Self:
        return self._set_param("projects", keys)

    def issues(self, keys: list[str]) -> Self:
        return self._set_param("issues", keys)

    def branch(self, name: str) -> Self:
        return self._set_param("branch", name)

    def pull_request(self, pull_request_id: str) -> Self:
        return self._set_param("pullRequest", pull_request_id)

    def organization(self, key: str) -> Self:
        return self._set_param("organization", key)

    def on_component_only(self, value: bool = True) -> Self:
        return self._set_param("onComponentOnly", value)

    def in_new_code_period(self, value: bool = True) -> Self:
        return self._set_param("inNewCodePeriod", value)

    # Classification

    def issue_statuses(self, statuses: list[IssueStatus | str]) -> Self:
        return self._set_param("issueStatuses", statuses)

    def impact_severities(self, severities: list[ImpactSeverity | str]) -> Self:
        return self._set_param("impactSeverities", severities)

    def impact_software_qualities(self, qualities: list[ImpactSoftwareQuality | str]) -> Self:
        return self._set_param("impactSoftwareQualities", qualities)

    def clean_code_attribute_categories(
        self, categories: list[CleanCodeAttributeCategory | str]
    ) -> Self:
        return self._set_param("cleanCodeAttributeCategories", categories)

    def statuses(self, statuses: list[LegacyIssueStatus | str]) -> Self:
        _deprecated("statuses", "issue_statuses")
        return self._set_param("statuses", statuses)

    def severities(self, severities: list[IssueSeverity | str]) -> Self:
        _deprecated("severities", "impact_severities")
        return self._set_param("severities", severities)

    def types(self, types: list[IssueType | str]) -> Self:
        _deprecated("types", "impact_software_qualities")
        return self._set_param("types", types)

    def resolutions(self, resolutions: list[str]) -> Self:
        _deprecated("resolutions", "issue_statuses")
        return self._set_param("resolutions", resolutions)

    def resolved(self, value: bool = True) -> Self:
        return self._set_param("resolved", value)

    def rule_keys(self, keys: list[str]) -> Self:
        """Filter by rule keys, e.g. ``python:S1192``."""
        return self._set_param("rules", keys)

    def tags(self, tags: list[str]) -> Self:
        return self._set_param("tags", tags)

    def languages(self, languages: list[str]) -> Self:
        return self._set_param("languages", languages)

    def cwe(self, identifiers: list[str]) -> Self:
        return self._set_param("cwe", identifiers)

    # People

    def assigned(self, value: bool = True) -> Self:
        """Only assigned (True) or only unassigned (False) issues."""
        return self._set_param("assigned", value)

    def assignees(self, logins: list[str]) -> Self:
        return self._set_param("assignees", logins)

    def add_assignee(self, login: str) -> Self:
        return self._append_param("assignees", login)

    def author(self, login: str) -> Self:
        return self._set_param("author", login)

    # Dates

    def created_at(self, date: str) -> Self:
        return self._set_param("createdAt", date)

    def created_after(self, date: str) -> Self:
        return self._set_param("createdAfter", date)

    def created_before(self, date: str) -> Self:
        return self._set_param("createdBefore", date)

    def created_in_last(self, span: str) -> Self:
        return self._set_param("createdInLast", span)

    # Response shaping

    def additional_fields(self, fields: list[str]) -> Self:
        return self._set_param("additionalFields", fields)

    def facets(self, facets: list[str]) -> Self:
        return self._set_param("facets", facets)

    def facet_mode(self, mode: FacetMode | str) -> Self:
        return self._set_param("facetMode", mode)

    def sort(self, field: str, ascending: bool | None = None) -> Self:
        self._set_param("s", field)
        return self._set_param("asc", ascending)

    def with_params(self, **params: Any) -> Self:
        """Set raw wire parameters not covered by a dedicated setter."""
        for key, value in params.items():
            self._set_param(key, value)
        return self
