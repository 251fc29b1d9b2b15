"""Builders for project search and bulk deletion."""

from __future__ import annotations

from typing import Self

from ...runtime.builders import AtLeastOne, OneOf, PaginatedBuilder, RequestBuilder
from .schemas import Project, ProjectQualifier, SearchProjectsResponse

_QUALIFIERS = tuple(q.value for q in ProjectQualifier)


class _ProjectFilters:
    """Filters shared by ``projects/search`` and ``projects/bulk_delete``."""

    def analyzed_before(self, date: str) -> Self:
        """Projects last analysed before this date (ISO date or datetime)."""
        return self._set_param("analyzedBefore", date)

    def on_provisioned_only(self, provisioned_only: bool = True) -> Self:
        """Only projects that were provisioned but never analysed."""
        return self._set_param("onProvisionedOnly", provisioned_only)

    def projects(self, keys: list[str]) -> Self:
        return self._set_param("projects", keys)

    def add_project(self, key: str) -> Self:
        return self._append_param("projects", key)

    def query(self, text: str) -> Self:
        """Match project key or name containing ``text``."""
        return self._set_param("q", text)

    def qualifiers(self, qualifiers: list[ProjectQualifier | str]) -> Self:
        return self._set_param("qualifiers", qualifiers)


class SearchProjectsBuilder(
    _ProjectFilters, PaginatedBuilder[SearchProjectsResponse, Project]
):
    """Paginated ``/api/projects/search``.

    Example:
        >>> async for project in client.projects.search().qualifiers(["TRK"]).all():
        ...     print(project.key)
    """

    items_field = "components"
    rules = (OneOf("qualifiers", _QUALIFIERS),)


class BulkDeleteProjectsBuilder(_ProjectFilters, RequestBuilder[None]):
    """``/api/projects/bulk_delete``; refuses to run without a filter."""

    rules = (
        AtLeastOne(
            ("analyzedBefore", "projects", "q"),
            message="At least one parameter is required among analyzedBefore, projects and q",
        ),
        OneOf("qualifiers", _QUALIFIERS),
    )
