"""Builders for component search and tree navigation."""

from __future__ import annotations

from typing import Self

from ...runtime.builders import Length, MutuallyExclusive, OneOf, PaginatedBuilder, Required
from .schemas import (
    Component,
    ComponentQualifier,
    ComponentSortField,
    ComponentTreeResponse,
    SearchComponentsResponse,
    TreeStrategy,
)


class ComponentsSearchBuilder(PaginatedBuilder[SearchComponentsResponse, Component]):
    """Paginated ``/api/components/search``."""

    items_field = "components"

    def query(self, text: str) -> Self:
        return self._set_param("q", text)

    def qualifiers(self, qualifiers: list[ComponentQualifier | str]) -> Self:
        return self._set_param("qualifiers", qualifiers)

    def languages(self, languages: list[str]) -> Self:
        return self._set_param("languages", languages)

    def organization(self, key: str) -> Self:
        return self._set_param("organization", key)


class ComponentsTreeBuilder(PaginatedBuilder[ComponentTreeResponse, Component]):
    """Paginated ``/api/components/tree`` below a base component.

    Example:
        >>> files = await (
        ...     client.components.tree()
        ...     .component("my-app")
        ...     .files_only()
        ...     .leaves_only()
        ...     .to_list()
        ... )
    """

    items_field = "components"
    rules = (
        Required("component", message="Component parameter is required for tree search"),
        Length("q", min_length=3, message="Query parameter must be at least 3 characters long"),
        OneOf("strategy", tuple(s.value for s in TreeStrategy)),
        MutuallyExclusive(("branch", "pullRequest")),
    )

    def component(self, key: str) -> Self:
        return self._set_param("component", key)

    def branch(self, name: str) -> Self:
        """Analysed branch; an empty name clears a previous choice."""
        return self._set_param("branch", name, empty_clears=True)

    def pull_request(self, pull_request_id: str) -> Self:
        return self._set_param("pullRequest", pull_request_id, empty_clears=True)

    def query(self, text: str) -> Self:
        """Match component names or keys; at least 3 characters."""
        return self._set_param("q", text)

    def qualifiers(self, qualifiers: list[ComponentQualifier | str]) -> Self:
        return self._set_param("qualifiers", qualifiers)

    def strategy(self, strategy: TreeStrategy | str) -> Self:
        return self._set_param("strategy", strategy)

    def sort_by(
        self, fields: list[ComponentSortField | str], ascending: bool | None = None
    ) -> Self:
        self._set_param("s", fields)
        return self._set_param("asc", ascending)

    def files_only(self) -> Self:
        return self.qualifiers([ComponentQualifier.FILE])

    def directories_only(self) -> Self:
        return self.qualifiers([ComponentQualifier.DIRECTORY])

    def children_only(self) -> Self:
        return self.strategy(TreeStrategy.CHILDREN)

    def leaves_only(self) -> Self:
        return self.strategy(TreeStrategy.LEAVES)
