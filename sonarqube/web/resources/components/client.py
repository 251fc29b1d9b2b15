"""Client for ``/api/components``."""

from __future__ import annotations

from ...runtime.builders import MutuallyExclusive, Required
from ..base import ResourceClient
from . import endpoints
from .builders import ComponentsSearchBuilder, ComponentsTreeBuilder
from .schemas import ComponentTreeResponse, SearchComponentsResponse, ShowComponentResponse


class ComponentsClient(ResourceClient):
    """Component lookup, search and tree navigation."""

    async def show(
        self,
        component: str,
        *,
        branch: str | None = None,
        pull_request: str | None = None,
    ) -> ShowComponentResponse:
        """A component and its ancestors."""
        return await self._call(
            endpoints.SHOW,
            {"component": component, "branch": branch, "pullRequest": pull_request},
            model=ShowComponentResponse,
            rules=(Required("component"), MutuallyExclusive(("branch", "pullRequest"))),
        )

    def search(self) -> ComponentsSearchBuilder:
        return ComponentsSearchBuilder(self._executor(endpoints.SEARCH, SearchComponentsResponse))

    def tree(self) -> ComponentsTreeBuilder:
        return ComponentsTreeBuilder(self._executor(endpoints.TREE, ComponentTreeResponse))
