"""Client for ``/api/issues``."""

from __future__ import annotations

from ...runtime.builders import InRange, PageIterator, Required
from ..base import ResourceClient
from . import endpoints
from .builders import SearchIssuesBuilder
from .schemas import Issue, IssueResponse, SearchIssuesResponse, SearchTagsResponse


class IssuesClient(ResourceClient):
    """Issue search and the single-issue write actions."""

    def search(self) -> SearchIssuesBuilder:
        return SearchIssuesBuilder(self._executor(endpoints.SEARCH, SearchIssuesResponse))

    def search_all(self) -> PageIterator[Issue]:
        return self.search().all()

    async def add_comment(self, issue: str, text: str) -> IssueResponse:
        """Add a markdown comment to an issue."""
        return await self._call(
            endpoints.ADD_COMMENT,
            {"issue": issue, "text": text},
            model=IssueResponse,
            rules=(Required("issue"), Required("text")),
        )

    async def assign(self, issue: str, assignee: str | None = None) -> IssueResponse:
        """Assign an issue; without ``assignee`` the issue is unassigned."""
        return await self._call(
            endpoints.ASSIGN,
            {"issue": issue, "assignee": assignee},
            model=IssueResponse,
            rules=(Required("issue"),),
        )

    async def do_transition(self, issue: str, transition: str) -> IssueResponse:
        """Apply a workflow transition such as ``confirm``, ``accept`` or ``reopen``."""
        return await self._call(
            endpoints.DO_TRANSITION,
            {"issue": issue, "transition": transition},
            model=IssueResponse,
            rules=(Required("issue"), Required("transition")),
        )

    async def set_tags(self, issue: str, tags: list[str]) -> IssueResponse:
        """Replace the tags of an issue; an empty list removes them all."""
        return await self._call(
            endpoints.SET_TAGS,
            {"issue": issue, "tags": list(tags)},
            model=IssueResponse,
            rules=(Required("issue"),),
        )

    async def search_tags(
        self,
        query: str | None = None,
        *,
        project: str | None = None,
        page_size: int | None = None,
    ) -> SearchTagsResponse:
        """List issue tags matching ``query``."""
        return await self._call(
            endpoints.TAGS,
            {"q": query, "project": project, "ps": page_size},
            model=SearchTagsResponse,
            rules=(InRange("ps", minimum=1, maximum=500),),
        )
