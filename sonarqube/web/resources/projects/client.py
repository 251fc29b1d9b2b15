"""Client for ``/api/projects``."""

from __future__ import annotations

from ...runtime.builders import OneOf, PageIterator, Required
from ..base import ResourceClient
from . import endpoints
from .builders import BulkDeleteProjectsBuilder, SearchProjectsBuilder
from .schemas import CreateProjectResponse, Project, ProjectVisibility, SearchProjectsResponse

_VISIBILITIES = tuple(v.value for v in ProjectVisibility)


class ProjectsClient(ResourceClient):
    """Project management: search, create, delete, rename."""

    def search(self) -> SearchProjectsBuilder:
        """Search projects (requires 'Administer System' permission)."""
        return SearchProjectsBuilder(self._executor(endpoints.SEARCH, SearchProjectsResponse))

    def search_all(self) -> PageIterator[Project]:
        """Iterate over every project; same as ``search().all()``."""
        return self.search().all()

    def bulk_delete(self) -> BulkDeleteProjectsBuilder:
        return BulkDeleteProjectsBuilder(self._executor(endpoints.BULK_DELETE))

    async def create(
        self,
        project: str,
        name: str,
        *,
        visibility: ProjectVisibility | str | None = None,
        main_branch: str | None = None,
    ) -> CreateProjectResponse:
        """Create a project.

        Args:
            project: Project key
            name: Display name
            visibility: ``public`` or ``private``; server default when omitted
            main_branch: Name of the main branch

        Returns:
            The created project
        """
        return await self._call(
            endpoints.CREATE,
            {
                "project": project,
                "name": name,
                "visibility": visibility,
                "mainBranch": main_branch,
            },
            model=CreateProjectResponse,
            rules=(Required("project"), Required("name"), OneOf("visibility", _VISIBILITIES)),
        )

    async def delete(self, project: str) -> None:
        await self._call(endpoints.DELETE, {"project": project}, rules=(Required("project"),))

    async def update_key(self, from_key: str, to_key: str) -> None:
        await self._call(
            endpoints.UPDATE_KEY,
            {"from": from_key, "to": to_key},
            rules=(Required("from"), Required("to")),
        )

    async def update_visibility(self, project: str, visibility: ProjectVisibility | str) -> None:
        await self._call(
            endpoints.UPDATE_VISIBILITY,
            {"project": project, "visibility": visibility},
            rules=(
                Required("project"),
                Required("visibility"),
                OneOf("visibility", _VISIBILITIES),
            ),
        )
