"""Client for ``/api/users``."""

from __future__ import annotations

from ...runtime.builders import PageIterator
from ..base import ResourceClient
from . import endpoints
from .builders import GetUserGroupsBuilder, SearchUsersBuilder
from .schemas import SearchUsersResponse, User, UserGroupsResponse


class UsersClient(ResourceClient):
    def search(self) -> SearchUsersBuilder:
        return SearchUsersBuilder(self._executor(endpoints.SEARCH, SearchUsersResponse))

    def search_all(self) -> PageIterator[User]:
        return self.search().all()

    def groups(self) -> GetUserGroupsBuilder:
        return GetUserGroupsBuilder(self._executor(endpoints.GROUPS, UserGroupsResponse))
