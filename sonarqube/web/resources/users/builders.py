"""Builders for user search and group membership."""

from __future__ import annotations

from typing import Self

from ...runtime.builders import Length, OneOf, PaginatedBuilder, Required
from .schemas import GroupSelection, SearchUsersResponse, User, UserGroup, UserGroupsResponse

MAX_USER_IDS = 30


class SearchUsersBuilder(PaginatedBuilder[SearchUsersResponse, User]):
    """Paginated ``/api/users/search``.

    Example:
        >>> async for user in client.users.search().query("jo").all():
        ...     print(user.login)
    """

    items_field = "users"
    rules = (
        Length("q", min_length=2, message="Query must be at least 2 characters long"),
        Length("ids", max_length=MAX_USER_IDS, message=f"Maximum {MAX_USER_IDS} user IDs allowed"),
    )

    def query(self, text: str) -> Self:
        """Match login, name or email; at least 2 characters."""
        return self._set_param("q", text)

    def ids(self, ids: list[str]) -> Self:
        return self._set_param("ids", ids)

    def add_id(self, user_id: str) -> Self:
        return self._append_param("ids", user_id)


class GetUserGroupsBuilder(PaginatedBuilder[UserGroupsResponse, UserGroup]):
    """Paginated ``/api/users/groups`` for one user."""

    items_field = "groups"
    rules = (
        Required("login", message="login is required"),
        OneOf("selected", tuple(s.value for s in GroupSelection)),
    )

    def login(self, login: str) -> Self:
        return self._set_param("login", login)

    def organization(self, key: str) -> Self:
        return self._set_param("organization", key)

    def query(self, text: str) -> Self:
        """Only groups whose name contains ``text``."""
        return self._set_param("q", text)

    def selected(self, selection: GroupSelection | str) -> Self:
        """``selected`` (server default), ``deselected`` or ``all``."""
        return self._set_param("selected", selection)
