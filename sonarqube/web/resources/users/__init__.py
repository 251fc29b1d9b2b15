"""Users resource."""

from .builders import GetUserGroupsBuilder, SearchUsersBuilder
from .client import UsersClient
from .schemas import GroupSelection, SearchUsersResponse, User, UserGroup, UserGroupsResponse

__all__ = [
    "UsersClient",
    "SearchUsersBuilder",
    "GetUserGroupsBuilder",
    "GroupSelection",
    "User",
    "UserGroup",
    "SearchUsersResponse",
    "UserGroupsResponse",
]
