"""Users API response schemas."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from ...models import ApiModel, PaginatedResponse


class GroupSelection(str, Enum):
    ALL = "all"
    SELECTED = "selected"
    DESELECTED = "deselected"


class User(ApiModel):
    login: str
    name: str | None = None
    active: bool | None = None
    avatar: str | None = None
    email: str | None = None
    local: bool | None = None
    external_identity: str | None = None
    external_provider: str | None = None
    groups: list[str] = Field(default_factory=list)
    last_connection_date: str | None = None
    tokens_count: int | None = None


class UserGroup(ApiModel):
    name: str
    id: int | str | None = None
    description: str | None = None
    default: bool | None = None
    selected: bool | None = None


class SearchUsersResponse(PaginatedResponse):
    users: list[User] = Field(default_factory=list)


class UserGroupsResponse(PaginatedResponse):
    groups: list[UserGroup] = Field(default_factory=list)
