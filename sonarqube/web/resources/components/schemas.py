"""Components API response schemas and value sets."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from ...models import ApiModel, PaginatedResponse


class ComponentQualifier(str, Enum):
    PROJECT = "TRK"
    SUB_PROJECT = "BRC"
    DIRECTORY = "DIR"
    FILE = "FIL"
    TEST_FILE = "UTS"
    APPLICATION = "APP"
    PORTFOLIO = "VW"
    SUB_PORTFOLIO = "SVW"


class TreeStrategy(str, Enum):
    ALL = "all"
    CHILDREN = "children"
    LEAVES = "leaves"


class ComponentSortField(str, Enum):
    NAME = "name"
    PATH = "path"
    QUALIFIER = "qualifier"


class Component(ApiModel):
    key: str
    name: str | None = None
    qualifier: str | None = None
    path: str | None = None
    language: str | None = None
    description: str | None = None
    enabled: bool | None = None
    tags: list[str] = Field(default_factory=list)
    visibility: str | None = None
    analysis_date: str | None = None


class ShowComponentResponse(ApiModel):
    component: Component
    ancestors: list[Component] = Field(default_factory=list)


class SearchComponentsResponse(PaginatedResponse):
    components: list[Component] = Field(default_factory=list)


class ComponentTreeResponse(PaginatedResponse):
    base_component: Component | None = None
    components: list[Component] = Field(default_factory=list)
