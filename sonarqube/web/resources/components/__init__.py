"""Components resource."""

from .builders import ComponentsSearchBuilder, ComponentsTreeBuilder
from .client import ComponentsClient
from .schemas import (
    Component,
    ComponentQualifier,
    ComponentSortField,
    ComponentTreeResponse,
    SearchComponentsResponse,
    ShowComponentResponse,
    TreeStrategy,
)

__all__ = [
    "ComponentsClient",
    "ComponentsSearchBuilder",
    "ComponentsTreeBuilder",
    "Component",
    "ComponentQualifier",
    "ComponentSortField",
    "TreeStrategy",
    "ShowComponentResponse",
    "SearchComponentsResponse",
    "ComponentTreeResponse",
]
