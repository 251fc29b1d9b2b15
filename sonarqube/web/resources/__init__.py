"""Resource clients, one per ``/api/<resource>`` family."""

from .base import ResourceClient
from .components import ComponentsClient
from .issues import IssuesClient
from .projects import ProjectsClient
from .settings import SettingsClient
from .system import SystemClient
from .users import UsersClient

__all__ = [
    "ResourceClient",
    "ComponentsClient",
    "IssuesClient",
    "ProjectsClient",
    "SettingsClient",
    "SystemClient",
    "UsersClient",
]
