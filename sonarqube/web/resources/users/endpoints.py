"""Users endpoint definitions."""

from ...runtime.rest import get_endpoint

SEARCH = get_endpoint("users.search", "/api/users/search")
GROUPS = get_endpoint("users.groups", "/api/users/groups")
