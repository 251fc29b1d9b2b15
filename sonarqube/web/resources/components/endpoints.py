"""Components endpoint definitions."""

from ...runtime.rest import get_endpoint

SHOW = get_endpoint("components.show", "/api/components/show")
SEARCH = get_endpoint("components.search", "/api/components/search")
TREE = get_endpoint("components.tree", "/api/components/tree")
