"""Projects endpoint definitions."""

from ...runtime.rest import get_endpoint, post_endpoint

SEARCH = get_endpoint("projects.search", "/api/projects/search")
BULK_DELETE = post_endpoint("projects.bulk_delete", "/api/projects/bulk_delete")
CREATE = post_endpoint("projects.create", "/api/projects/create")
DELETE = post_endpoint("projects.delete", "/api/projects/delete")
UPDATE_KEY = post_endpoint("projects.update_key", "/api/projects/update_key")
UPDATE_VISIBILITY = post_endpoint("projects.update_visibility", "/api/projects/update_visibility")
