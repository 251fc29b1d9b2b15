"""Settings endpoint definitions."""

from ...runtime.rest import get_endpoint, post_endpoint

LIST_DEFINITIONS = get_endpoint("settings.list_definitions", "/api/settings/list_definitions")
SET = post_endpoint("settings.set", "/api/settings/set", repeated=("values", "fieldValues"))
RESET = post_endpoint("settings.reset", "/api/settings/reset")
VALUES = get_endpoint("settings.values", "/api/settings/values")
