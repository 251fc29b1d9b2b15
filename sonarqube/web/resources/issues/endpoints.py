"""Issues endpoint definitions."""

from ...runtime.rest import get_endpoint, post_endpoint

SEARCH = get_endpoint("issues.search", "/api/issues/search")
ADD_COMMENT = post_endpoint("issues.add_comment", "/api/issues/add_comment")
ASSIGN = post_endpoint("issues.assign", "/api/issues/assign")
DO_TRANSITION = post_endpoint("issues.do_transition", "/api/issues/do_transition")
SET_TAGS = post_endpoint("issues.set_tags", "/api/issues/set_tags")
TAGS = get_endpoint("issues.tags", "/api/issues/tags")
