"""REST runtime abstractions."""

from .http_client import HTTPClient
from .params import encode_params, encode_value
from .runner import (
    Executor,
    ModelAdapter,
    ResponseAdapter,
    RestEndpointSpec,
    RestRunner,
    get_endpoint,
    post_endpoint,
)
from .transport import RESTTransport

__all__ = [
    "HTTPClient",
    "RESTTransport",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
    "ModelAdapter",
    "Executor",
    "get_endpoint",
    "post_endpoint",
    "encode_params",
    "encode_value",
]
