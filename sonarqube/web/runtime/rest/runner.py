"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as SchemaError

from ...core.enums import HttpMethod, ResponseType
from ...core.exceptions import ResponseParseError
from .params import encode_params
from .transport import RESTTransport

logger = logging.getLogger(__name__)

T = TypeVar("T")
ModelT = TypeVar("ModelT", bound=BaseModel)

Executor = Callable[[dict[str, Any]], Awaitable[T]]


def default_query(params: dict[str, Any]) -> list[tuple[str, str]]:
    return encode_params(params)


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: HttpMethod
    path: str
    build_query: Callable[[dict[str, Any]], Any] | None = default_query
    build_body: Callable[[dict[str, Any]], Any] | None = None
    response_type: ResponseType = ResponseType.JSON


def get_endpoint(
    endpoint_id: str,
    path: str,
    *,
    repeated: tuple[str, ...] = (),
    response_type: ResponseType = ResponseType.JSON,
) -> RestEndpointSpec:
    """Read endpoint whose parameters travel in the query string."""
    build_query = default_query
    if repeated:
        build_query = lambda params: encode_params(params, repeated=repeated)  # noqa: E731
    return RestEndpointSpec(
        id=endpoint_id,
        method=HttpMethod.GET,
        path=path,
        build_query=build_query,
        response_type=response_type,
    )


def post_endpoint(
    endpoint_id: str,
    path: str,
    *,
    repeated: tuple[str, ...] = (),
) -> RestEndpointSpec:
    """Write endpoint whose parameters travel as a form body."""
    return RestEndpointSpec(
        id=endpoint_id,
        method=HttpMethod.POST,
        path=path,
        build_query=None,
        build_body=lambda params: encode_params(params, repeated=repeated),
    )


class ResponseAdapter:
    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response


class ModelAdapter(ResponseAdapter, Generic[ModelT]):
    """Validate the decoded JSON body into a pydantic model."""

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    def parse(self, response: Any, params: dict[str, Any]) -> ModelT:
        try:
            return self.model.model_validate(response if response is not None else {})
        except SchemaError as e:
            name = self.model.__name__
            logger.warning(
                "response_parse_failed", extra={"model": name, "error_count": e.error_count()}
            )
            raise ResponseParseError(
                f"Response body does not match {name}",
                model=name,
                errors=[
                    f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
                ],
            ) from e


class RestRunner:
    def __init__(self, transport: RESTTransport) -> None:
        self._t = transport

    @property
    def transport(self) -> RESTTransport:
        return self._t

    async def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        query = spec.build_query(params) if spec.build_query else None
        body = spec.build_body(params) if spec.build_body else None

        logger.debug("endpoint_call", extra={"endpoint_id": spec.id, "path": spec.path})
        if spec.method == HttpMethod.GET:
            data = await self._t.get(spec.path, params=query, response_type=spec.response_type)
        else:
            data = await self._t.post(spec.path, body=body, response_type=spec.response_type)

        return adapter.parse(data, params)

    def executor(self, spec: RestEndpointSpec, adapter: ResponseAdapter | None = None) -> Executor:
        """Bind an endpoint into an executor function for a request builder."""
        bound_adapter = adapter or ResponseAdapter()

        async def execute(params: dict[str, Any]) -> Any:
            return await self.run(spec=spec, adapter=bound_adapter, params=params)

        return execute
