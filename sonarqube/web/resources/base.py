"""Base class for resource clients.

Architecture:
    A resource client groups the actions of one ``/api/<resource>`` family.
    Simple actions call ``_call`` directly; actions with many optional
    parameters return a builder whose executor is bound to one endpoint via
    ``RestRunner.executor``. All clients share the runner (and so the HTTP
    session) owned by ``SonarQubeClient``.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel

from ..runtime.builders.rules import Rule, validate
from ..runtime.rest import ModelAdapter, ResponseAdapter, RestEndpointSpec, RestRunner
from ..runtime.rest.runner import Executor

ModelT = TypeVar("ModelT", bound=BaseModel)


class ResourceClient:
    """Shared plumbing for ``/api/<resource>`` clients."""

    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    def _executor(
        self, spec: RestEndpointSpec, model: type[BaseModel] | None = None
    ) -> Executor:
        adapter = ModelAdapter(model) if model is not None else ResponseAdapter()
        return self._runner.executor(spec, adapter)

    async def _call(
        self,
        spec: RestEndpointSpec,
        params: dict[str, Any] | None = None,
        model: type[ModelT] | None = None,
        rules: tuple[Rule, ...] = (),
    ) -> Any:
        """Validate ``params`` against ``rules`` and run one endpoint."""
        cleaned = {k: v for k, v in (params or {}).items() if v is not None}
        validate(cleaned, rules)
        adapter = ModelAdapter(model) if model is not None else ResponseAdapter()
        return await self._runner.run(spec=spec, adapter=adapter, params=cleaned)
