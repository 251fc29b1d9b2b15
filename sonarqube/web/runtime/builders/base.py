"""Fluent request builder.

Architecture:
    A resource client creates one builder per call, handing it an executor
    function bound to a single endpoint. The caller chains setters, each
    storing one wire parameter and returning ``self``, then awaits
    ``execute()``. Validation is declared per builder class as a tuple of
    rules and runs synchronously before the executor is awaited, so a
    rejected request never reaches the network.

Design Decisions:
    - Parameter map keyed by wire names: serialization stays trivial
    - ``None`` means "not set": setters ignore it instead of storing it
    - Empty strings are stored as given, so ``Required`` can reject them
    - Last write wins, except for explicit ``add_*`` setters which append
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, ClassVar, Generic, Self, TypeVar

from .rules import Rule, validate

ResponseT = TypeVar("ResponseT")


class RequestBuilder(Generic[ResponseT]):
    """Accumulates parameters for one endpoint and executes it once asked."""

    rules: ClassVar[tuple[Rule, ...]] = ()

    def __init__(self, executor: Callable[[dict[str, Any]], Awaitable[ResponseT]]) -> None:
        self._executor = executor
        self._params: dict[str, Any] = {}

    @property
    def params(self) -> dict[str, Any]:
        """Copy of the parameters set so far."""
        return dict(self._params)

    def _set_param(self, key: str, value: Any, *, empty_clears: bool = False) -> Self:
        """Store ``value`` under ``key``; ``None`` is a no-op.

        With ``empty_clears`` an empty string removes the key instead.
        """
        if value is None:
            return self
        if empty_clears and value == "":
            self._params.pop(key, None)
            return self
        if isinstance(value, (list, tuple)):
            value = list(value)
        self._params[key] = value
        return self

    def _append_param(self, key: str, value: Any) -> Self:
        """Append to a list parameter without mutating earlier snapshots."""
        if value is None:
            return self
        current = self._params.get(key) or []
        self._params[key] = [*current, value]
        return self

    def _validation_rules(self) -> tuple[Rule, ...]:
        return self.rules

    def validate(self) -> None:
        """Check the current parameters against the declared rules.

        Raises:
            ValidationError: On the first failing rule
        """
        validate(self._params, self._validation_rules())

    async def execute(self) -> ResponseT:
        """Validate, then run the executor with a snapshot of the parameters."""
        self.validate()
        return await self._executor(dict(self._params))
