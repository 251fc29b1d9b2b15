"""Declarative validation rules for request builders.

Each builder lists its rules once, as data; ``RequestBuilder.execute`` runs
them in order against the parameter map before any I/O. A rule either
returns silently or raises ``ValidationError`` carrying a
``ValidationReason`` and the offending field.

Example:
    class SetSettingBuilder(RequestBuilder[None]):
        rules = (
            Required("key"),
            AtLeastOne(("value", "values", "fieldValues")),
            MutuallyExclusive(("value", "values", "fieldValues")),
        )
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from ...core.enums import ValidationReason
from ...core.exceptions import ValidationError


class Rule(Protocol):
    def check(self, params: Mapping[str, Any]) -> None: ...


def is_present(params: Mapping[str, Any], field: str) -> bool:
    """True when the caller set the field, even to an empty value."""
    return params.get(field) is not None


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


@dataclass(frozen=True)
class Required:
    """Field must be set to a non-blank value."""

    field: str
    message: str | None = None

    def check(self, params: Mapping[str, Any]) -> None:
        if is_blank(params.get(self.field)):
            raise ValidationError(
                self.message or f"{self.field} is required",
                reason=ValidationReason.MISSING_REQUIRED,
                field=self.field,
            )


@dataclass(frozen=True)
class AtLeastOne:
    """At least one of the fields must be set to a non-blank value."""

    fields: tuple[str, ...]
    message: str | None = None

    def check(self, params: Mapping[str, Any]) -> None:
        if any(not is_blank(params.get(f)) for f in self.fields):
            return
        raise ValidationError(
            self.message or f"At least one of {', '.join(self.fields)} is required",
            reason=ValidationReason.MISSING_REQUIRED,
            field=self.fields[0],
        )


@dataclass(frozen=True)
class MutuallyExclusive:
    """At most one of the fields may be set."""

    fields: tuple[str, ...]
    message: str | None = None

    def check(self, params: Mapping[str, Any]) -> None:
        present = [f for f in self.fields if is_present(params, f)]
        if len(present) <= 1:
            return
        raise ValidationError(
            self.message or f"{' and '.join(present)} cannot be used together",
            reason=ValidationReason.MUTUALLY_EXCLUSIVE,
            field=present[-1],
            details={"fields": present},
        )


@dataclass(frozen=True)
class InRange:
    """Numeric field must lie within [minimum, maximum] when set."""

    field: str
    minimum: int | None = None
    maximum: int | None = None

    def check(self, params: Mapping[str, Any]) -> None:
        value = params.get(self.field)
        if value is None:
            return
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValidationError(
                f"{self.field} must be a number, got {value!r}",
                reason=ValidationReason.OUT_OF_RANGE,
                field=self.field,
            )
        too_low = self.minimum is not None and value < self.minimum
        too_high = self.maximum is not None and value > self.maximum
        if too_low or too_high:
            raise ValidationError(
                f"{self.field} must be {self._bounds()}, got {value}",
                reason=ValidationReason.OUT_OF_RANGE,
                field=self.field,
            )

    def _bounds(self) -> str:
        if self.minimum is not None and self.maximum is not None:
            return f"between {self.minimum} and {self.maximum}"
        if self.minimum is not None:
            return f">= {self.minimum}"
        return f"<= {self.maximum}"


@dataclass(frozen=True)
class OneOf:
    """Field (or every element of a list field) must be a declared value."""

    field: str
    choices: tuple[str, ...]

    def check(self, params: Mapping[str, Any]) -> None:
        value = params.get(self.field)
        if value is None:
            return
        values = value if isinstance(value, (list, tuple)) else [value]
        invalid = [v for v in values if str(_plain(v)) not in self.choices]
        if invalid:
            raise ValidationError(
                f"Invalid {self.field} value(s) {', '.join(map(str, map(_plain, invalid)))}; "
                f"expected one of: {', '.join(self.choices)}",
                reason=ValidationReason.INVALID_CHOICE,
                field=self.field,
            )


@dataclass(frozen=True)
class Length:
    """Bound the character count of a string or the item count of a list."""

    field: str
    min_length: int | None = None
    max_length: int | None = None
    message: str | None = None

    def check(self, params: Mapping[str, Any]) -> None:
        value = params.get(self.field)
        if value is None:
            return
        size = len(value)
        unit = "items" if isinstance(value, (list, tuple)) else "characters"
        if self.min_length is not None and size < self.min_length:
            raise ValidationError(
                self.message or f"{self.field} must have at least {self.min_length} {unit}",
                reason=ValidationReason.OUT_OF_RANGE,
                field=self.field,
            )
        if self.max_length is not None and size > self.max_length:
            raise ValidationError(
                self.message or f"{self.field} must have at most {self.max_length} {unit}",
                reason=ValidationReason.OUT_OF_RANGE,
                field=self.field,
            )


def validate(params: Mapping[str, Any], rules: tuple[Rule, ...]) -> None:
    """Run rules in declaration order; the first failure wins."""
    for rule in rules:
        rule.check(params)
