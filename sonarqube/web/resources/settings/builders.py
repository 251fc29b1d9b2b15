"""Builders for setting, resetting and reading settings."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Self

from ...runtime.builders import AtLeastOne, MutuallyExclusive, RequestBuilder, Required
from .schemas import ValuesResponse

_VALUE_FIELDS = ("value", "values", "fieldValues")


class _ScopedSetting:
    """Component, branch and organization scope shared by the write builders."""

    def component(self, key: str) -> Self:
        return self._set_param("component", key)

    def branch(self, name: str) -> Self:
        return self._set_param("branch", name)

    def pull_request(self, pull_request_id: str) -> Self:
        return self._set_param("pullRequest", pull_request_id)

    def organization(self, key: str) -> Self:
        return self._set_param("organization", key)


class SetSettingBuilder(_ScopedSetting, RequestBuilder[None]):
    """``/api/settings/set``.

    A setting takes exactly one value form: a single ``value``, a list of
    ``values`` (multi-value settings) or ``fieldValues`` (property sets,
    each entry a mapping of field name to value).

    Example:
        >>> await (
        ...     client.settings.set()
        ...     .key("sonar.exclusions")
        ...     .add_value("**/vendor/**")
        ...     .add_value("**/*.min.js")
        ...     .execute()
        ... )
    """

    rules = (
        Required("key", message="Setting key is required"),
        AtLeastOne(_VALUE_FIELDS, message="Either value, values or fieldValues must be provided"),
        MutuallyExclusive(
            _VALUE_FIELDS,
            message=(
                "multiple value types: only one of value, values or fieldValues can be provided"
            ),
        ),
    )

    def key(self, key: str) -> Self:
        return self._set_param("key", key)

    def value(self, value: str) -> Self:
        return self._set_param("value", value)

    def values(self, values: list[str]) -> Self:
        return self._set_param("values", values)

    def add_value(self, value: str) -> Self:
        return self._append_param("values", value)

    def field_values(self, field_values: list[Mapping[str, str]]) -> Self:
        return self._set_param("fieldValues", [dict(fv) for fv in field_values])

    def add_field_value(self, field_value: Mapping[str, str]) -> Self:
        return self._append_param("fieldValues", dict(field_value))


class ResetSettingBuilder(_ScopedSetting, RequestBuilder[None]):
    """``/api/settings/reset``: restore settings to their default values."""

    rules = (Required("keys", message="At least one setting key is required"),)

    def keys(self, keys: list[str]) -> Self:
        return self._set_param("keys", keys)

    def add_key(self, key: str) -> Self:
        return self._append_param("keys", key)


class ValuesBuilder(RequestBuilder[ValuesResponse]):
    """``/api/settings/values``; all settings when no key is given."""

    rules = (MutuallyExclusive(("component", "organization")),)

    def keys(self, keys: list[str]) -> Self:
        return self._set_param("keys", keys)

    def add_key(self, key: str) -> Self:
        return self._append_param("keys", key)

    def component(self, key: str) -> Self:
        return self._set_param("component", key)

    def organization(self, key: str) -> Self:
        return self._set_param("organization", key)
