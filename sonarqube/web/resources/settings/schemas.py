"""Settings API response schemas."""

from __future__ import annotations

from pydantic import Field

from ...models import ApiModel


class SettingField(ApiModel):
    key: str
    name: str | None = None
    description: str | None = None
    type: str | None = None
    options: list[str] = Field(default_factory=list)


class SettingDefinition(ApiModel):
    key: str
    name: str | None = None
    description: str | None = None
    category: str | None = None
    sub_category: str | None = None
    default_value: str | None = None
    multi_values: bool | None = None
    type: str | None = None
    options: list[str] = Field(default_factory=list)
    fields: list[SettingField] = Field(default_factory=list)


class ListDefinitionsResponse(ApiModel):
    definitions: list[SettingDefinition] = Field(default_factory=list)


class SettingValue(ApiModel):
    """Effective value of one setting; exactly one of the value forms is set."""

    key: str
    value: str | None = None
    values: list[str] | None = None
    field_values: list[dict[str, str]] | None = None
    inherited: bool | None = None
    parent_value: str | None = None
    parent_values: list[str] | None = None
    parent_field_values: list[dict[str, str]] | None = None
    parent_origin: str | None = None


class ValuesResponse(ApiModel):
    settings: list[SettingValue] = Field(default_factory=list)
    set_secured_settings: list[str] = Field(default_factory=list)
