"""Settings resource."""

from .builders import ResetSettingBuilder, SetSettingBuilder, ValuesBuilder
from .client import SettingsClient
from .schemas import (
    ListDefinitionsResponse,
    SettingDefinition,
    SettingField,
    SettingValue,
    ValuesResponse,
)

__all__ = [
    "SettingsClient",
    "SetSettingBuilder",
    "ResetSettingBuilder",
    "ValuesBuilder",
    "ListDefinitionsResponse",
    "SettingDefinition",
    "SettingField",
    "SettingValue",
    "ValuesResponse",
]
