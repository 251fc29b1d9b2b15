"""Client for ``/api/settings``."""

from __future__ import annotations

from ..base import ResourceClient
from . import endpoints
from .builders import ResetSettingBuilder, SetSettingBuilder, ValuesBuilder
from .schemas import ListDefinitionsResponse, ValuesResponse


class SettingsClient(ResourceClient):
    """Global and component-level settings."""

    async def list_definitions(self, component: str | None = None) -> ListDefinitionsResponse:
        """Definitions of the settings available globally or on ``component``."""
        return await self._call(
            endpoints.LIST_DEFINITIONS,
            {"component": component},
            model=ListDefinitionsResponse,
        )

    def set(self) -> SetSettingBuilder:
        return SetSettingBuilder(self._executor(endpoints.SET))

    def reset(self) -> ResetSettingBuilder:
        return ResetSettingBuilder(self._executor(endpoints.RESET))

    def values(self) -> ValuesBuilder:
        return ValuesBuilder(self._executor(endpoints.VALUES, ValuesResponse))
