"""Client for ``/api/system``."""

from __future__ import annotations

from ..base import ResourceClient
from . import endpoints
from .schemas import HealthResponse, StatusResponse


class SystemClient(ResourceClient):
    async def status(self) -> StatusResponse:
        """Server state; answers without authentication."""
        return await self._call(endpoints.STATUS, model=StatusResponse)

    async def health(self) -> HealthResponse:
        """Health of the instance or cluster (requires system passcode or admin)."""
        return await self._call(endpoints.HEALTH, model=HealthResponse)

    async def ping(self) -> str:
        """Liveness check; the server answers ``pong``."""
        return await self._call(endpoints.PING)
