"""System API response schemas."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field

from ...models import ApiModel


class HealthStatus(str, Enum):
    GREEN = "GREEN"
    YELLOW = "YELLOW"
    RED = "RED"


class SystemStatus(str, Enum):
    UP = "UP"
    DOWN = "DOWN"
    STARTING = "STARTING"
    RESTARTING = "RESTARTING"
    DB_MIGRATION_NEEDED = "DB_MIGRATION_NEEDED"
    DB_MIGRATION_RUNNING = "DB_MIGRATION_RUNNING"


class StatusResponse(ApiModel):
    id: str | None = None
    version: str | None = None
    status: SystemStatus


class HealthResponse(ApiModel):
    health: HealthStatus
    causes: list[Any] = Field(default_factory=list)
    nodes: list[dict[str, Any]] = Field(default_factory=list)

    @property
    def is_healthy(self) -> bool:
        return self.health == HealthStatus.GREEN
