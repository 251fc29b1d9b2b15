"""System resource."""

from .client import SystemClient
from .schemas import HealthResponse, HealthStatus, StatusResponse, SystemStatus

__all__ = ["SystemClient", "HealthResponse", "HealthStatus", "StatusResponse", "SystemStatus"]
