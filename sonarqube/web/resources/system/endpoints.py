"""System endpoint definitions."""

from ...core.enums import ResponseType
from ...runtime.rest import get_endpoint

STATUS = get_endpoint("system.status", "/api/system/status")
HEALTH = get_endpoint("system.health", "/api/system/health")
PING = get_endpoint("system.ping", "/api/system/ping", response_type=ResponseType.TEXT)
