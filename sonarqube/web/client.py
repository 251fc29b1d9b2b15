"""High-level SonarQube Web API client.

Architecture:
    ``SonarQubeClient`` owns one ``RESTTransport`` (and so one aiohttp
    session) and hands a shared ``RestRunner`` to each resource client.
    Resource clients are created once and exposed as attributes; they hold
    no state of their own beyond the runner.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Self

from .config import DEFAULT_TIMEOUT, ClientConfig
from .resources import (
    ComponentsClient,
    IssuesClient,
    ProjectsClient,
    SettingsClient,
    SystemClient,
    UsersClient,
)
from .runtime.rest import RESTTransport, RestRunner
from .runtime.rest.http_client import ResponseHook

logger = logging.getLogger(__name__)


class SonarQubeClient:
    """Entry point for the SonarQube Web API.

    Example:
        >>> async with SonarQubeClient("https://sonar.example.com", token) as client:
        ...     async for issue in client.issues.search().projects(["my-app"]).all():
        ...         print(issue.key, issue.message)
    """

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        config: ClientConfig | None = None,
        transport: RESTTransport | None = None,
    ) -> None:
        """Create a client.

        Args:
            base_url: Server root URL; ignored when ``config`` is given
            token: User token sent as ``Authorization: Bearer``; omitted when empty
            timeout: Total timeout per request in seconds
            config: Ready-made configuration
            transport: Pre-built transport (mainly for tests); not closed by ``close``

        Raises:
            ValueError: If neither ``base_url`` nor ``config`` is provided
        """
        if config is None:
            if base_url is None:
                raise ValueError("base_url or config is required")
            config = ClientConfig(base_url=base_url, token=token, timeout=timeout)
        self.config = config

        self._owns_transport = transport is None
        self._transport = transport or RESTTransport(
            base_url=config.base_url, token=config.token, timeout=config.timeout
        )
        self._runner = RestRunner(self._transport)
        self._closed = False

        self.projects = ProjectsClient(self._runner)
        self.issues = IssuesClient(self._runner)
        self.settings = SettingsClient(self._runner)
        self.users = UsersClient(self._runner)
        self.components = ComponentsClient(self._runner)
        self.system = SystemClient(self._runner)

        logger.debug(
            "client_created",
            extra={"base_url": config.base_url, "authenticated": bool(config.token)},
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SonarQubeClient:
        """Create a client from ``SONARQUBE_URL``/``SONARQUBE_TOKEN``/``SONARQUBE_TIMEOUT``."""
        return cls(config=ClientConfig.from_env(environ))

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def add_response_hook(self, hook: ResponseHook) -> None:
        """Register a callback run for every HTTP response, before decoding."""
        self._transport.add_response_hook(hook)

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_transport:
            await self._transport.close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
