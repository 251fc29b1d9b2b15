"""Client configuration and shared constants.

Values can be passed explicitly or read from the environment:

    SONARQUBE_URL      server base URL (required for from_env)
    SONARQUBE_TOKEN    user token sent as a bearer credential
    SONARQUBE_TIMEOUT  total request timeout in seconds
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_TIMEOUT = 30.0
DEFAULT_PAGE_SIZE = 100
# Most search endpoints reject ps > 500
MAX_PAGE_SIZE = 500

ENV_URL = "SONARQUBE_URL"
ENV_TOKEN = "SONARQUBE_TOKEN"
ENV_TIMEOUT = "SONARQUBE_TIMEOUT"


def normalize_base_url(base_url: str) -> str:
    """Strip trailing slashes so paths can be appended verbatim.

    Examples:
        >>> normalize_base_url("https://sonar.example.com/")
        'https://sonar.example.com'
    """
    return base_url.rstrip("/")


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for a SonarQubeClient.

    Attributes:
        base_url: Server root, e.g. ``https://sonar.example.com``
        token: Bearer token; ``None`` or empty sends no Authorization header
        timeout: Total timeout per request in seconds
    """

    base_url: str
    token: str | None = None
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ValueError("base_url is required")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        object.__setattr__(self, "base_url", normalize_base_url(self.base_url))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Build a config from environment variables.

        Raises:
            ValueError: If SONARQUBE_URL is unset or SONARQUBE_TIMEOUT is not a number
        """
        env = os.environ if environ is None else environ
        base_url = env.get(ENV_URL)
        if not base_url:
            raise ValueError(f"{ENV_URL} must be set")
        raw_timeout = env.get(ENV_TIMEOUT)
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError as e:
            raise ValueError(f"{ENV_TIMEOUT} must be a number, got {raw_timeout!r}") from e
        return cls(base_url=base_url, token=env.get(ENV_TOKEN) or None, timeout=timeout)
