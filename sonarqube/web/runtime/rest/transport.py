"""Thin REST transport over HTTPClient."""

from __future__ import annotations

from typing import Any

from ...config import DEFAULT_TIMEOUT
from ...core.enums import ResponseType
from .http_client import HTTPClient, ResponseHook


class RESTTransport:
    """Path-oriented facade used by RestRunner.

    Reads travel as query strings, writes as form-encoded bodies.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._http = HTTPClient(base_url=base_url, token=token, timeout=timeout)

    def add_response_hook(self, hook: ResponseHook) -> None:
        self._http.add_response_hook(hook)

    async def get(
        self,
        path: str,
        params: Any = None,
        headers: dict[str, str] | None = None,
        response_type: ResponseType = ResponseType.JSON,
    ) -> Any:
        return await self._http.get(
            path, params=params, headers=headers, response_type=response_type
        )

    async def post(
        self,
        path: str,
        body: Any = None,
        headers: dict[str, str] | None = None,
        response_type: ResponseType = ResponseType.JSON,
    ) -> Any:
        return await self._http.post(path, data=body, headers=headers, response_type=response_type)

    async def close(self) -> None:
        await self._http.close()
