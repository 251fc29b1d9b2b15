"""HTTP client helper."""

from __future__ import annotations

import asyncio
import inspect
import json
import logging
from collections.abc import Awaitable, Callable
from time import perf_counter
from typing import Any

import aiohttp

from ...config import DEFAULT_TIMEOUT
from ...core.enums import ResponseType
from ...core.error_factory import error_from_response
from ...core.exceptions import ApiError, NetworkError, RequestTimeoutError

logger = logging.getLogger(__name__)

ResponseHook = Callable[[aiohttp.ClientResponse], Awaitable[None] | None]

_JSON_HEADERS = {"Accept": "application/json"}


class HTTPClient:
    """Async HTTP client wrapper.

    Issues exactly one request per call: no retries, no throttling. Non-2xx
    responses and transport failures are raised as library exceptions.
    """

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = base_url.rstrip("/") if base_url else base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._token = token
        self._session: aiohttp.ClientSession | None = None
        self._response_hooks: list[ResponseHook] = []

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    @property
    def has_token(self) -> bool:
        return bool(self._token)

    def add_response_hook(self, hook: ResponseHook) -> None:
        """Register a callable invoked with every raw response.

        Hooks may be sync or async. A failing hook is logged and ignored.
        """
        self._response_hooks.append(hook)

    def build_headers(self, extra: dict[str, str] | None = None) -> dict[str, str]:
        """Default headers plus the bearer credential when a token is set."""
        headers = dict(_JSON_HEADERS)
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        if extra:
            headers.update(extra)
        return headers

    def build_url(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def get(
        self,
        url: str,
        params: Any = None,
        headers: dict[str, str] | None = None,
        response_type: ResponseType = ResponseType.JSON,
    ) -> Any:
        """GET request."""
        return await self.request(
            "GET", url, params=params, headers=headers, response_type=response_type
        )

    async def post(
        self,
        url: str,
        data: Any = None,
        headers: dict[str, str] | None = None,
        response_type: ResponseType = ResponseType.JSON,
    ) -> Any:
        """POST request with a form-encoded body."""
        return await self.request(
            "POST", url, data=data, headers=headers, response_type=response_type
        )

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: Any = None,
        data: Any = None,
        headers: dict[str, str] | None = None,
        response_type: ResponseType = ResponseType.JSON,
    ) -> Any:
        """Perform one HTTP round trip and decode the result.

        Args:
            method: HTTP verb
            url: Absolute URL or path relative to base_url
            params: Query parameters (mapping or sequence of pairs)
            data: Form body (mapping or sequence of pairs)
            headers: Extra headers merged over the defaults
            response_type: How to decode a 2xx body

        Returns:
            Decoded body, or None when a JSON response has an empty body

        Raises:
            SonarQubeError: Subclass matching the HTTP status for non-2xx
            RequestTimeoutError: The transport timed out
            NetworkError: No response was received
        """
        full_url = self.build_url(url)
        merged_headers = self.build_headers(headers)
        logger.debug("http_request", extra={"method": method, "url": full_url})
        start = perf_counter()

        try:
            async with self.session.request(
                method, full_url, params=params or None, data=data or None, headers=merged_headers
            ) as response:
                await self._run_hooks(response)
                if not 200 <= response.status < 300:
                    body = await self._read_text(response)
                    error = error_from_response(
                        response.status,
                        body,
                        content_type=response.headers.get("Content-Type"),
                        reason=response.reason,
                        headers=response.headers,
                    )
                    logger.warning(
                        "http_error",
                        extra={
                            "method": method,
                            "url": full_url,
                            "status": response.status,
                            "error_code": error.code,
                        },
                    )
                    raise error
                result = await self._decode(response, response_type)
                status = response.status
        except asyncio.TimeoutError as e:
            logger.warning("http_timeout", extra={"method": method, "url": full_url})
            raise RequestTimeoutError(
                f"Request to {full_url} timed out", timeout=self.timeout.total, cause=e
            ) from e
        except aiohttp.ClientError as e:
            logger.warning(
                "http_transport_error",
                extra={"method": method, "url": full_url, "error_type": type(e).__name__},
            )
            raise NetworkError(f"Request to {full_url} failed: {e}", cause=e) from e

        logger.debug(
            "http_response",
            extra={
                "method": method,
                "url": full_url,
                "status": status,
                "latency_ms": (perf_counter() - start) * 1000.0,
            },
        )
        return result

    async def _decode(self, response: aiohttp.ClientResponse, response_type: ResponseType) -> Any:
        if response_type == ResponseType.BYTES:
            return await response.read()
        text = await self._read_text(response)
        if response_type == ResponseType.TEXT:
            return text
        if not text:
            return None
        try:
            return json.loads(text)
        except ValueError as e:
            raise ApiError(
                "Response body is not valid JSON", status_code=response.status
            ) from e

    @staticmethod
    async def _read_text(response: aiohttp.ClientResponse) -> str:
        """Body as text; undecodable bytes become U+FFFD instead of raising."""
        raw = await response.read()
        charset = response.charset or "utf-8"
        try:
            return raw.decode(charset, errors="replace")
        except LookupError:
            # Unknown charset label in Content-Type
            return raw.decode("utf-8", errors="replace")

    async def _run_hooks(self, response: aiohttp.ClientResponse) -> None:
        for hook in self._response_hooks:
            try:
                result = hook(response)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:  # noqa: BLE001
                logger.debug("response_hook_failed", extra={"error": str(e)})

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
