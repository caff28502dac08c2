"""RPC transport helpers with retry on rate limiting."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

_DEFAULT_MAX_RETRIES = 5


class _RetryTransport(httpx.AsyncBaseTransport):
    """HTTP transport that retries on 429 Too Many Requests."""

    def __init__(
        self,
        wrapped: httpx.AsyncBaseTransport | None = None,
        max_retries: int = _DEFAULT_MAX_RETRIES,
        backoff: float = 2.0,
    ) -> None:
        self._wrapped = wrapped or httpx.AsyncHTTPTransport()
        self._max_retries = max_retries
        self._backoff = backoff

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        for attempt in range(self._max_retries + 1):
            response = await self._wrapped.handle_async_request(request)
            if response.status_code != 429 or attempt >= self._max_retries:
                return response
            await response.aclose()
            delay = (attempt + 1) * self._backoff
            logger.warning(
                "rate limited on %s, retrying in %.1fs (attempt %d/%d)",
                request.url.path,
                delay,
                attempt + 1,
                self._max_retries,
            )
            await asyncio.sleep(delay)
        return response  # unreachable, but satisfies type checker

    async def aclose(self) -> None:
        await self._wrapped.aclose()


class RPCClient:
    """Performs GET requests against a node and decodes the JSON body."""

    def __init__(self, base_url: str, http: httpx.AsyncClient) -> None:
        self._base_url = base_url.rstrip("/")
        self._http = http

    @property
    def base_url(self) -> str:
        return self._base_url

    async def get(self, path: str) -> Any:
        url = f"{self._base_url}/{path.lstrip('/')}"
        logger.debug("GET %s", url)
        resp = await self._http.get(url)
        resp.raise_for_status()
        return resp.json()

    async def aclose(self) -> None:
        await self._http.aclose()


def new_rpc_client(
    url: str,
    timeout: float = 30,
    max_retries: int = _DEFAULT_MAX_RETRIES,
) -> RPCClient:
    """Create a node RPC client with automatic retry on 429 responses."""
    transport = _RetryTransport(
        wrapped=httpx.AsyncHTTPTransport(),
        max_retries=max_retries,
    )
    http = httpx.AsyncClient(
        timeout=timeout,
        transport=transport,
        headers={"Accept": "application/json"},
    )
    return RPCClient(url, http)
