"""HTTP client helper."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping, Sequence
from typing import Any

import aiohttp
from yarl import URL

from ...core.exceptions import TransportError
from .transport import HTTPResponse

logger = logging.getLogger(__name__)


class HTTPClient:
    """Async HTTP client wrapper implementing the ``Transport`` contract."""

    def __init__(self, timeout: float = 60.0) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def execute(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        params: Sequence[tuple[str, str]] | None = None,
        json_body: Any = None,
    ) -> HTTPResponse:
        """Send one request and read the whole body.

        The URL path is already percent-encoded by the request builder, so it
        is passed to aiohttp as an encoded URL to prevent re-quoting.

        Raises:
            TransportError: On connection failures and timeouts
        """
        try:
            async with self.session.request(
                method,
                URL(url, encoded=True),
                params=list(params) if params else None,
                headers=dict(headers) if headers else None,
                json=json_body,
            ) as response:
                body = await response.read()
                return HTTPResponse(
                    status=response.status,
                    body=body,
                    headers=dict(response.headers),
                    reason=response.reason,
                )
        except asyncio.TimeoutError as e:
            raise TransportError(
                f"{method} {url} timed out after {self.timeout.total} seconds",
                method=method,
                url=url,
            ) from e
        except aiohttp.ClientError as e:
            raise TransportError(f"{method} {url} failed: {e}", method=method, url=url) from e

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
