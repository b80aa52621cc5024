"""Transport contract consumed by the request runner.

The runner only depends on ``Transport.execute``; the default implementation
is ``HTTPClient`` (aiohttp). Tests substitute an ``AsyncMock`` with the same
signature.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class HTTPResponse:
    """Status, raw body and headers of one HTTP exchange."""

    status: int
    body: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


@runtime_checkable
class Transport(Protocol):
    """Executes one HTTP request and returns the raw response."""

    async def execute(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        params: Sequence[tuple[str, str]] | None = None,
        json_body: Any = None,
    ) -> HTTPResponse: ...

    async def close(self) -> None: ...
