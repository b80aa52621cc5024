"""Outgoing request construction.

Architecture:
    ``RequestBuilder`` turns an HTTP method plus an ordered sequence of path
    segments into a ``Request`` that already carries the base URL and the
    bearer credential. ``Request`` is a mutable value with chainable setters,
    so endpoint code can add query pairs, a JSON body or one-off headers
    before handing it to the runner or the paginator.

Design Decisions:
    - Path segments are percent-encoded individually, so IDs containing
      ``/`` or ``$`` cannot change the shape of the path
    - Query parameters are an ordered list of pairs, not a dict, so a key
      may repeat (``status[]=issued&status[]=paid``)
    - ``copy()`` gives the paginator an independent request per page
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any
from urllib.parse import quote

IDEMPOTENCY_KEY_HEADER = "Idempotency-Key"


def format_query_value(value: Any) -> str:
    """Render a query parameter value the way the Orb API expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


@dataclass
class Request:
    """An unsent HTTP request."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    params: list[tuple[str, str]] = field(default_factory=list)
    body: Any = None

    def query(self, key: str, value: Any) -> Request:
        """Append a query pair. ``None`` values are skipped."""
        if value is not None:
            self.params.append((key, format_query_value(value)))
        return self

    def query_pairs(self, pairs: Iterable[tuple[str, Any]]) -> Request:
        for key, value in pairs:
            self.query(key, value)
        return self

    def json(self, body: Any) -> Request:
        self.body = body
        return self

    def header(self, name: str, value: str) -> Request:
        self.headers[name] = value
        return self

    def idempotency_key(self, key: str | None) -> Request:
        """Attach the ``Idempotency-Key`` header when a key is given."""
        if key is not None:
            self.headers[IDEMPOTENCY_KEY_HEADER] = key
        return self

    def copy(self) -> Request:
        return Request(
            method=self.method,
            url=self.url,
            headers=dict(self.headers),
            params=list(self.params),
            body=self.body,
        )


class RequestBuilder:
    """Builds requests against a base URL with bearer authentication."""

    def __init__(self, base_url: str, api_key: str) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    def build(self, method: str, path: Iterable[str]) -> Request:
        """Create a request for ``path``.

        Args:
            method: HTTP method
            path: Ordered, non-empty path segments, e.g. ("subscriptions", id, "cancel")

        Returns:
            Request with URL and authorization header set
        """
        segments = list(path)
        if not segments:
            raise ValueError("request path must have at least one segment")
        encoded = "/".join(quote(segment, safe="") for segment in segments)
        return Request(
            method=method.upper(),
            url=f"{self._base_url}/{encoded}",
            headers={
                "Authorization": f"Bearer {self._api_key}",
                "Accept": "application/json",
            },
        )
