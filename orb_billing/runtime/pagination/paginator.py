"""Lazy cursor pagination over Orb list endpoints.

This module provides the Paginator class, which turns a base list request
into an async iterator of decoded items spanning as many pages as the server
returns. Pages are fetched on demand, one at a time, as the consumer pulls.
"""

from __future__ import annotations

import asyncio
from collections import deque
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter

from ...core.config import RetryPolicy
from ...core.exceptions import OrbError, is_transient
from ..rest.request import Request
from ..rest.runner import RestRunner, decode_response
from .definitions import CURSOR_PARAM, LIMIT_PARAM, Page
from .telemetry import (
    log_item_filtered,
    log_page_error,
    log_page_fetched,
    log_page_retry,
    log_pagination_complete,
)

T = TypeVar("T")

Reconcile = Callable[[Any], Any]


class Paginator(Generic[T]):
    """Pull-driven async iterator over a cursor-paginated endpoint.

    State:
        cursor: Cursor for the next page (None before the first page)
        exhausted: True once a page arrived without a next cursor
        pending: Items of the last page not yet yielded

    Each page request is a copy of the base request with ``limit`` and, after
    the first page, ``cursor`` appended. The cursor is passed back exactly as
    the server returned it.

    Transient failures (transport errors, 5xx, 429) are retried with the same
    cursor until ``retry.max_attempts`` attempts have been made; any other
    failure ends the sequence at once. After an error, or after ``aclose()``,
    the iterator is finished and issues no further requests.

    The paginator owns no background task. Abandoning it mid-sequence issues
    no more requests, and cancelling the task awaiting ``__anext__`` cancels
    the in-flight request.

    Example:
        >>> async for subscription in client.list_subscriptions(params):
        ...     print(subscription.id)
    """

    def __init__(
        self,
        runner: RestRunner,
        request: Request,
        *,
        item_type: Any,
        page_size: int,
        reconcile: Reconcile | None = None,
        retry: RetryPolicy | None = None,
        endpoint: str = "unknown",
    ) -> None:
        """Initialize paginator.

        Args:
            runner: Runner used to execute page requests
            request: Base request carrying path and endpoint filters
            item_type: Type of the raw items on each page
            page_size: Value of the ``limit`` query parameter
            reconcile: Optional transform applied to each raw item; returning
                None drops the item from the sequence
            retry: Retry budget for transient failures
            endpoint: Identifier used in log records
        """
        if page_size < 1:
            raise ValueError("page_size must be a positive integer")
        self._runner = runner
        self._request = request
        self._adapter: TypeAdapter[Page[Any]] = TypeAdapter(Page[item_type])
        self._page_size = page_size
        self._reconcile = reconcile
        self._retry = retry or RetryPolicy()
        self._endpoint = endpoint

        self._cursor: str | None = None
        self._exhausted = False
        self._pending: deque[Any] = deque()
        self._closed = False
        self._pages = 0
        self._yielded = 0

    @property
    def cursor(self) -> str | None:
        return self._cursor

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    @property
    def pages_fetched(self) -> int:
        return self._pages

    def __aiter__(self) -> Paginator[T]:
        return self

    async def __anext__(self) -> T:
        while True:
            if self._closed:
                raise StopAsyncIteration
            if self._pending:
                item = self._transform(self._pending.popleft())
                if item is None:
                    log_item_filtered(endpoint=self._endpoint, page_index=self._pages - 1)
                    continue
                self._yielded += 1
                return item
            if self._exhausted:
                self._closed = True
                log_pagination_complete(
                    endpoint=self._endpoint, pages=self._pages, items=self._yielded
                )
                raise StopAsyncIteration
            await self._fetch_page()

    async def aclose(self) -> None:
        """Stop the sequence; later pulls end immediately without I/O."""
        self._closed = True
        self._pending.clear()

    async def collect(self) -> list[T]:
        """Drain the remaining sequence into a list."""
        return [item async for item in self]

    def _page_request(self) -> Request:
        request = self._request.copy().query(LIMIT_PARAM, self._page_size)
        if self._cursor is not None:
            request.query(CURSOR_PARAM, self._cursor)
        return request

    async def _fetch_page(self) -> None:
        request = self._page_request()
        attempt = 0
        while True:
            attempt += 1
            try:
                response = await self._runner.execute(request)
                page = decode_response(response, self._adapter)
            except OrbError as e:
                if not is_transient(e) or attempt >= self._retry.max_attempts:
                    self._fail(e, attempt)
                    raise
                delay = self._retry.delay_for(attempt, getattr(e, "retry_after", None))
                log_page_retry(
                    endpoint=self._endpoint,
                    page_index=self._pages,
                    attempt=attempt,
                    max_attempts=self._retry.max_attempts,
                    delay=delay,
                    error=e,
                )
                await asyncio.sleep(delay)
                continue
            break

        log_page_fetched(
            endpoint=self._endpoint,
            page_index=self._pages,
            items=len(page.data),
            has_next=page.next_cursor is not None,
            attempts=attempt,
        )
        self._pages += 1
        self._pending.extend(page.data)
        self._cursor = page.next_cursor
        self._exhausted = page.next_cursor is None

    def _transform(self, raw: Any) -> T | None:
        if self._reconcile is None:
            return raw
        try:
            return self._reconcile(raw)
        except Exception as e:
            self._fail(e, attempts=0)
            raise

    def _fail(self, error: BaseException, attempts: int) -> None:
        self._closed = True
        self._pending.clear()
        log_page_error(
            endpoint=self._endpoint,
            page_index=self._pages,
            attempts=attempts,
            error=error,
        )
