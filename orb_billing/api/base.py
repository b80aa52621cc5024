"""Request plumbing shared by every resource mixin."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ..core.config import ClientConfig, ListParams
from ..runtime.pagination import Paginator
from ..runtime.rest import HTTPClient, HTTPResponse, Request, RequestBuilder, RestRunner, Transport

logger = logging.getLogger(__name__)


class ClientCore:
    """Holds the configuration, transport and runner behind a ``Client``.

    Resource mixins derive from this class and use its three helpers:
    ``build_request`` for the path, ``send_request`` for single-object calls
    and ``stream_paginated_request`` for list calls.
    """

    def __init__(self, config: ClientConfig, *, transport: Transport | None = None) -> None:
        """Initialize the client core.

        Args:
            config: Client configuration
            transport: Optional transport (an aiohttp-backed ``HTTPClient``
                is created if not provided)

        Note:
            A transport passed in is owned by the caller and is not closed by
            ``close()``.
        """
        self._config = config
        self._owns_transport = transport is None
        self._transport: Transport = transport or HTTPClient(timeout=config.timeout)
        self._builder = RequestBuilder(config.base_url, config.api_key)
        self._runner = RestRunner(self._transport)
        self._closed = False

    @property
    def config(self) -> ClientConfig:
        return self._config

    def build_request(self, method: str, *path: str) -> Request:
        return self._builder.build(method, path)

    async def send_request(self, request: Request, response_type: Any) -> Any:
        return await self._runner.send(request, response_type)

    async def send_request_raw(self, request: Request) -> HTTPResponse:
        return await self._runner.send_raw(request)

    def stream_paginated_request(
        self,
        params: ListParams,
        request: Request,
        item_type: Any,
        *,
        endpoint: str,
        reconcile: Callable[[Any], Any] | None = None,
    ) -> Paginator[Any]:
        """Return a paginator over ``request``.

        No request is sent until the paginator is first iterated.
        """
        return Paginator(
            self._runner,
            request,
            item_type=item_type,
            page_size=params.resolve_page_size(self._config.default_page_size),
            reconcile=reconcile,
            retry=self._config.retry,
            endpoint=endpoint,
        )

    async def close(self) -> None:
        """Release the transport if this client created it."""
        if self._closed:
            return
        self._closed = True
        if self._owns_transport:
            await self._transport.close()
        logger.debug("client_closed", extra={"base_url": self._config.base_url})
