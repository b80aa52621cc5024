"""Event ingestion, search and backfill endpoints."""

from __future__ import annotations

from collections.abc import Iterable

from ..core.config import ListParams
from ..core.enums import IngestionMode
from ..models.backfills import Backfill, CreateBackfillParams
from ..models.events import (
    AmendEventRequest,
    Event,
    EventSearchParams,
    IngestEventRequest,
    IngestEventResponse,
)
from ..runtime.pagination import Paginator
from .base import ClientCore

EVENTS = "events"
BACKFILLS = (EVENTS, "backfills")


class EventsMixin(ClientCore):
    async def ingest_events(
        self,
        mode: IngestionMode,
        events: Iterable[IngestEventRequest],
        backfill_id: str | None = None,
    ) -> IngestEventResponse:
        """Ingest a batch of usage events.

        Args:
            mode: In debug mode the response lists ingested and duplicate
                idempotency keys
            events: Events to ingest; each carries its own idempotency key
            backfill_id: Ingest into an open backfill instead of live usage

        Returns:
            Ingestion result, including per-event validation failures
        """
        request = self.build_request("POST", "ingest")
        if mode == IngestionMode.DEBUG:
            request.query("debug", True)
        request.query("backfill_id", backfill_id).json(
            {"events": [event.to_body() for event in events]}
        )
        return await self.send_request(request, IngestEventResponse)

    def search_events(self, params: EventSearchParams) -> Paginator[Event]:
        """Search events by ID. Criteria are sent in the body of each page request."""
        request = self.build_request("POST", EVENTS, "search").json(params.criteria().to_body())
        return self.stream_paginated_request(params.inner, request, Event, endpoint="events.search")

    async def amend_event(self, event_id: str, event: AmendEventRequest) -> None:
        request = self.build_request("PUT", EVENTS, event_id).json(event.to_body())
        await self.send_request_raw(request)

    async def deprecate_event(self, event_id: str) -> None:
        """Exclude an event from all usage and billing calculations."""
        request = self.build_request("PUT", EVENTS, event_id, "deprecate")
        await self.send_request_raw(request)


class BackfillsMixin(ClientCore):
    async def create_backfill(self, params: CreateBackfillParams) -> Backfill:
        request = self.build_request("POST", *BACKFILLS).json(params.to_body())
        return await self.send_request(request, Backfill)

    async def fetch_backfill(self, backfill_id: str) -> Backfill:
        request = self.build_request("GET", *BACKFILLS, backfill_id)
        return await self.send_request(request, Backfill)

    async def close_backfill(self, backfill_id: str) -> Backfill:
        """Close a backfill; its events are reflected in usage once processed."""
        request = self.build_request("POST", *BACKFILLS, backfill_id, "close")
        return await self.send_request(request, Backfill)

    async def revert_backfill(self, backfill_id: str) -> Backfill:
        request = self.build_request("POST", *BACKFILLS, backfill_id, "revert")
        return await self.send_request(request, Backfill)

    def list_backfills(self, params: ListParams = ListParams.DEFAULT) -> Paginator[Backfill]:
        request = self.build_request("GET", *BACKFILLS)
        return self.stream_paginated_request(params, request, Backfill, endpoint="backfills.list")
