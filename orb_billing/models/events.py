"""Usage event models."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, ClassVar

from pydantic import Field

from ..core.config import ListParams
from .common import CustomerId, OrbModel, RequestModel


class Event(OrbModel):
    """A usage event recorded for a customer."""

    id: str
    event_name: str
    customer_id: str | None = None
    external_customer_id: str | None = None
    timestamp: datetime
    properties: dict[str, Any] = Field(default_factory=dict)
    deprecated: bool = False


class IngestEventRequest(RequestModel):
    """A usage event to ingest.

    Unlike mutation requests, each event carries its own idempotency key in
    the body; Orb uses it to deduplicate retried ingestion calls.
    """

    flatten_fields = ("customer_id",)

    customer_id: CustomerId
    event_name: str
    timestamp: datetime
    properties: dict[str, Any] = Field(default_factory=dict)
    idempotency_key: str


class IngestEventDebugResponse(OrbModel):
    duplicate: list[str] = Field(default_factory=list)
    ingested: list[str] = Field(default_factory=list)


class IngestValidationFailure(OrbModel):
    idempotency_key: str
    validation_errors: list[str] = Field(default_factory=list)


class IngestEventResponse(OrbModel):
    """Result of an ingestion call.

    ``debug`` is only present when ingesting in debug mode.
    """

    validation_failed: list[IngestValidationFailure] = Field(default_factory=list)
    debug: IngestEventDebugResponse | None = None


class AmendEventRequest(RequestModel):
    """Replaces the properties of a previously ingested event."""

    flatten_fields = ("customer_id",)

    customer_id: CustomerId
    event_name: str
    timestamp: datetime
    properties: dict[str, Any] = Field(default_factory=dict)


class EventSearchCriteria(RequestModel):
    event_ids: list[str]
    timeframe_start: datetime | None = None
    timeframe_end: datetime | None = None


@dataclass(frozen=True)
class EventSearchParams:
    """Parameters for ``search_events``.

    The event IDs and timeframe are sent in the POST body; only the page
    size and cursor travel as query parameters.
    """

    DEFAULT: ClassVar[EventSearchParams]

    inner: ListParams = ListParams.DEFAULT
    event_ids: tuple[str, ...] = ()
    timeframe_start: datetime | None = None
    timeframe_end: datetime | None = None

    def page_size(self, page_size: int) -> EventSearchParams:
        return replace(self, inner=self.inner.page_size(page_size))

    def ids(self, *event_ids: str) -> EventSearchParams:
        return replace(self, event_ids=tuple(event_ids))

    def timeframe(self, start: datetime | None, end: datetime | None) -> EventSearchParams:
        return replace(self, timeframe_start=start, timeframe_end=end)

    def criteria(self) -> EventSearchCriteria:
        return EventSearchCriteria(
            event_ids=list(self.event_ids),
            timeframe_start=self.timeframe_start,
            timeframe_end=self.timeframe_end,
        )


EventSearchParams.DEFAULT = EventSearchParams()
