"""Event backfill models."""

from __future__ import annotations

from datetime import datetime

from ..core.enums import BackfillStatus
from .common import OrbModel, RequestModel


class Backfill(OrbModel):
    """A backfill of historical usage events over a timeframe."""

    id: str
    status: BackfillStatus | str
    timeframe_start: datetime
    timeframe_end: datetime
    created_at: datetime
    close_time: datetime | None = None
    reverted_at: datetime | None = None
    customer_id: str | None = None
    events_ingested: int | None = None
    replace_existing_events: bool | None = None


class CreateBackfillParams(RequestModel):
    """Opens a backfill.

    Events ingested with the returned backfill's ID are applied when the
    backfill is closed. With ``replace_existing_events`` the events already
    recorded in the timeframe are replaced rather than added to.
    """

    timeframe_start: datetime
    timeframe_end: datetime
    close_time: datetime | None = None
    customer_id: str | None = None
    external_customer_id: str | None = None
    replace_existing_events: bool | None = None
    deprecation_filter: str | None = None
