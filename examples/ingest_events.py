#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import uuid
from datetime import UTC, datetime

from orb_billing import Client, CustomerId, IngestionMode
from orb_billing.models import IngestEventRequest


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Ingest usage events into Orb (reads ORB_API_KEY)")
    p.add_argument("external_customer_id")
    p.add_argument("event_name", nargs="?", default="api_call")
    p.add_argument("count", nargs="?", type=int, default=3)
    p.add_argument("--debug", action="store_true", help="Report ingested and duplicate keys")
    p.add_argument("--backfill", help="Ingest into an open backfill")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    now = datetime.now(UTC)
    events = [
        IngestEventRequest(
            customer_id=CustomerId.external(args.external_customer_id),
            event_name=args.event_name,
            timestamp=now,
            properties={"sequence": i},
            idempotency_key=str(uuid.uuid4()),
        )
        for i in range(args.count)
    ]
    mode = IngestionMode.DEBUG if args.debug else IngestionMode.PRODUCTION

    async with Client.from_env() as client:
        result = await client.ingest_events(mode, events, backfill_id=args.backfill)

    print(f"Sent       : {len(events)}")
    print(f"Rejected   : {len(result.validation_failed)}")
    for failure in result.validation_failed:
        print(f"  {failure.idempotency_key}: {', '.join(failure.validation_errors)}")
    if result.debug is not None:
        print(f"Ingested   : {len(result.debug.ingested)}")
        print(f"Duplicates : {len(result.debug.duplicate)}")


if __name__ == "__main__":
    asyncio.run(main())
