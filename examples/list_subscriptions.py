#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from orb_billing import Client, CustomerId, SubscriptionListParams, SubscriptionStatus


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List Orb subscriptions (reads ORB_API_KEY)")
    p.add_argument("--customer", help="Orb customer ID to filter by")
    p.add_argument("--external-customer", help="External customer ID to filter by")
    p.add_argument("--status", choices=[s.value for s in SubscriptionStatus])
    p.add_argument("--page-size", type=int, default=50)
    p.add_argument("--limit", type=int, default=20, help="Stop after this many subscriptions")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    params = SubscriptionListParams.DEFAULT.page_size(args.page_size)
    if args.customer:
        params = params.customer_id(CustomerId.orb(args.customer))
    elif args.external_customer:
        params = params.customer_id(CustomerId.external(args.external_customer))
    if args.status:
        params = params.status(SubscriptionStatus(args.status))

    async with Client.from_env() as client:
        print(f"{'Subscription':28} | {'Customer':28} | {'Plan':24} | {'Status':8}")
        print("-" * 98)
        count = 0
        async for sub in client.list_subscriptions(params):
            status = sub.status.value if isinstance(sub.status, SubscriptionStatus) else sub.status
            print(f"{sub.id:28} | {sub.customer.id:28} | {sub.plan.name[:24]:24} | {status:8}")
            count += 1
            if count >= args.limit:
                break
        print("-" * 98)
        print(f"{count} subscriptions")


if __name__ == "__main__":
    asyncio.run(main())
