"""Subscription endpoints."""

from __future__ import annotations

from ..models.subscriptions import (
    CancelSubscriptionRequest,
    CreateSubscriptionRequest,
    FetchSubscriptionCostsRequest,
    FetchSubscriptionCostsResponse,
    PriceIntervalsRequest,
    RawSubscription,
    SchedulePlanChangeRequest,
    Subscription,
    SubscriptionListParams,
    UpdatePriceQuantityRequest,
    UpdateSubscriptionRequest,
)
from ..runtime.pagination import Paginator, reconcile_subscription
from .base import ClientCore

SUBSCRIPTIONS = "subscriptions"


class SubscriptionsMixin(ClientCore):
    def list_subscriptions(
        self, params: SubscriptionListParams = SubscriptionListParams.DEFAULT
    ) -> Paginator[Subscription]:
        """List subscriptions as configured by ``params``.

        The underlying API call is paginated; pages are fetched as the
        returned iterator is consumed. Subscriptions whose customer has been
        deleted are skipped.

        Raises (during iteration):
            UnexpectedResponseError: If a customer placeholder arrives with
                ``deleted`` set to false
        """
        request = self.build_request("GET", SUBSCRIPTIONS).query_pairs(params.query_pairs())
        return self.stream_paginated_request(
            params.inner,
            request,
            RawSubscription,
            endpoint="subscriptions.list",
            reconcile=reconcile_subscription,
        )

    async def create_subscription(self, subscription: CreateSubscriptionRequest) -> Subscription:
        request = (
            self.build_request("POST", SUBSCRIPTIONS)
            .idempotency_key(subscription.idempotency_key)
            .json(subscription.to_body())
        )
        return await self.send_request(request, Subscription)

    async def get_subscription(self, subscription_id: str) -> Subscription:
        request = self.build_request("GET", SUBSCRIPTIONS, subscription_id)
        return await self.send_request(request, Subscription)

    async def update_price_quantity(
        self, subscription_id: str, update: UpdatePriceQuantityRequest
    ) -> Subscription:
        """Update the quantity of a fixed fee price on a subscription."""
        request = self.build_request(
            "POST", SUBSCRIPTIONS, subscription_id, "update_fixed_fee_quantity"
        ).json(update.to_body())
        return await self.send_request(request, Subscription)

    async def schedule_plan_change(
        self, subscription_id: str, change: SchedulePlanChangeRequest
    ) -> Subscription:
        request = self.build_request(
            "POST", SUBSCRIPTIONS, subscription_id, "schedule_plan_change"
        ).json(change.to_body())
        return await self.send_request(request, Subscription)

    async def unschedule_pending_plan_changes(self, subscription_id: str) -> Subscription:
        request = self.build_request(
            "POST", SUBSCRIPTIONS, subscription_id, "unschedule_pending_plan_changes"
        )
        return await self.send_request(request, Subscription)

    async def price_intervals(
        self, subscription_id: str, intervals: PriceIntervalsRequest
    ) -> Subscription:
        """Add and edit price and adjustment intervals on a subscription."""
        request = (
            self.build_request("POST", SUBSCRIPTIONS, subscription_id, "price_intervals")
            .idempotency_key(intervals.idempotency_key)
            .json(intervals.to_body())
        )
        return await self.send_request(request, Subscription)

    async def cancel_subscription(
        self,
        subscription_id: str,
        cancel: CancelSubscriptionRequest | None = None,
    ) -> Subscription:
        cancel = cancel or CancelSubscriptionRequest()
        request = self.build_request("POST", SUBSCRIPTIONS, subscription_id, "cancel").json(
            cancel.to_body()
        )
        return await self.send_request(request, Subscription)

    async def unschedule_cancellation(self, subscription_id: str) -> Subscription:
        """Remove a pending cancellation from a subscription."""
        request = self.build_request(
            "POST", SUBSCRIPTIONS, subscription_id, "unschedule_cancellation"
        )
        return await self.send_request(request, Subscription)

    async def update_subscription(
        self, subscription_id: str, update: UpdateSubscriptionRequest
    ) -> Subscription:
        request = self.build_request("PUT", SUBSCRIPTIONS, subscription_id).json(update.to_body())
        return await self.send_request(request, Subscription)

    async def fetch_subscription_costs(
        self,
        subscription_id: str,
        timeframe: FetchSubscriptionCostsRequest | None = None,
    ) -> FetchSubscriptionCostsResponse:
        """Fetch the costs of a subscription, per timeframe and per price.

        Without a timeframe the current billing period is returned.
        """
        timeframe = timeframe or FetchSubscriptionCostsRequest()
        request = self.build_request("GET", SUBSCRIPTIONS, subscription_id, "costs").query_pairs(
            timeframe.query_pairs()
        )
        return await self.send_request(request, FetchSubscriptionCostsResponse)
