"""Subscription models.

Architecture:
    A subscription listing embeds the subscribed customer, which the API may
    replace with a ``{"id", "deleted"}`` placeholder once the customer has
    been deleted. ``RawSubscription`` is the decoded wire shape with the
    customer typed as ``CustomerResponse``; ``Subscription`` is the public
    shape with a real ``Customer``. The two share every other field through
    ``SubscriptionFields`` so a raw record converts by swapping one field.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, ClassVar

from pydantic import Field

from ..core.config import ListParams
from ..core.enums import BillingCycleAlignment, ChangeOption, ExternalMarketplace, SubscriptionStatus
from .common import CustomerId, OrbModel, PlanId, Quantity, RequestModel
from .coupons import RedeemedCoupon
from .customers import Customer, CustomerResponse
from .plans import Plan
from .prices import (
    AddAdjustmentInterval,
    AddPriceInterval,
    EditAdjustmentInterval,
    EditPriceInterval,
    Price,
    PriceInterval,
    QuantityOnlyPriceOverride,
    SubscriptionAdjustmentInterval,
)


class SubscriptionFixedFee(OrbModel):
    """An entry of a subscription's fixed fee quantity schedule."""

    price_id: str
    quantity: Quantity
    start_date: datetime
    end_date: datetime | None = None


class SubscriptionFields(OrbModel):
    """Fields common to the raw and reconciled subscription shapes."""

    id: str
    plan: Plan
    status: SubscriptionStatus | str
    start_date: datetime
    end_date: datetime | None = None
    current_billing_period_start_date: datetime | None = None
    current_billing_period_end_date: datetime | None = None
    active_plan_phase_order: int | None = None
    fixed_fee_quantity_schedule: list[SubscriptionFixedFee] = Field(default_factory=list)
    net_terms: int
    auto_collection: bool | None = None
    default_invoice_memo: str | None = None
    created_at: datetime
    redeemed_coupon: RedeemedCoupon | None = None
    price_intervals: list[PriceInterval] = Field(default_factory=list)
    adjustment_intervals: list[SubscriptionAdjustmentInterval] = Field(default_factory=list)
    invoicing_threshold: str | None = None
    metadata: dict[str, str] = Field(default_factory=dict)


class Subscription(SubscriptionFields):
    """An Orb subscription."""

    customer: Customer


class RawSubscription(SubscriptionFields):
    """A subscription as listed, before the embedded customer is resolved."""

    customer: CustomerResponse

    def shared_fields(self) -> dict[str, Any]:
        """Every field except ``customer``, keyed by field name."""
        return {name: getattr(self, name) for name in SubscriptionFields.model_fields}


class SubscriptionExternalMarketplaceRequest(RequestModel):
    kind: ExternalMarketplace = Field(serialization_alias="external_marketplace")
    reporting_id: str = Field(serialization_alias="external_marketplace_reporting_id")


class CreateSubscriptionRequest(RequestModel):
    """Request to subscribe a customer to a plan.

    ``customer_id`` and ``plan_id`` are flattened into the body as
    ``customer_id``/``external_customer_id`` and ``plan_id``/``external_plan_id``.
    ``idempotency_key`` travels in the ``Idempotency-Key`` header.
    """

    flatten_fields = ("customer_id", "plan_id", "external_marketplace")

    customer_id: CustomerId
    plan_id: PlanId
    start_date: datetime | None = None
    external_marketplace: SubscriptionExternalMarketplaceRequest | None = None
    align_billing_with_subscription_start_date: bool | None = None
    minimum_amount: str | None = None
    net_terms: int | None = None
    auto_collection: bool | None = None
    default_invoice_memo: str | None = None
    price_overrides: list[QuantityOnlyPriceOverride] | None = None
    coupon_redemption_code: str | None = None
    invoicing_threshold: str | None = None
    metadata: dict[str, str] | None = None
    idempotency_key: str | None = Field(None, exclude=True)


class UpdatePriceQuantityRequest(RequestModel):
    """Sets a new quantity on a fixed fee price."""

    price_id: str
    quantity: Quantity
    change_option: ChangeOption | None = None
    effective_date: str | None = None


class SchedulePlanChangeRequest(RequestModel):
    """Moves an existing subscription to another plan."""

    flatten_fields = ("plan_id",)

    plan_id: PlanId
    change_option: ChangeOption = ChangeOption.IMMEDIATE
    change_date: str | None = None
    price_overrides: list[QuantityOnlyPriceOverride] | None = None
    coupon_redemption_code: str | None = None
    invoicing_threshold: str | None = None
    billing_cycle_alignment: BillingCycleAlignment | None = None


class PriceIntervalsRequest(RequestModel):
    """Adds and edits price and adjustment intervals on a subscription."""

    add: list[AddPriceInterval] = Field(default_factory=list)
    edit: list[EditPriceInterval] = Field(default_factory=list)
    add_adjustments: list[AddAdjustmentInterval] = Field(default_factory=list)
    edit_adjustments: list[EditAdjustmentInterval] = Field(default_factory=list)
    idempotency_key: str | None = Field(None, exclude=True)


class CancelSubscriptionRequest(RequestModel):
    """``cancellation_date`` is only accepted with ``ChangeOption.REQUESTED_DATE``."""

    cancel_option: ChangeOption = ChangeOption.IMMEDIATE
    cancellation_date: datetime | None = None


class UpdateSubscriptionRequest(RequestModel):
    invoicing_threshold: str | None = None
    default_invoice_memo: str | None = None
    auto_collection: bool | None = None
    net_terms: int | None = None
    metadata: dict[str, str] | None = None


@dataclass(frozen=True)
class FetchSubscriptionCostsRequest:
    """Timeframe for ``fetch_subscription_costs``.

    Costs include ``timeframe_start`` and exclude ``timeframe_end``.
    """

    timeframe_start: datetime | None = None
    timeframe_end: datetime | None = None

    def query_pairs(self) -> list[tuple[str, Any]]:
        return [
            ("timeframe_start", self.timeframe_start),
            ("timeframe_end", self.timeframe_end),
        ]


class PerPriceCostsEntry(OrbModel):
    subtotal: str
    total: str
    price: Price
    quantity: Quantity | None = None


class SubscriptionCostsEntry(OrbModel):
    """Costs of a subscription over one timeframe."""

    timeframe_start: datetime
    timeframe_end: datetime
    subtotal: str
    total: str
    per_price_costs: list[PerPriceCostsEntry]


class FetchSubscriptionCostsResponse(OrbModel):
    data: list[SubscriptionCostsEntry]


@dataclass(frozen=True)
class SubscriptionListParams:
    """Parameters for ``list_subscriptions``.

    Example:
        >>> params = (SubscriptionListParams.DEFAULT
        ...     .page_size(100)
        ...     .customer_id(CustomerId.external("acme"))
        ...     .status(SubscriptionStatus.ACTIVE))
    """

    DEFAULT: ClassVar[SubscriptionListParams]

    inner: ListParams = ListParams.DEFAULT
    customer_id_filter: CustomerId | None = None
    status_filter: SubscriptionStatus | str | None = None

    def page_size(self, page_size: int) -> SubscriptionListParams:
        return replace(self, inner=self.inner.page_size(page_size))

    def customer_id(self, customer_id: CustomerId) -> SubscriptionListParams:
        return replace(self, customer_id_filter=customer_id)

    def status(self, status: SubscriptionStatus | str) -> SubscriptionListParams:
        return replace(self, status_filter=status)

    def query_pairs(self) -> list[tuple[str, Any]]:
        pairs: list[tuple[str, Any]] = []
        if self.customer_id_filter is not None:
            pairs.append((self.customer_id_filter.param, self.customer_id_filter.value))
        pairs.append(("status", self.status_filter))
        return pairs


SubscriptionListParams.DEFAULT = SubscriptionListParams()
