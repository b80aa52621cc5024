"""Data models for Orb resources.

Architecture:
    Responses decode into frozen Pydantic v2 models derived from
    ``OrbModel``, which ignores fields it does not know so new API fields
    never break decoding. Request bodies derive from ``RequestModel``, whose
    ``to_body()`` drops unset fields and flattens identifier unions into the
    top level. List parameters are frozen dataclasses with copy-on-write
    setters and a shared ``DEFAULT`` constant.

Design Decisions:
    - Decimal for quantities and balances, sent back as JSON numbers
    - Union payloads (deleted customers, price models, ledger entries) are
      resolved by a discriminator at decode time
    - Monetary amounts stay strings, as the API returns them
"""

from .alerts import (
    Alert,
    AlertListParams,
    AlertThreshold,
    AlertThresholdRequest,
    CreateSubscriptionAlertRequest,
    UpdateAlertRequest,
)
from .backfills import Backfill, CreateBackfillParams
from .common import CustomerId, OrbModel, PlanId, Quantity, RequestModel
from .costs import CustomerCostBucket, CustomerCostParams, CustomerCostPriceBlock, CustomerCosts
from .coupons import Coupon, CouponListParams, Discount, RedeemedCoupon
from .customers import (
    Address,
    AddressRequest,
    CreateCustomerRequest,
    Customer,
    CustomerPaymentProviderRequest,
    CustomerResponse,
    DeletedCustomer,
    TaxId,
    TaxIdRequest,
    UpdateCustomerRequest,
)
from .events import (
    AmendEventRequest,
    Event,
    EventSearchParams,
    IngestEventRequest,
    IngestEventResponse,
)
from .invoices import Invoice, InvoiceListParams, InvoiceStatusFilter, UpcomingInvoice
from .ledger import (
    CustomerCreditBlock,
    DecrementLedgerEntryRequest,
    IncrementLedgerEntryRequest,
    LedgerEntry,
    LedgerEntryRequest,
    VoidLedgerEntryRequest,
)
from .plans import Plan, PlanListParams
from .prices import (
    AddAdjustmentInterval,
    AddPriceInterval,
    EditAdjustmentInterval,
    EditPriceInterval,
    NewMaximumAdjustment,
    Price,
    PriceInterval,
    QuantityOnlyPriceOverride,
    TieredPrice,
    UnitPrice,
)
from .subscriptions import (
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

__all__ = [
    "AddAdjustmentInterval",
    "AddPriceInterval",
    "Address",
    "AddressRequest",
    "Alert",
    "AlertListParams",
    "AlertThreshold",
    "AlertThresholdRequest",
    "AmendEventRequest",
    "Backfill",
    "CancelSubscriptionRequest",
    "Coupon",
    "CouponListParams",
    "CreateBackfillParams",
    "CreateCustomerRequest",
    "CreateSubscriptionAlertRequest",
    "CreateSubscriptionRequest",
    "Customer",
    "CustomerCostBucket",
    "CustomerCostParams",
    "CustomerCostPriceBlock",
    "CustomerCosts",
    "CustomerCreditBlock",
    "CustomerId",
    "CustomerPaymentProviderRequest",
    "CustomerResponse",
    "DecrementLedgerEntryRequest",
    "DeletedCustomer",
    "Discount",
    "EditAdjustmentInterval",
    "EditPriceInterval",
    "Event",
    "EventSearchParams",
    "FetchSubscriptionCostsRequest",
    "FetchSubscriptionCostsResponse",
    "IncrementLedgerEntryRequest",
    "IngestEventRequest",
    "IngestEventResponse",
    "Invoice",
    "InvoiceListParams",
    "InvoiceStatusFilter",
    "LedgerEntry",
    "LedgerEntryRequest",
    "NewMaximumAdjustment",
    "OrbModel",
    "Plan",
    "PlanId",
    "PlanListParams",
    "Price",
    "PriceInterval",
    "PriceIntervalsRequest",
    "Quantity",
    "QuantityOnlyPriceOverride",
    "RawSubscription",
    "RedeemedCoupon",
    "RequestModel",
    "SchedulePlanChangeRequest",
    "Subscription",
    "SubscriptionListParams",
    "TaxId",
    "TaxIdRequest",
    "TieredPrice",
    "UnitPrice",
    "UpcomingInvoice",
    "UpdateAlertRequest",
    "UpdateCustomerRequest",
    "UpdatePriceQuantityRequest",
    "UpdateSubscriptionRequest",
    "VoidLedgerEntryRequest",
]
