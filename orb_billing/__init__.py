"""Orb Billing - Async client for the Orb subscription billing API."""

from .api import Client
from .core import (
    DEFAULT_BASE_URL,
    AlertType,
    ApiError,
    BillingCycleAlignment,
    ChangeOption,
    ClientBuilder,
    ClientConfig,
    ConfigError,
    CostViewMode,
    DeserializeError,
    IngestionMode,
    InvoiceStatus,
    ListParams,
    OrbError,
    RateLimitError,
    RetryPolicy,
    SubscriptionStatus,
    TransportError,
    UnexpectedResponseError,
)
from .models import (
    CustomerId,
    InvoiceListParams,
    InvoiceStatusFilter,
    PlanId,
    Subscription,
    SubscriptionListParams,
)
from .runtime import Paginator

__version__ = "0.1.0"

__all__ = [
    "Client",
    "ClientBuilder",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "ListParams",
    "Paginator",
    "RetryPolicy",
    # Identifiers and params
    "CustomerId",
    "InvoiceListParams",
    "InvoiceStatusFilter",
    "PlanId",
    "Subscription",
    "SubscriptionListParams",
    # Enums
    "AlertType",
    "BillingCycleAlignment",
    "ChangeOption",
    "CostViewMode",
    "IngestionMode",
    "InvoiceStatus",
    "SubscriptionStatus",
    # Errors
    "ApiError",
    "ConfigError",
    "DeserializeError",
    "OrbError",
    "RateLimitError",
    "TransportError",
    "UnexpectedResponseError",
]
