"""Core components."""

from .config import (
    DEFAULT_BASE_URL,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    ClientBuilder,
    ClientConfig,
    ListParams,
    RetryPolicy,
)
from .enums import (
    AlertType,
    BackfillStatus,
    BillingCycleAlignment,
    ChangeOption,
    CostViewMode,
    ExternalMarketplace,
    IngestionMode,
    InvoiceStatus,
    PaymentProvider,
    PriceType,
    SubscriptionStatus,
    TaxIdType,
    VoidReason,
)
from .exceptions import (
    ApiError,
    ConfigError,
    DeserializeError,
    OrbError,
    RateLimitError,
    TransportError,
    UnexpectedResponseError,
    is_transient,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "ClientBuilder",
    "ClientConfig",
    "ListParams",
    "RetryPolicy",
    # Enums
    "AlertType",
    "BackfillStatus",
    "BillingCycleAlignment",
    "ChangeOption",
    "CostViewMode",
    "ExternalMarketplace",
    "IngestionMode",
    "InvoiceStatus",
    "PaymentProvider",
    "PriceType",
    "SubscriptionStatus",
    "TaxIdType",
    "VoidReason",
    # Errors
    "ApiError",
    "ConfigError",
    "DeserializeError",
    "OrbError",
    "RateLimitError",
    "TransportError",
    "UnexpectedResponseError",
    "is_transient",
]
