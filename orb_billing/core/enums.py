"""Enumerations shared across Orb resources.

Architecture:
    String enums serialize to the exact wire values used by the Orb API, so
    they can be placed directly in request models and query parameters.
    Response models that may receive values added after this library was
    released type such fields as ``SomeEnum | str`` so unknown values still
    decode.
"""

from enum import Enum


class SubscriptionStatus(str, Enum):
    """Lifecycle status of a subscription."""

    ACTIVE = "active"
    ENDED = "ended"
    UPCOMING = "upcoming"


class ChangeOption(str, Enum):
    """When a plan change or cancellation takes effect."""

    REQUESTED_DATE = "requested_date"
    END_OF_SUBSCRIPTION_TERM = "end_of_subscription_term"
    IMMEDIATE = "immediate"


class BillingCycleAlignment(str, Enum):
    """Billing period alignment applied during a plan change."""

    UNCHANGED = "unchanged"
    PLAN_CHANGE_DATE = "plan_change_date"
    START_OF_MONTH = "start_of_month"


class InvoiceStatus(str, Enum):
    """Status of an invoice."""

    DRAFT = "draft"
    ISSUED = "issued"
    PAID = "paid"
    VOID = "void"
    SYNCED = "synced"


class IngestionMode(str, Enum):
    """Event ingestion mode.

    In debug mode the response lists which events were ingested and which were
    duplicates.
    """

    PRODUCTION = "production"
    DEBUG = "debug"


class PaymentProvider(str, Enum):
    """External payment provider attached to a customer."""

    QUICKBOOKS = "quickbooks"
    BILL_COM = "bill.com"
    STRIPE = "stripe"
    STRIPE_CHARGE = "stripe_charge"
    STRIPE_INVOICE = "stripe_invoice"
    NETSUITE = "netsuite"


class ExternalMarketplace(str, Enum):
    """Cloud marketplace a subscription can be attached to."""

    GOOGLE = "google"
    AWS = "aws"
    AZURE = "azure"


class CostViewMode(str, Enum):
    """How cost buckets are aggregated."""

    PERIODIC = "periodic"
    CUMULATIVE = "cumulative"


class VoidReason(str, Enum):
    """Reason recorded when voiding a credit block."""

    REFUND = "refund"


class AlertType(str, Enum):
    """Kind of alert."""

    USAGE_EXCEEDED = "usage_exceeded"
    COST_EXCEEDED = "cost_exceeded"
    CREDIT_BALANCE_DEPLETED = "credit_balance_depleted"
    CREDIT_BALANCE_DROPPED = "credit_balance_dropped"
    CREDIT_BALANCE_RECOVERED = "credit_balance_recovered"


class BackfillStatus(str, Enum):
    """Status of an event backfill."""

    PENDING = "pending"
    REFLECTED = "reflected"
    PENDING_REVERT = "pending_revert"
    REVERTED = "reverted"


class PriceType(str, Enum):
    """Price type scope for adjustments."""

    USAGE = "usage"
    FIXED_IN_ADVANCE = "fixed_in_advance"
    FIXED_IN_ARREARS = "fixed_in_arrears"
    FIXED = "fixed"
    IN_ARREARS = "in_arrears"


class TaxIdType(str, Enum):
    """Tax identifier type."""

    AE_TRN = "ae_trn"
    AU_ABN = "au_abn"
    BR_CNPJ = "br_cnpj"
    CA_BN = "ca_bn"
    CH_VAT = "ch_vat"
    EU_VAT = "eu_vat"
    GB_VAT = "gb_vat"
    IN_GST = "in_gst"
    JP_CN = "jp_cn"
    MX_RFC = "mx_rfc"
    NZ_GST = "nz_gst"
    SG_GST = "sg_gst"
    US_EIN = "us_ein"
    ZA_VAT = "za_vat"
