"""Invoice models."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, ClassVar

from pydantic import Field

from ..core.config import ListParams
from ..core.enums import InvoiceStatus
from .common import CustomerId, OrbModel, Quantity


class InvoiceLineItem(OrbModel):
    """A line of an invoice, one per billed price."""

    id: str | None = None
    name: str
    subtotal: str
    adjusted_subtotal: str | None = None
    partially_invoiced_amount: str | None = None
    amount: str
    quantity: Quantity | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None


class AutoCollection(OrbModel):
    enabled: bool | None = None
    next_attempt_at: datetime | None = None
    previously_attempted_at: datetime | None = None
    num_attempts: int | None = None


class InvoiceCustomer(OrbModel):
    id: str
    external_id: str | None = Field(None, alias="external_customer_id")


class InvoiceSubscription(OrbModel):
    id: str


class _InvoiceFields(OrbModel):
    id: str
    customer: InvoiceCustomer
    subscription: InvoiceSubscription | None = None
    invoice_number: str
    invoice_pdf: str | None = None
    currency: str
    subtotal: str | None = None
    total: str
    amount_due: str
    created_at: datetime
    issued_at: datetime | None = None
    due_date: datetime | None = None
    paid_at: datetime | None = None
    voided_at: datetime | None = None
    payment_failed_at: datetime | None = None
    hosted_invoice_url: str | None = None
    status: InvoiceStatus | str
    memo: str | None = None
    auto_collection: AutoCollection
    line_items: list[InvoiceLineItem] = Field(default_factory=list)
    metadata: dict[str, str] = Field(default_factory=dict)


class Invoice(_InvoiceFields):
    """An Orb invoice."""

    invoice_date: datetime


class UpcomingInvoice(_InvoiceFields):
    """The next invoice of a subscription.

    Upcoming invoices have no ``invoice_date`` until they are issued.
    """

    target_date: datetime | None = None


@dataclass(frozen=True)
class InvoiceStatusFilter:
    """Statuses to include in an invoice listing.

    The default includes issued, paid and synced invoices.
    """

    DEFAULT: ClassVar[InvoiceStatusFilter]

    draft: bool = False
    issued: bool = True
    paid: bool = True
    void: bool = False
    synced: bool = True

    def enabled(self) -> list[InvoiceStatus]:
        """Enabled statuses in the fixed order draft, issued, paid, void, synced."""
        return [status for status in InvoiceStatus if getattr(self, status.value)]


InvoiceStatusFilter.DEFAULT = InvoiceStatusFilter()


@dataclass(frozen=True)
class InvoiceListParams:
    """Parameters for ``list_invoices``."""

    DEFAULT: ClassVar[InvoiceListParams]

    inner: ListParams = ListParams.DEFAULT
    customer_filter: CustomerId | None = None
    subscription_filter: str | None = None
    statuses: InvoiceStatusFilter = InvoiceStatusFilter.DEFAULT

    def page_size(self, page_size: int) -> InvoiceListParams:
        return replace(self, inner=self.inner.page_size(page_size))

    def customer_id(self, customer_id: CustomerId) -> InvoiceListParams:
        return replace(self, customer_filter=customer_id)

    def subscription_id(self, subscription_id: str) -> InvoiceListParams:
        return replace(self, subscription_filter=subscription_id)

    def status_filter(self, statuses: InvoiceStatusFilter) -> InvoiceListParams:
        return replace(self, statuses=statuses)

    def query_pairs(self) -> list[tuple[str, Any]]:
        pairs: list[tuple[str, Any]] = []
        if self.customer_filter is not None:
            pairs.append((self.customer_filter.param, self.customer_filter.value))
        pairs.append(("subscription_id", self.subscription_filter))
        pairs.extend(("status[]", status) for status in self.statuses.enabled())
        return pairs


InvoiceListParams.DEFAULT = InvoiceListParams()
