"""Credit balance and credit ledger models."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import Field

from ..core.enums import VoidReason
from .common import OrbModel, Quantity, RequestModel


class CustomerCreditBlock(OrbModel):
    """A block of prepaid credits with its remaining balance."""

    id: str
    balance: Quantity
    expiry_date: datetime | None = None
    effective_date: datetime | None = None
    per_unit_cost_basis: str | None = None
    status: str | None = None


class LedgerCustomer(OrbModel):
    id: str
    external_customer_id: str | None = None


class LedgerCreditBlock(OrbModel):
    id: str
    expiry_date: datetime | None = None
    per_unit_cost_basis: str | None = None


class _LedgerEntryBase(OrbModel):
    id: str
    ledger_sequence_number: int
    entry_status: str
    customer: LedgerCustomer
    starting_balance: Quantity
    ending_balance: Quantity
    amount: Quantity
    currency: str
    created_at: datetime
    description: str | None = None
    credit_block: LedgerCreditBlock
    metadata: dict[str, str] = Field(default_factory=dict)


class IncrementLedgerEntry(_LedgerEntryBase):
    entry_type: Literal["increment"]


class DecrementLedgerEntry(_LedgerEntryBase):
    entry_type: Literal["decrement"]
    event_id: str | None = None
    invoice_id: str | None = None
    price_id: str | None = None


class ExpirationChangeLedgerEntry(_LedgerEntryBase):
    entry_type: Literal["expiration_change"]
    new_block_expiry_date: datetime | None = None


class CreditBlockExpiryLedgerEntry(_LedgerEntryBase):
    entry_type: Literal["credit_block_expiry"]


class VoidLedgerEntry(_LedgerEntryBase):
    entry_type: Literal["void"]
    void_amount: Quantity
    void_reason: str | None = None


class VoidInitiatedLedgerEntry(_LedgerEntryBase):
    entry_type: Literal["void_initiated"]
    new_block_expiry_date: datetime | None = None
    void_amount: Quantity
    void_reason: str | None = None


class AmendmentLedgerEntry(_LedgerEntryBase):
    entry_type: Literal["amendment"]


LedgerEntry = Annotated[
    Union[
        IncrementLedgerEntry,
        DecrementLedgerEntry,
        ExpirationChangeLedgerEntry,
        CreditBlockExpiryLedgerEntry,
        VoidLedgerEntry,
        VoidInitiatedLedgerEntry,
        AmendmentLedgerEntry,
    ],
    Field(discriminator="entry_type"),
]


class InvoiceSettings(RequestModel):
    """Invoice to issue for purchased credits."""

    auto_collection: bool
    net_terms: int
    memo: str | None = None
    require_successful_payment: bool | None = None


class IncrementLedgerEntryRequest(RequestModel):
    """Adds credits to a customer's balance."""

    entry_type: Literal["increment"] = "increment"
    amount: Quantity
    description: str | None = None
    expiry_date: datetime | None = None
    effective_date: datetime | None = None
    per_unit_cost_basis: str | None = None
    invoice_settings: InvoiceSettings | None = None


class DecrementLedgerEntryRequest(RequestModel):
    """Deducts credits from a customer's balance."""

    entry_type: Literal["decrement"] = "decrement"
    amount: Quantity
    description: str | None = None


class VoidLedgerEntryRequest(RequestModel):
    """Voids all or part of a credit block."""

    entry_type: Literal["void"] = "void"
    amount: Quantity
    block_id: str
    void_reason: VoidReason | None = None
    description: str | None = None


LedgerEntryRequest = Union[
    IncrementLedgerEntryRequest, DecrementLedgerEntryRequest, VoidLedgerEntryRequest
]
