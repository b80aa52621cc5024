"""Customer models, including the deleted-customer placeholder union."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Union

from pydantic import Discriminator, Field, Tag

from ..core.enums import PaymentProvider, TaxIdType
from .common import OrbModel, RequestModel


class Address(OrbModel):
    """A postal address."""

    city: str | None = None
    country: str | None = None
    line1: str | None = None
    line2: str | None = None
    postal_code: str | None = None
    state: str | None = None


class AddressRequest(RequestModel):
    """A postal address sent when creating or updating a customer."""

    city: str | None = None
    country: str | None = None
    line1: str | None = None
    line2: str | None = None
    postal_code: str | None = None
    state: str | None = None


class TaxId(OrbModel):
    """A tax identifier attached to a customer."""

    type: TaxIdType | str
    value: str
    country: str


class TaxIdRequest(RequestModel):
    type: TaxIdType
    value: str
    country: str


class CustomerPaymentProviderRequest(RequestModel):
    """Links a customer to a record in an external payment provider."""

    kind: PaymentProvider = Field(serialization_alias="payment_provider")
    id: str = Field(serialization_alias="payment_provider_id")


class Customer(OrbModel):
    """An Orb customer."""

    id: str
    external_id: str | None = Field(None, alias="external_customer_id")
    name: str
    email: str
    timezone: str
    currency: str | None = None
    balance: str
    additional_emails: list[str] = Field(default_factory=list)
    auto_collection: bool | None = None
    payment_provider: PaymentProvider | str | None = None
    payment_provider_id: str | None = None
    billing_address: Address | None = None
    shipping_address: Address | None = None
    tax_id: TaxId | None = None
    metadata: dict[str, str] = Field(default_factory=dict)
    created_at: datetime


class DeletedCustomer(OrbModel):
    """Placeholder returned in place of a customer that has been deleted.

    ``deleted`` is expected to always be true; a false value is an
    inconsistent payload and is rejected during reconciliation.
    """

    id: str
    deleted: bool


# Wire names of the fields a full customer payload always carries
_REQUIRED_CUSTOMER_KEYS = frozenset(
    field.alias or name for name, field in Customer.model_fields.items() if field.is_required()
)


def _customer_shape(value: Any) -> str:
    """Pick the variant of an embedded customer payload.

    A full customer wins whenever all of its required fields are present.
    Otherwise a payload carrying ``deleted`` is the placeholder; any other
    keys on it are ignored.
    """
    if isinstance(value, Customer):
        return "normal"
    if isinstance(value, DeletedCustomer):
        return "deleted"
    if not isinstance(value, dict):
        return "normal"
    if "deleted" in value and not _REQUIRED_CUSTOMER_KEYS <= value.keys():
        return "deleted"
    return "normal"


CustomerResponse = Annotated[
    Union[
        Annotated[Customer, Tag("normal")],
        Annotated[DeletedCustomer, Tag("deleted")],
    ],
    Discriminator(_customer_shape),
]


class CreateCustomerRequest(RequestModel):
    """Request to create a customer.

    ``idempotency_key`` is sent as the ``Idempotency-Key`` header and never
    appears in the body.
    """

    flatten_fields = ("payment_provider",)

    name: str
    email: str
    external_id: str | None = Field(None, serialization_alias="external_customer_id")
    timezone: str | None = None
    currency: str | None = None
    additional_emails: list[str] | None = None
    auto_collection: bool | None = None
    payment_provider: CustomerPaymentProviderRequest | None = None
    billing_address: AddressRequest | None = None
    shipping_address: AddressRequest | None = None
    tax_id: TaxIdRequest | None = None
    metadata: dict[str, str] | None = None
    idempotency_key: str | None = Field(None, exclude=True)


class UpdateCustomerRequest(RequestModel):
    """Request to update a customer. Unset fields are left unchanged."""

    flatten_fields = ("payment_provider",)

    name: str | None = None
    email: str | None = None
    additional_emails: list[str] | None = None
    auto_collection: bool | None = None
    payment_provider: CustomerPaymentProviderRequest | None = None
    billing_address: AddressRequest | None = None
    shipping_address: AddressRequest | None = None
    tax_id: TaxIdRequest | None = None
    metadata: dict[str, str] | None = None
