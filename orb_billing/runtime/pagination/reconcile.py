"""Reconciliation of union-shaped list items.

Subscription listings embed the subscribed customer, which becomes a
``{"id", "deleted"}`` placeholder once that customer is deleted. These
subscriptions are dropped from the sequence rather than surfaced with a
half-populated customer.
"""

from __future__ import annotations

from ...core.exceptions import UnexpectedResponseError
from ...models.customers import Customer, DeletedCustomer
from ...models.subscriptions import RawSubscription, Subscription


def reconcile_subscription(raw: RawSubscription) -> Subscription | None:
    """Resolve the embedded customer of a listed subscription.

    Args:
        raw: Subscription as decoded from a list page

    Returns:
        The subscription with a concrete customer, or None when the customer
        has been deleted and the subscription should be skipped

    Raises:
        UnexpectedResponseError: If the placeholder shape arrives with
            ``deleted`` set to false
    """
    customer = raw.customer
    if isinstance(customer, Customer):
        return Subscription(customer=customer, **raw.shared_fields())
    if isinstance(customer, DeletedCustomer):
        if customer.deleted:
            return None
        raise UnexpectedResponseError(
            f"customer {customer.id} used deleted response shape "
            "but deleted field was `false`"
        )
    raise UnexpectedResponseError(f"unrecognized customer shape: {type(customer).__name__}")
