"""End-to-end tests against the Orb API in test mode."""

import os
import secrets
from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest

from orb_billing import (
    ApiError,
    CustomerId,
    IngestionMode,
    ListParams,
    PlanId,
    SubscriptionListParams,
)
from orb_billing.core import PaymentProvider, VoidReason
from orb_billing.models import (
    CreateCustomerRequest,
    CreateSubscriptionRequest,
    CustomerPaymentProviderRequest,
    IncrementLedgerEntryRequest,
    IngestEventRequest,
    UpdateCustomerRequest,
    VoidLedgerEntryRequest,
)
from orb_billing.models.ledger import IncrementLedgerEntry, VoidInitiatedLedgerEntry

pytestmark = pytest.mark.skipif(
    not os.environ.get("ORB_API_KEY"),
    reason="Requires an Orb test-mode API key. Set ORB_API_KEY to run",
)


async def _create_customer(client, prefix, index):
    return await client.create_customer(
        CreateCustomerRequest(
            name=f"{prefix}-{index}",
            email=f"orb-testing-{index}@example.com",
            payment_provider=CustomerPaymentProviderRequest(
                kind=PaymentProvider.STRIPE, id=f"cus_fake_{index}"
            ),
        )
    )


class TestCustomers:
    @pytest.mark.asyncio
    async def test_customer_lifecycle(self, orb_client, test_prefix):
        nonce = secrets.randbelow(2**32)
        external_id = f"{test_prefix}-{nonce}"

        customer = await orb_client.create_customer(
            CreateCustomerRequest(
                name=external_id,
                email="orb-testing@example.com",
                external_id=external_id,
                timezone="America/New_York",
                idempotency_key=external_id,
            )
        )
        assert customer.external_id == external_id
        assert customer.timezone == "America/New_York"
        assert customer.balance == "0.00"
        assert customer.additional_emails == []

        fetched = await orb_client.get_customer_by_external_id(external_id)
        assert fetched.id == customer.id

        updated = await orb_client.update_customer(
            customer.id, UpdateCustomerRequest(email="orb-testing+1@example.com")
        )
        assert updated.email == "orb-testing+1@example.com"

        ids = [c.id async for c in orb_client.list_customers(ListParams.DEFAULT.page_size(1))]
        assert customer.id in ids

        await orb_client.delete_customer(customer.id)

    @pytest.mark.asyncio
    async def test_credit_ledger(self, orb_client, test_prefix):
        customer = await _create_customer(orb_client, test_prefix, 0)

        entry = await orb_client.create_ledger_entry(
            customer.id, IncrementLedgerEntryRequest(amount=Decimal(42), description="Test credit")
        )
        assert isinstance(entry, IncrementLedgerEntry)
        assert entry.customer.id == customer.id

        blocks = await orb_client.get_customer_credit_balance(
            customer.id, ListParams.DEFAULT.page_size(1)
        ).collect()
        assert blocks[0].balance == entry.amount

        voided = await orb_client.create_ledger_entry(
            customer.id,
            VoidLedgerEntryRequest(
                amount=entry.amount, block_id=entry.credit_block.id, void_reason=VoidReason.REFUND
            ),
        )
        assert isinstance(voided, VoidInitiatedLedgerEntry)


class TestEvents:
    @pytest.mark.asyncio
    async def test_ingest_reports_duplicates(self, orb_client, test_prefix):
        customer = await _create_customer(orb_client, test_prefix, 1)
        nonce = secrets.randbelow(2**32)
        # Tomorrow keeps events inside the account's grace period
        tomorrow = datetime.now(UTC).replace(minute=0, second=0, microsecond=0) + timedelta(days=1)
        events = [
            IngestEventRequest(
                customer_id=CustomerId.orb(customer.id),
                idempotency_key=f"event-{nonce}-{i}",
                event_name="test",
                timestamp=tomorrow + timedelta(hours=i),
            )
            for i in range(2)
        ]

        first = await orb_client.ingest_events(IngestionMode.DEBUG, events)
        assert sorted(first.debug.ingested) == [e.idempotency_key for e in events]
        assert first.debug.duplicate == []

        second = await orb_client.ingest_events(IngestionMode.DEBUG, events[:1])
        assert second.debug.duplicate == [events[0].idempotency_key]


class TestSubscriptions:
    """Subscriptions to the account's `test` plan."""

    @pytest.mark.asyncio
    async def test_subscription_lifecycle(self, orb_client, test_prefix):
        nonce = secrets.randbelow(2**32)
        customers = []
        subscriptions = []

        for i in range(3):
            customer = await _create_customer(orb_client, test_prefix, i)
            key = f"test-subscription-{nonce}-{i}"

            subscription = await orb_client.create_subscription(
                CreateSubscriptionRequest(
                    customer_id=CustomerId.orb(customer.id),
                    plan_id=PlanId.external("test"),
                    net_terms=3,
                    auto_collection=True,
                    idempotency_key=key,
                )
            )
            assert subscription.customer.id == customer.id
            assert subscription.plan.external_id == "test"
            assert subscription.plan.metadata.get("purpose") == "test"
            assert subscription.net_terms == 3
            assert subscription.auto_collection is True

            # Reusing the key with a different body is a conflict
            with pytest.raises(ApiError) as exc_info:
                await orb_client.create_subscription(
                    CreateSubscriptionRequest(
                        customer_id=CustomerId.orb(customer.id),
                        plan_id=PlanId.external("test"),
                        net_terms=11,
                        auto_collection=False,
                        idempotency_key=key,
                    )
                )
            assert exc_info.value.status_code == 409

            assert await orb_client.get_subscription(subscription.id) == subscription

            customers.append(customer)
            subscriptions.append(subscription)

        # Listing is most recent first; earlier runs may leave subscriptions behind
        first_created = subscriptions[0].created_at
        listed = [
            sub
            async for sub in orb_client.list_subscriptions()
            if sub.plan.external_id == "test" and sub.created_at >= first_created
        ]
        assert list(reversed(listed)) == subscriptions

        by_customer = await orb_client.list_subscriptions(
            SubscriptionListParams.DEFAULT.customer_id(CustomerId.orb(customers[0].id))
        ).collect()
        assert by_customer == [subscriptions[0]]


class TestErrors:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("lookup", ["get_customer", "get_customer_by_external_id"])
    async def test_missing_customer_is_404(self, orb_client, lookup):
        with pytest.raises(ApiError) as exc_info:
            await getattr(orb_client, lookup)("$NOEXIST$")
        assert exc_info.value.status_code == 404
