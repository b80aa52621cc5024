"""Shared fixtures for integration tests against a live Orb account."""

import pytest
import pytest_asyncio

from orb_billing import Client, ClientConfig, ListParams

TEST_PREFIX = "orb-billing-py-test"


@pytest.fixture
def test_prefix():
    return TEST_PREFIX


@pytest_asyncio.fixture
async def orb_client():
    """Live client with all customers left by earlier test runs deleted."""
    async with Client(ClientConfig.from_env()) as client:
        async for customer in client.list_customers(ListParams.DEFAULT.page_size(500)):
            if customer.name.startswith(TEST_PREFIX):
                await client.delete_customer(customer.id)
        yield client
