"""Customer, credit and cost endpoints."""

from __future__ import annotations

from ..core.config import ListParams
from ..models.costs import CustomerCostBucket, CustomerCostParams, CustomerCosts
from ..models.customers import CreateCustomerRequest, Customer, UpdateCustomerRequest
from ..models.ledger import CustomerCreditBlock, LedgerEntry, LedgerEntryRequest
from ..runtime.pagination import Paginator
from .base import ClientCore

CUSTOMERS = "customers"
EXTERNAL_CUSTOMER_ID = "external_customer_id"


class CustomersMixin(ClientCore):
    def list_customers(self, params: ListParams = ListParams.DEFAULT) -> Paginator[Customer]:
        """List all customers, most recently created first.

        The underlying API call is paginated; pages are fetched as the
        returned iterator is consumed.
        """
        request = self.build_request("GET", CUSTOMERS)
        return self.stream_paginated_request(params, request, Customer, endpoint="customers.list")

    async def create_customer(self, customer: CreateCustomerRequest) -> Customer:
        """Create a customer.

        ``customer.idempotency_key``, when set, is sent as the
        ``Idempotency-Key`` header.
        """
        request = (
            self.build_request("POST", CUSTOMERS)
            .idempotency_key(customer.idempotency_key)
            .json(customer.to_body())
        )
        return await self.send_request(request, Customer)

    async def get_customer(self, customer_id: str) -> Customer:
        request = self.build_request("GET", CUSTOMERS, customer_id)
        return await self.send_request(request, Customer)

    async def get_customer_by_external_id(self, external_id: str) -> Customer:
        request = self.build_request("GET", CUSTOMERS, EXTERNAL_CUSTOMER_ID, external_id)
        return await self.send_request(request, Customer)

    async def update_customer(self, customer_id: str, update: UpdateCustomerRequest) -> Customer:
        request = self.build_request("PUT", CUSTOMERS, customer_id).json(update.to_body())
        return await self.send_request(request, Customer)

    async def update_customer_by_external_id(
        self, external_id: str, update: UpdateCustomerRequest
    ) -> Customer:
        request = self.build_request("PUT", CUSTOMERS, EXTERNAL_CUSTOMER_ID, external_id).json(
            update.to_body()
        )
        return await self.send_request(request, Customer)

    async def delete_customer(self, customer_id: str) -> None:
        """Delete a customer.

        Deletion is processed asynchronously by Orb; subscriptions of the
        customer start listing a deleted placeholder in its place.
        """
        request = self.build_request("DELETE", CUSTOMERS, customer_id)
        await self.send_request_raw(request)

    def get_customer_credit_balance(
        self, customer_id: str, params: ListParams = ListParams.DEFAULT
    ) -> Paginator[CustomerCreditBlock]:
        """List the unexpired credit blocks of a customer with their balances."""
        request = self.build_request("GET", CUSTOMERS, customer_id, "credits")
        return self.stream_paginated_request(
            params, request, CustomerCreditBlock, endpoint="customers.credits"
        )

    def get_customer_credit_balance_by_external_id(
        self, external_id: str, params: ListParams = ListParams.DEFAULT
    ) -> Paginator[CustomerCreditBlock]:
        request = self.build_request("GET", CUSTOMERS, EXTERNAL_CUSTOMER_ID, external_id, "credits")
        return self.stream_paginated_request(
            params, request, CustomerCreditBlock, endpoint="customers.credits"
        )

    def list_ledger_entries(
        self, customer_id: str, params: ListParams = ListParams.DEFAULT
    ) -> Paginator[LedgerEntry]:
        """List the credit ledger of a customer, newest entry first."""
        request = self.build_request("GET", CUSTOMERS, customer_id, "credits", "ledger")
        return self.stream_paginated_request(
            params, request, LedgerEntry, endpoint="customers.credits.ledger"
        )

    async def create_ledger_entry(self, customer_id: str, entry: LedgerEntryRequest) -> LedgerEntry:
        """Add, deduct or void credits for a customer.

        Args:
            customer_id: Orb ID of the customer
            entry: An increment, decrement or void request

        Returns:
            The ledger entry recorded by Orb
        """
        request = self.build_request(
            "POST", CUSTOMERS, customer_id, "credits", "ledger_entry"
        ).json(entry.to_body())
        return await self.send_request(request, LedgerEntry)

    async def get_customer_costs(
        self, customer_id: str, params: CustomerCostParams = CustomerCostParams.DEFAULT
    ) -> list[CustomerCostBucket]:
        request = self.build_request("GET", CUSTOMERS, customer_id, "costs").query_pairs(
            params.query_pairs()
        )
        costs: CustomerCosts = await self.send_request(request, CustomerCosts)
        return costs.data

    async def get_customer_costs_by_external_id(
        self, external_id: str, params: CustomerCostParams = CustomerCostParams.DEFAULT
    ) -> list[CustomerCostBucket]:
        request = self.build_request(
            "GET", CUSTOMERS, EXTERNAL_CUSTOMER_ID, external_id, "costs"
        ).query_pairs(params.query_pairs())
        costs: CustomerCosts = await self.send_request(request, CustomerCosts)
        return costs.data
