"""Invoice endpoints."""

from __future__ import annotations

from ..models.invoices import Invoice, InvoiceListParams, UpcomingInvoice
from ..runtime.pagination import Paginator
from .base import ClientCore

INVOICES = "invoices"


class InvoicesMixin(ClientCore):
    def list_invoices(self, params: InvoiceListParams = InvoiceListParams.DEFAULT) -> Paginator[Invoice]:
        """List invoices as configured by ``params``.

        Only issued, paid and synced invoices are listed unless
        ``params`` sets another status filter.
        """
        request = self.build_request("GET", INVOICES).query_pairs(params.query_pairs())
        return self.stream_paginated_request(params.inner, request, Invoice, endpoint="invoices.list")

    async def get_invoice(self, invoice_id: str) -> Invoice:
        request = self.build_request("GET", INVOICES, invoice_id)
        return await self.send_request(request, Invoice)

    async def void_invoice(self, invoice_id: str) -> Invoice:
        request = self.build_request("POST", INVOICES, invoice_id, "void")
        return await self.send_request(request, Invoice)

    async def fetch_upcoming_invoice(self, subscription_id: str) -> UpcomingInvoice:
        request = self.build_request("GET", INVOICES, "upcoming").query(
            "subscription_id", subscription_id
        )
        return await self.send_request(request, UpcomingInvoice)
