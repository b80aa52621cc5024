"""Shared fixtures for unit tests.

Payload factories return plain dicts shaped like Orb API responses; the
``response`` factory wraps them in an ``HTTPResponse`` for a mocked transport.
"""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from orb_billing import Client, ClientConfig, RetryPolicy
from orb_billing.runtime.rest import HTTPResponse, Transport

BASE_URL = "https://api.test.local/v1"


def _response(
    status: int = 200,
    payload: Any = None,
    *,
    body: bytes | None = None,
    headers: dict[str, str] | None = None,
    reason: str | None = None,
) -> HTTPResponse:
    if body is None:
        body = b"" if payload is None else json.dumps(payload).encode()
    return HTTPResponse(status=status, body=body, headers=headers or {}, reason=reason)


def _customer(customer_id: str = "cus_1", **overrides: Any) -> dict[str, Any]:
    payload = {
        "id": customer_id,
        "external_customer_id": f"ext_{customer_id}",
        "name": f"Customer {customer_id}",
        "email": f"{customer_id}@example.com",
        "timezone": "UTC",
        "currency": "USD",
        "balance": "0.00",
        "additional_emails": [],
        "auto_collection": True,
        "payment_provider": "stripe_charge",
        "payment_provider_id": "cus_stripe",
        "billing_address": None,
        "shipping_address": None,
        "tax_id": None,
        "metadata": {},
        "created_at": "2024-01-01T00:00:00+00:00",
    }
    payload.update(overrides)
    return payload


def _plan(plan_id: str = "plan_1", **overrides: Any) -> dict[str, Any]:
    payload = {
        "id": plan_id,
        "external_plan_id": f"ext_{plan_id}",
        "name": "Starter",
        "description": "",
        "status": "active",
        "currency": "USD",
        "net_terms": 0,
        "prices": [
            {
                "id": "price_1",
                "name": "API calls",
                "model_type": "unit",
                "unit_config": {"unit_amount": "0.01"},
                "plan_phase_order": None,
            }
        ],
        "created_at": "2024-01-01T00:00:00+00:00",
    }
    payload.update(overrides)
    return payload


def _subscription(
    subscription_id: str = "sub_1", customer: dict[str, Any] | None = None, **overrides: Any
) -> dict[str, Any]:
    payload = {
        "id": subscription_id,
        "customer": customer if customer is not None else _customer(),
        "plan": _plan(),
        "status": "active",
        "start_date": "2024-01-01T00:00:00+00:00",
        "end_date": None,
        "current_billing_period_start_date": "2024-01-01T00:00:00+00:00",
        "current_billing_period_end_date": "2024-02-01T00:00:00+00:00",
        "active_plan_phase_order": None,
        "fixed_fee_quantity_schedule": [
            {
                "price_id": "price_fixed",
                "quantity": 2,
                "start_date": "2024-01-01T00:00:00+00:00",
                "end_date": None,
            }
        ],
        "net_terms": 30,
        "auto_collection": True,
        "default_invoice_memo": None,
        "created_at": "2024-01-01T00:00:00+00:00",
        "redeemed_coupon": None,
        "price_intervals": [],
        "adjustment_intervals": [],
        "invoicing_threshold": None,
    }
    payload.update(overrides)
    return payload


def _page(data: list[Any], next_cursor: str | None = None) -> dict[str, Any]:
    return {
        "data": data,
        "pagination_metadata": {"next_cursor": next_cursor, "has_more": next_cursor is not None},
    }


@pytest.fixture
def response():
    """Factory for ``HTTPResponse`` values."""
    return _response


@pytest.fixture
def customer_payload():
    return _customer


@pytest.fixture
def plan_payload():
    return _plan


@pytest.fixture
def subscription_payload():
    return _subscription


@pytest.fixture
def page_payload():
    return _page


@pytest.fixture
def mock_transport():
    """Transport whose ``execute`` is an AsyncMock; set its return or side effect per test."""
    transport = MagicMock(spec=Transport)
    transport.execute = AsyncMock(return_value=_response(200, {}))
    transport.close = AsyncMock()
    return transport


@pytest.fixture
def config():
    # Zero delays keep retry tests fast
    return ClientConfig(
        api_key="test-key",
        base_url=BASE_URL,
        retry=RetryPolicy(max_attempts=3, base_delay=0.0, max_delay=0.0),
    )


@pytest.fixture
def client(config, mock_transport):
    return Client(config, transport=mock_transport)


def sent_call(transport: MagicMock, index: int = -1) -> dict[str, Any]:
    """Return the arguments of one ``execute`` call as a dict."""
    call = transport.execute.call_args_list[index]
    method, url = call.args
    return {"method": method, "url": url, **call.kwargs}


@pytest.fixture
def sent():
    return sent_call
