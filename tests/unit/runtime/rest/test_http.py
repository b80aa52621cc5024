"""Unit tests for HTTPClient.

Tests focus on session management, request forwarding and error mapping.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest
from yarl import URL

from orb_billing.core import TransportError
from orb_billing.runtime.rest import HTTPClient


def _mock_session(status=200, body=b"{}", headers=None, reason="OK"):
    mock_response = AsyncMock()
    mock_response.status = status
    mock_response.reason = reason
    mock_response.headers = headers or {"Content-Type": "application/json"}
    mock_response.read = AsyncMock(return_value=body)
    mock_response.__aenter__ = AsyncMock(return_value=mock_response)
    mock_response.__aexit__ = AsyncMock(return_value=None)

    mock_session = MagicMock()
    mock_session.closed = False  # session property checks this
    mock_session.request = MagicMock(return_value=mock_response)
    return mock_session


class TestHTTPClientSessionManagement:
    """Test HTTPClient session management."""

    def test_init(self):
        client = HTTPClient(timeout=10.0)
        assert client.timeout.total == 10.0
        assert client._session is None

    @pytest.mark.asyncio
    async def test_session_property_creates_session(self):
        """Test session property creates session lazily."""
        client = HTTPClient()
        session = client.session
        assert isinstance(session, aiohttp.ClientSession)
        assert client._session is session
        await client.close()

    @pytest.mark.asyncio
    async def test_session_property_recreates_closed_session(self):
        client = HTTPClient()
        session1 = client.session
        await session1.close()

        session2 = client.session
        assert session1 is not session2
        assert not session2.closed
        await client.close()

    @pytest.mark.asyncio
    async def test_close_idempotent(self):
        """Test close() can be called multiple times."""
        client = HTTPClient()
        await client.close()
        await client.close()

    @pytest.mark.asyncio
    async def test_context_manager(self):
        async with HTTPClient() as client:
            session = client.session
        assert session.closed


class TestHTTPClientExecute:
    """Test request forwarding and response capture."""

    @pytest.mark.asyncio
    async def test_execute_forwards_request(self):
        client = HTTPClient()
        client._session = _mock_session(body=b'{"id": "cus_1"}')

        response = await client.execute(
            "POST",
            "https://api.withorb.com/v1/customers/a%2Fb",
            headers={"Authorization": "Bearer k"},
            params=[("status[]", "issued"), ("status[]", "paid")],
            json_body={"name": "Acme"},
        )

        assert response.status == 200
        assert response.body == b'{"id": "cus_1"}'
        assert response.ok

        call = client._session.request.call_args
        method, url = call.args
        assert method == "POST"
        assert isinstance(url, URL)
        # Pre-encoded path is not quoted a second time
        assert str(url) == "https://api.withorb.com/v1/customers/a%2Fb"
        assert call.kwargs["params"] == [("status[]", "issued"), ("status[]", "paid")]
        assert call.kwargs["headers"] == {"Authorization": "Bearer k"}
        assert call.kwargs["json"] == {"name": "Acme"}

    @pytest.mark.asyncio
    async def test_execute_returns_error_statuses(self):
        """Non-2xx statuses are returned, not raised."""
        client = HTTPClient()
        client._session = _mock_session(
            status=429, body=b"slow down", headers={"Retry-After": "3"}, reason="Too Many Requests"
        )

        response = await client.execute("GET", "https://api.withorb.com/v1/plans")

        assert response.status == 429
        assert not response.ok
        assert response.headers["Retry-After"] == "3"
        assert response.reason == "Too Many Requests"
        assert response.text() == "slow down"

    @pytest.mark.asyncio
    async def test_client_error_becomes_transport_error(self):
        client = HTTPClient()
        session = _mock_session()
        session.request = MagicMock(side_effect=aiohttp.ClientConnectionError("reset"))
        client._session = session

        with pytest.raises(TransportError) as exc_info:
            await client.execute("GET", "https://api.withorb.com/v1/plans")

        assert exc_info.value.method == "GET"
        assert isinstance(exc_info.value.__cause__, aiohttp.ClientConnectionError)

    @pytest.mark.asyncio
    async def test_timeout_becomes_transport_error(self):
        client = HTTPClient(timeout=1.5)
        session = _mock_session()
        session.request = MagicMock(side_effect=asyncio.TimeoutError())
        client._session = session

        with pytest.raises(TransportError, match="timed out"):
            await client.execute("GET", "https://api.withorb.com/v1/plans")
