"""Unit tests for Paginator.

Tests focus on cursor handling, ordering, termination, retry budget and
closed-state behavior.
"""

from __future__ import annotations

import logging

import pytest
from pydantic import BaseModel

from orb_billing.core import ApiError, DeserializeError, RetryPolicy, TransportError
from orb_billing.runtime.pagination import Paginator
from orb_billing.runtime.rest import RequestBuilder, RestRunner

NO_DELAY = RetryPolicy(max_attempts=3, base_delay=0.0, max_delay=0.0)


class Item(BaseModel):
    id: str


def _items(*ids):
    return [{"id": i} for i in ids]


@pytest.fixture
def base_request():
    return (
        RequestBuilder("https://api.test.local/v1", "k")
        .build("GET", ["subscriptions"])
        .query("status", "active")
    )


@pytest.fixture
def make_paginator(mock_transport, base_request):
    def factory(**kwargs):
        kwargs.setdefault("page_size", 2)
        kwargs.setdefault("retry", NO_DELAY)
        return Paginator(
            RestRunner(mock_transport),
            base_request,
            item_type=Item,
            endpoint="test.list",
            **kwargs,
        )

    return factory


def _params(transport, index):
    return transport.execute.call_args_list[index].kwargs["params"]


class TestPaginatorCursor:
    """Test how page requests are built from the base request."""

    @pytest.mark.asyncio
    async def test_first_page_has_limit_and_no_cursor(
        self, make_paginator, mock_transport, response, page_payload
    ):
        mock_transport.execute.return_value = response(200, page_payload(_items("a")))

        await make_paginator(page_size=25).collect()

        assert _params(mock_transport, 0) == [("status", "active"), ("limit", "25")]

    @pytest.mark.asyncio
    async def test_cursor_passed_back_verbatim(
        self, make_paginator, mock_transport, response, page_payload
    ):
        """The next request carries exactly the cursor string the server returned."""
        cursor = "eyJvZmZzZXQiOjJ9+/=="
        mock_transport.execute.side_effect = [
            response(200, page_payload(_items("a"), next_cursor=cursor)),
            response(200, page_payload(_items("b"))),
        ]

        await make_paginator().collect()

        assert _params(mock_transport, 1) == [
            ("status", "active"),
            ("limit", "2"),
            ("cursor", cursor),
        ]

    @pytest.mark.asyncio
    async def test_base_request_not_mutated(
        self, make_paginator, mock_transport, base_request, response, page_payload
    ):
        mock_transport.execute.side_effect = [
            response(200, page_payload(_items("a"), next_cursor="c1")),
            response(200, page_payload(_items("b"))),
        ]

        await make_paginator().collect()

        assert base_request.params == [("status", "active")]

    def test_page_size_must_be_positive(self, make_paginator):
        with pytest.raises(ValueError):
            make_paginator(page_size=0)


class TestPaginatorSequence:
    """Test ordering and termination."""

    @pytest.mark.asyncio
    async def test_items_in_order_across_pages(
        self, make_paginator, mock_transport, response, page_payload
    ):
        mock_transport.execute.side_effect = [
            response(200, page_payload(_items("a", "b"), next_cursor="c1")),
            response(200, page_payload(_items("c", "d"), next_cursor="c2")),
            response(200, page_payload(_items("e"))),
        ]

        items = await make_paginator().collect()

        assert [i.id for i in items] == ["a", "b", "c", "d", "e"]
        assert mock_transport.execute.await_count == 3

    @pytest.mark.asyncio
    async def test_empty_terminal_page_ends_sequence(
        self, make_paginator, mock_transport, response, page_payload
    ):
        """Pages of sizes [1, 1, 0] yield two items in three calls."""
        mock_transport.execute.side_effect = [
            response(200, page_payload(_items("a"), next_cursor="c1")),
            response(200, page_payload(_items("b"), next_cursor="c2")),
            response(200, page_payload([])),
        ]

        paginator = make_paginator(page_size=1)
        items = await paginator.collect()

        assert [i.id for i in items] == ["a", "b"]
        assert mock_transport.execute.await_count == 3
        assert paginator.pages_fetched == 3
        assert paginator.exhausted

    @pytest.mark.asyncio
    async def test_empty_middle_page_with_cursor_is_followed(
        self, make_paginator, mock_transport, response, page_payload
    ):
        """An empty page that still has a cursor does not end the sequence."""
        mock_transport.execute.side_effect = [
            response(200, page_payload(_items("a"), next_cursor="c1")),
            response(200, page_payload([], next_cursor="c2")),
            response(200, page_payload(_items("b"))),
        ]

        paginator = make_paginator(page_size=1)
        items = await paginator.collect()

        assert [i.id for i in items] == ["a", "b"]
        assert mock_transport.execute.await_count == 3
        assert _params(mock_transport, 2)[-1] == ("cursor", "c2")
        assert paginator.exhausted

    @pytest.mark.asyncio
    async def test_no_request_after_terminal_page(
        self, make_paginator, mock_transport, response, page_payload
    ):
        mock_transport.execute.return_value = response(200, page_payload(_items("a")))

        paginator = make_paginator()
        await paginator.collect()
        with pytest.raises(StopAsyncIteration):
            await paginator.__anext__()

        assert mock_transport.execute.await_count == 1

    @pytest.mark.asyncio
    async def test_lazy_until_iterated(self, make_paginator, mock_transport):
        make_paginator()
        assert mock_transport.execute.await_count == 0

    @pytest.mark.asyncio
    async def test_pages_fetched_on_demand(
        self, make_paginator, mock_transport, response, page_payload
    ):
        """The second page is not requested until the first is consumed."""
        mock_transport.execute.side_effect = [
            response(200, page_payload(_items("a", "b"), next_cursor="c1")),
            response(200, page_payload(_items("c"))),
        ]

        paginator = make_paginator()
        assert (await paginator.__anext__()).id == "a"
        assert (await paginator.__anext__()).id == "b"
        assert mock_transport.execute.await_count == 1
        assert paginator.cursor == "c1"

        assert (await paginator.__anext__()).id == "c"
        assert mock_transport.execute.await_count == 2

    @pytest.mark.asyncio
    async def test_accepts_pagination_key(self, make_paginator, mock_transport, response):
        mock_transport.execute.return_value = response(
            200, {"data": _items("a"), "pagination": {"next_cursor": None, "has_more": False}}
        )
        assert [i.id for i in await make_paginator().collect()] == ["a"]


class TestPaginatorRetry:
    """Test the per-page retry budget."""

    @pytest.mark.asyncio
    async def test_transient_failures_within_budget_are_retried(
        self, make_paginator, mock_transport, response, page_payload
    ):
        """K < budget transient failures still yield every item."""
        mock_transport.execute.side_effect = [
            TransportError("reset"),
            response(503, body=b"", reason="Service Unavailable"),
            response(200, page_payload(_items("a"))),
        ]

        items = await make_paginator().collect()

        assert [i.id for i in items] == ["a"]
        assert mock_transport.execute.await_count == 3

    @pytest.mark.asyncio
    async def test_retry_reuses_cursor(
        self, make_paginator, mock_transport, response, page_payload
    ):
        mock_transport.execute.side_effect = [
            response(200, page_payload(_items("a"), next_cursor="c1")),
            response(429, {"title": "Too many requests"}, headers={"Retry-After": "0"}),
            response(200, page_payload(_items("b"))),
        ]

        await make_paginator().collect()

        assert _params(mock_transport, 1) == _params(mock_transport, 2)
        assert ("cursor", "c1") in _params(mock_transport, 2)

    @pytest.mark.asyncio
    async def test_budget_exhausted_raises_last_error(
        self, make_paginator, mock_transport, response
    ):
        """K >= budget transient failures raise after exactly budget attempts."""
        mock_transport.execute.side_effect = [
            response(500, body=b"", reason="Internal Server Error"),
            response(502, body=b"", reason="Bad Gateway"),
            response(503, body=b"", reason="Service Unavailable"),
            response(503, body=b"", reason="Service Unavailable"),
        ]

        paginator = make_paginator()
        with pytest.raises(ApiError) as exc_info:
            await paginator.collect()

        assert exc_info.value.status_code == 503
        assert mock_transport.execute.await_count == 3

    @pytest.mark.asyncio
    async def test_non_transient_error_raised_immediately(
        self, make_paginator, mock_transport, response
    ):
        mock_transport.execute.return_value = response(
            400, {"title": "Invalid cursor", "status": 400}
        )

        with pytest.raises(ApiError) as exc_info:
            await make_paginator().collect()

        assert exc_info.value.status_code == 400
        assert mock_transport.execute.await_count == 1

    @pytest.mark.asyncio
    async def test_deserialize_error_not_retried(self, make_paginator, mock_transport, response):
        mock_transport.execute.return_value = response(200, {"data": [{"name": "no id"}]})

        with pytest.raises(DeserializeError):
            await make_paginator().collect()

        assert mock_transport.execute.await_count == 1

    @pytest.mark.asyncio
    async def test_retry_is_logged(
        self, make_paginator, mock_transport, response, page_payload, caplog
    ):
        mock_transport.execute.side_effect = [
            TransportError("reset"),
            response(200, page_payload(_items("a"))),
        ]

        with caplog.at_level(logging.WARNING, logger="orb_billing.runtime.pagination.telemetry"):
            await make_paginator().collect()

        records = [r for r in caplog.records if r.getMessage() == "page_fetch_retry"]
        assert len(records) == 1
        assert records[0].attempt == 1
        assert records[0].endpoint == "test.list"


class TestPaginatorClosed:
    """Test behavior after an error or aclose()."""

    @pytest.mark.asyncio
    async def test_no_requests_after_error(self, make_paginator, mock_transport, response):
        mock_transport.execute.return_value = response(404, {"title": "Not found"})

        paginator = make_paginator()
        with pytest.raises(ApiError):
            await paginator.__anext__()
        with pytest.raises(StopAsyncIteration):
            await paginator.__anext__()

        assert mock_transport.execute.await_count == 1

    @pytest.mark.asyncio
    async def test_aclose_stops_sequence(
        self, make_paginator, mock_transport, response, page_payload
    ):
        mock_transport.execute.return_value = response(
            200, page_payload(_items("a", "b"), next_cursor="c1")
        )

        paginator = make_paginator()
        assert (await paginator.__anext__()).id == "a"
        await paginator.aclose()

        with pytest.raises(StopAsyncIteration):
            await paginator.__anext__()
        assert mock_transport.execute.await_count == 1

    @pytest.mark.asyncio
    async def test_break_issues_no_further_requests(
        self, make_paginator, mock_transport, response, page_payload
    ):
        mock_transport.execute.return_value = response(
            200, page_payload(_items("a", "b"), next_cursor="c1")
        )

        async for item in make_paginator():
            assert item.id == "a"
            break

        assert mock_transport.execute.await_count == 1


class TestPaginatorReconcile:
    """Test the per-item transform hook."""

    @pytest.mark.asyncio
    async def test_none_filters_item(self, make_paginator, mock_transport, response, page_payload):
        mock_transport.execute.return_value = response(200, page_payload(_items("a", "skip", "b")))

        paginator = make_paginator(reconcile=lambda item: None if item.id == "skip" else item)
        items = await paginator.collect()

        assert [i.id for i in items] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_reconcile_error_closes_sequence(
        self, make_paginator, mock_transport, response, page_payload
    ):
        mock_transport.execute.return_value = response(200, page_payload(_items("a", "bad", "c")))

        def reconcile(item):
            if item.id == "bad":
                raise ValueError("bad item")
            return item

        paginator = make_paginator(reconcile=reconcile)
        assert (await paginator.__anext__()).id == "a"
        with pytest.raises(ValueError):
            await paginator.__anext__()
        with pytest.raises(StopAsyncIteration):
            await paginator.__anext__()
