"""Structured logging for pagination.

This module provides telemetry hooks for paginated list calls, emitting
structured logs with the event name as message and details in ``extra``.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    endpoint: str,
    page_index: int,
    items: int,
    has_next: bool,
    attempts: int,
) -> None:
    """Log a successfully decoded page.

    Args:
        endpoint: Endpoint identifier (e.g. "subscriptions.list")
        page_index: Zero-based index of the page in the sequence
        items: Number of raw items on the page
        has_next: Whether the server returned a next cursor
        attempts: Attempts needed to fetch the page
    """
    logger.debug(
        "page_fetched",
        extra={
            "endpoint": endpoint,
            "page_index": page_index,
            "items": items,
            "has_next": has_next,
            "attempts": attempts,
        },
    )


def log_page_retry(
    *,
    endpoint: str,
    page_index: int,
    attempt: int,
    max_attempts: int,
    delay: float,
    error: BaseException,
) -> None:
    """Log a transient page-fetch failure that will be retried."""
    logger.warning(
        "page_fetch_retry",
        extra={
            "endpoint": endpoint,
            "page_index": page_index,
            "attempt": attempt,
            "max_attempts": max_attempts,
            "delay": delay,
            "error_type": type(error).__name__,
            "error_message": str(error),
        },
    )


def log_page_error(
    *,
    endpoint: str,
    page_index: int,
    attempts: int,
    error: BaseException,
) -> None:
    """Log the failure that terminates a sequence."""
    logger.error(
        "page_fetch_error",
        extra={
            "endpoint": endpoint,
            "page_index": page_index,
            "attempts": attempts,
            "error_type": type(error).__name__,
            "error_message": str(error),
        },
    )


def log_item_filtered(*, endpoint: str, page_index: int) -> None:
    logger.debug("item_filtered", extra={"endpoint": endpoint, "page_index": page_index})


def log_pagination_complete(*, endpoint: str, pages: int, items: int) -> None:
    """Log the clean end of a sequence.

    Args:
        endpoint: Endpoint identifier
        pages: Number of pages fetched
        items: Number of items yielded to the consumer
    """
    logger.debug(
        "pagination_complete",
        extra={"endpoint": endpoint, "pages": pages, "items": items},
    )
