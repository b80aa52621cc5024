"""Cursor pagination for Orb list endpoints.

This module turns a cursor-paginated list endpoint into a single lazily
consumed async sequence of typed items.

Architecture:
    The pagination layer consists of:
    - definitions.py: Page envelope and query parameter names
    - paginator.py: Pull-driven iterator with per-page retry
    - reconcile.py: Transforms that resolve union-shaped items
    - telemetry.py: Structured logging

Usage:
    Endpoint code builds a base request and hands it to ``Paginator``
    together with the item type. The paginator adds ``limit`` and ``cursor``
    to a copy of that request for each page.
"""

from __future__ import annotations

from .definitions import CURSOR_PARAM, LIMIT_PARAM, Page, PaginationMetadata
from .paginator import Paginator
from .reconcile import reconcile_subscription

__all__ = [
    "CURSOR_PARAM",
    "LIMIT_PARAM",
    "Page",
    "PaginationMetadata",
    "Paginator",
    "reconcile_subscription",
]
