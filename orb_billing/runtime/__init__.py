"""Runtime components: REST execution and pagination."""

from .pagination import Page, PaginationMetadata, Paginator, reconcile_subscription
from .rest import HTTPClient, HTTPResponse, Request, RequestBuilder, RestRunner, Transport

__all__ = [
    "HTTPClient",
    "HTTPResponse",
    "Page",
    "PaginationMetadata",
    "Paginator",
    "Request",
    "RequestBuilder",
    "RestRunner",
    "Transport",
    "reconcile_subscription",
]
