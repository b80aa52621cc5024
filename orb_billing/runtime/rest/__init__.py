"""REST runtime abstractions."""

from .http_client import HTTPClient
from .request import IDEMPOTENCY_KEY_HEADER, Request, RequestBuilder
from .runner import ErrorEnvelope, RestRunner, api_error_from_response, decode_response
from .transport import HTTPResponse, Transport

__all__ = [
    "ErrorEnvelope",
    "HTTPClient",
    "HTTPResponse",
    "IDEMPOTENCY_KEY_HEADER",
    "Request",
    "RequestBuilder",
    "RestRunner",
    "Transport",
    "api_error_from_response",
    "decode_response",
]
