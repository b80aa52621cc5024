"""REST request runner: executes a request and decodes the response."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from ...core.exceptions import ApiError, DeserializeError, RateLimitError
from .request import Request
from .transport import HTTPResponse, Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Bodies quoted in error messages are truncated to keep logs readable
_BODY_EXCERPT = 500


class ErrorEnvelope(BaseModel):
    """Error body returned by the Orb API for non-2xx responses."""

    title: str
    status: int | None = None
    type: str | None = None
    detail: str | None = None
    validation_errors: list[Any] | None = None

    model_config = ConfigDict(extra="ignore")


def _parse_retry_after(response: HTTPResponse) -> float | None:
    for name, value in response.headers.items():
        if name.lower() == "retry-after":
            try:
                return max(float(value), 0.0)
            except ValueError:
                return None
    return None


def api_error_from_response(response: HTTPResponse) -> ApiError:
    """Convert a non-2xx response into an ``ApiError``.

    Falls back to the HTTP reason phrase and the raw body when the body is
    not an Orb error envelope.
    """
    try:
        envelope = ErrorEnvelope.model_validate_json(response.body)
    except ValidationError:
        message = response.reason or "HTTP error"
        detail = response.text()[:_BODY_EXCERPT] or None
        error_type = None
        validation_errors = None
    else:
        message = envelope.title
        detail = envelope.detail
        error_type = envelope.type
        validation_errors = envelope.validation_errors

    if response.status == 429:
        return RateLimitError(
            message,
            detail,
            retry_after=_parse_retry_after(response),
            error_type=error_type,
        )
    return ApiError(
        message,
        response.status,
        detail,
        error_type=error_type,
        validation_errors=validation_errors,
    )


def decode_response(response: HTTPResponse, adapter: TypeAdapter[T]) -> T:
    """Decode a 2xx response body with ``adapter``.

    Raises:
        ApiError: If the response status is not 2xx
        DeserializeError: If the body does not match the expected schema
    """
    if not response.ok:
        raise api_error_from_response(response)
    body = response.body if response.body.strip() else b"null"
    try:
        return adapter.validate_json(body)
    except ValidationError as e:
        raise DeserializeError(
            f"failed to decode response body: {e}",
            status_code=response.status,
            body=response.text()[:_BODY_EXCERPT],
        ) from e


class RestRunner:
    """Sends requests through a transport. Never retries."""

    def __init__(self, transport: Transport) -> None:
        self._t = transport

    @property
    def transport(self) -> Transport:
        return self._t

    async def execute(self, request: Request) -> HTTPResponse:
        """Issue exactly one network call for ``request``."""
        logger.debug(
            "request_sent",
            extra={"method": request.method, "url": request.url, "query": request.params},
        )
        response = await self._t.execute(
            request.method,
            request.url,
            headers=request.headers,
            params=request.params,
            json_body=request.body,
        )
        logger.debug(
            "response_received",
            extra={"method": request.method, "url": request.url, "status": response.status},
        )
        return response

    async def send(self, request: Request, response_type: Any) -> Any:
        """Execute ``request`` and decode the body as ``response_type``.

        Args:
            request: Request to send
            response_type: A type or TypeAdapter understood by pydantic

        Returns:
            Decoded response
        """
        adapter = response_type if isinstance(response_type, TypeAdapter) else TypeAdapter(response_type)
        response = await self.execute(request)
        return decode_response(response, adapter)

    async def send_raw(self, request: Request) -> HTTPResponse:
        """Execute ``request`` and return the raw response after the status check."""
        response = await self.execute(request)
        if not response.ok:
            raise api_error_from_response(response)
        return response
