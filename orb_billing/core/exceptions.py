"""Custom exception hierarchy.

Every failure surfaced by the client is an ``OrbError``. The subclasses form a
closed taxonomy so callers can branch on the kind of failure:

    - TransportError: the request never produced an HTTP response
    - ApiError: the server answered with a non-2xx status
    - RateLimitError: an ApiError for HTTP 429
    - DeserializeError: a response body did not match the expected schema
    - UnexpectedResponseError: a payload was internally inconsistent
"""

from __future__ import annotations

from typing import Any


class OrbError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigError(OrbError):
    """Client configuration is missing or invalid."""

    pass


class TransportError(OrbError):
    """Network or connection failure below the HTTP layer."""

    def __init__(self, message: str, *, method: str | None = None, url: str | None = None) -> None:
        super().__init__(message)
        self.method = method
        self.url = url


class ApiError(OrbError):
    """Well-formed non-2xx response from the Orb API."""

    def __init__(
        self,
        message: str,
        status_code: int,
        detail: str | None = None,
        *,
        error_type: str | None = None,
        validation_errors: list[Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.detail = detail
        self.error_type = error_type
        self.validation_errors = validation_errors or []

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status_code} {self.message}: {self.detail}"
        return f"{self.status_code} {self.message}"


class RateLimitError(ApiError):
    """Orb API rate limit exceeded."""

    def __init__(
        self,
        message: str,
        detail: str | None = None,
        *,
        retry_after: float | None = None,
        error_type: str | None = None,
    ) -> None:
        super().__init__(message, 429, detail, error_type=error_type)
        self.retry_after = retry_after


class DeserializeError(OrbError):
    """Response body did not match the expected schema.

    Raised for 2xx responses that fail to decode. Indicates a client bug or an
    unannounced server-side schema change rather than a user error.
    """

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class UnexpectedResponseError(OrbError):
    """Response payload was internally inconsistent."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"unexpected response shape: {detail}")
        self.detail = detail


def is_transient(error: BaseException) -> bool:
    """Return True if ``error`` may succeed when the same request is retried."""
    if isinstance(error, TransportError):
        return True
    if isinstance(error, ApiError):
        return error.status_code == 429 or error.status_code >= 500
    return False
