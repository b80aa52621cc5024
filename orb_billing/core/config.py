"""Client configuration and list parameters.

Architecture:
    All configuration values are frozen dataclasses. A ``ClientConfig`` is
    built once and shared read-only by every request the client issues, so
    concurrent calls never need locks. ``ListParams`` uses copy-on-write
    setters: each setter returns a new value, which lets ``ListParams.DEFAULT``
    be a module-level constant shared by all call sites.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import ClassVar

from .exceptions import ConfigError

DEFAULT_BASE_URL = "https://api.withorb.com/v1"
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 500
DEFAULT_TIMEOUT = 60.0

API_KEY_ENV = "ORB_API_KEY"
BASE_URL_ENV = "ORB_BASE_URL"


@dataclass(frozen=True)
class RetryPolicy:
    """Retry budget for transient page-fetch failures.

    Attributes:
        max_attempts: Total attempts per page, including the first one
        base_delay: Delay before the first retry, in seconds
        max_delay: Upper bound for any single delay, in seconds
    """

    max_attempts: int = 3
    base_delay: float = 0.5
    max_delay: float = 30.0

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("RetryPolicy.max_attempts must be at least 1")
        if self.base_delay < 0 or self.max_delay < 0:
            raise ValueError("RetryPolicy delays must not be negative")

    def delay_for(self, attempt: int, retry_after: float | None = None) -> float:
        """Seconds to wait after failed attempt number ``attempt`` (1-based)."""
        if retry_after is not None:
            return min(retry_after, self.max_delay)
        return min(self.base_delay * 2 ** (attempt - 1), self.max_delay)


@dataclass(frozen=True)
class ListParams:
    """Parameters shared by every list operation.

    ``size`` of None means the client's configured default page size.
    """

    DEFAULT: ClassVar[ListParams]

    size: int | None = None

    def page_size(self, page_size: int) -> ListParams:
        """Return a copy with the given page size.

        The size must be positive and is capped at the server maximum of 500.
        """
        if page_size < 1:
            raise ValueError("page_size must be a positive integer")
        return replace(self, size=min(page_size, MAX_PAGE_SIZE))

    def resolve_page_size(self, default: int) -> int:
        return self.size if self.size is not None else default


ListParams.DEFAULT = ListParams()


@dataclass(frozen=True)
class ClientConfig:
    """Immutable client configuration.

    Attributes:
        api_key: Orb API key, sent as a bearer credential
        base_url: API base URL; override for test environments
        default_page_size: Page size used when a list call does not set one
        timeout: Total per-request timeout in seconds
        retry: Retry budget for paginated list calls
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    default_page_size: int = DEFAULT_PAGE_SIZE
    timeout: float = DEFAULT_TIMEOUT
    retry: RetryPolicy = field(default_factory=RetryPolicy)

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ConfigError("api_key must not be empty")
        if not 1 <= self.default_page_size <= MAX_PAGE_SIZE:
            raise ConfigError(f"default_page_size must be between 1 and {MAX_PAGE_SIZE}")
        # Normalize so path joining never produces a double slash
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    def __repr__(self) -> str:
        return (
            f"ClientConfig(api_key='***', base_url={self.base_url!r}, "
            f"default_page_size={self.default_page_size}, timeout={self.timeout}, "
            f"retry={self.retry!r})"
        )

    @classmethod
    def from_env(cls) -> ClientConfig:
        """Create config from ``ORB_API_KEY`` and optional ``ORB_BASE_URL``."""
        api_key = os.environ.get(API_KEY_ENV)
        if not api_key:
            raise ConfigError(f"{API_KEY_ENV} environment variable not set")
        return cls(api_key=api_key, base_url=os.environ.get(BASE_URL_ENV) or DEFAULT_BASE_URL)


class ClientBuilder:
    """Fluent builder for ``ClientConfig``.

    Example:
        >>> config = (ClientBuilder()
        ...     .api_key("secret")
        ...     .base_url("http://localhost:8080/v1")
        ...     .default_page_size(100)
        ...     .build_config())
    """

    def __init__(self) -> None:
        self._api_key: str | None = None
        self._base_url = DEFAULT_BASE_URL
        self._default_page_size = DEFAULT_PAGE_SIZE
        self._timeout = DEFAULT_TIMEOUT
        self._retry = RetryPolicy()

    def api_key(self, api_key: str) -> ClientBuilder:
        self._api_key = api_key
        return self

    def base_url(self, base_url: str) -> ClientBuilder:
        self._base_url = base_url
        return self

    def default_page_size(self, page_size: int) -> ClientBuilder:
        self._default_page_size = page_size
        return self

    def timeout(self, seconds: float) -> ClientBuilder:
        self._timeout = seconds
        return self

    def retry(self, policy: RetryPolicy) -> ClientBuilder:
        self._retry = policy
        return self

    def build_config(self) -> ClientConfig:
        """Build the config, raising ConfigError if no API key was set."""
        if self._api_key is None:
            raise ConfigError("api_key is required")
        return ClientConfig(
            api_key=self._api_key,
            base_url=self._base_url,
            default_page_size=self._default_page_size,
            timeout=self._timeout,
            retry=self._retry,
        )
