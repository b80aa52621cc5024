"""Client facade for the Orb API.

Architecture:
    ``Client`` is composed from one mixin per resource family. Each mixin
    derives from ``ClientCore``, which owns the request builder, the runner
    and the transport, so every endpoint method is a short sequence of
    build path, attach query/body/headers, then send or paginate.

Design Decisions:
    - Single-object calls are coroutines; list calls return a ``Paginator``
      synchronously and perform no I/O until iterated
    - Transport injection allows testing without a network
    - Context manager pattern ensures the aiohttp session is closed

See Also:
    - Paginator: Lazy cursor pagination used by every list call
    - ClientConfig: Immutable configuration shared by all calls
"""

from __future__ import annotations

from ..core.config import ClientConfig
from ..runtime.rest import Transport
from .alerts import AlertsMixin
from .catalog import CouponsMixin, PlansMixin, PricesMixin
from .customers import CustomersMixin
from .events import BackfillsMixin, EventsMixin
from .invoices import InvoicesMixin
from .subscriptions import SubscriptionsMixin


class Client(
    CustomersMixin,
    SubscriptionsMixin,
    InvoicesMixin,
    PlansMixin,
    PricesMixin,
    CouponsMixin,
    EventsMixin,
    BackfillsMixin,
    AlertsMixin,
):
    """Asynchronous client for the Orb billing API.

    Example:
        >>> async with Client(ClientConfig.from_env()) as client:
        ...     customer = await client.get_customer("cus_123")
        ...
        ...     async for subscription in client.list_subscriptions():
        ...         print(subscription.id, subscription.customer.name)
    """

    def __init__(self, config: ClientConfig, *, transport: Transport | None = None) -> None:
        super().__init__(config, transport=transport)

    @classmethod
    def from_env(cls, *, transport: Transport | None = None) -> Client:
        """Create a client configured from ``ORB_API_KEY`` and ``ORB_BASE_URL``."""
        return cls(ClientConfig.from_env(), transport=transport)

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
