"""Customer cost models."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, ClassVar

from ..core.enums import CostViewMode
from .common import OrbModel, Quantity
from .prices import Price


class CustomerCostPriceGroup(OrbModel):
    """Costs of one price split by a grouping key of its matrix dimensions."""

    grouping_key: str
    grouping_value: str | None = None
    secondary_grouping_key: str | None = None
    secondary_grouping_value: str | None = None
    total: str


class CustomerCostPriceBlock(OrbModel):
    price: Price
    subtotal: str
    total: str
    quantity: Quantity | None = None
    price_groups: list[CustomerCostPriceGroup] | None = None


class CustomerCostBucket(OrbModel):
    """Costs over one timeframe, across all of a customer's subscriptions."""

    timeframe_start: datetime
    timeframe_end: datetime
    subtotal: str
    total: str
    per_price_costs: list[CustomerCostPriceBlock]


class CustomerCosts(OrbModel):
    data: list[CustomerCostBucket]


@dataclass(frozen=True)
class CustomerCostParams:
    """Parameters for ``get_customer_costs``.

    Without a timeframe the current billing period is returned. In
    cumulative view mode each bucket includes the costs of all earlier ones.
    """

    DEFAULT: ClassVar[CustomerCostParams]

    timeframe_start: datetime | None = None
    timeframe_end: datetime | None = None
    view_mode_filter: CostViewMode | None = None
    currency_filter: str | None = None

    def timeframe(self, start: datetime | None, end: datetime | None) -> CustomerCostParams:
        return replace(self, timeframe_start=start, timeframe_end=end)

    def view_mode(self, mode: CostViewMode) -> CustomerCostParams:
        return replace(self, view_mode_filter=mode)

    def currency(self, currency: str) -> CustomerCostParams:
        return replace(self, currency_filter=currency)

    def query_pairs(self) -> list[tuple[str, Any]]:
        return [
            ("timeframe_start", self.timeframe_start),
            ("timeframe_end", self.timeframe_end),
            ("view_mode", self.view_mode_filter),
            ("currency", self.currency_filter),
        ]


CustomerCostParams.DEFAULT = CustomerCostParams()
