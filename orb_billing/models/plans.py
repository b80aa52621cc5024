"""Plan models."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, ClassVar

from pydantic import Field

from ..core.config import ListParams
from .common import OrbModel
from .prices import Price


class PlanPhase(OrbModel):
    id: str
    name: str
    order: int
    description: str | None = None
    duration: int | None = None
    duration_unit: str | None = None


class Plan(OrbModel):
    """An Orb plan."""

    id: str
    external_id: str | None = Field(None, alias="external_plan_id")
    name: str
    description: str | None = None
    status: str | None = None
    currency: str | None = None
    default_invoice_memo: str | None = None
    net_terms: int | None = None
    minimum_amount: str | None = None
    maximum_amount: str | None = None
    prices: list[Price] = Field(default_factory=list)
    plan_phases: list[PlanPhase] | None = None
    created_at: datetime
    metadata: dict[str, str] = Field(default_factory=dict)


@dataclass(frozen=True)
class PlanListParams:
    """Parameters for ``list_plans``."""

    DEFAULT: ClassVar[PlanListParams]

    inner: ListParams = ListParams.DEFAULT
    status_filter: str | None = None

    def page_size(self, page_size: int) -> PlanListParams:
        return replace(self, inner=self.inner.page_size(page_size))

    def status(self, status: str) -> PlanListParams:
        """Filter to plans in ``status`` (active, archived or draft)."""
        return replace(self, status_filter=status)

    def query_pairs(self) -> list[tuple[str, Any]]:
        return [("status", self.status_filter)]


PlanListParams.DEFAULT = PlanListParams()
