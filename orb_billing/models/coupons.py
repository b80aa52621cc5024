"""Coupon and discount models."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, ClassVar

from pydantic import Field

from ..core.config import ListParams
from .common import OrbModel


class Discount(OrbModel):
    """The discount a coupon grants.

    ``discount_type`` is percentage or amount; the matching field is set.
    """

    discount_type: str
    applies_to_price_ids: list[str] = Field(default_factory=list)
    percentage_discount: float | None = None
    amount_discount: str | None = None
    reason: str | None = None


class Coupon(OrbModel):
    """An Orb coupon."""

    id: str
    redemption_code: str
    discount: Discount
    times_redeemed: int
    duration_in_months: int | None = None
    max_redemptions: int | None = None
    archived_at: datetime | None = None


class RedeemedCoupon(OrbModel):
    """A coupon redeemed on a subscription."""

    coupon_id: str
    start_date: datetime
    end_date: datetime | None = None


@dataclass(frozen=True)
class CouponListParams:
    """Parameters for ``list_coupons``.

    Archived coupons are excluded unless ``show_archived`` is set.
    """

    DEFAULT: ClassVar[CouponListParams]

    inner: ListParams = ListParams.DEFAULT
    redemption_code_filter: str | None = None
    show_archived_filter: bool | None = None

    def page_size(self, page_size: int) -> CouponListParams:
        return replace(self, inner=self.inner.page_size(page_size))

    def redemption_code(self, code: str) -> CouponListParams:
        return replace(self, redemption_code_filter=code)

    def show_archived(self, show: bool) -> CouponListParams:
        return replace(self, show_archived_filter=show)

    def query_pairs(self) -> list[tuple[str, Any]]:
        return [
            ("redemption_code", self.redemption_code_filter),
            ("show_archived", self.show_archived_filter),
        ]


CouponListParams.DEFAULT = CouponListParams()
