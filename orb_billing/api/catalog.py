"""Plan, price and coupon endpoints."""

from __future__ import annotations

from ..core.config import ListParams
from ..models.coupons import Coupon, CouponListParams
from ..models.plans import Plan, PlanListParams
from ..models.prices import Price
from ..runtime.pagination import Paginator
from .base import ClientCore

PLANS = "plans"
PRICES = "prices"
COUPONS = "coupons"


class PlansMixin(ClientCore):
    def list_plans(self, params: PlanListParams = PlanListParams.DEFAULT) -> Paginator[Plan]:
        request = self.build_request("GET", PLANS).query_pairs(params.query_pairs())
        return self.stream_paginated_request(params.inner, request, Plan, endpoint="plans.list")

    async def get_plan(self, plan_id: str) -> Plan:
        request = self.build_request("GET", PLANS, plan_id)
        return await self.send_request(request, Plan)

    async def get_plan_by_external_id(self, external_id: str) -> Plan:
        request = self.build_request("GET", PLANS, "external_plan_id", external_id)
        return await self.send_request(request, Plan)


class PricesMixin(ClientCore):
    def list_prices(self, params: ListParams = ListParams.DEFAULT) -> Paginator[Price]:
        """List every price, including prices of plans and price overrides."""
        request = self.build_request("GET", PRICES)
        return self.stream_paginated_request(params, request, Price, endpoint="prices.list")

    async def get_price(self, price_id: str) -> Price:
        request = self.build_request("GET", PRICES, price_id)
        return await self.send_request(request, Price)

    async def get_price_by_external_id(self, external_id: str) -> Price:
        request = self.build_request("GET", PRICES, "external_price_id", external_id)
        return await self.send_request(request, Price)


class CouponsMixin(ClientCore):
    def list_coupons(self, params: CouponListParams = CouponListParams.DEFAULT) -> Paginator[Coupon]:
        request = self.build_request("GET", COUPONS).query_pairs(params.query_pairs())
        return self.stream_paginated_request(params.inner, request, Coupon, endpoint="coupons.list")

    async def get_coupon(self, coupon_id: str) -> Coupon:
        request = self.build_request("GET", COUPONS, coupon_id)
        return await self.send_request(request, Coupon)

    async def archive_coupon(self, coupon_id: str) -> Coupon:
        """Archive a coupon so it can no longer be redeemed.

        Subscriptions that already redeemed it are unaffected.
        """
        request = self.build_request("POST", COUPONS, coupon_id, "archive")
        return await self.send_request(request, Coupon)
