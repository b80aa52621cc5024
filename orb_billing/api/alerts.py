"""Alert endpoints."""

from __future__ import annotations

from ..models.alerts import (
    Alert,
    AlertListParams,
    CreateSubscriptionAlertRequest,
    UpdateAlertRequest,
)
from ..runtime.pagination import Paginator
from .base import ClientCore

ALERTS = "alerts"


class AlertsMixin(ClientCore):
    async def create_subscription_alert(
        self, subscription_id: str, alert: CreateSubscriptionAlertRequest
    ) -> Alert:
        """Create an alert scoped to one subscription."""
        request = self.build_request("POST", ALERTS, "subscription_id", subscription_id).json(
            alert.to_body()
        )
        return await self.send_request(request, Alert)

    async def fetch_alert(self, alert_id: str) -> Alert:
        request = self.build_request("GET", ALERTS, alert_id)
        return await self.send_request(request, Alert)

    def list_alerts(self, params: AlertListParams = AlertListParams.DEFAULT) -> Paginator[Alert]:
        request = self.build_request("GET", ALERTS).query_pairs(params.query_pairs())
        return self.stream_paginated_request(params.inner, request, Alert, endpoint="alerts.list")

    async def enable_alert(self, alert_id: str) -> Alert:
        request = self.build_request("POST", ALERTS, alert_id, "enable")
        return await self.send_request(request, Alert)

    async def disable_alert(self, alert_id: str) -> Alert:
        request = self.build_request("POST", ALERTS, alert_id, "disable")
        return await self.send_request(request, Alert)

    async def update_alert(self, alert_id: str, update: UpdateAlertRequest) -> Alert:
        """Replace the thresholds of an alert."""
        request = self.build_request("PUT", ALERTS, alert_id).json(update.to_body())
        return await self.send_request(request, Alert)
