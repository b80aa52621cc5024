"""Alert models."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, ClassVar

from ..core.config import ListParams
from ..core.enums import AlertType
from .common import OrbModel, Quantity, RequestModel


class AlertThreshold(OrbModel):
    value: Quantity


class AlertThresholdRequest(RequestModel):
    value: Quantity


class AlertSubscription(OrbModel):
    id: str


class Alert(OrbModel):
    """An Orb alert."""

    id: str
    type: AlertType | str
    enabled: bool
    thresholds: list[AlertThreshold] | None = None
    currency: str | None = None
    subscription: AlertSubscription | None = None
    created_at: datetime | None = None


class CreateSubscriptionAlertRequest(RequestModel):
    type: AlertType
    thresholds: list[AlertThresholdRequest] | None = None


class UpdateAlertRequest(RequestModel):
    """Replaces the thresholds of an alert."""

    thresholds: list[AlertThresholdRequest] | None = None


@dataclass(frozen=True)
class AlertListParams:
    """Parameters for ``list_alerts``."""

    DEFAULT: ClassVar[AlertListParams]

    inner: ListParams = ListParams.DEFAULT
    subscription_id_filter: str | None = None

    def page_size(self, page_size: int) -> AlertListParams:
        return replace(self, inner=self.inner.page_size(page_size))

    def subscription_id(self, subscription_id: str) -> AlertListParams:
        return replace(self, subscription_id_filter=subscription_id)

    def query_pairs(self) -> list[tuple[str, Any]]:
        return [("subscription_id", self.subscription_id_filter)]


AlertListParams.DEFAULT = AlertListParams()
