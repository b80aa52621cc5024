"""Price, price interval and adjustment models."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal, Union

from pydantic import ConfigDict, Discriminator, Field, Tag

from ..core.enums import PriceType
from .common import OrbModel, Quantity, RequestModel


class UnitConfig(OrbModel):
    unit_amount: str
    scaling_factor: Quantity | None = None


class Tier(OrbModel):
    """One tier range. ``last_unit`` of None marks the last tier."""

    first_unit: Quantity
    last_unit: Quantity | None = None
    unit_amount: str


class TieredConfig(OrbModel):
    tiers: list[Tier]


class MatrixValue(OrbModel):
    dimension_values: list[str | None]
    unit_amount: str


class MatrixConfig(OrbModel):
    default_unit_amount: str
    dimensions: list[str | None]
    matrix_values: list[MatrixValue]


class Item(OrbModel):
    id: str
    name: str


class BillableMetric(OrbModel):
    id: str


class _PriceBase(OrbModel):
    id: str
    name: str
    external_price_id: str | None = None
    currency: str | None = None
    price_type: PriceType | str | None = None
    cadence: str | None = None
    plan_phase_order: int | None = None
    fixed_price_quantity: Quantity | None = None
    item: Item | None = None
    billable_metric: BillableMetric | None = None
    created_at: datetime | None = None
    metadata: dict[str, str] = Field(default_factory=dict)


class UnitPrice(_PriceBase):
    """Each unit costs a fixed amount."""

    model_type: Literal["unit"] = "unit"
    unit_config: UnitConfig


class TieredPrice(_PriceBase):
    """The cost of a unit depends on the tier range its quantity falls into."""

    model_type: Literal["tiered"] = "tiered"
    tiered_config: TieredConfig


class MatrixPrice(_PriceBase):
    """The unit amount is looked up by the event's dimension values."""

    model_type: Literal["matrix"] = "matrix"
    matrix_config: MatrixConfig


class OtherPrice(_PriceBase):
    """A pricing model this library has no dedicated type for.

    The full payload is kept; unknown config blocks remain reachable through
    ``model_extra``.
    """

    model_config = ConfigDict(extra="allow")

    model_type: str


_KNOWN_MODELS = frozenset({"unit", "tiered", "matrix"})


def _price_model(value: Any) -> str:
    if isinstance(value, dict):
        model_type = value.get("model_type")
    else:
        model_type = getattr(value, "model_type", None)
    return model_type if model_type in _KNOWN_MODELS else "other"


Price = Annotated[
    Union[
        Annotated[UnitPrice, Tag("unit")],
        Annotated[TieredPrice, Tag("tiered")],
        Annotated[MatrixPrice, Tag("matrix")],
        Annotated[OtherPrice, Tag("other")],
    ],
    Discriminator(_price_model),
]


class FixedFeeQuantityTransition(OrbModel):
    quantity: Quantity
    effective_date: str


class PriceInterval(OrbModel):
    """A price billed on a subscription over a date range."""

    id: str
    price: Price
    start_date: datetime
    end_date: datetime | None = None
    current_billing_period_start_date: datetime | None = None
    current_billing_period_end_date: datetime | None = None
    fixed_fee_quantity_transitions: list[FixedFeeQuantityTransition] | None = None


class TransformPriceFilter(OrbModel):
    """Selects the prices an adjustment applies to.

    ``field`` is one of price_id, price_type or currency and ``operator`` one
    of includes or excludes.
    """

    field: str
    operator: str
    values: list[str]


class Adjustment(OrbModel):
    """An adjustment applied to a subscription.

    ``adjustment_type`` is maximum, minimum, percentage_discount,
    amount_discount or usage_discount. Only the fields of that kind are set.
    """

    id: str | None = None
    adjustment_type: str
    applies_to_price_ids: list[str] = Field(default_factory=list)
    filters: list[TransformPriceFilter] = Field(default_factory=list)
    maximum_amount: str | None = None
    minimum_amount: str | None = None
    percentage_discount: float | None = None
    amount_discount: str | None = None
    usage_discount: float | None = None


class SubscriptionAdjustmentInterval(OrbModel):
    id: str
    start_date: datetime
    end_date: datetime | None = None
    adjustment: Adjustment


class FixedFeeQuantityTransitionRequest(RequestModel):
    quantity: Quantity
    effective_date: str


class AddPriceInterval(RequestModel):
    """A price to start billing on a subscription."""

    start_date: datetime
    end_date: datetime | None = None
    price_id: str | None = None
    external_price_id: str | None = None
    fixed_fee_quantity_transitions: list[FixedFeeQuantityTransitionRequest] | None = None


class EditPriceInterval(RequestModel):
    """Changes to an existing price interval.

    ``fixed_fee_quantity_transitions`` replaces every existing transition on
    the interval.
    """

    price_interval_id: str
    start_date: datetime | None = None
    end_date: datetime | None = None
    fixed_fee_quantity_transitions: list[FixedFeeQuantityTransitionRequest] | None = None


class NewMaximumAdjustment(RequestModel):
    adjustment_type: Literal["maximum"] = "maximum"
    maximum_amount: str
    applies_to_price_ids: list[str] | None = None
    applies_to_all: bool | None = None
    price_type: PriceType | None = None
    currency: str | None = None


class NewMinimumAdjustment(RequestModel):
    adjustment_type: Literal["minimum"] = "minimum"
    minimum_amount: str
    item_id: str
    applies_to_price_ids: list[str] | None = None
    applies_to_all: bool | None = None
    price_type: PriceType | None = None
    currency: str | None = None


class NewPercentageDiscount(RequestModel):
    adjustment_type: Literal["percentage_discount"] = "percentage_discount"
    percentage_discount: float
    applies_to_price_ids: list[str] | None = None
    applies_to_all: bool | None = None
    price_type: PriceType | None = None
    currency: str | None = None


NewAdjustment = Annotated[
    Union[NewMaximumAdjustment, NewMinimumAdjustment, NewPercentageDiscount],
    Field(discriminator="adjustment_type"),
]


class AddAdjustmentInterval(RequestModel):
    start_date: datetime
    end_date: datetime | None = None
    adjustment: NewAdjustment


class EditAdjustmentInterval(RequestModel):
    """Changes to an adjustment interval. An unset end date is left unchanged."""

    adjustment_interval_id: str
    start_date: datetime | None = None
    end_date: datetime | None = None


class QuantityOnlyPriceOverride(RequestModel):
    """Overrides only the quantity of a plan price; no child plan is created."""

    id: str
    fixed_price_quantity: Quantity
