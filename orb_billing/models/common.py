"""Base models and identifier types shared by all resources."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, PlainSerializer, model_serializer

# Numeric quantities decode exactly as Decimal and are sent as JSON numbers
Quantity = Annotated[
    Decimal,
    PlainSerializer(lambda v: int(v) if v == v.to_integral_value() else float(v), when_used="json"),
]


class OrbModel(BaseModel):
    """Immutable response model. Unknown fields are ignored."""

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, extra="ignore", protected_namespaces=()
    )


class RequestModel(BaseModel):
    """Request body model.

    ``to_body()`` drops unset (None) fields and merges the fields listed in
    ``flatten_fields`` into the top level, which is how identifier unions such
    as ``CustomerId`` are sent.
    """

    flatten_fields: ClassVar[tuple[str, ...]] = ()

    model_config = ConfigDict(frozen=True, populate_by_name=True, protected_namespaces=())

    def to_body(self) -> dict[str, Any]:
        body = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        for name in self.flatten_fields:
            nested = body.pop(name, None)
            if nested:
                body.update(nested)
        return body


class CustomerId(BaseModel):
    """Identifies a customer by Orb ID or by external ID."""

    kind: Literal["orb", "external"]
    value: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def orb(cls, value: str) -> CustomerId:
        return cls(kind="orb", value=value)

    @classmethod
    def external(cls, value: str) -> CustomerId:
        return cls(kind="external", value=value)

    @property
    def param(self) -> str:
        return "customer_id" if self.kind == "orb" else "external_customer_id"

    @model_serializer
    def serialize_id(self) -> dict[str, str]:
        return {self.param: self.value}


class PlanId(BaseModel):
    """Identifies a plan by Orb ID or by external ID."""

    kind: Literal["orb", "external"]
    value: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def orb(cls, value: str) -> PlanId:
        return cls(kind="orb", value=value)

    @classmethod
    def external(cls, value: str) -> PlanId:
        return cls(kind="external", value=value)

    @property
    def param(self) -> str:
        return "plan_id" if self.kind == "orb" else "external_plan_id"

    @model_serializer
    def serialize_id(self) -> dict[str, str]:
        return {self.param: self.value}
