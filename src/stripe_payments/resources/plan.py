"""
Subscription plans.

For more details see https://stripe.com/docs/api#plans.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..core.request import RequestDescriptor
from .common import (
    Deleted,
    ListObject,
    ListParams,
    Metadata,
    decode_metadata,
    require_mapping,
)

__all__ = [
    "Plan",
    "PlanParams",
    "create",
    "delete",
    "list",
    "retrieve",
    "update",
]


@dataclass(frozen=True)
class PlanParams:
    """
    Parameters for creating or updating a plan.

    ``interval`` is one of ``day``, ``week``, ``month`` or ``year``.
    """

    id: Optional[str] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
    interval: Optional[str] = None
    name: Optional[str] = None
    interval_count: Optional[int] = None
    metadata: Optional[Metadata] = None
    statement_descriptor: Optional[str] = None
    trial_period_days: Optional[int] = None


@dataclass(frozen=True)
class Plan:
    id: str
    amount: int
    currency: str
    interval: str
    interval_count: int = 1
    created: Optional[int] = None
    livemode: bool = False
    metadata: Metadata = field(default_factory=dict)
    nickname: Optional[str] = None
    statement_descriptor: Optional[str] = None
    trial_period_days: Optional[int] = None

    @classmethod
    def from_response(cls, payload: Any) -> "Plan":
        payload = require_mapping(payload, "plan")
        return cls(
            id=payload["id"],
            amount=int(payload["amount"]),
            currency=payload["currency"],
            interval=payload["interval"],
            interval_count=int(payload.get("interval_count") or 1),
            created=payload.get("created"),
            livemode=bool(payload.get("livemode", False)),
            metadata=decode_metadata(payload),
            nickname=payload.get("nickname") or payload.get("name"),
            statement_descriptor=payload.get("statement_descriptor"),
            trial_period_days=payload.get("trial_period_days"),
        )


def create(params: PlanParams) -> RequestDescriptor[Plan]:
    """
    Creates a new plan.

    For more details see https://stripe.com/docs/api#create_plan.
    """
    return RequestDescriptor.post("/plans", Plan.from_response, params)


def retrieve(plan_id: str) -> RequestDescriptor[Plan]:
    return RequestDescriptor.get(f"/plans/{plan_id}", Plan.from_response)


def update(plan_id: str, params: PlanParams) -> RequestDescriptor[Plan]:
    return RequestDescriptor.post(f"/plans/{plan_id}", Plan.from_response, params)


def delete(plan_id: str) -> RequestDescriptor[Deleted]:
    return RequestDescriptor.delete(f"/plans/{plan_id}", Deleted.from_response)


def list(params: Optional[ListParams] = None) -> RequestDescriptor[ListObject[Plan]]:
    return RequestDescriptor.get("/plans", ListObject.of(Plan.from_response), params)
