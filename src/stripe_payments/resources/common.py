"""
Shapes shared by several Stripe resources.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, TypeVar

__all__ = [
    "Address",
    "Coupon",
    "Deleted",
    "Discount",
    "ListObject",
    "ListParams",
    "Metadata",
    "RangeQuery",
    "ShippingDetails",
    "decode_metadata",
    "optional",
    "require_mapping",
]

T = TypeVar("T")

Metadata = Dict[str, str]


def require_mapping(payload: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise TypeError(f"{what} must be a JSON object, got {type(payload).__name__}")
    return payload


def optional(payload: Mapping[str, Any], key: str, decoder: Callable[[Any], T]) -> Optional[T]:
    value = payload.get(key)
    if value is None:
        return None
    return decoder(value)


def decode_metadata(payload: Mapping[str, Any]) -> Metadata:
    return dict(require_mapping(payload.get("metadata") or {}, "metadata"))


@dataclass(frozen=True)
class RangeQuery:
    """Range filter such as ``created[gte]=...&created[lt]=...``."""

    gt: Optional[int] = None
    gte: Optional[int] = None
    lt: Optional[int] = None
    lte: Optional[int] = None


@dataclass(frozen=True)
class ListParams:
    """Cursor parameters accepted by every list endpoint."""

    created: Optional[RangeQuery] = None
    ending_before: Optional[str] = None
    limit: Optional[int] = None
    starting_after: Optional[str] = None


@dataclass(frozen=True)
class Address:
    line1: str
    city: Optional[str] = None
    country: Optional[str] = None
    line2: Optional[str] = None
    postal_code: Optional[str] = None
    state: Optional[str] = None

    @classmethod
    def from_response(cls, payload: Any) -> "Address":
        payload = require_mapping(payload, "address")
        return cls(
            line1=payload["line1"],
            city=payload.get("city"),
            country=payload.get("country"),
            line2=payload.get("line2"),
            postal_code=payload.get("postal_code"),
            state=payload.get("state"),
        )


@dataclass(frozen=True)
class ShippingDetails:
    address: Address
    name: str
    carrier: Optional[str] = None
    phone: Optional[str] = None
    tracking_number: Optional[str] = None

    @classmethod
    def from_response(cls, payload: Any) -> "ShippingDetails":
        payload = require_mapping(payload, "shipping")
        return cls(
            address=Address.from_response(payload["address"]),
            name=payload["name"],
            carrier=payload.get("carrier"),
            phone=payload.get("phone"),
            tracking_number=payload.get("tracking_number"),
        )


@dataclass(frozen=True)
class Coupon:
    id: str
    duration: Optional[str] = None
    amount_off: Optional[int] = None
    percent_off: Optional[float] = None
    currency: Optional[str] = None
    valid: bool = True

    @classmethod
    def from_response(cls, payload: Any) -> "Coupon":
        payload = require_mapping(payload, "coupon")
        return cls(
            id=payload["id"],
            duration=payload.get("duration"),
            amount_off=payload.get("amount_off"),
            percent_off=payload.get("percent_off"),
            currency=payload.get("currency"),
            valid=bool(payload.get("valid", True)),
        )


@dataclass(frozen=True)
class Discount:
    coupon: Coupon
    customer: Optional[str] = None
    start: Optional[int] = None
    end: Optional[int] = None
    subscription: Optional[str] = None

    @classmethod
    def from_response(cls, payload: Any) -> "Discount":
        payload = require_mapping(payload, "discount")
        return cls(
            coupon=Coupon.from_response(payload["coupon"]),
            customer=payload.get("customer"),
            start=payload.get("start"),
            end=payload.get("end"),
            subscription=payload.get("subscription"),
        )


@dataclass(frozen=True)
class Deleted:
    """Returned by endpoints that delete an object."""

    id: str
    deleted: bool

    @classmethod
    def from_response(cls, payload: Any) -> "Deleted":
        payload = require_mapping(payload, "deleted object")
        return cls(id=payload["id"], deleted=bool(payload["deleted"]))


@dataclass(frozen=True)
class ListObject(Generic[T]):
    """One page of a list endpoint."""

    data: List[T] = field(default_factory=list)
    has_more: bool = False
    total_count: Optional[int] = None
    url: Optional[str] = None

    @classmethod
    def of(cls, item_decoder: Callable[[Any], T]) -> Callable[[Any], "ListObject[T]"]:
        """Return a decoder for a page whose items decode with ``item_decoder``."""

        def decode(payload: Any) -> "ListObject[T]":
            payload = require_mapping(payload, "list")
            items = payload["data"]
            if not isinstance(items, list):
                raise TypeError(f"list data must be an array, got {type(items).__name__}")
            return cls(
                data=[item_decoder(item) for item in items],
                has_more=bool(payload.get("has_more", False)),
                total_count=payload.get("total_count"),
                url=payload.get("url"),
            )

        return decode
