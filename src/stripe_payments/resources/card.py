"""
Card parameters and the card resource.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Optional

from .common import Metadata, decode_metadata, optional, require_mapping

__all__ = [
    "Brand",
    "Card",
    "CardParams",
    "Check",
    "Funding",
    "TokenizationMethod",
]


@dataclass(frozen=True, kw_only=True)
class CardParams:
    """
    Raw card details, sent as ``source[object]=card&source[number]=...``.

    Only use this with test keys or when your integration is PCI compliant.
    """

    object: str = "card"
    number: str
    exp_month: str
    exp_year: str
    name: Optional[str] = None
    cvc: Optional[str] = None


class Check(str, enum.Enum):
    PASS = "pass"
    FAIL = "fail"
    UNAVAILABLE = "unavailable"
    UNCHECKED = "unchecked"


class Brand(str, enum.Enum):
    AMERICAN_EXPRESS = "American Express"
    DINERS_CLUB = "Diners Club"
    DISCOVER = "Discover"
    JCB = "JCB"
    MASTERCARD = "MasterCard"
    UNIONPAY = "UnionPay"
    VISA = "Visa"
    UNKNOWN = "Unknown"


class Funding(str, enum.Enum):
    CREDIT = "credit"
    DEBIT = "debit"
    PREPAID = "prepaid"
    UNKNOWN = "unknown"


class TokenizationMethod(str, enum.Enum):
    APPLE_PAY = "apple_pay"
    ANDROID_PAY = "android_pay"


@dataclass(frozen=True)
class Card:
    id: str
    last4: str
    exp_month: int
    exp_year: int
    brand: Brand = Brand.UNKNOWN
    funding: Funding = Funding.UNKNOWN
    country: Optional[str] = None
    fingerprint: Optional[str] = None
    account: Optional[str] = None
    address_city: Optional[str] = None
    address_country: Optional[str] = None
    address_line1: Optional[str] = None
    address_line1_check: Optional[Check] = None
    address_line2: Optional[str] = None
    address_state: Optional[str] = None
    address_zip: Optional[str] = None
    address_zip_check: Optional[Check] = None
    currency: Optional[str] = None
    customer: Optional[str] = None
    cvc_check: Optional[Check] = None
    default_for_currency: Optional[bool] = None
    dynamic_last4: Optional[str] = None
    name: Optional[str] = None
    recipient: Optional[str] = None
    tokenization_method: Optional[TokenizationMethod] = None
    metadata: Metadata = field(default_factory=dict)

    @classmethod
    def from_response(cls, payload: Any) -> "Card":
        payload = require_mapping(payload, "card")
        return cls(
            id=payload["id"],
            last4=payload["last4"],
            exp_month=int(payload["exp_month"]),
            exp_year=int(payload["exp_year"]),
            brand=Brand(payload.get("brand") or Brand.UNKNOWN.value),
            funding=Funding(payload.get("funding") or Funding.UNKNOWN.value),
            country=payload.get("country"),
            fingerprint=payload.get("fingerprint"),
            account=payload.get("account"),
            address_city=payload.get("address_city"),
            address_country=payload.get("address_country"),
            address_line1=payload.get("address_line1"),
            address_line1_check=optional(payload, "address_line1_check", Check),
            address_line2=payload.get("address_line2"),
            address_state=payload.get("address_state"),
            address_zip=payload.get("address_zip"),
            address_zip_check=optional(payload, "address_zip_check", Check),
            currency=payload.get("currency"),
            customer=payload.get("customer"),
            cvc_check=optional(payload, "cvc_check", Check),
            default_for_currency=payload.get("default_for_currency"),
            dynamic_last4=payload.get("dynamic_last4"),
            name=payload.get("name"),
            recipient=payload.get("recipient"),
            tokenization_method=optional(payload, "tokenization_method", TokenizationMethod),
            metadata=decode_metadata(payload),
        )
