"""
Payment sources attached to customers and charges.

A source is either a card or a bank account; the ``object`` field of the
payload says which.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from .card import Card
from .common import Metadata, decode_metadata, require_mapping

__all__ = ["BankAccount", "Source", "decode_source"]


@dataclass(frozen=True)
class BankAccount:
    """
    A bank account source.

    For more details see https://stripe.com/docs/api#customer_bank_account_object.
    """

    id: str
    last4: str
    account_holder_name: Optional[str] = None
    account_holder_type: Optional[str] = None
    bank_name: Optional[str] = None
    country: Optional[str] = None
    currency: Optional[str] = None
    customer: Optional[str] = None
    default_for_currency: Optional[bool] = None
    fingerprint: Optional[str] = None
    routing_number: Optional[str] = None
    status: Optional[str] = None
    metadata: Metadata = field(default_factory=dict)

    @classmethod
    def from_response(cls, payload: Any) -> "BankAccount":
        payload = require_mapping(payload, "bank account")
        return cls(
            id=payload["id"],
            last4=payload["last4"],
            account_holder_name=payload.get("account_holder_name"),
            account_holder_type=payload.get("account_holder_type"),
            bank_name=payload.get("bank_name"),
            country=payload.get("country"),
            currency=payload.get("currency"),
            customer=payload.get("customer"),
            default_for_currency=payload.get("default_for_currency"),
            fingerprint=payload.get("fingerprint"),
            routing_number=payload.get("routing_number"),
            status=payload.get("status"),
            metadata=decode_metadata(payload),
        )


Source = Union[Card, BankAccount]

_SOURCE_DECODERS = {
    "card": Card.from_response,
    "bank_account": BankAccount.from_response,
}


def decode_source(payload: Any) -> Source:
    payload = require_mapping(payload, "source")
    kind = payload.get("object")
    try:
        decoder = _SOURCE_DECODERS[kind]
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Unsupported source object '{kind}'") from exc
    return decoder(payload)
