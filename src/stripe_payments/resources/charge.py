"""
Charges and refunds.

For more details see https://stripe.com/docs/api#charges.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Optional

from ..core.request import RequestDescriptor
from .common import (
    ListObject,
    ListParams,
    Metadata,
    ShippingDetails,
    decode_metadata,
    optional,
    require_mapping,
)
from .customer import CustomerAddressParams, CustomerSourceParam
from .source import Source, decode_source

__all__ = [
    "CaptureParams",
    "Charge",
    "ChargeListParams",
    "ChargeParams",
    "ChargeShippingParams",
    "DestinationParams",
    "FraudDetails",
    "FraudReport",
    "Refund",
    "SourceFilter",
    "SourceType",
    "capture",
    "create",
    "list",
    "retrieve",
    "update",
]


@dataclass(frozen=True)
class CaptureParams:
    """
    Parameters for capturing a charge created with ``capture=False``.

    For more details see https://stripe.com/docs/api#charge_capture.
    """

    amount: Optional[int] = None
    application_fee: Optional[int] = None
    receipt_email: Optional[str] = None
    statement_descriptor: Optional[str] = None


@dataclass(frozen=True)
class DestinationParams:
    account: str
    amount: Optional[int] = None


class FraudReport(str, enum.Enum):
    FRAUDULENT = "fraudulent"
    SAFE = "safe"


@dataclass(frozen=True)
class FraudDetails:
    user_report: Optional[FraudReport] = None
    stripe_report: Optional[str] = None


@dataclass(frozen=True)
class ChargeShippingParams:
    address: CustomerAddressParams
    name: str
    carrier: Optional[str] = None
    phone: Optional[str] = None
    tracking_number: Optional[str] = None


@dataclass(frozen=True)
class ChargeParams:
    """
    Parameters for creating or updating a charge.

    Stripe captures immediately when ``capture`` is left unset.
    """

    amount: Optional[int] = None
    currency: Optional[str] = None
    application_fee: Optional[int] = None
    capture: Optional[bool] = None
    description: Optional[str] = None
    destination: Optional[DestinationParams] = None
    fraud_details: Optional[FraudDetails] = None
    transfer_group: Optional[str] = None
    on_behalf_of: Optional[str] = None
    metadata: Optional[Metadata] = None
    receipt_email: Optional[str] = None
    shipping: Optional[ChargeShippingParams] = None
    customer: Optional[str] = None
    source: Optional[CustomerSourceParam] = None
    statement_descriptor: Optional[str] = None


class SourceType(str, enum.Enum):
    ALL = "all"
    ALIPAY_ACCOUNT = "alipay_account"
    BANK_ACCOUNT = "bank_account"
    BITCOIN_RECEIVER = "bitcoin_receiver"
    CARD = "card"


@dataclass(frozen=True)
class SourceFilter:
    object: SourceType

    @classmethod
    def all(cls) -> "SourceFilter":
        return cls(SourceType.ALL)

    @classmethod
    def card(cls) -> "SourceFilter":
        return cls(SourceType.CARD)

    @classmethod
    def bank(cls) -> "SourceFilter":
        return cls(SourceType.BANK_ACCOUNT)


@dataclass(frozen=True)
class ChargeListParams(ListParams):
    customer: Optional[str] = None
    source: Optional[SourceFilter] = None
    transfer_group: Optional[str] = None


@dataclass(frozen=True)
class Refund:
    id: str
    amount: int
    charge: Optional[str] = None
    created: Optional[int] = None
    currency: Optional[str] = None
    reason: Optional[str] = None
    status: Optional[str] = None
    metadata: Metadata = field(default_factory=dict)

    @classmethod
    def from_response(cls, payload: Any) -> "Refund":
        payload = require_mapping(payload, "refund")
        return cls(
            id=payload["id"],
            amount=int(payload["amount"]),
            charge=payload.get("charge"),
            created=payload.get("created"),
            currency=payload.get("currency"),
            reason=payload.get("reason"),
            status=payload.get("status"),
            metadata=decode_metadata(payload),
        )


@dataclass(frozen=True)
class Charge:
    id: str
    amount: int
    currency: str
    amount_refunded: int = 0
    application_fee: Optional[str] = None
    captured: bool = False
    created: Optional[int] = None
    customer: Optional[str] = None
    description: Optional[str] = None
    failure_code: Optional[str] = None
    failure_message: Optional[str] = None
    invoice: Optional[str] = None
    livemode: bool = False
    metadata: Metadata = field(default_factory=dict)
    on_behalf_of: Optional[str] = None
    paid: bool = False
    receipt_email: Optional[str] = None
    refunded: bool = False
    refunds: ListObject[Refund] = field(default_factory=ListObject)
    shipping: Optional[ShippingDetails] = None
    source: Optional[Source] = None
    statement_descriptor: Optional[str] = None
    status: Optional[str] = None
    transfer_group: Optional[str] = None

    @classmethod
    def from_response(cls, payload: Any) -> "Charge":
        payload = require_mapping(payload, "charge")
        refunds = optional(payload, "refunds", ListObject.of(Refund.from_response))
        return cls(
            id=payload["id"],
            amount=int(payload["amount"]),
            currency=payload["currency"],
            amount_refunded=int(payload.get("amount_refunded") or 0),
            application_fee=payload.get("application_fee"),
            captured=bool(payload.get("captured", False)),
            created=payload.get("created"),
            customer=payload.get("customer"),
            description=payload.get("description"),
            failure_code=payload.get("failure_code"),
            failure_message=payload.get("failure_message"),
            invoice=payload.get("invoice"),
            livemode=bool(payload.get("livemode", False)),
            metadata=decode_metadata(payload),
            on_behalf_of=payload.get("on_behalf_of"),
            paid=bool(payload.get("paid", False)),
            receipt_email=payload.get("receipt_email"),
            refunded=bool(payload.get("refunded", False)),
            refunds=refunds if refunds is not None else ListObject(),
            shipping=optional(payload, "shipping", ShippingDetails.from_response),
            source=optional(payload, "source", decode_source),
            statement_descriptor=payload.get("statement_descriptor"),
            status=payload.get("status"),
            transfer_group=payload.get("transfer_group"),
        )


def create(params: ChargeParams) -> RequestDescriptor[Charge]:
    """
    Creates a new charge.

    For more details see https://stripe.com/docs/api#create_charge.
    """
    return RequestDescriptor.post("/charges", Charge.from_response, params)


def retrieve(charge_id: str) -> RequestDescriptor[Charge]:
    """
    Retrieves the details of a charge.

    For more details see https://stripe.com/docs/api#retrieve_charge.
    """
    return RequestDescriptor.get(f"/charges/{charge_id}", Charge.from_response)


def update(charge_id: str, params: ChargeParams) -> RequestDescriptor[Charge]:
    """
    Updates a charge's properties.

    For more details see https://stripe.com/docs/api#update_charge.
    """
    return RequestDescriptor.post(f"/charges/{charge_id}", Charge.from_response, params)


def capture(charge_id: str, params: Optional[CaptureParams] = None) -> RequestDescriptor[Charge]:
    """
    Captures a charge that was created with ``capture=False``.

    For more details see https://stripe.com/docs/api#charge_capture.
    """
    return RequestDescriptor.post(f"/charges/{charge_id}/capture", Charge.from_response, params)


def list(params: Optional[ChargeListParams] = None) -> RequestDescriptor[ListObject[Charge]]:
    """
    List all charges.

    For more details see https://stripe.com/docs/api#list_charges.
    """
    return RequestDescriptor.get("/charges", ListObject.of(Charge.from_response), params)
