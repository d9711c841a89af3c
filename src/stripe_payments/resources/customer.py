"""
Customers and their payment sources.

For more details see https://stripe.com/docs/api#customers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from ..core.request import RequestDescriptor
from .card import CardParams
from .common import (
    Deleted,
    Discount,
    ListObject,
    ListParams,
    Metadata,
    ShippingDetails,
    decode_metadata,
    optional,
    require_mapping,
)
from .source import Source, decode_source

__all__ = [
    "Customer",
    "CustomerAddressParams",
    "CustomerListParams",
    "CustomerParams",
    "CustomerShippingDetails",
    "CustomerSourceParam",
    "attach_source",
    "create",
    "delete",
    "detach_source",
    "list",
    "retrieve",
    "update",
]

# A source id (``card_...``), a token (``tok_...``) or raw card details.
CustomerSourceParam = Union[str, CardParams]


@dataclass(frozen=True)
class CustomerAddressParams:
    line1: str
    city: Optional[str] = None
    country: Optional[str] = None
    line2: Optional[str] = None
    postal_code: Optional[str] = None
    state: Optional[str] = None


@dataclass(frozen=True)
class CustomerShippingDetails:
    address: CustomerAddressParams
    name: str
    phone: Optional[str] = None


@dataclass(frozen=True)
class CustomerParams:
    """
    Parameters for creating or updating a customer.

    ``None`` leaves a field untouched; ``default_source=""`` clears the
    default source.
    """

    account_balance: Optional[int] = None
    business_vat_id: Optional[str] = None
    coupon: Optional[str] = None
    default_source: Optional[str] = None
    description: Optional[str] = None
    email: Optional[str] = None
    metadata: Optional[Metadata] = None
    shipping: Optional[CustomerShippingDetails] = None
    source: Optional[CustomerSourceParam] = None


@dataclass(frozen=True)
class CustomerListParams(ListParams):
    email: Optional[str] = None


@dataclass(frozen=True)
class _AttachSourceParams:
    source: CustomerSourceParam


@dataclass(frozen=True)
class Customer:
    id: str
    account_balance: int = 0
    business_vat_id: Optional[str] = None
    created: Optional[int] = None
    currency: Optional[str] = None
    default_source: Optional[str] = None
    delinquent: bool = False
    description: Optional[str] = None
    discount: Optional[Discount] = None
    email: Optional[str] = None
    livemode: bool = False
    metadata: Metadata = field(default_factory=dict)
    shipping: Optional[ShippingDetails] = None
    sources: ListObject[Source] = field(default_factory=ListObject)

    @classmethod
    def from_response(cls, payload: Any) -> "Customer":
        payload = require_mapping(payload, "customer")
        sources = optional(payload, "sources", ListObject.of(decode_source))
        return cls(
            id=payload["id"],
            account_balance=int(payload.get("account_balance") or 0),
            business_vat_id=payload.get("business_vat_id"),
            created=payload.get("created"),
            currency=payload.get("currency"),
            default_source=payload.get("default_source"),
            delinquent=bool(payload.get("delinquent", False)),
            description=payload.get("description"),
            discount=optional(payload, "discount", Discount.from_response),
            email=payload.get("email"),
            livemode=bool(payload.get("livemode", False)),
            metadata=decode_metadata(payload),
            shipping=optional(payload, "shipping", ShippingDetails.from_response),
            sources=sources if sources is not None else ListObject(),
        )


def create(params: CustomerParams) -> RequestDescriptor[Customer]:
    """
    Creates a new customer.

    For more details see https://stripe.com/docs/api#create_customer.
    """
    return RequestDescriptor.post("/customers", Customer.from_response, params)


def retrieve(customer_id: str) -> RequestDescriptor[Customer]:
    """
    Retrieves the details of a customer.

    For more details see https://stripe.com/docs/api#retrieve_customer.
    """
    return RequestDescriptor.get(f"/customers/{customer_id}", Customer.from_response)


def update(customer_id: str, params: CustomerParams) -> RequestDescriptor[Customer]:
    """
    Updates a customer's properties.

    For more details see https://stripe.com/docs/api#update_customer.
    """
    return RequestDescriptor.post(f"/customers/{customer_id}", Customer.from_response, params)


def delete(customer_id: str) -> RequestDescriptor[Deleted]:
    """
    Deletes a customer.

    For more details see https://stripe.com/docs/api#delete_customer.
    """
    return RequestDescriptor.delete(f"/customers/{customer_id}", Deleted.from_response)


def list(params: Optional[CustomerListParams] = None) -> RequestDescriptor[ListObject[Customer]]:
    """
    List customers.

    For more details see https://stripe.com/docs/api#list_customers.
    """
    return RequestDescriptor.get("/customers", ListObject.of(Customer.from_response), params)


def attach_source(customer_id: str, source: CustomerSourceParam) -> RequestDescriptor[Source]:
    return RequestDescriptor.post(
        f"/customers/{customer_id}/sources",
        decode_source,
        _AttachSourceParams(source=source),
    )


def detach_source(customer_id: str, source_id: str) -> RequestDescriptor[Deleted]:
    return RequestDescriptor.delete(
        f"/customers/{customer_id}/sources/{source_id}", Deleted.from_response
    )
