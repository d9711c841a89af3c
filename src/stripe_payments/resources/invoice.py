"""
Invoices and invoice line items.

For more details see https://stripe.com/docs/api#invoices.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..core.request import RequestDescriptor
from .common import (
    Discount,
    ListObject,
    Metadata,
    RangeQuery,
    decode_metadata,
    optional,
    require_mapping,
)
from .plan import Plan

__all__ = [
    "Invoice",
    "InvoiceLineItem",
    "InvoiceLineItemParams",
    "InvoiceListParams",
    "InvoiceParams",
    "InvoiceUpcomingParams",
    "Period",
    "SubscriptionItemParams",
    "create",
    "create_line_item",
    "list",
    "pay",
    "retrieve",
    "upcoming",
    "update",
]


@dataclass(frozen=True)
class InvoiceParams:
    """
    Parameters for creating or updating an invoice.

    For more details see https://stripe.com/docs/api#create_invoice and
    https://stripe.com/docs/api#update_invoice.
    """

    application_fee: Optional[int] = None
    customer: Optional[str] = None
    description: Optional[str] = None
    metadata: Optional[Metadata] = None
    statement_descriptor: Optional[str] = None
    subscription: Optional[str] = None
    tax_percent: Optional[float] = None
    closed: Optional[bool] = None
    forgiven: Optional[bool] = None


@dataclass(frozen=True)
class InvoiceLineItemParams:
    amount: Optional[int] = None
    currency: Optional[str] = None
    customer: Optional[str] = None
    description: Optional[str] = None
    discountable: Optional[bool] = None
    invoice: Optional[str] = None
    metadata: Optional[Metadata] = None
    subscription: Optional[str] = None


@dataclass(frozen=True)
class SubscriptionItemParams:
    id: Optional[str] = None
    deleted: Optional[bool] = None
    metadata: Optional[Metadata] = None
    plan: Optional[str] = None
    quantity: Optional[int] = None


@dataclass(frozen=True, kw_only=True)
class InvoiceUpcomingParams:
    """Preview parameters; ``customer`` is the only required field."""

    customer: str
    coupon: Optional[str] = None
    subscription: Optional[str] = None
    subscription_items: Optional[tuple[SubscriptionItemParams, ...]] = None
    subscription_prorate: Optional[bool] = None
    subscription_proration_date: Optional[int] = None
    subscription_tax_percent: Optional[float] = None
    subscription_trial_end: Optional[int] = None


@dataclass(frozen=True)
class InvoiceListParams:
    customer: Optional[str] = None
    date: Optional[RangeQuery] = None
    ending_before: Optional[str] = None
    limit: Optional[int] = None
    starting_after: Optional[str] = None
    subscription: Optional[str] = None


@dataclass(frozen=True)
class Period:
    start: int
    end: int

    @classmethod
    def from_response(cls, payload: Any) -> "Period":
        payload = require_mapping(payload, "period")
        return cls(start=int(payload["start"]), end=int(payload["end"]))


@dataclass(frozen=True)
class InvoiceLineItem:
    id: str
    amount: int
    currency: str
    period: Optional[Period] = None
    description: Optional[str] = None
    discountable: bool = False
    livemode: bool = False
    metadata: Metadata = field(default_factory=dict)
    plan: Optional[Plan] = None
    proration: bool = False
    quantity: Optional[int] = None
    subscription: Optional[str] = None
    subscription_item: Optional[str] = None
    # ``invoiceitem`` or ``subscription``; missing when creating a line item.
    item_type: str = ""

    @classmethod
    def from_response(cls, payload: Any) -> "InvoiceLineItem":
        payload = require_mapping(payload, "invoice line item")
        return cls(
            id=payload["id"],
            amount=int(payload["amount"]),
            currency=payload["currency"],
            period=optional(payload, "period", Period.from_response),
            description=payload.get("description"),
            discountable=bool(payload.get("discountable", False)),
            livemode=bool(payload.get("livemode", False)),
            metadata=decode_metadata(payload),
            plan=optional(payload, "plan", Plan.from_response),
            proration=bool(payload.get("proration", False)),
            quantity=payload.get("quantity"),
            subscription=payload.get("subscription"),
            subscription_item=payload.get("subscription_item"),
            item_type=payload.get("type") or "",
        )


@dataclass(frozen=True)
class Invoice:
    # ``id`` is absent on upcoming invoices.
    id: Optional[str]
    customer: str
    currency: str
    amount_due: int = 0
    application_fee: Optional[int] = None
    attempt_count: int = 0
    attempted: bool = False
    charge: Optional[str] = None
    closed: bool = False
    date: Optional[int] = None
    description: Optional[str] = None
    discount: Optional[Discount] = None
    ending_balance: Optional[int] = None
    forgiven: bool = False
    lines: ListObject[InvoiceLineItem] = field(default_factory=ListObject)
    livemode: bool = False
    metadata: Metadata = field(default_factory=dict)
    next_payment_attempt: Optional[int] = None
    paid: bool = False
    period_end: Optional[int] = None
    period_start: Optional[int] = None
    receipt_number: Optional[str] = None
    starting_balance: int = 0
    statement_descriptor: Optional[str] = None
    subscription: Optional[str] = None
    subscription_proration_date: Optional[int] = None
    subtotal: int = 0
    tax: Optional[int] = None
    tax_percent: Optional[float] = None
    total: int = 0
    webhooks_delivered_at: Optional[int] = None

    @classmethod
    def from_response(cls, payload: Any) -> "Invoice":
        payload = require_mapping(payload, "invoice")
        lines = optional(payload, "lines", ListObject.of(InvoiceLineItem.from_response))
        return cls(
            id=payload.get("id"),
            customer=payload["customer"],
            currency=payload["currency"],
            amount_due=int(payload.get("amount_due") or 0),
            application_fee=payload.get("application_fee"),
            attempt_count=int(payload.get("attempt_count") or 0),
            attempted=bool(payload.get("attempted", False)),
            charge=payload.get("charge"),
            closed=bool(payload.get("closed", False)),
            date=payload.get("date"),
            description=payload.get("description"),
            discount=optional(payload, "discount", Discount.from_response),
            ending_balance=payload.get("ending_balance"),
            forgiven=bool(payload.get("forgiven", False)),
            lines=lines if lines is not None else ListObject(),
            livemode=bool(payload.get("livemode", False)),
            metadata=decode_metadata(payload),
            next_payment_attempt=payload.get("next_payment_attempt"),
            paid=bool(payload.get("paid", False)),
            period_end=payload.get("period_end"),
            period_start=payload.get("period_start"),
            receipt_number=payload.get("receipt_number"),
            starting_balance=int(payload.get("starting_balance") or 0),
            statement_descriptor=payload.get("statement_descriptor"),
            subscription=payload.get("subscription"),
            subscription_proration_date=payload.get("subscription_proration_date"),
            subtotal=int(payload.get("subtotal") or 0),
            tax=payload.get("tax"),
            tax_percent=payload.get("tax_percent"),
            total=int(payload.get("total") or 0),
            webhooks_delivered_at=payload.get("webhooks_delivered_at"),
        )


def create(params: InvoiceParams) -> RequestDescriptor[Invoice]:
    """
    Creates a new invoice.

    For more details see https://stripe.com/docs/api#create_invoice.
    """
    return RequestDescriptor.post("/invoices", Invoice.from_response, params)


def retrieve(invoice_id: str) -> RequestDescriptor[Invoice]:
    """
    Retrieves the details of an invoice.

    For more details see https://stripe.com/docs/api#retrieve_invoice.
    """
    return RequestDescriptor.get(f"/invoices/{invoice_id}", Invoice.from_response)


def upcoming(params: InvoiceUpcomingParams) -> RequestDescriptor[Invoice]:
    """
    Previews the next invoice for a customer.

    For more details see https://stripe.com/docs/api#upcoming_invoice.
    """
    return RequestDescriptor.get("/invoices/upcoming", Invoice.from_response, params)


def pay(invoice_id: str) -> RequestDescriptor[Invoice]:
    """
    Pays an invoice.

    For more details see https://stripe.com/docs/api#pay_invoice.
    """
    return RequestDescriptor.post(f"/invoices/{invoice_id}/pay", Invoice.from_response)


def update(invoice_id: str, params: InvoiceParams) -> RequestDescriptor[Invoice]:
    return RequestDescriptor.post(f"/invoices/{invoice_id}", Invoice.from_response, params)


def list(params: Optional[InvoiceListParams] = None) -> RequestDescriptor[ListObject[Invoice]]:
    return RequestDescriptor.get("/invoices", ListObject.of(Invoice.from_response), params)


def create_line_item(params: InvoiceLineItemParams) -> RequestDescriptor[InvoiceLineItem]:
    """
    Creates an invoice item to be added to the customer's next invoice.

    For more details see https://stripe.com/docs/api#create_invoiceitem.
    """
    return RequestDescriptor.post("/invoiceitems", InvoiceLineItem.from_response, params)
