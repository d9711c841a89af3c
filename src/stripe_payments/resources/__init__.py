"""
Parameter and response shapes, plus one request builder per API operation.

Builders live in per-resource modules, so call them as ``customer.create``,
``charge.capture`` and so on.
"""

from . import card, charge, customer, invoice, plan, source
from .card import Card, CardParams
from .charge import CaptureParams, Charge, ChargeListParams, ChargeParams, Refund
from .common import (
    Address,
    Coupon,
    Deleted,
    Discount,
    ListObject,
    ListParams,
    Metadata,
    RangeQuery,
    ShippingDetails,
)
from .customer import (
    Customer,
    CustomerListParams,
    CustomerParams,
    CustomerShippingDetails,
    CustomerSourceParam,
)
from .invoice import (
    Invoice,
    InvoiceLineItem,
    InvoiceLineItemParams,
    InvoiceListParams,
    InvoiceParams,
    InvoiceUpcomingParams,
    Period,
)
from .plan import Plan, PlanParams
from .source import BankAccount, Source, decode_source

__all__ = [
    "Address",
    "BankAccount",
    "CaptureParams",
    "Card",
    "CardParams",
    "Charge",
    "ChargeListParams",
    "ChargeParams",
    "Coupon",
    "Customer",
    "CustomerListParams",
    "CustomerParams",
    "CustomerShippingDetails",
    "CustomerSourceParam",
    "Deleted",
    "Discount",
    "Invoice",
    "InvoiceLineItem",
    "InvoiceLineItemParams",
    "InvoiceListParams",
    "InvoiceParams",
    "InvoiceUpcomingParams",
    "ListObject",
    "ListParams",
    "Metadata",
    "Period",
    "Plan",
    "PlanParams",
    "RangeQuery",
    "Refund",
    "ShippingDetails",
    "Source",
    "card",
    "charge",
    "customer",
    "decode_source",
    "invoice",
    "plan",
    "source",
]
