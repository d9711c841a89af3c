from __future__ import annotations

import pytest

from stripe_payments import ClientConfig, Method, resolve_request
from stripe_payments.resources import (
    Card,
    Charge,
    Invoice,
    InvoiceLineItem,
    ListObject,
    Plan,
    charge,
    customer,
    invoice,
    plan,
)
from stripe_payments.resources.card import Brand, Check, Funding
from stripe_payments.resources.charge import CaptureParams, ChargeParams
from stripe_payments.resources.invoice import (
    InvoiceLineItemParams,
    InvoiceParams,
    InvoiceUpcomingParams,
    SubscriptionItemParams,
)
from stripe_payments.resources.plan import PlanParams
from stripe_payments.resources.source import BankAccount, decode_source

CARD = {
    "id": "card_1",
    "object": "card",
    "brand": "Visa",
    "country": "US",
    "cvc_check": "pass",
    "exp_month": 2,
    "exp_year": 2031,
    "fingerprint": "Xt5EWLLDS7FJjR1c",
    "funding": "credit",
    "last4": "4242",
    "metadata": {},
}


@pytest.mark.parametrize(
    "descriptor, method, path",
    [
        (customer.create(customer.CustomerParams()), Method.POST, "/customers"),
        (customer.retrieve("cus_1"), Method.GET, "/customers/cus_1"),
        (customer.update("cus_1", customer.CustomerParams()), Method.POST, "/customers/cus_1"),
        (customer.delete("cus_1"), Method.DELETE, "/customers/cus_1"),
        (customer.list(), Method.GET, "/customers"),
        (customer.attach_source("cus_1", "tok_visa"), Method.POST, "/customers/cus_1/sources"),
        (customer.detach_source("cus_1", "card_1"), Method.DELETE, "/customers/cus_1/sources/card_1"),
        (charge.create(ChargeParams(amount=100)), Method.POST, "/charges"),
        (charge.retrieve("ch_1"), Method.GET, "/charges/ch_1"),
        (charge.update("ch_1", ChargeParams()), Method.POST, "/charges/ch_1"),
        (charge.capture("ch_1"), Method.POST, "/charges/ch_1/capture"),
        (charge.list(), Method.GET, "/charges"),
        (invoice.create(InvoiceParams(customer="cus_1")), Method.POST, "/invoices"),
        (invoice.retrieve("in_1"), Method.GET, "/invoices/in_1"),
        (invoice.update("in_1", InvoiceParams()), Method.POST, "/invoices/in_1"),
        (invoice.pay("in_1"), Method.POST, "/invoices/in_1/pay"),
        (invoice.upcoming(InvoiceUpcomingParams(customer="cus_1")), Method.GET, "/invoices/upcoming"),
        (invoice.list(), Method.GET, "/invoices"),
        (invoice.create_line_item(InvoiceLineItemParams()), Method.POST, "/invoiceitems"),
        (plan.create(PlanParams(id="gold")), Method.POST, "/plans"),
        (plan.retrieve("gold"), Method.GET, "/plans/gold"),
        (plan.update("gold", PlanParams()), Method.POST, "/plans/gold"),
        (plan.delete("gold"), Method.DELETE, "/plans/gold"),
        (plan.list(), Method.GET, "/plans"),
    ],
)
def test_path_templates(descriptor, method: Method, path: str) -> None:
    assert descriptor.method is method
    assert descriptor.path == path
    if method is Method.POST:
        assert descriptor.body_params is not None and descriptor.query_params is None
    else:
        assert descriptor.body_params is None


def test_attach_card_source_body() -> None:
    source = customer.CardParams(number="4242424242424242", exp_month="02", exp_year="31", cvc="123")
    resolved = resolve_request(ClientConfig("sk_test"), customer.attach_source("cus_1", source))
    assert resolved.body == (
        b"source[object]=card&source[number]=4242424242424242"
        b"&source[exp_month]=02&source[exp_year]=31&source[cvc]=123"
    )


def test_capture_and_upcoming_encoding() -> None:
    cfg = ClientConfig("sk_test")
    capture = resolve_request(cfg, charge.capture("ch_1", CaptureParams(amount=500)))
    assert capture.body == b"amount=500"

    upcoming = resolve_request(
        cfg,
        invoice.upcoming(
            InvoiceUpcomingParams(
                customer="cus_1",
                subscription_items=(SubscriptionItemParams(plan="gold", quantity=2),),
            )
        ),
    )
    assert upcoming.url == (
        "https://api.stripe.com/v1/invoices/upcoming?customer=cus_1"
        "&subscription_items[0][plan]=gold&subscription_items[0][quantity]=2"
    )


def test_card_decoding() -> None:
    card = Card.from_response(CARD)
    assert card.brand is Brand.VISA
    assert card.funding is Funding.CREDIT
    assert card.cvc_check is Check.PASS
    assert card.address_zip_check is None
    assert (card.exp_month, card.exp_year, card.last4) == (2, 2031, "4242")


def test_unknown_card_brand_is_rejected() -> None:
    with pytest.raises(ValueError):
        Card.from_response(dict(CARD, brand="Bankcard"))


def test_charge_decoding() -> None:
    result = Charge.from_response(
        {
            "id": "ch_1",
            "amount": 2000,
            "currency": "usd",
            "captured": True,
            "paid": True,
            "source": CARD,
            "refunds": {"data": [{"id": "re_1", "amount": 500, "charge": "ch_1"}], "has_more": False},
        }
    )
    assert result.source is not None and result.source.id == "card_1"
    assert [refund.id for refund in result.refunds.data] == ["re_1"]
    assert result.amount_refunded == 0


def test_invoice_decoding_without_id() -> None:
    upcoming = Invoice.from_response(
        {
            "customer": "cus_1",
            "currency": "usd",
            "amount_due": 1500,
            "lines": {
                "data": [
                    {
                        "id": "sub_1",
                        "amount": 1500,
                        "currency": "usd",
                        "type": "subscription",
                        "period": {"start": 1690000000, "end": 1692678400},
                        "plan": {"id": "gold", "amount": 1500, "currency": "usd", "interval": "month"},
                    }
                ]
            },
        }
    )
    assert upcoming.id is None
    line = upcoming.lines.data[0]
    assert isinstance(line, InvoiceLineItem)
    assert line.item_type == "subscription"
    assert line.plan == Plan(id="gold", amount=1500, currency="usd", interval="month")


def test_list_decoder() -> None:
    page = ListObject.of(Plan.from_response)(
        {
            "object": "list",
            "url": "/v1/plans",
            "has_more": True,
            "data": [{"id": "gold", "amount": 1500, "currency": "usd", "interval": "month"}],
        }
    )
    assert page.has_more is True
    assert page.data[0].id == "gold"


BANK_ACCOUNT = {
    "id": "ba_1",
    "object": "bank_account",
    "account_holder_type": "individual",
    "bank_name": "STRIPE TEST BANK",
    "country": "US",
    "currency": "usd",
    "last4": "6789",
    "routing_number": "110000000",
    "status": "new",
}


def test_charge_with_bank_account_source() -> None:
    result = Charge.from_response({"id": "ch_2", "amount": 500, "currency": "usd", "source": BANK_ACCOUNT})
    assert isinstance(result.source, BankAccount)
    assert result.source.routing_number == "110000000"


def test_attach_source_decodes_by_object_kind() -> None:
    descriptor = customer.attach_source("cus_1", "btok_1")
    assert isinstance(descriptor.response_type(BANK_ACCOUNT), BankAccount)
    assert isinstance(descriptor.response_type(CARD), Card)


@pytest.mark.parametrize("kind", [None, "alipay_account", ["card"]])
def test_unsupported_source_kind_is_rejected(kind) -> None:
    with pytest.raises(ValueError):
        decode_source(dict(BANK_ACCOUNT, object=kind))
