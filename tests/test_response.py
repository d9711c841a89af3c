from __future__ import annotations

import json

import pytest

from stripe_payments import DecodeError, RequestError
from stripe_payments.core.response import dispatch_response
from stripe_payments.resources.customer import Customer
from stripe_payments.resources.source import BankAccount

CUSTOMER = {
    "id": "cus_1",
    "object": "customer",
    "account_balance": 0,
    "created": 1690000000,
    "currency": None,
    "default_source": None,
    "delinquent": False,
    "description": None,
    "discount": None,
    "email": None,
    "livemode": False,
    "metadata": {},
    "shipping": None,
    "sources": {"object": "list", "data": [], "has_more": False, "url": "/v1/customers/cus_1/sources"},
}


def _body(payload) -> bytes:
    return json.dumps(payload).encode()


def test_success_decodes_into_the_expected_type() -> None:
    result = dispatch_response(200, _body(CUSTOMER), Customer.from_response)
    assert isinstance(result, Customer)
    assert result.id == "cus_1"
    assert result.sources.url == "/v1/customers/cus_1/sources"


def test_any_2xx_status_is_a_success() -> None:
    assert dispatch_response(201, _body(CUSTOMER), Customer.from_response).id == "cus_1"


def test_card_declined() -> None:
    body = _body(
        {"error": {"message": "Your card was declined.", "type": "card_error", "code": "card_declined"}}
    )
    with pytest.raises(RequestError) as info:
        dispatch_response(402, body, Customer.from_response)

    err = info.value
    assert err.http_status == 402
    assert err.code == "card_declined"
    assert err.error_type == "card_error"
    assert err.message == "Your card was declined."
    assert err.param is None


def test_empty_error_envelope_keeps_fields_absent() -> None:
    with pytest.raises(RequestError) as info:
        dispatch_response(404, _body({"error": {}}), Customer.from_response)
    err = info.value
    assert (err.code, err.error_type, err.message, err.param) == (None, None, None, None)
    assert err.http_status == 404


def test_error_status_with_unparseable_body() -> None:
    with pytest.raises(DecodeError) as info:
        dispatch_response(500, b"<html>Internal Server Error</html>", Customer.from_response)
    assert info.value.http_status == 500


@pytest.mark.parametrize(
    "body",
    [
        _body({"message": "no envelope"}),
        _body(["error"]),
        _body({"error": "card_declined"}),
        _body({"error": {"code": 42}}),
    ],
)
def test_error_status_with_unexpected_shape(body: bytes) -> None:
    with pytest.raises(DecodeError):
        dispatch_response(400, body, Customer.from_response)


@pytest.mark.parametrize(
    "body",
    [
        b"",
        b"not json",
        _body([CUSTOMER]),
        _body({"object": "customer"}),
        _body(dict(CUSTOMER, sources={"object": "list", "data": "nope"})),
    ],
)
def test_success_status_with_unexpected_shape(body: bytes) -> None:
    with pytest.raises(DecodeError) as info:
        dispatch_response(200, body, Customer.from_response)
    assert info.value.http_status == 200


@pytest.mark.parametrize(
    "body",
    [
        b'{"id": "cus_1", "account_balance": Infinity}',
        b'{"id": "cus_1", "account_balance": NaN}',
        b'{"id": "cus_1", "account_balance": 1e400}',
    ],
)
def test_non_finite_numbers_are_decode_errors(body: bytes) -> None:
    with pytest.raises(DecodeError) as info:
        dispatch_response(200, body, Customer.from_response)
    assert info.value.http_status == 200


def test_customer_with_bank_account_source() -> None:
    bank_account = {
        "id": "ba_1",
        "object": "bank_account",
        "last4": "6789",
        "bank_name": "STRIPE TEST BANK",
        "country": "US",
        "currency": "usd",
        "status": "new",
    }
    payload = dict(CUSTOMER, sources=dict(CUSTOMER["sources"], data=[bank_account]))

    result = dispatch_response(200, _body(payload), Customer.from_response)

    source = result.sources.data[0]
    assert isinstance(source, BankAccount)
    assert (source.id, source.last4, source.bank_name) == ("ba_1", "6789", "STRIPE TEST BANK")


def test_status_decides_even_when_body_looks_like_success() -> None:
    with pytest.raises(DecodeError):
        dispatch_response(500, _body(CUSTOMER), Customer.from_response)


def test_request_error_rejects_success_status() -> None:
    with pytest.raises(ValueError):
        RequestError(200)
