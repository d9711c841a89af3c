from __future__ import annotations

import logging
from pathlib import Path

import pytest

from stripe_payments import StripeClient, cli


@pytest.fixture()
def wire(monkeypatch, stub_session):
    """Route CLI requests through a stub adapter and return the recorded requests."""
    responses = {}

    def handler(request):
        return responses[request.method]

    session, adapter = stub_session(handler)
    monkeypatch.setattr(cli, "create_client", lambda config: StripeClient(config, session=session))
    return responses, adapter


def _argv(tmp_path: Path, *extra: str) -> list[str]:
    return [
        "--env-file",
        str(tmp_path / "missing.env"),
        "--set",
        "STRIPE_SECRET_KEY=sk_test_cli",
        *extra,
    ]


def test_create_customer_with_card(tmp_path: Path, wire, caplog) -> None:
    responses, adapter = wire
    responses["POST"] = (200, {"id": "cus_A1", "email": "jdoe@example.org", "created": 1690000000})

    with caplog.at_level(logging.INFO):
        code = cli.run_cli(
            _argv(
                tmp_path,
                "--account",
                "acct_1",
                "create-customer",
                "--email",
                "jdoe@example.org",
                "--card-number",
                "4242424242424242",
                "--exp-month",
                "02",
                "--exp-year",
                "21",
            )
        )

    assert code == 0
    sent = adapter.requests[0]
    assert sent.headers["Stripe-Account"] == "acct_1"
    assert b"source[number]=4242424242424242" in sent.body
    assert "cus_A1" in caplog.text


def test_card_number_requires_expiry(tmp_path: Path, wire) -> None:
    code = cli.run_cli(_argv(tmp_path, "create-customer", "--card-number", "4242424242424242"))
    assert code == 1
    assert wire[1].requests == []


def test_api_error_exit_code(tmp_path: Path, wire, caplog) -> None:
    responses, _ = wire
    responses["GET"] = (404, {"error": {"type": "invalid_request_error", "message": "No such customer: cus_x"}})

    code = cli.run_cli(_argv(tmp_path, "retrieve-customer", "cus_x"))

    assert code == 1
    assert "No such customer" in caplog.text


def test_delete_customer(tmp_path: Path, wire) -> None:
    responses, adapter = wire
    responses["DELETE"] = (200, {"id": "cus_1", "deleted": True})

    assert cli.run_cli(_argv(tmp_path, "delete-customer", "cus_1")) == 0
    assert adapter.requests[0].method == "DELETE"


def test_missing_secret_key(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("STRIPE_SECRET_KEY", raising=False)
    code = cli.run_cli(["--env-file", str(tmp_path / "missing.env"), "retrieve-customer", "cus_1"])
    assert code == 1
