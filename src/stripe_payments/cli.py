"""
Command-line interface for exercising the customer endpoints.
"""

from __future__ import annotations

import argparse
import logging
from typing import Iterable, Optional, Sequence, Tuple

from .api import create_client
from .core.config import load_client_config
from .core.errors import ApiError, ConfigError, RequestError
from .core.request import RequestDescriptor
from .resources import customer
from .resources.card import CardParams
from .resources.common import Deleted
from .resources.customer import Customer, CustomerParams


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _env_override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _collect_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, value in pairs:
        overrides[key] = value
    return overrides


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stripe-payments",
        description="Create, retrieve or delete a Stripe customer",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing STRIPE_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_env_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    parser.add_argument(
        "--account",
        help="Send the request on behalf of this connected account (Stripe-Account)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    create = commands.add_parser("create-customer", help="Create a new customer")
    create.add_argument("--email")
    create.add_argument("--description")
    create.add_argument("--card-number", help="Attach a card with this number")
    create.add_argument("--exp-month", help="Card expiry month, e.g. 02")
    create.add_argument("--exp-year", help="Card expiry year, e.g. 21")
    create.add_argument("--cvc")

    retrieve = commands.add_parser("retrieve-customer", help="Fetch a customer by id")
    retrieve.add_argument("customer_id")

    delete = commands.add_parser("delete-customer", help="Delete a customer by id")
    delete.add_argument("customer_id")
    return parser


def _card_from_args(args: argparse.Namespace) -> Optional[CardParams]:
    if not args.card_number:
        return None
    if not (args.exp_month and args.exp_year):
        raise ValueError("--exp-month and --exp-year are required with --card-number")
    return CardParams(
        number=args.card_number,
        exp_month=args.exp_month,
        exp_year=args.exp_year,
        cvc=args.cvc,
    )


def _build_descriptor(args: argparse.Namespace) -> RequestDescriptor:
    if args.command == "create-customer":
        params = CustomerParams(
            email=args.email,
            description=args.description,
            source=_card_from_args(args),
        )
        return customer.create(params)
    if args.command == "retrieve-customer":
        return customer.retrieve(args.customer_id)
    return customer.delete(args.customer_id)


def _report(result: object) -> None:
    if isinstance(result, Customer):
        logging.info(
            "Customer %s (created=%s, default_source=%s, email=%s)",
            result.id,
            result.created,
            result.default_source,
            result.email,
        )
    elif isinstance(result, Deleted):
        logging.info("Deleted %s: %s", result.id, result.deleted)


def run_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    overrides = _collect_overrides(args.set or ())

    try:
        config = load_client_config(env_file=args.env_file, overrides=overrides)
        descriptor = _build_descriptor(args)
    except (ConfigError, ValueError) as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    if args.account:
        descriptor = descriptor.for_stripe_account(args.account)

    with create_client(config=config) as client:
        try:
            result = client.execute(descriptor)
        except RequestError as exc:
            logging.error(
                "Stripe rejected the request (HTTP %s, type=%s, code=%s): %s",
                exc.http_status,
                exc.error_type,
                exc.code,
                exc.message,
            )
            return 1
        except ApiError as exc:
            logging.error("Request failed: %s", exc)
            return 1

    _report(result)
    return 0


def main() -> None:
    raise SystemExit(run_cli())
