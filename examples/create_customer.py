"""
Minimal script that creates a customer with a test card.
"""

from __future__ import annotations

import argparse
import logging
import sys

from stripe_payments import (
    ApiError,
    CardParams,
    ConfigError,
    CustomerParams,
    create_client,
    load_client_config,
)
from stripe_payments.resources import customer


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a Stripe customer using the SDK API")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing STRIPE_SECRET_KEY",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    parser.add_argument("--email", default="jdoe@example.org")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        config = load_client_config(env_file=args.env_file)
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    params = CustomerParams(
        email=args.email,
        source=CardParams(number="4242424242424242", exp_month="02", exp_year="21"),
    )

    with create_client(config=config) as client:
        try:
            created = client.execute(customer.create(params))
        except ApiError as exc:
            logging.error("Customer creation failed: %s", exc)
            return 1

    logging.info(
        "Customer %s created at %s (default_source=%s, email=%s)",
        created.id,
        created.created,
        created.default_source,
        created.email,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
