"""
Minimal script that uses the public API to start a PayStation payment and
poll its status once.
"""

from __future__ import annotations

import argparse
import logging
import sys
from decimal import Decimal

from paystation import (
    ConfigurationError,
    PaymentInitiationParams,
    PayStationError,
    create_client,
    load_client_config,
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Initiate a PayStation payment")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing PAYSTATION_* settings",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    parser.add_argument("--merchant-id", help="Override PAYSTATION_MERCHANT_ID")
    parser.add_argument("--password", help="Override PAYSTATION_PASSWORD")
    parser.add_argument(
        "--environment",
        choices=("sandbox", "live"),
        help="Override PAYSTATION_ENVIRONMENT",
    )
    parser.add_argument("--invoice-number", default="INV-001")
    parser.add_argument("--amount", type=Decimal, default=Decimal("100.50"))
    parser.add_argument("--callback-url", default="https://example.com/callback")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        config = load_client_config(
            env_file=args.env_file,
            merchant_id=args.merchant_id,
            password=args.password,
            environment=args.environment,
        )
    except ConfigurationError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    client = create_client(config=config)
    logging.info("Initiating payment against %s", config.base_url)

    params = PaymentInitiationParams(
        invoice_number=args.invoice_number,
        payment_amount=args.amount,
        customer_name="John Doe",
        customer_phone="+8801234567890",
        customer_email="john@example.com",
        callback_url=args.callback_url,
        reference="Order #12345",
        checkout_items="Product A x1, Product B x2",
    )

    try:
        payment = client.initiate_payment(params)
    except PayStationError as exc:
        logging.error("Payment initiation failed: %s", exc)
        return 1

    logging.info("Redirect the customer to %s", payment.payment_url)

    try:
        status = client.get_transaction_status(args.invoice_number)
    except PayStationError as exc:
        logging.error("Status check failed: %s", exc)
        return 1

    if status.data is not None:
        logging.info("Transaction status: %s", status.data.transaction_status)
    return 0


if __name__ == "__main__":
    sys.exit(main())
