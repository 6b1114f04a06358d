"""
Command-line interface for exercising the PayStation API.
"""

from __future__ import annotations

import argparse
import logging
from decimal import Decimal, InvalidOperation
from typing import Optional, Sequence, Tuple

from .api import create_client
from .core.config import load_client_config
from .core.errors import ConfigurationError, PayStationError
from .core.models import PaymentInitiationParams, TransactionStatusResult
from .core.transport import Transport

_INITIATE_OPTIONS = (
    ("--invoice-number", "invoice_number", True, "Unique invoice number"),
    ("--customer-name", "customer_name", True, "Customer's full name"),
    ("--customer-phone", "customer_phone", True, "Customer's phone number"),
    ("--customer-email", "customer_email", True, "Customer's email address"),
    ("--callback-url", "callback_url", True, "URL PayStation redirects to afterwards"),
    ("--currency", "currency", False, "Currency code"),
    ("--reference", "reference", False, "Free-form reference"),
    ("--customer-address", "customer_address", False, "Customer's address"),
    ("--checkout-items", "checkout_items", False, "Description of the purchased items"),
    ("--opt-a", "opt_a", False, "Merchant defined value A"),
    ("--opt-b", "opt_b", False, "Merchant defined value B"),
    ("--opt-c", "opt_c", False, "Merchant defined value C"),
)


def _setup_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name.upper())
    logging.basicConfig(
        level=level if isinstance(level, int) else logging.INFO,
        format="%(asctime)s %(levelname)s paystation: %(message)s",
    )


def _setting_override(text: str) -> Tuple[str, str]:
    key, separator, value = text.partition("=")
    key = key.strip()
    if not separator or not key:
        raise argparse.ArgumentTypeError(
            f"expected PAYSTATION_SETTING=VALUE, got '{text}'"
        )
    return key, value


def _amount(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation as exc:
        raise argparse.ArgumentTypeError(f"'{value}' is not a valid amount") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="paystation",
        description="Call the PayStation hosted checkout API",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing PAYSTATION_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_setting_override,
        metavar="PAYSTATION_SETTING=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    initiate = commands.add_parser("initiate", help="Start a hosted checkout payment")
    for flag, dest, required, help_text in _INITIATE_OPTIONS:
        initiate.add_argument(flag, dest=dest, required=required, help=help_text)
    initiate.add_argument("--amount", dest="payment_amount", type=_amount, required=True)
    initiate.add_argument("--pay-with-charge", dest="pay_with_charge", type=_amount)
    initiate.add_argument("--emi", type=int, help="EMI option")

    status = commands.add_parser("status", help="Check a transaction by invoice number")
    status.add_argument("invoice_number")

    status_by_id = commands.add_parser(
        "status-by-id", help="Check a transaction by PayStation transaction id"
    )
    status_by_id.add_argument("transaction_id")
    return parser


def _initiate_params(args: argparse.Namespace) -> PaymentInitiationParams:
    names = [dest for _, dest, _, _ in _INITIATE_OPTIONS]
    names += ["payment_amount", "pay_with_charge", "emi"]
    return PaymentInitiationParams(**{name: getattr(args, name) for name in names})


def _log_status(result: TransactionStatusResult) -> None:
    if result.data is None:
        logging.info("%s (status code %s)", result.message, result.status_code)
        return
    record = result.data
    logging.info(
        "Invoice %s / transaction %s is %s (amount %s)",
        record.invoice_number,
        record.transaction_id,
        record.transaction_status,
        record.payment_amount or record.transaction_amount,
    )


def run_cli(
    argv: Optional[Sequence[str]] = None,
    *,
    transport: Optional[Transport] = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _setup_logging(args.log_level)
    overrides = dict(args.set or ())

    try:
        config = load_client_config(env_file=args.env_file, overrides=overrides)
    except ConfigurationError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    client = create_client(config=config, transport=transport)
    logging.debug("Using %s environment at %s", config.environment.value, config.base_url)

    try:
        if args.command == "initiate":
            result = client.initiate_payment(_initiate_params(args))
            logging.info("Payment URL: %s", result.payment_url)
        elif args.command == "status":
            _log_status(client.get_transaction_status(args.invoice_number))
        else:
            _log_status(client.get_transaction_status_by_id(args.transaction_id))
    except PayStationError as exc:
        logging.error("%s failed: %s", args.command, exc)
        return 1

    return 0
