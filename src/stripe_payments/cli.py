"""
Command-line interface for quick checks against the Stripe API.
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
from datetime import datetime
from enum import Enum
from typing import Any, Iterable, Sequence, Tuple

import requests

from .api import check_card, create_client
from .core.card_numbers import CardNumberError
from .core.client import StripeClient
from .core.config import ConfigError, load_stripe_config
from .core.errors import StripeError


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


_RETRIEVERS = {
    "customer": lambda client, obj_id: client.customers.retrieve(obj_id),
    "charge": lambda client, obj_id: client.charges.retrieve(obj_id),
    "plan": lambda client, obj_id: client.plans.retrieve(obj_id),
    "coupon": lambda client, obj_id: client.coupons.retrieve(obj_id),
    "token": lambda client, obj_id: client.tokens.retrieve(obj_id),
    "invoice": lambda client, obj_id: client.invoices.retrieve(obj_id),
    "invoice-item": lambda client, obj_id: client.invoice_items.retrieve(obj_id),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stripe-payments",
        description="Inspect Stripe resources and check card numbers",
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

    commands = parser.add_subparsers(dest="command", required=True)

    check = commands.add_parser(
        "check-card",
        help="Classify a card number and verify its checksum (no network)",
    )
    check.add_argument("number", help="Card number; spaces and dashes are ignored")

    retrieve = commands.add_parser(
        "retrieve",
        help="Fetch one resource and print it as JSON",
    )
    retrieve.add_argument("resource", choices=sorted(_RETRIEVERS))
    retrieve.add_argument("id", help="Identifier of the resource")
    return parser


def _to_json(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"Cannot serialize {type(value).__name__}")


def run_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if args.command == "check-card":
        return _handle_check_card(args.number)

    overrides = _collect_overrides(args.set or ())
    try:
        config = load_stripe_config(env_file=args.env_file, overrides=overrides)
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    client = create_client(config=config, session=requests.Session())
    return _handle_retrieve(client, args.resource, args.id)


def _handle_check_card(number: str) -> int:
    try:
        result = check_card(number)
    except CardNumberError as exc:
        logging.error("Malformed card number: %s", exc)
        return 1

    logging.info(
        "Card ending in %s looks like %s (checksum %s)",
        result.last4,
        result.brand.value,
        "valid" if result.luhn_valid else "invalid",
    )
    return 0 if result.luhn_valid else 1


def _handle_retrieve(client: StripeClient, resource: str, obj_id: str) -> int:
    try:
        record = _RETRIEVERS[resource](client, obj_id)
    except StripeError as exc:
        logging.error("Retrieving %s %s failed: %s", resource, obj_id, exc)
        return 1

    print(json.dumps(dataclasses.asdict(record), default=_to_json, indent=2))
    return 0
