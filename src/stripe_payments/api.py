"""
Public, high-level helpers for working with the Stripe API.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

import requests

from .core.card_numbers import card_brand, is_luhn_valid
from .core.client import StripeClient
from .core.config import StripeConfig, load_stripe_config
from .core.models import CardBrand

__all__ = [
    "CardCheck",
    "check_card",
    "create_client",
]


def create_client(
    *,
    config: Optional[StripeConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    api_key: Optional[str] = None,
    api_base: Optional[str] = None,
    timeout_seconds: Optional[int | str] = None,
    api_version: Optional[str] = None,
) -> StripeClient:
    """
    Construct a :class:`StripeClient`.

    Callers can either supply a ready-made :class:`StripeConfig` or let the
    helper assemble one from environment data.
    """
    if config is not None:
        extras = (overrides, base, api_key, api_base, timeout_seconds, api_version)
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built StripeConfig or individual settings, not both."
            )
        cfg = config
    else:
        cfg = load_stripe_config(
            env_file=env_file,
            overrides=overrides,
            base=base,
            api_key=api_key,
            api_base=api_base,
            timeout_seconds=timeout_seconds,
            api_version=api_version,
        )
    return StripeClient(cfg, session=session)


@dataclass(frozen=True)
class CardCheck:
    brand: CardBrand
    luhn_valid: bool
    last4: str


def check_card(number: str) -> CardCheck:
    """
    Run the offline checks on a raw card number.

    Spaces and dashes are stripped first. Raises
    :class:`~stripe_payments.core.card_numbers.InvalidDigitError` for any
    other non-digit character.
    """
    digits = number.replace(" ", "").replace("-", "")
    return CardCheck(
        brand=card_brand(digits),
        luhn_valid=is_luhn_valid(digits),
        last4=digits[-4:],
    )
