"""
Core primitives: configuration, the HTTP query, form encoding and card checks.
"""

from .card_numbers import CardNumberError, InvalidDigitError, card_brand, is_luhn_valid
from .config import ConfigError, StripeConfig, load_stripe_config
from .environment import StripeEnvironment, build_environment, load_env_file
from .errors import (
    StripeAPIError,
    StripeConnectionError,
    StripeDecodeError,
    StripeError,
)
from .models import (
    CardBrand,
    CouponDuration,
    Currency,
    DeleteResponse,
    ListResponse,
    PlanInterval,
    SubscriptionStatus,
)
from .timestamps import InvalidTimestampError
from .client import StripeClient

__all__ = [
    "CardBrand",
    "CardNumberError",
    "ConfigError",
    "CouponDuration",
    "Currency",
    "DeleteResponse",
    "InvalidDigitError",
    "InvalidTimestampError",
    "ListResponse",
    "PlanInterval",
    "StripeAPIError",
    "StripeClient",
    "StripeConfig",
    "StripeConnectionError",
    "StripeDecodeError",
    "StripeEnvironment",
    "StripeError",
    "SubscriptionStatus",
    "build_environment",
    "card_brand",
    "is_luhn_valid",
    "load_env_file",
    "load_stripe_config",
]
