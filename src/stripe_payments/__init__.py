"""
Public facade for the Stripe client package.

The most useful pieces are re-exported so integrators can
``from stripe_payments import ...`` without navigating the package.
"""

from .api import CardCheck, check_card, create_client
from .core import (
    CardBrand,
    CardNumberError,
    ConfigError,
    CouponDuration,
    Currency,
    InvalidDigitError,
    ListResponse,
    PlanInterval,
    StripeAPIError,
    StripeClient,
    StripeConfig,
    StripeConnectionError,
    StripeDecodeError,
    StripeError,
    SubscriptionStatus,
    card_brand,
    is_luhn_valid,
    load_env_file,
    load_stripe_config,
)
from .resources import (
    Card,
    CardParams,
    Charge,
    ChargeParams,
    Coupon,
    CouponParams,
    Customer,
    CustomerParams,
    Discount,
    Dispute,
    Invoice,
    InvoiceItem,
    InvoiceItemParams,
    InvoiceItemUpdateParams,
    InvoiceLineItem,
    Period,
    Plan,
    PlanParams,
    PlanUpdateParams,
    Subscription,
    SubscriptionParams,
    Token,
)

__all__ = (
    "Card",
    "CardBrand",
    "CardCheck",
    "CardNumberError",
    "CardParams",
    "Charge",
    "ChargeParams",
    "ConfigError",
    "Coupon",
    "CouponDuration",
    "CouponParams",
    "Currency",
    "Customer",
    "CustomerParams",
    "Discount",
    "Dispute",
    "InvalidDigitError",
    "Invoice",
    "InvoiceItem",
    "InvoiceItemParams",
    "InvoiceItemUpdateParams",
    "InvoiceLineItem",
    "ListResponse",
    "Period",
    "Plan",
    "PlanInterval",
    "PlanParams",
    "PlanUpdateParams",
    "StripeAPIError",
    "StripeClient",
    "StripeConfig",
    "StripeConnectionError",
    "StripeDecodeError",
    "StripeError",
    "Subscription",
    "SubscriptionParams",
    "SubscriptionStatus",
    "Token",
    "card_brand",
    "check_card",
    "create_client",
    "is_luhn_valid",
    "load_env_file",
    "load_stripe_config",
)
