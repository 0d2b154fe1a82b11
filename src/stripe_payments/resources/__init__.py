"""
One module per remote resource: the decoded record, its parameter bundle and
the API object bound to a :class:`stripe_payments.core.client.StripeClient`.
"""

from .cards import Card, CardParams, CardsAPI
from .charges import Charge, ChargeParams, ChargesAPI, Dispute
from .coupons import Coupon, CouponParams, CouponsAPI, Discount
from .customers import Customer, CustomerParams, CustomersAPI
from .invoice_items import (
    InvoiceItem,
    InvoiceItemParams,
    InvoiceItemsAPI,
    InvoiceItemUpdateParams,
)
from .invoices import Invoice, InvoiceLineItem, InvoicesAPI, Period
from .plans import Plan, PlanParams, PlansAPI, PlanUpdateParams
from .subscriptions import Subscription, SubscriptionParams, SubscriptionsAPI
from .tokens import Token, TokensAPI

__all__ = [
    "Card",
    "CardParams",
    "CardsAPI",
    "Charge",
    "ChargeParams",
    "ChargesAPI",
    "Coupon",
    "CouponParams",
    "CouponsAPI",
    "Customer",
    "CustomerParams",
    "CustomersAPI",
    "Discount",
    "Dispute",
    "Invoice",
    "InvoiceItem",
    "InvoiceItemParams",
    "InvoiceItemUpdateParams",
    "InvoiceItemsAPI",
    "InvoiceLineItem",
    "InvoicesAPI",
    "Period",
    "Plan",
    "PlanParams",
    "PlanUpdateParams",
    "PlansAPI",
    "Subscription",
    "SubscriptionParams",
    "SubscriptionsAPI",
    "Token",
    "TokensAPI",
]
