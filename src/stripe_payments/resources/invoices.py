"""
Invoices: what a customer owes for a billing period.

Invoices are created by the API itself, so only reads are exposed.

see https://stripe.com/docs/api#invoices
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from ..core.forms import append_optional, list_params
from ..core.models import ListResponse
from ..core.timestamps import from_unix, from_unix_required
from .base import ResourceAPI, resource_path
from .coupons import Discount
from .plans import Plan

__all__ = [
    "Invoice",
    "InvoiceLineItem",
    "InvoicesAPI",
    "Period",
]


@dataclass(frozen=True)
class Period:
    start: datetime
    end: datetime

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Period":
        return cls(
            start=from_unix_required(payload.get("start")),
            end=from_unix_required(payload.get("end")),
        )


@dataclass(frozen=True)
class InvoiceLineItem:
    id: str
    amount: int
    currency: str
    period: Period
    type: str
    livemode: bool = False
    proration: bool = False
    description: Optional[str] = None
    plan: Optional[Plan] = None
    quantity: Optional[int] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "InvoiceLineItem":
        return cls(
            id=payload["id"],
            amount=int(payload.get("amount") or 0),
            currency=payload.get("currency", ""),
            period=Period.from_response(payload.get("period") or {}),
            type=payload.get("type", ""),
            livemode=bool(payload.get("livemode")),
            proration=bool(payload.get("proration")),
            description=payload.get("description"),
            plan=Plan.from_optional(payload.get("plan")),
            quantity=payload.get("quantity"),
            metadata=dict(payload.get("metadata") or {}),
        )


@dataclass(frozen=True)
class Invoice:
    customer: str
    date: datetime
    period_start: datetime
    period_end: datetime
    amount_due: int
    subtotal: int
    total: int
    currency: str
    # The upcoming invoice has no id until it is finalised.
    id: Optional[str] = None
    attempt_count: int = 0
    attempted: bool = False
    closed: bool = False
    paid: bool = False
    charge: Optional[str] = None
    discount: Optional[Discount] = None
    lines: Optional[ListResponse[InvoiceLineItem]] = None
    starting_balance: int = 0
    ending_balance: Optional[int] = None
    next_payment_attempt: Optional[datetime] = None
    application_fee: Optional[int] = None
    livemode: bool = False

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Invoice":
        lines = payload.get("lines")
        return cls(
            customer=payload.get("customer", ""),
            date=from_unix_required(payload.get("date")),
            period_start=from_unix_required(payload.get("period_start")),
            period_end=from_unix_required(payload.get("period_end")),
            amount_due=int(payload.get("amount_due") or 0),
            subtotal=int(payload.get("subtotal") or 0),
            total=int(payload.get("total") or 0),
            currency=payload.get("currency", ""),
            id=payload.get("id"),
            attempt_count=int(payload.get("attempt_count") or 0),
            attempted=bool(payload.get("attempted")),
            closed=bool(payload.get("closed")),
            paid=bool(payload.get("paid")),
            charge=payload.get("charge"),
            discount=Discount.from_optional(payload.get("discount")),
            lines=(
                None
                if lines is None
                else ListResponse.from_response(lines, InvoiceLineItem.from_response)
            ),
            starting_balance=int(payload.get("starting_balance") or 0),
            ending_balance=payload.get("ending_balance"),
            next_payment_attempt=from_unix(payload.get("next_payment_attempt")),
            application_fee=payload.get("application_fee"),
            livemode=bool(payload.get("livemode")),
        )


class InvoicesAPI(ResourceAPI):
    @staticmethod
    def path(invoice_id: str = "") -> str:
        return resource_path("invoices", invoice_id)

    def retrieve(self, invoice_id: str) -> Invoice:
        return self._request("GET", self.path(invoice_id), Invoice.from_response)

    def upcoming(self, customer_id: str) -> Invoice:
        """Preview the next invoice for ``customer_id``."""
        return self._request(
            "GET",
            self.path("upcoming"),
            Invoice.from_response,
            [("customer", customer_id)],
        )

    def list(
        self,
        limit: int = 0,
        before: Optional[str] = None,
        after: Optional[str] = None,
        *,
        customer: Optional[str] = None,
    ) -> ListResponse[Invoice]:
        values = list_params(limit, before, after)
        append_optional(values, "customer", customer)
        return self._list(self.path(), Invoice.from_response, values)

    def list_for_customer(
        self,
        customer_id: str,
        limit: int = 0,
        before: Optional[str] = None,
        after: Optional[str] = None,
    ) -> ListResponse[Invoice]:
        return self.list(limit, before, after, customer=customer_id)
