"""
Invoice items: one-off charges or credits added to a customer's next invoice.

see https://stripe.com/docs/api#invoiceitems
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from ..core.forms import (
    FormValues,
    append_metadata,
    append_optional,
    append_required,
    list_params,
)
from ..core.models import Currency, ListResponse
from ..core.timestamps import from_unix_required
from .base import ResourceAPI, resource_path

__all__ = [
    "InvoiceItem",
    "InvoiceItemParams",
    "InvoiceItemUpdateParams",
    "InvoiceItemsAPI",
]


@dataclass(frozen=True)
class InvoiceItem:
    id: str
    amount: int
    currency: str
    customer: str
    date: datetime
    livemode: bool = False
    proration: bool = False
    description: Optional[str] = None
    invoice: Optional[str] = None
    subscription: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "InvoiceItem":
        return cls(
            id=payload["id"],
            amount=int(payload["amount"]),
            currency=payload.get("currency", ""),
            customer=payload.get("customer", ""),
            date=from_unix_required(payload.get("date")),
            livemode=bool(payload.get("livemode")),
            proration=bool(payload.get("proration")),
            description=payload.get("description"),
            invoice=payload.get("invoice"),
            subscription=payload.get("subscription"),
            metadata=dict(payload.get("metadata") or {}),
        )


@dataclass(frozen=True)
class InvoiceItemParams:
    """
    Options for creating an invoice item.

    A negative ``amount`` credits the customer. Without ``invoice`` the item
    lands on the next scheduled invoice.
    """

    customer: str
    amount: int
    currency: Currency | str
    description: Optional[str] = None
    invoice: Optional[str] = None
    subscription: Optional[str] = None
    metadata: Optional[Dict[str, str]] = None


@dataclass(frozen=True)
class InvoiceItemUpdateParams:
    amount: Optional[int] = None
    description: Optional[str] = None
    metadata: Optional[Dict[str, str]] = None


class InvoiceItemsAPI(ResourceAPI):
    @staticmethod
    def path(item_id: str = "") -> str:
        return resource_path("invoiceitems", item_id)

    def create(self, params: InvoiceItemParams) -> InvoiceItem:
        values: FormValues = []
        append_required(values, "amount", params.amount)
        append_required(values, "currency", params.currency)
        append_required(values, "customer", params.customer)
        append_optional(values, "description", params.description)
        append_optional(values, "invoice", params.invoice)
        append_optional(values, "subscription", params.subscription)
        append_metadata(values, params.metadata)
        return self._request("POST", self.path(), InvoiceItem.from_response, values)

    def retrieve(self, item_id: str) -> InvoiceItem:
        return self._request("GET", self.path(item_id), InvoiceItem.from_response)

    def update(self, item_id: str, params: InvoiceItemUpdateParams) -> InvoiceItem:
        """Change the amount or description of an item on an upcoming invoice."""
        values: FormValues = []
        append_optional(values, "description", params.description)
        append_optional(values, "amount", params.amount)
        append_metadata(values, params.metadata)
        return self._request("POST", self.path(item_id), InvoiceItem.from_response, values)

    def delete(self, item_id: str) -> bool:
        return self._delete(self.path(item_id))

    def list(
        self,
        limit: int = 0,
        before: Optional[str] = None,
        after: Optional[str] = None,
        *,
        customer: Optional[str] = None,
    ) -> ListResponse[InvoiceItem]:
        values = list_params(limit, before, after)
        append_optional(values, "customer", customer)
        return self._list(self.path(), InvoiceItem.from_response, values)

    def list_for_customer(
        self,
        customer_id: str,
        limit: int = 0,
        before: Optional[str] = None,
        after: Optional[str] = None,
    ) -> ListResponse[InvoiceItem]:
        return self.list(limit, before, after, customer=customer_id)
