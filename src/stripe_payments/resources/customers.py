"""
Customers, the accounts charges and subscriptions are attached to.

see https://stripe.com/docs/api#customers
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
from ..core.models import ListResponse
from ..core.timestamps import from_unix_required
from .base import ResourceAPI, resource_path
from .cards import Card, CardParams, CardsAPI, append_card_source
from .coupons import Discount
from .subscriptions import Subscription

__all__ = [
    "Customer",
    "CustomerParams",
    "CustomersAPI",
]


def _optional_list(payload: Optional[Mapping[str, Any]], decode_item) -> Optional[ListResponse]:
    if payload is None:
        return None
    return ListResponse.from_response(payload, decode_item)


@dataclass(frozen=True)
class Customer:
    id: str
    created: datetime
    livemode: bool = False
    description: Optional[str] = None
    email: Optional[str] = None
    account_balance: int = 0
    currency: Optional[str] = None
    delinquent: bool = False
    default_card: Optional[str] = None
    cards: Optional[ListResponse[Card]] = None
    subscriptions: Optional[ListResponse[Subscription]] = None
    discount: Optional[Discount] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Customer":
        return cls(
            id=payload["id"],
            created=from_unix_required(payload.get("created")),
            livemode=bool(payload.get("livemode")),
            description=payload.get("description"),
            email=payload.get("email"),
            account_balance=int(payload.get("account_balance") or 0),
            currency=payload.get("currency"),
            delinquent=bool(payload.get("delinquent")),
            default_card=payload.get("default_card"),
            cards=_optional_list(payload.get("cards"), Card.from_response),
            subscriptions=_optional_list(
                payload.get("subscriptions"), Subscription.from_response
            ),
            discount=Discount.from_optional(payload.get("discount")),
            metadata=dict(payload.get("metadata") or {}),
        )


@dataclass(frozen=True)
class CustomerParams:
    """
    Options for creating and updating customers.

    ``account_balance`` is sent whenever it is not ``None``, so a balance can
    be reset to zero. Negative balances are credit.
    """

    email: Optional[str] = None
    description: Optional[str] = None
    card: Optional[CardParams] = None
    token: Optional[str] = None
    coupon: Optional[str] = None
    plan: Optional[str] = None
    quantity: Optional[int] = None
    trial_end: Optional[datetime] = None
    account_balance: Optional[int] = None
    default_card: Optional[str] = None
    metadata: Optional[Dict[str, str]] = None


def _customer_values(params: CustomerParams) -> FormValues:
    values: FormValues = []
    append_optional(values, "email", params.email)
    append_optional(values, "description", params.description)
    append_optional(values, "coupon", params.coupon)
    append_optional(values, "plan", params.plan)
    append_optional(values, "quantity", params.quantity)
    append_optional(values, "trial_end", params.trial_end)
    if params.account_balance is not None:
        append_required(values, "account_balance", params.account_balance)
    append_optional(values, "default_card", params.default_card)
    append_metadata(values, params.metadata)
    append_card_source(values, params.card, params.token)
    return values


class CustomersAPI(ResourceAPI):
    @staticmethod
    def path(customer_id: str = "") -> str:
        return resource_path("customers", customer_id)

    @property
    def _cards(self) -> CardsAPI:
        return CardsAPI(self._client)

    def create(self, params: Optional[CustomerParams] = None) -> Customer:
        values = _customer_values(params or CustomerParams())
        return self._request("POST", self.path(), Customer.from_response, values)

    def retrieve(self, customer_id: str) -> Customer:
        return self._request("GET", self.path(customer_id), Customer.from_response)

    def update(self, customer_id: str, params: CustomerParams) -> Customer:
        return self._request(
            "POST",
            self.path(customer_id),
            Customer.from_response,
            _customer_values(params),
        )

    def delete(self, customer_id: str) -> bool:
        """Permanently delete a customer and cancel its subscriptions."""
        return self._delete(self.path(customer_id))

    def list(
        self,
        limit: int = 0,
        before: Optional[str] = None,
        after: Optional[str] = None,
    ) -> ListResponse[Customer]:
        return self._list(
            self.path(), Customer.from_response, list_params(limit, before, after)
        )

    def create_card(
        self,
        customer_id: str,
        *,
        token: Optional[str] = None,
        card: Optional[CardParams] = None,
    ) -> Card:
        return self._cards.create(customer_id, token=token, card=card)

    def update_card(self, customer_id: str, card_id: str, card: CardParams) -> Card:
        return self._cards.update(customer_id, card_id, card)

    def delete_card(self, customer_id: str, card_id: str) -> bool:
        return self._cards.delete(customer_id, card_id)
