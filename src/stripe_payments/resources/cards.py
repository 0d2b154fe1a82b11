"""
Credit cards stored on a customer.

see https://stripe.com/docs/api#cards
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.forms import FormValues, append_optional, list_params
from ..core.models import CardBrand, ListResponse
from .base import ResourceAPI, resource_path

__all__ = [
    "Card",
    "CardParams",
    "CardsAPI",
    "append_card_params",
    "append_card_source",
]


@dataclass(frozen=True)
class Card:
    id: str
    type: CardBrand
    exp_month: int
    exp_year: int
    last4: str
    fingerprint: str
    name: Optional[str] = None
    country: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    address_country: Optional[str] = None
    address_state: Optional[str] = None
    address_zip: Optional[str] = None
    address_line1_check: Optional[str] = None
    address_zip_check: Optional[str] = None
    cvc_check: Optional[str] = None
    customer: Optional[str] = None

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Card":
        return cls(
            id=payload["id"],
            type=CardBrand.from_label(payload.get("type") or payload.get("brand")),
            exp_month=int(payload.get("exp_month") or 0),
            exp_year=int(payload.get("exp_year") or 0),
            last4=payload.get("last4", ""),
            fingerprint=payload.get("fingerprint", ""),
            name=payload.get("name"),
            country=payload.get("country"),
            address_line1=payload.get("address_line1"),
            address_line2=payload.get("address_line2"),
            address_country=payload.get("address_country"),
            address_state=payload.get("address_state"),
            address_zip=payload.get("address_zip"),
            address_line1_check=payload.get("address_line1_check"),
            address_zip_check=payload.get("address_zip_check"),
            cvc_check=payload.get("cvc_check"),
            customer=payload.get("customer"),
        )


@dataclass(frozen=True)
class CardParams:
    """
    Raw card details for creating or updating a card.

    Only ``number``, ``exp_month`` and ``exp_year`` are needed to create a
    card; everything else is optional.
    """

    number: Optional[str] = None
    exp_month: Optional[int] = None
    exp_year: Optional[int] = None
    cvc: Optional[str] = None
    name: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    address_country: Optional[str] = None
    address_state: Optional[str] = None
    address_zip: Optional[str] = None


def append_card_params(values: FormValues, card: CardParams, prefix: str = "card") -> None:
    """Add ``card`` as bracketed fields, e.g. ``card[number]``."""
    append_optional(values, f"{prefix}[number]", card.number)
    append_optional(values, f"{prefix}[exp_month]", card.exp_month)
    append_optional(values, f"{prefix}[exp_year]", card.exp_year)
    append_optional(values, f"{prefix}[name]", card.name)
    append_optional(values, f"{prefix}[cvc]", card.cvc)
    append_optional(values, f"{prefix}[address_line1]", card.address_line1)
    append_optional(values, f"{prefix}[address_line2]", card.address_line2)
    append_optional(values, f"{prefix}[address_zip]", card.address_zip)
    append_optional(values, f"{prefix}[address_state]", card.address_state)
    append_optional(values, f"{prefix}[address_country]", card.address_country)


def append_card_source(
    values: FormValues,
    card: Optional[CardParams],
    token: Optional[str],
) -> None:
    """Attach either raw card details or a card token; details win."""
    if card is not None:
        append_card_params(values, card)
    elif token:
        values.append(("card", token))


class CardsAPI(ResourceAPI):
    @staticmethod
    def path(customer_id: str, card_id: str = "") -> str:
        return resource_path("customers", customer_id, "cards", card_id)

    def create(
        self,
        customer_id: str,
        *,
        token: Optional[str] = None,
        card: Optional[CardParams] = None,
    ) -> Card:
        """Attach a card to a customer, from a token or from raw details."""
        if not token and card is None:
            raise ValueError("Either a card token or card details are required")
        values: FormValues = []
        if token:
            values.append(("card", token))
        else:
            append_card_params(values, card)
        return self._request("POST", self.path(customer_id), Card.from_response, values)

    def retrieve(self, customer_id: str, card_id: str) -> Card:
        return self._request("GET", self.path(customer_id, card_id), Card.from_response)

    def update(self, customer_id: str, card_id: str, card: CardParams) -> Card:
        values: FormValues = []
        append_card_params(values, card)
        return self._request(
            "POST", self.path(customer_id, card_id), Card.from_response, values
        )

    def delete(self, customer_id: str, card_id: str) -> bool:
        return self._delete(self.path(customer_id, card_id))

    def list(
        self,
        customer_id: str,
        limit: int = 0,
        before: Optional[str] = None,
        after: Optional[str] = None,
    ) -> ListResponse[Card]:
        return self._list(
            self.path(customer_id), Card.from_response, list_params(limit, before, after)
        )
