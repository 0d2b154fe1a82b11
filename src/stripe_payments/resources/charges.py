"""
Charges against a card or a customer's default card.

see https://stripe.com/docs/api#charges
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
from ..core.timestamps import from_unix, from_unix_required
from .base import ResourceAPI, resource_path
from .cards import Card, CardParams, append_card_params

__all__ = [
    "Charge",
    "ChargeParams",
    "ChargesAPI",
    "Dispute",
]


@dataclass(frozen=True)
class Dispute:
    charge: str
    amount: int
    currency: str
    created: datetime
    reason: str
    status: str
    livemode: bool = False
    balance_transaction: Optional[str] = None
    evidence: Optional[str] = None
    evidence_due_by: Optional[datetime] = None
    is_protected: bool = False

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Dispute":
        return cls(
            charge=payload.get("charge", ""),
            amount=int(payload.get("amount") or 0),
            currency=payload.get("currency", ""),
            created=from_unix_required(payload.get("created")),
            reason=payload.get("reason", ""),
            status=payload.get("status", ""),
            livemode=bool(payload.get("livemode")),
            balance_transaction=payload.get("balance_transaction"),
            evidence=payload.get("evidence"),
            evidence_due_by=from_unix(payload.get("evidence_due_by")),
            is_protected=bool(payload.get("is_protected")),
        )


@dataclass(frozen=True)
class Charge:
    id: str
    amount: int
    currency: str
    created: datetime
    paid: bool
    livemode: bool = False
    card: Optional[Card] = None
    description: Optional[str] = None
    customer: Optional[str] = None
    invoice: Optional[str] = None
    refunded: bool = False
    amount_refunded: int = 0
    captured: Optional[bool] = None
    balance_transaction: Optional[str] = None
    dispute: Optional[Dispute] = None
    failure_message: Optional[str] = None
    failure_code: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Charge":
        card = payload.get("card")
        dispute = payload.get("dispute")
        return cls(
            id=payload["id"],
            amount=int(payload["amount"]),
            currency=payload.get("currency", ""),
            created=from_unix_required(payload.get("created")),
            paid=bool(payload.get("paid")),
            livemode=bool(payload.get("livemode")),
            card=None if card is None else Card.from_response(card),
            description=payload.get("description"),
            customer=payload.get("customer"),
            invoice=payload.get("invoice"),
            refunded=bool(payload.get("refunded")),
            amount_refunded=int(payload.get("amount_refunded") or 0),
            captured=payload.get("captured"),
            balance_transaction=payload.get("balance_transaction"),
            dispute=None if dispute is None else Dispute.from_response(dispute),
            failure_message=payload.get("failure_message"),
            failure_code=payload.get("failure_code"),
            metadata=dict(payload.get("metadata") or {}),
        )


@dataclass(frozen=True)
class ChargeParams:
    """
    Options for creating a charge.

    The source is ``card`` if given, else ``token``, else ``customer``.
    ``capture`` defaults to true on the API; only an explicit ``False`` is
    sent.
    """

    amount: int
    currency: Currency | str
    customer: Optional[str] = None
    card: Optional[CardParams] = None
    token: Optional[str] = None
    description: Optional[str] = None
    capture: Optional[bool] = None
    statement_description: Optional[str] = None
    metadata: Optional[Dict[str, str]] = None


class ChargesAPI(ResourceAPI):
    @staticmethod
    def path(charge_id: str = "", action: str = "") -> str:
        return resource_path("charges", charge_id, action)

    def create(self, params: ChargeParams) -> Charge:
        if params.card is None and not params.token and not params.customer:
            raise ValueError("A charge needs a card, a card token or a customer")

        values: FormValues = []
        append_required(values, "amount", params.amount)
        append_required(values, "currency", params.currency)
        append_optional(values, "description", params.description)
        if params.capture is False:
            values.append(("capture", "false"))
        append_optional(values, "statement_description", params.statement_description)
        append_metadata(values, params.metadata)

        if params.card is not None:
            append_card_params(values, params.card)
        elif params.token:
            values.append(("card", params.token))
        else:
            values.append(("customer", params.customer))
        return self._request("POST", self.path(), Charge.from_response, values)

    def retrieve(self, charge_id: str) -> Charge:
        return self._request("GET", self.path(charge_id), Charge.from_response)

    def refund(self, charge_id: str, amount: Optional[int] = None) -> Charge:
        """Refund the full charge, or ``amount`` minor units of it."""
        values: FormValues = []
        append_optional(values, "amount", amount)
        return self._request(
            "POST", self.path(charge_id, "refund"), Charge.from_response, values
        )

    def list(
        self,
        limit: int = 0,
        before: Optional[str] = None,
        after: Optional[str] = None,
        *,
        customer: Optional[str] = None,
    ) -> ListResponse[Charge]:
        values = list_params(limit, before, after)
        append_optional(values, "customer", customer)
        return self._list(self.path(), Charge.from_response, values)

    def list_for_customer(
        self,
        customer_id: str,
        limit: int = 0,
        before: Optional[str] = None,
        after: Optional[str] = None,
    ) -> ListResponse[Charge]:
        return self.list(limit, before, after, customer=customer_id)
