"""
Single-use card tokens.

A token wraps card details so they can be passed to any API method in place
of the card itself. It can be used once: for a charge, or attached to a
customer.

see https://stripe.com/docs/api#tokens
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from ..core.forms import FormValues
from ..core.timestamps import from_unix_required
from .base import ResourceAPI, resource_path
from .cards import Card, CardParams, append_card_params

__all__ = [
    "Token",
    "TokensAPI",
]


@dataclass(frozen=True)
class Token:
    id: str
    created: datetime
    used: bool = False
    livemode: bool = False
    card: Optional[Card] = None

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Token":
        card = payload.get("card")
        return cls(
            id=payload["id"],
            created=from_unix_required(payload.get("created")),
            used=bool(payload.get("used")),
            livemode=bool(payload.get("livemode")),
            card=None if card is None else Card.from_response(card),
        )


class TokensAPI(ResourceAPI):
    @staticmethod
    def path(token_id: str = "") -> str:
        return resource_path("tokens", token_id)

    def create(self, card: CardParams) -> Token:
        values: FormValues = []
        append_card_params(values, card)
        return self._request("POST", self.path(), Token.from_response, values)

    def retrieve(self, token_id: str) -> Token:
        return self._request("GET", self.path(token_id), Token.from_response)
