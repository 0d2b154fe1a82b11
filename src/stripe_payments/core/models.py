"""
Enumerations and response envelopes shared by every resource.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Generic, List, Mapping, Tuple, TypeVar

__all__ = [
    "CardBrand",
    "CouponDuration",
    "Currency",
    "DeleteResponse",
    "ListResponse",
    "PlanInterval",
    "SubscriptionStatus",
]

T = TypeVar("T")


class Currency(str, Enum):
    """ISO codes for the major currencies (not the full list)."""

    USD = "usd"
    EUR = "eur"
    GBP = "gbp"
    JPY = "jpy"
    CAD = "cad"
    HKD = "hkd"
    CNY = "cny"
    AUD = "aud"


class CardBrand(str, Enum):
    AMERICAN_EXPRESS = "American Express"
    DINERS_CLUB = "Diners Club"
    DISCOVER = "Discover"
    JCB = "JCB"
    MASTERCARD = "MasterCard"
    VISA = "Visa"
    UNKNOWN = "Unknown"

    @classmethod
    def from_label(cls, label: Any) -> "CardBrand":
        try:
            return cls(label)
        except ValueError:
            return cls.UNKNOWN


class SubscriptionStatus(str, Enum):
    TRIALING = "trialing"
    ACTIVE = "active"
    PAST_DUE = "past_due"
    CANCELED = "canceled"
    UNPAID = "unpaid"


class CouponDuration(str, Enum):
    FOREVER = "forever"
    ONCE = "once"
    REPEATING = "repeating"


class PlanInterval(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


@dataclass(frozen=True)
class ListResponse(Generic[T]):
    """
    A single page of a list endpoint.

    ``data`` keeps the order the API returned.
    """

    total_count: int
    has_more: bool
    data: Tuple[T, ...]

    @classmethod
    def from_response(
        cls,
        payload: Mapping[str, Any],
        decode_item: Callable[[Mapping[str, Any]], T],
    ) -> "ListResponse[T]":
        items: List[T] = [decode_item(item) for item in payload.get("data") or ()]
        return cls(
            total_count=int(payload.get("total_count", len(items))),
            has_more=bool(payload.get("has_more")),
            data=tuple(items),
        )

    def __iter__(self):
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class DeleteResponse:
    id: str
    deleted: bool

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "DeleteResponse":
        return cls(id=payload.get("id", ""), deleted=bool(payload.get("deleted")))
