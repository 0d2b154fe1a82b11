"""
Coupons, and the discounts they produce once applied to a customer.

see https://stripe.com/docs/api#coupons
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from ..core.forms import FormValues, append_optional, append_required, list_params
from ..core.models import CouponDuration, Currency, ListResponse
from ..core.timestamps import from_unix, from_unix_required
from .base import ResourceAPI, resource_path

__all__ = [
    "Coupon",
    "CouponParams",
    "CouponsAPI",
    "Discount",
]


@dataclass(frozen=True)
class Coupon:
    id: str
    duration: CouponDuration
    created: datetime
    livemode: bool = False
    amount_off: Optional[int] = None
    percent_off: Optional[int] = None
    currency: Optional[str] = None
    duration_in_months: Optional[int] = None
    max_redemptions: Optional[int] = None
    redeem_by: Optional[datetime] = None
    times_redeemed: int = 0
    valid: bool = True

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Coupon":
        return cls(
            id=payload["id"],
            duration=CouponDuration(payload["duration"]),
            created=from_unix_required(payload.get("created")),
            livemode=bool(payload.get("livemode")),
            amount_off=payload.get("amount_off"),
            percent_off=payload.get("percent_off"),
            currency=payload.get("currency"),
            duration_in_months=payload.get("duration_in_months"),
            max_redemptions=payload.get("max_redemptions"),
            redeem_by=from_unix(payload.get("redeem_by")),
            times_redeemed=int(payload.get("times_redeemed") or 0),
            valid=bool(payload.get("valid", True)),
        )


@dataclass(frozen=True)
class Discount:
    """The application of a coupon to a customer or subscription."""

    coupon: Coupon
    start: datetime
    customer: Optional[str] = None
    end: Optional[datetime] = None
    subscription: Optional[str] = None

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Discount":
        return cls(
            coupon=Coupon.from_response(payload["coupon"]),
            start=from_unix_required(payload.get("start")),
            customer=payload.get("customer"),
            end=from_unix(payload.get("end")),
            subscription=payload.get("subscription"),
        )

    @classmethod
    def from_optional(cls, payload: Optional[Mapping[str, Any]]) -> Optional["Discount"]:
        return None if payload is None else cls.from_response(payload)


@dataclass(frozen=True)
class CouponParams:
    """
    Options for creating a coupon.

    Exactly one of ``percent_off`` (1-100) or ``amount_off`` (with
    ``currency``) describes the discount. ``duration_in_months`` only applies
    to :attr:`CouponDuration.REPEATING`.
    """

    duration: CouponDuration
    percent_off: Optional[int] = None
    amount_off: Optional[int] = None
    currency: Optional[Currency | str] = None
    id: Optional[str] = None
    duration_in_months: Optional[int] = None
    max_redemptions: Optional[int] = None
    redeem_by: Optional[datetime] = None


class CouponsAPI(ResourceAPI):
    @staticmethod
    def path(coupon_id: str = "") -> str:
        return resource_path("coupons", coupon_id)

    def create(self, params: CouponParams) -> Coupon:
        if (params.percent_off is None) == (params.amount_off is None):
            raise ValueError("Exactly one of percent_off or amount_off is required")

        values: FormValues = []
        append_required(values, "duration", params.duration)
        if params.percent_off is not None:
            append_required(values, "percent_off", params.percent_off)
        else:
            append_required(values, "amount_off", params.amount_off)
            append_optional(values, "currency", params.currency)
        append_optional(values, "id", params.id)
        append_optional(values, "duration_in_months", params.duration_in_months)
        append_optional(values, "max_redemptions", params.max_redemptions)
        append_optional(values, "redeem_by", params.redeem_by)
        return self._request("POST", self.path(), Coupon.from_response, values)

    def retrieve(self, coupon_id: str) -> Coupon:
        return self._request("GET", self.path(coupon_id), Coupon.from_response)

    def delete(self, coupon_id: str) -> bool:
        return self._delete(self.path(coupon_id))

    def list(
        self,
        limit: int = 0,
        before: Optional[str] = None,
        after: Optional[str] = None,
    ) -> ListResponse[Coupon]:
        return self._list(self.path(), Coupon.from_response, list_params(limit, before, after))
