"""
Customer subscriptions to a plan.

see https://stripe.com/docs/api#subscriptions
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from ..core.forms import FormValues, append_optional, list_params
from ..core.models import ListResponse, SubscriptionStatus
from ..core.timestamps import from_unix, from_unix_required
from .base import ResourceAPI, resource_path
from .cards import CardParams, append_card_source
from .coupons import Discount
from .plans import Plan

__all__ = [
    "Subscription",
    "SubscriptionParams",
    "SubscriptionsAPI",
]


@dataclass(frozen=True)
class Subscription:
    id: str
    customer: str
    status: SubscriptionStatus
    start: datetime
    current_period_start: datetime
    current_period_end: datetime
    plan: Optional[Plan] = None
    quantity: int = 1
    cancel_at_period_end: bool = False
    ended_at: Optional[datetime] = None
    trial_start: Optional[datetime] = None
    trial_end: Optional[datetime] = None
    canceled_at: Optional[datetime] = None
    discount: Optional[Discount] = None

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Subscription":
        return cls(
            id=payload["id"],
            customer=payload.get("customer", ""),
            # Statuses are a closed set; anything else is a decode failure.
            status=SubscriptionStatus(payload["status"]),
            start=from_unix_required(payload.get("start")),
            current_period_start=from_unix_required(payload.get("current_period_start")),
            current_period_end=from_unix_required(payload.get("current_period_end")),
            plan=Plan.from_optional(payload.get("plan")),
            quantity=int(payload.get("quantity") or 0),
            cancel_at_period_end=bool(payload.get("cancel_at_period_end")),
            ended_at=from_unix(payload.get("ended_at")),
            trial_start=from_unix(payload.get("trial_start")),
            trial_end=from_unix(payload.get("trial_end")),
            canceled_at=from_unix(payload.get("canceled_at")),
            discount=Discount.from_optional(payload.get("discount")),
        )


@dataclass(frozen=True)
class SubscriptionParams:
    """
    Options for creating or changing a subscription.

    ``trial_end`` overrides the plan's default trial. A ``card`` takes
    precedence over a ``token`` when both are given.
    """

    plan: Optional[str] = None
    coupon: Optional[str] = None
    prorate: Optional[bool] = None
    trial_end: Optional[datetime] = None
    quantity: Optional[int] = None
    card: Optional[CardParams] = None
    token: Optional[str] = None


def _subscription_values(params: SubscriptionParams) -> FormValues:
    values: FormValues = []
    append_optional(values, "plan", params.plan)
    append_optional(values, "coupon", params.coupon)
    if params.prorate is not None:
        values.append(("prorate", "true" if params.prorate else "false"))
    append_optional(values, "trial_end", params.trial_end)
    append_optional(values, "quantity", params.quantity)
    append_card_source(values, params.card, params.token)
    return values


class SubscriptionsAPI(ResourceAPI):
    @staticmethod
    def path(customer_id: str, subscription_id: str = "") -> str:
        return resource_path("customers", customer_id, "subscriptions", subscription_id)

    def create(self, customer_id: str, params: SubscriptionParams) -> Subscription:
        if not params.plan:
            raise ValueError("A plan is required to create a subscription")
        return self._request(
            "POST",
            self.path(customer_id),
            Subscription.from_response,
            _subscription_values(params),
        )

    def retrieve(self, customer_id: str, subscription_id: str) -> Subscription:
        return self._request(
            "GET", self.path(customer_id, subscription_id), Subscription.from_response
        )

    def update(
        self,
        customer_id: str,
        subscription_id: str,
        params: SubscriptionParams,
    ) -> Subscription:
        return self._request(
            "POST",
            self.path(customer_id, subscription_id),
            Subscription.from_response,
            _subscription_values(params),
        )

    def cancel(
        self,
        customer_id: str,
        subscription_id: str,
        *,
        at_period_end: bool = False,
    ) -> Subscription:
        """
        Cancel a subscription, immediately or once the current period ends.

        With ``at_period_end`` the subscription stays active and reports
        ``cancel_at_period_end``.
        """
        values: FormValues = []
        if at_period_end:
            values.append(("at_period_end", "true"))
        return self._request(
            "DELETE",
            self.path(customer_id, subscription_id),
            Subscription.from_response,
            values,
        )

    def list(
        self,
        customer_id: str,
        limit: int = 0,
        before: Optional[str] = None,
        after: Optional[str] = None,
    ) -> ListResponse[Subscription]:
        return self._list(
            self.path(customer_id),
            Subscription.from_response,
            list_params(limit, before, after),
        )
