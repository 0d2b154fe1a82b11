"""
Plans: the pricing a subscription bills on a recurring basis.

see https://stripe.com/docs/api#plans
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
from ..core.models import Currency, ListResponse, PlanInterval
from ..core.timestamps import from_unix_required
from .base import ResourceAPI, resource_path

__all__ = [
    "Plan",
    "PlanParams",
    "PlanUpdateParams",
    "PlansAPI",
]


@dataclass(frozen=True)
class Plan:
    id: str
    name: str
    amount: int
    currency: str
    interval: PlanInterval
    created: datetime
    interval_count: int = 1
    trial_period_days: Optional[int] = None
    statement_description: Optional[str] = None
    livemode: bool = False
    metadata: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Plan":
        return cls(
            id=payload["id"],
            name=payload.get("name") or "",
            amount=int(payload.get("amount") or 0),
            currency=payload.get("currency", ""),
            interval=PlanInterval(payload["interval"]),
            created=from_unix_required(payload.get("created")),
            interval_count=int(payload.get("interval_count") or 1),
            trial_period_days=payload.get("trial_period_days"),
            statement_description=payload.get("statement_description"),
            livemode=bool(payload.get("livemode")),
            metadata=dict(payload.get("metadata") or {}),
        )

    @classmethod
    def from_optional(cls, payload: Optional[Mapping[str, Any]]) -> Optional["Plan"]:
        return None if payload is None else cls.from_response(payload)


@dataclass(frozen=True)
class PlanParams:
    """
    Options for creating a plan.

    ``amount`` is in minor units and may be 0 for a free plan.
    """

    id: str
    name: str
    amount: int
    currency: Currency | str
    interval: PlanInterval
    interval_count: int = 1
    trial_period_days: Optional[int] = None
    statement_description: Optional[str] = None
    metadata: Optional[Dict[str, str]] = None


@dataclass(frozen=True)
class PlanUpdateParams:
    """Only the name, statement description and metadata of a plan are editable."""

    name: Optional[str] = None
    statement_description: Optional[str] = None
    metadata: Optional[Dict[str, str]] = None


def _append_statement_description(values: FormValues, description: Optional[str]) -> None:
    # An empty string clears the description, so only None means "leave as is".
    if description is not None:
        append_required(values, "statement_description", description)


class PlansAPI(ResourceAPI):
    @staticmethod
    def path(plan_id: str = "") -> str:
        return resource_path("plans", plan_id)

    def create(self, params: PlanParams) -> Plan:
        values: FormValues = []
        append_required(values, "id", params.id)
        append_required(values, "name", params.name)
        append_required(values, "amount", params.amount)
        append_required(values, "interval", params.interval)
        append_required(values, "currency", params.currency)
        append_optional(values, "trial_period_days", params.trial_period_days)
        if params.interval_count > 1:
            append_required(values, "interval_count", params.interval_count)
        _append_statement_description(values, params.statement_description)
        append_metadata(values, params.metadata)
        return self._request("POST", self.path(), Plan.from_response, values)

    def retrieve(self, plan_id: str) -> Plan:
        return self._request("GET", self.path(plan_id), Plan.from_response)

    def update(self, plan_id: str, params: PlanUpdateParams) -> Plan:
        values: FormValues = []
        append_optional(values, "name", params.name)
        _append_statement_description(values, params.statement_description)
        append_metadata(values, params.metadata)
        return self._request("POST", self.path(plan_id), Plan.from_response, values)

    def delete(self, plan_id: str) -> bool:
        return self._delete(self.path(plan_id))

    def list(
        self,
        limit: int = 0,
        before: Optional[str] = None,
        after: Optional[str] = None,
    ) -> ListResponse[Plan]:
        return self._list(self.path(), Plan.from_response, list_params(limit, before, after))
