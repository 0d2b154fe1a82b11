"""
HTTP client for the Stripe REST API.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from ..resources.cards import CardsAPI
from ..resources.charges import ChargesAPI
from ..resources.coupons import CouponsAPI
from ..resources.customers import CustomersAPI
from ..resources.invoice_items import InvoiceItemsAPI
from ..resources.invoices import InvoicesAPI
from ..resources.plans import PlansAPI
from ..resources.subscriptions import SubscriptionsAPI
from ..resources.tokens import TokensAPI
from .config import StripeConfig
from .errors import StripeAPIError, StripeConnectionError, StripeDecodeError
from .forms import FormValues

__all__ = ["StripeClient"]


class StripeClient:
    """
    Thin wrapper around a :class:`requests.Session` bound to one API key.

    Every resource is reachable as an attribute, e.g.
    ``client.customers.retrieve("cus_123")``.
    """

    def __init__(
        self,
        config: StripeConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()

        self.cards = CardsAPI(self)
        self.charges = ChargesAPI(self)
        self.coupons = CouponsAPI(self)
        self.customers = CustomersAPI(self)
        self.invoice_items = InvoiceItemsAPI(self)
        self.invoices = InvoicesAPI(self)
        self.plans = PlansAPI(self)
        self.subscriptions = SubscriptionsAPI(self)
        self.tokens = TokensAPI(self)

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.config.api_version:
            headers["Stripe-Version"] = self.config.api_version
        return headers

    def query(
        self,
        method: str,
        path: str,
        params: Optional[FormValues] = None,
    ) -> Dict[str, Any]:
        """
        Issue one request and return the decoded JSON object.

        ``POST`` sends ``params`` as a form body; every other method sends
        them in the query string.
        """
        method = method.upper()
        url = self.config.url(path)
        logging.info("Sending %s request to %s", method, url)

        kwargs: Dict[str, Any] = {
            "auth": (self.config.api_key, ""),
            "headers": self._headers(),
            "timeout": self.config.timeout_seconds,
        }
        if method == "POST":
            kwargs["data"] = params or []
        elif params:
            kwargs["params"] = params

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as exc:
            raise StripeConnectionError(f"{method} {url} failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            if response.status_code >= 400:
                raise StripeAPIError.from_response(
                    response.status_code, None, response.text
                ) from exc
            raise StripeDecodeError(
                f"Failed to parse JSON from Stripe at {url}: {response.text}"
            ) from exc

        if response.status_code >= 400:
            raise StripeAPIError.from_response(response.status_code, payload, response.text)
        if not isinstance(payload, dict):
            raise StripeDecodeError(f"Expected a JSON object from {url}, got {payload!r}")
        return payload
