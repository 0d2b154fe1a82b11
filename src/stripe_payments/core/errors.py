"""
Exceptions raised while talking to the Stripe API.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__ = [
    "StripeAPIError",
    "StripeConnectionError",
    "StripeDecodeError",
    "StripeError",
]


class StripeError(Exception):
    """Base class for every failure of a request/response exchange."""


class StripeConnectionError(StripeError):
    """The request never produced an HTTP response."""


class StripeDecodeError(StripeError):
    """The response body could not be decoded into the expected record."""


class StripeAPIError(StripeError):
    """The API answered with a 4xx/5xx status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        error_type: Optional[str] = None,
        code: Optional[str] = None,
        param: Optional[str] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_type = error_type
        self.code = code
        self.param = param
        self.body = body or {}

    @classmethod
    def from_response(cls, status_code: int, payload: Any, text: str) -> "StripeAPIError":
        error = payload.get("error") if isinstance(payload, dict) else None
        if not isinstance(error, dict):
            return cls(
                f"Stripe responded with {status_code}: {text}",
                status_code=status_code,
            )
        return cls(
            error.get("message") or f"Stripe responded with {status_code}",
            status_code=status_code,
            error_type=error.get("type"),
            code=error.get("code"),
            param=error.get("param"),
            body=payload,
        )

    def __str__(self) -> str:
        return f"{self.status_code}: {self.message}"
