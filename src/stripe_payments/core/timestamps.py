"""
Conversions between API timestamps (Unix seconds) and ``datetime``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

__all__ = [
    "InvalidTimestampError",
    "from_unix",
    "from_unix_required",
    "to_unix",
]


class InvalidTimestampError(ValueError):
    """Raised when a response field is not a Unix timestamp."""


def from_unix(value: Any) -> Optional[datetime]:
    """Decode a nullable timestamp field. ``None`` stays ``None``."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidTimestampError(f"Invalid timestamp: {value!r}")
    try:
        seconds = int(value)
    except (TypeError, ValueError) as exc:
        raise InvalidTimestampError(f"Invalid timestamp: {value!r}") from exc
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def from_unix_required(value: Any) -> datetime:
    """Decode a timestamp field the API always sets; ``null`` maps to the epoch."""
    decoded = from_unix(value)
    if decoded is None:
        return datetime.fromtimestamp(0, tz=timezone.utc)
    return decoded


def to_unix(value: datetime) -> int:
    # Naive datetimes are taken to be UTC.
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp())
