"""
Helpers for building the form-encoded bodies sent to the API.

Parameters are collected as an ordered list of ``(key, value)`` pairs, which
``requests`` accepts for both ``data=`` and ``params=``. Optional fields are
only added when they carry a value, so the API never sees empty strings for
fields the caller did not set.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple

from .timestamps import to_unix

__all__ = [
    "FormValues",
    "append_metadata",
    "append_optional",
    "append_required",
    "encode_value",
    "list_params",
]

FormValues = List[Tuple[str, str]]


def encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return str(to_unix(value))
    return str(value)


def append_required(values: FormValues, key: str, value: Any) -> None:
    values.append((key, encode_value(value)))


def append_optional(values: FormValues, key: str, value: Any) -> None:
    """
    Add ``key=value`` unless ``value`` is ``None``, empty, zero or ``False``.

    Fields where zero or ``False`` is meaningful should be checked against
    ``None`` by the caller and sent with :func:`append_required`.
    """
    if value is None or value == "" or value is False:
        return
    if isinstance(value, int) and not isinstance(value, bool) and value == 0:
        return
    append_required(values, key, value)


def append_metadata(values: FormValues, metadata: Optional[Mapping[str, str]]) -> None:
    if not metadata:
        return
    for key, value in metadata.items():
        values.append((f"metadata[{key}]", encode_value(value)))


def list_params(
    limit: int = 0,
    before: Optional[str] = None,
    after: Optional[str] = None,
) -> FormValues:
    """Cursor parameters shared by every list endpoint."""
    values: FormValues = []
    append_optional(values, "limit", limit)
    append_optional(values, "ending_before", before)
    append_optional(values, "starting_after", after)
    return values
