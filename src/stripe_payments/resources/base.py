"""
Shared plumbing for the per-resource API objects.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional, TypeVar
from urllib.parse import quote

from ..core.errors import StripeDecodeError
from ..core.forms import FormValues
from ..core.models import DeleteResponse, ListResponse

if TYPE_CHECKING:
    from ..core.client import StripeClient

__all__ = ["ResourceAPI", "resource_path"]

T = TypeVar("T")


def resource_path(*segments: str) -> str:
    """Join path segments, quoting each identifier."""
    return "/" + "/".join(quote(segment, safe="") for segment in segments if segment)


def _decode(decoder: Callable[[Mapping[str, Any]], T], payload: Dict[str, Any]) -> T:
    try:
        return decoder(payload)
    except (KeyError, TypeError, ValueError) as exc:
        raise StripeDecodeError(f"Unexpected response shape: {exc}") from exc


class ResourceAPI:
    def __init__(self, client: "StripeClient") -> None:
        self._client = client

    def _request(
        self,
        method: str,
        path: str,
        decoder: Callable[[Mapping[str, Any]], T],
        params: Optional[FormValues] = None,
    ) -> T:
        payload = self._client.query(method, path, params)
        return _decode(decoder, payload)

    def _list(
        self,
        path: str,
        decoder: Callable[[Mapping[str, Any]], T],
        params: Optional[FormValues] = None,
    ) -> ListResponse[T]:
        payload = self._client.query("GET", path, params)
        return _decode(lambda body: ListResponse.from_response(body, decoder), payload)

    def _delete(self, path: str) -> bool:
        payload = self._client.query("DELETE", path)
        return _decode(DeleteResponse.from_response, payload).deleted
