"""
Shared fixtures: a mocked ``requests.Session`` wired into a real client.
"""

import json
from typing import Any, Callable, Dict, List, Tuple
from unittest.mock import MagicMock

import pytest
import requests

from stripe_payments.core.client import StripeClient
from stripe_payments.core.config import StripeConfig

TEST_API_KEY = "sk_test_4eC39HqLyjWDarjtT1zdp7dc"


def build_response(payload: Any, status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    response.text = json.dumps(payload)
    return response


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture
def config() -> StripeConfig:
    return StripeConfig(api_key=TEST_API_KEY)


@pytest.fixture
def client(config: StripeConfig, session: MagicMock) -> StripeClient:
    return StripeClient(config, session=session)


@pytest.fixture
def respond(session: MagicMock) -> Callable[..., MagicMock]:
    """Queue the payload the next request returns."""

    def _respond(payload: Any, status_code: int = 200) -> MagicMock:
        response = build_response(payload, status_code)
        session.request.return_value = response
        return response

    return _respond


@pytest.fixture
def last_request(session: MagicMock) -> Callable[[], Tuple[str, str, Dict[str, Any]]]:
    """Return ``(method, url, kwargs)`` of the most recent request."""

    def _last_request() -> Tuple[str, str, Dict[str, Any]]:
        args, kwargs = session.request.call_args
        method, url = args
        return method, url, kwargs

    return _last_request


@pytest.fixture
def sent_form(session: MagicMock) -> Callable[[], List[Tuple[str, str]]]:
    """Return the form values (body or query string) of the most recent request."""

    def _sent_form() -> List[Tuple[str, str]]:
        _, kwargs = session.request.call_args
        return list(kwargs.get("data") or kwargs.get("params") or [])

    return _sent_form
