import json
from unittest.mock import MagicMock, patch

import pytest

from stripe_payments.api import check_card
from stripe_payments.cli import run_cli
from stripe_payments.core.card_numbers import InvalidDigitError
from stripe_payments.core.models import CardBrand


def build_response(payload, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    response.text = json.dumps(payload)
    return response


def test_check_card_helper_strips_separators():
    result = check_card("4242 4242-4242 4242")
    assert result.brand is CardBrand.VISA
    assert result.luhn_valid is True
    assert result.last4 == "4242"


def test_check_card_helper_rejects_letters():
    with pytest.raises(InvalidDigitError):
        check_card("4242x")


def test_check_card_command(caplog):
    caplog.set_level("INFO")
    assert run_cli(["check-card", "378282246310005"]) == 0
    assert "American Express" in caplog.text


def test_check_card_command_fails_bad_checksum():
    assert run_cli(["check-card", "4242424242424241"]) == 1


def test_check_card_command_fails_malformed_number():
    assert run_cli(["check-card", "abc123"]) == 1


def test_retrieve_without_api_key(tmp_path, monkeypatch):
    monkeypatch.delenv("STRIPE_API_KEY", raising=False)
    assert run_cli(["--env-file", str(tmp_path / "none.env"), "retrieve", "plan", "gold"]) == 1


def test_retrieve_prints_json(tmp_path, capsys):
    payload = {
        "id": "gold",
        "name": "Gold Special",
        "amount": 2000,
        "currency": "usd",
        "interval": "month",
        "created": 1388534400,
    }
    with patch("requests.Session.request", return_value=build_response(payload)) as request:
        code = run_cli(
            [
                "--env-file",
                str(tmp_path / "none.env"),
                "--set",
                "STRIPE_API_KEY=sk_test_cli",
                "retrieve",
                "plan",
                "gold",
            ]
        )

    assert code == 0
    printed = json.loads(capsys.readouterr().out)
    assert printed["id"] == "gold"
    assert printed["interval"] == "month"
    assert printed["created"] == "2014-01-01T00:00:00+00:00"
    args, _ = request.call_args
    assert args == ("GET", "https://api.stripe.com/v1/plans/gold")


def test_retrieve_reports_api_errors(tmp_path):
    error = build_response({"error": {"message": "No such plan: gold"}}, status_code=404)
    with patch("requests.Session.request", return_value=error):
        code = run_cli(
            [
                "--env-file",
                str(tmp_path / "none.env"),
                "--set",
                "STRIPE_API_KEY=sk_test_cli",
                "retrieve",
                "plan",
                "gold",
            ]
        )
    assert code == 1
