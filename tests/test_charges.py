import pytest

from stripe_payments.core.models import Currency
from stripe_payments.resources.cards import CardParams
from stripe_payments.resources.charges import Charge, ChargeParams

CHARGE = {
    "id": "ch_103Jqj2eZvKYlo2C",
    "object": "charge",
    "created": 1388534400,
    "livemode": False,
    "paid": True,
    "amount": 400,
    "currency": "usd",
    "refunded": False,
    "captured": True,
    "card": {
        "id": "card_103Jqj2eZvKYlo2C",
        "type": "Visa",
        "last4": "4242",
        "exp_month": 6,
        "exp_year": 2030,
        "fingerprint": "Xt5EWLLDS7FJjR1c",
    },
    "balance_transaction": "txn_103Jqj",
    "customer": None,
    "description": "Charge for test@example.com",
    "dispute": {
        "charge": "ch_103Jqj2eZvKYlo2C",
        "amount": 400,
        "currency": "usd",
        "created": 1388620800,
        "reason": "general",
        "status": "needs_response",
        "evidence_due_by": 1389225600,
        "is_protected": False,
    },
    "amount_refunded": 0,
    "metadata": {},
}


def test_create_with_card(client, respond, last_request, sent_form):
    respond(CHARGE)

    charge = client.charges.create(
        ChargeParams(
            amount=400,
            currency=Currency.USD,
            card=CardParams(number="4242424242424242", exp_month=6, exp_year=2030, cvc="123"),
            description="Charge for test@example.com",
            metadata={"order_id": "6735"},
        )
    )

    assert isinstance(charge, Charge)
    assert charge.card.last4 == "4242"
    assert charge.dispute.status == "needs_response"
    assert charge.dispute.evidence_due_by is not None
    method, url, _ = last_request()
    assert (method, url) == ("POST", "https://api.stripe.com/v1/charges")
    assert sent_form() == [
        ("amount", "400"),
        ("currency", "usd"),
        ("description", "Charge for test@example.com"),
        ("metadata[order_id]", "6735"),
        ("card[number]", "4242424242424242"),
        ("card[exp_month]", "6"),
        ("card[exp_year]", "2030"),
        ("card[cvc]", "123"),
    ]


def test_create_with_token(client, respond, sent_form):
    respond(CHARGE)
    client.charges.create(ChargeParams(amount=400, currency="usd", token="tok_visa"))
    assert sent_form() == [("amount", "400"), ("currency", "usd"), ("card", "tok_visa")]


def test_create_for_customer(client, respond, sent_form):
    respond(CHARGE)
    client.charges.create(ChargeParams(amount=400, currency="usd", customer="cus_1"))
    assert sent_form()[-1] == ("customer", "cus_1")


def test_create_needs_a_source(client):
    with pytest.raises(ValueError):
        client.charges.create(ChargeParams(amount=400, currency="usd"))


@pytest.mark.parametrize(
    "capture, expected",
    [(None, []), (True, []), (False, [("capture", "false")])],
)
def test_capture_only_sent_when_disabled(client, respond, sent_form, capture, expected):
    respond(CHARGE)
    client.charges.create(
        ChargeParams(amount=400, currency="usd", token="tok_visa", capture=capture)
    )
    assert [pair for pair in sent_form() if pair[0] == "capture"] == expected


def test_refund_full_amount(client, respond, last_request, sent_form):
    respond(dict(CHARGE, refunded=True, amount_refunded=400))

    charge = client.charges.refund("ch_103Jqj2eZvKYlo2C")

    assert charge.refunded is True
    assert charge.amount_refunded == 400
    method, url, _ = last_request()
    assert method == "POST"
    assert url.endswith("/charges/ch_103Jqj2eZvKYlo2C/refund")
    assert sent_form() == []


def test_refund_partial_amount(client, respond, sent_form):
    respond(dict(CHARGE, amount_refunded=150))
    client.charges.refund("ch_103Jqj2eZvKYlo2C", amount=150)
    assert sent_form() == [("amount", "150")]


def test_list_for_customer(client, respond, last_request, sent_form):
    respond({"object": "list", "total_count": 1, "has_more": False, "data": [CHARGE]})

    page = client.charges.list_for_customer("cus_1", limit=10)

    assert page.data[0].id == "ch_103Jqj2eZvKYlo2C"
    method, url, _ = last_request()
    assert (method, url) == ("GET", "https://api.stripe.com/v1/charges")
    assert sent_form() == [("limit", "10"), ("customer", "cus_1")]


def test_list_without_filters(client, respond, sent_form):
    respond({"object": "list", "total_count": 0, "has_more": False, "data": []})
    page = client.charges.list()
    assert page.total_count == 0
    assert page.data == ()
    assert sent_form() == []
