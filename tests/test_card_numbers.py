"""
Tests for the offline card number checks.
"""

import pytest

from stripe_payments.core.card_numbers import (
    CardNumberError,
    InvalidDigitError,
    card_brand,
    is_luhn_valid,
)
from stripe_payments.core.models import CardBrand

VALID_NUMBERS = [
    "4242424242424242",
    "5555555555554444",
    "378282246310005",
    "6011111111111117",
    "30569309025904",
    "3530111333300000",
]


@pytest.mark.parametrize("number", VALID_NUMBERS)
def test_known_test_cards_pass_checksum(number):
    assert is_luhn_valid(number) is True


def test_altered_last_digit_fails_checksum():
    assert is_luhn_valid("4242424242424241") is False


@pytest.mark.parametrize("number", VALID_NUMBERS)
def test_every_single_digit_change_is_detected(number):
    for position, original in enumerate(number):
        for replacement in "0123456789":
            if replacement == original:
                continue
            altered = number[:position] + replacement + number[position + 1:]
            assert is_luhn_valid(altered) is False, altered


def test_non_digit_raises_invalid_digit():
    with pytest.raises(InvalidDigitError) as excinfo:
        is_luhn_valid("abc123")
    assert excinfo.value.position == 2


def test_separators_are_not_digits():
    with pytest.raises(InvalidDigitError):
        is_luhn_valid("4242 4242 4242 4242")


def test_non_ascii_digits_are_rejected():
    with pytest.raises(InvalidDigitError):
        is_luhn_valid("42424242424242٤٢")


def test_empty_number_is_rejected():
    with pytest.raises(CardNumberError):
        is_luhn_valid("")


def test_invalid_digit_is_a_value_error():
    assert issubclass(InvalidDigitError, ValueError)


@pytest.mark.parametrize(
    "number, brand",
    [
        ("4242424242424242", CardBrand.VISA),
        ("4012888888881881", CardBrand.VISA),
        ("5105105105105100", CardBrand.MASTERCARD),
        ("5555555555554444", CardBrand.MASTERCARD),
        ("340000000000009", CardBrand.AMERICAN_EXPRESS),
        ("378282246310005", CardBrand.AMERICAN_EXPRESS),
        ("36227206271667", CardBrand.DINERS_CLUB),
        ("30569309025904", CardBrand.DINERS_CLUB),
        ("30000000000004", CardBrand.DINERS_CLUB),
        ("6011000000000000", CardBrand.DISCOVER),
        ("213100000000000", CardBrand.JCB),
        ("180000000000000", CardBrand.JCB),
        ("3530111333300000", CardBrand.JCB),
        ("9999999999999999", CardBrand.UNKNOWN),
        ("5600000000000000", CardBrand.UNKNOWN),
        ("6500000000000000", CardBrand.UNKNOWN),
        ("2000000000000000", CardBrand.UNKNOWN),
        ("30600000000000", CardBrand.UNKNOWN),
    ],
)
def test_card_brand(number, brand):
    assert card_brand(number) is brand


def test_card_brand_of_empty_number_is_unknown():
    assert card_brand("") is CardBrand.UNKNOWN


def test_short_prefixes_do_not_fail():
    assert card_brand("4") is CardBrand.VISA
    assert card_brand("5") is CardBrand.UNKNOWN
    assert card_brand("3") is CardBrand.JCB


def test_checks_are_repeatable():
    number = "4242424242424242"
    assert is_luhn_valid(number) == is_luhn_valid(number)
    assert card_brand(number) is card_brand(number)
