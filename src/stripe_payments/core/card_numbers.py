"""
Offline checks for raw credit card numbers.

Neither helper talks to the API: they exist so integrators can flag typos
before a card ever reaches :class:`stripe_payments.resources.cards.CardParams`.
"""

from __future__ import annotations

from .models import CardBrand

__all__ = [
    "CardNumberError",
    "InvalidDigitError",
    "card_brand",
    "is_luhn_valid",
]

_DIGITS = "0123456789"

_DINERS_CLUB_30X = ("300", "301", "302", "303", "304", "305")


class CardNumberError(ValueError):
    """Raised when a card number cannot be checked at all."""


class InvalidDigitError(CardNumberError):
    """Raised when a card number contains something other than 0-9."""

    def __init__(self, number: str, position: int) -> None:
        super().__init__(
            f"Card number contains a non-digit character {number[position]!r} "
            f"at position {position}"
        )
        self.position = position


def is_luhn_valid(number: str) -> bool:
    """
    Verify the Luhn (Mod 10) checksum of ``number``.

    Digits are scanned right to left; every second one is doubled and 9 is
    subtracted from products above 9. The number passes when the total is a
    multiple of 10.

    see http://en.wikipedia.org/wiki/Luhn_algorithm
    """
    if not number:
        raise CardNumberError("Card number must not be empty")

    total = 0
    for offset, char in enumerate(reversed(number)):
        if char not in _DIGITS:
            raise InvalidDigitError(number, len(number) - 1 - offset)
        digit = int(char)
        if offset % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def card_brand(number: str) -> CardBrand:
    """
    Guess the card brand from the leading digits of ``number``.

    Unrecognised prefixes, including the empty string, yield
    :attr:`CardBrand.UNKNOWN`.
    """
    if number.startswith("4"):
        return CardBrand.VISA
    if number[:2] in ("51", "52", "53", "54", "55"):
        return CardBrand.MASTERCARD
    if number[:2] in ("34", "37"):
        return CardBrand.AMERICAN_EXPRESS
    if number[:2] == "36" or number[:3] in _DINERS_CLUB_30X:
        return CardBrand.DINERS_CLUB
    if number.startswith("6011"):
        return CardBrand.DISCOVER
    if number[:4] in ("2131", "1800"):
        return CardBrand.JCB
    # Remaining 3-prefixed numbers are treated as JCB, except the 30x range
    # outside Diners Club. Unverified against the card networks.
    if number.startswith("3") and not number.startswith("30"):
        return CardBrand.JCB
    return CardBrand.UNKNOWN
