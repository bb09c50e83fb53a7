"""Luhn checksum over the 15 decimal digits of an IMEI.

luhn_is_valid() is the only weighting loop. The adapters below turn each
source encoding (int, text, UTF-8 bytes) into a tuple of digit values,
most significant first, so every encoding is checked by the same code.
"""

from __future__ import annotations

from collections.abc import Sequence

from imeitype.core.layout import LENGTH, MAX_MAGNITUDE

type Digits = tuple[int, ...]

_ASCII_ZERO = 0x30
_ASCII_NINE = 0x39


def luhn_sum(digits: Sequence[int]) -> int:
    """Weighted Luhn sum. The rightmost digit sits at index 0 and is never doubled."""
    total = 0
    for i, d in enumerate(reversed(digits)):
        if i % 2 == 1:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return total


def luhn_is_valid(digits: Sequence[int]) -> bool:
    """True iff exactly 15 digits are given and their Luhn sum is a multiple of 10."""
    if len(digits) != LENGTH:
        return False
    return luhn_sum(digits) % 10 == 0


def check_digit(body: Sequence[int]) -> int:
    """Check digit completing a 14-digit body into a Luhn-valid IMEI."""
    if len(body) != LENGTH - 1:
        raise ValueError(f"IMEI body must be {LENGTH - 1} digits, got {len(body)}")
    # The body's last digit lands on index 1 once the check digit is appended.
    return (10 - luhn_sum((*body, 0)) % 10) % 10


# ---------------------------------------------------------------------------
# Encoding adapters
# ---------------------------------------------------------------------------


def int_to_digits(number: int) -> Digits:
    """Split a magnitude into 15 digits, zero-padding the high positions."""
    if not 0 <= number <= MAX_MAGNITUDE:
        raise ValueError(f"IMEI magnitude must be within [0, {MAX_MAGNITUDE}], got {number}")
    digits = [0] * LENGTH
    for position in range(LENGTH - 1, -1, -1):
        number, digits[position] = divmod(number, 10)
    return tuple(digits)


def text_to_digits(text: str) -> Digits | None:
    """Digit values of text, or None if empty or any char is not ASCII 0-9."""
    if not text:
        return None
    digits: list[int] = []
    for c in text:
        code = ord(c)
        if code < _ASCII_ZERO or code > _ASCII_NINE:
            return None
        digits.append(code - _ASCII_ZERO)
    return tuple(digits)


def utf8_to_digits(data: bytes | bytearray | memoryview) -> Digits | None:
    """Digit values of UTF-8 text, or None if empty or any byte is not ASCII 0-9."""
    raw = bytes(data)
    if not raw:
        return None
    if any(b < _ASCII_ZERO or b > _ASCII_NINE for b in raw):
        return None
    return tuple(b - _ASCII_ZERO for b in raw)


def digits_to_int(digits: Sequence[int]) -> int:
    """Assemble digits (most significant first) into a magnitude."""
    number = 0
    for d in digits:
        number = number * 10 + d
    return number


def checksum_is_valid(number: int) -> bool:
    """Luhn check of a magnitude, treating missing high-order digits as zero.

    Negative magnitudes and magnitudes wider than 15 digits have no IMEI
    digit layout and are reported as invalid.
    """
    if not 0 <= number <= MAX_MAGNITUDE:
        return False
    return luhn_is_valid(int_to_digits(number))
