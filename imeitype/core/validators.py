"""Structural validation: range + checksum for integers, length + digits + checksum for text.

check_* functions return Ok(magnitude) or Err(reason) so the parsers can
reuse the parsed magnitude; is_valid_* are the boolean predicates.
The *_syntax variants skip range and checksum enforcement and are used
when construction runs in ValidationMode.SYNTAX_ONLY.
"""

from __future__ import annotations

from collections.abc import Sequence

from imeitype.core.checksum import (
    digits_to_int,
    int_to_digits,
    luhn_is_valid,
    text_to_digits,
    utf8_to_digits,
)
from imeitype.core.layout import LENGTH, MAX_MAGNITUDE, MAX_VALUE, MIN_VALUE
from imeitype.core.result import Err, Ok


def _check_digits(digits: Sequence[int]) -> Ok[int] | Err[str]:
    number = digits_to_int(digits)
    if number < MIN_VALUE or number > MAX_VALUE:
        return Err(f"magnitude is outside [{MIN_VALUE}, {MAX_VALUE}]")
    if not luhn_is_valid(digits):
        return Err(f"check digit {digits[-1]} fails the Luhn checksum")
    return Ok(number)


def _check_int_type(number: object) -> Ok[int] | Err[str]:
    # bool is a subclass of int
    if isinstance(number, bool) or not isinstance(number, int):
        return Err(f"expected an integer, got {type(number).__name__}")
    return Ok(number)


def _check_text_type(text: object) -> Ok[str] | Err[str]:
    if text is None:
        return Err("input is None")
    if not isinstance(text, str):
        return Err(f"expected text, got {type(text).__name__}")
    return Ok(text)


def _check_utf8_type(data: object) -> Ok[bytes] | Err[str]:
    if data is None:
        return Err("input is None")
    if not isinstance(data, (bytes, bytearray, memoryview)):
        return Err(f"expected UTF-8 bytes, got {type(data).__name__}")
    return Ok(bytes(data))


# ---------------------------------------------------------------------------
# Strict checks
# ---------------------------------------------------------------------------


def check_int(number: object) -> Ok[int] | Err[str]:
    match _check_int_type(number):
        case Err() as e:
            return e
        case Ok(n):
            if n < MIN_VALUE or n > MAX_VALUE:
                return Err(f"magnitude is outside [{MIN_VALUE}, {MAX_VALUE}]")
            digits = int_to_digits(n)
            if not luhn_is_valid(digits):
                return Err(f"check digit {digits[-1]} fails the Luhn checksum")
            return Ok(n)


def check_text(text: object) -> Ok[int] | Err[str]:
    match _check_text_type(text):
        case Err() as e:
            return e
        case Ok(s):
            if len(s) != LENGTH:
                return Err(f"must be {LENGTH} characters, got {len(s)}")
            digits = text_to_digits(s)
            if digits is None:
                return Err("must contain only ASCII digits 0-9")
            return _check_digits(digits)


def check_utf8(data: object) -> Ok[int] | Err[str]:
    match _check_utf8_type(data):
        case Err() as e:
            return e
        case Ok(raw):
            if len(raw) != LENGTH:
                return Err(f"must be {LENGTH} bytes, got {len(raw)}")
            digits = utf8_to_digits(raw)
            if digits is None:
                return Err("must contain only ASCII digits 0-9")
            return _check_digits(digits)


# ---------------------------------------------------------------------------
# Syntax-only checks
# ---------------------------------------------------------------------------


def check_int_syntax(number: object) -> Ok[int] | Err[str]:
    match _check_int_type(number):
        case Err() as e:
            return e
        case Ok(n):
            if not 0 <= n <= MAX_MAGNITUDE:
                return Err(f"magnitude does not fit in {LENGTH} digits")
            return Ok(n)


def check_text_syntax(text: object) -> Ok[int] | Err[str]:
    match _check_text_type(text):
        case Err() as e:
            return e
        case Ok(s):
            if len(s) > LENGTH:
                return Err(f"must be at most {LENGTH} characters, got {len(s)}")
            digits = text_to_digits(s)
            if digits is None:
                return Err("must be non-empty and contain only ASCII digits 0-9")
            return Ok(digits_to_int(digits))


def check_utf8_syntax(data: object) -> Ok[int] | Err[str]:
    match _check_utf8_type(data):
        case Err() as e:
            return e
        case Ok(raw):
            if len(raw) > LENGTH:
                return Err(f"must be at most {LENGTH} bytes, got {len(raw)}")
            digits = utf8_to_digits(raw)
            if digits is None:
                return Err("must be non-empty and contain only ASCII digits 0-9")
            return Ok(digits_to_int(digits))


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def is_valid_int(number: object) -> bool:
    return isinstance(check_int(number), Ok)


def is_valid_text(text: object) -> bool:
    return isinstance(check_text(text), Ok)


def is_valid_utf8(data: object) -> bool:
    return isinstance(check_utf8(data), Ok)

