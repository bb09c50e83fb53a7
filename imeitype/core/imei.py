"""The Imei value type.

Imei holds one integer magnitude. Construction goes through the parsers:
  - Imei.from_int / from_text / from_utf8 / of: parse-or-fail, raise ImeiFormatError
  - try_parse / parse_int / parse_text / parse_utf8: try-parse, return Ok | Err
The dataclass constructor itself only checks that the magnitude fits in
15 digits; it is the trusted path used by the generator and the sentinel.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, final

from imeitype.core.checksum import int_to_digits
from imeitype.core.errors import ImeiFormatError, InvalidFormat
from imeitype.core.layout import (
    FAC_PLACE,
    FIELD_MODULUS,
    INVALID_VALUE,
    LENGTH,
    MAX_MAGNITUDE,
    SNR_PLACE,
    TAC_PLACE,
)
from imeitype.core.parsers import (
    ValidationMode,
    read,
    read_int,
    read_text,
    read_utf8,
)
from imeitype.core.result import Err, Ok
from imeitype.core.validators import (
    check_int,
    check_text,
    check_utf8,
    is_valid_text,
    is_valid_utf8,
)

type RawImei = int | str | bytes | bytearray | memoryview | None


@final
@dataclass(frozen=True, slots=True)
class Imei:
    """International Mobile Equipment Identity: 15 digits ending in a Luhn check digit.

    Equality and hashing use the magnitude only. There is no ordering.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Imei requires int, got {type(self.value).__name__}")
        if not 0 <= self.value <= MAX_MAGNITUDE:
            raise TypeError(f"Imei requires 0 <= value <= {MAX_MAGNITUDE}, got {self.value}")

    # --- parse-or-fail -----------------------------------------------------

    @classmethod
    def from_int(cls, number: int, *, mode: ValidationMode = ValidationMode.STRICT) -> Imei:
        return _or_raise(read_int(number, mode=mode))

    @classmethod
    def from_text(
        cls, text: str | None, *, mode: ValidationMode = ValidationMode.STRICT,
    ) -> Imei:
        return _or_raise(read_text(text, mode=mode))

    @classmethod
    def from_utf8(
        cls,
        data: bytes | bytearray | memoryview | None,
        *,
        mode: ValidationMode = ValidationMode.STRICT,
    ) -> Imei:
        return _or_raise(read_utf8(data, mode=mode))

    @classmethod
    def of(cls, raw: RawImei, *, mode: ValidationMode = ValidationMode.STRICT) -> Imei:
        """Parse-or-fail from any supported encoding."""
        return _or_raise(read(raw, mode=mode))

    # --- try-parse ----------------------------------------------------------

    @staticmethod
    def parse(raw: RawImei) -> Ok[Imei] | Err[InvalidFormat]:
        """Strict try-parse from any supported encoding. Never raises."""
        return try_parse(raw)

    # --- conversions --------------------------------------------------------

    def to_int(self) -> int:
        return self.value

    def to_text(self) -> str:
        """Decimal rendering zero-padded to 15 characters."""
        return f"{self.value:0{LENGTH}d}"

    def to_utf8(self) -> bytes:
        return self.to_text().encode("ascii")

    def to_chars(self) -> tuple[str, ...]:
        return tuple(self.to_text())

    def to_digits(self) -> tuple[int, ...]:
        return int_to_digits(self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.to_text()

    def __bytes__(self) -> bytes:
        return self.to_utf8()

    # --- sub-fields ---------------------------------------------------------

    @property
    def tac(self) -> int:
        """Type Allocation Code: digits 1-2."""
        return self.value // TAC_PLACE

    @property
    def fac(self) -> int:
        """Final Assembly Code: digits 3-8."""
        return self.value // FAC_PLACE % FIELD_MODULUS

    @property
    def snr(self) -> int:
        """Serial Number: digits 9-14."""
        return self.value // SNR_PLACE % FIELD_MODULUS


INVALID_IMEI: Final[Imei] = Imei(INVALID_VALUE)


def _or_raise(result: Ok[int] | Err[InvalidFormat]) -> Imei:
    match result:
        case Ok(number):
            return Imei(number)
        case Err(error):
            raise ImeiFormatError(error)


# ---------------------------------------------------------------------------
# Try-parse
# ---------------------------------------------------------------------------


def parse_int(number: int) -> Ok[Imei] | Err[InvalidFormat]:
    return read_int(number).map(Imei)


def parse_text(text: str | None) -> Ok[Imei] | Err[InvalidFormat]:
    return read_text(text).map(Imei)


def parse_utf8(data: bytes | bytearray | memoryview | None) -> Ok[Imei] | Err[InvalidFormat]:
    return read_utf8(data).map(Imei)


def try_parse(raw: RawImei) -> Ok[Imei] | Err[InvalidFormat]:
    """Strict try-parse dispatching on the source encoding."""
    return read(raw).map(Imei)


def try_parse_or_invalid(raw: RawImei) -> tuple[bool, Imei]:
    """(success, value) pair; value is INVALID_IMEI when success is False."""
    match try_parse(raw):
        case Ok(imei):
            return True, imei
        case _:
            return False, INVALID_IMEI


# ---------------------------------------------------------------------------
# Validity
# ---------------------------------------------------------------------------


def is_valid(value: Imei | RawImei) -> bool:
    """True iff value is, or parses strictly to, a valid IMEI.

    The INVALID_IMEI sentinel and any Imei built in syntax-only mode from a
    bad magnitude report False.
    """
    if isinstance(value, Imei):
        return value != INVALID_IMEI and isinstance(check_int(value.value), Ok)
    if value is None or isinstance(value, str):
        return is_valid_text(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return is_valid_utf8(value)
    return isinstance(check_int(value), Ok)


def explain_invalid(value: Imei | RawImei) -> str | None:
    """Reason value is not a valid IMEI, or None if is_valid(value) holds."""
    if isinstance(value, Imei):
        result = check_int(value.value)
    elif value is None or isinstance(value, str):
        result = check_text(value)
    elif isinstance(value, (bytes, bytearray, memoryview)):
        result = check_utf8(value)
    else:
        result = check_int(value)
    match result:
        case Err(reason):
            return reason
        case _:
            return None
