"""Multi-encoding parser: int, text and UTF-8 bytes into the canonical IMEI magnitude.

read_* never raise. They return Ok(magnitude) or Err(InvalidFormat), with
the rejected input carried as text for diagnostics. ValidationMode selects
between full validation and a syntax-only parse.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from imeitype.core.errors import InvalidFormat
from imeitype.core.result import Err, Ok
from imeitype.core.validators import (
    check_int,
    check_int_syntax,
    check_text,
    check_text_syntax,
    check_utf8,
    check_utf8_syntax,
)

logger = logging.getLogger(__name__)

type Checker = Callable[[object], Ok[int] | Err[str]]


class ValidationMode(Enum):
    """How much checking construction performs.

    STRICT enforces length, range and checksum. SYNTAX_ONLY still requires
    a parseable digit string / non-negative 15-digit integer but stores it
    without range or checksum enforcement.
    """

    STRICT = "strict"
    SYNTAX_ONLY = "syntax_only"


def raw_text(raw: object) -> str:
    """Render a rejected input as text for error messages."""
    if raw is None:
        return ""
    if isinstance(raw, (bytes, bytearray, memoryview)):
        return bytes(raw).decode("utf-8", errors="replace")
    return str(raw)


def mask(text: str) -> str:
    """Keep the first 8 characters; full IMEIs never reach the logs."""
    return text[:8] + "********"


def _read(raw: object, checker: Checker, source: str) -> Ok[int] | Err[InvalidFormat]:
    match checker(raw):
        case Ok(number):
            return Ok(number)
        case Err(reason):
            text = raw_text(raw)
            logger.debug("Rejected IMEI input %s: %s", mask(text), reason)
            return Err(InvalidFormat.create(text, reason, source))


def read_int(
    number: int, *, mode: ValidationMode = ValidationMode.STRICT,
) -> Ok[int] | Err[InvalidFormat]:
    checker = check_int if mode is ValidationMode.STRICT else check_int_syntax
    return _read(number, checker, "parsers.read_int")


def read_text(
    text: str | None, *, mode: ValidationMode = ValidationMode.STRICT,
) -> Ok[int] | Err[InvalidFormat]:
    checker = check_text if mode is ValidationMode.STRICT else check_text_syntax
    return _read(text, checker, "parsers.read_text")


def read_utf8(
    data: bytes | bytearray | memoryview | None,
    *,
    mode: ValidationMode = ValidationMode.STRICT,
) -> Ok[int] | Err[InvalidFormat]:
    checker = check_utf8 if mode is ValidationMode.STRICT else check_utf8_syntax
    return _read(data, checker, "parsers.read_utf8")


def read(
    raw: int | str | bytes | bytearray | memoryview | None,
    *,
    mode: ValidationMode = ValidationMode.STRICT,
) -> Ok[int] | Err[InvalidFormat]:
    """Dispatch on the source encoding of raw."""
    if raw is None or isinstance(raw, str):
        return read_text(raw, mode=mode)
    if isinstance(raw, (bytes, bytearray, memoryview)):
        return read_utf8(raw, mode=mode)
    return read_int(raw, mode=mode)
