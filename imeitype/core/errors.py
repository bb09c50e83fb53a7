"""IMEI error values and the exception raised by parse-or-fail entry points.

Errors are frozen dataclass values so they can be pattern-matched, logged
and serialized. Every rejected input, whatever its encoding and whichever
sub-check failed, is reported as InvalidFormat; only the message differs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final


@dataclass(frozen=True, slots=True)
class ImeiError:
    """Base error value. NOT @final: has subclasses."""

    message: str
    code: str
    source: str  # "module.function" that produced this error

    def to_dict(self) -> dict[str, object]:
        return {
            "message": self.message,
            "code": self.code,
            "source": self.source,
        }


@final
@dataclass(frozen=True, slots=True)
class InvalidFormat(ImeiError):
    """Input is not a valid IMEI: wrong length, non-numeric, out of range or bad checksum."""

    raw: str     # the rejected input, rendered as text
    reason: str  # which sub-check failed

    @staticmethod
    def create(raw: str, reason: str, source: str) -> InvalidFormat:
        return InvalidFormat(
            message=f"'{raw}' is not a valid IMEI: {reason}",
            code="INVALID_FORMAT",
            source=source,
            raw=raw,
            reason=reason,
        )

    def to_dict(self) -> dict[str, object]:
        return {**ImeiError.to_dict(self), "raw": self.raw, "reason": self.reason}


@final
@dataclass(frozen=True, slots=True)
class JsonImeiError(ImeiError):
    """A JSON scalar could not be read as an IMEI."""

    json_type: str                # JSON type of the offending token
    cause: InvalidFormat | None   # None when the token type itself was wrong

    def to_dict(self) -> dict[str, object]:
        return {
            **ImeiError.to_dict(self),
            "json_type": self.json_type,
            "cause": None if self.cause is None else self.cause.to_dict(),
        }


class ImeiFormatError(ValueError):
    """Raised by the parse-or-fail constructors; wraps the InvalidFormat value."""

    def __init__(self, error: InvalidFormat) -> None:
        super().__init__(error.message)
        self.error = error

    @property
    def raw(self) -> str:
        return self.error.raw
