"""Result[T, E] for fallible IMEI operations.

Ok[T] wraps a success value; Err[E] wraps an error value. Try-parse
entry points return a Result and never raise; callers pattern-match on
Ok/Err or fall back with .unwrap_or(INVALID_IMEI).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, NoReturn, final


@final
@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Success variant of Result."""

    value: T

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def map_err(self, f: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        return self

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value


@final
@dataclass(frozen=True, slots=True)
class Err[E]:
    """Error variant of Result."""

    error: E

    def map(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Translate the error, e.g. InvalidFormat into a codec-level error."""
        return Err(f(self.error))

    def unwrap(self) -> NoReturn:
        """Raise RuntimeError: an Err holds no value."""
        raise RuntimeError(f"Called unwrap on Err: {self.error}")

    def unwrap_or[T](self, default: T) -> T:
        return default


type Result[T, E] = Ok[T] | Err[E]


def unwrap[T](result: Ok[T] | Err[Any]) -> T:
    """Extract the Ok value or raise RuntimeError. Test/boundary code only."""
    if isinstance(result, Ok):
        return result.value
    if isinstance(result, Err):
        raise RuntimeError(f"unwrap on Err: {result.error}")
    raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")
