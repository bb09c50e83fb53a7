"""IMEI handling configuration.

Validation behavior is passed explicitly to construction calls rather than
held in process-wide state. ImeiConfig bundles the knobs a host application
threads through its own code; from_env() is only ever called explicitly.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import final

from imeitype.core.parsers import ValidationMode
from imeitype.core.result import Err, Ok
from imeitype.core.serialization import JsonImeiWriteOptions

ENV_VALIDATION: str = "IMEITYPE_VALIDATION"
ENV_JSON_WRITE: str = "IMEITYPE_JSON_WRITE"
ENV_JSON_NUMBERS_AS_STRINGS: str = "IMEITYPE_JSON_NUMBERS_AS_STRINGS"

_TRUE_VALUES: frozenset[str] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: frozenset[str] = frozenset({"0", "false", "no", "off", ""})


@final
@dataclass(frozen=True, slots=True)
class ImeiConfig:
    """Validation and JSON write policy for IMEI values."""

    validation: ValidationMode = ValidationMode.STRICT
    json_write: JsonImeiWriteOptions = JsonImeiWriteOptions.DEFAULT
    json_numbers_as_strings: bool = False  # ambient policy consulted by DEFAULT

    @staticmethod
    def from_env(environ: Mapping[str, str]) -> Ok[ImeiConfig] | Err[str]:
        """Build a config from environment-style variables; unset keys keep defaults."""
        raw_mode = environ.get(ENV_VALIDATION, ValidationMode.STRICT.value).strip().lower()
        try:
            validation = ValidationMode(raw_mode)
        except ValueError:
            allowed = ", ".join(m.value for m in ValidationMode)
            return Err(f"{ENV_VALIDATION} must be one of {allowed}, got '{raw_mode}'")

        raw_write = environ.get(ENV_JSON_WRITE, JsonImeiWriteOptions.DEFAULT.value).strip().lower()
        try:
            json_write = JsonImeiWriteOptions(raw_write)
        except ValueError:
            allowed = ", ".join(o.value for o in JsonImeiWriteOptions)
            return Err(f"{ENV_JSON_WRITE} must be one of {allowed}, got '{raw_write}'")

        raw_flag = environ.get(ENV_JSON_NUMBERS_AS_STRINGS, "").strip().lower()
        if raw_flag in _TRUE_VALUES:
            numbers_as_strings = True
        elif raw_flag in _FALSE_VALUES:
            numbers_as_strings = False
        else:
            return Err(f"{ENV_JSON_NUMBERS_AS_STRINGS} must be a boolean, got '{raw_flag}'")

        return Ok(ImeiConfig(
            validation=validation,
            json_write=json_write,
            json_numbers_as_strings=numbers_as_strings,
        ))


DEFAULT_CONFIG: ImeiConfig = ImeiConfig()
