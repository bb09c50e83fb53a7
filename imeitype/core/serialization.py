"""JSON adapter for Imei values.

Writing: an Imei becomes a JSON number or string according to
JsonImeiWriteOptions. DEFAULT defers to the caller's ambient
numbers_as_strings policy. Dict keys are always written as strings.

Reading: decode_imei() accepts a JSON string or integer, strictly parses it
and maps any failure to a JsonImeiError. It never raises.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from imeitype.core.errors import InvalidFormat, JsonImeiError
from imeitype.core.imei import Imei, parse_int, parse_text
from imeitype.core.parsers import mask, raw_text
from imeitype.core.result import Err, Ok

logger = logging.getLogger(__name__)


class JsonImeiWriteOptions(Enum):
    """How an Imei is written to JSON."""

    DEFAULT = "default"            # number, unless numbers_as_strings is set
    FORCE_NUMBER = "force_number"  # {"imei": 356303489916807}
    FORCE_STRING = "force_string"  # {"imei": "356303489916807"}


def writes_as_string(write_options: JsonImeiWriteOptions, numbers_as_strings: bool) -> bool:
    match write_options:
        case JsonImeiWriteOptions.FORCE_NUMBER:
            return False
        case JsonImeiWriteOptions.FORCE_STRING:
            return True
        case _:
            return numbers_as_strings


def encode_imei(
    imei: Imei,
    *,
    write_options: JsonImeiWriteOptions = JsonImeiWriteOptions.DEFAULT,
    numbers_as_strings: bool = False,
) -> int | str:
    if writes_as_string(write_options, numbers_as_strings):
        return imei.to_text()
    return imei.to_int()


class ImeiJSONEncoder(json.JSONEncoder):
    """json.JSONEncoder writing Imei values per JsonImeiWriteOptions."""

    def __init__(
        self,
        *,
        write_options: JsonImeiWriteOptions = JsonImeiWriteOptions.DEFAULT,
        numbers_as_strings: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.write_options = write_options
        self.numbers_as_strings = numbers_as_strings

    def default(self, o: Any) -> Any:
        if isinstance(o, Imei):
            return encode_imei(
                o,
                write_options=self.write_options,
                numbers_as_strings=self.numbers_as_strings,
            )
        return super().default(o)


def json_key(key: object) -> str:
    """Dict key as json.dumps writes it; Imei keys become their 15-digit text."""
    if isinstance(key, Imei):
        return key.to_text()
    if isinstance(key, str):
        return key
    if key is None or isinstance(key, (bool, int, float)):
        return json.dumps(key)
    msg = f"keys must be str, int, float, bool, None or Imei, not {type(key).__name__}"
    raise TypeError(msg)


def to_json_value(
    obj: object,
    *,
    write_options: JsonImeiWriteOptions = JsonImeiWriteOptions.DEFAULT,
    numbers_as_strings: bool = False,
) -> Any:
    """Recursively convert obj to JSON-compatible values, including Imei dict keys."""
    if isinstance(obj, Imei):
        return encode_imei(
            obj, write_options=write_options, numbers_as_strings=numbers_as_strings,
        )
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj
    if isinstance(obj, (tuple, list)):
        return [
            to_json_value(x, write_options=write_options, numbers_as_strings=numbers_as_strings)
            for x in obj
        ]
    if isinstance(obj, Mapping):
        return {
            json_key(k): to_json_value(
                v, write_options=write_options, numbers_as_strings=numbers_as_strings,
            )
            for k, v in obj.items()
        }
    msg = f"Cannot serialize {type(obj).__name__}"
    raise TypeError(msg)


def dumps_imei(
    obj: object,
    *,
    write_options: JsonImeiWriteOptions = JsonImeiWriteOptions.DEFAULT,
    numbers_as_strings: bool = False,
) -> Ok[str] | Err[str]:
    """JSON text for obj. Returns Err on unsupported types instead of raising."""
    try:
        value = to_json_value(
            obj, write_options=write_options, numbers_as_strings=numbers_as_strings,
        )
    except TypeError as e:
        return Err(f"Unsupported type in IMEI JSON serialization: {e}")
    return Ok(json.dumps(value, separators=(",", ":")))


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------


def _json_type(token: object) -> str:
    if token is None:
        return "null"
    if isinstance(token, bool):
        return "boolean"
    if isinstance(token, (int, float)):
        return "number"
    if isinstance(token, str):
        return "string"
    if isinstance(token, (list, tuple)):
        return "array"
    if isinstance(token, Mapping):
        return "object"
    return type(token).__name__


def _decode_error(token: object, cause: InvalidFormat | None) -> JsonImeiError:
    json_type = _json_type(token)
    if cause is None:
        message = f"Failed to deserialize JSON {json_type} as IMEI"
    else:
        message = f"Failed to deserialize JSON field containing IMEI: {cause.message}"
    logger.debug("JSON IMEI decode failed for %s token %s", json_type, mask(raw_text(token)))
    return JsonImeiError(
        message=message,
        code="JSON_IMEI",
        source="serialization.decode_imei",
        json_type=json_type,
        cause=cause,
    )


def decode_imei(token: object) -> Ok[Imei] | Err[JsonImeiError]:
    """Read a decoded JSON scalar (string or integer) as an Imei."""
    if isinstance(token, str):
        return parse_text(token).map_err(lambda e: _decode_error(token, e))
    if isinstance(token, int) and not isinstance(token, bool):
        return parse_int(token).map_err(lambda e: _decode_error(token, e))
    return Err(_decode_error(token, None))


def loads_imei(document: str | bytes) -> Ok[Imei] | Err[JsonImeiError]:
    """Parse a JSON document consisting of a single IMEI scalar."""
    try:
        token = json.loads(document)
    except ValueError as e:  # JSONDecodeError, or UnicodeDecodeError for bytes
        return Err(JsonImeiError(
            message=f"Malformed JSON: {e}",
            code="JSON_IMEI",
            source="serialization.loads_imei",
            json_type="invalid",
            cause=None,
        ))
    return decode_imei(token)


def decode_imei_keys[V](mapping: Mapping[str, V]) -> Ok[dict[Imei, V]] | Err[JsonImeiError]:
    """Rebuild a dict keyed by Imei from a decoded JSON object."""
    result: dict[Imei, V] = {}
    for key, value in mapping.items():
        match decode_imei(key):
            case Err() as e:
                return e
            case Ok(imei):
                result[imei] = value
    return Ok(result)
