"""Temporal DataConverter that carries Imei values across workflow boundaries.

Imei values are written as zero-padded JSON strings so leading zeros survive
and non-Python workers see an exact value. Dataclasses are walked field by
field (not dataclasses.asdict) so nested Imei fields keep that encoding.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any

from temporalio.converter import (
    CompositePayloadConverter,
    DataConverter,
    DefaultPayloadConverter,
    JSONPlainPayloadConverter,
    JSONTypeConverter,
)

from imeitype.core.imei import Imei
from imeitype.core.result import Err, Ok
from imeitype.core.serialization import (
    JsonImeiWriteOptions,
    decode_imei,
    encode_imei,
    json_key,
)


def _to_json(obj: Any) -> Any:
    """Recursively convert values holding Imei fields to JSON-compatible values."""
    if isinstance(obj, Imei):
        return encode_imei(obj, write_options=JsonImeiWriteOptions.FORCE_STRING)
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            field.name: _to_json(getattr(obj, field.name))
            for field in dataclasses.fields(obj)
        }
    if isinstance(obj, (tuple, list)):
        return [_to_json(x) for x in obj]
    if isinstance(obj, dict):
        return {
            json_key(k): _to_json(v)
            for k, v in obj.items()
        }
    return obj


class ImeiPayloadJSONEncoder(json.JSONEncoder):
    """JSON encoder writing Imei values (also nested in dataclasses) as strings."""

    def default(self, o: Any) -> Any:
        result = _to_json(o)
        if result is not o:
            return result
        return super().default(o)


class ImeiJSONTypeConverter(JSONTypeConverter):
    """Turn JSON strings/numbers back into Imei for Imei type hints."""

    def to_typed_value(self, hint: type, value: Any) -> Any:
        if hint is not Imei:
            return JSONTypeConverter.Unhandled
        match decode_imei(value):
            case Ok(imei):
                return imei
            case Err(error):
                raise TypeError(error.message)


class ImeiPayloadConverter(CompositePayloadConverter):
    """Payload converter with Imei-aware JSON handling."""

    def __init__(self) -> None:
        json_converter = JSONPlainPayloadConverter(
            encoder=ImeiPayloadJSONEncoder,
            custom_type_converters=[ImeiJSONTypeConverter()],
        )
        super().__init__(
            *(
                c
                for c in DefaultPayloadConverter.default_encoding_payload_converters
                if not isinstance(c, JSONPlainPayloadConverter)
            ),
            json_converter,
        )


IMEI_DATA_CONVERTER = DataConverter(
    payload_converter_class=ImeiPayloadConverter,
)
