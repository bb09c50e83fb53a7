"""
demo_imei.py -- A walkthrough of the imeitype building blocks.

An IMEI (International Mobile Equipment Identity) is 15 decimal digits:

    35 | 630348 | 991680 | 7
    TAC  FAC      SNR      check digit (Luhn)

We will:
  1. Parse an IMEI from text, an integer and UTF-8 bytes
  2. Read its sub-fields and render it back in each encoding
  3. Reject bad input, both with exceptions and with Ok/Err results
  4. Construct without checksum enforcement (syntax-only mode)
  5. Generate random IMEIs, reproducibly and securely
  6. Write and read IMEIs as JSON

Run this:  .venv/bin/python demo_imei.py
"""

from __future__ import annotations

import logging
import os

from imeitype.core.errors import ImeiFormatError
from imeitype.core.generators import new_random_secure, new_random_seeded
from imeitype.core.imei import INVALID_IMEI, Imei, is_valid, try_parse
from imeitype.core.parsers import ValidationMode
from imeitype.core.result import Err, Ok
from imeitype.core.serialization import (
    JsonImeiWriteOptions,
    dumps_imei,
    loads_imei,
)
from imeitype.infra.config import DEFAULT_CONFIG, ImeiConfig
from imeitype.infra.log import setup_logging

log = logging.getLogger("demo_imei")


def main() -> None:
    setup_logging(logging.DEBUG)

    match ImeiConfig.from_env(os.environ):
        case Ok(config):
            pass
        case Err(reason):
            log.warning("Ignoring environment: %s", reason)
            config = DEFAULT_CONFIG

    # 1. Three encodings, one value.
    from_text = Imei.from_text("356303489916807")
    from_int = Imei.from_int(356303489916807)
    from_bytes = Imei.from_utf8(b"356303489916807")
    assert from_text == from_int == from_bytes
    print(f"Parsed: {from_text}")

    # 2. Sub-fields come from integer arithmetic on the stored value.
    print(f"  TAC={from_text.tac:02d}  FAC={from_text.fac:06d}  SNR={from_text.snr:06d}")
    print(f"  int={from_text.to_int()}  bytes={from_text.to_utf8()!r}")

    # Leading zeros are kept when rendering.
    print(f"  smallest valid IMEI renders as {Imei.from_int(18)}")

    # 3a. Parse-or-fail raises ImeiFormatError (a ValueError).
    try:
        Imei.from_text("123456789012345")
    except ImeiFormatError as e:
        print(f"Rejected: {e}")

    # 3b. Try-parse never raises.
    match try_parse("49015420323751X"):
        case Ok(imei):
            print(f"Unexpected success: {imei}")
        case Err(error):
            print(f"Try-parse failed ({error.reason}); falls back to {INVALID_IMEI.to_int()}")

    # 4. Validation mode is passed explicitly at each call site.
    loose = Imei.from_int(123456789012345, mode=ValidationMode.SYNTAX_ONLY)
    print(f"Syntax-only: stored {loose}, is_valid={is_valid(loose)}")
    print(f"Configured mode: {config.validation.value}")

    # 5. Random generation.
    print(f"Seeded (42): {new_random_seeded(42)} == {new_random_seeded(42)}")
    print(f"Secure:      {new_random_secure()}")

    # 6. JSON.
    payload = {"device": from_text, "seen": [from_int]}
    for options in JsonImeiWriteOptions:
        match dumps_imei(payload, write_options=options,
                         numbers_as_strings=config.json_numbers_as_strings):
            case Ok(text):
                print(f"JSON {options.value:>12}: {text}")
            case Err(reason):
                print(f"JSON failed: {reason}")

    match loads_imei('"490154203237518"'):
        case Ok(imei):
            print(f"From JSON: {imei}")
        case Err(error):
            print(f"JSON decode failed: {error.message}")


if __name__ == "__main__":
    main()
