"""IMEI layout: digit length, numeric bounds, sentinel and place values.

An IMEI is 15 decimal digits: TAC (2) | FAC (6) | SNR (6) | check digit (1).
The value is held as a plain integer, so leading zeros are implicit.
"""

from __future__ import annotations

from typing import Final

LENGTH: Final[int] = 15

# Smallest positive magnitude that passes the Luhn check (000000000000018).
# All-zero passes the checksum too but is reserved as the invalid sentinel.
MIN_VALUE: Final[int] = 18

# Largest 15-digit magnitude that passes the Luhn check.
MAX_VALUE: Final[int] = 999_999_999_999_994

# Largest magnitude that fits in 15 digits at all (syntactic bound).
MAX_MAGNITUDE: Final[int] = 10**LENGTH - 1

INVALID_VALUE: Final[int] = 0

# ---------------------------------------------------------------------------
# Sub-field place values
# ---------------------------------------------------------------------------

TAC_PLACE: Final[int] = 10**13   # digits 1-2
FAC_PLACE: Final[int] = 10**7    # digits 3-8
SNR_PLACE: Final[int] = 10       # digits 9-14
FIELD_MODULUS: Final[int] = 10**6
