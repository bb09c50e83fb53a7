"""Random, checksum-consistent IMEI generation.

Digits are drawn and the Luhn sum is accumulated in the same loop, so the
check digit falls out at the end without re-validating the number.

new_random_seeded(seed) -> Imei: reproducible, for tests and fixtures.
new_random_secure() -> Imei: backed by the OS CSPRNG (secrets).
"""

from __future__ import annotations

import logging
import random
import secrets
from collections.abc import Callable, Iterator

from imeitype.core.imei import Imei, is_valid
from imeitype.core.layout import LENGTH

logger = logging.getLogger(__name__)

# (low, high_exclusive) -> int in [low, high_exclusive)
type RandomSource = Callable[[int, int], int]

# Two-digit Reporting Body Identifiers: the leading digits of real TACs.
REPORTING_BODY_IDS: tuple[tuple[int, int], ...] = (
    (0, 1), (1, 0), (3, 0), (3, 3), (3, 5), (4, 4),
    (4, 5), (4, 9), (5, 0), (5, 1), (5, 2), (5, 3),
    (5, 4), (8, 6), (9, 1), (9, 8), (9, 9),
)


def new_random(source: RandomSource) -> Imei:
    """Build a valid IMEI from the given entropy source."""
    index = source(0, len(REPORTING_BODY_IDS))
    if not 0 <= index < len(REPORTING_BODY_IDS):
        raise ValueError(
            f"random source returned {index}, expected an index 0-{len(REPORTING_BODY_IDS) - 1}"
        )
    rbi = REPORTING_BODY_IDS[index]

    total = 0
    number = 0
    # Position 14 is the check digit; positions are counted from the left,
    # so odd positions are also odd counted from the check digit.
    for position in range(LENGTH - 1):
        digit = rbi[position] if position < 2 else source(0, 10)
        if not 0 <= digit <= 9:
            raise ValueError(f"random source returned {digit}, expected a digit 0-9")
        weighted = digit
        if position % 2 == 1:
            weighted *= 2
            if weighted > 9:
                weighted -= 9
        total += weighted
        number = number * 10 + digit

    number = number * 10 + (10 - total % 10) % 10
    result = Imei(number)

    assert is_valid(result), f"generated IMEI {number} failed validation"
    return result


def new_random_seeded(seed: int) -> Imei:
    """Deterministic IMEI: the same seed always yields the same value."""
    return new_random(random.Random(seed).randrange)


def secure_source(low: int, high: int) -> int:
    return low + secrets.randbelow(high - low)


def new_random_secure() -> Imei:
    return new_random(secure_source)


def random_imeis(count: int, source: RandomSource = secure_source) -> Iterator[Imei]:
    """Iterator over count random IMEIs drawn from one source.

    A negative count raises ValueError here, not on first iteration.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    logger.debug("Generating %d random IMEIs", count)
    return _draw(count, source)


def _draw(count: int, source: RandomSource) -> Iterator[Imei]:
    for _ in range(count):
        yield new_random(source)
