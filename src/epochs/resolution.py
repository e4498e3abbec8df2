"""Boundary: uniform tick counts ↔ CivilDateTime.

A uniform format counts ticks of 1/divisor second from a reference
instant that lies offset_seconds away from the Unix epoch:

    unix_seconds = ticks / divisor + offset_seconds
"""

from __future__ import annotations

from datetime import datetime

from epochs.calendar import trunc_divmod
from epochs.types import (
    INT64_MAX,
    INT64_MIN,
    NANOS_PER_SECOND,
    CivilDateTime,
    RangeOverflowError,
    as_civil,
    check_int64,
)


def _check_divisor(divisor: int) -> None:
    """Divisors must split one second into a whole number of nanoseconds."""
    if divisor <= 0 or NANOS_PER_SECOND % divisor != 0:
        raise ValueError(
            f"divisor must be a positive factor of {NANOS_PER_SECOND}, "
            f"got {divisor}"
        )


def ticks_to_civil(ticks: int, divisor: int, offset_seconds: int) -> CivilDateTime:
    """Convert a tick count to a CivilDateTime.

    Division truncates toward zero and the remainder keeps the sign of
    ticks; a negative remainder borrows one whole second so the result
    is the exact instant.

    Raises RangeOverflowError if ticks is outside int64, if shifting by
    offset_seconds overflows int64, or if the instant lies outside
    years 1..9999.
    """
    check_int64(ticks, "ticks")
    _check_divisor(divisor)

    q, r = trunc_divmod(ticks, divisor)
    nanos = r * (NANOS_PER_SECOND // divisor)

    t = q + offset_seconds
    if not INT64_MIN <= t <= INT64_MAX:
        raise RangeOverflowError(ticks, "offset overflows the signed 64-bit range")

    if nanos < 0:
        t -= 1
        nanos += NANOS_PER_SECOND
    try:
        return CivilDateTime.from_unix(t, nanos)
    except RangeOverflowError as e:
        # Report the caller's tick count, not the shifted seconds
        raise RangeOverflowError(ticks, e.reason) from e


def civil_to_ticks(
    moment: CivilDateTime | datetime,
    divisor: int,
    offset_seconds: int,
    *,
    legacy: bool = False,
) -> int:
    """Convert a civil datetime to a tick count, truncating toward zero.

    By default the count is computed exactly in integers. legacy=True
    reproduces the double-precision formula

        int(divisor * (unix_seconds + nanosecond / 1e9 - offset_seconds))

    whose result matches the exact one whenever the float arithmetic is
    exact, and may be one tick short (or lose low digits beyond 2**53)
    otherwise. Both paths saturate at INT64_MIN / INT64_MAX.
    """
    _check_divisor(divisor)
    civil = as_civil(moment)

    if legacy:
        q = civil.nanosecond / 1_000_000_000.0
        t = float(civil.unix_seconds)
        ticks = int(float(divisor) * (t + q - float(offset_seconds)))
    else:
        nanos = (civil.unix_seconds - offset_seconds) * NANOS_PER_SECOND
        nanos += civil.nanosecond
        ticks, _ = trunc_divmod(nanos, NANOS_PER_SECOND // divisor)
    return max(INT64_MIN, min(INT64_MAX, ticks))
