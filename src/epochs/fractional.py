"""ICQ time: a floating-point day count since 1899-12-30.

The whole-day part is checked against MAX_DAYS before any arithmetic:
the largest day count whose length in milliseconds fits a signed 64-bit
integer.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta

from epochs.calendar import checked_add, trunc_divmod
from epochs.types import (
    INT64_MAX,
    CivilDateTime,
    ConversionError,
    RangeOverflowError,
    ValueTooLargeError,
    as_civil,
)

MILLIS_PER_DAY = 86_400_000.0

MAX_DAYS = INT64_MAX // 86_400_000

ICQ_EPOCH = datetime(1899, 12, 30)


def days_to_civil(days: float) -> CivilDateTime:
    """Convert an ICQ day count to a CivilDateTime.

    The fraction is truncated to whole milliseconds.

    Raises ValueTooLargeError for a whole-day count beyond MAX_DAYS (or an
    infinite input), ConversionError for NaN, and RangeOverflowError if
    the result leaves years 1..9999.
    """
    if isinstance(days, bool) or not isinstance(days, (int, float)):
        raise TypeError(f"days must be a float, got {type(days).__name__}")
    # Ints may be too large to convert to float at all
    if isinstance(days, int) and abs(days) > MAX_DAYS:
        raise ValueTooLargeError(
            days, f"whole-day count exceeds MAX_DAYS ({MAX_DAYS})"
        )
    if math.isnan(days):
        raise ConversionError(days, "day count is not a number")
    if math.isinf(days):
        raise ValueTooLargeError(days, "day count is infinite")

    whole_days = int(days)
    if abs(whole_days) > MAX_DAYS:
        raise ValueTooLargeError(
            days, f"whole-day count exceeds MAX_DAYS ({MAX_DAYS})"
        )

    milliseconds = int((days - float(whole_days)) * MILLIS_PER_DAY)

    try:
        day_delta = timedelta(days=whole_days)
    except OverflowError as e:
        # timedelta stops at 999,999,999 days, well past year 9999
        raise RangeOverflowError(days, "whole-day count leaves years 1..9999") from e

    moment = checked_add(ICQ_EPOCH, day_delta)
    moment = checked_add(moment, timedelta(milliseconds=milliseconds))
    return CivilDateTime.from_datetime(moment)


def civil_to_days(moment: CivilDateTime | datetime) -> float:
    """Convert a civil datetime to an ICQ day count.

    The distance from 1899-12-30 is truncated toward zero to whole
    milliseconds before dividing.
    """
    c = as_civil(moment)
    delta = c.wall - ICQ_EPOCH
    nanos = (delta.days * 86_400 + delta.seconds) * 1_000_000_000 + c.nanosecond
    millis, _ = trunc_divmod(nanos, 1_000_000)
    return millis / MILLIS_PER_DAY
