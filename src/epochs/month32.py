"""Google Calendar time: seconds counted in fixed 32-day "months".

The encoding is a flat mixed-radix number

    ((((years * 12 + month0) * 32 + day) * 24 + hour) * 60 + minute) * 60 + second

with years counted from 1970 and month0 from January = 0. Decoding
starts from 1969-12-31, the day before the Unix epoch, so that adding
``day`` lands on the right day of January 1970; the synthetic months are
then replaced by true calendar months.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from epochs.calendar import add_calendar_months, checked_add, trunc_divmod
from epochs.types import CivilDateTime, as_civil, check_int64

SECONDS_PER_DAY = 86_400
DAYS_PER_SYNTHETIC_MONTH = 32

MONTH32_EPOCH = datetime(1969, 12, 31)


def split_month32(total_seconds: int) -> tuple[int, int, int]:
    """Split into (synthetic_months, day_of_month, seconds_of_day).

    Both divisions truncate toward zero, so for values before 1970 all
    three parts are zero or negative and are subtracted from the anchor.
    """
    total_days, seconds = trunc_divmod(total_seconds, SECONDS_PER_DAY)
    months, days = trunc_divmod(total_days, DAYS_PER_SYNTHETIC_MONTH)
    return months, days, seconds


def month32_to_civil(total_seconds: int) -> CivilDateTime:
    """Convert Google Calendar seconds to a CivilDateTime.

    Only values from 1970 onwards decode to the instant civil_to_month32
    encoded; earlier values follow the truncating split.

    Raises RangeOverflowError if any step leaves years 1..9999.
    """
    check_int64(total_seconds, "total_seconds")
    months, days, seconds = split_month32(total_seconds)

    # First, add the days...
    moment = checked_add(MONTH32_EPOCH, timedelta(days=days))

    # ...then the months...
    moment = add_calendar_months(moment, months)

    # ...then the seconds
    moment = checked_add(moment, timedelta(seconds=seconds))
    return CivilDateTime.from_datetime(moment)


def civil_to_month32(moment: CivilDateTime | datetime) -> int:
    """Encode a civil datetime as Google Calendar seconds. Sub-seconds are dropped."""
    c = as_civil(moment)
    months = (c.year - 1970) * 12 + (c.month - 1)
    days = months * DAYS_PER_SYNTHETIC_MONTH + c.day
    return ((days * 24 + c.hour) * 60 + c.minute) * 60 + c.second
