"""Layer 1: calendar arithmetic (month lengths and whole-month stepping).

All datetimes are naive. The leap-year rule lives in one place: the
``datetime.date`` normalization used by ``days_in_month``.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from epochs.types import MAX_YEAR, MIN_YEAR, RangeOverflowError


def trunc_divmod(x: int, d: int) -> tuple[int, int]:
    """Integer division rounding toward zero; the remainder takes x's sign."""
    q, r = divmod(abs(x), d)
    return (-q, -r) if x < 0 else (q, r)


def checked_add(moment: datetime, delta: timedelta) -> datetime:
    """moment + delta, raising RangeOverflowError instead of OverflowError."""
    try:
        return moment + delta
    except OverflowError as e:
        raise RangeOverflowError(
            moment, f"adding {delta!r} leaves years {MIN_YEAR}..{MAX_YEAR}"
        ) from e


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given calendar month.

    Found as the day before the first of the following month, so
    December 9999 has no answer (the following month is unrepresentable).
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")

    # The first day of the next month...
    y, m = (year + 1, 1) if month == 12 else (year, month + 1)
    try:
        first = date(y, m, 1)
    except ValueError as e:
        raise RangeOverflowError(
            (year, month), f"year {y} outside {MIN_YEAR}..{MAX_YEAR}"
        ) from e

    # ...is preceded by the last day of the original month
    return (first - timedelta(days=1)).day


def is_leap_year(year: int) -> bool:
    """True if February of the given year has 29 days."""
    return days_in_month(year, 2) == 29


def _plus_month(moment: datetime) -> datetime:
    """Advance by the length of the month moment is in."""
    days = days_in_month(moment.year, moment.month)
    return checked_add(moment, timedelta(days=days))


def _minus_month(moment: datetime) -> datetime:
    """Step back by the length of the month preceding moment's month."""
    y, m = (moment.year - 1, 12) if moment.month == 1 else (moment.year, moment.month - 1)
    if y < MIN_YEAR:
        raise RangeOverflowError(moment, f"year {y} below {MIN_YEAR}")
    return checked_add(moment, timedelta(days=-days_in_month(y, m)))


def add_calendar_months(moment: datetime, months: int) -> datetime:
    """Advance moment by a whole number of calendar months.

    Whole years are applied to the year field first; the remaining
    months (at most 11 either way) are stepped one at a time, each step
    sized by the month being traversed.
    """
    years, remainder = trunc_divmod(months, 12)

    new_year = moment.year + years
    if not MIN_YEAR <= new_year <= MAX_YEAR:
        raise RangeOverflowError(
            moment, f"adding {months} months gives year {new_year}"
        )
    try:
        moment = moment.replace(year=new_year)
    except ValueError as e:
        raise RangeOverflowError(
            moment, f"{moment.date().isoformat()} does not exist in year {new_year}"
        ) from e

    step = _plus_month if remainder > 0 else _minus_month
    for _ in range(abs(remainder)):
        moment = step(moment)
    return moment
