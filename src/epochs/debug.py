"""ASCII visualisation for development-time verification.

This module is dev-only and not imported by production code.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import timedelta

from epochs.formats import FORMATS, FormatDescriptor
from epochs.month32 import MONTH32_EPOCH, split_month32
from epochs.types import ConversionError


def show_interpretations(
    raw: int | float,
    catalog: Mapping[str, FormatDescriptor] | None = None,
) -> str:
    """Print a table of what raw means in every format of the catalog.

    Formats that cannot convert raw show the failure reason instead.
    Returns the string and also prints to stdout.
    """
    catalog = FORMATS if catalog is None else catalog
    lines: list[str] = []

    name_width = max((len(n) for n in catalog), default=6)
    lines.append(f"{'Format':<{name_width}s}  Civil datetime")
    lines.append(f"{'-' * name_width}  {'-' * 29}")

    for name, fmt in catalog.items():
        try:
            cell = str(fmt.to_civil(raw))
        except ConversionError as e:
            cell = f"({e.reason})"
        except TypeError:
            cell = "(not applicable)"
        lines.append(f"{name:<{name_width}s}  {cell}")

    result = "\n".join(lines)
    print(result)
    return result


def show_month32(total_seconds: int) -> str:
    """Print the decomposition of a Google Calendar value step by step.

    Shows the synthetic month / day / second split and the anchor-relative
    day before the synthetic months are replaced by calendar months.
    Returns the string and also prints to stdout.
    """
    months, days, seconds = split_month32(total_seconds)
    years, month0 = divmod(months, 12)

    lines = [
        f"value:            {total_seconds}",
        f"synthetic months: {months}  (year {1970 + years}, month {month0 + 1})",
        f"day of month:     {days}",
        f"seconds of day:   {seconds}  ({timedelta(seconds=seconds)})",
        f"anchor + days:    {(MONTH32_EPOCH + timedelta(days=days)).date()}",
    ]

    result = "\n".join(lines)
    print(result)
    return result
