"""epochs: Convert epoch timestamps from many systems to civil datetimes and back."""

from epochs.calendar import add_calendar_months, days_in_month, is_leap_year
from epochs.formats import (
    FORMATS,
    FormatDescriptor,
    FormatKind,
    apfs,
    chrome,
    cocoa,
    from_civil,
    get_format,
    google_calendar,
    icq,
    interpret,
    java,
    mozilla,
    symbian,
    to_apfs,
    to_chrome,
    to_civil,
    to_cocoa,
    to_google_calendar,
    to_icq,
    to_java,
    to_mozilla,
    to_symbian,
    to_unix,
    to_uuid_v1,
    to_windows_date,
    to_windows_file,
    unix,
    uuid_v1,
    uuid_v1_from_uuid,
    uuid_v1_ticks,
    windows_date,
    windows_file,
)
from epochs.fractional import MAX_DAYS
from epochs.loaders import load_formats_json
from epochs.types import (
    CivilDateTime,
    ConversionError,
    RangeOverflowError,
    ValueTooLargeError,
)

__all__ = [
    "CivilDateTime",
    "ConversionError",
    "FORMATS",
    "FormatDescriptor",
    "FormatKind",
    "MAX_DAYS",
    "RangeOverflowError",
    "ValueTooLargeError",
    "add_calendar_months",
    "apfs",
    "chrome",
    "cocoa",
    "days_in_month",
    "from_civil",
    "get_format",
    "google_calendar",
    "icq",
    "interpret",
    "is_leap_year",
    "java",
    "load_formats_json",
    "mozilla",
    "symbian",
    "to_apfs",
    "to_chrome",
    "to_civil",
    "to_cocoa",
    "to_google_calendar",
    "to_icq",
    "to_java",
    "to_mozilla",
    "to_symbian",
    "to_unix",
    "to_uuid_v1",
    "to_windows_date",
    "to_windows_file",
    "unix",
    "uuid_v1",
    "uuid_v1_from_uuid",
    "uuid_v1_ticks",
    "windows_date",
    "windows_file",
]
