"""Format catalog: named epoch formats and per-format conversions.

Each format is a FormatDescriptor. Uniform formats go through the
tick transform in resolution.py; Google Calendar and ICQ time have
their own transforms in month32.py and fractional.py.

The per-format functions (``unix``, ``to_unix``, ...) return None when a
value has no civil equivalent. ``to_civil`` raises the underlying
ConversionError instead, for callers that want the reason.
"""

from __future__ import annotations

import enum
import uuid
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType

from epochs.fractional import civil_to_days, days_to_civil
from epochs.month32 import civil_to_month32, month32_to_civil
from epochs.resolution import civil_to_ticks, ticks_to_civil
from epochs.types import CivilDateTime, ConversionError


class FormatKind(enum.Enum):
    """Which transform a format is converted with."""

    UNIFORM = "uniform"
    MONTH32 = "month32"
    FRACTIONAL_DAY = "fractional_day"


@dataclass(frozen=True)
class FormatDescriptor:
    """Immutable description of one epoch format.

    For MONTH32 and FRACTIONAL_DAY formats divisor and offset_seconds
    are informational only: the unit is one second (or one day) and the
    offset is where the format's anchor lies relative to the Unix epoch.
    """

    name: str
    divisor: int
    offset_seconds: int
    kind: FormatKind = FormatKind.UNIFORM
    description: str = ""

    def to_civil(self, raw: int | float) -> CivilDateTime:
        """Convert a raw value. Raises ConversionError on failure."""
        if self.kind is FormatKind.MONTH32:
            return month32_to_civil(raw)
        if self.kind is FormatKind.FRACTIONAL_DAY:
            return days_to_civil(raw)
        return ticks_to_civil(raw, self.divisor, self.offset_seconds)

    def from_civil(self, moment: CivilDateTime | datetime) -> int | float:
        """Convert a civil datetime to a raw value. Never fails."""
        if self.kind is FormatKind.MONTH32:
            return civil_to_month32(moment)
        if self.kind is FormatKind.FRACTIONAL_DAY:
            return civil_to_days(moment)
        return civil_to_ticks(moment, self.divisor, self.offset_seconds)


_BUILTIN = (
    FormatDescriptor(
        "apfs", 1_000_000_000, 0,
        description="nanoseconds since 1970-01-01 (APFS filesystem)",
    ),
    FormatDescriptor(
        "chrome", 1_000_000, -11_644_473_600,
        description="microseconds since 1601-01-01 (Chrome/WebKit)",
    ),
    FormatDescriptor(
        "cocoa", 1, 978_307_200,
        description="seconds since 2001-01-01 (Cocoa/Core Data)",
    ),
    FormatDescriptor(
        "google_calendar", 1, -86_400, FormatKind.MONTH32,
        description="seconds in 32-day months since 1969-12-31",
    ),
    FormatDescriptor(
        "icq", 1, -2_209_161_600, FormatKind.FRACTIONAL_DAY,
        description="fractional days since 1899-12-30 (ICQ/OLE automation)",
    ),
    FormatDescriptor(
        "java", 1_000, 0,
        description="milliseconds since 1970-01-01",
    ),
    FormatDescriptor(
        "mozilla", 1_000_000, 0,
        description="microseconds since 1970-01-01 (Firefox)",
    ),
    FormatDescriptor(
        "symbian", 1_000_000, -62_167_219_200,
        description="microseconds since year 0",
    ),
    FormatDescriptor(
        "unix", 1, 0,
        description="seconds since 1970-01-01",
    ),
    FormatDescriptor(
        "uuid_v1", 10_000_000, -12_219_292_800,
        description="100 ns intervals since 1582-10-15 (RFC 4122)",
    ),
    FormatDescriptor(
        "windows_date", 10_000_000, -62_135_596_800,
        description="100 ns intervals since 0001-01-01 (.NET DateTime)",
    ),
    FormatDescriptor(
        "windows_file", 10_000_000, -11_644_473_600,
        description="100 ns intervals since 1601-01-01 (NTFS FILETIME)",
    ),
)

FORMATS: Mapping[str, FormatDescriptor] = MappingProxyType(
    {f.name: f for f in _BUILTIN}
)


def get_format(
    name: str, catalog: Mapping[str, FormatDescriptor] | None = None
) -> FormatDescriptor:
    """Look up a format by name. Raises KeyError listing the known names."""
    catalog = FORMATS if catalog is None else catalog
    try:
        return catalog[name]
    except KeyError:
        raise KeyError(
            f"unknown epoch format {name!r}; known formats: "
            f"{', '.join(sorted(catalog))}"
        ) from None


def to_civil(
    name: str,
    raw: int | float,
    catalog: Mapping[str, FormatDescriptor] | None = None,
) -> CivilDateTime:
    """Convert a raw value of the named format. Raises ConversionError."""
    return get_format(name, catalog).to_civil(raw)


def from_civil(
    name: str,
    moment: CivilDateTime | datetime,
    catalog: Mapping[str, FormatDescriptor] | None = None,
) -> int | float:
    """Convert a civil datetime to the named format."""
    return get_format(name, catalog).from_civil(moment)


def interpret(
    raw: int | float,
    catalog: Mapping[str, FormatDescriptor] | None = None,
) -> dict[str, CivilDateTime]:
    """Every reading of raw that converts successfully, in catalog order.

    Integers are tried against all formats; floats only against
    fractional-day formats.
    """
    catalog = FORMATS if catalog is None else catalog
    readings: dict[str, CivilDateTime] = {}
    for name, fmt in catalog.items():
        if isinstance(raw, float) and fmt.kind is not FormatKind.FRACTIONAL_DAY:
            continue
        try:
            readings[name] = fmt.to_civil(raw)
        except ConversionError:
            continue
    return readings


def _optional(name: str, raw: int | float) -> CivilDateTime | None:
    try:
        return FORMATS[name].to_civil(raw)
    except ConversionError:
        return None


# ---------------------------------------------------------------------------
# Per-format pairs
# ---------------------------------------------------------------------------


def apfs(num: int) -> CivilDateTime | None:
    """APFS time: nanoseconds since the Unix epoch."""
    return _optional("apfs", num)


def to_apfs(moment: CivilDateTime | datetime) -> int:
    """Nanoseconds since the Unix epoch."""
    return FORMATS["apfs"].from_civil(moment)


def chrome(num: int) -> CivilDateTime | None:
    """Chrome time: microseconds since 1601-01-01."""
    return _optional("chrome", num)


def to_chrome(moment: CivilDateTime | datetime) -> int:
    """Microseconds since 1601-01-01."""
    return FORMATS["chrome"].from_civil(moment)


def cocoa(num: int) -> CivilDateTime | None:
    """Cocoa time: seconds since 2001-01-01."""
    return _optional("cocoa", num)


def to_cocoa(moment: CivilDateTime | datetime) -> int:
    """Seconds since 2001-01-01; sub-seconds are dropped."""
    return FORMATS["cocoa"].from_civil(moment)


def google_calendar(num: int) -> CivilDateTime | None:
    """Google Calendar time: seconds in 32-day months since 1969-12-31."""
    return _optional("google_calendar", num)


def to_google_calendar(moment: CivilDateTime | datetime) -> int:
    """Seconds in 32-day months since 1969-12-31; sub-seconds are dropped."""
    return FORMATS["google_calendar"].from_civil(moment)


def icq(days: float) -> CivilDateTime | None:
    """ICQ time: days since 1899-12-30, with a fractional part."""
    return _optional("icq", days)


def to_icq(moment: CivilDateTime | datetime) -> float:
    """Days since 1899-12-30, fraction truncated to whole milliseconds."""
    return FORMATS["icq"].from_civil(moment)


def java(num: int) -> CivilDateTime | None:
    """Java time: milliseconds since the Unix epoch."""
    return _optional("java", num)


def to_java(moment: CivilDateTime | datetime) -> int:
    """Milliseconds since the Unix epoch."""
    return FORMATS["java"].from_civil(moment)


def mozilla(num: int) -> CivilDateTime | None:
    """Mozilla time: microseconds since the Unix epoch."""
    return _optional("mozilla", num)


def to_mozilla(moment: CivilDateTime | datetime) -> int:
    """Microseconds since the Unix epoch."""
    return FORMATS["mozilla"].from_civil(moment)


def symbian(num: int) -> CivilDateTime | None:
    """Symbian time: microseconds since year 0."""
    return _optional("symbian", num)


def to_symbian(moment: CivilDateTime | datetime) -> int:
    """Microseconds since year 0."""
    return FORMATS["symbian"].from_civil(moment)


def unix(num: int) -> CivilDateTime | None:
    """Unix time: seconds since 1970-01-01."""
    return _optional("unix", num)


def to_unix(moment: CivilDateTime | datetime) -> int:
    """Seconds since 1970-01-01; sub-seconds are dropped."""
    return FORMATS["unix"].from_civil(moment)


def uuid_v1(num: int) -> CivilDateTime | None:
    """UUID version 1 time: 100 ns intervals since 1582-10-15."""
    return _optional("uuid_v1", num)


def to_uuid_v1(moment: CivilDateTime | datetime) -> int:
    """100 ns intervals since 1582-10-15."""
    return FORMATS["uuid_v1"].from_civil(moment)


def windows_date(num: int) -> CivilDateTime | None:
    """Windows date time (.NET): 100 ns intervals since 0001-01-01."""
    return _optional("windows_date", num)


def to_windows_date(moment: CivilDateTime | datetime) -> int:
    """100 ns intervals since 0001-01-01."""
    return FORMATS["windows_date"].from_civil(moment)


def windows_file(num: int) -> CivilDateTime | None:
    """Windows file time (NTFS): 100 ns intervals since 1601-01-01."""
    return _optional("windows_file", num)


def to_windows_file(moment: CivilDateTime | datetime) -> int:
    """100 ns intervals since 1601-01-01."""
    return FORMATS["windows_file"].from_civil(moment)


# ---------------------------------------------------------------------------
# UUID helpers
# ---------------------------------------------------------------------------


def uuid_v1_ticks(value: uuid.UUID | str) -> int:
    """The 60-bit timestamp buried in a version 1 UUID.

    For "ca4892ce-4f7d-11ea-b77f-2e728ce88125" the timestamp is
    0x1ea4f7dca4892ce: time_hi without its version nibble, then
    time_mid, then time_low.
    """
    u = value if isinstance(value, uuid.UUID) else uuid.UUID(value)
    if u.version != 1:
        raise ValueError(f"{u} is a version {u.version} UUID, not version 1")
    return u.time


def uuid_v1_from_uuid(value: uuid.UUID | str) -> CivilDateTime | None:
    """Convert the timestamp of a version 1 UUID."""
    return uuid_v1(uuid_v1_ticks(value))
