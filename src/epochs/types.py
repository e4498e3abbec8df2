"""Shared types: CivilDateTime and the conversion error hierarchy."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, datetime, timedelta

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

NANOS_PER_SECOND = 1_000_000_000

MIN_YEAR = MINYEAR
MAX_YEAR = MAXYEAR

UNIX_EPOCH = datetime(1970, 1, 1)

# 0001-01-01 00:00:00 and 9999-12-31 23:59:59
MIN_UNIX_SECONDS = -62_135_596_800
MAX_UNIX_SECONDS = 253_402_300_799


class ConversionError(ValueError):
    """Raised when an epoch value has no civil datetime equivalent."""

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Cannot convert {value!r}: {reason}")


class RangeOverflowError(ConversionError):
    """Raised when a result falls outside the representable calendar range."""


class ValueTooLargeError(ConversionError):
    """Raised when an input is rejected before any duration arithmetic."""


def reject_aware(dt: datetime, name: str) -> None:
    """Reject timezone-aware datetimes; all civil values are naive."""
    if dt.tzinfo is not None:
        raise TypeError(
            f"{name} must be a naive datetime (no tzinfo), "
            f"got tzinfo={dt.tzinfo!r}. "
            f"Epoch conversions carry no timezone."
        )


@dataclass(frozen=True, order=True)
class CivilDateTime:
    """Naive proleptic-Gregorian datetime with nanosecond resolution.

    Invariants:
        - (year, month, day) is a real calendar date within MIN_YEAR..MAX_YEAR
        - 0 <= hour < 24, 0 <= minute < 60, 0 <= second < 60
        - 0 <= nanosecond < 1_000_000_000

    Field order makes the default ordering chronological.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0

    def __post_init__(self) -> None:
        # datetime validates the calendar date and the time-of-day fields
        datetime(self.year, self.month, self.day, self.hour, self.minute, self.second)
        if not 0 <= self.nanosecond < NANOS_PER_SECOND:
            raise ValueError(
                f"nanosecond must be in 0..{NANOS_PER_SECOND - 1}, "
                f"got {self.nanosecond}"
            )

    @classmethod
    def from_datetime(
        cls, dt: datetime, nanosecond: int | None = None
    ) -> CivilDateTime:
        """Build from a naive datetime.

        nanosecond defaults to the datetime's microseconds scaled up; pass
        it explicitly to carry sub-microsecond digits.
        """
        reject_aware(dt, "dt")
        if nanosecond is None:
            nanosecond = dt.microsecond * 1000
        return cls(
            dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second, nanosecond
        )

    @classmethod
    def from_unix(cls, seconds: int, nanosecond: int = 0) -> CivilDateTime:
        """Build from whole Unix seconds plus a nanosecond fraction.

        Raises RangeOverflowError outside MIN_UNIX_SECONDS..MAX_UNIX_SECONDS.
        """
        if not MIN_UNIX_SECONDS <= seconds <= MAX_UNIX_SECONDS:
            raise RangeOverflowError(
                seconds,
                f"Unix seconds outside {MIN_UNIX_SECONDS}..{MAX_UNIX_SECONDS} "
                f"(years {MIN_YEAR}..{MAX_YEAR})",
            )
        return cls.from_datetime(
            UNIX_EPOCH + timedelta(seconds=seconds), nanosecond
        )

    @property
    def wall(self) -> datetime:
        """The datetime at whole-second resolution."""
        return datetime(
            self.year, self.month, self.day, self.hour, self.minute, self.second
        )

    @property
    def unix_seconds(self) -> int:
        """Whole seconds since 1970-01-01 00:00:00 (floor)."""
        delta = self.wall - UNIX_EPOCH
        return delta.days * 86_400 + delta.seconds

    def to_datetime(self) -> datetime:
        """Naive datetime; digits below one microsecond are truncated."""
        return self.wall.replace(microsecond=self.nanosecond // 1000)

    def __str__(self) -> str:
        text = (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )
        ns = self.nanosecond
        if ns == 0:
            return text
        if ns % 1_000_000 == 0:
            return f"{text}.{ns // 1_000_000:03d}"
        if ns % 1000 == 0:
            return f"{text}.{ns // 1000:06d}"
        return f"{text}.{ns:09d}"


def as_civil(moment: CivilDateTime | datetime) -> CivilDateTime:
    """Accept either a CivilDateTime or a naive datetime."""
    if isinstance(moment, CivilDateTime):
        return moment
    if isinstance(moment, datetime):
        return CivilDateTime.from_datetime(moment)
    raise TypeError(
        f"expected CivilDateTime or datetime, got {type(moment).__name__}"
    )


def check_int64(value: object, name: str = "value") -> int:
    """Validate a tick count: an int (not bool) within the signed 64-bit range."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not INT64_MIN <= value <= INT64_MAX:
        raise RangeOverflowError(value, f"{name} outside the signed 64-bit range")
    return value
