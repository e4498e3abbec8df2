"""Tests for CivilDateTime and the conversion errors.

Test data loaded from: data/fixtures/scenarios/types.json
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from conftest import civil, load_scenarios

_data = load_scenarios("types")
DISPLAY = _data["display"]
INVALID = _data["invalid"]
UNIX_SECONDS = _data["unix_seconds"]


# ---------------------------------------------------------------------------
# CivilDateTime
# ---------------------------------------------------------------------------
class TestCivilDateTime:
    """CivilDateTime invariants and behaviour."""

    @pytest.mark.parametrize("spec", DISPLAY, ids=lambda s: s["id"])
    def test_display(self, spec):
        """Fraction shown with 3, 6 or 9 digits, or not at all."""
        assert str(civil(spec["fields"])) == spec["expected"]

    @pytest.mark.parametrize("spec", INVALID, ids=lambda s: s["id"])
    def test_invalid_fields_rejected(self, spec):
        with pytest.raises(ValueError):
            civil(spec["fields"])

    @pytest.mark.parametrize("spec", UNIX_SECONDS, ids=lambda s: s["id"])
    def test_unix_seconds(self, spec):
        assert civil(spec["fields"]).unix_seconds == spec["expected"]

    @pytest.mark.parametrize("spec", UNIX_SECONDS, ids=lambda s: s["id"])
    def test_from_unix_inverts_unix_seconds(self, spec):
        from epochs.types import CivilDateTime

        value = civil(spec["fields"])
        rebuilt = CivilDateTime.from_unix(value.unix_seconds, value.nanosecond)
        assert rebuilt == value

    def test_from_unix_out_of_range(self):
        from epochs.types import (
            MAX_UNIX_SECONDS,
            MIN_UNIX_SECONDS,
            CivilDateTime,
            RangeOverflowError,
        )

        with pytest.raises(RangeOverflowError):
            CivilDateTime.from_unix(MAX_UNIX_SECONDS + 1)
        with pytest.raises(RangeOverflowError):
            CivilDateTime.from_unix(MIN_UNIX_SECONDS - 1)

    def test_from_datetime_scales_microseconds(self):
        from epochs.types import CivilDateTime

        value = CivilDateTime.from_datetime(datetime(2009, 2, 13, 23, 31, 30, 57))
        assert value.nanosecond == 57_000

    def test_from_datetime_explicit_nanosecond(self):
        from epochs.types import CivilDateTime

        value = CivilDateTime.from_datetime(
            datetime(2010, 3, 4, 14, 50, 16), nanosecond=559_001_600
        )
        assert str(value) == "2010-03-04 14:50:16.559001600"

    def test_to_datetime_truncates_nanoseconds(self):
        value = civil([2010, 3, 4, 14, 50, 16, 559_001_600])
        assert value.to_datetime() == datetime(2010, 3, 4, 14, 50, 16, 559_001)

    def test_aware_datetime_rejected(self):
        """Timezone-aware datetimes must be rejected."""
        from epochs.types import CivilDateTime

        with pytest.raises(TypeError, match="naive"):
            CivilDateTime.from_datetime(datetime(2009, 2, 13, tzinfo=timezone.utc))

    def test_ordering_is_chronological(self):
        earlier = civil([2009, 2, 13, 23, 31, 30, 999_999_999])
        later = civil([2009, 2, 13, 23, 31, 31, 0])
        assert earlier < later
        assert max(later, earlier) is later

    def test_frozen_dataclass(self):
        """CivilDateTime is immutable (frozen dataclass)."""
        value = civil([2009, 2, 13, 23, 31, 30, 0])
        with pytest.raises(AttributeError):
            value.year = 2010  # type: ignore[misc]

    def test_hashable(self):
        a = civil([2009, 2, 13, 23, 31, 30, 0])
        b = civil([2009, 2, 13, 23, 31, 30, 0])
        assert len({a, b}) == 1


class TestAsCivil:
    """as_civil accepts both representations."""

    def test_passes_civil_through(self):
        from epochs.types import as_civil

        value = civil([2009, 2, 13, 23, 31, 30, 0])
        assert as_civil(value) is value

    def test_converts_datetime(self):
        from epochs.types import as_civil

        assert as_civil(datetime(2009, 2, 13, 23, 31, 30)) == civil(
            [2009, 2, 13, 23, 31, 30, 0]
        )

    def test_rejects_other_types(self):
        from epochs.types import as_civil

        with pytest.raises(TypeError):
            as_civil("2009-02-13 23:31:30")  # type: ignore[arg-type]


class TestCheckInt64:

    def test_accepts_bounds(self):
        from epochs.types import INT64_MAX, INT64_MIN, check_int64

        assert check_int64(INT64_MAX) == INT64_MAX
        assert check_int64(INT64_MIN) == INT64_MIN

    def test_rejects_outside_bounds(self):
        from epochs.types import INT64_MAX, RangeOverflowError, check_int64

        with pytest.raises(RangeOverflowError):
            check_int64(INT64_MAX + 1)

    @pytest.mark.parametrize("value", [True, 1.0, "1", None])
    def test_rejects_non_int(self, value):
        from epochs.types import check_int64

        with pytest.raises(TypeError):
            check_int64(value)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------
class TestConversionErrors:
    """Error hierarchy construction and attributes."""

    def test_error_attributes(self):
        from epochs.types import RangeOverflowError

        err = RangeOverflowError(253402300800, "past year 9999")
        assert err.value == 253402300800
        assert err.reason == "past year 9999"
        assert "253402300800" in str(err)

    def test_hierarchy(self):
        from epochs.types import ConversionError, RangeOverflowError, ValueTooLargeError

        assert issubclass(RangeOverflowError, ConversionError)
        assert issubclass(ValueTooLargeError, ConversionError)
        assert issubclass(ConversionError, ValueError)

    def test_raise_and_catch(self):
        """Subclasses can be caught as ConversionError."""
        from epochs.types import ConversionError, ValueTooLargeError

        with pytest.raises(ConversionError) as exc_info:
            raise ValueTooLargeError(1e12, "too many days")
        assert exc_info.value.reason == "too many days"
