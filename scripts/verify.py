#!/usr/bin/env python
"""Visual verification report for epochs.

Run:  uv run python scripts/verify.py

Produces a formatted report showing:
  1. Format catalog (divisor, offset, kind) and the reference instant
  2. Layer 1 tests (days_in_month, add_calendar_months)  -- input/output tables
  3. Uniform tick formats  -- forward/backward tables
  4. Google Calendar and ICQ formats  -- forward/backward tables
"""

from __future__ import annotations

import json
import sys
from datetime import datetime
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths and data loading
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
FIXTURES = ROOT / "data" / "fixtures"
SCENARIOS = FIXTURES / "scenarios"

sys.path.insert(0, str(ROOT / "src"))

from epochs.calendar import add_calendar_months, days_in_month
from epochs.debug import show_interpretations, show_month32
from epochs.formats import FORMATS, from_civil, to_civil
from epochs.fractional import civil_to_days, days_to_civil
from epochs.month32 import civil_to_month32, month32_to_civil
from epochs.types import CivilDateTime, ConversionError


def _load(path: Path):
    with open(path) as f:
        return json.load(f)


_ref = _load(FIXTURES / "reference.json")

REFERENCE = datetime.fromisoformat(_ref["datetime"])

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------
WIDTH = 90


def banner(title: str):
    print()
    print("=" * WIDTH)
    print(f"  {title}")
    print("=" * WIDTH)


def heading(title: str):
    print()
    print(f"  {title}")
    print(f"  {'-' * (len(title) + 2)}")


def table(headers: list[str], rows: list[list[str]], indent: int = 4):
    """Print a formatted table with auto-sized columns."""
    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            col_widths[i] = max(col_widths[i], len(cell))

    pad = " " * indent
    fmt = pad + "  ".join(f"{{:<{w}}}" for w in col_widths)
    sep = pad + "  ".join("-" * w for w in col_widths)

    print(fmt.format(*headers))
    print(sep)
    for row in rows:
        # Pad short rows
        padded = row + [""] * (len(headers) - len(row))
        print(fmt.format(*padded))


def _civil(text: str) -> CivilDateTime:
    return CivilDateTime.from_datetime(datetime.fromisoformat(text))


def _attempt(fn, value) -> tuple[str, bool]:
    """(display, failed) for a forward conversion."""
    try:
        return str(fn(value)), False
    except ConversionError as e:
        return f"({type(e).__name__})", True


def _ok(flag: bool) -> str:
    return "OK" if flag else "FAIL"


# ---------------------------------------------------------------------------
# Section 1: Catalog and reference instant
# ---------------------------------------------------------------------------
def section_catalog():
    banner("FORMAT CATALOG")

    rows = []
    for name, fmt in FORMATS.items():
        rows.append([
            name, fmt.kind.value, f"{fmt.divisor:,}",
            f"{fmt.offset_seconds:,}", fmt.description,
        ])
    table(["Format", "Kind", "Divisor", "Offset (s)", "Description"], rows)

    heading(f"Reference instant: {_ref['display']}")
    rows = []
    for name, raw in _ref["formats"].items():
        forward = str(to_civil(name, raw))
        backward = from_civil(name, REFERENCE)
        rows.append([
            name, str(raw), forward, str(backward),
            _ok(forward == _ref["display"] and backward == raw),
        ])
    table(["Format", "Raw", "Forward", "Backward", ""], rows)

    heading("What could 1234567890 be?")
    print()
    show_interpretations(1234567890)


# ---------------------------------------------------------------------------
# Section 2: Layer 1  -- Calendar Arithmetic
# ---------------------------------------------------------------------------
def section_calendar_arithmetic():
    banner("LAYER 1: CALENDAR ARITHMETIC")

    data = _load(SCENARIOS / "calendar_arithmetic.json")

    heading("Function: days_in_month(year, month) -> int")
    rows = []
    for s in data["days_in_month"]:
        result = days_in_month(s["year"], s["month"])
        rows.append([
            s["id"], str(s["year"]), str(s["month"]), str(result),
            _ok(result == s["expected"]), s["notes"],
        ])
    table(["ID", "Year", "Month", "Days", "", "Notes"], rows)

    heading("Function: add_calendar_months(moment, months) -> datetime")
    print("    Whole years first, then one month-length step per month.\n")
    rows = []
    for s in data["add_calendar_months"]:
        start = datetime.fromisoformat(s["start"])
        result = add_calendar_months(start, s["months"])
        expected = datetime.fromisoformat(s["expected"])
        rows.append([
            s["id"], s["start"], str(s["months"]), result.isoformat(),
            _ok(result == expected), s["notes"],
        ])
    table(["ID", "Start", "Months", "Result", "", "Notes"], rows)


# ---------------------------------------------------------------------------
# Section 3: Uniform tick formats
# ---------------------------------------------------------------------------
def section_uniform():
    banner("UNIFORM TICK FORMATS")

    data = _load(SCENARIOS / "uniform.json")

    heading("Forward: ticks -> CivilDateTime")
    rows = []
    for s in data["forward"]:
        shown, _ = _attempt(lambda v: to_civil(s["format"], v), s["value"])
        rows.append([s["id"], s["format"], str(s["value"]), shown,
                     _ok(shown == s["expected"])])
    for s in data["overflow"]:
        shown, failed = _attempt(lambda v: to_civil(s["format"], v), s["value"])
        rows.append([s["id"], s["format"], str(s["value"]), shown, _ok(failed)])
    table(["ID", "Format", "Ticks", "Result", ""], rows)

    heading("Backward: CivilDateTime -> ticks")
    rows = []
    for s in data["backward"]:
        result = from_civil(s["format"], _civil(s["datetime"]))
        rows.append([s["id"], s["format"], s["datetime"], str(result),
                     _ok(result == s["expected"])])
    table(["ID", "Format", "Datetime", "Ticks", ""], rows)


# ---------------------------------------------------------------------------
# Section 4: Special formats
# ---------------------------------------------------------------------------
def section_special():
    banner("GOOGLE CALENDAR (32-DAY MONTHS) AND ICQ (FRACTIONAL DAYS)")

    data = _load(SCENARIOS / "month32.json")
    heading("Google Calendar")
    rows = []
    for s in data["forward"]:
        shown, _ = _attempt(month32_to_civil, s["value"])
        rows.append([s["id"], str(s["value"]), shown,
                     _ok(shown == s["expected"]), s["notes"]])
    for s in data["overflow"]:
        shown, failed = _attempt(month32_to_civil, s["value"])
        rows.append([s["id"], str(s["value"]), shown, _ok(failed), s["notes"]])
    for s in data["backward"]:
        result = civil_to_month32(_civil(s["datetime"]))
        rows.append([s["id"], s["datetime"], str(result),
                     _ok(result == s["expected"]), "backward"])
    table(["ID", "Input", "Output", "", "Notes"], rows)

    print()
    show_month32(_ref["formats"]["google_calendar"])

    data = _load(SCENARIOS / "fractional_day.json")
    heading("ICQ")
    rows = []
    for s in data["forward"]:
        shown, _ = _attempt(days_to_civil, s["value"])
        rows.append([s["id"], str(s["value"]), shown,
                     _ok(shown == s["expected"]), s["notes"]])
    for s in data["range_overflow"] + data["value_too_large"]:
        shown, failed = _attempt(days_to_civil, s["value"])
        rows.append([s["id"], str(s["value"]), shown, _ok(failed), s["notes"]])
    for s in data["backward"]:
        result = civil_to_days(_civil(s["datetime"]))
        close = abs(result - s["expected"]) <= max(s["tolerance"], 1e-9)
        rows.append([s["id"], s["datetime"], repr(result), _ok(close), "backward"])
    table(["ID", "Input", "Output", "", "Notes"], rows)


def main():
    section_catalog()
    section_calendar_arithmetic()
    section_uniform()
    section_special()
    print()


if __name__ == "__main__":
    main()
