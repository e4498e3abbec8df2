"""Shared test fixtures and data loading for epochs.

All test data lives in data/fixtures/ as JSON files.  This module loads
that data and exposes helper functions + pytest fixtures for the tests.

Reference instant: 2009-02-13 23:31:30 (Unix time 1234567890).
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


_reference = _load_json(FIXTURES_DIR / "reference.json")


# ---------------------------------------------------------------------------
# Reference constants derived from reference.json
# ---------------------------------------------------------------------------
REFERENCE = datetime.fromisoformat(_reference["datetime"])
REFERENCE_DISPLAY = _reference["display"]

# Raw value of the reference instant per format:  RAW["unix"] → 1234567890
RAW: dict[str, int | float] = dict(_reference["formats"])


# ---------------------------------------------------------------------------
# Convenience helpers (importable by test modules)
# ---------------------------------------------------------------------------
def civil(fields: list[int]):
    """CivilDateTime from a [year, month, day, hour, minute, second, ns] list."""
    from epochs.types import CivilDateTime

    return CivilDateTime(*fields)


def civil_from_iso(text: str):
    """CivilDateTime from an ISO datetime string (microsecond precision)."""
    from epochs.types import CivilDateTime

    return CivilDateTime.from_datetime(datetime.fromisoformat(text))


def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


def fixture_path(name: str) -> Path:
    """Path of a top-level fixture file, e.g. fixture_path("custom_formats")."""
    return FIXTURES_DIR / f"{name}.json"


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def reference() -> datetime:
    return REFERENCE


@pytest.fixture
def reference_civil():
    """The reference instant as a CivilDateTime."""
    from epochs.types import CivilDateTime

    return CivilDateTime.from_datetime(REFERENCE)


@pytest.fixture
def custom_catalog():
    """Built-in formats plus those in custom_formats.json."""
    from epochs.loaders import load_formats_json

    return load_formats_json(fixture_path("custom_formats"))
