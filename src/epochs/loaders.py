"""Data loading utilities for format catalogs."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from epochs.formats import FORMATS, FormatDescriptor, FormatKind
from epochs.schema import validate_formats


def load_formats_json(
    path: str | Path, include_builtin: bool = True
) -> Mapping[str, FormatDescriptor]:
    """Load uniform formats from a JSON file into a new read-only catalog.

    The JSON file must have the format:
    {
        "formats": {
            "gps": {"divisor": 1, "offset_seconds": 315964800,
                    "description": "..."},
            ...
        }
    }

    Built-in formats come first unless include_builtin is False; loaded
    names may not shadow them. The built-in FORMATS mapping is never
    modified.

    Raises ValueError if validation fails.
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)

    entries = data.get("formats", data) if isinstance(data, dict) else data

    # Validate
    errors = validate_formats(entries, reserved=frozenset(FORMATS))
    if errors:
        raise ValueError(
            f"Validation errors in {path.name}:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )

    catalog: dict[str, FormatDescriptor] = dict(FORMATS) if include_builtin else {}
    for name, entry in entries.items():
        catalog[name] = FormatDescriptor(
            name=name,
            divisor=entry["divisor"],
            offset_seconds=entry["offset_seconds"],
            kind=FormatKind.UNIFORM,
            description=entry.get("description", ""),
        )
    return MappingProxyType(catalog)
