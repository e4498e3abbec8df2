"""Input validation for user-defined format catalogs."""

from __future__ import annotations

from epochs.types import INT64_MAX, INT64_MIN, NANOS_PER_SECOND


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_formats(
    entries: dict[str, dict],
    reserved: frozenset[str] | set[str] = frozenset(),
) -> list[str]:
    """Validate format entries. Returns list of error messages (empty = valid).

    Checks:
    - Names are non-empty identifiers and do not shadow reserved names
    - divisor is a positive integer dividing 1_000_000_000
    - offset_seconds is an integer within the signed 64-bit range
    - kind, if present, is "uniform" (other kinds are built in only)
    """
    errors: list[str] = []

    if not isinstance(entries, dict):
        return [f"formats must be an object, got {type(entries).__name__}"]

    for name, entry in entries.items():
        if not isinstance(name, str) or not name.isidentifier():
            errors.append(f"Invalid format name: {name!r}")
            continue
        if name in reserved:
            errors.append(f"Format {name}: shadows a built-in format")
            continue
        if not isinstance(entry, dict):
            errors.append(f"Format {name}: entry must be an object")
            continue

        divisor = entry.get("divisor")
        if not _is_int(divisor) or divisor <= 0:
            errors.append(
                f"Format {name}: 'divisor' must be a positive integer, "
                f"got {divisor!r}"
            )
        elif NANOS_PER_SECOND % divisor != 0:
            errors.append(
                f"Format {name}: divisor {divisor} does not divide "
                f"{NANOS_PER_SECOND}"
            )

        offset = entry.get("offset_seconds")
        if not _is_int(offset):
            errors.append(
                f"Format {name}: 'offset_seconds' must be an integer, "
                f"got {offset!r}"
            )
        elif not INT64_MIN <= offset <= INT64_MAX:
            errors.append(
                f"Format {name}: offset_seconds outside the signed 64-bit range"
            )

        kind = entry.get("kind", "uniform")
        if kind != "uniform":
            errors.append(
                f"Format {name}: kind must be 'uniform', got {kind!r}"
            )

        description = entry.get("description", "")
        if not isinstance(description, str):
            errors.append(f"Format {name}: 'description' must be a string")

    return errors
