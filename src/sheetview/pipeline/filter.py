"""Record filtering against text and choice rules."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sheetview.types import ALL_CHOICE, FilterState, Record


def matches(record: Record, filter_state: FilterState, headers: Sequence[str]) -> bool:
    """Return ``True`` when ``record`` passes every active rule for ``headers``.

    Text rules are case-insensitive substring checks; choice rules require an
    exact match unless the choice is absent or ``"All"``.
    """

    for header in headers:
        needle = filter_state.text.get(header) or ""
        if needle:
            value = record.fields.get(header)
            if value is None or needle.lower() not in value.lower():
                return False

        choice = filter_state.choice.get(header)
        if choice is not None and choice != ALL_CHOICE:
            if record.fields.get(header) != choice:
                return False

    return True


def filter_all(
    records: Iterable[Record],
    filter_state: FilterState,
    headers: Sequence[str],
) -> list[Record]:
    """Return the records that match, preserving their relative order."""
    return [record for record in records if matches(record, filter_state, headers)]


__all__ = ["filter_all", "matches"]
