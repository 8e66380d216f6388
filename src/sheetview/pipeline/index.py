"""Distinct value index used to populate choice filters."""

from __future__ import annotations

from collections.abc import Sequence

from sheetview.types import Table


def unique_values(table: Table | None, headers: Sequence[str]) -> dict[str, list[str]]:
    """Return the sorted distinct values of each header across all records.

    The index always covers the full, unfiltered table. Empty strings are kept
    when a record actually holds one.
    """

    if table is None:
        return {header: [] for header in headers}

    index: dict[str, list[str]] = {}
    for header in headers:
        values = {record.get(header) for record in table.records}
        index[header] = sorted(values)
    return index


__all__ = ["unique_values"]
