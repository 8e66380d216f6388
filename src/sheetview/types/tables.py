"""Table models produced by the parser and consumed by views."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Record:
    """One data row keyed by its identity column."""

    key: str
    fields: Mapping[str, str] = field(default_factory=dict)

    def get(self, header: str) -> str:
        return self.fields.get(header, "")


@dataclass(frozen=True)
class Table:
    """Ordered headers plus records in source row order.

    Tables are never mutated after parsing; a refresh builds a new one.
    """

    headers: tuple[str, ...]
    records: tuple[Record, ...]


@dataclass(frozen=True)
class DisplayRange:
    """Leading slice of a table's headers used by one view."""

    name: str
    width: int

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ValueError("DisplayRange width must be >= 1")

    def headers_for(self, table: Table | None) -> tuple[str, ...]:
        if table is None:
            return ()
        return table.headers[: self.width]


# Columns B-G and B-F of the source sheet.
WIDE = DisplayRange("wide", 6)
NARROW = DisplayRange("narrow", 5)

DISPLAY_RANGES: dict[str, DisplayRange] = {WIDE.name: WIDE, NARROW.name: NARROW}


__all__ = ["Record", "Table", "DisplayRange", "WIDE", "NARROW", "DISPLAY_RANGES"]
