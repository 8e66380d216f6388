"""Fixed-offset parser for spreadsheet-exported delimited text.

The published sheet layout puts four metadata rows above the header row, so
the fifth non-blank line holds the headers and data starts on the sixth.
Only columns B through N are significant and column B is the record key.
Splitting is purely delimiter based; quoted fields are not supported.
"""

from __future__ import annotations

import re

from sheetview.exceptions import MalformedSource
from sheetview.types import Record, Table

DELIMITER = ","
HEADER_ROW_INDEX = 4
MIN_LINES = HEADER_ROW_INDEX + 2
KEY_COLUMN = 1
HEADER_WINDOW = slice(1, 14)

INSUFFICIENT_ROWS = "insufficient rows"
NO_RECORDS = "no records"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_cells(line: str, delimiter: str = DELIMITER) -> list[str]:
    """Split ``line`` on ``delimiter`` and trim every cell."""
    return [cell.strip() for cell in line.split(delimiter)]


def non_blank_lines(raw_text: str) -> list[str]:
    return [line for line in _LINE_BREAK.split(raw_text) if line.strip()]


def header_columns(line: str) -> list[tuple[str, int]]:
    """Return ``(header, column)`` pairs for the named cells in the header window.

    Blank cells are skipped and a repeated name keeps its first column.
    """

    cells = split_cells(line)
    columns: list[tuple[str, int]] = []
    seen: set[str] = set()
    for position in range(*HEADER_WINDOW.indices(len(cells))):
        header = cells[position]
        if header and header not in seen:
            seen.add(header)
            columns.append((header, position))
    return columns


def parse_table(raw_text: str) -> Table:
    """Parse raw sheet text into a :class:`Table`.

    Raises :class:`MalformedSource` when there are fewer than six non-blank
    lines or when no data line carries a key.
    """

    lines = non_blank_lines(raw_text)
    if len(lines) < MIN_LINES:
        raise MalformedSource(INSUFFICIENT_ROWS)

    columns = header_columns(lines[HEADER_ROW_INDEX])
    headers = tuple(header for header, _ in columns)

    records: list[Record] = []
    for line in lines[HEADER_ROW_INDEX + 1 :]:
        cells = split_cells(line)
        if len(cells) <= KEY_COLUMN or not cells[KEY_COLUMN]:
            continue

        fields: dict[str, str] = {}
        for header, position in columns:
            fields[header] = cells[position] if position < len(cells) else ""
        records.append(Record(key=cells[KEY_COLUMN], fields=fields))

    if not records:
        raise MalformedSource(NO_RECORDS)

    return Table(headers=headers, records=tuple(records))


__all__ = [
    "DELIMITER",
    "HEADER_ROW_INDEX",
    "HEADER_WINDOW",
    "INSUFFICIENT_ROWS",
    "KEY_COLUMN",
    "MIN_LINES",
    "header_columns",
    "NO_RECORDS",
    "non_blank_lines",
    "parse_table",
    "split_cells",
]
