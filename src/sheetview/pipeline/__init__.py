"""Pure table derivations: parse, index, filter, and page."""

from __future__ import annotations

from sheetview.pipeline.filter import filter_all, matches
from sheetview.pipeline.index import unique_values
from sheetview.pipeline.paging import (
    go_to_page,
    next_page,
    page,
    previous_page,
    shuffle,
    total_pages,
)
from sheetview.pipeline.parse import parse_table

__all__ = [
    "filter_all",
    "go_to_page",
    "matches",
    "next_page",
    "page",
    "parse_table",
    "previous_page",
    "shuffle",
    "total_pages",
    "unique_values",
]
