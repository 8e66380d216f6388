"""Tabular data engine for published spreadsheet exports."""

from __future__ import annotations

from importlib import metadata as _metadata

from sheetview.catalog import SourceCatalog
from sheetview.exceptions import (
    ConfigurationError,
    EmptySource,
    MalformedSource,
    SheetviewError,
    TransportError,
)
from sheetview.pipeline import parse_table
from sheetview.session import SourceSession
from sheetview.settings import Settings
from sheetview.types import NARROW, WIDE, DisplayRange, FetchStatus, FilterState, PageState, Record, Table
from sheetview.view import TableView

try:  # pragma: no cover - executed when package metadata is available
    __version__ = _metadata.version("sheetview")
except _metadata.PackageNotFoundError:  # pragma: no cover - local source tree fallback
    __version__ = "0.0.0"

__all__ = [
    "ConfigurationError",
    "DisplayRange",
    "EmptySource",
    "FetchStatus",
    "FilterState",
    "MalformedSource",
    "NARROW",
    "PageState",
    "Record",
    "Settings",
    "SheetviewError",
    "SourceCatalog",
    "SourceSession",
    "Table",
    "TableView",
    "TransportError",
    "WIDE",
    "__version__",
    "parse_table",
]
