from sheetview.types.state import ALL_CHOICE, DEFAULT_PAGE_SIZE, FetchStatus, FilterState, PageState
from sheetview.types.tables import DISPLAY_RANGES, NARROW, WIDE, DisplayRange, Record, Table

__all__ = [
    "ALL_CHOICE",
    "DEFAULT_PAGE_SIZE",
    "DISPLAY_RANGES",
    "DisplayRange",
    "FetchStatus",
    "FilterState",
    "NARROW",
    "PageState",
    "Record",
    "Table",
    "WIDE",
]
