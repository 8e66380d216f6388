"""Consumer-side view state over a session's current table.

The engine keeps no filters, order, or page for a session. A
:class:`TableView` holds them for one display range and rebuilds every
derived result from the session's *current* table, so a refresh can never
leave a stale page or filter pointing at the previous table.
"""

from __future__ import annotations

import random

from sheetview.pipeline import filter_all, go_to_page, next_page, page, previous_page, shuffle, total_pages
from sheetview.pipeline.index import unique_values
from sheetview.session import SourceSession
from sheetview.types import DEFAULT_PAGE_SIZE, WIDE, DisplayRange, FilterState, PageState, Record, Table


class TableView:
    """Filterable, shuffle-able, paginated view of one session."""

    def __init__(
        self,
        session: SourceSession,
        display_range: DisplayRange = WIDE,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self.session = session
        self.display_range = display_range
        self._page = PageState(size=page_size)
        self._filters = FilterState()
        self._bound: Table | None = None
        self._order: list[Record] = []

    def _sync(self) -> Table | None:
        table = self.session.table
        if table is not self._bound:
            self._bound = table
            self._order = list(table.records) if table is not None else []
            self._filters = FilterState()
            self._page = self._page.reset()
        return table

    @property
    def headers(self) -> tuple[str, ...]:
        return self.display_range.headers_for(self._sync())

    @property
    def filters(self) -> FilterState:
        self._sync()
        return self._filters

    @property
    def order(self) -> list[Record]:
        self._sync()
        return list(self._order)

    def unique_values(self) -> dict[str, list[str]]:
        return unique_values(self._sync(), self.headers)

    def filtered(self) -> list[Record]:
        return filter_all(self.order, self._filters, self.headers)

    @property
    def total_pages(self) -> int:
        return total_pages(len(self.filtered()), self._page.size)

    @property
    def current_page(self) -> int:
        self._sync()
        return self._page.current

    def current_page_records(self) -> list[Record]:
        return page(self.filtered(), self._page)

    def set_text_filter(self, header: str, value: str) -> None:
        self._sync()
        self._filters = self._filters.with_text(header, value)
        self._page = self._page.reset()

    def set_choice_filter(self, header: str, value: str) -> None:
        self._sync()
        self._filters = self._filters.with_choice(header, value)
        self._page = self._page.reset()

    def clear_filters(self) -> None:
        self._sync()
        self._filters = self._filters.cleared()
        self._page = self._page.reset()

    def shuffle(self, rng: random.Random | None = None) -> None:
        self._sync()
        self._order = shuffle(self._order, rng)
        self._page = self._page.reset()

    def next_page(self) -> int:
        count = len(self.filtered())
        self._page = next_page(self._page, count)
        return self._page.current

    def previous_page(self) -> int:
        count = len(self.filtered())
        self._page = previous_page(self._page, count)
        return self._page.current

    def go_to_page(self, number: int) -> int:
        count = len(self.filtered())
        self._page = go_to_page(self._page, number, count)
        return self._page.current


__all__ = ["TableView"]
