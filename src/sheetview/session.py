"""Per-source fetch state machine.

A :class:`SourceSession` owns one source's :class:`Table` and moves through
``idle -> loading -> ready | failed``. A refresh is only started when the
session is not already loading, so at most one fetch is in flight per
session. The random pick is sticky: refreshes never clear it.
"""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable
from functools import partial

from sheetview.exceptions import ConfigurationError, EmptySource, MalformedSource, TransportError
from sheetview.observability import SessionLogger, get_logger
from sheetview.pipeline.parse import parse_table
from sheetview.types import FetchStatus, Record, Table

FetchText = Callable[[], Awaitable[str]]
Fetcher = Callable[[str], Awaitable[str]]

PLACEHOLDER_MARKER = "YOUR_"


def is_placeholder(location: str | None) -> bool:
    """Return ``True`` for empty locations and unedited ``YOUR_...`` templates."""
    text = (location or "").strip()
    return not text or PLACEHOLDER_MARKER in text


class SourceSession:
    """One logical data source ("tab") and its current table."""

    def __init__(
        self,
        name: str,
        source_location: str,
        *,
        fetcher: Fetcher | None = None,
        logger: SessionLogger | None = None,
    ) -> None:
        self.name = name
        self.source_location = source_location
        self._fetcher = fetcher
        self._logger = (logger or get_logger("session")).bind(name)

        self._table: Table | None = None
        self._status = FetchStatus.IDLE
        self._last_error: str | None = None
        self._pick: Record | None = None

    def __repr__(self) -> str:
        return f"SourceSession(name={self.name!r}, status={self._status.value!r})"

    @property
    def table(self) -> Table | None:
        return self._table

    @property
    def status(self) -> FetchStatus:
        return self._status

    @property
    def is_loading(self) -> bool:
        return self._status is FetchStatus.LOADING

    @property
    def last_error(self) -> str | None:
        return self._last_error

    @property
    def pick(self) -> Record | None:
        return self._pick

    async def refresh(self, fetch_text: FetchText | None = None) -> FetchStatus:
        """Fetch and parse the source, replacing the current table.

        Raises :class:`ConfigurationError` without touching state when the
        source location is missing or a placeholder. Calls made while a fetch
        is already in flight return immediately. Transport and parse failures
        end in ``failed`` with ``last_error`` set.
        """

        if is_placeholder(self.source_location):
            raise ConfigurationError(
                f'No source URL provided or URL is a placeholder for the "{self.name}" source.'
            )

        if self.is_loading:
            self._logger.event("session.refresh.skipped", level=logging.DEBUG)
            return self._status

        if fetch_text is None:
            if self._fetcher is None:
                raise ConfigurationError(f'No fetcher configured for the "{self.name}" source.')
            fetch_text = partial(self._fetcher, self.source_location)

        self._status = FetchStatus.LOADING
        self._last_error = None
        self._table = None
        self._logger.event("session.refresh.started", location=self.source_location)

        try:
            raw_text = await fetch_text()
        except TransportError as exc:
            return self._fail(f'Failed to load records for "{self.name}": {exc.reason}')
        except TimeoutError:
            return self._fail(f'Failed to load records for "{self.name}": request timed out')
        except asyncio.CancelledError:
            self._fail(f'Failed to load records for "{self.name}": refresh cancelled')
            raise
        except Exception as exc:
            self._fail(f'Failed to load records for "{self.name}": {exc}', exc)
            raise

        try:
            table = parse_table(raw_text)
        except MalformedSource as exc:
            return self._fail(f'Failed to parse "{self.name}": {exc.reason}')

        self._table = table
        self._status = FetchStatus.READY
        self._logger.event(
            "session.refresh.completed",
            records=len(table.records),
            headers=len(table.headers),
        )
        return self._status

    def pick_random(self, rng: random.Random | None = None) -> Record:
        """Pick a record uniformly from the full, unfiltered table and keep it."""

        if self._table is None or not self._table.records:
            raise EmptySource(f'No records loaded for the "{self.name}" source.')

        self._pick = (rng or random).choice(self._table.records)
        self._logger.event("session.pick", key=self._pick.key)
        return self._pick

    def clear_pick(self) -> None:
        self._pick = None

    def _fail(self, message: str, exc: BaseException | None = None) -> FetchStatus:
        self._status = FetchStatus.FAILED
        self._last_error = message
        self._logger.event("session.refresh.failed", message=message, level=logging.WARNING, exc=exc)
        return self._status


__all__ = ["FetchText", "Fetcher", "PLACEHOLDER_MARKER", "SourceSession", "is_placeholder"]
