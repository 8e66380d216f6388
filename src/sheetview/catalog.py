"""Named collection of independent source sessions."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Iterator, Mapping

from sheetview.exceptions import ConfigurationError
from sheetview.observability import SessionLogger, get_logger
from sheetview.schemas import SessionSnapshot
from sheetview.session import Fetcher, SourceSession
from sheetview.settings import Settings
from sheetview.transport import HttpTextFetcher
from sheetview.types import FetchStatus


class SourceCatalog:
    """Ordered mapping of source name to :class:`SourceSession`.

    Sessions never share state; refreshing the catalog simply runs each
    session's own refresh concurrently.
    """

    def __init__(self, sessions: Iterable[SourceSession] = (), *, logger: SessionLogger | None = None) -> None:
        self._sessions: dict[str, SourceSession] = {}
        self._logger = logger or get_logger("catalog")
        for session in sessions:
            self.add(session)

    @classmethod
    def from_sources(
        cls,
        sources: Mapping[str, str],
        *,
        fetcher: Fetcher | None = None,
        logger: SessionLogger | None = None,
    ) -> "SourceCatalog":
        return cls(
            (SourceSession(name, location, fetcher=fetcher, logger=logger) for name, location in sources.items()),
            logger=logger,
        )

    @classmethod
    def from_settings(cls, settings: Settings, fetcher: Fetcher | None = None) -> "SourceCatalog":
        fetcher = fetcher or HttpTextFetcher(timeout=settings.request_timeout)
        return cls.from_sources(settings.sources, fetcher=fetcher)

    def add(self, session: SourceSession) -> None:
        if session.name in self._sessions:
            raise ValueError(f"Duplicate source name: {session.name!r}")
        self._sessions[session.name] = session

    def get(self, name: str) -> SourceSession:
        try:
            return self._sessions[name]
        except KeyError:
            raise KeyError(f"Unknown source: {name!r}") from None

    def names(self) -> list[str]:
        return list(self._sessions)

    def __iter__(self) -> Iterator[SourceSession]:
        return iter(self._sessions.values())

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, name: object) -> bool:
        return name in self._sessions

    async def _refresh_one(self, session: SourceSession) -> FetchStatus:
        try:
            return await session.refresh()
        except ConfigurationError as exc:
            self._logger.event(
                "catalog.refresh.configuration_error",
                message=str(exc),
                level=logging.WARNING,
                source=session.name,
            )
            return session.status

    async def refresh_all(self) -> dict[str, FetchStatus]:
        """Refresh every session concurrently and return each resulting status."""
        sessions = list(self)
        statuses = await asyncio.gather(*(self._refresh_one(session) for session in sessions))
        return {session.name: status for session, status in zip(sessions, statuses)}

    def snapshot(self) -> list[SessionSnapshot]:
        return [SessionSnapshot.from_session(session) for session in self]


__all__ = ["SourceCatalog"]
