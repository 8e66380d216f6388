"""Serializable snapshots of session state."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from sheetview.session import SourceSession
from sheetview.types import FetchStatus, Record


class RecordPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    fields: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_record(cls, record: Record) -> "RecordPayload":
        return cls(key=record.key, fields=dict(record.fields))


class SessionSnapshot(BaseModel):
    """Read-only view of one source session."""

    model_config = ConfigDict(frozen=True)

    name: str
    location: str
    status: FetchStatus
    last_error: str | None = None
    headers: list[str] = Field(default_factory=list)
    record_count: int = 0
    pick: RecordPayload | None = None

    @classmethod
    def from_session(cls, session: SourceSession) -> "SessionSnapshot":
        table = session.table
        return cls(
            name=session.name,
            location=session.source_location,
            status=session.status,
            last_error=session.last_error,
            headers=list(table.headers) if table is not None else [],
            record_count=len(table.records) if table is not None else 0,
            pick=RecordPayload.from_record(session.pick) if session.pick is not None else None,
        )


__all__ = ["RecordPayload", "SessionSnapshot"]
