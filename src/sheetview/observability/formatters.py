from __future__ import annotations

import json
import logging
import uuid
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from sheetview.observability.logger import DEFAULT_EVENT, NAMESPACE


def _rfc3339_utc(created: float) -> str:
    return (
        datetime.fromtimestamp(created, tz=timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def _truncate(value: Any, *, max_len: int = 120) -> str:
    text = str(value)
    return text if len(text) <= max_len else (text[: max_len - 1] + "…")


class _StructuredFormatter(logging.Formatter):
    def _to_event_record(self, record: logging.LogRecord) -> dict[str, Any]:
        # These are injected by SessionLogger.process; fallbacks keep formatters safe.
        event_id = getattr(record, "event_id", None) or uuid.uuid4().hex
        event = getattr(record, "event", None) or DEFAULT_EVENT
        data = getattr(record, "data", None)

        out: dict[str, Any] = {
            "event_id": str(event_id),
            "timestamp": _rfc3339_utc(record.created),
            "level": record.levelname.lower(),
            "event": str(event),
            "message": record.getMessage(),
        }

        source = getattr(record, "source", None)
        if source:
            out["source"] = str(source)

        if isinstance(data, Mapping) and data:
            out["data"] = dict(data)

        if record.exc_info:
            exc_type, exc, _tb = record.exc_info
            out["error"] = {
                "type": getattr(exc_type, "__name__", str(exc_type)),
                "message": "" if exc is None else str(exc),
                "stack_trace": self.formatException(record.exc_info),
            }

        return out


class NdjsonFormatter(_StructuredFormatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003
        payload = self._to_event_record(record)
        try:
            return json.dumps(payload, ensure_ascii=False, default=str, separators=(",", ":"))
        except (TypeError, ValueError) as e:  # pragma: no cover
            fallback = {
                "event_id": payload.get("event_id") or uuid.uuid4().hex,
                "timestamp": _rfc3339_utc(record.created),
                "level": "error",
                "event": f"{NAMESPACE}.logging.serialization_failed",
                "message": f"Failed to serialize log record: {e}",
            }
            return json.dumps(fallback, ensure_ascii=False, default=str, separators=(",", ":"))


class TextFormatter(_StructuredFormatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003
        payload = self._to_event_record(record)
        ts = payload["timestamp"]
        lvl = payload["level"].upper()
        event = payload.get("event") or ""
        msg = payload["message"]

        head = f"[{ts}] {lvl} {msg}" if event == DEFAULT_EVENT else f"[{ts}] {lvl} {event}: {msg}"
        if event == msg:
            head = f"[{ts}] {lvl} {event}"

        data = dict(payload.get("data") or {})
        if payload.get("source"):
            data = {"source": payload["source"], **data}
        if data:
            pairs = " ".join(f"{k}={_truncate(v)}" for k, v in data.items())
            head = f"{head} {pairs}"

        error = payload.get("error")
        if error:
            head = f"{head}\n{error['stack_trace']}"
        return head


__all__ = ["NdjsonFormatter", "TextFormatter"]
