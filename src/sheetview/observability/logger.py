from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from typing import Any

NAMESPACE = "sheetview"
DEFAULT_EVENT = f"{NAMESPACE}.log"


def qualify_event_name(name: str) -> str:
    name = (name or "").strip().strip(".")
    if not name:
        return f"{NAMESPACE}.invalid_event"
    if name == NAMESPACE or name.startswith(f"{NAMESPACE}."):
        return name
    return f"{NAMESPACE}.{name}"


class SessionLogger(logging.LoggerAdapter):
    """
    LoggerAdapter that:
    - stamps each record with the source name + a per-record event_id
    - adds a default event for plain log lines
    - provides .event() for domain events carrying a ``data`` mapping
    """

    def __init__(self, logger: logging.Logger, *, source: str | None = None) -> None:
        super().__init__(logger, {"source": source} if source else {})

    @property
    def source(self) -> str | None:
        return (self.extra or {}).get("source")

    def bind(self, source: str) -> "SessionLogger":
        return SessionLogger(self.logger, source=source)

    def process(self, msg: Any, kwargs: dict[str, Any]) -> tuple[Any, dict[str, Any]]:
        caller_extra = kwargs.pop("extra", None)
        extra = dict(self.extra or {})

        if caller_extra is not None:
            if not isinstance(caller_extra, Mapping):
                raise TypeError("logging 'extra' must be a mapping")
            extra.update(caller_extra)

        extra["event_id"] = str(extra.get("event_id") or uuid.uuid4().hex)
        extra.setdefault("event", DEFAULT_EVENT)

        data = extra.get("data")
        if data is not None and not isinstance(data, Mapping):
            extra["data"] = {"value": data}

        kwargs["extra"] = extra
        return msg, kwargs

    def event(
        self,
        name: str,
        *,
        message: str | None = None,
        level: int = logging.INFO,
        exc: BaseException | None = None,
        **data: Any,
    ) -> None:
        if not self.isEnabledFor(level):
            return

        full_name = qualify_event_name(name)
        payload = dict(data)

        extra: dict[str, Any] = {"event": full_name}
        if payload:
            extra["data"] = payload

        exc_info = (type(exc), exc, exc.__traceback__) if exc is not None else None
        self.log(level, message or full_name, extra=extra, exc_info=exc_info)


class NullLogger(SessionLogger):
    """A SessionLogger that discards all log/event output."""

    def __init__(self, *, source: str | None = None) -> None:
        base_logger = logging.Logger(f"{NAMESPACE}.null")
        base_logger.addHandler(logging.NullHandler())
        base_logger.propagate = False
        base_logger.disabled = True
        super().__init__(base_logger, source=source)

    def bind(self, source: str) -> "NullLogger":
        return NullLogger(source=source)

    def __bool__(self) -> bool:
        return False


def get_logger(name: str | None = None, *, source: str | None = None) -> SessionLogger:
    """Return a :class:`SessionLogger` under the ``sheetview`` logger tree."""
    logger_name = NAMESPACE if not name else f"{NAMESPACE}.{name}"
    return SessionLogger(logging.getLogger(logger_name), source=source)


__all__ = ["DEFAULT_EVENT", "NAMESPACE", "NullLogger", "SessionLogger", "get_logger", "qualify_event_name"]
