from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import IO

from sheetview.observability.formatters import NdjsonFormatter, TextFormatter
from sheetview.observability.logger import NAMESPACE


@dataclass
class LogContext:
    logger: logging.Logger
    _handlers: list[logging.Handler]

    def close(self) -> None:
        for h in list(self._handlers):
            self.logger.removeHandler(h)
            h.close()
        self._handlers.clear()

    def __enter__(self) -> "LogContext":
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:
        self.close()


def configure_logging(
    *,
    log_format: str = "text",
    log_level: int = logging.INFO,
    stream: IO[str] | None = None,
) -> LogContext:
    """Attach one formatted stream handler to the ``sheetview`` logger."""

    fmt = (log_format or "text").strip().lower()
    if fmt == "json":
        fmt = "ndjson"
    if fmt not in {"text", "ndjson"}:
        raise ValueError("log_format must be 'text' or 'ndjson' (or 'json')")

    formatter: logging.Formatter = NdjsonFormatter() if fmt == "ndjson" else TextFormatter()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)

    base_logger = logging.getLogger(NAMESPACE)
    base_logger.setLevel(log_level)
    base_logger.propagate = False
    base_logger.addHandler(handler)
    return LogContext(logger=base_logger, _handlers=[handler])


__all__ = ["LogContext", "configure_logging"]
