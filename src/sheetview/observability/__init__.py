from sheetview.observability.context import LogContext, configure_logging
from sheetview.observability.formatters import NdjsonFormatter, TextFormatter
from sheetview.observability.logger import NAMESPACE, NullLogger, SessionLogger, get_logger

__all__ = [
    "LogContext",
    "NAMESPACE",
    "NdjsonFormatter",
    "NullLogger",
    "SessionLogger",
    "TextFormatter",
    "configure_logging",
    "get_logger",
]
