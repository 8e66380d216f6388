"""Engine error hierarchy."""

from __future__ import annotations


class SheetviewError(Exception):
    """Base class for engine-specific exceptions."""


class ConfigurationError(SheetviewError):
    """Raised when a source has no usable location; no fetch is attempted."""


class TransportError(SheetviewError):
    """Raised when raw text cannot be retrieved from a source location."""

    def __init__(self, reason: str, *, status_code: int | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code


class MalformedSource(SheetviewError):
    """Raised when raw text does not have the expected table structure."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class EmptySource(SheetviewError):
    """Raised when a random pick is requested without any loaded records."""


__all__ = [
    "SheetviewError",
    "ConfigurationError",
    "TransportError",
    "MalformedSource",
    "EmptySource",
]
