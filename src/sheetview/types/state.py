"""Mutable-by-replacement view state and the session fetch status."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum

ALL_CHOICE = "All"
DEFAULT_PAGE_SIZE = 10


class FetchStatus(str, Enum):
    """Lifecycle of a source session's fetch."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class FilterState:
    """Per-header text and choice filters for one display range."""

    text: Mapping[str, str] = field(default_factory=dict)
    choice: Mapping[str, str] = field(default_factory=dict)

    def with_text(self, header: str, value: str) -> "FilterState":
        return replace(self, text={**self.text, header: value})

    def with_choice(self, header: str, value: str) -> "FilterState":
        return replace(self, choice={**self.choice, header: value})

    def cleared(self) -> "FilterState":
        return FilterState()

    @property
    def is_empty(self) -> bool:
        has_text = any(value for value in self.text.values())
        has_choice = any(value and value != ALL_CHOICE for value in self.choice.values())
        return not (has_text or has_choice)


@dataclass(frozen=True)
class PageState:
    """Page size and the 1-based current page."""

    size: int = DEFAULT_PAGE_SIZE
    current: int = 1

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError("page size must be >= 1")
        if self.current < 1:
            raise ValueError("current page must be >= 1")

    def reset(self) -> "PageState":
        return replace(self, current=1)


__all__ = ["ALL_CHOICE", "DEFAULT_PAGE_SIZE", "FetchStatus", "FilterState", "PageState"]
