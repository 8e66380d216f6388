"""Working order shuffling, page slicing, and page navigation."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from dataclasses import replace
from typing import TypeVar

from sheetview.types import PageState

T = TypeVar("T")


def shuffle(order: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a uniformly random permutation of ``order`` as a new list."""

    shuffled = list(order)
    # random.shuffle is an unbiased Fisher-Yates shuffle.
    (rng or random).shuffle(shuffled)
    return shuffled


def total_pages(filtered_count: int, size: int) -> int:
    if size < 1:
        raise ValueError("page size must be >= 1")
    return max(1, math.ceil(filtered_count / size))


def page(filtered_order: Sequence[T], page_state: PageState) -> list[T]:
    """Return the records on ``page_state.current`` (empty when nothing matches)."""

    start = (page_state.current - 1) * page_state.size
    return list(filtered_order[start : start + page_state.size])


def go_to_page(page_state: PageState, number: int, filtered_count: int) -> PageState:
    last = total_pages(filtered_count, page_state.size)
    return replace(page_state, current=min(max(number, 1), last))


def next_page(page_state: PageState, filtered_count: int) -> PageState:
    return go_to_page(page_state, page_state.current + 1, filtered_count)


def previous_page(page_state: PageState, filtered_count: int) -> PageState:
    return go_to_page(page_state, page_state.current - 1, filtered_count)


__all__ = [
    "go_to_page",
    "next_page",
    "page",
    "previous_page",
    "shuffle",
    "total_pages",
]
