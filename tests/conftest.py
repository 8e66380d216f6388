from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

from sheetview.pipeline import parse_table
from sheetview.types import Table

HEADER_ROW = (
    "#,Artist,Genre,Country,Year,Rating,Status,Spotify,YouTube,Bandcamp,Wiki,Site,Notes,Extra,Ignored"
)

DATA_ROWS = [
    "1,Radiohead,Rock,UK,1997,5,listened,https://open.spotify.com/a,,,,,,,",
    "2,Bjork,Electronic,Iceland,1995,5,pending",
    "3,,Jazz,USA,1959,4,pending",
    "4,Portishead,Trip Hop,UK,1994,4,listened",
    "5,Can,Krautrock,Germany,1971,,pending",
    "6,Stereolab,Rock,France,1996,3,pending",
]


def build_sheet_text(rows: Sequence[str], *, header: str = HEADER_ROW, preamble: int = 4) -> str:
    meta = [f"meta{i}" for i in range(1, preamble + 1)]
    return "\n".join([*meta, header, *rows]) + "\n"


@pytest.fixture
def sheet_text() -> Callable[..., str]:
    return build_sheet_text


@pytest.fixture
def sample_text() -> str:
    return build_sheet_text(DATA_ROWS)


@pytest.fixture
def sample_table(sample_text: str) -> Table:
    return parse_table(sample_text)


@pytest.fixture
def numbered_table(sheet_text: Callable[..., str]) -> Table:
    rows = [f"{i},artist{i:02d},genre{i % 3},c,2000,{i % 5}" for i in range(1, 26)]
    return parse_table(sheet_text(rows))
