from __future__ import annotations

import pytest

from sheetview.exceptions import MalformedSource
from sheetview.pipeline.parse import INSUFFICIENT_ROWS, NO_RECORDS, parse_table, split_cells


def test_parse_reference_sample_skips_rows_without_key() -> None:
    text = "meta1\nmeta2\nmeta3\nmeta4\nId,Name,Extra\n1,A,foo\n2,,bar\n3,B,\n"

    table = parse_table(text)

    assert table.headers == ("Name", "Extra")
    assert [record.key for record in table.records] == ["A", "B"]
    assert dict(table.records[0].fields) == {"Name": "A", "Extra": "foo"}
    assert dict(table.records[1].fields) == {"Name": "B", "Extra": ""}


def test_parse_keeps_thirteen_column_window(sample_table) -> None:
    assert sample_table.headers == (
        "Artist",
        "Genre",
        "Country",
        "Year",
        "Rating",
        "Status",
        "Spotify",
        "YouTube",
        "Bandcamp",
        "Wiki",
        "Site",
        "Notes",
        "Extra",
    )
    assert "Ignored" not in sample_table.headers


def test_every_record_has_every_header(sample_table) -> None:
    for record in sample_table.records:
        assert set(record.fields) == set(sample_table.headers)

    bjork = next(record for record in sample_table.records if record.key == "Bjork")
    assert bjork.fields["Status"] == "pending"
    assert bjork.fields["Spotify"] == ""


def test_parse_is_deterministic(sample_text) -> None:
    assert parse_table(sample_text) == parse_table(sample_text)


def test_keys_are_trimmed_and_empty_keys_dropped(sheet_text) -> None:
    rows = ["1,  Spaced  ,x", "2,   ,y", "3,Solid,z", "4"]

    table = parse_table(sheet_text(rows, header="#,Name,Val"))

    assert [record.key for record in table.records] == ["Spaced", "Solid"]
    assert table.records[0].fields["Name"] == "Spaced"


def test_blank_lines_are_ignored_before_indexing() -> None:
    text = "\n\nm1\n   \nm2\nm3\n\nm4\n#,Name\n\n1,Only\n"

    table = parse_table(text)

    assert table.headers == ("Name",)
    assert [record.key for record in table.records] == ["Only"]


def test_windows_line_endings_are_trimmed() -> None:
    text = "m1\r\nm2\r\nm3\r\nm4\r\n#,Name,Tag\r\n1,A,x\r\n"

    table = parse_table(text)

    assert table.records[0].fields == {"Name": "A", "Tag": "x"}


@pytest.mark.parametrize("line_count", [0, 1, 5])
def test_fewer_than_six_lines_is_malformed(line_count: int) -> None:
    text = "\n".join(f"line{i}" for i in range(line_count))

    with pytest.raises(MalformedSource) as excinfo:
        parse_table(text)

    assert excinfo.value.reason == INSUFFICIENT_ROWS


def test_no_keyed_rows_is_malformed(sheet_text) -> None:
    with pytest.raises(MalformedSource) as excinfo:
        parse_table(sheet_text(["1,,a", "2", "   ,   ,  "]))

    assert excinfo.value.reason == NO_RECORDS


def test_split_cells_trims_without_quote_handling() -> None:
    assert split_cells(' a , "b, c" ,') == ["a", '"b', 'c"', ""]


def test_blank_and_repeated_header_cells_are_skipped() -> None:
    text = "m1\nm2\nm3\nm4\n#,Name,Genre,,,,Genre,Notes\n1,A,rock,x,y,z,pop,late\n"

    table = parse_table(text)

    assert table.headers == ("Name", "Genre", "Notes")
    assert all(table.headers)
    assert len(set(table.headers)) == len(table.headers)
    assert dict(table.records[0].fields) == {"Name": "A", "Genre": "rock", "Notes": "late"}


def test_unicode_separators_stay_inside_cells() -> None:
    text = "m1\nm2\nm3\nm4\n#,Name,Notes\n1,A,left\u2028right\x0cend\n2,B,plain\r\n"

    table = parse_table(text)

    assert [record.key for record in table.records] == ["A", "B"]
    assert table.records[0].fields["Notes"] == "left\u2028right\x0cend"
    assert table.records[1].fields["Notes"] == "plain"


def test_bare_carriage_returns_separate_rows() -> None:
    table = parse_table("m1\rm2\rm3\rm4\r#,Name\r1,A\r2,B\r")

    assert [record.key for record in table.records] == ["A", "B"]
