from __future__ import annotations

from sheetview.pipeline.filter import filter_all, matches
from sheetview.types import FilterState

HEADERS = ("Artist", "Genre", "Country", "Year", "Rating", "Status")


def test_empty_filter_returns_all_records_in_order(sample_table) -> None:
    result = filter_all(sample_table.records, FilterState(), HEADERS)

    assert result == list(sample_table.records)


def test_text_filter_is_case_insensitive_substring(sample_table) -> None:
    state = FilterState().with_text("Genre", "ROCK")

    keys = [record.key for record in filter_all(sample_table.records, state, HEADERS)]

    assert keys == ["Radiohead", "Can", "Stereolab"]


def test_text_filter_without_any_match_is_empty(sample_table) -> None:
    state = FilterState().with_text("Artist", "zzz-not-there")

    assert filter_all(sample_table.records, state, HEADERS) == []


def test_choice_filter_is_exact_and_case_sensitive(sample_table) -> None:
    exact = FilterState().with_choice("Country", "UK")
    wrong_case = FilterState().with_choice("Country", "uk")

    assert [r.key for r in filter_all(sample_table.records, exact, HEADERS)] == ["Radiohead", "Portishead"]
    assert filter_all(sample_table.records, wrong_case, HEADERS) == []


def test_all_choice_means_no_constraint(sample_table) -> None:
    state = FilterState().with_choice("Country", "All").with_text("Genre", "")

    assert len(filter_all(sample_table.records, state, HEADERS)) == len(sample_table.records)


def test_rules_combine_with_and(sample_table) -> None:
    state = FilterState().with_text("Genre", "rock").with_choice("Status", "pending")

    keys = [record.key for record in filter_all(sample_table.records, state, HEADERS)]

    assert keys == ["Can", "Stereolab"]


def test_filters_outside_header_subset_are_ignored(sample_table) -> None:
    record = sample_table.records[0]
    state = FilterState().with_text("Spotify", "no-such-link")

    assert matches(record, state, HEADERS)
    assert not matches(record, state, HEADERS + ("Spotify",))


def test_filter_all_does_not_mutate_input(sample_table) -> None:
    records = list(sample_table.records)
    filter_all(records, FilterState().with_text("Artist", "a"), HEADERS)

    assert records == list(sample_table.records)
