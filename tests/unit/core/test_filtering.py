"""Unit tests for generic_functions.core.filtering."""

import dataclasses

import pytest

from generic_functions.core.filtering import FilterParams, Selection, filter_data


def _ids(result):
    return [record["id"] for record in result]


def test_empty_filter_keeps_every_record_unchanged(records):
    """Without criteria, every record comes back as the same object and in order."""
    result = filter_data(records, FilterParams())
    assert _ids(result) == [1, 2, 3, 4]
    assert all(kept is original for kept, original in zip(result, records))


@pytest.mark.parametrize(
    ("search", "expected"),
    [
        ("saint", [1, 4]),
        ("SAINT", [1, 4]),
        ("eglise montmartre", [1]),
        ("Église", [1]),
        ("mus, arts", [2]),
        ("neuf pont", [3]),
        ("saint neuf", []),
        ("   ", [1, 2, 3, 4]),
    ],
)
def test_search_matches_every_word_ignoring_case_and_accents(records, search, expected):
    """Each word of the search must occur somewhere in the searched text."""
    assert _ids(filter_data(records, FilterParams(search=search))) == expected


def test_search_escapes_regex_characters():
    """Search words are matched literally."""
    items = [{"id": 1, "field_search": "a+b"}, {"id": 2, "field_search": "aab"}]
    params = FilterParams(search="a+b", pattern=r"\S+")
    assert _ids(filter_data(items, params)) == [1]


def test_search_pattern_with_groups_uses_whole_matches(records):
    """Capture groups in a custom pattern do not split the search words."""
    params = FilterParams(search="pont neuf", pattern=r"(\w)(\w*)")
    assert _ids(filter_data(records, params)) == [3]


def test_custom_search_field():
    """The searched text can come from any key."""
    items = [{"id": 1, "title": "Pont Neuf", "field_search": ""}]
    assert _ids(filter_data(items, FilterParams(search="neuf", search_field="title"))) == [1]


@pytest.mark.parametrize(
    ("years", "expected"),
    [
        ((1800, 1900), [1]),
        ((1900, 1800), [1]),
        ((1921, 1921), [2]),
        ((1600, 2000), [1, 2, 3]),
        ((2000, 2010), []),
    ],
)
def test_year_range_is_inclusive_and_skips_invalid_dates(records, years, expected):
    """Dates from January 1st of the first year to the end of the last year pass."""
    assert _ids(filter_data(records, FilterParams(years=years))) == expected


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        (["open"], [1, 3]),
        (["open", "listed"], [1]),
        (["closed"], [2]),
        ([], [1, 2, 3, 4]),
    ],
)
def test_selection_requires_every_value_in_every_entry(records, values, expected):
    """Records without entries never match a non-empty selection."""
    params = FilterParams(selections=(Selection("state", values),))
    assert _ids(filter_data(records, params)) == expected


def test_selection_with_custom_entry_key():
    """Entries may keep their values under another key, even as a plain string."""
    items = [
        {"id": 1, "tags": [{"name": "river"}]},
        {"id": 2, "tags": [{"name": "mountain"}]},
        {"id": 3, "tags": ["river"]},
    ]
    params = FilterParams(selections=(Selection("tags", ["river"], key="name"),))
    assert _ids(filter_data(items, params)) == [1]


def test_criteria_combine(records):
    """Search, years and selections must all match."""
    params = FilterParams(
        search="saint",
        years=(1800, 1900),
        selections=(Selection("state", ["open"]),),
    )
    assert _ids(filter_data(records, params)) == [1]


def test_filter_params_are_frozen():
    """Parameters are immutable."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        FilterParams().search = "x"  # type: ignore[misc]


def test_filter_data_logs_summary(records, debug_caplog):
    """A debug message reports how many records were kept."""
    filter_data(records, FilterParams(search="saint"))
    assert "filter_data kept 2 of 4 record(s)" in debug_caplog.text
