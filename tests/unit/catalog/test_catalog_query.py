"""Unit tests for generic_functions.catalog.query."""

import pytest

from generic_functions.catalog import (
    Catalog,
    DocConstant,
    DocFunction,
    PackageInfo,
    filter_by_search,
    find_entry,
    format_category_name,
    generate_id,
    group_by_category,
    sort_by_name,
)
from generic_functions.errors import CatalogEntryNotFoundError


def make_function(name: str, category: str = "array", description: str = "") -> DocFunction:
    """Build a function entry with only the fields queries look at."""
    return DocFunction(name=name, category=category, description=description, syntax=f"{name}()")


FUNCTIONS = [
    make_function("chunk", "array", "Split an array into groups."),
    make_function("camel_case", "string", "Convert to camelCase."),
    make_function("Zip_", "array", "Group elements by index."),
    make_function("api", "utils", "Perform an HTTP request and decode JSON."),
    make_function("orphan", "", "No category."),
]

CATALOG = Catalog(
    functions=tuple(FUNCTIONS),
    constants=(
        DocConstant("REGEX", "constants", "Common patterns.", "Mapping[str, str]", "{}"),
    ),
    package_info=PackageInfo(name="generic-functions", version="0.9.7"),
)


@pytest.mark.parametrize(
    ("term", "expected"),
    [
        ("CASE", ["camel_case"]),
        ("group", ["chunk", "Zip_"]),
        ("json", ["api"]),
        ("  ", ["chunk", "camel_case", "Zip_", "api", "orphan"]),
        ("nothing", []),
    ],
)
def test_filter_by_search(term, expected):
    """Names and descriptions are searched ignoring case; blank terms keep everything."""
    assert [f.name for f in filter_by_search(FUNCTIONS, term)] == expected


def test_sort_by_name_ignores_case():
    """Names sort alphabetically regardless of case."""
    assert [f.name for f in sort_by_name(FUNCTIONS)] == [
        "api",
        "camel_case",
        "chunk",
        "orphan",
        "Zip_",
    ]


def test_group_by_category():
    """Groups keep encounter order; entries without a category go to other."""
    groups = group_by_category(FUNCTIONS)
    assert list(groups) == ["array", "string", "utils", "other"]
    assert [f.name for f in groups["array"]] == ["chunk", "Zip_"]


@pytest.mark.parametrize(
    ("category", "expected"),
    [("array", "Array"), ("date-time", "Date Time"), ("type_guards", "Type Guards"), ("", "")],
)
def test_format_category_name(category, expected):
    """Separators become spaces and words are capitalized."""
    assert format_category_name(category) == expected


@pytest.mark.parametrize(
    ("prefix", "name", "expected"),
    [
        ("function", "sortBy", "function-sortby"),
        ("constant", "DATE_FORMATS", "constant-date-formats"),
        ("function", "zip_", "function-zip-"),
    ],
)
def test_generate_id(prefix, name, expected):
    """Ids are lower-case with every other character replaced by a dash."""
    assert generate_id(prefix, name) == expected


def test_find_entry():
    """Functions and constants are found by exact name."""
    assert find_entry(CATALOG, "chunk") is FUNCTIONS[0]
    assert find_entry(CATALOG, "REGEX").category == "constants"


@pytest.mark.parametrize("name", ["Chunk", "regex", "missing"])
def test_find_entry_unknown(name):
    """Lookups are case-sensitive and unknown names raise."""
    with pytest.raises(CatalogEntryNotFoundError, match=f"No catalog entry named '{name}'."):
        find_entry(CATALOG, name)
