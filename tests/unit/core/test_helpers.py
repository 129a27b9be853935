"""Unit tests for the internal building blocks in generic_functions.core._helpers."""

import math

import pytest

from generic_functions.core._helpers import (
    UNSET,
    base_flatten,
    base_get,
    base_get_path,
    base_has,
    base_is_equal,
    base_is_match,
    base_set_path,
    bind_callback,
    getargcount,
    iter_items,
    to_path,
)


@pytest.mark.parametrize(
    ("func", "expected"),
    [
        (lambda: None, 0),
        (lambda x: x, 1),
        (lambda value, key: None, 2),
        (lambda value, key, collection, extra: None, 3),
        (lambda *args: None, 3),
        (lambda x=1: x, 1),
        (len, 1),
    ],
)
def test_getargcount(func, expected):
    """Required positional parameters are counted and capped; *args gets the maximum."""
    assert getargcount(func, 3) == expected


def test_bind_callback_drops_extra_arguments():
    """A one-argument callback can be called with the full (value, key, collection) triple."""
    bound = bind_callback(lambda x: x * 2, 3)
    assert bound(4, 0, [4]) == 8


def test_unset_is_falsy_and_named():
    """UNSET is falsy and has a readable repr."""
    assert not UNSET
    assert repr(UNSET) == "UNSET"


def test_iter_items_for_mapping_sequence_and_none():
    """Mappings yield (value, key), sequences (value, index), None nothing."""
    assert list(iter_items({"a": 1})) == [(1, "a")]
    assert list(iter_items(["x", "y"])) == [("x", 0), ("y", 1)]
    assert not list(iter_items(None))


def test_iter_items_rejects_non_iterables():
    """A number is not a collection."""
    with pytest.raises(TypeError):
        list(iter_items(42))


def test_base_flatten_depths():
    """Depth 1 flattens one level, a negative depth flattens everything."""
    nested = [1, [2, [3, [4]], 5]]
    assert base_flatten(nested, 1) == [1, 2, [3, [4]], 5]
    assert base_flatten(nested, -1) == [1, 2, 3, 4, 5]


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("a.b.c", ["a", "b", "c"]),
        ("a[0].b", ["a", 0, "b"]),
        ("a['x.y']", ["a", "x.y"]),
        (["a", 0], ["a", 0]),
        (3, [3]),
    ],
)
def test_to_path(path, expected):
    """Dotted strings, bracket indices, quoted keys and key lists all parse."""
    assert to_path(path) == expected


def test_base_get_reads_mappings_sequences_and_attributes():
    """Keys resolve against mappings (with str/int twins), indices and attributes."""
    assert base_get({"0": "zero"}, 0) == "zero"
    assert base_get([10, 20], 1) == 20
    assert base_get([10, 20], 5) is UNSET
    assert base_get("abc", "upper")() == "ABC"
    assert base_get(None, "a", "default") == "default"


def test_base_get_path_and_has():
    """Paths walk nested containers and stop at the first missing key."""
    data = {"a": [{"b": 1}]}
    assert base_get_path(data, ["a", 0, "b"]) == 1
    assert base_get_path(data, ["a", 1, "b"], None) is None
    assert base_has(data, "a")
    assert not base_has(data, "z")


def test_base_set_path_creates_lists_for_indices():
    """Missing containers become lists before an index key, dicts otherwise."""
    data: dict = {}
    base_set_path(data, ["a", 0, "b"], 1)
    assert data == {"a": [{"b": 1}]}


def test_base_is_equal_is_deep():
    """Deep equality treats lists and tuples alike and NaN as equal to NaN."""
    assert base_is_equal({"a": [1, (2, 3)]}, {"a": [1, [2, 3]]})
    assert base_is_equal(math.nan, math.nan)
    assert not base_is_equal({"a": 1}, {"a": 1, "b": 2})
    assert not base_is_equal([1], {0: 1})


def test_base_is_match_is_partial():
    """Only the keys of the source are compared, at any depth."""
    assert base_is_match({"a": 1, "b": {"c": 2, "d": 3}}, {"b": {"c": 2}})
    assert not base_is_match({"a": 1}, {"b": None})
