"""Unit tests for generic_functions.core.object."""

from types import SimpleNamespace

import pytest

from generic_functions.core.object import (
    assign,
    at,
    clone,
    clone_deep,
    compare_types,
    conforms_to,
    defaults,
    defaults_deep,
    find_last_key,
    flat,
    for_own,
    for_own_right,
    from_pairs,
    functions,
    get,
    get_object_keys_by_type,
    get_object_value_by_path,
    get_value_type,
    has,
    invert,
    invert_by,
    invoke,
    is_empty,
    is_equal,
    keys,
    map_keys,
    map_values,
    merge,
    merge_with,
    method,
    method_of,
    omit,
    omit_by,
    pick,
    pick_by,
    result,
    set_,
    set_with,
    to_pairs,
    transform,
    unset,
    update,
    values,
)

# --- path accessors ---


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("a[0].b.c", 3),
        (["a", "0", "b", "c"], 3),
        ("a[0].b.missing", "fallback"),
        ("a[5]", "fallback"),
    ],
)
def test_get(path, expected):
    """Paths resolve through mappings and lists; misses give the default."""
    assert get({"a": [{"b": {"c": 3}}]}, path, "fallback") == expected


def test_get_keeps_existing_none():
    """An existing None value is not replaced by the default."""
    assert get({"a": None}, "a", "default") is None


def test_get_reads_attributes():
    """Plain objects are read through their attributes."""
    assert get(SimpleNamespace(inner=SimpleNamespace(value=7)), "inner.value") == 7


def test_has():
    """has reports whether the whole path resolves."""
    assert has({"a": {"b": 2}}, "a.b")
    assert has({"a": {"b": None}}, "a.b")
    assert not has({"a": {"b": 2}}, ["a", "c"])
    assert not has({"a": 1}, "")


def test_set_creates_missing_containers():
    """Index keys create lists, other keys create dicts."""
    assert set_({}, ["x", 0, "y", "z"], 5) == {"x": [{"y": {"z": 5}}]}
    data = {"a": [{"b": {"c": 3}}]}
    assert set_(data, "a[0].b.c", 4) is data
    assert data == {"a": [{"b": {"c": 4}}]}


def test_set_with_customizer():
    """The customizer chooses the container created for missing keys."""
    assert set_with({}, "[0][1]", "a", lambda *_: {}) == {0: {1: "a"}}


def test_unset():
    """unset reports whether something was removed."""
    data = {"a": [{"b": {"c": 7}}]}
    assert unset(data, "a[0].b.c")
    assert data == {"a": [{"b": {}}]}
    assert not unset(data, "a[0].b.c")
    items = {"list": [1, 2, 3]}
    assert unset(items, "list[1]")
    assert items == {"list": [1, 3]}


def test_update():
    """update replaces the value with the updater result."""
    assert update({"a": [{"b": {"c": 3}}]}, "a[0].b.c", lambda n: n * n) == {
        "a": [{"b": {"c": 9}}]
    }
    assert update({}, "count", lambda n: (n or 0) + 1) == {"count": 1}


def test_at_and_result():
    """at collects several paths; result calls callables it finds."""
    assert at({"a": [{"b": {"c": 3}}, 4]}, "a[0].b.c", "a[1]", "nope") == [3, 4, None]
    assert result({"a": {"b": lambda: 3}}, "a.b") == 3
    assert result({}, "a", lambda: "computed") == "computed"
    assert result({"a": 1}, "a") == 1


def test_invoke_method_and_method_of():
    """Methods found at a path are invoked with the extra arguments."""
    assert invoke({"a": [1, 2, 3, 4]}, "a.index", 3) == 2
    assert invoke({"a": 1}, "a") is None
    assert method("a.upper")({"a": "hi"}) == "HI"
    assert method_of({"a": "hi"})("a.upper") == "HI"


def test_get_object_value_by_path_maps_over_lists():
    """Lists met on the path are mapped over and flattened one level."""
    data = {"users": [{"name": "a", "tags": ["x"]}, {"name": "b", "tags": ["y", "z"]}]}
    assert get_object_value_by_path({"foo": {"bar": "baz"}}, ["foo", "bar"]) == "baz"
    assert get_object_value_by_path(data, "users.name") == ["a", "b"]
    assert get_object_value_by_path(data, "users.tags") == ["x", "y", "z"]
    assert get_object_value_by_path({"foo": {}}, "foo.bar") is None


# --- merge and clone ---


def test_assign_is_shallow_and_skips_none_sources():
    """Later sources win and None sources are ignored."""
    target = {"a": 0}
    assert assign(target, {"a": 1, "b": 2}, None, {"c": 3}) is target
    assert target == {"a": 1, "b": 2, "c": 3}


def test_merge_is_deep():
    """Nested mappings and lists merge element by element."""
    merged = merge({"a": [{"b": 2}, {"d": 4}]}, {"a": [{"c": 3}, {"e": 5}]})
    assert merged == {"a": [{"b": 2, "c": 3}, {"d": 4, "e": 5}]}


def test_merge_none_does_not_overwrite():
    """None source values keep the existing value but fill missing keys."""
    assert merge({"a": 1}, {"a": None, "b": None}) == {"a": 1, "b": None}


def test_merge_copies_source_values():
    """Merged values are copies, so later changes to the source do not leak."""
    source = {"nested": {"x": [1]}}
    merged = merge({}, source)
    source["nested"]["x"].append(2)
    assert merged == {"nested": {"x": [1]}}


def test_merge_with_customizer():
    """A customizer result replaces the default merge; None falls back."""

    def concat_lists(obj_value, src_value, *_):
        if isinstance(obj_value, list):
            return obj_value + src_value
        return None

    assert merge_with({"a": [1], "b": 1}, {"a": [3], "b": 2}, customizer=concat_lists) == {
        "a": [1, 3],
        "b": 2,
    }


def test_defaults_and_defaults_deep():
    """Only missing or None keys are filled, first source first."""
    assert defaults({"a": 1, "n": None}, {"b": 2, "n": 0}, {"a": 3, "b": 4}) == {
        "a": 1,
        "n": 0,
        "b": 2,
    }
    assert defaults_deep({"a": {"b": 2}}, {"a": {"b": 1, "c": 3}}) == {"a": {"b": 2, "c": 3}}


def test_clone_shallow_and_deep():
    """clone shares nested values, clone_deep does not."""
    data = [{"a": 1}]
    assert clone(data)[0] is data[0]
    assert clone_deep(data)[0] is not data[0]
    assert clone_deep(data) == data


# --- keys and values ---


def test_keys_values_and_pairs():
    """Mappings, sequences and objects expose keys and values."""
    assert keys({"a": 1, "b": 2}) == ["a", "b"]
    assert keys("hi") == [0, 1]
    assert keys(None) == []
    assert keys(SimpleNamespace(x=1, _hidden=2)) == ["x"]
    assert values({"a": 1, "b": 2}) == [1, 2]
    assert to_pairs({"a": 1}) == [["a", 1]]
    assert from_pairs([["a", 1], ["b", 2]]) == {"a": 1, "b": 2}


def test_invert_and_invert_by():
    """Later keys win in invert; invert_by groups every key."""
    assert invert({"a": 1, "b": 2, "c": 1}) == {1: "c", 2: "b"}
    assert invert_by({"a": 1, "b": 2, "c": 1}, lambda v: f"group{v}") == {
        "group1": ["a", "c"],
        "group2": ["b"],
    }


def test_map_keys_and_map_values():
    """Callbacks see value then key; shorthands work for values."""
    assert map_keys({"a": 1, "b": 2}, lambda value, key: key + str(value)) == {"a1": 1, "b2": 2}
    assert map_values({"fred": {"age": 40}, "pebbles": {"age": 1}}, "age") == {
        "fred": 40,
        "pebbles": 1,
    }


def test_pick_and_omit():
    """Top-level and nested paths are kept or dropped."""
    source = {"a": 1, "b": "2", "c": 3}
    assert pick(source, "a", "c") == {"a": 1, "c": 3}
    assert pick(source, ["a", "missing"]) == {"a": 1}
    assert pick({"a": {"b": 1, "c": 2}}, "a.b") == {"a": {"b": 1}}
    assert omit(source, "a", "c") == {"b": "2"}
    nested = {"a": {"b": 1, "c": 2}}
    assert omit(nested, "a.b") == {"a": {"c": 2}}
    assert nested == {"a": {"b": 1, "c": 2}}


def test_pick_by_and_omit_by():
    """Predicates see the value and the key."""
    source = {"a": 1, "b": "2", "c": 3}
    assert pick_by(source, lambda v: isinstance(v, int)) == {"a": 1, "c": 3}
    assert omit_by(source, lambda v: isinstance(v, int)) == {"b": "2"}
    assert pick_by(source, lambda v, k: k == "b") == {"b": "2"}


def test_for_own_and_find_last_key():
    """Own iteration honours early exit and reverse order."""
    seen = []
    for_own({"a": 1, "b": 2, "c": 3}, lambda v, k: seen.append(k) or k != "b")
    assert seen == ["a", "b"]
    seen.clear()
    for_own_right({"a": 1, "b": 2}, lambda v, k: seen.append(k))
    assert seen == ["b", "a"]
    users = {"barney": {"age": 36}, "fred": {"age": 40}, "pebbles": {"age": 1}}
    assert find_last_key(users, lambda u: u["age"] > 30) == "fred"
    assert find_last_key(users, lambda u: u["age"] > 99) is None


def test_transform():
    """The accumulator defaults to a list for sequences and a dict for mappings."""
    assert transform([2, 3, 4], lambda acc, n: acc.append(n * n) or n != 3) == [4, 9]
    assert transform({"a": 1, "b": 2}, lambda acc, v, k: acc.setdefault(v, k)) == {
        1: "a",
        2: "b",
    }


def test_functions_and_conforms_to():
    """Callable members are listed; conforms_to applies per-key predicates."""
    assert functions({"a": len, "b": 1}) == ["a"]
    assert conforms_to({"a": 1, "b": 2}, {"b": lambda n: n > 1})
    assert not conforms_to({"a": 1}, {"b": lambda n: True})


# --- inspection ---


def test_is_equal():
    """Deep comparison ignores the list/tuple distinction."""
    assert is_equal({"a": [1, 2]}, {"a": (1, 2)})
    assert not is_equal({"a": [1, 2]}, {"a": [2, 1]})


@pytest.mark.parametrize(
    ("value", "props", "expected"),
    [
        ("", False, True),
        ("x", False, False),
        ([], False, True),
        (["", []], False, True),
        (["a"], False, False),
        ({}, False, True),
        ({"a": ""}, False, False),
        ({"a": ""}, True, True),
        ({"a": "x"}, True, False),
        (42, False, True),
        (None, False, True),
    ],
)
def test_is_empty(value, props, expected):
    """Emptiness is recursive for lists and, with props, for mapping values."""
    assert is_empty(value, props) is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "undefined"),
        (True, "boolean"),
        (42, "number"),
        (1.5, "number"),
        ("hello", "string"),
        (len, "function"),
        ({}, "object"),
        ([], "object"),
    ],
)
def test_get_value_type(value, expected):
    """Values are classified under the coarse type names."""
    assert get_value_type(value) == expected


def test_get_object_keys_by_type_and_compare_types():
    """Type queries find keys in mappings and indexes in lists."""
    person = {"name": "John", "age": 30, "email": "j@x.io"}
    assert get_object_keys_by_type(person, "string") == ["name", "email"]
    data = [1, "hello", {"name": "John", "age": 30}, True, {"name": "Jane", "age": 25}]
    assert compare_types(data, "number") == [0, 2, 4]
    assert compare_types(data, "number", get_keys=True) == [0, "age", "age"]
    assert compare_types(data, "!object") == [0, 1, 3]


def test_flat():
    """Unique truthy leaves are joined; props restrict the keys collected."""
    assert flat({"a": 1, "b": {"c": 2, "d": [3, 0]}}) == "1, 2, 3"
    assert flat({"a": 1, "b": {"c": 2}}, props=["c"]) == "2"
    assert flat([{"x": "a"}, {"x": "a"}, {"x": "b"}]) == "a, b"
