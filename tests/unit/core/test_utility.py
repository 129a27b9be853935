"""Unit tests for generic_functions.core.utility."""

import pytest

from generic_functions.core.utility import (
    constant,
    identity,
    iteratee,
    matches,
    matches_property,
    noop,
    property_,
    property_of,
    range_,
    range_right,
    stub_dict,
    stub_false,
    stub_list,
    stub_string,
    stub_true,
    times,
    unique_id,
)


def test_identity_returns_first_argument():
    """identity ignores every argument but the first."""
    value = {"a": 1}
    assert identity(value, 0, [value]) is value
    assert identity() is None


def test_constant_and_noop():
    """constant always returns its value; noop always returns None."""
    always = constant(42)
    assert always() == 42
    assert always(1, key="x") == 42
    assert noop(1, 2, three=3) is None


def test_property_and_property_of():
    """Path getters return None for missing paths."""
    data = {"a": {"b": [1, 2]}}
    assert property_("a.b[1]")(data) == 2
    assert property_(["a", "missing"])(data) is None
    assert property_of(data)("a.b[0]") == 1


def test_matches_and_matches_property():
    """matches compares partially; matches_property compares one path."""
    assert matches({"a": 1})({"a": 1, "b": 2})
    assert not matches({"a": 2})({"a": 1})
    assert matches_property("a.b", 1)({"a": {"b": 1}})
    assert matches_property("a", {"x": 1})({"a": {"x": 1, "y": 2}})
    assert not matches_property("a", 1)({})


@pytest.mark.parametrize(
    ("shorthand", "item", "expected"),
    [
        (None, 5, 5),
        (lambda x: x + 1, 5, 6),
        ({"active": True}, {"active": True, "id": 1}, True),
        (["active", False], {"active": True}, False),
        ("user.name", {"user": {"name": "Ada"}}, "Ada"),
    ],
)
def test_iteratee_shorthands(shorthand, item, expected):
    """Each shorthand form becomes the matching callable."""
    assert iteratee(shorthand)(item) == expected


def test_unique_id_is_increasing_and_prefixed():
    """Successive ids differ and carry the prefix."""
    first = unique_id("contact_")
    second = unique_id("contact_")
    assert first.startswith("contact_")
    assert int(second.removeprefix("contact_")) > int(first.removeprefix("contact_"))


def test_times():
    """times collects results of the callback for each index; n <= 0 gives nothing."""
    assert times(3) == [0, 1, 2]
    assert times(3, lambda i: i * i) == [0, 1, 4]
    assert not times(-1)


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        ((4,), [0, 1, 2, 3]),
        ((-4,), [0, -1, -2, -3]),
        ((1, 5), [1, 2, 3, 4]),
        ((0, 20, 5), [0, 5, 10, 15]),
        ((0, -4, -1), [0, -1, -2, -3]),
        ((1, 4, 0), [1, 1, 1]),
        ((0,), []),
    ],
)
def test_range(args, expected):
    """range_ follows the start/end/step rules, including a zero step."""
    assert range_(*args) == expected


def test_range_right():
    """range_right is range_ reversed."""
    assert range_right(1, 5) == [4, 3, 2, 1]


def test_stubs_return_fresh_values():
    """Stubs return new containers each call and fixed booleans/strings."""
    assert stub_list() == [] and stub_list() is not stub_list()
    assert stub_dict() == {}
    assert stub_string() == ""
    assert stub_true() is True
    assert stub_false() is False
