"""Unit tests for generic_functions.utils.hashing."""

import pytest

from generic_functions.utils.hashing import hash_value


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("hello", "1n1e4y"),
        ("", "0"),
        ("a", "2p"),
        (42, "1a6"),
        ([1, 2, 3], "9za3ga"),
        ({"a": 1, "b": 2}, "kz8hg0"),
        ("Église", "prjznx"),
        ({"name": "Église"}, "-77ql7k"),
        ("😀", "11zz7"),
    ],
)
def test_hash_value_known_values(value, expected):
    """Hashes are stable base-36 strings, negative when the 32-bit value is."""
    assert hash_value(value) == expected


def test_hash_value_depends_on_key_order():
    """Mappings are serialised in insertion order."""
    assert hash_value({"a": 1, "b": 2}) != hash_value({"b": 2, "a": 1})


def test_hash_value_string_differs_from_its_json():
    """Strings are hashed raw, not as JSON string literals."""
    assert hash_value("hello") != hash_value('"hello"')
