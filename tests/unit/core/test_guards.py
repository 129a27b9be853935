"""Unit tests for generic_functions.core.guards."""

import array
import math
import re
import weakref
from decimal import Decimal
from fractions import Fraction

import pytest

from generic_functions.core.guards import (
    MAX_SAFE_INTEGER,
    is_array_like,
    is_array_like_object,
    is_boolean,
    is_buffer,
    is_equal_with,
    is_error,
    is_finite,
    is_function,
    is_integer,
    is_length,
    is_list,
    is_map,
    is_match,
    is_match_with,
    is_nan,
    is_native,
    is_nil,
    is_none,
    is_number,
    is_object,
    is_object_like,
    is_plain_object,
    is_reg_exp,
    is_safe_integer,
    is_set,
    is_string,
    is_typed_array,
    is_weak_map,
    is_weak_set,
)


class _Dict(dict):
    """A dict subclass, which is a mapping but not a plain object."""


# --- numbers ---


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (3, True),
        (3.5, True),
        (Decimal("1.5"), True),
        (math.nan, True),
        (True, False),
        ("3", False),
        (None, False),
    ],
)
def test_is_number(value, expected):
    """Booleans and numeric strings are not numbers."""
    assert is_number(value) is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (3, True),
        (3.0, True),
        (3.5, False),
        (math.inf, False),
        (math.nan, False),
        ("3", False),
        (False, False),
    ],
)
def test_is_integer(value, expected):
    """Whole floats count as integers; infinities do not."""
    assert is_integer(value) is expected


def test_safe_integer_and_length_bounds():
    """Safe integers and lengths stop at 2**53 - 1."""
    assert is_safe_integer(MAX_SAFE_INTEGER)
    assert is_safe_integer(-MAX_SAFE_INTEGER)
    assert not is_safe_integer(MAX_SAFE_INTEGER + 1)
    assert is_length(0)
    assert is_length(MAX_SAFE_INTEGER)
    assert not is_length(-1)
    assert not is_length(3.0)
    assert not is_length(True)


def test_is_finite_and_is_nan():
    """Non-numbers are neither finite nor NaN."""
    assert is_finite(3)
    assert not is_finite(math.inf)
    assert not is_finite("3")
    assert is_nan(float("nan"))
    assert not is_nan(None)
    assert not is_nan("nan")


def test_decimal_and_fraction_guards_skip_float_conversion():
    """Decimals beyond float range, signaling NaNs and big fractions are classified exactly."""
    huge = Decimal("1e400")
    assert is_finite(huge)
    assert is_integer(huge)
    assert not is_nan(huge)
    assert not is_integer(Decimal("1e-400"))
    assert is_nan(Decimal("sNaN"))
    assert is_nan(Decimal("NaN"))
    assert not is_finite(Decimal("sNaN"))
    assert not is_integer(Decimal("sNaN"))
    assert not is_finite(Decimal("-Infinity"))
    assert is_finite(Fraction(10**400, 3))
    assert not is_integer(Fraction(10**400, 3))
    assert is_integer(Fraction(10**400, 1))


# --- scalars ---


def test_scalar_type_guards():
    """Simple isinstance guards."""
    assert is_string("a") and not is_string(b"a")
    assert is_boolean(False) and not is_boolean(0)
    assert is_none(None) and is_nil(None) and not is_none(0)
    assert is_function(len) and is_function(lambda: None) and not is_function(1)


def test_is_native():
    """Builtins are native; Python functions are not."""
    assert is_native(len)
    assert is_native([].append)
    assert not is_native(lambda: None)
    assert not is_native(test_is_native)


# --- objects and collections ---


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ({}, True),
        ([1], True),
        (len, True),
        (object(), True),
        ("a", False),
        (1, False),
        (None, False),
    ],
)
def test_is_object(value, expected):
    """Everything but scalars and None is an object."""
    assert is_object(value) is expected


def test_object_like_and_plain_object():
    """Callables are not object-like; only exact dicts are plain objects."""
    assert is_object_like({}) and not is_object_like(len)
    assert is_plain_object({}) and not is_plain_object(_Dict())
    assert not is_plain_object([])


def test_collection_guards():
    """Mappings, sets and lists are told apart."""
    assert is_map({}) and is_map(_Dict()) and not is_map([])
    assert is_set({1}) and is_set(frozenset()) and not is_set([1])
    assert is_list([]) and not is_list(())


@pytest.mark.parametrize(
    ("value", "array_like", "array_like_object"),
    [
        ([1, 2], True, True),
        ((1,), True, True),
        ("abc", True, False),
        (b"abc", True, False),
        ({"a": 1}, False, False),
        (len, False, False),
        (3, False, False),
    ],
)
def test_array_like(value, array_like, array_like_object):
    """Sized non-mapping values are array-like; strings are not array-like objects."""
    assert is_array_like(value) is array_like
    assert is_array_like_object(value) is array_like_object


def test_special_type_guards():
    """Buffers, typed arrays, patterns, errors and weak containers."""
    assert is_buffer(b"x") and is_buffer(bytearray()) and not is_buffer("x")
    assert is_typed_array(array.array("i", [1])) and not is_typed_array([1])
    assert is_reg_exp(re.compile("x")) and not is_reg_exp("x")
    assert is_error(ValueError("x")) and not is_error(ValueError)
    assert is_weak_map(weakref.WeakKeyDictionary()) and not is_weak_map({})
    assert is_weak_set(weakref.WeakSet()) and not is_weak_set(set())


# --- matching and equality ---


def test_is_match_is_partial_and_deep():
    """Only source keys are compared, recursing into nested mappings."""
    obj = {"a": 1, "b": {"c": 2, "d": 3}}
    assert is_match(obj, {"b": {"c": 2}})
    assert is_match(obj, {})
    assert not is_match(obj, {"b": {"c": 3}})
    assert not is_match(obj, {"z": None})


def test_is_match_with_customizer():
    """A customizer decides comparisons; None falls back to equality."""

    def case_insensitive(actual, expected, key):
        if isinstance(actual, str) and isinstance(expected, str):
            return actual.lower() == expected.lower()
        return None

    assert is_match_with({"name": "Fred", "age": 40}, {"name": "FRED"}, case_insensitive)
    assert not is_match_with({"name": "Fred", "age": 40}, {"age": 41}, case_insensitive)


def test_is_equal_with_consults_customizer_at_every_level():
    """Nested values go through the customizer before default equality."""

    def greetings_match(a, b):
        greetings = ("hello", "hi")
        if a in greetings and b in greetings:
            return True
        return None

    assert is_equal_with(["hello", "goodbye"], ["hi", "goodbye"], greetings_match)
    assert is_equal_with({"x": ["hi"]}, {"x": ["hello"]}, greetings_match)
    assert not is_equal_with(["hello", "goodbye"], ["hi", "bye"], greetings_match)
    assert is_equal_with([1, 2], (1, 2))
