"""Type guards.

Predicates answering "what kind of value is this?" with Python's types:
mappings stand in for maps and plain objects, lists for arrays, compiled
patterns for regular expressions and exceptions for errors. ``bool`` is never
a number.
"""

from __future__ import annotations

import array
import math
import numbers
import re
import types
import weakref
from collections.abc import Callable, Mapping, Sized
from decimal import Decimal
from typing import Any

from ._helpers import UNSET, base_get, base_is_equal, is_scalar

__all__ = [
    "MAX_SAFE_INTEGER",
    "is_array_like",
    "is_array_like_object",
    "is_boolean",
    "is_buffer",
    "is_equal_with",
    "is_error",
    "is_finite",
    "is_function",
    "is_integer",
    "is_length",
    "is_list",
    "is_map",
    "is_match",
    "is_match_with",
    "is_nan",
    "is_native",
    "is_nil",
    "is_none",
    "is_number",
    "is_object",
    "is_object_like",
    "is_plain_object",
    "is_reg_exp",
    "is_safe_integer",
    "is_set",
    "is_string",
    "is_typed_array",
    "is_weak_map",
    "is_weak_set",
]

MAX_SAFE_INTEGER = 2**53 - 1


def is_string(value: Any) -> bool:
    """Check whether ``value`` is a ``str``."""
    return isinstance(value, str)


def is_boolean(value: Any) -> bool:
    """Check whether ``value`` is a ``bool``."""
    return isinstance(value, bool)


def is_number(value: Any) -> bool:
    """Check whether ``value`` is a real number (int, float, Decimal, Fraction), excluding bool.

    Example:
        >>> is_number(3.0), is_number("3"), is_number(True)
        (True, False, False)
    """
    return isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    """Check whether ``value`` is an integral number (``3`` and ``3.0`` both are).

    Example:
        >>> is_integer(3), is_integer(3.0), is_integer(3.5), is_integer(float("inf"))
        (True, True, False, False)
    """
    if not is_number(value):
        return False
    if isinstance(value, numbers.Integral):
        return True
    if isinstance(value, Decimal):
        return value.is_finite() and value == value.to_integral_value()
    if isinstance(value, numbers.Rational):
        return value.denominator == 1
    return is_finite(value) and value == int(value)


def is_safe_integer(value: Any) -> bool:
    """Check whether ``value`` is an integer representable exactly as a double.

    Example:
        >>> is_safe_integer(2**53 - 1), is_safe_integer(2**53)
        (True, False)
    """
    return is_integer(value) and abs(value) <= MAX_SAFE_INTEGER


def is_finite(value: Any) -> bool:
    """Check whether ``value`` is a finite number."""
    if not is_number(value):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, numbers.Rational):
        return True
    return math.isfinite(value)


def is_nan(value: Any) -> bool:
    """Check whether ``value`` is a NaN number (quiet or signaling ``Decimal`` NaNs too).

    Example:
        >>> is_nan(float("nan")), is_nan(None)
        (True, False)
    """
    if isinstance(value, Decimal):
        return value.is_nan()
    return is_number(value) and math.isnan(value)


def is_length(value: Any) -> bool:
    """Check whether ``value`` is a valid length (a non-negative safe integer int)."""
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and 0 <= value <= MAX_SAFE_INTEGER
    )


def is_none(value: Any) -> bool:
    """Check whether ``value`` is None."""
    return value is None


is_nil = is_none


def is_function(value: Any) -> bool:
    """Check whether ``value`` is callable."""
    return callable(value)


def is_native(value: Any) -> bool:
    """Check whether ``value`` is a function implemented in C (a builtin).

    Example:
        >>> is_native(len), is_native(lambda: None)
        (True, False)
    """
    return isinstance(
        value,
        (
            types.BuiltinFunctionType,
            types.BuiltinMethodType,
            types.WrapperDescriptorType,
            types.MethodWrapperType,
            types.MethodDescriptorType,
        ),
    )


def is_object(value: Any) -> bool:
    """Check whether ``value`` is an object: anything but None and scalars.

    Functions are objects.

    Example:
        >>> is_object({}), is_object([1]), is_object(len), is_object("a")
        (True, True, True, False)
    """
    return not is_scalar(value)


def is_object_like(value: Any) -> bool:
    """Like :func:`is_object`, excluding functions."""
    return is_object(value) and not callable(value)


def is_plain_object(value: Any) -> bool:
    """Check whether ``value`` is exactly a ``dict`` (not a subclass)."""
    return type(value) is dict  # pylint: disable=unidiomatic-typecheck


def is_map(value: Any) -> bool:
    """Check whether ``value`` is a mapping."""
    return isinstance(value, Mapping)


def is_set(value: Any) -> bool:
    """Check whether ``value`` is a ``set`` or ``frozenset``."""
    return isinstance(value, (set, frozenset))


def is_list(value: Any) -> bool:
    """Check whether ``value`` is a ``list``."""
    return isinstance(value, list)


def is_array_like(value: Any) -> bool:
    """Check whether ``value`` has a length and is neither a mapping nor a function.

    Example:
        >>> is_array_like([1, 2]), is_array_like("abc"), is_array_like({"a": 1})
        (True, True, False)
    """
    return (
        isinstance(value, Sized)
        and not isinstance(value, Mapping)
        and not callable(value)
    )


def is_array_like_object(value: Any) -> bool:
    """Like :func:`is_array_like`, excluding strings."""
    return is_array_like(value) and not isinstance(value, (str, bytes))


def is_buffer(value: Any) -> bool:
    """Check whether ``value`` is a binary buffer (bytes, bytearray, memoryview)."""
    return isinstance(value, (bytes, bytearray, memoryview))


def is_typed_array(value: Any) -> bool:
    """Check whether ``value`` is an :class:`array.array`."""
    return isinstance(value, array.array)


def is_reg_exp(value: Any) -> bool:
    """Check whether ``value`` is a compiled regular expression."""
    return isinstance(value, re.Pattern)


def is_error(value: Any) -> bool:
    """Check whether ``value`` is an exception instance."""
    return isinstance(value, BaseException)


def is_weak_map(value: Any) -> bool:
    """Check whether ``value`` is a weak-keyed or weak-valued dictionary."""
    return isinstance(value, (weakref.WeakKeyDictionary, weakref.WeakValueDictionary))


def is_weak_set(value: Any) -> bool:
    """Check whether ``value`` is a :class:`weakref.WeakSet`."""
    return isinstance(value, weakref.WeakSet)


def is_match(obj: Any, source: Mapping[Any, Any]) -> bool:
    """Partial deep comparison: does ``obj`` contain every item of ``source``?

    Example:
        >>> is_match({"a": 1, "b": {"c": 2, "d": 3}}, {"b": {"c": 2}})
        True
    """
    return is_match_with(obj, source)


def is_match_with(
    obj: Any,
    source: Mapping[Any, Any],
    customizer: Callable[..., Any] | None = None,
) -> bool:
    """Like :func:`is_match`, with ``customizer(obj_value, src_value, key)`` deciding.

    A customizer returning None falls back to the default comparison.
    """
    for key, expected in source.items():
        actual = base_get(obj, key)
        if actual is UNSET:
            return False
        decided = (
            customizer(actual, expected, key) if customizer is not None else None
        )
        if decided is not None:
            if not decided:
                return False
            continue
        if isinstance(expected, Mapping) and not is_scalar(actual):
            if not is_match_with(actual, expected, customizer):
                return False
        elif not base_is_equal(actual, expected):
            return False
    return True


def is_equal_with(
    value: Any, other: Any, customizer: Callable[[Any, Any], Any] | None = None
) -> bool:
    """Deep comparison where ``customizer(value, other)`` may decide equality.

    A customizer returning None falls back to :func:`~generic_functions.core.object.is_equal`.
    The customizer is consulted at every level of nesting.

    Example:
        >>> is_greeting = lambda v: v in ("hello", "hi")
        >>> def loose(a, b):
        ...     if is_greeting(a) and is_greeting(b):
        ...         return True
        >>> is_equal_with(["hello", "goodbye"], ["hi", "goodbye"], loose)
        True
    """
    if customizer is not None:
        decided = customizer(value, other)
        if decided is not None:
            return bool(decided)
    if isinstance(value, Mapping) and isinstance(other, Mapping):
        return len(value) == len(other) and all(
            key in other and is_equal_with(item, other[key], customizer)
            for key, item in value.items()
        )
    if isinstance(value, (list, tuple)) and isinstance(other, (list, tuple)):
        return len(value) == len(other) and all(
            is_equal_with(a, b, customizer) for a, b in zip(value, other)
        )
    return base_is_equal(value, other)
