"""General-purpose utility helpers: identity, constants, iteratees, ranges, stubs."""

from __future__ import annotations

import itertools
import math
import threading
from collections.abc import Callable, Mapping
from typing import Any

from ._helpers import base_get_path, base_is_equal, base_is_match, to_path

__all__ = [
    "constant",
    "identity",
    "iteratee",
    "matches",
    "matches_property",
    "noop",
    "property_",
    "property_of",
    "range_",
    "range_right",
    "stub_dict",
    "stub_false",
    "stub_list",
    "stub_string",
    "stub_true",
    "times",
    "unique_id",
]

_id_counter = itertools.count(1)
_id_lock = threading.Lock()


def identity(value: Any = None, *_args: Any) -> Any:
    """Return the first argument it receives.

    Example:
        >>> identity({"a": 1})
        {'a': 1}
    """
    return value


def constant(value: Any) -> Callable[..., Any]:
    """Create a function that always returns ``value``.

    Example:
        >>> constant(42)()
        42
    """

    def constant_(*_args: Any, **_kwargs: Any) -> Any:
        return value

    return constant_


def noop(*_args: Any, **_kwargs: Any) -> None:
    """Do nothing and return None."""


def property_(path: Any) -> Callable[[Any], Any]:
    """Create a function returning the value at ``path`` of a given object.

    Args:
        path: Dotted string, bracket path or list of keys.

    Returns:
        A function ``obj -> value`` (None when the path is missing).

    Example:
        >>> property_("a.b")({"a": {"b": 2}})
        2
    """
    keys = to_path(path)

    def getter(obj: Any) -> Any:
        return base_get_path(obj, keys, None)

    return getter


def property_of(obj: Any) -> Callable[[Any], Any]:
    """Create a function returning the value of ``obj`` at a given path.

    Example:
        >>> property_of({"a": {"b": 2}})("a.b")
        2
    """

    def getter(path: Any) -> Any:
        return base_get_path(obj, to_path(path), None)

    return getter


def matches(source: Mapping[Any, Any]) -> Callable[[Any], bool]:
    """Create a predicate doing a partial deep comparison against ``source``.

    Example:
        >>> matches({"a": 1})({"a": 1, "b": 2})
        True
    """
    source = dict(source)

    def predicate(obj: Any) -> bool:
        return base_is_match(obj, source)

    return predicate


def matches_property(path: Any, value: Any) -> Callable[[Any], bool]:
    """Create a predicate checking that the value at ``path`` equals ``value``.

    Mapping values are compared partially, like :func:`matches`.

    Example:
        >>> matches_property("a", 1)({"a": 1})
        True
    """
    keys = to_path(path)

    def predicate(obj: Any) -> bool:
        actual = base_get_path(obj, keys)
        if isinstance(value, Mapping) and isinstance(actual, Mapping):
            return base_is_match(actual, value)
        return base_is_equal(actual, value)

    return predicate


def iteratee(func: Any = None) -> Callable[..., Any]:
    """Turn an iteratee shorthand into a callable.

    - ``None``: :func:`identity`
    - callable: returned unchanged
    - mapping: :func:`matches`
    - two-item list or tuple: :func:`matches_property` (``[path, value]``)
    - anything else: :func:`property_`

    Example:
        >>> iteratee("name")({"name": "Ada"})
        'Ada'
    """
    if func is None:
        return identity
    if callable(func):
        return func
    if isinstance(func, Mapping):
        return matches(func)
    if isinstance(func, (list, tuple)) and len(func) == 2:
        return matches_property(func[0], func[1])
    return property_(func)


def unique_id(prefix: str = "") -> str:
    """Generate a process-wide unique id, optionally prefixed.

    Example:
        >>> unique_id("contact_")  # doctest: +SKIP
        'contact_1'
    """
    with _id_lock:
        value = next(_id_counter)
    return f"{prefix}{value}"


def times(n: int, func: Callable[[int], Any] | None = None) -> list[Any]:
    """Call ``func`` ``n`` times with the index and collect the results.

    Example:
        >>> times(3, lambda i: i * 2)
        [0, 2, 4]
    """
    func = func if func is not None else identity
    return [func(index) for index in range(max(n, 0))]


def _base_range(start: float, end: float | None, step: float | None) -> list[Any]:
    if end is None:
        start, end = 0, start
    if step is None:
        step = 1 if start <= end else -1
    if step == 0:
        # Zero step repeats ``start`` once per unit of distance.
        return [start] * int(abs(math.ceil(end - start)))
    length = max(math.ceil((end - start) / step), 0)
    return [start + index * step for index in range(length)]


def range_(start: float, end: float | None = None, step: float | None = None) -> list[Any]:
    """Create a list of numbers progressing from ``start`` up to, not including, ``end``.

    With a single argument the range runs from 0 to ``start``. When ``step`` is
    omitted it is 1, or -1 when ``end`` is below ``start``.

    Example:
        >>> range_(4)
        [0, 1, 2, 3]
        >>> range_(1, 4)
        [1, 2, 3]
        >>> range_(0, -4)
        [0, -1, -2, -3]
    """
    return _base_range(start, end, step)


def range_right(
    start: float, end: float | None = None, step: float | None = None
) -> list[Any]:
    """Like :func:`range_` but populated in descending order.

    Example:
        >>> range_right(4)
        [3, 2, 1, 0]
    """
    return _base_range(start, end, step)[::-1]


def stub_list() -> list[Any]:
    """Return a new empty list."""
    return []


def stub_dict() -> dict[Any, Any]:
    """Return a new empty dict."""
    return {}


def stub_string() -> str:
    """Return an empty string."""
    return ""


def stub_true() -> bool:
    """Return True."""
    return True


def stub_false() -> bool:
    """Return False."""
    return False
