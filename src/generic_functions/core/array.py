"""Array helpers.

Functions take any sequence and return new lists, except ``fill``, ``pull*``,
``remove`` and ``reverse``, which mutate the list they are given and return
it (or the removed elements). The ``*_by`` variants accept an iteratee
(callable or shorthand, see :func:`~generic_functions.core.utility.iteratee`)
called with one element; the ``*_with`` variants accept a comparator called
with two.

Membership checks use equality rather than hashing, so unhashable elements
such as dicts and lists are supported throughout.
"""

from __future__ import annotations

import bisect
import itertools
import numbers
import random
from collections.abc import Callable, Mapping, MutableSequence, Sequence
from typing import Any

from ._helpers import (
    base_flatten,
    base_is_equal,
    base_set_path,
    bind_callback,
    to_path,
)
from .string import purify
from .utility import identity, property_
from .utility import iteratee as make_iteratee

__all__ = [
    "check_length",
    "chunk",
    "compact",
    "concat",
    "difference",
    "difference_by",
    "difference_with",
    "drop",
    "drop_right",
    "drop_right_while",
    "drop_while",
    "fill",
    "find_index",
    "find_last_index",
    "flatten",
    "flatten_deep",
    "flatten_depth",
    "get_last_element",
    "get_unique",
    "head",
    "index_of",
    "initial",
    "intersection",
    "intersection_by",
    "intersection_with",
    "join",
    "last",
    "last_index_of",
    "nth",
    "pull",
    "pull_all",
    "pull_all_by",
    "pull_all_with",
    "pull_at",
    "random_string",
    "remove",
    "reverse",
    "slice_",
    "sort_objects",
    "sorted_index",
    "sorted_index_by",
    "sorted_index_of",
    "sorted_last_index",
    "sorted_last_index_by",
    "sorted_last_index_of",
    "tail",
    "take",
    "take_right",
    "take_right_while",
    "take_while",
    "union",
    "union_by",
    "union_with",
    "uniq",
    "uniq_by",
    "uniq_with",
    "unzip",
    "unzip_with",
    "without",
    "xor",
    "xor_by",
    "xor_with",
    "zip_",
    "zip_object",
    "zip_object_deep",
    "zip_with",
]

Comparator = Callable[[Any, Any], Any]

# ============================================================================
#                               Set-like primitives
# ============================================================================


def _matcher(comparator: Comparator | None) -> Comparator:
    return comparator if comparator is not None else base_is_equal


def _base_uniq(
    items: Sequence[Any],
    iteratee: Any = None,
    comparator: Comparator | None = None,
) -> list[Any]:
    """Keep the first element of each group of equal (computed) values."""
    transform = make_iteratee(iteratee)
    equals = _matcher(comparator)
    seen: list[Any] = []
    result: list[Any] = []
    for item in items:
        computed = transform(item)
        if any(equals(computed, other) for other in seen):
            continue
        seen.append(computed)
        result.append(item)
    return result


def _base_difference(
    items: Sequence[Any],
    excluded: Sequence[Any],
    iteratee: Any = None,
    comparator: Comparator | None = None,
) -> list[Any]:
    transform = make_iteratee(iteratee)
    equals = _matcher(comparator)
    excluded_keys = [transform(item) for item in excluded]
    return [
        item
        for item in items
        if not any(equals(transform(item), other) for other in excluded_keys)
    ]


def _base_intersection(
    arrays: Sequence[Sequence[Any]],
    iteratee: Any = None,
    comparator: Comparator | None = None,
) -> list[Any]:
    if not arrays:
        return []
    transform = make_iteratee(iteratee)
    equals = _matcher(comparator)
    others = [[transform(item) for item in other] for other in arrays[1:]]
    return [
        item
        for item in _base_uniq(arrays[0], iteratee, comparator)
        if all(
            any(equals(transform(item), other) for other in keys) for keys in others
        )
    ]


def _base_xor(
    arrays: Sequence[Sequence[Any]],
    iteratee: Any = None,
    comparator: Comparator | None = None,
) -> list[Any]:
    uniques = [_base_uniq(array, iteratee, comparator) for array in arrays]
    result: list[Any] = []
    for position, array in enumerate(uniques):
        others = [
            item
            for other_position, other in enumerate(uniques)
            if other_position != position
            for item in other
        ]
        result.extend(_base_difference(array, others, iteratee, comparator))
    return _base_uniq(result, iteratee, comparator)


def _pull(
    array: MutableSequence[Any],
    values: Sequence[Any],
    iteratee: Any = None,
    comparator: Comparator | None = None,
) -> MutableSequence[Any]:
    array[:] = _base_difference(list(array), values, iteratee, comparator)
    return array


def _normalize_start(index: int, length: int) -> int:
    return max(length + index, 0) if index < 0 else index


# ============================================================================
#                               Slicing
# ============================================================================


def chunk(array: Sequence[Any], size: int = 1) -> list[list[Any]]:
    """Split ``array`` into groups of ``size``; the last group holds the remainder.

    A ``size`` below 1 gives an empty list.

    Example:
        >>> chunk(["a", "b", "c", "d", "e"], 2)
        [['a', 'b'], ['c', 'd'], ['e']]
    """
    if size < 1:
        return []
    items = list(array)
    return [items[start : start + size] for start in range(0, len(items), size)]


def compact(array: Sequence[Any]) -> list[Any]:
    """Remove falsy values (``False``, ``None``, ``0``, ``""``, empty containers).

    Example:
        >>> compact([0, 1, False, 2, "", 3])
        [1, 2, 3]
    """
    return [item for item in array if item]


def concat(array: Any, *values: Any) -> list[Any]:
    """Concatenate ``array`` with ``values``; list and tuple values are spread one level.

    Example:
        >>> concat([1], 2, [3], [[4]])
        [1, 2, 3, [4]]
    """
    result = list(array) if isinstance(array, (list, tuple)) else [array]
    for value in values:
        if isinstance(value, (list, tuple)):
            result.extend(value)
        else:
            result.append(value)
    return result


def drop(array: Sequence[Any], n: int = 1) -> list[Any]:
    """Drop ``n`` elements from the beginning.

    Example:
        >>> drop([1, 2, 3], 2)
        [3]
    """
    return list(array)[max(n, 0) :]


def drop_right(array: Sequence[Any], n: int = 1) -> list[Any]:
    """Drop ``n`` elements from the end.

    Example:
        >>> drop_right([1, 2, 3], 2)
        [1]
    """
    items = list(array)
    return items[: max(len(items) - max(n, 0), 0)]


def drop_while(array: Sequence[Any], predicate: Any = None) -> list[Any]:
    """Drop leading elements while ``predicate(value, index, array)`` is truthy."""
    items = list(array)
    callback = bind_callback(make_iteratee(predicate), 3)
    index = 0
    while index < len(items) and callback(items[index], index, items):
        index += 1
    return items[index:]


def drop_right_while(array: Sequence[Any], predicate: Any = None) -> list[Any]:
    """Drop trailing elements while ``predicate(value, index, array)`` is truthy.

    Example:
        >>> drop_right_while([1, 2, 3, 4], lambda n: n > 2)
        [1, 2]
    """
    items = list(array)
    callback = bind_callback(make_iteratee(predicate), 3)
    index = len(items)
    while index > 0 and callback(items[index - 1], index - 1, items):
        index -= 1
    return items[:index]


def take(array: Sequence[Any], n: int = 1) -> list[Any]:
    """Take ``n`` elements from the beginning.

    Example:
        >>> take([1, 2, 3], 2)
        [1, 2]
    """
    return list(array)[: max(n, 0)]


def take_right(array: Sequence[Any], n: int = 1) -> list[Any]:
    """Take ``n`` elements from the end.

    Example:
        >>> take_right([1, 2, 3], 2)
        [2, 3]
    """
    items = list(array)
    return items[max(len(items) - n, 0) :] if n > 0 else []


def take_while(array: Sequence[Any], predicate: Any = None) -> list[Any]:
    """Take leading elements while ``predicate(value, index, array)`` is truthy.

    Example:
        >>> take_while([{"a": 1}, {"a": 1}, {"a": 2}], {"a": 1})
        [{'a': 1}, {'a': 1}]
    """
    items = list(array)
    callback = bind_callback(make_iteratee(predicate), 3)
    index = 0
    while index < len(items) and callback(items[index], index, items):
        index += 1
    return items[:index]


def take_right_while(array: Sequence[Any], predicate: Any = None) -> list[Any]:
    """Take trailing elements while ``predicate(value, index, array)`` is truthy."""
    items = list(array)
    callback = bind_callback(make_iteratee(predicate), 3)
    index = len(items)
    while index > 0 and callback(items[index - 1], index - 1, items):
        index -= 1
    return items[index:]


def head(array: Sequence[Any]) -> Any:
    """Return the first element, or None for an empty array."""
    items = list(array)
    return items[0] if items else None


def last(array: Sequence[Any]) -> Any:
    """Return the last element, or None for an empty array."""
    items = list(array)
    return items[-1] if items else None


def initial(array: Sequence[Any]) -> list[Any]:
    """Return all but the last element."""
    return list(array)[:-1]


def tail(array: Sequence[Any]) -> list[Any]:
    """Return all but the first element."""
    return list(array)[1:]


def nth(array: Sequence[Any], n: int = 0) -> Any:
    """Return the element at index ``n`` (negative counts from the end), or None.

    Example:
        >>> nth(["a", "b", "c", "d"], -2)
        'c'
    """
    items = list(array)
    try:
        return items[n]
    except IndexError:
        return None


def slice_(array: Sequence[Any], start: int = 0, end: int | None = None) -> list[Any]:
    """Return ``array[start:end]`` as a new list."""
    return list(array)[start:end]


# ============================================================================
#                               Flattening
# ============================================================================


def flatten(array: Sequence[Any]) -> list[Any]:
    """Flatten one level of nesting.

    Example:
        >>> flatten([1, [2, [3, [4]], 5]])
        [1, 2, [3, [4]], 5]
    """
    return base_flatten(array, 1)


def flatten_deep(array: Sequence[Any]) -> list[Any]:
    """Flatten recursively.

    Example:
        >>> flatten_deep([1, [2, [3, [4]], 5]])
        [1, 2, 3, 4, 5]
    """
    return base_flatten(array, -1)


def flatten_depth(array: Sequence[Any], depth: int = 1) -> list[Any]:
    """Flatten up to ``depth`` levels.

    Example:
        >>> flatten_depth([1, [2, [3, [4]], 5]], 2)
        [1, 2, 3, [4], 5]
    """
    return base_flatten(array, max(depth, 0))


# ============================================================================
#                               Searching
# ============================================================================


def find_index(array: Sequence[Any], predicate: Any = None, from_index: int = 0) -> int:
    """Return the index of the first element ``predicate`` matches, or -1.

    Example:
        >>> find_index([{"user": "barney"}, {"user": "fred"}], {"user": "fred"})
        1
    """
    items = list(array)
    callback = bind_callback(make_iteratee(predicate), 3)
    for index in range(_normalize_start(from_index, len(items)), len(items)):
        if callback(items[index], index, items):
            return index
    return -1


def find_last_index(
    array: Sequence[Any], predicate: Any = None, from_index: int | None = None
) -> int:
    """Return the index of the last element ``predicate`` matches, or -1."""
    items = list(array)
    callback = bind_callback(make_iteratee(predicate), 3)
    start = len(items) - 1 if from_index is None else from_index
    if start < 0:
        start += len(items)
    for index in range(min(start, len(items) - 1), -1, -1):
        if callback(items[index], index, items):
            return index
    return -1


def index_of(array: Sequence[Any], value: Any, from_index: int = 0) -> int:
    """Return the index of the first occurrence of ``value``, or -1.

    Example:
        >>> index_of([1, 2, 1, 2], 2, 2)
        3
    """
    items = list(array)
    for index in range(_normalize_start(from_index, len(items)), len(items)):
        if base_is_equal(items[index], value):
            return index
    return -1


def last_index_of(array: Sequence[Any], value: Any, from_index: int | None = None) -> int:
    """Return the index of the last occurrence of ``value``, or -1."""
    items = list(array)
    start = len(items) - 1 if from_index is None else from_index
    if start < 0:
        start += len(items)
    for index in range(min(start, len(items) - 1), -1, -1):
        if base_is_equal(items[index], value):
            return index
    return -1


def sorted_index(array: Sequence[Any], value: Any) -> int:
    """Lowest index at which ``value`` can be inserted to keep ``array`` sorted.

    Example:
        >>> sorted_index([30, 50], 40)
        1
    """
    return bisect.bisect_left(list(array), value)


def sorted_index_by(array: Sequence[Any], value: Any, iteratee: Any = None) -> int:
    """Like :func:`sorted_index`, comparing the values ``iteratee`` computes.

    Example:
        >>> sorted_index_by([{"x": 4}, {"x": 5}], {"x": 4}, "x")
        0
    """
    transform = make_iteratee(iteratee)
    return bisect.bisect_left(list(array), transform(value), key=transform)


def sorted_index_of(array: Sequence[Any], value: Any) -> int:
    """Binary-search index of the first occurrence of ``value`` in a sorted array, or -1.

    Example:
        >>> sorted_index_of([4, 5, 5, 5, 6], 5)
        1
    """
    items = list(array)
    index = bisect.bisect_left(items, value)
    return index if index < len(items) and items[index] == value else -1


def sorted_last_index(array: Sequence[Any], value: Any) -> int:
    """Highest index at which ``value`` can be inserted to keep ``array`` sorted.

    Example:
        >>> sorted_last_index([4, 5, 5, 5, 6], 5)
        4
    """
    return bisect.bisect_right(list(array), value)


def sorted_last_index_by(array: Sequence[Any], value: Any, iteratee: Any = None) -> int:
    """Like :func:`sorted_last_index`, comparing the values ``iteratee`` computes."""
    transform = make_iteratee(iteratee)
    return bisect.bisect_right(list(array), transform(value), key=transform)


def sorted_last_index_of(array: Sequence[Any], value: Any) -> int:
    """Binary-search index of the last occurrence of ``value`` in a sorted array, or -1.

    Example:
        >>> sorted_last_index_of([4, 5, 5, 5, 6], 5)
        3
    """
    items = list(array)
    index = bisect.bisect_right(items, value) - 1
    return index if index >= 0 and items[index] == value else -1


# ============================================================================
#                               Set operations
# ============================================================================


def difference(array: Sequence[Any], *others: Sequence[Any]) -> list[Any]:
    """Return the elements of ``array`` not present in any of ``others``.

    Example:
        >>> difference([2, 1], [2, 3])
        [1]
    """
    return _base_difference(list(array), base_flatten(others, 1))


def difference_by(
    array: Sequence[Any], *others: Sequence[Any], iteratee: Any = None
) -> list[Any]:
    """Like :func:`difference`, comparing the values ``iteratee`` computes.

    Example:
        >>> difference_by([2.1, 1.2], [2.3, 3.4], iteratee=int)
        [1.2]
    """
    return _base_difference(list(array), base_flatten(others, 1), iteratee)


def difference_with(
    array: Sequence[Any], *others: Sequence[Any], comparator: Comparator | None = None
) -> list[Any]:
    """Like :func:`difference`, using ``comparator(a, b)`` to detect equal elements."""
    return _base_difference(list(array), base_flatten(others, 1), comparator=comparator)


def without(array: Sequence[Any], *values: Any) -> list[Any]:
    """Return ``array`` without any of ``values``.

    Example:
        >>> without([2, 1, 2, 3], 1, 2)
        [3]
    """
    return _base_difference(list(array), list(values))


def intersection(*arrays: Sequence[Any]) -> list[Any]:
    """Return the unique values present in every array, in order of the first.

    Example:
        >>> intersection([2, 1], [2, 3])
        [2]
    """
    return _base_intersection([list(array) for array in arrays])


def intersection_by(*arrays: Sequence[Any], iteratee: Any = None) -> list[Any]:
    """Like :func:`intersection`, comparing the values ``iteratee`` computes.

    Example:
        >>> intersection_by([{"x": 1}], [{"x": 2}, {"x": 1}], iteratee="x")
        [{'x': 1}]
    """
    return _base_intersection([list(array) for array in arrays], iteratee)


def intersection_with(
    *arrays: Sequence[Any], comparator: Comparator | None = None
) -> list[Any]:
    """Like :func:`intersection`, using ``comparator(a, b)`` to detect equal elements."""
    return _base_intersection([list(array) for array in arrays], comparator=comparator)


def union(*arrays: Sequence[Any]) -> list[Any]:
    """Return the unique values of all arrays, in order of first appearance.

    Example:
        >>> union([2], [1, 2])
        [2, 1]
    """
    return _base_uniq(base_flatten(arrays, 1))


def union_by(*arrays: Sequence[Any], iteratee: Any = None) -> list[Any]:
    """Like :func:`union`, comparing the values ``iteratee`` computes."""
    return _base_uniq(base_flatten(arrays, 1), iteratee)


def union_with(*arrays: Sequence[Any], comparator: Comparator | None = None) -> list[Any]:
    """Like :func:`union`, using ``comparator(a, b)`` to detect equal elements."""
    return _base_uniq(base_flatten(arrays, 1), comparator=comparator)


def uniq(array: Sequence[Any]) -> list[Any]:
    """Remove duplicates, keeping the first occurrence.

    Example:
        >>> uniq([2, 1, 2])
        [2, 1]
    """
    return _base_uniq(list(array))


def uniq_by(array: Sequence[Any], iteratee: Any = None) -> list[Any]:
    """Remove elements whose computed value was already seen.

    Example:
        >>> uniq_by([2.1, 1.2, 2.3], int)
        [2.1, 1.2]
    """
    return _base_uniq(list(array), iteratee)


def uniq_with(array: Sequence[Any], comparator: Comparator | None = None) -> list[Any]:
    """Remove elements ``comparator`` reports equal to an earlier one."""
    return _base_uniq(list(array), comparator=comparator)


def xor(*arrays: Sequence[Any]) -> list[Any]:
    """Return the unique values present in exactly one of the arrays.

    Example:
        >>> xor([2, 1], [2, 3])
        [1, 3]
    """
    return _base_xor([list(array) for array in arrays])


def xor_by(*arrays: Sequence[Any], iteratee: Any = None) -> list[Any]:
    """Like :func:`xor`, comparing the values ``iteratee`` computes."""
    return _base_xor([list(array) for array in arrays], iteratee)


def xor_with(*arrays: Sequence[Any], comparator: Comparator | None = None) -> list[Any]:
    """Like :func:`xor`, using ``comparator(a, b)`` to detect equal elements."""
    return _base_xor([list(array) for array in arrays], comparator=comparator)


# ============================================================================
#                               In-place mutation
# ============================================================================


def fill(
    array: MutableSequence[Any], value: Any, start: int = 0, end: int | None = None
) -> MutableSequence[Any]:
    """Fill ``array[start:end]`` with ``value`` in place.

    Example:
        >>> fill([4, 6, 8, 10], "*", 1, 3)
        [4, '*', '*', 10]
    """
    for index in range(*slice(start, end).indices(len(array))):
        array[index] = value
    return array


def pull(array: MutableSequence[Any], *values: Any) -> MutableSequence[Any]:
    """Remove every occurrence of ``values`` from ``array`` in place.

    Example:
        >>> pull(["a", "b", "c", "a", "b", "c"], "a", "c")
        ['b', 'b']
    """
    return _pull(array, list(values))


def pull_all(array: MutableSequence[Any], values: Sequence[Any]) -> MutableSequence[Any]:
    """Like :func:`pull` but takes the values as a list."""
    return _pull(array, list(values))


def pull_all_by(
    array: MutableSequence[Any], values: Sequence[Any], iteratee: Any = None
) -> MutableSequence[Any]:
    """Like :func:`pull_all`, comparing the values ``iteratee`` computes.

    Example:
        >>> pull_all_by([{"x": 1}, {"x": 2}, {"x": 3}, {"x": 1}], [{"x": 1}, {"x": 3}], "x")
        [{'x': 2}]
    """
    return _pull(array, list(values), iteratee)


def pull_all_with(
    array: MutableSequence[Any],
    values: Sequence[Any],
    comparator: Comparator | None = None,
) -> MutableSequence[Any]:
    """Like :func:`pull_all`, using ``comparator(a, b)`` to detect equal elements."""
    return _pull(array, list(values), comparator=comparator)


def pull_at(array: MutableSequence[Any], *indexes: int | Sequence[int]) -> list[Any]:
    """Remove the elements at ``indexes`` in place and return them in index order.

    Example:
        >>> values = ["a", "b", "c", "d"]
        >>> pull_at(values, 1, 3)
        ['b', 'd']
        >>> values
        ['a', 'c']
    """
    length = len(array)
    positions = sorted(
        {
            index + length if index < 0 else index
            for index in base_flatten(indexes, -1)
            if -length <= index < length
        }
    )
    removed = [array[index] for index in positions]
    for index in reversed(positions):
        del array[index]
    return removed


def remove(array: MutableSequence[Any], predicate: Any = None) -> list[Any]:
    """Remove the elements ``predicate(value, index, array)`` matches; return them.

    Example:
        >>> values = [1, 2, 3, 4]
        >>> remove(values, lambda n: n % 2 == 0)
        [2, 4]
        >>> values
        [1, 3]
    """
    callback = bind_callback(make_iteratee(predicate), 3)
    positions = [index for index, item in enumerate(array) if callback(item, index, array)]
    removed = [array[index] for index in positions]
    for index in reversed(positions):
        del array[index]
    return removed


def reverse(array: MutableSequence[Any]) -> MutableSequence[Any]:
    """Reverse ``array`` in place and return it."""
    array.reverse()
    return array


# ============================================================================
#                               Zipping & joining
# ============================================================================


def join(array: Sequence[Any], separator: str = ",") -> str:
    """Join the elements as strings; None becomes an empty string.

    Example:
        >>> join(["a", "b", None, 1], "~")
        'a~b~~1'
    """
    return separator.join("" if item is None else str(item) for item in array)


def zip_(*arrays: Sequence[Any]) -> list[list[Any]]:
    """Group the n-th elements of each array; shorter arrays are padded with None.

    Example:
        >>> zip_(["a", "b"], [1, 2], [True])
        [['a', 1, True], ['b', 2, None]]
    """
    return [list(group) for group in itertools.zip_longest(*arrays)]


def unzip(array: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """Inverse of :func:`zip_`.

    Example:
        >>> unzip([["a", 1, True], ["b", 2, False]])
        [['a', 'b'], [1, 2], [True, False]]
    """
    return zip_(*array)


def zip_with(*arrays: Sequence[Any], iteratee: Callable[..., Any] | None = None) -> list[Any]:
    """Like :func:`zip_`, combining each group with ``iteratee(*group)``.

    Example:
        >>> zip_with([1, 2], [10, 20], [100, 200], iteratee=lambda a, b, c: a + b + c)
        [111, 222]
    """
    groups = zip_(*arrays)
    if iteratee is None:
        return groups
    return [iteratee(*group) for group in groups]


def unzip_with(
    array: Sequence[Sequence[Any]], iteratee: Callable[..., Any] | None = None
) -> list[Any]:
    """Like :func:`unzip`, combining each regrouped list with ``iteratee(*group)``.

    Example:
        >>> unzip_with([[1, 10, 100], [2, 20, 200]], lambda a, b: a + b)
        [3, 30, 300]
    """
    return zip_with(*array, iteratee=iteratee)


def zip_object(keys: Sequence[Any], values: Sequence[Any] = ()) -> dict[Any, Any]:
    """Build a dict from ``keys`` and ``values``; missing values become None.

    Example:
        >>> zip_object(["a", "b"], [1, 2])
        {'a': 1, 'b': 2}
    """
    values = list(values)
    return {
        key: values[index] if index < len(values) else None
        for index, key in enumerate(keys)
    }


def zip_object_deep(paths: Sequence[Any], values: Sequence[Any] = ()) -> dict[Any, Any]:
    """Like :func:`zip_object` but keys are paths creating nested structures.

    Example:
        >>> zip_object_deep(["a.b[0].c", "a.b[1].d"], [1, 2])
        {'a': {'b': [{'c': 1}, {'d': 2}]}}
    """
    result: dict[Any, Any] = {}
    values = list(values)
    for index, path in enumerate(paths):
        base_set_path(result, to_path(path), values[index] if index < len(values) else None)
    return result


# ============================================================================
#                               Record helpers
# ============================================================================


def _sort_key(value: Any) -> tuple[int, Any]:
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return (0, value)
    return (1, purify(str(value)).casefold())


def sort_objects(
    array: Sequence[Any], prop: Any = None, ascending: bool = True
) -> list[Any]:
    """Sort records by the value at ``prop`` (or the elements themselves).

    Numbers compare numerically and come first; everything else compares as
    accent- and case-insensitive text. Missing values go last in either
    direction, in their original order.

    Example:
        >>> sort_objects([{"name": "Émile"}, {"name": "anna"}, {"name": "Zoe"}], "name")
        [{'name': 'anna'}, {'name': 'Émile'}, {'name': 'Zoe'}]
    """
    getter = identity if prop is None else property_(prop)
    keyed = [(getter(item), item) for item in array]
    present = sorted(
        (pair for pair in keyed if pair[0] is not None),
        key=lambda pair: _sort_key(pair[0]),
        reverse=not ascending,
    )
    return [item for _, item in present] + [item for value, item in keyed if value is None]


def get_unique(data: Sequence[Any], field: Any = None) -> list[Any]:
    """Remove duplicate elements, or elements sharing the value at ``field``.

    Example:
        >>> get_unique([{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"},
        ...             {"id": 3, "name": "Alice"}], "name")
        [{'id': 1, 'name': 'Alice'}, {'id': 2, 'name': 'Bob'}]
    """
    if field is None:
        return _base_uniq(list(data))
    return _base_uniq(list(data), property_(field))


def get_last_element(data: Any) -> Any:
    """Return the last element wrapped in its container type.

    Sequences give ``[last]``, mappings ``{last_key: last_value}``; empty
    containers give an empty one and other values are returned unchanged.

    Example:
        >>> get_last_element([1, 2, 3])
        [3]
        >>> get_last_element({"a": 1, "b": 2})
        {'b': 2}
    """
    if isinstance(data, Mapping):
        if not data:
            return {}
        key = list(data)[-1]
        return {key: data[key]}
    if isinstance(data, (list, tuple)):
        return [data[-1]] if data else []
    return data


def random_string(strings: Sequence[str]) -> str | None:
    """Pick one of ``strings`` at random (None when empty)."""
    return random.choice(list(strings)) if strings else None


def check_length(first: Any, second: Any, size: int) -> Any:
    """Return ``first`` if it is shorter than ``size``, otherwise ``second``.

    Example:
        >>> check_length("short", "fallback", 10)
        'short'
    """
    return first if len(first) < size else second
