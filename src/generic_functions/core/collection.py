"""Dual-mode collection helpers.

Every function accepts either a sequence or a mapping. Callbacks are invoked
as ``callback(value, index_or_key, collection)``, but only with as many
positional arguments as they declare, so ``lambda x: x * 2`` works as well as
``lambda value, key, collection: ...``. Callbacks may also be given in
iteratee shorthand (see :func:`~generic_functions.core.utility.iteratee`):
``"a.b"`` plucks a path, ``{"active": True}`` matches a partial mapping and
``["active", True]`` matches a single property.

Inputs are never mutated; list-shaped results are always new lists, and for
mappings they hold the mapping's values.
"""

from __future__ import annotations

import random
from collections.abc import Callable, Iterator, Mapping, Sized
from typing import Any

from ._helpers import (
    UNSET,
    base_flatten,
    base_get_path,
    bind_callback,
    iter_items,
    to_path,
)
from .utility import iteratee as make_iteratee

__all__ = [
    "count_by",
    "each",
    "each_right",
    "every",
    "filter_",
    "find",
    "find_key",
    "find_last",
    "flat_map",
    "flat_map_deep",
    "for_each",
    "for_each_right",
    "group_by",
    "includes",
    "invoke_map",
    "key_by",
    "map_",
    "order_by",
    "partition",
    "reduce_",
    "reduce_right",
    "reject",
    "sample",
    "sample_size",
    "shuffle",
    "size",
    "some",
    "sort_by",
]


def _walk(
    collection: Any, func: Any, reverse: bool = False
) -> Iterator[tuple[Any, Any, Any]]:
    """Yield ``(value, key, callback_result)`` for each element, lazily."""
    callback = bind_callback(make_iteratee(func), 3)
    items = list(iter_items(collection))
    if reverse:
        items.reverse()
    for value, key in items:
        yield value, key, callback(value, key, collection)


def every(collection: Any, predicate: Any = None) -> bool:
    """Check that ``predicate`` is truthy for all elements.

    Iteration stops at the first falsy result; an empty collection gives True.

    Example:
        >>> every([2, 4, 6], lambda n: n % 2 == 0)
        True
        >>> every({"a": 1, "b": None})
        False
    """
    return all(result for _, _, result in _walk(collection, predicate))


def some(collection: Any, predicate: Any = None) -> bool:
    """Check that ``predicate`` is truthy for at least one element.

    Example:
        >>> some([1, 3, 4], lambda n: n % 2 == 0)
        True
    """
    return any(result for _, _, result in _walk(collection, predicate))


def for_each(collection: Any, iteratee: Any = None) -> Any:
    """Call ``iteratee`` for each element; returning ``False`` stops early.

    Returns:
        The collection itself.
    """
    for _, _, result in _walk(collection, iteratee):
        if result is False:
            break
    return collection


def for_each_right(collection: Any, iteratee: Any = None) -> Any:
    """Like :func:`for_each` but iterates from right to left."""
    for _, _, result in _walk(collection, iteratee, reverse=True):
        if result is False:
            break
    return collection


each = for_each
each_right = for_each_right


def map_(collection: Any, iteratee: Any = None) -> list[Any]:
    """Create a list of values produced by running each element through ``iteratee``.

    Example:
        >>> map_([1, 2, 3], lambda n: n * 3)
        [3, 6, 9]
        >>> map_([{"user": "barney"}, {"user": "fred"}], "user")
        ['barney', 'fred']
    """
    return [result for _, _, result in _walk(collection, iteratee)]


def filter_(collection: Any, predicate: Any = None) -> list[Any]:
    """Return the elements ``predicate`` returns truthy for.

    Example:
        >>> filter_([1, 2, 3, 4], lambda n: n % 2 == 0)
        [2, 4]
    """
    return [value for value, _, result in _walk(collection, predicate) if result]


def reject(collection: Any, predicate: Any = None) -> list[Any]:
    """Return the elements ``predicate`` does **not** return truthy for.

    Example:
        >>> reject([1, 2, 3, 4], lambda n: n % 2 == 0)
        [1, 3]
    """
    return [value for value, _, result in _walk(collection, predicate) if not result]


def find(collection: Any, predicate: Any = None) -> Any:
    """Return the first element ``predicate`` returns truthy for, or None.

    Example:
        >>> find([{"id": 1}, {"id": 2}], {"id": 2})
        {'id': 2}
    """
    return next(
        (value for value, _, result in _walk(collection, predicate) if result), None
    )


def find_last(collection: Any, predicate: Any = None) -> Any:
    """Return the last element ``predicate`` returns truthy for, or None."""
    return next(
        (
            value
            for value, _, result in _walk(collection, predicate, reverse=True)
            if result
        ),
        None,
    )


def find_key(collection: Any, predicate: Any = None) -> Any:
    """Return the key (or index) of the first element ``predicate`` matches, or None.

    Example:
        >>> find_key({"barney": {"age": 36}, "pebbles": {"age": 1}}, lambda u: u["age"] < 40)
        'barney'
    """
    return next((key for _, key, result in _walk(collection, predicate) if result), None)


def flat_map(collection: Any, iteratee: Any = None) -> list[Any]:
    """Map each element then flatten the result one level.

    Example:
        >>> flat_map([1, 2], lambda n: [n, n])
        [1, 1, 2, 2]
    """
    return base_flatten(map_(collection, iteratee), 1)


def flat_map_deep(collection: Any, iteratee: Any = None) -> list[Any]:
    """Map each element then flatten the result recursively.

    Example:
        >>> flat_map_deep([1, 2], lambda n: [[[n, n]]])
        [1, 1, 2, 2]
    """
    return base_flatten(map_(collection, iteratee), -1)


def group_by(collection: Any, iteratee: Any = None) -> dict[Any, list[Any]]:
    """Group elements by the key ``iteratee`` computes, in encounter order.

    Example:
        >>> group_by([6.1, 4.2, 6.3], int)
        {6: [6.1, 6.3], 4: [4.2]}
        >>> group_by(["one", "two", "three"], len)
        {3: ['one', 'two'], 5: ['three']}
    """
    groups: dict[Any, list[Any]] = {}
    for value, _, result in _walk(collection, iteratee):
        groups.setdefault(result, []).append(value)
    return groups


def count_by(collection: Any, iteratee: Any = None) -> dict[Any, int]:
    """Count elements by the key ``iteratee`` computes.

    Example:
        >>> count_by([6.1, 4.2, 6.3], int)
        {6: 2, 4: 1}
    """
    counts: dict[Any, int] = {}
    for _, _, result in _walk(collection, iteratee):
        counts[result] = counts.get(result, 0) + 1
    return counts


def key_by(collection: Any, iteratee: Any = None) -> dict[Any, Any]:
    """Index elements by the key ``iteratee`` computes; later elements win.

    Example:
        >>> key_by([{"dir": "left", "code": 97}, {"dir": "right", "code": 100}], "dir")
        {'left': {'dir': 'left', 'code': 97}, 'right': {'dir': 'right', 'code': 100}}
    """
    return {result: value for value, _, result in _walk(collection, iteratee)}


def includes(collection: Any, value: Any, from_index: int = 0) -> bool:
    """Check whether ``value`` is in ``collection``.

    Strings are searched for a substring, mappings by value and sequences by
    membership starting at ``from_index`` (negative counts from the end).

    Example:
        >>> includes([1, 2, 3], 1, 2)
        False
        >>> includes({"a": 1, "b": 2}, 1)
        True
        >>> includes("abcd", "bc")
        True
    """
    if collection is None:
        return False
    if isinstance(collection, Mapping):
        return value in collection.values()
    items = collection if isinstance(collection, str) else list(collection)
    if from_index < 0:
        from_index = max(len(items) + from_index, 0)
    return value in items[from_index:]


def invoke_map(collection: Any, path: Any, *args: Any) -> list[Any]:
    """Invoke the method at ``path`` on each element and collect the results.

    ``path`` may also be a function, which is then called with each element
    followed by ``args``. Elements without a callable at ``path`` give None.

    Example:
        >>> invoke_map([[5, 1, 7], [3, 2, 1]], "index", 1)
        [1, 2]
        >>> invoke_map(["a", "b"], "upper")
        ['A', 'B']
    """
    results: list[Any] = []
    keys = None if callable(path) else to_path(path)
    for value, _ in iter_items(collection):
        if keys is None:
            results.append(path(value, *args))
            continue
        method = base_get_path(value, keys, None)
        results.append(method(*args) if callable(method) else None)
    return results


def _none_last(value: Any) -> tuple[int, Any]:
    return (1, 0) if value is None else (0, value)


def order_by(collection: Any, iteratees: Any = None, orders: Any = None) -> list[Any]:
    """Sort by several iteratees, each ascending (``"asc"``) or descending (``"desc"``).

    The sort is stable. Missing order entries default to ascending; None sort
    keys go last in ascending order.

    Args:
        collection: Sequence or mapping to sort.
        iteratees: An iteratee or list of iteratees producing sort keys.
        orders: ``"asc"``/``"desc"`` or a list of them, matched to ``iteratees``.

    Returns:
        A new sorted list.

    Example:
        >>> users = [{"user": "fred", "age": 48}, {"user": "barney", "age": 34},
        ...          {"user": "fred", "age": 40}]
        >>> order_by(users, ["user", "age"], ["asc", "desc"])  # doctest: +NORMALIZE_WHITESPACE
        [{'user': 'barney', 'age': 34}, {'user': 'fred', 'age': 48},
         {'user': 'fred', 'age': 40}]
    """
    if iteratees is None:
        iteratees = [None]
    elif not isinstance(iteratees, list):
        iteratees = [iteratees]
    if orders is None:
        orders = []
    elif isinstance(orders, str):
        orders = [orders]
    orders = list(orders) + ["asc"] * (len(iteratees) - len(orders))

    result = [value for value, _ in iter_items(collection)]
    # Successive stable sorts, least significant key first.
    for func, order in reversed(list(zip(iteratees, orders))):
        callback = make_iteratee(func)
        result.sort(
            key=lambda item, cb=callback: _none_last(cb(item)),
            reverse=str(order).lower() == "desc",
        )
    return result


def sort_by(collection: Any, *iteratees: Any) -> list[Any]:
    """Sort ascending by the given iteratees (identity when none are given).

    Example:
        >>> sort_by([{"n": "b", "a": 2}, {"n": "a", "a": 2}, {"n": "c", "a": 1}], "a", "n")
        [{'n': 'c', 'a': 1}, {'n': 'a', 'a': 2}, {'n': 'b', 'a': 2}]
    """
    flattened = base_flatten(iteratees, 1) if iteratees else None
    return order_by(collection, flattened)


def partition(collection: Any, predicate: Any = None) -> list[list[Any]]:
    """Split elements into ``[truthy, falsy]`` groups for ``predicate``.

    Example:
        >>> partition([1, 2, 3, 4], lambda n: n % 2)
        [[1, 3], [2, 4]]
    """
    truthy: list[Any] = []
    falsy: list[Any] = []
    for value, _, result in _walk(collection, predicate):
        (truthy if result else falsy).append(value)
    return [truthy, falsy]


def _base_reduce(
    collection: Any,
    items: list[tuple[Any, Any]],
    func: Callable[..., Any] | None,
    accumulator: Any,
) -> Any:
    callback = bind_callback(make_iteratee(func), 4)
    if accumulator is UNSET:
        if not items:
            return None
        (accumulator, _), items = items[0], items[1:]
    for value, key in items:
        accumulator = callback(accumulator, value, key, collection)
    return accumulator


def reduce_(
    collection: Any, iteratee: Callable[..., Any] | None = None, accumulator: Any = UNSET
) -> Any:
    """Fold ``collection`` left to right.

    ``iteratee`` is called as ``(accumulator, value, key, collection)``. When no
    ``accumulator`` is given, the first element seeds it; an empty collection
    without accumulator gives None.

    Example:
        >>> reduce_([1, 2, 3], lambda total, n: total + n, 0)
        6
        >>> reduce_({"a": 1, "b": 2, "c": 1}, lambda acc, v, k: {**acc, v: acc.get(v, []) + [k]}, {})
        {1: ['a', 'c'], 2: ['b']}
    """
    return _base_reduce(collection, list(iter_items(collection)), iteratee, accumulator)


def reduce_right(
    collection: Any, iteratee: Callable[..., Any] | None = None, accumulator: Any = UNSET
) -> Any:
    """Fold ``collection`` right to left.

    Example:
        >>> reduce_right([[0, 1], [2, 3]], lambda acc, x: acc + x, [])
        [2, 3, 0, 1]
    """
    items = list(iter_items(collection))
    items.reverse()
    return _base_reduce(collection, items, iteratee, accumulator)


def sample(collection: Any) -> Any:
    """Return a random element, or None for an empty collection."""
    values = [value for value, _ in iter_items(collection)]
    return random.choice(values) if values else None


def sample_size(collection: Any, n: int = 1) -> list[Any]:
    """Return up to ``n`` random elements taken from distinct positions."""
    values = [value for value, _ in iter_items(collection)]
    return random.sample(values, max(min(n, len(values)), 0))


def shuffle(collection: Any) -> list[Any]:
    """Return a new list with the elements in random order (Fisher-Yates).

    Example:
        >>> sorted(shuffle([1, 2, 3, 4]))
        [1, 2, 3, 4]
    """
    values = [value for value, _ in iter_items(collection)]
    for index in range(len(values) - 1, 0, -1):
        other = random.randint(0, index)
        values[index], values[other] = values[other], values[index]
    return values


def size(collection: Any) -> int:
    """Return the length of a string, sequence or mapping (0 for None).

    Example:
        >>> size({"a": 1, "b": 2})
        2
        >>> size("pebbles")
        7
    """
    if collection is None:
        return 0
    if isinstance(collection, Sized):
        return len(collection)
    return sum(1 for _ in iter_items(collection))
