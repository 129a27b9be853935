"""Object helpers: path accessors, deep merge and clone, key/value transforms.

"Objects" are mappings (dicts), although the path accessors also walk lists
(by index) and plain Python objects (by attribute). Paths are dotted strings
with optional bracket indices (``"a.b[0].c"``) or lists of keys.

``assign``, ``merge*``, ``defaults*``, ``set*``, ``unset`` and ``update*``
mutate their first argument and return it; everything else builds new
containers.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any

from ._helpers import (
    UNSET,
    base_flatten,
    base_get,
    base_get_path,
    base_has,
    base_is_equal,
    base_set,
    base_set_path,
    bind_callback,
    is_scalar,
    is_sequence,
    iter_items,
    to_index,
    to_path,
)
from .utility import iteratee as make_iteratee

__all__ = [
    "assign",
    "at",
    "clone",
    "clone_deep",
    "compare_types",
    "conforms_to",
    "defaults",
    "defaults_deep",
    "entries",
    "find_last_key",
    "flat",
    "for_own",
    "for_own_right",
    "from_pairs",
    "functions",
    "get",
    "get_object_keys_by_type",
    "get_object_value_by_path",
    "get_value_type",
    "has",
    "invert",
    "invert_by",
    "invoke",
    "is_empty",
    "is_equal",
    "keys",
    "map_keys",
    "map_values",
    "merge",
    "merge_with",
    "method",
    "method_of",
    "omit",
    "omit_by",
    "pick",
    "pick_by",
    "result",
    "set_",
    "set_with",
    "to_pairs",
    "transform",
    "unset",
    "update",
    "update_with",
    "values",
]

# ============================================================================
#                               Path accessors
# ============================================================================


def get(obj: Any, path: Any, default: Any = None) -> Any:
    """Return the value at ``path`` of ``obj``, or ``default`` when it is missing.

    A value that exists and is None is returned as None, not replaced by
    ``default``.

    Args:
        obj: Mapping, sequence or object to query.
        path: Dotted/bracket string or list of keys.
        default: Value returned when the path does not resolve.

    Returns:
        The resolved value.

    Example:
        >>> get({"a": [{"b": {"c": 3}}]}, "a[0].b.c")
        3
        >>> get({"a": [{"b": {"c": 3}}]}, ["a", "0", "b", "c"])
        3
        >>> get({"a": {"b": 2}}, "a.c", "default")
        'default'
    """
    found = base_get_path(obj, to_path(path))
    return default if found is UNSET else found


def has(obj: Any, path: Any) -> bool:
    """Check whether ``path`` resolves in ``obj``.

    Example:
        >>> has({"a": {"b": 2}}, "a.b")
        True
        >>> has({"a": {"b": 2}}, ["a", "c"])
        False
    """
    keys = to_path(path)
    if not keys:
        return False
    parent = base_get_path(obj, keys[:-1]) if len(keys) > 1 else obj
    return parent is not UNSET and base_has(parent, keys[-1])


def set_(obj: Any, path: Any, value: Any) -> Any:
    """Set ``value`` at ``path``, creating missing dicts/lists along the way.

    A list is created when the next key is an index, a dict otherwise.

    Example:
        >>> set_({"a": [{"b": {"c": 3}}]}, "a[0].b.c", 4)
        {'a': [{'b': {'c': 4}}]}
        >>> set_({}, ["x", 0, "y", "z"], 5)
        {'x': [{'y': {'z': 5}}]}
    """
    return base_set_path(obj, to_path(path), value)


def set_with(
    obj: Any, path: Any, value: Any, customizer: Callable[..., Any] | None = None
) -> Any:
    """Like :func:`set_`, but ``customizer(value, key, parent)`` creates missing containers.

    When ``customizer`` returns None the default container is used.

    Example:
        >>> set_with({}, "[0][1]", "a", lambda *_: {})
        {0: {1: 'a'}}
    """
    callback = bind_callback(customizer, 3) if customizer is not None else None
    return base_set_path(obj, to_path(path), value, callback)


def unset(obj: Any, path: Any) -> bool:
    """Remove the value at ``path``; return True if something was removed.

    Example:
        >>> data = {"a": [{"b": {"c": 7}}]}
        >>> unset(data, "a[0].b.c")
        True
        >>> data
        {'a': [{'b': {}}]}
    """
    keys = to_path(path)
    if not keys:
        return False
    parent = base_get_path(obj, keys[:-1]) if len(keys) > 1 else obj
    key = keys[-1]
    if parent is UNSET or not base_has(parent, key):
        return False
    if isinstance(parent, MutableMapping):
        if key not in parent:
            key = str(key) if isinstance(key, int) else int(key)
        del parent[key]
    elif isinstance(parent, MutableSequence):
        if (index := to_index(key)) is None:
            return False
        del parent[index]
    elif isinstance(parent, (Mapping, Sequence)):
        return False
    else:
        delattr(parent, str(key))
    return True


def update(obj: Any, path: Any, updater: Callable[[Any], Any]) -> Any:
    """Set the value at ``path`` to ``updater(current_value)``.

    Example:
        >>> update({"a": [{"b": {"c": 3}}]}, "a[0].b.c", lambda n: n * n)
        {'a': [{'b': {'c': 9}}]}
    """
    return set_(obj, path, updater(get(obj, path)))


def update_with(
    obj: Any,
    path: Any,
    updater: Callable[[Any], Any],
    customizer: Callable[..., Any] | None = None,
) -> Any:
    """Like :func:`update`, with ``customizer`` creating missing containers."""
    return set_with(obj, path, updater(get(obj, path)), customizer)


def at(obj: Any, *paths: Any) -> list[Any]:
    """Return the values at each of ``paths`` (None where missing).

    Example:
        >>> at({"a": [{"b": {"c": 3}}, 4]}, "a[0].b.c", "a[1]")
        [3, 4]
    """
    return [get(obj, path) for path in base_flatten(paths, 1)]


def result(obj: Any, path: Any, default: Any = None) -> Any:
    """Like :func:`get`, but callables found (or given as ``default``) are called.

    Example:
        >>> result({"a": {"b": lambda: 3}}, "a.b")
        3
    """
    found = get(obj, path, UNSET)
    value = default if found is UNSET else found
    return value() if callable(value) else value


def invoke(obj: Any, path: Any, *args: Any) -> Any:
    """Call the method at ``path`` with ``args``; None when it is not callable.

    Example:
        >>> invoke({"a": [1, 2, 3, 4]}, "a.index", 3)
        2
    """
    method_ = base_get_path(obj, to_path(path), None)
    return method_(*args) if callable(method_) else None


def method(path: Any, *args: Any) -> Callable[[Any], Any]:
    """Create a function invoking the method at ``path`` of a given object.

    Example:
        >>> method("a.upper")({"a": "hi"})
        'HI'
    """

    def invoker(obj: Any) -> Any:
        return invoke(obj, path, *args)

    return invoker


def method_of(obj: Any, *args: Any) -> Callable[[Any], Any]:
    """Create a function invoking the method of ``obj`` at a given path.

    Example:
        >>> method_of({"a": "hi"})("a.upper")
        'HI'
    """

    def invoker(path: Any) -> Any:
        return invoke(obj, path, *args)

    return invoker


def get_object_value_by_path(obj: Any, path: Any) -> Any:
    """Walk ``path`` from ``obj``, mapping over lists met on the way.

    When a list is reached, the remaining keys are applied to each element and
    the results flattened one level. Missing or falsy values give None.

    Example:
        >>> get_object_value_by_path({"foo": {"bar": "baz"}}, ["foo", "bar"])
        'baz'
        >>> get_object_value_by_path({"users": [{"name": "a"}, {"name": "b"}]}, "users.name")
        ['a', 'b']
    """
    current = obj
    for key in to_path(path):
        if current and isinstance(current, list):
            current = base_flatten(
                [get_object_value_by_path(item, [key]) for item in current], 1
            )
            continue
        value = base_get(current, key, None) if current else None
        current = value if value else None
    return current


# ============================================================================
#                               Merge & clone
# ============================================================================


def assign(obj: MutableMapping[Any, Any], *sources: Mapping[Any, Any] | None) -> Any:
    """Copy the items of each source onto ``obj`` (shallow, later sources win).

    Example:
        >>> assign({"a": 0}, {"a": 1, "b": 2}, None, {"c": 3})
        {'a': 1, 'b': 2, 'c': 3}
    """
    for source in sources:
        if source:
            obj.update(source)
    return obj


def _base_merge(
    target: Any, source: Any, customizer: Callable[..., Any] | None
) -> Any:
    for src_value, key in iter_items(source):
        current = base_get(target, key)
        merged = None
        if customizer is not None:
            merged = customizer(
                None if current is UNSET else current, src_value, key, target, source
            )
        if merged is None:
            if isinstance(src_value, Mapping) and isinstance(current, MutableMapping):
                _base_merge(current, src_value, customizer)
                continue
            if is_sequence(src_value) and isinstance(current, list):
                _base_merge(current, src_value, customizer)
                continue
            if src_value is None and current is not UNSET:
                continue
            merged = copy.deepcopy(src_value)
        base_set(target, key, merged)
    return target


def merge(obj: Any, *sources: Any) -> Any:
    """Deep-merge ``sources`` into ``obj``.

    Mappings merge key by key and lists index by index; None source values do
    not overwrite existing values.

    Example:
        >>> merge({"a": [{"b": 2}, {"d": 4}]}, {"a": [{"c": 3}, {"e": 5}]})
        {'a': [{'b': 2, 'c': 3}, {'d': 4, 'e': 5}]}
    """
    return merge_with(obj, *sources)


def merge_with(
    obj: Any, *sources: Any, customizer: Callable[..., Any] | None = None
) -> Any:
    """Like :func:`merge`, but ``customizer`` decides merged values.

    ``customizer(obj_value, src_value, key, obj, source)`` returning None
    falls back to the default merge.

    Example:
        >>> def concat_lists(obj_value, src_value, *_):
        ...     if isinstance(obj_value, list):
        ...         return obj_value + src_value
        >>> merge_with({"a": [1], "b": [2]}, {"a": [3], "b": [4]}, customizer=concat_lists)
        {'a': [1, 3], 'b': [2, 4]}
    """
    callback = bind_callback(customizer, 5) if customizer is not None else None
    for source in sources:
        if source is not None:
            _base_merge(obj, source, callback)
    return obj


def defaults(obj: MutableMapping[Any, Any], *sources: Mapping[Any, Any] | None) -> Any:
    """Fill keys of ``obj`` that are missing or None from ``sources`` (first wins).

    Example:
        >>> defaults({"a": 1}, {"b": 2}, {"a": 3})
        {'a': 1, 'b': 2}
    """
    for source in sources:
        for key, value in (source or {}).items():
            if obj.get(key) is None:
                obj[key] = value
    return obj


def defaults_deep(
    obj: MutableMapping[Any, Any], *sources: Mapping[Any, Any] | None
) -> Any:
    """Like :func:`defaults`, recursing into nested mappings.

    Example:
        >>> defaults_deep({"a": {"b": 2}}, {"a": {"b": 1, "c": 3}})
        {'a': {'b': 2, 'c': 3}}
    """
    for source in sources:
        for key, value in (source or {}).items():
            current = obj.get(key)
            if isinstance(current, MutableMapping) and isinstance(value, Mapping):
                defaults_deep(current, value)
            elif current is None:
                obj[key] = copy.deepcopy(value)
    return obj


def clone(value: Any) -> Any:
    """Return a shallow copy of ``value``."""
    return copy.copy(value)


def clone_deep(value: Any) -> Any:
    """Return a deep copy of ``value``.

    Example:
        >>> data = [{"a": 1}]
        >>> clone_deep(data)[0] is data[0]
        False
    """
    return copy.deepcopy(value)


# ============================================================================
#                               Keys & values
# ============================================================================


def keys(obj: Any) -> list[Any]:
    """Return the keys of a mapping, the indexes of a sequence or an object's public attributes.

    Example:
        >>> keys({"a": 1, "b": 2})
        ['a', 'b']
        >>> keys("hi")
        [0, 1]
    """
    if obj is None:
        return []
    if isinstance(obj, Mapping):
        return list(obj)
    if isinstance(obj, Sequence):
        return list(range(len(obj)))
    if hasattr(obj, "__dict__"):
        return [name for name in vars(obj) if not name.startswith("_")]
    return []


def values(obj: Any) -> list[Any]:
    """Return the values matching :func:`keys`.

    Example:
        >>> values({"a": 1, "b": 2})
        [1, 2]
    """
    return [base_get(obj, key) for key in keys(obj)]


def to_pairs(obj: Any) -> list[list[Any]]:
    """Return ``[key, value]`` pairs.

    Example:
        >>> to_pairs({"a": 1, "b": 2})
        [['a', 1], ['b', 2]]
    """
    return [[key, base_get(obj, key)] for key in keys(obj)]


entries = to_pairs


def from_pairs(pairs: Sequence[Sequence[Any]]) -> dict[Any, Any]:
    """Inverse of :func:`to_pairs`.

    Example:
        >>> from_pairs([["a", 1], ["b", 2]])
        {'a': 1, 'b': 2}
    """
    return {pair[0]: pair[1] for pair in pairs}


def invert(obj: Mapping[Any, Any]) -> dict[Any, Any]:
    """Swap keys and values; later keys win on duplicate values.

    Example:
        >>> invert({"a": 1, "b": 2, "c": 1})
        {1: 'c', 2: 'b'}
    """
    return {value: key for key, value in obj.items()}


def invert_by(obj: Mapping[Any, Any], iteratee: Any = None) -> dict[Any, list[Any]]:
    """Group keys by the value ``iteratee`` computes from each value.

    Example:
        >>> invert_by({"a": 1, "b": 2, "c": 1}, lambda v: f"group{v}")
        {'group1': ['a', 'c'], 'group2': ['b']}
    """
    transform = make_iteratee(iteratee)
    inverted: dict[Any, list[Any]] = {}
    for key, value in obj.items():
        inverted.setdefault(transform(value), []).append(key)
    return inverted


def map_keys(obj: Mapping[Any, Any], iteratee: Any = None) -> dict[Any, Any]:
    """Build a dict with keys computed by ``iteratee(value, key, obj)``.

    Example:
        >>> map_keys({"a": 1, "b": 2}, lambda value, key: key + str(value))
        {'a1': 1, 'b2': 2}
    """
    callback = bind_callback(make_iteratee(iteratee), 3)
    return {callback(value, key, obj): value for key, value in obj.items()}


def map_values(obj: Mapping[Any, Any], iteratee: Any = None) -> dict[Any, Any]:
    """Build a dict with values computed by ``iteratee(value, key, obj)``.

    Example:
        >>> map_values({"fred": {"age": 40}, "pebbles": {"age": 1}}, "age")
        {'fred': 40, 'pebbles': 1}
    """
    callback = bind_callback(make_iteratee(iteratee), 3)
    return {key: callback(value, key, obj) for key, value in obj.items()}


def pick(obj: Any, *paths: Any) -> dict[Any, Any]:
    """Build a dict holding only the given ``paths`` of ``obj``.

    Example:
        >>> pick({"a": 1, "b": "2", "c": 3}, "a", "c")
        {'a': 1, 'c': 3}
        >>> pick({"a": {"b": 1, "c": 2}}, "a.b")
        {'a': {'b': 1}}
    """
    picked: dict[Any, Any] = {}
    for path in base_flatten(paths, 1):
        keys_ = to_path(path)
        found = base_get_path(obj, keys_)
        if found is not UNSET:
            base_set_path(picked, keys_, found)
    return picked


def pick_by(obj: Mapping[Any, Any], predicate: Any = None) -> dict[Any, Any]:
    """Build a dict of the items ``predicate(value, key)`` returns truthy for.

    Example:
        >>> pick_by({"a": 1, "b": "2", "c": 3}, lambda v: isinstance(v, int))
        {'a': 1, 'c': 3}
    """
    callback = bind_callback(make_iteratee(predicate), 2)
    return {key: value for key, value in obj.items() if callback(value, key)}


def omit(obj: Mapping[Any, Any], *paths: Any) -> dict[Any, Any]:
    """Build a dict without the given ``paths``.

    Example:
        >>> omit({"a": 1, "b": "2", "c": 3}, "a", "c")
        {'b': '2'}
        >>> omit({"a": {"b": 1, "c": 2}}, "a.b")
        {'a': {'c': 2}}
    """
    paths_ = [to_path(path) for path in base_flatten(paths, 1)]
    if all(len(keys_) == 1 for keys_ in paths_):
        excluded = [keys_[0] for keys_ in paths_]
        return {key: value for key, value in obj.items() if key not in excluded}
    omitted = copy.deepcopy(dict(obj))
    for keys_ in paths_:
        unset(omitted, keys_)
    return omitted


def omit_by(obj: Mapping[Any, Any], predicate: Any = None) -> dict[Any, Any]:
    """Build a dict of the items ``predicate(value, key)`` returns falsy for.

    Example:
        >>> omit_by({"a": 1, "b": "2", "c": 3}, lambda v: isinstance(v, int))
        {'b': '2'}
    """
    callback = bind_callback(make_iteratee(predicate), 2)
    return {key: value for key, value in obj.items() if not callback(value, key)}


def for_own(obj: Any, iteratee: Any = None) -> Any:
    """Call ``iteratee(value, key, obj)`` for each item; returning ``False`` stops."""
    callback = bind_callback(make_iteratee(iteratee), 3)
    for key in keys(obj):
        if callback(base_get(obj, key), key, obj) is False:
            break
    return obj


def for_own_right(obj: Any, iteratee: Any = None) -> Any:
    """Like :func:`for_own`, iterating in reverse order."""
    callback = bind_callback(make_iteratee(iteratee), 3)
    for key in reversed(keys(obj)):
        if callback(base_get(obj, key), key, obj) is False:
            break
    return obj


def find_last_key(obj: Any, predicate: Any = None) -> Any:
    """Return the last key whose value ``predicate`` matches, or None.

    Example:
        >>> find_last_key({"barney": {"age": 36}, "fred": {"age": 40}}, lambda u: u["age"] < 50)
        'fred'
    """
    callback = bind_callback(make_iteratee(predicate), 3)
    for key in reversed(keys(obj)):
        if callback(base_get(obj, key), key, obj):
            return key
    return None


def transform(
    obj: Any, iteratee: Callable[..., Any] | None = None, accumulator: Any = None
) -> Any:
    """Reduce ``obj`` into ``accumulator`` by mutating it.

    ``iteratee(accumulator, value, key, obj)`` may return ``False`` to stop.
    The default accumulator is a list for sequences and a dict otherwise.

    Example:
        >>> transform([2, 3, 4], lambda acc, n: acc.append(n * n) or n != 3)
        [4, 9]
    """
    if accumulator is None:
        accumulator = [] if is_sequence(obj) else {}
    callback = bind_callback(make_iteratee(iteratee), 4)
    for value, key in iter_items(obj):
        if callback(accumulator, value, key, obj) is False:
            break
    return accumulator


def functions(obj: Any) -> list[str]:
    """Return the names of the callable members of ``obj``.

    Example:
        >>> functions({"a": len, "b": 1})
        ['a']
    """
    if isinstance(obj, Mapping):
        return [key for key, value in obj.items() if callable(value)]
    return [
        name
        for name in dir(obj)
        if not name.startswith("_") and callable(getattr(obj, name, None))
    ]


def conforms_to(obj: Any, source: Mapping[Any, Callable[[Any], Any]]) -> bool:
    """Check that each key of ``source`` exists in ``obj`` and passes its predicate.

    Example:
        >>> conforms_to({"a": 1, "b": 2}, {"b": lambda n: n > 1})
        True
    """
    for key, predicate in source.items():
        value = base_get(obj, key)
        if value is UNSET or not predicate(value):
            return False
    return True


# ============================================================================
#                               Inspection
# ============================================================================


def is_equal(value: Any, other: Any) -> bool:
    """Deep structural comparison.

    Mappings compare by items, lists and tuples element-wise regardless of
    their type, and NaN equals NaN.

    Example:
        >>> is_equal({"a": [1, 2]}, {"a": (1, 2)})
        True
    """
    return base_is_equal(value, other)


def is_empty(value: Any, props: bool = False) -> bool:
    """Check whether ``value`` is empty.

    Strings are empty when they have no characters, lists when every item is
    empty (so ``[]`` and ``["", []]`` are empty) and mappings when they have no
    keys or, with ``props``, when every value is empty. Any other value is
    considered empty.

    Example:
        >>> is_empty({"a": ""})
        False
        >>> is_empty({"a": ""}, props=True)
        True
        >>> is_empty(42)
        True
    """
    if isinstance(value, str):
        return len(value) == 0
    if isinstance(value, Mapping):
        if props:
            return all(is_empty(item, props) for item in value.values())
        return len(value) == 0
    if is_sequence(value):
        return all(is_empty(item, props) for item in value)
    return True


def get_value_type(value: Any) -> str:
    """Classify ``value`` under one of six coarse type names.

    One of ``"undefined"`` (None), ``"boolean"``, ``"number"``, ``"string"``,
    ``"function"`` or ``"object"``.

    Example:
        >>> get_value_type(42)
        'number'
        >>> get_value_type("hello world")
        'string'
    """
    if value is None:
        return "undefined"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if callable(value):
        return "function"
    return "object"


def get_object_keys_by_type(obj: Mapping[Any, Any], type_name: str) -> list[Any]:
    """Return the keys of ``obj`` whose values have the given type name.

    Example:
        >>> get_object_keys_by_type({"name": "John", "age": 30, "email": "j@x.io"}, "string")
        ['name', 'email']
    """
    return [key for key, value in obj.items() if get_value_type(value) == type_name]


def compare_types(data: Sequence[Any], type_name: str, get_keys: bool = False) -> list[Any]:
    """Return the indexes (or keys) of elements of ``data`` with the given type.

    A mapping element matches when one of its values has the type. With
    ``get_keys``, matching mappings contribute their matching keys instead of
    their index. A ``"!"`` prefix negates the type check.

    Example:
        >>> data = [1, "hello", {"name": "John", "age": 30}, True, {"name": "Jane", "age": 25}]
        >>> compare_types(data, "number", get_keys=True)
        [0, 'age', 'age']
        >>> compare_types(data, "!object")
        [0, 1, 3]
    """
    negate = type_name.startswith("!")
    wanted = (type_name[1:] if negate else type_name).lower()
    matched: list[Any] = []
    for index, value in enumerate(data):
        value_type = get_value_type(value)
        is_mapping = isinstance(value, Mapping)
        if negate:
            if value_type == wanted:
                continue
        elif not (
            value_type == wanted
            or (is_mapping and get_object_keys_by_type(value, wanted))
        ):
            continue
        if get_keys and is_mapping:
            matched.extend(get_object_keys_by_type(value, wanted))
        else:
            matched.append(index)
    return matched


def flat(data: Any, props: Sequence[Any] | None = None) -> str:
    """Join the unique truthy leaf values of a nested structure with ``", "``.

    With ``props`` only leaves stored under those keys are collected.

    Example:
        >>> flat({"a": 1, "b": {"c": 2, "d": [3, 0]}})
        '1, 2, 3'
        >>> flat({"a": 1, "b": {"c": 2}}, props=["c"])
        '2'
    """
    props = list(props or [])
    collected: list[Any] = []

    def traverse(node: Any) -> None:
        for value, key in iter_items(node):
            if isinstance(value, Mapping) or (
                is_sequence(value) and not all(is_scalar(item) for item in value)
            ):
                traverse(value)
            elif not props or key in props:
                leaves = value if is_sequence(value) else [value]
                collected.extend(leaf for leaf in leaves if leaf)

    traverse(data)
    unique: list[Any] = []
    for item in collected:
        if not any(base_is_equal(item, seen) for seen in unique):
            unique.append(item)
    return ", ".join(str(item) for item in unique)
