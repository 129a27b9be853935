"""Internal building blocks shared by the core modules.

Three concerns live here:

- **Callback contract**: callbacks are called with at most as many positional
  arguments as they declare, so ``lambda x: ...`` and
  ``lambda value, key, collection: ...`` are both valid callbacks.
- **Dual-mode iteration**: sequences yield ``(value, index)`` pairs, mappings
  yield ``(value, key)`` pairs.
- **Key paths**: parsing of ``"a.b[0].c"`` style paths and the primitive
  get/set/has operations that path accessors are built on.

Nothing in this module is part of the public API.
"""

from __future__ import annotations

import inspect
import math
import re
from collections.abc import (
    Callable,
    Hashable,
    Iterable,
    Iterator,
    Mapping,
    MutableMapping,
    MutableSequence,
    Sequence,
)
from typing import Any


class _Unset:
    """Type of the :data:`UNSET` sentinel."""

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()
"""Marks an omitted argument or a missing value where ``None`` is meaningful."""

_SCALARS = (str, bytes, int, float, complex, bool)

# ============================================================================
#                           Callback contract
# ============================================================================


def getargcount(func: Callable[..., Any], maxargs: int) -> int:
    """Return how many positional arguments ``func`` should receive.

    Required positional parameters are counted; a callable with only optional
    positional parameters (or whose signature cannot be inspected, like most
    builtins) receives one argument, and ``*args`` receives ``maxargs``.

    Args:
        func: The callback to inspect.
        maxargs: Upper bound on the number of arguments.

    Returns:
        int: Number of positional arguments to pass, between 0 and ``maxargs``.
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return min(1, maxargs)

    required = 0
    optional = 0
    for param in signature.parameters.values():
        if param.kind == param.VAR_POSITIONAL:
            return maxargs
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            if param.default is param.empty:
                required += 1
            else:
                optional += 1
    if required == 0 and optional:
        required = 1
    return min(required, maxargs)


def bind_callback(func: Callable[..., Any], maxargs: int) -> Callable[..., Any]:
    """Adapt ``func`` so it can be called with ``maxargs`` positional arguments.

    Extra arguments beyond what ``func`` declares are dropped.
    """
    argcount = getargcount(func, maxargs)
    if argcount >= maxargs:
        return func

    def caller(*args: Any) -> Any:
        return func(*args[:argcount])

    return caller


# ============================================================================
#                           Dual-mode iteration
# ============================================================================


def iter_items(collection: Any) -> Iterator[tuple[Any, Any]]:
    """Yield ``(value, key)`` pairs for a mapping, sequence or other iterable.

    ``None`` yields nothing.
    """
    if collection is None:
        return
    if isinstance(collection, Mapping):
        for key, value in collection.items():
            yield value, key
    elif isinstance(collection, Iterable):
        for index, value in enumerate(collection):
            yield value, index
    else:
        raise TypeError(f"{type(collection).__name__!r} object is not iterable")


def is_sequence(value: Any) -> bool:
    """Return True for list-like values (sequences that are not strings or bytes)."""
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


def is_scalar(value: Any) -> bool:
    """Return True for ``None`` and primitive values."""
    return value is None or isinstance(value, _SCALARS)


def base_flatten(items: Iterable[Any], depth: int = 1) -> list[Any]:
    """Flatten nested lists and tuples up to ``depth`` levels (negative: fully)."""
    result: list[Any] = []
    for item in items:
        if depth != 0 and isinstance(item, (list, tuple)):
            result.extend(base_flatten(item, depth - 1))
        else:
            result.append(item)
    return result


# ============================================================================
#                           Equality
# ============================================================================


def base_is_equal(value: Any, other: Any) -> bool:
    """Deep structural equality.

    Mappings compare by keys and values, list-likes element-wise regardless of
    their concrete type, NaN equals NaN.
    """
    if value is other:
        return True
    if isinstance(value, float) and isinstance(other, float):
        if math.isnan(value) and math.isnan(other):
            return True
    if isinstance(value, Mapping) and isinstance(other, Mapping):
        if len(value) != len(other):
            return False
        return all(
            key in other and base_is_equal(item, other[key])
            for key, item in value.items()
        )
    if is_sequence(value) and is_sequence(other):
        if len(value) != len(other):
            return False
        return all(base_is_equal(a, b) for a, b in zip(value, other))
    if isinstance(value, Mapping) or isinstance(other, Mapping):
        return False
    try:
        return bool(value == other)
    except (TypeError, ValueError):
        return False


def base_is_match(obj: Any, source: Mapping[Any, Any]) -> bool:
    """Partial deep comparison: every key of ``source`` matches in ``obj``."""
    for key, expected in source.items():
        actual = base_get(obj, key)
        if actual is UNSET:
            return False
        if isinstance(expected, Mapping) and not is_scalar(actual):
            if not base_is_match(actual, expected):
                return False
        elif not base_is_equal(actual, expected):
            return False
    return True


# ============================================================================
#                           Key paths
# ============================================================================

_PATH_TOKEN = re.compile(
    r"""\[(?P<index>-?\d+)\]"""
    r"""|\[(?P<quote>["'])(?P<quoted>.*?)(?P=quote)\]"""
    r"""|(?P<name>[^.\[\]]+)"""
)


def to_path(path: Any) -> list[Hashable]:
    """Convert a key path into a list of keys.

    Accepts a dotted string with optional bracket indices (``"a.b[0].c"``,
    ``"a['x.y']"``), a list or tuple of keys, or a single non-string key.
    """
    if isinstance(path, (list, tuple)):
        return list(path)
    if not isinstance(path, str):
        return [path]
    keys: list[Hashable] = []
    for match in _PATH_TOKEN.finditer(path):
        if match.group("index") is not None:
            keys.append(int(match.group("index")))
        elif match.group("quoted") is not None:
            keys.append(match.group("quoted"))
        else:
            keys.append(match.group("name"))
    return keys


def to_index(key: Any) -> int | None:
    """Return ``key`` as a non-negative list index, or None if it is not one."""
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key if key >= 0 else None
    if isinstance(key, str) and key.isdigit():
        return int(key)
    return None


def _alternate_key(key: Any) -> Any:
    """Return the str/int twin of a mapping key (``"0"`` <-> ``0``) or UNSET."""
    if isinstance(key, str) and key.isdigit():
        return int(key)
    if isinstance(key, int) and not isinstance(key, bool):
        return str(key)
    return UNSET


def base_get(obj: Any, key: Any, default: Any = UNSET) -> Any:
    """Read a single key from a mapping, sequence or object attribute."""
    if obj is None:
        return default
    if isinstance(obj, Mapping):
        if key in obj:
            return obj[key]
        alternate = _alternate_key(key)
        if alternate is not UNSET and alternate in obj:
            return obj[alternate]
        return default
    if isinstance(obj, Sequence):
        if (index := to_index(key)) is None:
            # Sequence methods, e.g. ``"upper"`` on a string.
            return getattr(obj, key, default) if isinstance(key, str) else default
        if index >= len(obj):
            return default
        return obj[index]
    if isinstance(key, str):
        return getattr(obj, key, default)
    return default


def base_get_path(obj: Any, keys: Sequence[Any], default: Any = UNSET) -> Any:
    """Walk ``keys`` from ``obj``; return ``default`` as soon as a key is missing."""
    if not keys:
        return default
    current = obj
    for key in keys:
        current = base_get(current, key)
        if current is UNSET:
            return default
    return current


def base_set(obj: Any, key: Any, value: Any) -> None:
    """Write a single key on a mapping, list or object attribute.

    Lists grow (padded with ``None``) when the index is past their end.
    """
    if isinstance(obj, MutableMapping):
        if key not in obj:
            alternate = _alternate_key(key)
            if alternate is not UNSET and alternate in obj:
                key = alternate
        obj[key] = value
    elif isinstance(obj, MutableSequence):
        if (index := to_index(key)) is None:
            raise TypeError(f"List indices must be non-negative integers, not {key!r}")
        if index >= len(obj):
            obj.extend([None] * (index - len(obj) + 1))
        obj[index] = value
    else:
        setattr(obj, str(key), value)


def base_set_path(
    obj: Any,
    keys: Sequence[Any],
    value: Any,
    customizer: Callable[..., Any] | None = None,
) -> Any:
    """Set ``value`` at ``keys``, creating missing containers along the way.

    A missing (or scalar) intermediate value is replaced by what ``customizer``
    returns for ``(current_value, key, parent)``; when it returns None a list is
    created if the next key is an index, otherwise a dict.
    """
    if not keys:
        return obj
    target = obj
    for position, key in enumerate(keys[:-1]):
        nested = base_get(target, key)
        if nested is UNSET or is_scalar(nested):
            replacement = None
            if customizer is not None:
                replacement = customizer(None if nested is UNSET else nested, key, target)
            if replacement is None:
                replacement = [] if to_index(keys[position + 1]) is not None else {}
            base_set(target, key, replacement)
            nested = replacement
        target = nested
    base_set(target, keys[-1], value)
    return obj


def base_has(obj: Any, key: Any) -> bool:
    """Return True if ``obj`` directly holds ``key``."""
    return base_get(obj, key) is not UNSET
