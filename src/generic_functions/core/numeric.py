"""Number parsing, clamping and random numbers."""

from __future__ import annotations

import math
import random
import re
from collections.abc import Mapping
from typing import Any

from .string import parse_int

__all__ = [
    "clamp",
    "number",
    "parse_float",
    "random_",
    "random_int",
]

_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:inf(?:inity)?|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.IGNORECASE
)


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp ``value`` within the inclusive ``[lower, upper]`` bounds.

    Example:
        >>> clamp(-10, -5, 5), clamp(10, -5, 5), clamp(3, -5, 5)
        (-5, 5, 3)
    """
    return min(max(value, lower), upper)


def number(data: Any, deep: bool = False) -> Any:
    """Parse the leading integer of ``data``, returning ``data`` itself when there is none.

    Lists are parsed item by item. Mappings are copied, and their values are
    parsed only when ``deep`` is set.

    Args:
        data: A string, number, list or mapping.
        deep: Also parse the values of mappings (at any depth).

    Returns:
        The parsed integer(s), or the untouched input where parsing fails.

    Example:
        >>> number("42px"), number(3.7), number("abc")
        (42, 3, 'abc')
        >>> number(["1", "x"])
        [1, 'x']
        >>> number({"a": "1", "b": {"c": "2"}}, deep=True)
        {'a': 1, 'b': {'c': 2}}
    """
    if isinstance(data, list):
        return [number(item, deep) for item in data]
    if isinstance(data, Mapping):
        return {key: number(value, deep) if deep else value for key, value in data.items()}
    if data is None or isinstance(data, bool):
        return data
    parsed = parse_int(data)
    return data if parsed is None else parsed


def parse_float(data: Any, precision: int | None = None) -> Any:
    """Parse the leading floating point number of ``data``.

    Args:
        data: The value to parse.
        precision: Number of decimals to round the result to.

    Returns:
        The parsed float, or ``data`` itself when it does not start with a number.

    Example:
        >>> parse_float("3.14abc"), parse_float("3.14159", 2), parse_float("abc")
        (3.14, 3.14, 'abc')
    """
    if data is None or isinstance(data, bool):
        return data
    match = _FLOAT_PREFIX.match(str(data).strip())
    if match is None:
        return data
    parsed = float(match.group())
    if precision is not None and math.isfinite(parsed):
        parsed = float(f"{parsed:.{precision}f}")
    return parsed


def random_(lower: float = 0, upper: float = 1) -> float:
    """Random float in ``[lower, upper)``."""
    return random.random() * (upper - lower) + lower


def random_int(lower: int = 0, upper: int = 100) -> int:
    """Random integer in ``[lower, upper]`` (both inclusive).

    Example:
        >>> 1 <= random_int(1, 6) <= 6
        True
    """
    return random.randint(lower, upper)
