"""Arithmetic and statistics over numbers and sequences of numbers."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from typing import Any

from ._helpers import bind_callback
from .utility import iteratee as make_iteratee

__all__ = [
    "add",
    "ceil",
    "divide",
    "floor",
    "in_range",
    "max_",
    "max_by",
    "mean",
    "mean_by",
    "min_",
    "min_by",
    "multiply",
    "round_",
    "std",
    "subtract",
    "sum_",
    "sum_by",
    "variance",
]


# ==============================================================================
# Operators
# ==============================================================================


def add(augend: float, addend: float) -> float:
    """Add two numbers."""
    return augend + addend


def subtract(minuend: float, subtrahend: float) -> float:
    """Subtract two numbers."""
    return minuend - subtrahend


def multiply(multiplier: float, multiplicand: float) -> float:
    """Multiply two numbers."""
    return multiplier * multiplicand


def divide(dividend: float, divisor: float) -> float:
    """Divide two numbers, with IEEE semantics for a zero divisor.

    Example:
        >>> divide(6, 4)
        1.5
        >>> divide(1, 0), divide(-1, 0)
        (inf, -inf)
    """
    if divisor == 0:
        if dividend == 0 or math.isnan(dividend):
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1, divisor)
    return dividend / divisor


# ==============================================================================
# Rounding
# ==============================================================================


def _shift(number: float, exponent: int) -> float:
    """Multiply ``number`` by ``10**exponent`` through its decimal representation."""
    mantissa, _, exp = repr(float(number)).partition("e")
    return float(f"{mantissa}e{int(exp or 0) + exponent}")


def _create_round(method: Callable[[float], int]) -> Callable[[float, int], float]:
    def rounder(number: float, precision: int = 0) -> float:
        if not math.isfinite(number):
            return number
        if not precision:
            return method(number)
        result = _shift(method(_shift(number, precision)), -precision)
        return int(result) if precision < 0 else result

    return rounder


def _round_half_up(number: float) -> int:
    return math.floor(number + 0.5)


_round = _create_round(_round_half_up)
_ceil = _create_round(math.ceil)
_floor = _create_round(math.floor)


def round_(number: float, precision: int = 0) -> float:
    """Round ``number`` to ``precision`` decimals, halves rounding up.

    A negative ``precision`` rounds to tens, hundreds, and so on.

    Example:
        >>> round_(4.006), round_(4.006, 2), round_(4060, -2)
        (4, 4.01, 4100)
        >>> round_(1.005, 2), round_(-2.5)
        (1.01, -2)
    """
    return _round(number, precision)


def ceil(number: float, precision: int = 0) -> float:
    """Round ``number`` up to ``precision`` decimals.

    Example:
        >>> ceil(4.006), ceil(6.004, 2), ceil(6040, -2)
        (5, 6.01, 6100)
    """
    return _ceil(number, precision)


def floor(number: float, precision: int = 0) -> float:
    """Round ``number`` down to ``precision`` decimals.

    Example:
        >>> floor(4.006), floor(0.046, 2), floor(4060, -2)
        (4, 0.04, 4000)
    """
    return _floor(number, precision)


def in_range(number: float, start: float, end: float | None = None) -> bool:
    """Check whether ``start <= number < end``.

    With a single bound the range is ``[0, start)``; reversed bounds are swapped.

    Example:
        >>> in_range(3, 2, 4), in_range(4, 8), in_range(-3, -2, -6)
        (True, True, True)
    """
    if end is None:
        start, end = 0, start
    if start > end:
        start, end = end, start
    return start <= number < end


# ==============================================================================
# Aggregates
# ==============================================================================


def _values_by(array: Sequence[Any], iteratee: Any) -> list[Any]:
    getter = bind_callback(make_iteratee(iteratee), 1)
    return [getter(item) for item in array]


def sum_(array: Sequence[float]) -> float:
    """Sum the numbers of ``array`` (0 when empty)."""
    return sum(array, 0)


def sum_by(array: Sequence[Any], iteratee: Any = None) -> float:
    """Sum the values ``iteratee`` produces for each element.

    Example:
        >>> sum_by([{"n": 4}, {"n": 2}, {"n": 8}, {"n": 6}], "n")
        20
    """
    return sum(_values_by(array, iteratee), 0)


def mean(array: Sequence[float]) -> float:
    """Arithmetic mean of ``array`` (0 when empty).

    Example:
        >>> mean([4, 2, 8, 6])
        5.0
    """
    return sum_(array) / len(array) if array else 0


def mean_by(array: Sequence[Any], iteratee: Any = None) -> float:
    """Arithmetic mean of the values ``iteratee`` produces (0 when empty)."""
    return mean(_values_by(array, iteratee))


def max_(array: Sequence[Any]) -> Any:
    """Largest element of ``array``, or None when empty."""
    return max(array) if array else None


def min_(array: Sequence[Any]) -> Any:
    """Smallest element of ``array``, or None when empty."""
    return min(array) if array else None


def _extreme_by(array: Sequence[Any], iteratee: Any, better: Callable[[Any, Any], bool]) -> Any:
    if not array:
        return None
    getter = bind_callback(make_iteratee(iteratee), 1)
    best, best_value = array[0], getter(array[0])
    for item in array[1:]:
        value = getter(item)
        if better(value, best_value):
            best, best_value = item, value
    return best


def max_by(array: Sequence[Any], iteratee: Any = None) -> Any:
    """Element of ``array`` for which ``iteratee`` is largest (first one on ties).

    Example:
        >>> max_by([{"n": 1}, {"n": 2}], "n")
        {'n': 2}
    """
    return _extreme_by(array, iteratee, lambda value, best: value > best)


def min_by(array: Sequence[Any], iteratee: Any = None) -> Any:
    """Element of ``array`` for which ``iteratee`` is smallest (first one on ties)."""
    return _extreme_by(array, iteratee, lambda value, best: value < best)


def variance(array: Sequence[float]) -> float:
    """Population variance of ``array`` (0 when empty).

    Example:
        >>> variance([2, 4, 4, 4, 5, 5, 7, 9])
        4.0
    """
    if not array:
        return 0
    average = mean(array)
    return mean([(value - average) ** 2 for value in array])


def std(array: Sequence[float]) -> float:
    """Population standard deviation of ``array`` (0 when empty).

    Example:
        >>> std([2, 4, 4, 4, 5, 5, 7, 9])
        2.0
    """
    return math.sqrt(variance(array)) if array else 0
