"""Unit tests for generic_functions.core.arithmetic."""

import math

import pytest

from generic_functions.core.arithmetic import (
    add,
    ceil,
    divide,
    floor,
    in_range,
    max_,
    max_by,
    mean,
    mean_by,
    min_,
    min_by,
    multiply,
    round_,
    std,
    subtract,
    sum_,
    sum_by,
    variance,
)


def test_basic_operators():
    """The four operators behave like their Python counterparts."""
    assert add(6, 4) == 10
    assert subtract(6, 4) == 2
    assert multiply(6, 4) == 24
    assert divide(6, 4) == 1.5


def test_divide_by_zero_follows_ieee():
    """Zero divisors give signed infinities, and 0/0 gives NaN."""
    assert divide(1, 0) == math.inf
    assert divide(-1, 0) == -math.inf
    assert divide(1, -0.0) == -math.inf
    assert math.isnan(divide(0, 0))


@pytest.mark.parametrize(
    ("func", "number", "precision", "expected"),
    [
        (round_, 4.006, 0, 4),
        (round_, 4.006, 2, 4.01),
        (round_, 4060, -2, 4100),
        (round_, 1.005, 2, 1.01),
        (round_, 2.5, 0, 3),
        (round_, -2.5, 0, -2),
        (ceil, 4.006, 0, 5),
        (ceil, 6.004, 2, 6.01),
        (ceil, 6040, -2, 6100),
        (floor, 4.006, 0, 4),
        (floor, 0.046, 2, 0.04),
        (floor, 4060, -2, 4000),
    ],
)
def test_rounding_with_precision(func, number, precision, expected):
    """Rounding works on decimal digits, without binary representation artefacts."""
    assert func(number, precision) == expected


def test_rounding_negative_precision_gives_int():
    """Rounding to tens or hundreds gives an int."""
    assert isinstance(round_(4060, -2), int)


def test_rounding_leaves_non_finite_values_alone():
    """Infinities and NaN pass through."""
    assert round_(math.inf, 2) == math.inf
    assert math.isnan(floor(math.nan))


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        ((3, 2, 4), True),
        ((4, 8), True),
        ((4, 2), False),
        ((2, 2), False),
        ((1.2, 2), True),
        ((5.2, 4), False),
        ((-3, -2, -6), True),
        ((4, 2, 4), False),
    ],
)
def test_in_range(args, expected):
    """The start bound is inclusive and the end bound exclusive."""
    assert in_range(*args) is expected


def test_sums_and_means():
    """Empty inputs give 0."""
    assert sum_([4, 2, 8, 6]) == 20
    assert sum_([]) == 0
    assert sum_by([{"n": 4}, {"n": 2}, {"n": 8}, {"n": 6}], "n") == 20
    assert sum_by([1, 2], lambda n: n * 10) == 30
    assert mean([4, 2, 8, 6]) == 5
    assert mean([]) == 0
    assert mean_by([{"n": 4}, {"n": 2}, {"n": 8}, {"n": 6}], "n") == 5


def test_min_and_max():
    """Empty inputs give None."""
    assert max_([4, 2, 8, 6]) == 8
    assert min_([4, 2, 8, 6]) == 2
    assert max_([]) is None
    assert min_([]) is None


def test_min_by_and_max_by_keep_first_on_ties():
    """Ties keep the element met first."""
    items = [{"id": "a", "n": 1}, {"id": "b", "n": 2}, {"id": "c", "n": 2}, {"id": "d", "n": 1}]
    assert max_by(items, "n")["id"] == "b"
    assert min_by(items, "n")["id"] == "a"
    assert max_by([], "n") is None
    assert min_by([3, -4, 2], abs) == 2


def test_variance_and_std_are_population_statistics():
    """Divides by the number of values, not by n - 1."""
    values = [2, 4, 4, 4, 5, 5, 7, 9]
    assert variance(values) == 4.0
    assert std(values) == 2.0
    assert variance([]) == 0
    assert std([]) == 0
