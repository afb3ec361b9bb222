import math

import pytest

from algokata.stats import (
    birthday_cake_candles,
    diagonal_difference,
    min_max_sum,
    plus_minus,
    staircase,
    very_big_sum,
)


def test_min_max_sum_example():
    assert min_max_sum([1, 2, 3, 4, 5]) == (10, 14)


@pytest.mark.parametrize("arr", [[7, 69, 2, 221, 8974], [5, 5, 5, 5], [-3, 4, 0, 12]])
def test_min_max_sum_invariants(arr):
    low, high = min_max_sum(arr)
    assert low + max(arr) == sum(arr)
    assert high + min(arr) == sum(arr)
    assert high - low == max(arr) - min(arr)


def test_min_max_sum_empty_raises():
    with pytest.raises(ValueError):
        min_max_sum([])


def test_plus_minus_ratios_sum_to_one():
    arr = [-4, 3, -9, 0, 4, 1]
    ratios = plus_minus(arr)
    assert math.isclose(sum(ratios), 1.0)


def test_plus_minus_counts():
    arr = [1, 1, 0, -1, -1]
    positive, negative, zero = plus_minus(arr)
    assert positive == arr.count(1) / len(arr)
    assert negative == arr.count(-1) / len(arr)
    assert zero == arr.count(0) / len(arr)


def test_plus_minus_empty_raises():
    with pytest.raises(ValueError):
        plus_minus([])


def test_very_big_sum_no_overflow():
    arr = [1000000001, 1000000002, 1000000003, 1000000004, 1000000005]
    result = very_big_sum(arr)
    assert result == sum(arr)
    assert result > 2**31


def test_very_big_sum_empty():
    assert very_big_sum([]) == 0


def test_diagonal_difference_example():
    assert diagonal_difference([[11, 2, 4], [4, 5, 6], [10, 8, -12]]) == 15


def test_diagonal_difference_mirror_invariant():
    matrix = [[1, 2, 3], [4, 5, 6], [9, 8, 9]]
    mirrored = [row[::-1] for row in matrix]
    assert diagonal_difference(mirrored) == diagonal_difference(matrix)


def test_diagonal_difference_non_square_raises():
    with pytest.raises(ValueError):
        diagonal_difference([[1, 2], [3]])


def test_staircase_four():
    assert staircase(4) == "   #\n  ##\n ###\n####\n"


@pytest.mark.parametrize("n", [1, 3, 6])
def test_staircase_shape(n):
    lines = staircase(n).splitlines()
    assert len(lines) == n
    for step, line in enumerate(lines, start=1):
        assert len(line) == n
        assert line.count("#") == step
        assert line.endswith("#")


def test_staircase_zero_is_empty():
    assert staircase(0) == ""


def test_birthday_cake_candles_example():
    assert birthday_cake_candles([3, 2, 1, 3]) == 2


def test_birthday_cake_candles_all_same():
    candles = [4, 4, 4, 4, 4]
    assert birthday_cake_candles(candles) == len(candles)


def test_birthday_cake_candles_negative_heights():
    assert birthday_cake_candles([-1, -2, -1]) == 0