"""Integer puzzles: digits, divisors, square roots and simple recurrences."""

from __future__ import annotations

from functools import reduce
from math import comb, gcd, isqrt, lcm
from operator import xor


def is_palindrome_number(n: int) -> bool:
    """True if the decimal digits of ``n`` read the same both ways."""
    if n < 0 or (n % 10 == 0 and n != 0):
        return False
    reverse_half = 0
    while n > reverse_half:
        reverse_half = reverse_half * 10 + n % 10
        n //= 10
    return n == reverse_half or n == reverse_half // 10


def int_sqrt(x: int) -> int:
    """Floor of the square root of ``x``; zero for negative input."""
    return isqrt(x) if x > 0 else 0


def _digits(n: int):
    while n > 0:
        n, digit = divmod(n, 10)
        yield digit


def find_digits(n: int) -> int:
    """Count the digits of ``n`` that divide ``n`` (zeros never count)."""
    return sum(1 for d in _digits(n) if d and n % d == 0)


def reverse_number(n: int) -> int:
    """Reverse the decimal digits of ``n``; zero for non-positive input."""
    reversed_number = 0
    for digit in _digits(n):
        reversed_number = reversed_number * 10 + digit
    return reversed_number


def beautiful_days(i: int, j: int, k: int) -> int:
    """Count days in ``i..j`` whose distance to their reversal is divisible by ``k``."""
    return sum(1 for day in range(i, j + 1) if abs(day - reverse_number(day)) % k == 0)


def get_total_x(a: list[int], b: list[int]) -> int:
    """Count integers that are multiples of all of ``a`` and divide all of ``b``."""
    if not a or not b:
        raise ValueError("both lists must be non-empty")
    lcm_a = lcm(*a)
    if lcm_a <= 0:
        raise ValueError("elements of the first list must be positive")
    gcd_b = reduce(gcd, b)
    return sum(1 for multiple in range(lcm_a, gcd_b + 1, lcm_a) if gcd_b % multiple == 0)


def binomial(n: int, k: int) -> int:
    """Binomial coefficient ``n`` choose ``k``."""
    return comb(n, k)


def pascal_triangle(n: int) -> list[list[int]]:
    """The first ``n`` rows of Pascal's triangle."""
    return [[binomial(row, col) for col in range(row + 1)] for row in range(n)]


def climb_stairs(n: int) -> int:
    """Ways to climb ``n`` stairs in steps of one or two (zero stairs gives zero)."""
    if n < 0:
        raise ValueError("number of stairs must not be negative")
    if n == 0:
        return 0
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def utopian_tree(n: int) -> int:
    """Height after ``n`` growth cycles: doubling in spring, plus one in summer."""
    height = 1
    for cycle in range(1, n + 1):
        height = height * 2 if cycle % 2 == 1 else height + 1
    return height


def viral_advertising(n: int) -> int:
    """Cumulative likes after ``n`` days of the viral campaign."""
    shared = 5
    cumulative = 0
    for _ in range(n):
        likes = shared // 2
        cumulative += likes
        shared = likes * 3
    return cumulative


def single_number(nums: list[int]) -> int:
    """The element that appears once when every other appears twice."""
    return reduce(xor, nums, 0)