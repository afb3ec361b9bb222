"""Summaries of integer lists and matrices: sums, ratios, diagonals, staircases."""

from __future__ import annotations


def min_max_sum(arr: list[int]) -> tuple[int, int]:
    """Smallest and largest sums of all but one element of ``arr``."""
    if not arr:
        raise ValueError("arr must not be empty")
    total = sum(arr)
    return total - max(arr), total - min(arr)


def plus_minus(arr: list[int]) -> tuple[float, float, float]:
    """Fractions of positive, negative and zero elements of ``arr``."""
    if not arr:
        raise ValueError("arr must not be empty")
    positive = sum(1 for value in arr if value > 0)
    negative = sum(1 for value in arr if value < 0)
    zero = len(arr) - positive - negative
    return positive / len(arr), negative / len(arr), zero / len(arr)


def very_big_sum(arr: list[int]) -> int:
    """Sum of ``arr`` without overflow."""
    return sum(arr)


def diagonal_difference(matrix: list[list[int]]) -> int:
    """Absolute difference between the sums of a square matrix's two diagonals."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    primary = sum(row[i] for i, row in enumerate(matrix))
    secondary = sum(row[n - 1 - i] for i, row in enumerate(matrix))
    return abs(primary - secondary)


def staircase(n: int) -> str:
    """Right-aligned staircase of ``#`` with ``n`` steps, one line per step."""
    return "".join(" " * (n - i) + "#" * i + "\n" for i in range(1, n + 1))


def birthday_cake_candles(candles: list[int]) -> int:
    """Number of candles as tall as the tallest one (heights below zero never count)."""
    tallest = max([0, *candles])
    return candles.count(tallest)