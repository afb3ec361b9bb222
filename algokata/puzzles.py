"""Small game and scheduling puzzles: clouds, fines, magic squares, birds and socks."""

from __future__ import annotations

from collections import Counter

_MAGIC_SQUARES = (
    (8, 1, 6, 3, 5, 7, 4, 9, 2),
    (6, 1, 8, 7, 5, 3, 2, 9, 4),
    (4, 9, 2, 3, 5, 7, 8, 1, 6),
    (2, 9, 4, 7, 5, 3, 6, 1, 8),
    (8, 3, 4, 1, 5, 9, 6, 7, 2),
    (4, 3, 8, 9, 5, 1, 2, 7, 6),
    (6, 7, 2, 1, 5, 9, 8, 3, 4),
    (2, 7, 6, 9, 5, 1, 4, 3, 8),
)


def jumping_on_clouds(c: list[int], k: int) -> int:
    """Energy left after jumping ``k`` clouds at a time around the circle back to the start."""
    if not c:
        raise ValueError("there must be at least one cloud")
    energy = 100
    position = 0
    while True:
        position = (position + k) % len(c)
        energy -= 1
        if c[position] == 1:
            energy -= 2
        if position == 0:
            return energy


def library_fine(d1: int, d2: int, m1: int, m2: int, y1: int, y2: int) -> int:
    """Fine for a book returned on ``d1.m1.y1`` that was due on ``d2.m2.y2``."""
    if (y1, m1, d1) <= (y2, m2, d2):
        return 0
    if y1 == y2 and m1 == m2:
        return 15 * (d1 - d2)
    if y1 == y2:
        return 500 * (m1 - m2)
    return 10000


def forming_magic_square(s: list[list[int]]) -> int:
    """Least total change needed to turn the 3x3 grid ``s`` into a magic square."""
    if len(s) != 3 or any(len(row) != 3 for row in s):
        raise ValueError("grid must be 3x3")
    cells = [value for row in s for value in row]
    costs = (
        sum(abs(cell - target) for cell, target in zip(cells, square))
        for square in _MAGIC_SQUARES
    )
    return min(81, *costs)


def migratory_birds(arr: list[int]) -> int:
    """Most frequently sighted bird type, the smallest id on a tie; 1 if none were seen."""
    counts = Counter(arr)
    if not counts:
        return 1
    top = max(counts.values())
    return min(bird for bird, count in counts.items() if count == top)


def kangaroo(x1: int, v1: int, x2: int, v2: int) -> str:
    """Whether the two kangaroos land on the same spot within 10000 jumps."""
    meets = any(x1 + v1 * jump == x2 + v2 * jump for jump in range(1, 10001))
    return "YES" if meets else "NO"


def picking_numbers(arr: list[int]) -> int:
    """Size of the largest subset whose values differ by at most one (values 0..99)."""
    if any(not 0 <= num < 100 for num in arr):
        raise ValueError("values must lie in 0..99")
    counts = Counter(arr)
    return max(counts[value] + counts[value - 1] for value in range(1, 100))


def sock_merchant(arr: list[int]) -> int:
    """Number of matching pairs among socks of the given colours."""
    return sum(count // 2 for count in Counter(arr).values())


def save_the_prisoner(n: int, m: int, s: int) -> int:
    """Chair of the prisoner who gets the last of ``m`` sweets, handed out from chair ``s``."""
    last = (s + m - 1) % n
    return last or n


def permutation_equation(p: list[int]) -> list[int]:
    """For each ``x`` in ``1..n`` the ``y`` with ``p[p[y]] == x`` (positions 1-based)."""
    if sorted(p) != list(range(1, len(p) + 1)):
        raise ValueError("p must be a permutation of 1..n")
    position = {value: index for index, value in enumerate(p, start=1)}
    return [position[position[x]] for x in range(1, len(p) + 1)]


def hurdle_race(height: list[int], k: int) -> int:
    """Doses needed to clear the hurdles with natural jump ``k``; the last hurdle is not counted."""
    highest = max(height[:-1], default=0)
    return max(highest - k, 0)