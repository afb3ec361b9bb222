"""Short counting and comparison challenges over small integer lists."""

from __future__ import annotations

from itertools import combinations, groupby


def angry_professor(k: int, arrivals: list[int]) -> str:
    """Say whether class goes ahead: it needs at least ``k`` students on time (arrival <= 0)."""
    on_time = sum(1 for arrival in arrivals if arrival <= 0)
    return "class not cancelled" if on_time >= k else "class cancelled"


def count_apples_and_oranges(
    s: int, t: int, a: int, b: int, apples: list[int], oranges: list[int]
) -> tuple[int, int]:
    """Apples and oranges landing on the house at ``s..t``, from trees at ``a`` and ``b``."""
    apple_count = sum(1 for d in apples if s <= a + d <= t)
    orange_count = sum(1 for d in oranges if s <= b + d <= t)
    return apple_count, orange_count


def bon_appetit(bill: list[int], k: int, b: int) -> int:
    """Amount Anna was overcharged when she skipped item ``k``; zero means the bill was fair."""
    total = sum(price for index, price in enumerate(bill) if index != k)
    return b - total // 2


def birthday(squares: list[int], d: int, m: int) -> int:
    """Count runs of ``m`` consecutive squares whose values add up to ``d``."""
    return sum(
        1 for start in range(len(squares) - m + 1) if sum(squares[start : start + m]) == d
    )


def breaking_records(scores: list[int]) -> tuple[int, int]:
    """Times the season's best and worst records were broken, in that order."""
    if not scores:
        raise ValueError("scores must not be empty")
    lowest = highest = scores[0]
    min_count = max_count = 0
    for score in scores[1:]:
        if score < lowest:
            lowest = score
            min_count += 1
        elif score > highest:
            highest = score
            max_count += 1
    return max_count, min_count


def cat_and_mouse(x: int, y: int, z: int) -> str:
    """Which cat reaches the mouse at ``z`` first, or ``"Mouse C"`` if they tie."""
    dist_a = abs(x - z)
    dist_b = abs(y - z)
    if dist_a > dist_b:
        return "Cat B"
    if dist_a < dist_b:
        return "Cat A"
    return "Mouse C"


def climbing_leaderboard(ranked: list[int], player: list[int]) -> list[int]:
    """Dense ranks of the player's ascending scores on a descending leaderboard."""
    board = [score for score, _ in groupby(ranked)]
    ranks: list[int] = []
    i = len(board) - 1
    for score in player:
        while i >= 0 and score >= board[i]:
            i -= 1
        ranks.append(i + 2)
    return ranks


def compare_triplets(a: list[int], b: list[int]) -> tuple[int, int]:
    """Points for Alice and Bob, one per category in which each scored higher."""
    alice = sum(1 for x, y in zip(a, b) if x > y)
    bob = sum(1 for x, y in zip(a, b) if x < y)
    return alice, bob


def divisible_sum_pairs(arr: list[int], k: int) -> int:
    """Count index pairs ``i < j`` whose values sum to a multiple of ``k``."""
    if k == 0:
        raise ValueError("k must not be zero")
    return sum(1 for x, y in combinations(arr, 2) if (x + y) % k == 0)


def page_count(n: int, p: int) -> int:
    """Fewest page turns to reach page ``p`` of an ``n``-page book from either end."""
    from_front = p // 2
    from_back = n // 2 - from_front
    return min(from_front, from_back)


def electronics_shop(keyboards: list[int], drives: list[int], b: int) -> int:
    """Most that can be spent on one keyboard and one drive within ``b``, or -1."""
    return max(
        (k + d for k in keyboards for d in drives if k + d <= b),
        default=-1,
    )


def grading_students(grades: list[int]) -> list[int]:
    """Round passing grades up to the next multiple of 5 when it is less than 3 away."""
    rounded: list[int] = []
    for grade in grades:
        if grade < 38:
            rounded.append(grade)
            continue
        next_multiple = (grade // 5 + 1) * 5
        rounded.append(next_multiple if next_multiple - grade < 3 else grade)
    return rounded