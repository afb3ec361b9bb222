"""Two-colouring a tree so that the total MEX over all its paths is as large as possible.

Every path (including single vertices) scores the MEX of the colours 0/1 on it,
so the best possible score for a path is 2.  A path lying entirely inside a
colour-0 component loses 1 point, one inside a colour-1 component loses 2.  The
answer is therefore ``n * (n + 1)`` minus the cheapest total loss, which is
found by a tree DP over the size of the component holding each vertex.
"""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable, Sequence

_INF = math.inf

# Per colour, cost[s - 1] is the least loss inside the subtree when the
# vertex's own (still open) component has size s.
_Table = list[list[float]]


def _size_cap(n: int) -> int:
    return max(5, int(2 * math.sqrt(n)))


def _adjacency(n: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    if n < 1:
        raise ValueError("a tree needs at least one vertex")
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    count = 0
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) has a vertex outside 1..{n}")
        adjacency[u].append(v)
        adjacency[v].append(u)
        count += 1
    if count != n - 1:
        raise ValueError(f"a tree on {n} vertices has {n - 1} edges, got {count}")
    return adjacency


def _closing_cost(size: int, colour: int) -> int:
    return size * (size + 1) // 2 * (1 + colour)


def _merge(parent: _Table, child: _Table, child_closed: Sequence[float], cap: int) -> _Table:
    size = min(cap, len(parent[0]) + len(child[0]))
    merged: _Table = []
    for colour in (0, 1):
        table = [_INF] * size
        other = child_closed[1 - colour]
        for a, cost_u in enumerate(parent[colour], start=1):
            table[a - 1] = min(table[a - 1], cost_u + other)
            for b, cost_v in enumerate(child[colour], start=1):
                if a + b > size:
                    break
                table[a + b - 1] = min(table[a + b - 1], cost_u + cost_v)
        merged.append(table)
    return merged


def _closed(table: _Table) -> list[float]:
    return [
        min(cost + _closing_cost(size, colour) for size, cost in enumerate(table[colour], start=1))
        for colour in (0, 1)
    ]


def min_coloring_cost(n: int, edges: Iterable[Sequence[int]]) -> int:
    """Least total MEX lost, against the ideal of 2 per path, over all colourings."""
    adjacency = _adjacency(n, edges)
    cap = _size_cap(n)

    parent = [0] * (n + 1)
    order: list[int] = []
    seen = [False] * (n + 1)
    seen[1] = True
    stack = [1]
    while stack:
        u = stack.pop()
        order.append(u)
        for v in adjacency[u]:
            if v == parent[u]:
                continue
            if seen[v]:
                raise ValueError("the edges contain a cycle")
            seen[v] = True
            parent[v] = u
            stack.append(v)
    if len(order) != n:
        raise ValueError("the edges do not connect all vertices")

    tables: dict[int, _Table] = {}
    closed: dict[int, list[float]] = {}
    for u in reversed(order):
        table: _Table = [[0], [0]]
        for v in adjacency[u]:
            if v == parent[u]:
                continue
            table = _merge(table, tables.pop(v), closed.pop(v), cap)
        tables[u] = table
        closed[u] = _closed(table)

    return int(min(closed[1]))


def max_mex_sum(n: int, edges: Iterable[Sequence[int]]) -> int:
    """Largest sum, over all paths of the tree, of the MEX of the colours on the path."""
    return n * (n + 1) - min_coloring_cost(n, edges)


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases (count, then ``n`` and ``n - 1`` edges each) and print each answer."""
    parser = argparse.ArgumentParser(
        description="Maximum total path MEX of a two-coloured tree, for each test case."
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r"),
        default=sys.stdin,
        help="file holding the test cases (default: standard input)",
    )
    args = parser.parse_args(argv)
    tokens = iter(args.input.read().split())

    try:
        cases = int(next(tokens))
        for _ in range(cases):
            n = int(next(tokens))
            edges = [(int(next(tokens)), int(next(tokens))) for _ in range(n - 1)]
            try:
                print(max_mex_sum(n, edges))
            except ValueError as exc:
                parser.error(str(exc))
    except StopIteration:
        parser.error("unexpected end of input")
    except ValueError as exc:
        parser.error(f"malformed input: {exc}")
    return 0


if __name__ == "__main__":
    sys.exit(main())