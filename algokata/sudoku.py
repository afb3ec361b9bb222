"""Checking a partly filled sudoku board for rule violations."""

from __future__ import annotations

from collections.abc import Sequence


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """True if no digit repeats in any row, column or 3x3 box; ``'.'`` marks an empty cell."""
    if len(board) != 9 or any(len(row) != 9 for row in board):
        raise ValueError("board must be 9x9")
    seen: set[tuple[str, int, str]] = set()
    for i, row in enumerate(board):
        for j, cell in enumerate(row):
            if cell == ".":
                continue
            keys = (("row", i, cell), ("col", j, cell), ("box", (i // 3) * 3 + j // 3, cell))
            if any(key in seen for key in keys):
                return False
            seen.update(keys)
    return True