import pytest

from algokata.sudoku import is_valid_sudoku

BOARD = [
    ["5", "3", ".", ".", "7", ".", ".", ".", "."],
    ["6", ".", ".", "1", "9", "5", ".", ".", "."],
    [".", "9", "8", ".", ".", ".", ".", "6", "."],
    ["8", ".", ".", ".", "6", ".", ".", ".", "3"],
    ["4", ".", ".", "8", ".", "3", ".", ".", "1"],
    ["7", ".", ".", ".", "2", ".", ".", ".", "6"],
    [".", "6", ".", ".", ".", ".", "2", "8", "."],
    [".", ".", ".", "4", "1", "9", ".", ".", "5"],
    [".", ".", ".", ".", "8", ".", ".", "7", "9"],
]


def _with(row, col, value):
    board = [list(r) for r in BOARD]
    board[row][col] = value
    return board


def test_example_board_is_valid():
    assert is_valid_sudoku(BOARD) is True


def test_strings_as_rows():
    assert is_valid_sudoku(["".join(row) for row in BOARD]) is True


def test_empty_board_is_valid():
    assert is_valid_sudoku(["." * 9] * 9) is True


def test_duplicate_in_row():
    assert is_valid_sudoku(_with(0, 8, "5")) is False


def test_duplicate_in_column():
    assert is_valid_sudoku(_with(8, 0, "5")) is False


def test_duplicate_in_box():
    assert is_valid_sudoku(_with(0, 0, "8")) is False


@pytest.mark.parametrize(
    "board",
    [[["."] * 9] * 8, [["."] * 8] * 9, []],
)
def test_wrong_shape(board):
    with pytest.raises(ValueError):
        is_valid_sudoku(board)