"""Solutions to classic programming challenges: strings, arrays, numbers, trees, lists and sudoku."""

__version__ = "0.1.0"