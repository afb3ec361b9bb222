# algokata

Short solutions to well-known programming challenges. They are collected in
one importable package that depends on nothing outside the standard library.

## Installation

```
pip install .
pip install ".[test]"   # adds pytest, for running the test suite
```

## Modules

| Module | Contents |
| --- | --- |
| `algokata.textops` | String problems: `add_binary`, `append_and_delete`, `gcd_of_strings`, `counting_valleys`, `designer_pdf_viewer`, `group_anagrams`, `length_of_last_word`, `longest_common_prefix`, `merge_strings`, `roman_to_int`, `time_conversion`, `is_palindrome_text`, `is_valid_parentheses`, `day_of_programmer` |
| `algokata.arithmetic` | Integer problems: `is_palindrome_number`, `int_sqrt`, `find_digits`, `reverse_number`, `beautiful_days`, `get_total_x`, `binomial`, `pascal_triangle`, `climb_stairs`, `utopian_tree`, `viral_advertising`, `single_number` |
| `algokata.arrays` | Array problems: `rotate_right`, `max_profit`, `circular_array_rotation`, `max_area`, `longest_consecutive`, `majority_elements`, `max_subarray`, `next_permutation`, `plus_one`, `remove_element`, `trap`, `kids_with_candies` |
| `algokata.stats` | List and matrix summaries: `min_max_sum` and `plus_minus`, which return tuples; `very_big_sum`; `diagonal_difference`; `staircase`, which returns the drawing as a string; `birthday_cake_candles` |
| `algokata.challenges` | `angry_professor`, `count_apples_and_oranges`, `bon_appetit`, `birthday`, `breaking_records`, `cat_and_mouse`, `climbing_leaderboard`, `compare_triplets`, `divisible_sum_pairs`, `page_count`, `electronics_shop`, `grading_students` |
| `algokata.puzzles` | `jumping_on_clouds`, `library_fine`, `forming_magic_square`, `migratory_birds`, `kangaroo`, `picking_numbers`, `sock_merchant`, `save_the_prisoner`, `permutation_equation`, `hurdle_race` |
| `algokata.mex_tree` | Two-colouring a tree to maximise the sum of path MEX values: `min_coloring_cost`, `max_mex_sum`, `main` |
| `algokata.bst` | `TreeNode`, `sorted_array_to_bst`, `in_order` (a generator) |
| `algokata.linked_list` | `Node`, `build_list`, `has_loop`, `length`, `remove_loop` |
| `algokata.sudoku` | `is_valid_sudoku` |

These functions return their results and do not print them. Where the input
cannot be used, they raise `ValueError`. This covers, for example, an empty
list for `max_subarray`, a grid that is not 3x3 for `forming_magic_square`, a
board that is not 9x9 for `is_valid_sudoku`, and a set of edges that does not
form a tree for `max_mex_sum`.

## Examples

```python
from algokata.textops import add_binary, roman_to_int
from algokata.arrays import trap
from algokata.bst import sorted_array_to_bst, in_order

add_binary("1010", "1011")                  # "10101"
roman_to_int("MCMXCIV")                     # 1994
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])  # 6
list(in_order(sorted_array_to_bst([-10, -3, 0, 5, 9])))  # [-10, -3, 0, 5, 9]
```

## Command line

`mex-tree` is the only command the package provides. Its input is the number
of test cases, followed for each case by `n` and then `n - 1` edges, given as
whitespace-separated integers. It reads this input from a file named as its
argument, or from standard input if no file is given. It prints one answer per
test case:

```
printf '1\n3\n1 2\n2 3\n' | mex-tree
```

## What it does not do

The other problems are available only as library functions. There is no
interactive program that prompts for their inputs and prints their results.

## Running the tests

```
pytest
```