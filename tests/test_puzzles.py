import pytest

from algokata.puzzles import (
    forming_magic_square,
    hurdle_race,
    jumping_on_clouds,
    kangaroo,
    library_fine,
    migratory_birds,
    permutation_equation,
    picking_numbers,
    save_the_prisoner,
    sock_merchant,
)


def test_jumping_on_clouds_all_clear_one_step():
    clouds = [0] * 6
    assert jumping_on_clouds(clouds, 1) == 100 - len(clouds)


def test_jumping_on_clouds_thunder_costs_more():
    clear = jumping_on_clouds([0, 0, 0, 0], 1)
    stormy = jumping_on_clouds([0, 1, 0, 0], 1)
    assert clear - stormy == 2


def test_jumping_on_clouds_empty_raises():
    with pytest.raises(ValueError):
        jumping_on_clouds([], 1)


def test_library_fine_on_time():
    assert library_fine(9, 9, 6, 6, 2015, 2015) == 0
    assert library_fine(1, 30, 12, 1, 2014, 2015) == 0


def test_library_fine_one_day_late():
    assert library_fine(10, 9, 6, 6, 2015, 2015) == 15


def test_library_fine_one_month_late():
    assert library_fine(1, 9, 7, 6, 2015, 2015) == 500


def test_library_fine_year_late():
    assert library_fine(1, 9, 1, 6, 2016, 2015) == 10000


def test_forming_magic_square_already_magic():
    assert forming_magic_square([[8, 1, 6], [3, 5, 7], [4, 9, 2]]) == 0


def test_forming_magic_square_never_exceeds_cap():
    assert 0 <= forming_magic_square([[100, 100, 100]] * 3) <= 81


def test_forming_magic_square_bad_shape_raises():
    with pytest.raises(ValueError):
        forming_magic_square([[1, 2], [3, 4]])


def test_migratory_birds_tie_picks_smallest():
    assert migratory_birds([4, 4, 2, 2, 3]) == 2


def test_migratory_birds_empty_defaults_to_one():
    assert migratory_birds([]) == 1


def test_kangaroo_meet_example():
    assert kangaroo(2, 1, 1, 2) == "YES"


def test_kangaroo_ahead_and_faster_never_meets():
    assert kangaroo(5, 3, 0, 2) == "NO"


def test_kangaroo_start_together_is_not_counted():
    assert kangaroo(0, 2, 0, 1) == "NO"


def test_picking_numbers_all_same():
    arr = [7, 7, 7, 7]
    assert picking_numbers(arr) == len(arr)


def test_picking_numbers_bounded_by_length():
    arr = [1, 1, 2, 2, 4, 4, 5, 5, 5]
    assert picking_numbers(arr) <= len(arr)


def test_picking_numbers_out_of_range_raises():
    with pytest.raises(ValueError):
        picking_numbers([100])


def test_sock_merchant_empty_and_single():
    assert sock_merchant([]) == 0
    assert sock_merchant([3]) == 0


def test_sock_merchant_pairs_bounded():
    socks = [10, 20, 20, 10, 10, 30, 50, 10, 20]
    assert 2 * sock_merchant(socks) <= len(socks)


def test_save_the_prisoner_single_sweet_goes_to_start():
    assert save_the_prisoner(5, 1, 3) == 3


def test_save_the_prisoner_full_round_wraps_to_chair_before_start():
    n, s = 7, 4
    assert save_the_prisoner(n, n, s) == s - 1


def test_save_the_prisoner_result_in_range():
    n = 4
    assert all(1 <= save_the_prisoner(n, m, 1) <= n for m in range(1, 20))


def test_permutation_equation_identity():
    p = [1, 2, 3, 4]
    assert permutation_equation(p) == p


def test_permutation_equation_invariant():
    p = [5, 2, 1, 3, 4]
    result = permutation_equation(p)
    for x, y in enumerate(result, start=1):
        assert p[p[y - 1] - 1] == x


def test_permutation_equation_rejects_non_permutation():
    with pytest.raises(ValueError):
        permutation_equation([1, 1, 3])


def test_hurdle_race_no_doses_needed():
    assert hurdle_race([1, 2, 3], 5) == 0


def test_hurdle_race_ignores_last_hurdle():
    assert hurdle_race([1, 1, 9], 1) == 0


def test_hurdle_race_empty():
    assert hurdle_race([], 3) == 0