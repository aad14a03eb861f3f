from math import comb

import pytest

from cses_kit.dp_counting import (
    array_descriptions,
    dice_combinations,
    grid_paths,
    ordered_coin_combinations,
    unordered_coin_combinations,
)
from cses_kit.maths import MOD


def test_dice_worked_example():
    assert dice_combinations(3) == 4


def test_dice_zero_is_one():
    assert dice_combinations(0) == 1


@pytest.mark.parametrize("total", [1, 5, 10, 37, 200])
def test_dice_matches_ordered_coins(total):
    assert dice_combinations(total) == ordered_coin_combinations(range(1, 7), total)


def test_dice_large_is_reduced():
    result = dice_combinations(100_000)
    assert 0 <= result < MOD


def test_dice_negative_rejected():
    with pytest.raises(ValueError):
        dice_combinations(-1)


def test_ordered_coins_worked_example():
    assert ordered_coin_combinations([2, 3, 5], 9) == 8


def test_unordered_coins_worked_example():
    assert unordered_coin_combinations([2, 3, 5], 9) == 3


@pytest.mark.parametrize("target", [0, 1, 7, 25])
def test_unit_coin_has_one_way(target):
    assert ordered_coin_combinations([1], target) == 1
    assert unordered_coin_combinations([1], target) == 1


@pytest.mark.parametrize("coin,k", [(3, 4), (7, 2), (5, 0)])
def test_single_coin_multiples(coin, k):
    assert unordered_coin_combinations([coin], coin * k) == 1
    assert ordered_coin_combinations([coin], coin * k + 1) == 0


@pytest.mark.parametrize("target", [4, 11, 30])
def test_unordered_not_more_than_ordered(target):
    coins = [1, 2, 5]
    assert unordered_coin_combinations(coins, target) <= ordered_coin_combinations(coins, target)


def test_unordered_independent_of_coin_order():
    assert unordered_coin_combinations([5, 2, 3], 40) == unordered_coin_combinations([2, 3, 5], 40)


def test_unordered_with_no_coins_is_zero():
    assert unordered_coin_combinations([], 0) == 0


@pytest.mark.parametrize(
    "func", [ordered_coin_combinations, unordered_coin_combinations]
)
def test_coin_errors(func):
    with pytest.raises(ValueError):
        func([0, 2], 4)
    with pytest.raises(ValueError):
        func([2], -3)


def test_array_descriptions_worked_example():
    assert array_descriptions([2, 0, 2], 5) == 3


def test_array_descriptions_single_unknown():
    assert array_descriptions([0], 7) == 7


def test_array_descriptions_empty():
    assert array_descriptions([], 4) == 1


def test_array_descriptions_fixed_valid_and_invalid():
    assert array_descriptions([1, 2, 3, 2], 3) == 1
    assert array_descriptions([1, 3], 3) == 0


def test_array_descriptions_upper_one():
    assert array_descriptions([0, 0, 0, 0], 1) == 1


@pytest.mark.parametrize("values", [[0, 3, 0, 0, 1], [2, 0, 0, 0], [0, 0, 5, 0]])
def test_array_descriptions_reversal_symmetry(values):
    assert array_descriptions(values, 6) == array_descriptions(values[::-1], 6)


def test_array_descriptions_grows_with_upper():
    values = [0, 0, 0]
    assert array_descriptions(values, 3) < array_descriptions(values, 4)


def test_array_descriptions_errors():
    with pytest.raises(ValueError):
        array_descriptions([0], 0)
    with pytest.raises(ValueError):
        array_descriptions([-1], 3)


def test_grid_paths_worked_example():
    grid = ["....", ".*..", "...*", "*..."]
    assert grid_paths(grid) == 3


@pytest.mark.parametrize("n", [1, 2, 5, 10])
def test_grid_paths_open_grid_is_binomial(n):
    grid = ["." * n] * n
    assert grid_paths(grid) == comb(2 * (n - 1), n - 1)


def test_grid_paths_blocked_start_or_end():
    assert grid_paths(["*.", ".."]) == 0
    assert grid_paths(["..", ".*"]) == 0
    assert grid_paths(["*"]) == 0


def test_grid_paths_transpose_symmetry():
    grid = [".....", "..*..", ".*...", "....*", "....."]
    transposed = ["".join(col) for col in zip(*grid)]
    assert grid_paths(grid) == grid_paths(transposed)


def test_grid_paths_errors():
    with pytest.raises(ValueError):
        grid_paths([])
    with pytest.raises(ValueError):
        grid_paths(["..", "."])