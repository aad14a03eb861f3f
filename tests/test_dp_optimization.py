import pytest

from cses_kit.dp_optimization import max_pages, min_coins, removing_digits_steps


# --- max_pages ---------------------------------------------------------------

def test_max_pages_worked_example():
    assert max_pages(10, [4, 8, 5, 3], [5, 12, 8, 1]) == 13


def test_max_pages_zero_budget():
    assert max_pages(0, [1, 2, 3], [4, 5, 6]) == 0


def test_max_pages_everything_affordable():
    prices = [2, 3, 4]
    pages = [7, 1, 9]
    assert max_pages(sum(prices), prices, pages) == sum(pages)


def test_max_pages_nothing_affordable():
    assert max_pages(3, [5, 6], [10, 20]) == 0


def test_max_pages_no_books():
    assert max_pages(100, [], []) == 0


def test_max_pages_each_book_once():
    assert max_pages(100, [1], [5]) == 5


def test_max_pages_monotone_in_budget():
    prices = [4, 8, 5, 3, 7]
    pages = [5, 12, 8, 1, 9]
    results = [max_pages(b, prices, pages) for b in range(30)]
    assert results == sorted(results)
    assert results[-1] <= sum(pages)


def test_max_pages_mismatched_lengths():
    with pytest.raises(ValueError):
        max_pages(10, [1, 2], [3])


def test_max_pages_negative_budget():
    with pytest.raises(ValueError):
        max_pages(-1, [1], [1])


def test_max_pages_negative_price():
    with pytest.raises(ValueError):
        max_pages(5, [-1], [1])


# --- min_coins ---------------------------------------------------------------

def test_min_coins_worked_example():
    assert min_coins([1, 5, 7], 11) == 3


def test_min_coins_zero_target():
    assert min_coins([2, 3], 0) == 0


def test_min_coins_unit_coin_only():
    assert min_coins([1], 25) == 25


def test_min_coins_single_coin_exact():
    assert min_coins([42], 42) == 1


def test_min_coins_impossible():
    assert min_coins([2, 4], 7) is None


def test_min_coins_no_coins():
    assert min_coins([], 5) is None


def test_min_coins_bounded_by_unit_coin():
    for target in range(1, 40):
        result = min_coins([1, 3, 4], target)
        assert 1 <= result <= target


def test_min_coins_rejects_non_positive_coin():
    with pytest.raises(ValueError):
        min_coins([0, 1], 5)


def test_min_coins_rejects_negative_target():
    with pytest.raises(ValueError):
        min_coins([1], -3)


# --- removing_digits_steps ---------------------------------------------------

def test_removing_digits_worked_example():
    assert removing_digits_steps(27) == 5


def test_removing_digits_zero():
    assert removing_digits_steps(0) == 0


@pytest.mark.parametrize("n", range(1, 10))
def test_removing_digits_single_digit(n):
    assert removing_digits_steps(n) == 1


@pytest.mark.parametrize("n", [10, 19, 55, 100, 987, 1234])
def test_removing_digits_bounds(n):
    steps = removing_digits_steps(n)
    assert -(-n // 9) <= steps <= n


def test_removing_digits_negative():
    with pytest.raises(ValueError):
        removing_digits_steps(-5)