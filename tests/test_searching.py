import math

import pytest

from algokit.searching import min_pair, square_root


def test_min_pair_source_example():
    assert min_pair([-1, 5, 10, 20, 3], [26, 134, 135, 15, 17]) == (20, 17)


def test_min_pair_single_elements():
    assert min_pair([5], [9]) == (5, 9)


def test_min_pair_exact_match_found():
    a1 = [100, 42, -7]
    a2 = [3, 42, 80]
    x, y = min_pair(a1, a2)
    assert x == y == 42


@pytest.mark.parametrize(
    "a1, a2",
    [
        ([1, 50, 99], [30, 70, 200]),
        ([-10, -3, 8], [4, -20, 15, 0]),
        ([7, 7, 7], [1, 13]),
        ([1000, -1000], [0]),
    ],
)
def test_min_pair_is_minimal(a1, a2):
    x, y = min_pair(a1, a2)
    assert x in a1
    assert y in a2
    best = min(abs(p - q) for p in a1 for q in a2)
    assert abs(x - y) == best


def test_min_pair_does_not_modify_input():
    a2 = [9, 1, 5]
    min_pair([4], a2)
    assert a2 == [9, 1, 5]


def test_min_pair_empty_first_raises():
    with pytest.raises(ValueError):
        min_pair([], [1, 2])


def test_min_pair_empty_second_raises():
    with pytest.raises(ValueError):
        min_pair([1, 2], [])


@pytest.mark.parametrize("root", [0, 1, 4, 12])
def test_square_root_perfect_square_is_exact(root):
    assert square_root(root * root, 3) == root


@pytest.mark.parametrize("n", [2, 3, 10, 50, 99, 1000])
@pytest.mark.parametrize("places", [1, 2, 3, 4])
def test_square_root_is_truncated_within_precision(n, places):
    result = square_root(n, places)
    exact = math.sqrt(n)
    assert exact - result > -1e-9
    assert exact - result < 10 ** -places + 1e-9


@pytest.mark.parametrize("n", [2, 10, 17, 90])
def test_square_root_zero_places_gives_integer_part(n):
    assert square_root(n, 0) == math.isqrt(n)


def test_square_root_more_places_is_closer():
    coarse = square_root(7, 1)
    fine = square_root(7, 4)
    assert abs(math.sqrt(7) - fine) <= abs(math.sqrt(7) - coarse)


def test_square_root_negative_raises():
    with pytest.raises(ValueError):
        square_root(-4, 2)


def test_square_root_negative_places_raises():
    with pytest.raises(ValueError):
        square_root(10, -1)