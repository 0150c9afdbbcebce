from math import comb

import pytest

from algokit.searching import (
    binary_search,
    count_triplets_below,
    exponential_search,
    longest_increasing_subsequence,
    min_max,
    search_sorted_matrix,
    sliding_window_max,
)

SORTED = [2, 3, 4, 10, 40]
MATRIX = [
    [10, 20, 30, 40],
    [15, 25, 35, 45],
    [27, 29, 37, 48],
    [32, 33, 39, 50],
]


def test_binary_search_finds_every_element():
    for index, value in enumerate(SORTED):
        assert binary_search(SORTED, value, 0, len(SORTED) - 1) == index


def test_binary_search_missing():
    assert binary_search(SORTED, 5, 0, len(SORTED) - 1) is None
    assert binary_search(SORTED, 40, 0, 2) is None


def test_exponential_search_source_example():
    index = exponential_search(SORTED, 10)
    assert SORTED[index] == 10


def test_exponential_search_every_element():
    values = list(range(0, 100, 3))
    for index, value in enumerate(values):
        assert exponential_search(values, value) == index


@pytest.mark.parametrize("target", [1, 5, 41])
def test_exponential_search_missing(target):
    assert exponential_search(SORTED, target) is None


def test_exponential_search_empty():
    assert exponential_search([], 3) is None


def test_sorted_matrix_finds_all():
    for row in MATRIX:
        for value in row:
            r, c = search_sorted_matrix(MATRIX, value)
            assert MATRIX[r][c] == value


@pytest.mark.parametrize("target", [9, 51, 26])
def test_sorted_matrix_missing(target):
    assert search_sorted_matrix(MATRIX, target) is None


def test_sorted_matrix_empty():
    assert search_sorted_matrix([], 1) is None


def test_min_max():
    assert min_max([10, 2, 40, 3, 4]) == (2, 40)
    assert min_max([7]) == (7, 7)


def test_min_max_empty():
    with pytest.raises(ValueError):
        min_max([])


WINDOW_VALUES = [12, 156, 73, 93, 59, 83, 51, 73, 101, 456]


def test_sliding_window_length_and_membership():
    result = sliding_window_max(WINDOW_VALUES, 3)
    assert len(result) == len(WINDOW_VALUES) - 2
    for start, maximum in enumerate(result):
        window = WINDOW_VALUES[start : start + 3]
        assert maximum in window
        assert all(maximum >= v for v in window)


def test_sliding_window_edges():
    assert sliding_window_max(WINDOW_VALUES, 1) == WINDOW_VALUES
    assert sliding_window_max(WINDOW_VALUES, len(WINDOW_VALUES)) == [456]


@pytest.mark.parametrize("k", [0, -1, 11])
def test_sliding_window_bad_size(k):
    with pytest.raises(ValueError):
        sliding_window_max(WINDOW_VALUES, k)


def test_count_triplets_source_example():
    values = [5, 1, 3, 4, 7]
    assert count_triplets_below(values, 12) == 4
    assert values == [5, 1, 3, 4, 7]


def test_count_triplets_bounds():
    values = [5, 1, 3, 4, 7]
    assert count_triplets_below(values, 1000) == comb(len(values), 3)
    assert count_triplets_below(values, -1000) == 0
    assert count_triplets_below([1, 2], 1000) == 0


def test_lis_source_example():
    assert longest_increasing_subsequence([10, 22, 9, 33, 21, 50, 41, 60]) == 5


def test_lis_invariants():
    increasing = [1, 4, 9, 16, 25]
    assert longest_increasing_subsequence(increasing) == len(increasing)
    assert longest_increasing_subsequence(increasing[::-1]) == 1
    assert longest_increasing_subsequence([]) == 0