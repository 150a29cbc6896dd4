import itertools
import math

import pytest

from dsakit.recursion import (
    delete_middle,
    josephus,
    kth_symbol,
    permutations,
    recursive_sort,
    sort_stack,
    subsets,
)
from dsakit.recursion import reverse_in_place


def test_reverse_in_place_palindrome_check():
    chars = list("hello")
    reverse_in_place(chars)
    assert chars[0] == "o"
    assert chars[-1] == "h"
    reverse_in_place(chars)
    assert chars == list("hello")


def test_reverse_in_place_matches_slice():
    chars = list("abcdef")
    reverse_in_place(chars)
    assert chars == list("abcdef")[::-1]


def test_reverse_in_place_empty():
    chars = []
    reverse_in_place(chars)
    assert chars == []


@pytest.mark.parametrize("values", [[5, 1, 4, 2, 3], [], [7], [3, 3, 1, -2]])
def test_recursive_sort_matches_sorted(values):
    original = list(values)
    assert recursive_sort(values) == sorted(values)
    assert values == original


def test_delete_middle_odd():
    assert delete_middle([1, 2, 3, 4, 5]) == [1, 2, 4, 5]


def test_delete_middle_even_shrinks_by_one():
    stack = [1, 2, 3, 4]
    result = delete_middle(stack)
    assert len(result) == 3
    assert stack == [1, 2, 3, 4]


def test_delete_middle_single_and_empty():
    assert delete_middle([9]) == []
    assert delete_middle([]) == []


def test_sort_stack_top_is_largest():
    stack = [3, 1, 4, 1, 5]
    result = sort_stack(stack)
    assert result == sorted(stack)
    assert result[-1] == max(stack)


def test_kth_symbol_first_row():
    assert kth_symbol(1, 1) == 0


@pytest.mark.parametrize("n", range(2, 7))
def test_kth_symbol_row_structure(n):
    half = 2 ** (n - 2)
    for k in range(1, half + 1):
        assert kth_symbol(n, k) == kth_symbol(n - 1, k)
        assert kth_symbol(n, k + half) == 1 - kth_symbol(n - 1, k)


@pytest.mark.parametrize("n, k", [(0, 1), (1, 2), (3, 0), (3, 5)])
def test_kth_symbol_out_of_range(n, k):
    with pytest.raises(ValueError):
        kth_symbol(n, k)


def test_subsets_cover_power_set():
    values = [1, 2, 3]
    result = subsets(values)
    assert len(result) == 2 ** len(values)
    assert result[0] == []
    assert result[-1] == values
    expected = {
        frozenset(c)
        for r in range(len(values) + 1)
        for c in itertools.combinations(values, r)
    }
    assert {frozenset(s) for s in result} == expected


def test_subsets_empty():
    assert subsets([]) == [[]]


def test_josephus_known():
    assert josephus(7, 3) == 4


def test_josephus_single_person():
    assert josephus(1, 5) == 1


@pytest.mark.parametrize("n", [1, 2, 5, 10])
def test_josephus_step_one_keeps_last(n):
    assert josephus(n, 1) == n


def test_josephus_rejects_bad_arguments():
    with pytest.raises(ValueError):
        josephus(0, 2)
    with pytest.raises(ValueError):
        josephus(3, 0)


def test_permutations_all_orderings():
    values = [1, 2, 3, 4]
    result = permutations(values)
    assert len(result) == math.factorial(len(values))
    assert result[0] == values
    assert {tuple(p) for p in result} == set(itertools.permutations(values))


def test_permutations_empty():
    assert permutations([]) == [[]]