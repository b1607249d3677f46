import random
from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from phone_book.sorts import bubble_sort, is_sorted, quick_sort
from phone_book.utils import reverse_order


@pytest.mark.parametrize("sort", [bubble_sort, quick_sort])
def test_sorts_names(sort):
    assert sort(["Roe", "Doe", "Moe"]) == ["Doe", "Moe", "Roe"]


@pytest.mark.parametrize("sort", [bubble_sort, quick_sort])
def test_empty_and_single(sort):
    assert sort([]) == []
    assert sort(["Doe"]) == ["Doe"]


@pytest.mark.parametrize("sort", [bubble_sort, quick_sort])
def test_input_not_mutated(sort):
    data = [3, 1, 2]
    sort(data)
    assert data == [3, 1, 2]


@pytest.mark.parametrize("sort", [bubble_sort, quick_sort])
def test_custom_comparator(sort):
    assert sort([1, 3, 2, 5, 4], reverse_order) == [5, 4, 3, 2, 1]


def test_quick_sort_all_equal_keys_do_not_exhaust_stack():
    data = ["Doe"] * 2000
    assert quick_sort(data, rng=random.Random(7)) == data


def test_quick_sort_draws_pivots_from_rng():
    class CountingRandom(random.Random):
        calls = 0

        def randint(self, a, b):
            CountingRandom.calls += 1
            return super().randint(a, b)

    quick_sort(list(range(50, 0, -1)), rng=CountingRandom(1))
    assert CountingRandom.calls > 0


def test_bubble_sort_places_smallest_first():
    assert bubble_sort([5, 4, 3, 2, 1]) == [1, 2, 3, 4, 5]


@given(st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60))
def test_bubble_sort_is_ordered_permutation(data):
    result = bubble_sort(data)
    assert Counter(result) == Counter(data)
    assert is_sorted(result)


@given(st.lists(st.text(max_size=6), max_size=100), st.integers(min_value=0, max_value=2**16))
def test_quick_sort_is_ordered_permutation(data, seed):
    result = quick_sort(data, rng=random.Random(seed))
    assert Counter(result) == Counter(data)
    assert is_sorted(result)
    assert result == sorted(data)


def test_is_sorted():
    assert is_sorted([])
    assert is_sorted([1, 1, 2])
    assert not is_sorted([2, 1])
    assert is_sorted([3, 2, 2, 1], reverse_order)
