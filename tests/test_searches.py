import bisect

import pytest
from hypothesis import given
from hypothesis import strategies as st

from phone_book.searches import insertion_point, search_binary, search_jump, search_linear
from phone_book.utils import is_equal, reverse_order

SORTED_KEYS = ["Doe", "Moe", "Roe"]


def test_linear_search_matches_substrings():
    entries = ["1 Doe", "2 Roe", "3 Moe"]
    assert search_linear(entries, "Doe") == 0
    assert search_linear(entries, "oe") == 0
    assert search_linear(entries, "Moe") == 2
    assert search_linear(entries, "Zoe") == -1
    assert search_linear([], "Doe") == -1


def test_binary_search_hit_and_miss():
    assert search_binary(SORTED_KEYS, "Doe") == 0
    assert search_binary(SORTED_KEYS, "Roe") == 2
    result = search_binary(SORTED_KEYS, "Zoe")
    assert result < 0
    assert insertion_point(result) == 3
    assert insertion_point(search_binary(SORTED_KEYS, "Abe")) == 0
    assert insertion_point(search_binary(SORTED_KEYS, "Foe")) == 1


def test_binary_search_empty():
    assert search_binary([], "Doe") == -1


def test_insertion_point_rejects_hits():
    with pytest.raises(ValueError):
        insertion_point(0)


def test_jump_search_hit_and_miss():
    assert search_jump(SORTED_KEYS, "Doe") == 0
    assert search_jump(SORTED_KEYS, "Moe") == 1
    assert search_jump(SORTED_KEYS, "Roe") == 2
    assert search_jump(SORTED_KEYS, "Zoe") == -1
    assert search_jump(SORTED_KEYS, "Abe") == -1


def test_jump_search_does_not_report_neighbours():
    # "Foe" sorts between "Doe" and "Moe"; the landing element must not count
    assert search_jump(SORTED_KEYS, "Foe") == -1


def test_jump_search_empty():
    assert search_jump([], "Doe") == -1


def test_jump_search_finds_last_partial_block():
    # n=11, block=3: jumps 0, 3, 6, 9 then clamp to 10
    data = list(range(11))
    assert search_jump(data, 10) == 10
    assert search_jump(data, 11) == -1


def test_searches_with_custom_comparator():
    data = [9, 7, 5, 3, 1]
    assert search_jump(data, 3, reverse_order) == 3
    assert search_binary(data, 3, reverse_order) == 3
    assert insertion_point(search_binary(data, 6, reverse_order)) == 2


sorted_int_lists = st.lists(st.integers(min_value=-500, max_value=500), max_size=80).map(sorted)
sorted_text_lists = st.lists(st.text(alphabet="abcde", max_size=4), max_size=80).map(sorted)


@given(sorted_int_lists, st.data())
def test_binary_search_finds_present_elements(data, draw):
    if not data:
        return
    target = draw.draw(st.sampled_from(data))
    i = search_binary(data, target)
    assert i >= 0
    assert is_equal(data[i], target)


@given(sorted_int_lists, st.integers(min_value=-600, max_value=600))
def test_binary_search_insertion_point_keeps_order(data, target):
    if target in data:
        return
    result = search_binary(data, target)
    assert result < 0
    point = insertion_point(result)
    assert point == bisect.bisect_left(data, target)
    assert sorted(data[:point] + [target] + data[point:]) == data[:point] + [target] + data[point:]


@given(sorted_int_lists, st.integers(min_value=-600, max_value=600))
def test_jump_and_binary_agree_on_integers(data, target):
    assert (search_jump(data, target) >= 0) == (search_binary(data, target) >= 0)


@given(sorted_text_lists, st.text(alphabet="abcdef", max_size=4))
def test_jump_and_binary_agree_on_strings(data, target):
    found = search_jump(data, target)
    assert (found >= 0) == (search_binary(data, target) >= 0) == (target in data)
    if found >= 0:
        assert data[found] == target
