import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsadrills.arrays import (
    common_elements,
    delete_last_occurrence,
    find_duplicate,
    has_pair_with_sum,
    insert_at,
    largest,
    leaders,
    max_difference,
    missing_number,
    move_zeros_to_end,
    pivot_index,
    remove_adjacent_duplicates,
    rotate_left,
    rotate_right_by_one,
    second_largest,
    second_smallest,
    segregate_signs,
    single_number,
    smallest,
    sort_colors,
    wave,
)

ints = st.lists(st.integers(-1000, 1000))


@given(ints, st.integers(), st.data())
def test_insert_at_places_element(values, element, data):
    position = data.draw(st.integers(0, len(values)))
    result = insert_at(values, element, position)
    assert result[position] == element
    assert result[:position] + result[position + 1:] == values


def test_insert_at_rejects_bad_position():
    with pytest.raises(IndexError):
        insert_at([1, 2], 5, 3)


def test_delete_last_occurrence():
    assert delete_last_occurrence([1, 2, 1, 3], 1) == [1, 2, 3]


def test_delete_missing_element_raises():
    with pytest.raises(ValueError):
        delete_last_occurrence([10, 20], 30)


@given(ints.filter(bool))
def test_largest_and_smallest(values):
    assert largest(values) == max(values)
    assert smallest(values) == min(values)


def test_largest_empty_raises():
    with pytest.raises(ValueError):
        largest([])


def test_second_largest_and_smallest():
    values = [10, 20, 30, 40, 50, 60, 100, 100]
    assert second_largest(values) == 60
    assert second_smallest(values) == 20


def test_second_largest_all_equal_raises():
    with pytest.raises(ValueError):
        second_largest([7, 7, 7])


def test_remove_adjacent_duplicates_example():
    assert remove_adjacent_duplicates([1, 1, 2, 2, 2, 3, 1]) == [1, 2, 3, 1]


@given(ints)
def test_remove_adjacent_duplicates_invariants(values):
    result = remove_adjacent_duplicates(values)
    assert all(a != b for a, b in zip(result, result[1:]))
    assert set(result) == set(values)


@given(st.lists(st.integers(-3, 3)))
def test_move_zeros_to_end(values):
    result = move_zeros_to_end(values)
    zeros = values.count(0)
    assert result[len(result) - zeros:] == [0] * zeros
    assert result[: len(result) - zeros] == [v for v in values if v]


def test_rotate_right_by_one():
    assert rotate_right_by_one([1, 2, 3]) == [3, 1, 2]
    assert rotate_right_by_one([]) == []


def test_rotate_left_example():
    assert rotate_left([1, 2, 3, 4, 5, 6], 3) == [4, 5, 6, 1, 2, 3]


@given(ints, st.data())
def test_rotate_left_round_trip(values, data):
    k = data.draw(st.integers(0, len(values)))
    assert rotate_left(rotate_left(values, k), len(values) - k) == values


def test_rotate_left_rejects_large_k():
    with pytest.raises(ValueError):
        rotate_left([1, 2], 3)


@given(st.lists(st.integers(), unique=True, min_size=1))
def test_single_number(values):
    unique, *paired = values
    items = paired + paired + [unique]
    random.Random(0).shuffle(items)
    assert single_number(items) == unique


@given(st.integers(0, 50), st.data())
def test_missing_number(n, data):
    missing = data.draw(st.integers(0, n))
    values = [v for v in range(n + 1) if v != missing]
    random.Random(n).shuffle(values)
    assert missing_number(values) == missing


def test_has_pair_with_sum():
    assert has_pair_with_sum([2, 7, 11, 15], 9) is True
    assert has_pair_with_sum([2, 7, 11, 15], 8) is False


def test_leaders():
    assert leaders([16, 17, 4, 3, 5, 2]) == [2, 5, 17]


@given(ints)
def test_leaders_are_increasing(values):
    result = leaders(values)
    assert all(a < b for a, b in zip(result, result[1:]))


def test_max_difference():
    assert max_difference([2, 7, 11, 15]) == 13


def test_max_difference_without_increase_raises():
    with pytest.raises(ValueError):
        max_difference([5, 4, 3])


def test_pivot_index():
    assert pivot_index([1, 7, 3, 6, 5, 6]) == 3
    assert pivot_index([1, 2, 3]) == -1


@given(st.lists(st.sampled_from([0, 1, 2])))
def test_sort_colors(values):
    assert sort_colors(values) == sorted(values)


def test_sort_colors_rejects_other_values():
    with pytest.raises(ValueError):
        sort_colors([0, 3, 1])


def test_segregate_signs():
    assert segregate_signs([1, -1, 3, -2, -3, 5]) == [1, 3, 5, -1, -2, -3]


def test_find_duplicate():
    assert find_duplicate([1, 3, 4, 2, 2]) == 2
    assert find_duplicate([]) == -1


def test_common_elements():
    first = [1, 5, 10, 20, 40, 80]
    second = [6, 7, 20, 80, 100]
    third = [3, 4, 15, 20, 30, 70, 80, 120]
    assert common_elements(first, second, third) == [20, 80]


def test_wave():
    assert wave([10, 90, 49, 2, 1, 5, 23]) == [90, 10, 2, 49, 5, 1, 23]


@given(ints)
def test_wave_is_its_own_inverse(values):
    assert wave(wave(values)) == values