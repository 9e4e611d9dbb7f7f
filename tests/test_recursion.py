import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsadrills.recursion import (
    binary_search,
    count_up,
    digit_sum,
    digits_reversed,
    every_other,
    factorial,
    fibonacci,
    is_sorted,
    linear_search,
    maximum,
    minimum,
    power_of_two,
    sum_to,
)

SOURCE_ARRAY = [10, 20, 30, 40, 50, 60, 70, 80, 90, 100]
small = st.integers(min_value=0, max_value=60)


@given(small)
def test_count_up(n):
    assert count_up(n) == list(range(1, n + 1))


@given(small)
def test_sum_to_matches_count_up(n):
    assert sum_to(n) == sum(count_up(n))


def test_sum_to_zero():
    assert sum_to(0) == 0


@given(small)
def test_power_of_two_doubles(n):
    assert power_of_two(n + 1) == 2 * power_of_two(n)


def test_power_of_two_base():
    assert power_of_two(0) == 1


def test_fibonacci_base_cases():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


@given(small)
def test_fibonacci_recurrence(n):
    assert fibonacci(n + 2) == fibonacci(n + 1) + fibonacci(n)


def test_factorial_base_cases():
    assert factorial(0) == 1
    assert factorial(1) == 1


@given(small)
def test_factorial_recurrence(n):
    assert factorial(n + 1) == (n + 1) * factorial(n)


@pytest.mark.parametrize(
    "func", [count_up, sum_to, power_of_two, fibonacci, factorial]
)
def test_negative_rejected(func):
    with pytest.raises(ValueError):
        func(-1)


@pytest.mark.parametrize("target", SOURCE_ARRAY)
def test_linear_search_found(target):
    assert SOURCE_ARRAY[linear_search(SOURCE_ARRAY, target)] == target


def test_linear_search_missing():
    assert linear_search(SOURCE_ARRAY, 15) == -1


def test_is_sorted_source_array():
    assert is_sorted(SOURCE_ARRAY)
    assert not is_sorted(SOURCE_ARRAY[::-1])


@given(st.lists(st.integers()))
def test_is_sorted_after_sorting(values):
    assert is_sorted(sorted(values))


def test_maximum_and_minimum_source_array():
    assert maximum(SOURCE_ARRAY) == 100
    assert minimum(SOURCE_ARRAY) == 10


@given(st.lists(st.integers(), min_size=1))
def test_maximum_minimum_bounds(values):
    assert all(minimum(values) <= v <= maximum(values) for v in values)
    assert maximum(values) in values and minimum(values) in values


@pytest.mark.parametrize("func", [maximum, minimum])
def test_extremes_of_empty(func):
    with pytest.raises(ValueError):
        func([])


@given(st.lists(st.integers()))
def test_every_other_partitions(values):
    evens = every_other(values, 0)
    odds = every_other(values, 1)
    assert sorted(evens + odds) == sorted(values)
    assert len(evens) - len(odds) in (0, 1)


@given(st.integers(min_value=1, max_value=10**12))
def test_digits_reversed_round_trip(n):
    digits = digits_reversed(n)
    assert int("".join(str(d) for d in reversed(digits))) == n
    assert all(0 <= d <= 9 for d in digits)


def test_digits_reversed_non_positive():
    assert digits_reversed(0) == []
    assert digits_reversed(-5) == []


def test_digit_sum_source_example():
    assert digit_sum(71288) == sum(digits_reversed(71288))


@given(st.integers(min_value=0, max_value=10**9))
def test_digit_sum_times_ten(n):
    assert digit_sum(n * 10) == digit_sum(n)


@pytest.mark.parametrize("index", range(len(SOURCE_ARRAY)))
def test_binary_search_found(index):
    assert binary_search(SOURCE_ARRAY, SOURCE_ARRAY[index]) == index


@pytest.mark.parametrize("target", [5, 55, 110])
def test_binary_search_missing(target):
    assert binary_search(SOURCE_ARRAY, target) == -1


@given(st.lists(st.integers(), unique=True).map(sorted), st.integers())
def test_binary_search_agrees_with_linear(values, target):
    assert binary_search(values, target) == linear_search(values, target)